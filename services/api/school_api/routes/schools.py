"""School directory routes.

Responsibilities:
- registering a school (`POST /addSchool`)
- listing every school ranked by distance from a point (`GET /listSchools`)

Data source:
- the `schools` table (see `school_api/models.py`).
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Query
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..db import get_db
from ..errors import INTERNAL_ERROR_MESSAGE, ApiError
from ..geo import rank_by_distance
from ..schemas import ErrorResponse, MessageResponse, SchoolWithDistance
from ..validation import parse_query_point, validate_new_school

logger = logging.getLogger(__name__)

router = APIRouter(tags=["schools"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@router.post(
    "/addSchool",
    status_code=201,
    response_model=MessageResponse,
    responses=ERROR_RESPONSES,
)
def add_school(
    payload: Any = Body(default=None),
    db: Session = Depends(get_db),
):
    """Register a new school.

    The body must be a JSON object with `name`, `address`, `latitude` and
    `longitude`. Validation happens before any database access; the first
    failing check decides the 400 message.

    Args:
        payload: Decoded JSON body.
        db: SQLAlchemy session (injected).

    Returns:
        dict: `{"message": "School added successfully"}` with status 201.

    Raises:
        ApiError: 400 for invalid input; 500 if the insert fails.
    """
    school = validate_new_school(payload)

    try:
        db.execute(
            text("""
                INSERT INTO schools (name, address, latitude, longitude)
                VALUES (:name, :address, :latitude, :longitude)
            """),
            school,
        )
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Error adding school %r", school["name"])
        raise ApiError(500, INTERNAL_ERROR_MESSAGE)

    logger.info("Added school %r at (%s, %s)", school["name"], school["latitude"], school["longitude"])
    return {"message": "School added successfully"}


@router.get(
    "/listSchools",
    response_model=list[SchoolWithDistance],
    responses=ERROR_RESPONSES,
)
def list_schools(
    latitude: str | None = Query(default=None, description="Latitude of the reference point, in degrees."),
    longitude: str | None = Query(default=None, description="Longitude of the reference point, in degrees."),
    db: Session = Depends(get_db),
):
    """List every school, nearest first.

    Each row gets a `distance` field: the great-circle distance in kilometers
    from (`latitude`, `longitude`). Schools at the same distance keep `id`
    order.

    Args:
        latitude: Reference latitude as text; must parse to a number in [-90, 90].
        longitude: Reference longitude as text; must parse to a number in [-180, 180].
        db: SQLAlchemy session (injected).

    Returns:
        list[dict]: School rows with `distance`, ascending by distance.

    Raises:
        ApiError: 400 for invalid parameters; 500 if the read fails.
    """
    lat, lng = parse_query_point(latitude, longitude)

    try:
        rows = db.execute(
            text("""
                SELECT id, name, address, latitude, longitude
                FROM schools
                ORDER BY id
            """)
        ).mappings().all()
    except SQLAlchemyError:
        logger.exception("Error fetching schools")
        raise ApiError(500, INTERNAL_ERROR_MESSAGE)

    return rank_by_distance(rows, lat, lng)
