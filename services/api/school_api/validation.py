"""Request validation for the school endpoints.

Checks run in a fixed order and stop at the first failure, so a client always
gets the message for the earliest problem in its request. Every failure raises
`ValidationError` before the store is touched.
"""

import math
from typing import Any

from .errors import ValidationError

MISSING_FIELDS = "All fields (name, address, latitude, longitude) are required"
INVALID_NAME = "Name must be a non-empty string"
INVALID_ADDRESS = "Address must be a non-empty string"
INVALID_LATITUDE = "Latitude must be a number between -90 and 90"
INVALID_LONGITUDE = "Longitude must be a number between -180 and 180"
MISSING_QUERY_POINT = "Latitude and longitude query parameters are required"

LATITUDE_RANGE = (-90.0, 90.0)
LONGITUDE_RANGE = (-180.0, 180.0)


def _is_number(value: Any) -> bool:
    # bool is an int subclass but not a JSON number
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # JSON integer past float range
        return False


def _is_blank(value: Any) -> bool:
    # null, "", 0 and false count as absent; lists and objects do not
    if value is None or isinstance(value, (str, int, float)):
        return not value
    return False


def _in_range(value: float, bounds: tuple[float, float]) -> bool:
    low, high = bounds
    return low <= value <= high


def _is_non_empty_text(value: Any) -> bool:
    return isinstance(value, str) and value.strip() != ""


def validate_new_school(payload: Any) -> dict:
    """Validate a registration body.

    Args:
        payload: Decoded JSON body. Anything other than an object is treated as
            an object with no fields.

    Returns:
        dict: `name`, `address`, `latitude`, `longitude` as submitted, with the
        coordinates as floats.

    Raises:
        ValidationError: On the first failed check.
    """
    if not isinstance(payload, dict):
        payload = {}

    name = payload.get("name")
    address = payload.get("address")
    if _is_blank(name) or _is_blank(address) or "latitude" not in payload or "longitude" not in payload:
        raise ValidationError(MISSING_FIELDS)

    latitude = payload["latitude"]
    longitude = payload["longitude"]

    if not _is_non_empty_text(name):
        raise ValidationError(INVALID_NAME)
    if not _is_non_empty_text(address):
        raise ValidationError(INVALID_ADDRESS)
    if not _is_number(latitude) or not _in_range(latitude, LATITUDE_RANGE):
        raise ValidationError(INVALID_LATITUDE)
    if not _is_number(longitude) or not _in_range(longitude, LONGITUDE_RANGE):
        raise ValidationError(INVALID_LONGITUDE)

    return {
        "name": name,
        "address": address,
        "latitude": float(latitude),
        "longitude": float(longitude),
    }


def _parse_coordinate(raw: str) -> float | None:
    try:
        value = float(raw)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def parse_query_point(latitude: str | None, longitude: str | None) -> tuple[float, float]:
    """Validate and parse the `latitude`/`longitude` query parameters.

    Non-numeric text and out-of-range numbers share one message per field.

    Returns:
        (latitude, longitude) as floats.

    Raises:
        ValidationError: On the first failed check.
    """
    if not latitude or not longitude:
        raise ValidationError(MISSING_QUERY_POINT)

    lat = _parse_coordinate(latitude)
    if lat is None or not _in_range(lat, LATITUDE_RANGE):
        raise ValidationError(INVALID_LATITUDE)

    lng = _parse_coordinate(longitude)
    if lng is None or not _in_range(lng, LONGITUDE_RANGE):
        raise ValidationError(INVALID_LONGITUDE)

    return lat, lng
