"""Shared fixtures for the API service tests.

Every test gets its own app wired to a fresh in-memory SQLite database, so
tests never share rows.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import text

from school_api.main import create_app
from school_api.settings import Settings


@pytest.fixture
def settings() -> Settings:
    return Settings(DATABASE_URL="sqlite://", DB_CREATE_TABLES=True)


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as client:
        yield client


@pytest.fixture
def insert_school(app, client):
    """Insert a row directly, bypassing the API. Returns the new row count."""

    def _insert(name, address, latitude, longitude):
        with app.state.engine.begin() as conn:
            conn.execute(
                text(
                    "INSERT INTO schools (name, address, latitude, longitude) "
                    "VALUES (:name, :address, :latitude, :longitude)"
                ),
                {"name": name, "address": address, "latitude": latitude, "longitude": longitude},
            )

    return _insert


@pytest.fixture
def count_schools(app, client):
    def _count() -> int:
        with app.state.engine.connect() as conn:
            return conn.execute(text("SELECT COUNT(*) FROM schools")).scalar_one()

    return _count


@pytest.fixture
def unreachable_client(tmp_path):
    """Client whose store cannot be opened (SQLite file in a missing directory)."""
    settings = Settings(
        DATABASE_URL=f"sqlite:///{tmp_path / 'missing' / 'schools.db'}",
        DB_CREATE_TABLES=False,
    )
    with TestClient(create_app(settings)) as client:
        yield client
