"""Table definitions.

Route handlers use raw SQL (`sqlalchemy.text`) and return plain dictionaries.
The `schools` table is still declared here with SQLAlchemy Core so the schema
can be created on startup and in tests.
"""

from sqlalchemy import Column, Float, Integer, MetaData, String, Table
from sqlalchemy.engine import Engine

metadata = MetaData()

schools = Table(
    "schools",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(255), nullable=False),
    Column("address", String(500), nullable=False),
    Column("latitude", Float, nullable=False),
    Column("longitude", Float, nullable=False),
)


def init_db(engine: Engine) -> None:
    """Create missing tables. Existing tables are left untouched."""
    metadata.create_all(engine, checkfirst=True)
