"""Shared database helpers.

Centralizes the two things every service needs from SQLAlchemy:
- turning connection pieces (DB_HOST, DB_USER, ...) into a URL
- building an engine plus a session factory bound to it

Services own their request-scoped session dependency; this module only
constructs the objects it hands out.
"""

from sqlalchemy import create_engine
from sqlalchemy.engine import URL, Engine, make_url
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool


def build_database_url(
    driver: str,
    host: str,
    user: str,
    password: str,
    database: str,
    port: int | None = None,
) -> URL:
    """Assemble a SQLAlchemy URL from individual connection settings.

    Passwords are escaped by `URL.create`, so they may contain `@`, `/` etc.
    """
    return URL.create(
        drivername=driver,
        username=user or None,
        password=password or None,
        host=host or None,
        port=port,
        database=database or None,
    )


def create_session_factory(url: str | URL) -> tuple[Engine, sessionmaker]:
    """Create an engine and a session factory for `url`.

    In-memory SQLite gets a single shared connection (`StaticPool`) so every
    session sees the same database, which is what tests and local runs want.

    Returns:
        (engine, SessionLocal)
    """
    url = make_url(url)
    engine_kwargs = {}
    if url.get_backend_name() == "sqlite":
        engine_kwargs["connect_args"] = {"check_same_thread": False}
        if url.database in (None, "", ":memory:"):
            engine_kwargs["poolclass"] = StaticPool
    else:
        engine_kwargs["pool_pre_ping"] = True

    engine = create_engine(url, **engine_kwargs)
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    return engine, SessionLocal
