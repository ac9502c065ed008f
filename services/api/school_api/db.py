"""Database session helpers for the API service.

The engine and session factory are created by `create_app(...)` and kept on
`app.state`; this module provides the FastAPI dependency (`get_db`) that route
handlers use to borrow a session for one request.
"""

from fastapi import Request


def get_db(request: Request):
    """FastAPI dependency that yields a request-scoped SQLAlchemy session.

    Route handlers declare `db: Session = Depends(get_db)` to receive a session
    bound to the engine configured at startup.

    Yields:
        sqlalchemy.orm.Session: An open SQLAlchemy session for the duration of the request.

    Notes:
        - A new session is created per request.
        - The session is always closed in `finally`, on success and failure alike.

        Transaction boundaries are controlled by the handler. If a handler writes
        and then fails, it calls `db.rollback()` before raising.
    """
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
