"""FastAPI application factory.

This service exposes HTTP endpoints for:
- registering schools with coordinates
- listing schools ranked by distance from a point
- health checks

Operational notes:
- Settings are built once and passed to `create_app(...)`; the engine and
  session factory live on `app.state`.
- Run with `python -m school_api` or
  `uvicorn school_api.main:create_app --factory`.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from common.db import create_session_factory

from . import __version__
from .errors import ApiError, api_error_handler, request_validation_error_handler
from .models import init_db
from .routes import router
from .settings import Settings, get_settings

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the API application.

    Args:
        settings: Service settings. Defaults to `get_settings()`.

    Returns:
        FastAPI: The configured application.
    """
    settings = settings or get_settings()
    engine, SessionLocal = create_session_factory(settings.database_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if settings.DB_CREATE_TABLES:
            init_db(engine)
        logger.info("Server running on port %s", settings.PORT)
        yield
        engine.dispose()

    app = FastAPI(title="School Directory API", version=__version__, lifespan=lifespan)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = SessionLocal

    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)

    app.include_router(router)

    @app.get("/health")
    def health():
        """Health check endpoint.

        Returns:
            dict: `{"status": "ok", "service": "api"}`.
        """
        return {"status": "ok", "service": "api"}

    return app
