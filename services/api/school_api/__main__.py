"""Service entrypoint.

Builds settings, configures logging, and serves the app with uvicorn.
"""

import uvicorn

from common.logging import configure_logging

from .main import create_app
from .settings import get_settings


def main() -> int:
    """Run the API server until interrupted.

    Returns:
        The process exit code (0 = success).
    """
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)
    uvicorn.run(
        create_app(settings),
        host=settings.HOST,
        port=settings.PORT,
        log_config=None,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
