"""Shared logging utilities.

Services call `configure_logging()` once from their entrypoint so that every
process emits the same line format. Modules then log through
`logging.getLogger(__name__)` as usual.
"""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | int = "INFO") -> None:
    """Configure root logging for a service process.

    Args:
        level: Level name ("DEBUG", "INFO", ...) or numeric level.

    Notes:
        `force=True` replaces handlers installed earlier (e.g. by uvicorn's
        import-time defaults) so the format above is the one that sticks.
    """
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)
