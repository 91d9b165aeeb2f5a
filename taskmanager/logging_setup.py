# taskmanager/logging_setup.py
"""Root logger configuration for the API process."""

import logging

from taskmanager.config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Install a single stream handler on the root logger.

    Call once at startup, before the first request is served. Uvicorn's own
    loggers keep their handlers; SQLAlchemy output stays at WARNING unless
    ``SQL_ECHO`` is enabled.
    """
    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
