"""
Logging configuration for UserHub.

One stdout handler with a pipe-separated format. The userhub loggers
follow the configured level; the server and database libraries stay at
WARNING unless SQL echo is requested. User records are logged by id or
username only, never with names or e-mail addresses.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_LIBRARY_LOGGERS = ("uvicorn.access", "sqlalchemy.pool", "slowapi")


def configure_logging(level: str = "INFO", sql_echo: bool = False) -> None:
    """Configure logging for the service.

    Args:
        level: Level for the userhub loggers (DEBUG, INFO, WARNING, ERROR).
        sql_echo: Let SQLAlchemy statement logging through at INFO.
    """
    resolved = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=logging.WARNING,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )
    logging.getLogger("userhub").setLevel(resolved)

    for name in _LIBRARY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if sql_echo else logging.WARNING
    )
