"""
Database engine factory.

Builds the process-wide SQLAlchemy engine from application settings.
The engine owns the connection pool and is shared by every repository.
"""

import logging
from functools import lru_cache

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from userhub.core.config import settings

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_engine() -> Engine:
    """Return the shared SQLAlchemy engine, creating it on first use."""
    url = settings.get_database_url()
    engine = create_engine(url, pool_pre_ping=True, echo=settings.database_echo)
    logger.info("Database engine created for dialect=%s", engine.dialect.name)
    return engine
