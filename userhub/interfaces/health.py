"""
Health check router.

Liveness/readiness check. Reports the service version and whether the
user database answers a trivial query.
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from userhub.core.config import settings
from userhub.interfaces.users.dependencies import get_db_engine
from userhub.interfaces.users.schemas import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Service version and user database reachability.",
)
def health_check(engine: Engine = Depends(get_db_engine)) -> HealthResponse:
    """Return "ok" when the database answers, "degraded" otherwise."""
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.warning("User database unreachable: %s", type(exc).__name__)
        return HealthResponse(
            status="degraded", version=settings.version, database="unreachable"
        )
    return HealthResponse(status="ok", version=settings.version, database="ok")
