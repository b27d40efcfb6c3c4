"""
Dependency injection for the users bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into the domain service via constructor injection.
These are the composition root for the users context.
"""

from fastapi import Depends
from sqlalchemy.engine import Engine

from userhub.domain.users.ports import UserRepository
from userhub.domain.users.user_service import UserService
from userhub.infrastructure.database import get_engine
from userhub.infrastructure.users.sql_user_repository import SqlUserRepository


def get_db_engine() -> Engine:
    """Return the shared engine; overridden in tests."""
    return get_engine()


def get_user_repository(
    engine: Engine = Depends(get_db_engine),
) -> UserRepository:
    """Build the SQL-backed user repository on the shared engine."""
    return SqlUserRepository(engine=engine)


def get_user_service(
    user_repo: UserRepository = Depends(get_user_repository),
) -> UserService:
    """Build UserService with its storage dependency."""
    return UserService(user_repo=user_repo)
