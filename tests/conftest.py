"""
Shared fixtures for the UserHub test suite.

Every test gets a fresh in-memory SQLite database. The API client talks
to the same database through a dependency override, so no external
infrastructure is needed.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("RATE_LIMIT_DEFAULT", "10000/minute")

from datetime import datetime, timedelta  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.engine import Engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from userhub.domain.users.user_service import UserService  # noqa: E402
from userhub.infrastructure.users.sql_user_repository import SqlUserRepository  # noqa: E402
from userhub.infrastructure.users.tables import create_schema  # noqa: E402
from userhub.interfaces.users.dependencies import (  # noqa: E402
    get_db_engine,
    get_user_repository,
)
from userhub.main import app  # noqa: E402


class TickingClock:
    """Deterministic clock that advances one second per reading."""

    def __init__(self, start: datetime = datetime(2024, 1, 1, 12, 0, 0)) -> None:
        self._now = start

    def __call__(self) -> datetime:
        current = self._now
        self._now += timedelta(seconds=1)
        return current


@pytest.fixture
def clock() -> TickingClock:
    return TickingClock()


@pytest.fixture
def engine() -> Engine:
    """In-memory SQLite engine shared across threads, with the schema created."""
    engine = create_engine(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    create_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def user_repo(engine: Engine, clock: TickingClock) -> SqlUserRepository:
    return SqlUserRepository(engine=engine, clock=clock)


@pytest.fixture
def user_service(user_repo: SqlUserRepository) -> UserService:
    return UserService(user_repo=user_repo)


@pytest.fixture
def client(engine: Engine, user_repo: SqlUserRepository) -> TestClient:
    """API client wired to the per-test database."""
    app.dependency_overrides[get_db_engine] = lambda: engine
    app.dependency_overrides[get_user_repository] = lambda: user_repo
    yield TestClient(app)
    app.dependency_overrides.clear()
