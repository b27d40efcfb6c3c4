"""
Adapter: SQL user repository.

Implements UserRepository port on top of SQLAlchemy Core.
Works against PostgreSQL in production and SQLite for local use and tests.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Optional

from sqlalchemy import delete, insert, select, text, update
from sqlalchemy.engine import Engine, Row
from sqlalchemy.exc import IntegrityError

from userhub.domain.users.entities import User
from userhub.domain.users.errors import DuplicationError, UserNotFoundError
from userhub.domain.users.ports import UserRepository
from userhub.infrastructure.users.tables import (
    EMAIL_ADDRESS_COLUMN,
    EMAIL_ADDRESS_CONSTRAINT,
    ID_SEQUENCE,
    LOGIN_NAME_COLUMN,
    LOGIN_NAME_CONSTRAINT,
    USERS_TABLE,
    users,
)

logger = logging.getLogger(__name__)

_TICK = timedelta(microseconds=1)


def utc_now() -> datetime:
    """Return the current UTC time as a naive datetime."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def _row_to_user(row: Row) -> User:
    data = row._mapping
    return User(
        id=data["id"],
        created_at=data["created_at"],
        updated_at=data["updated_at"],
        username=data[LOGIN_NAME_COLUMN],
        email_address=data[EMAIL_ADDRESS_COLUMN],
        first_name=data["first_name"],
        last_name=data["last_name"],
    )


def _conflicting_field(exc: IntegrityError) -> Optional[str]:
    """Name the user field behind a unique-constraint violation, if any.

    PostgreSQL reports the constraint name, SQLite reports table.column.
    The e-mail address is matched before the username, so a message that
    names both keys is reported as an e-mail conflict.
    """
    message = str(exc.orig).lower()
    for column, constraint, field in (
        (EMAIL_ADDRESS_COLUMN, EMAIL_ADDRESS_CONSTRAINT, "email_address"),
        (LOGIN_NAME_COLUMN, LOGIN_NAME_CONSTRAINT, "username"),
    ):
        if constraint in message or f"{USERS_TABLE}.{column}" in message:
            return field
    return None


class SqlUserRepository(UserRepository):
    """Relational implementation of the UserRepository port.

    Ids come from the database sequence. Timestamps are stamped here,
    inside the same transaction as the write, from an injectable clock.
    """

    def __init__(
        self, engine: Engine, clock: Callable[[], datetime] = utc_now
    ) -> None:
        self._engine = engine
        self._clock = clock

    def get_all(self) -> list[User]:
        """Return every user ordered by id."""
        with self._engine.connect() as conn:
            rows = conn.execute(select(users).order_by(users.c.id)).fetchall()
        return [_row_to_user(row) for row in rows]

    def get_by_id(self, user_id: int) -> User:
        with self._engine.connect() as conn:
            row = conn.execute(select(users).where(users.c.id == user_id)).first()
        if row is None:
            raise UserNotFoundError("id", user_id)
        return _row_to_user(row)

    def get_by_username(self, username: str) -> User:
        query = select(users).where(users.c[LOGIN_NAME_COLUMN] == username)
        with self._engine.connect() as conn:
            row = conn.execute(query).first()
        if row is None:
            raise UserNotFoundError("username", username)
        return _row_to_user(row)

    def upsert(self, user: User) -> User:
        """Insert or update a user, translating unique violations.

        Args:
            user: The user to write; its timestamps are ignored.

        Returns:
            The stored user with id and timestamps as persisted.

        Raises:
            DuplicationError: If username or e-mail address is taken.
            UserNotFoundError: If the id to update no longer exists.
        """
        try:
            if user.id is None:
                return self._insert(user)
            return self._update(user)
        except IntegrityError as exc:
            field = _conflicting_field(exc)
            if field is None:
                raise
            raise DuplicationError(field, getattr(user, field)) from exc

    def _insert(self, user: User) -> User:
        now = self._clock()
        with self._engine.begin() as conn:
            result = conn.execute(
                insert(users).values(
                    created_at=now, updated_at=now, **_columns(user)
                )
            )
            user_id = result.inserted_primary_key[0]

        logger.debug("Inserted user id=%s", user_id)
        return user.with_changes(id=user_id, created_at=now, updated_at=now)

    def _update(self, user: User) -> User:
        with self._engine.begin() as conn:
            current = conn.execute(
                select(users.c.created_at, users.c.updated_at)
                .where(users.c.id == user.id)
                .with_for_update()
            ).first()
            if current is None:
                raise UserNotFoundError("id", user.id)

            now = self._clock()
            if now <= current.updated_at:
                now = current.updated_at + _TICK

            written = conn.execute(
                update(users)
                .where(users.c.id == user.id)
                .values(updated_at=now, **_columns(user))
            ).rowcount
            # SQLite has no row locks; the row can vanish after the re-read
            if written == 0:
                raise UserNotFoundError("id", user.id)

        logger.debug("Updated user id=%s", user.id)
        return user.with_changes(created_at=current.created_at, updated_at=now)

    def delete(self, user_id: int) -> None:
        with self._engine.begin() as conn:
            removed = conn.execute(
                delete(users).where(users.c.id == user_id)
            ).rowcount
        if removed == 0:
            raise UserNotFoundError("id", user_id)

    def clear(self) -> None:
        with self._engine.begin() as conn:
            removed = conn.execute(delete(users)).rowcount
        logger.debug("Removed %d users.", removed)

    def reset_identity_sequence(self) -> None:
        """Restart id generation at 1. Test harnesses only.

        Raises:
            NotImplementedError: For dialects other than SQLite and PostgreSQL.
        """
        dialect = self._engine.dialect.name
        if dialect == "sqlite":
            statement = text("DELETE FROM sqlite_sequence WHERE name = :name")
            params: dict[str, Any] = {"name": USERS_TABLE}
        elif dialect == "postgresql":
            statement = text(f"ALTER SEQUENCE {ID_SEQUENCE} RESTART WITH 1")
            params = {}
        else:
            raise NotImplementedError(
                f"Identity sequence reset not supported for dialect {dialect}"
            )

        with self._engine.begin() as conn:
            conn.execute(statement, params)
        logger.warning("Reset user identity sequence (dialect=%s)", dialect)


def _columns(user: User) -> dict[str, str]:
    """Map the caller-owned user fields to column values."""
    return {
        LOGIN_NAME_COLUMN: user.username,
        EMAIL_ADDRESS_COLUMN: user.email_address,
        "first_name": user.first_name,
        "last_name": user.last_name,
    }
