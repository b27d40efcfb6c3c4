"""
Domain entities for the users bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any, Optional

NAME_MAX_LENGTH = 255


@dataclass(frozen=True)
class User:
    """A user record.

    ``id``, ``created_at`` and ``updated_at`` are None until the user is
    persisted; only the storage layer assigns them.

    Attributes:
        username: Login name, unique across all users.
        email_address: E-mail address, unique across all users.
        first_name: Given name (1-255 characters).
        last_name: Family name (1-255 characters).
        id: Storage-assigned identifier.
        created_at: UTC timestamp of the first write.
        updated_at: UTC timestamp of the latest write.
    """

    username: str
    email_address: str
    first_name: str
    last_name: str
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        for name in ("username", "email_address", "first_name", "last_name"):
            if not getattr(self, name):
                raise ValueError(f"{name} must not be empty")
        for name in ("first_name", "last_name"):
            if len(getattr(self, name)) > NAME_MAX_LENGTH:
                raise ValueError(
                    f"{name} must be at most {NAME_MAX_LENGTH} characters"
                )

    @property
    def is_persisted(self) -> bool:
        """True once storage has assigned an id."""
        return self.id is not None

    def with_changes(self, **changes: Any) -> "User":
        """Return a copy of this user with the given fields replaced."""
        return replace(self, **changes)
