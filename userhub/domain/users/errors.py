"""
Domain-specific errors for the users bounded context.

All errors raised from the domain layer must be defined here.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""

from typing import Any


class UserDomainError(Exception):
    """Base error for all user domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class UserNotFoundError(UserDomainError):
    """Raised when no user matches the given lookup key.

    Attributes:
        field: Name of the lookup key ("id" or "username").
        value: The value that matched nothing.
    """

    def __init__(self, field: str, value: Any) -> None:
        super().__init__(f"User with {field} '{value}' not found")
        self.field = field
        self.value = value


class DuplicationError(UserDomainError):
    """Raised when a write would violate a username or email uniqueness rule.

    Attributes:
        field: The unique field that collided ("username" or "email_address").
        value: The colliding value.
    """

    def __init__(self, field: str, value: Any) -> None:
        super().__init__(f"User with {field} '{value}' already exists")
        self.field = field
        self.value = value


class InvalidArgumentError(UserDomainError):
    """Raised when caller-supplied arguments contradict each other."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Invalid argument: {reason}")
        self.reason = reason
