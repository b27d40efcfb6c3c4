"""
Mapping between API schemas and domain entities.

Keeps the domain free of Pydantic and the router free of field plumbing.
"""

from userhub.domain.users.entities import User
from userhub.interfaces.users.schemas import UserRequest, UserResponse


def to_domain(request: UserRequest, user_id: int | None = None) -> User:
    """Build a domain User from a request body.

    Args:
        request: The validated request body.
        user_id: Id to assign; None for a new user.
    """
    return User(
        id=user_id,
        username=request.username,
        email_address=str(request.email_address),
        first_name=request.first_name,
        last_name=request.last_name,
    )


def from_domain(user: User) -> UserResponse:
    """Build the API representation of a persisted user."""
    return UserResponse(
        id=user.id,
        created_at=user.created_at,
        updated_at=user.updated_at,
        username=user.username,
        email_address=user.email_address,
        first_name=user.first_name,
        last_name=user.last_name,
    )
