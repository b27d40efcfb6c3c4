"""
Pydantic schemas for users API request/response validation.

These schemas enforce input validation and define the API contract.
Field names are camelCase on the wire.
No business logic belongs here.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel

USERNAME_PATTERN = r"^[A-Za-z0-9_.-]+$"
NAME_MIN_LEN = 1
NAME_MAX_LEN = 255


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UserRequest(_CamelModel):
    """Request schema for creating or updating a user.

    Attributes:
        id: Required on update (must match the path id), ignored on create.
        username: Login name (letters, digits, "_", "." and "-").
        email_address: A valid e-mail address.
        first_name: Given name (1-255 chars).
        last_name: Family name (1-255 chars).

    Server-assigned timestamps sent by the client are ignored.
    """

    id: int | None = Field(default=None, description="User ID")
    username: str = Field(
        ...,
        min_length=NAME_MIN_LEN,
        max_length=NAME_MAX_LEN,
        pattern=USERNAME_PATTERN,
        description="Unique login name",
    )
    email_address: EmailStr = Field(..., description="Unique e-mail address")
    first_name: str = Field(
        ..., min_length=NAME_MIN_LEN, max_length=NAME_MAX_LEN, description="First name"
    )
    last_name: str = Field(
        ..., min_length=NAME_MIN_LEN, max_length=NAME_MAX_LEN, description="Last name"
    )


class UserResponse(_CamelModel):
    """A persisted user as returned by the API."""

    id: int
    created_at: datetime
    updated_at: datetime
    username: str
    email_address: str
    first_name: str
    last_name: str


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str
    database: str


class ErrorResponse(BaseModel):
    """Standard error response returned by all error handlers."""

    error: str
    detail: str | None = None
