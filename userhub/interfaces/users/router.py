"""
FastAPI router for the users bounded context.

All routes delegate to the UserService. No business logic here.
Input validation is handled by Pydantic schemas.
Error mapping is handled by centralized error handlers.
"""

from fastapi import APIRouter, Depends, Query, Request, Response

from userhub.domain.users.errors import InvalidArgumentError
from userhub.domain.users.user_service import UserService
from userhub.interfaces.users.dependencies import get_user_service
from userhub.interfaces.users.mapper import from_domain, to_domain
from userhub.interfaces.users.schemas import (
    ErrorResponse,
    UserRequest,
    UserResponse,
)

router = APIRouter(prefix="/users", tags=["users"])

HTTP_201 = 201
HTTP_204 = 204


@router.get(
    "",
    response_model=list[UserResponse],
    summary="Retrieve all users",
    description="All users given as a JSON array.",
)
def get_all_users(
    service: UserService = Depends(get_user_service),
) -> list[UserResponse]:
    """List every user."""
    return [from_domain(user) for user in service.get_all_users()]


@router.get(
    "/filter",
    response_model=UserResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Retrieve a user by username",
    description="Look up a single user by login name.",
)
def filter_by_username(
    username: str = Query(..., min_length=1, description="Login name to look up"),
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Get the user with the given username."""
    return from_domain(service.get_by_username(username))


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Retrieve a user by id",
)
def get_user_by_id(
    user_id: int,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Get the user with the given id."""
    return from_domain(service.get_user_by_id(user_id))


@router.post(
    "",
    response_model=UserResponse,
    status_code=HTTP_201,
    responses={409: {"model": ErrorResponse}},
    summary="Create a user",
    description="Create a new user. Any id or timestamps in the body are ignored.",
)
def create_user(
    body: UserRequest,
    request: Request,
    response: Response,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Create a user and point the Location header at it."""
    created = service.upsert(to_domain(body))
    response.headers["Location"] = str(
        request.url_for("get_user_by_id", user_id=created.id)
    )
    return from_domain(created)


@router.put(
    "/{user_id}",
    response_model=UserResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
    summary="Update a user",
    description="Replace the fields of an existing user. Body id must match the path id.",
)
def update_user(
    user_id: int,
    body: UserRequest,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Update the user with the given id."""
    if body.id != user_id:
        raise InvalidArgumentError(
            f"id in path ({user_id}) and body ({body.id}) do not match"
        )
    return from_domain(service.upsert(to_domain(body, user_id=user_id)))


@router.delete(
    "/{user_id}",
    status_code=HTTP_204,
    responses={404: {"model": ErrorResponse}},
    summary="Delete a user",
)
def delete_user(
    user_id: int,
    service: UserService = Depends(get_user_service),
) -> Response:
    """Permanently remove the user with the given id."""
    service.delete(user_id)
    return Response(status_code=HTTP_204)
