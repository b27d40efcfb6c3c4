"""
Centralized error handlers for FastAPI.

Maps domain-specific errors to HTTP responses.
No stack traces or internal details are exposed to clients.
All error responses use the ErrorResponse schema.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from userhub.domain.users.errors import (
    DuplicationError,
    InvalidArgumentError,
    UserDomainError,
    UserNotFoundError,
)

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_404 = 404
HTTP_409 = 409
HTTP_500 = 500


def _error_response(status_code: int, error: str, detail: str | None = None) -> JSONResponse:
    """Build a consistent JSON error response."""
    body: dict[str, str | None] = {"error": error}
    if detail:
        body["detail"] = detail
    return JSONResponse(status_code=status_code, content=body)


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(UserNotFoundError)
    async def handle_user_not_found(
        _request: Request, exc: UserNotFoundError
    ) -> JSONResponse:
        """Handle lookups of users that do not exist."""
        logger.warning("User not found: %s=%s", exc.field, exc.value)
        return _error_response(HTTP_404, "User not found", exc.message)

    @app.exception_handler(DuplicationError)
    async def handle_duplication(
        _request: Request, exc: DuplicationError
    ) -> JSONResponse:
        """Handle username or e-mail uniqueness violations."""
        logger.warning("Duplicate user %s=%s", exc.field, exc.value)
        return _error_response(HTTP_409, "User already exists", exc.message)

    @app.exception_handler(InvalidArgumentError)
    async def handle_invalid_argument(
        _request: Request, exc: InvalidArgumentError
    ) -> JSONResponse:
        """Handle contradictory request arguments."""
        logger.warning("Invalid argument: %s", exc.reason)
        return _error_response(HTTP_400, "Invalid argument", exc.reason)

    @app.exception_handler(UserDomainError)
    async def handle_user_domain(
        _request: Request, exc: UserDomainError
    ) -> JSONResponse:
        """Catch-all for unhandled user domain errors."""
        logger.error("Unhandled user domain error: %s", exc.message)
        return _error_response(HTTP_500, "Internal server error")

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, "Internal server error")
