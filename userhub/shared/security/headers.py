"""
Secure HTTP headers middleware.

Every response gets the baseline headers in SECURE_HEADERS. Responses
under the user routes carry personal data (names, e-mail addresses),
so they are additionally marked as not cacheable.
"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

SECURE_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "no-referrer",
    "Content-Security-Policy": "default-src 'none'; frame-ancestors 'none'",
}

PERSONAL_DATA_HEADERS = {
    "Cache-Control": "no-store",
    "Pragma": "no-cache",
}


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Adds secure headers, plus no-store on routes serving user records.

    Args:
        app: The wrapped ASGI application.
        personal_data_prefix: Path prefix of the user record routes.
    """

    def __init__(self, app: ASGIApp, personal_data_prefix: str) -> None:
        super().__init__(app)
        self._personal_data_prefix = personal_data_prefix

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        response = await call_next(request)
        response.headers.update(SECURE_HEADERS)
        if request.url.path.startswith(self._personal_data_prefix):
            response.headers.update(PERSONAL_DATA_HEADERS)
        return response
