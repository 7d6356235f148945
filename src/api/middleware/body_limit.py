"""Request body size limit middleware."""

from typing import Awaitable, Callable

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from api.exception_handlers import app_error_response
from core.exceptions import PayloadTooLargeError

logger = structlog.get_logger()


class BodySizeLimitMiddleware(BaseHTTPMiddleware):
    """Reject requests whose declared Content-Length exceeds ``max_bytes``."""

    def __init__(self, app: ASGIApp, max_bytes: int) -> None:
        super().__init__(app)
        self.max_bytes = max_bytes

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        content_length = request.headers.get("content-length")
        if content_length and content_length.isdigit() and int(content_length) > self.max_bytes:
            logger.warning(
                "request_body_too_large",
                content_length=int(content_length),
                max_bytes=self.max_bytes,
            )
            return app_error_response(PayloadTooLargeError(self.max_bytes))
        return await call_next(request)
