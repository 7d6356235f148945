"""Error envelopes for the bridge API.

Every failure leaves the service as ``{"error_code", "message", "details"}``.
Upstream Pinata/Telegram detail never reaches this layer: services replace
it with a fixed message before raising.
"""

from typing import Any

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.config import settings
from core.exceptions import AppException, ErrorCode

logger = structlog.get_logger()


def error_response(
    status_code: int,
    error_code: str,
    message: Any,
    details: Any = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error_code": error_code, "message": message, "details": details},
        headers=headers,
    )


def app_error_response(exc: AppException) -> JSONResponse:
    return error_response(exc.status_code, exc.error_code.value, exc.message, exc.details)


async def _on_app_error(request: Request, exc: AppException) -> JSONResponse:
    # 4xx are client mistakes; only our own failures are errors
    emit = logger.error if exc.status_code >= 500 else logger.warning
    emit(
        "request_rejected",
        path=request.url.path,
        error_code=exc.error_code.value,
        status_code=exc.status_code,
    )
    return app_error_response(exc)


async def _on_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(
        exc.status_code, "HTTP_ERROR", exc.detail, headers=getattr(exc, "headers", None)
    )


def _field_errors(exc: RequestValidationError) -> list[dict[str, str]]:
    return [
        {
            "field": ".".join(str(part) for part in err["loc"]),
            "message": err["msg"],
            "type": err["type"],
        }
        for err in exc.errors()
    ]


async def _on_invalid_body(request: Request, exc: RequestValidationError) -> JSONResponse:
    fields = _field_errors(exc)
    logger.info("request_invalid", path=request.url.path, fields=[f["field"] for f in fields])
    return error_response(
        422, ErrorCode.VALIDATION_ERROR.value, "Request validation failed", fields
    )


async def _on_unexpected(request: Request, exc: Exception) -> JSONResponse:
    request_id = getattr(request.state, "request_id", "unknown")
    logger.error(
        "unhandled_exception",
        error_type=type(exc).__name__,
        request_id=request_id,
        exc_info=exc,
    )
    message = "Internal server error" if settings.is_production else str(exc)
    return error_response(
        500, ErrorCode.INTERNAL_ERROR.value, message, {"request_id": request_id}
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register the error envelopes on ``app``."""
    app.add_exception_handler(AppException, _on_app_error)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, _on_http_error)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, _on_invalid_body)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, _on_unexpected)
