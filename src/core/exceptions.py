"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the API."""

    # Not found errors (404)
    PROFILE_NOT_FOUND = "PROFILE_NOT_FOUND"

    # Validation errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    MISSING_TELEGRAM_ID = "MISSING_TELEGRAM_ID"
    UNKNOWN_USER = "UNKNOWN_USER"
    NO_FILE = "NO_FILE"
    INVALID_FILE = "INVALID_FILE"

    # Request size (413)
    PAYLOAD_TOO_LARGE = "PAYLOAD_TOO_LARGE"

    # Upstream errors (500 / 503)
    UPLOAD_FAILED = "UPLOAD_FAILED"
    FETCH_FAILED = "FETCH_FAILED"
    CHAT_LOOKUP_FAILED = "CHAT_LOOKUP_FAILED"
    TELEGRAM_NOT_CONFIGURED = "TELEGRAM_NOT_CONFIGURED"

    # Server errors (500)
    INTERNAL_ERROR = "INTERNAL_ERROR"
    NOTIFICATION_FAILED = "NOTIFICATION_FAILED"


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class MissingTelegramIdError(AppException):
    """Auth callback arrived without a Telegram user id."""

    def __init__(self) -> None:
        super().__init__(
            error_code=ErrorCode.MISSING_TELEGRAM_ID,
            message="No Telegram user id",
            status_code=400,
        )


class ProfileNotFoundError(AppException):
    """Profile not found."""

    def __init__(self, profile_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.PROFILE_NOT_FOUND,
            message="Profile not found",
            status_code=404,
            details={"profile_id": profile_id},
        )


class UnknownUserError(AppException):
    """Progress reported for a user that never authenticated."""

    def __init__(self, user_id: str | None = None) -> None:
        super().__init__(
            error_code=ErrorCode.UNKNOWN_USER,
            message="Unknown user",
            status_code=400,
            details={"user_id": user_id} if user_id else None,
        )


class NoFileError(AppException):
    """Upload request carried no file content."""

    def __init__(self) -> None:
        super().__init__(
            error_code=ErrorCode.NO_FILE,
            message="No file",
            status_code=400,
        )


class InvalidFileError(AppException):
    """Upload content is not valid base64."""

    def __init__(self) -> None:
        super().__init__(
            error_code=ErrorCode.INVALID_FILE,
            message="File content is not valid base64",
            status_code=400,
        )


class PayloadTooLargeError(AppException):
    """Request body exceeds the configured limit."""

    def __init__(self, limit: int) -> None:
        super().__init__(
            error_code=ErrorCode.PAYLOAD_TOO_LARGE,
            message="Request body too large",
            status_code=413,
            details={"max_bytes": limit},
        )


class UploadFailedError(AppException):
    """Pinning service rejected or failed the upload."""

    def __init__(self) -> None:
        super().__init__(
            error_code=ErrorCode.UPLOAD_FAILED,
            message="Pinata upload failed",
            status_code=500,
        )


class FetchFailedError(AppException):
    """Gateway could not return pinned content."""

    def __init__(self, content_hash: str) -> None:
        super().__init__(
            error_code=ErrorCode.FETCH_FAILED,
            message="Failed to fetch from Pinata",
            status_code=500,
            details={"hash": content_hash},
        )


class TelegramNotConfiguredError(AppException):
    """No bot token is configured for Telegram Bot API calls."""

    def __init__(self) -> None:
        super().__init__(
            error_code=ErrorCode.TELEGRAM_NOT_CONFIGURED,
            message="Telegram bot is not configured",
            status_code=503,
        )


class ChatLookupFailedError(AppException):
    """Telegram getChat call failed."""

    def __init__(self, chat_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.CHAT_LOOKUP_FAILED,
            message="Failed to fetch chat from Telegram",
            status_code=500,
            details={"chat_id": chat_id},
        )


class NotificationFailedError(AppException):
    """Unexpected failure while ingesting a notification."""

    def __init__(self) -> None:
        super().__init__(
            error_code=ErrorCode.NOTIFICATION_FAILED,
            message="Internal server error",
            status_code=500,
        )


class UpstreamError(Exception):
    """A remote service call failed.

    Raised by outbound clients and translated by the services into a generic
    AppException; ``detail`` is for server-side logs only.
    """

    def __init__(self, service: str, detail: Any, status_code: int | None = None) -> None:
        self.service = service
        self.detail = detail
        self.status_code = status_code
        super().__init__(f"{service} request failed: {detail}")
