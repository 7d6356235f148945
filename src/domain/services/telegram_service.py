"""Telegram Bot API lookups."""

from typing import Any

import structlog

from core.exceptions import ChatLookupFailedError, TelegramNotConfiguredError, UpstreamError
from domain.repositories.chat_directory import IChatDirectory

logger = structlog.get_logger()


class TelegramService:
    """Service layer for Telegram chat information."""

    def __init__(self, directory: IChatDirectory) -> None:
        self._directory = directory

    async def get_chat(self, chat_id: str) -> dict[str, Any]:
        """Get chat details for a user or group id."""
        if not self._directory.configured:
            raise TelegramNotConfiguredError()
        try:
            return await self._directory.get_chat(chat_id)
        except UpstreamError as e:
            logger.error(
                "telegram_get_chat_failed",
                chat_id=chat_id,
                detail=e.detail,
                upstream_status=e.status_code,
            )
            raise ChatLookupFailedError(chat_id) from None
