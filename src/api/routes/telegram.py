"""Telegram Bot API proxy routes."""

from typing import Any

from fastapi import APIRouter, Depends

from api.dependencies.services import get_telegram_service
from domain.services.telegram_service import TelegramService

router = APIRouter(prefix="/telegram", tags=["telegram"])


@router.get(
    "/chat/{chat_id}",
    summary="Look up a Telegram chat",
    responses={
        200: {"description": "Chat object from getChat"},
        500: {"description": "Telegram lookup failed"},
        503: {"description": "No bot token configured"},
    },
)
async def get_chat(
    chat_id: str,
    service: TelegramService = Depends(get_telegram_service),
) -> dict[str, Any]:
    return await service.get_chat(chat_id)
