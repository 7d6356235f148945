"""Telegram Bot API client."""

from typing import Any

import httpx

from core.config import settings
from core.exceptions import UpstreamError

SERVICE_NAME = "telegram"


class TelegramClient:
    """Minimal Bot API client for chat lookups."""

    def __init__(
        self,
        bot_token: str = settings.telegram_bot_token,
        api_url: str = settings.telegram_api_url,
        timeout: float = settings.telegram_timeout,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._bot_token = bot_token
        self._api_url = api_url.rstrip("/")
        self._client = httpx.AsyncClient(transport=transport, timeout=timeout)

    @property
    def configured(self) -> bool:
        return bool(self._bot_token)

    async def close(self) -> None:
        await self._client.aclose()

    async def get_chat(self, chat_id: str) -> dict[str, Any]:
        """Call ``getChat`` and return its ``result`` object."""
        try:
            response = await self._client.get(
                f"{self._api_url}/bot{self._bot_token}/getChat",
                params={"chat_id": chat_id},
            )
        except httpx.HTTPError as e:
            # The request URL embeds the token, so only the error type is kept.
            raise UpstreamError(SERVICE_NAME, type(e).__name__) from e

        try:
            payload = response.json()
        except ValueError as e:
            raise UpstreamError(SERVICE_NAME, response.text[:200], response.status_code) from e

        if not isinstance(payload, dict):
            raise UpstreamError(SERVICE_NAME, payload, response.status_code)
        if response.is_error or not payload.get("ok"):
            raise UpstreamError(
                SERVICE_NAME, payload.get("description", payload), response.status_code
            )
        return payload["result"]
