"""Chat directory protocol (Telegram Bot API getChat)."""

from typing import Any, Protocol


class IChatDirectory(Protocol):
    """Looks up chat/user information on the messaging platform."""

    @property
    def configured(self) -> bool:
        """Whether credentials are available for lookups."""
        ...

    async def get_chat(self, chat_id: str) -> dict[str, Any]:
        """Return the chat object for ``chat_id``."""
        ...
