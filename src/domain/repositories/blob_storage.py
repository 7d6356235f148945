"""Blob transport protocol for content-addressed storage."""

from typing import Any, Protocol


class IBlobStorage(Protocol):
    """Pins raw bytes to a remote store and reads them back by hash.

    Implementations raise ``core.exceptions.UpstreamError`` for any
    transport or remote failure.
    """

    async def pin(self, content: bytes, filename: str, content_type: str) -> str:
        """Upload content and return the content hash assigned remotely."""
        ...

    async def fetch(self, content_hash: str) -> Any:
        """Return the JSON document stored under ``content_hash``."""
        ...
