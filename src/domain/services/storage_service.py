"""Pinning proxy: base64 uploads and hash-keyed retrieval."""

import base64
import binascii
import re
from typing import Any

import structlog

from core.exceptions import (
    FetchFailedError,
    InvalidFileError,
    NoFileError,
    UploadFailedError,
    UpstreamError,
)
from domain.repositories.blob_storage import IBlobStorage

logger = structlog.get_logger()

DEFAULT_FILENAME = "file"
DEFAULT_CONTENT_TYPE = "application/octet-stream"

_DATA_URI_HEADER = re.compile(r"^data:.+;base64,")


def decode_base64_payload(payload: str) -> bytes:
    """Decode base64 content, dropping a ``data:<type>;base64,`` prefix."""
    data = _DATA_URI_HEADER.sub("", payload, count=1)
    # Clients often drop trailing padding.
    data = "".join(data.split())
    data += "=" * (-len(data) % 4)
    try:
        return base64.b64decode(data, validate=True)
    except (binascii.Error, ValueError):
        raise InvalidFileError() from None


class StorageService:
    """Service layer for the pinning service proxy."""

    def __init__(self, blob_storage: IBlobStorage) -> None:
        self._storage = blob_storage

    async def upload(
        self,
        file_base64: str | None,
        file_name: str | None = None,
        file_type: str | None = None,
    ) -> str:
        """Pin base64 content and return its content hash.

        Raises:
            NoFileError: if no content was supplied (no remote call is made).
            InvalidFileError: if the content is not base64.
            UploadFailedError: if the pinning service call fails.
        """
        if not file_base64:
            raise NoFileError()

        content = decode_base64_payload(file_base64)
        filename = file_name or DEFAULT_FILENAME
        content_type = file_type or DEFAULT_CONTENT_TYPE

        try:
            content_hash = await self._storage.pin(content, filename, content_type)
        except UpstreamError as e:
            logger.error(
                "pinata_upload_failed",
                detail=e.detail,
                upstream_status=e.status_code,
                filename=filename,
            )
            raise UploadFailedError() from None

        logger.info(
            "pinata_upload_completed",
            ipfs_hash=content_hash,
            filename=filename,
            size=len(content),
        )
        return content_hash

    async def fetch(self, content_hash: str) -> Any:
        """Return pinned JSON content unchanged.

        Raises:
            FetchFailedError: on timeout, non-2xx or malformed payload.
        """
        try:
            return await self._storage.fetch(content_hash)
        except UpstreamError as e:
            logger.error(
                "pinata_fetch_failed",
                ipfs_hash=content_hash,
                detail=e.detail,
                upstream_status=e.status_code,
            )
            raise FetchFailedError(content_hash) from None
