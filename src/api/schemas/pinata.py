"""Pydantic schemas for the Pinata proxy."""

from api.schemas.common import CamelModel


class UploadRequest(CamelModel):
    """Base64 upload request; a data URI prefix is allowed."""

    file_base64: str | None = None
    file_name: str | None = None
    file_type: str | None = None


class UploadResponse(CamelModel):
    """Content hash assigned by the pinning service."""

    ipfs_hash: str
