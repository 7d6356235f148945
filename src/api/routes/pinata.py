"""Pinata proxy routes."""

from typing import Any

from fastapi import APIRouter, Depends

from api.dependencies.services import get_storage_service
from api.schemas.pinata import UploadRequest, UploadResponse
from domain.services.storage_service import StorageService

router = APIRouter(prefix="/pinata", tags=["pinata"])


@router.post(
    "/upload",
    response_model=UploadResponse,
    summary="Pin a base64 file",
    responses={
        200: {"description": "IPFS hash of the pinned file"},
        400: {"description": "No file or invalid base64"},
        500: {"description": "Pinata upload failed"},
    },
)
async def upload_file(
    body: UploadRequest,
    service: StorageService = Depends(get_storage_service),
) -> UploadResponse:
    ipfs_hash = await service.upload(
        body.file_base64,
        file_name=body.file_name,
        file_type=body.file_type,
    )
    return UploadResponse(ipfs_hash=ipfs_hash)


@router.get(
    "/data/{content_hash}",
    summary="Fetch pinned JSON by hash",
    responses={
        200: {"description": "Pinned JSON content, unchanged"},
        500: {"description": "Failed to fetch from Pinata"},
    },
)
async def get_data(
    content_hash: str,
    service: StorageService = Depends(get_storage_service),
) -> Any:
    return await service.fetch(content_hash)
