"""Service banner."""

from datetime import UTC, datetime
from typing import Any

from fastapi import APIRouter

router = APIRouter(tags=["meta"])

ENDPOINTS = {
    "auth": "POST /api/auth/telegram",
    "profile": "GET /api/profile/:id",
    "upload": "POST /api/pinata/upload",
    "getData": "GET /api/pinata/data/:hash",
    "progress": "POST /api/progress",
    "notifications": "POST /api/notifications",
    "health": "GET /api/health",
    "telegramChat": "GET /api/telegram/chat/:id",
}


@router.get("/", summary="Service banner")
async def root() -> dict[str, Any]:
    """List the available endpoints."""
    return {
        "message": "Server is running!",
        "endpoints": ENDPOINTS,
        "timestamp": datetime.now(UTC).isoformat(),
    }
