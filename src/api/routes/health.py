"""Health check endpoint."""

from datetime import UTC, datetime

from fastapi import APIRouter, Depends

from api.dependencies.services import get_profile_service
from api.schemas.common import CamelModel
from domain.services.profile_service import ProfileService

router = APIRouter(tags=["health"])


class HealthResponse(CamelModel):
    """Health check response."""

    status: str
    timestamp: datetime
    profiles_count: int


@router.get("/health", response_model=HealthResponse, summary="Health check")
async def health_check(
    service: ProfileService = Depends(get_profile_service),
) -> HealthResponse:
    """Service status and the number of stored profiles."""
    return HealthResponse(
        status="OK",
        timestamp=datetime.now(UTC),
        profiles_count=await service.count(),
    )
