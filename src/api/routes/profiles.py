"""Profile API routes: Telegram auth, lookup and progress."""

from fastapi import APIRouter, Depends

from api.dependencies.services import get_profile_service
from api.schemas.profile import (
    ProfileEnvelope,
    ProfileResponse,
    ProgressRequest,
    TelegramAuthRequest,
)
from domain.services.profile_service import ProfileService

router = APIRouter(tags=["profiles"])


@router.post(
    "/auth/telegram",
    response_model=ProfileEnvelope,
    summary="Telegram login callback",
    responses={
        200: {"description": "Profile created or refreshed"},
        400: {"description": "No Telegram user id"},
    },
)
async def auth_telegram(
    body: TelegramAuthRequest,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileEnvelope:
    """Store the Telegram user, keeping any progress already recorded."""
    profile = await service.authenticate_telegram(
        body.id,
        first_name=body.first_name,
        last_name=body.last_name,
        username=body.username,
        avatar=body.photo_url or body.avatar,
    )
    return ProfileEnvelope(profile=ProfileResponse.model_validate(profile))


@router.get(
    "/profile/{profile_id}",
    response_model=ProfileResponse,
    summary="Get a profile",
    responses={
        200: {"description": "Profile with notification history"},
        404: {"description": "Profile not found"},
    },
)
async def get_profile(
    profile_id: str,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    profile = await service.get_profile(profile_id)
    return ProfileResponse.model_validate(profile)


@router.post(
    "/progress",
    response_model=ProfileEnvelope,
    summary="Record progress",
    responses={
        200: {"description": "Updated profile"},
        400: {"description": "Unknown user"},
    },
)
async def record_progress(
    body: ProgressRequest,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileEnvelope:
    """Add score and time, and raise the level if the new one is higher."""
    profile = await service.record_progress(
        body.id,
        score=body.score,
        level=body.level,
        time=body.time,
    )
    return ProfileEnvelope(profile=ProfileResponse.model_validate(profile))
