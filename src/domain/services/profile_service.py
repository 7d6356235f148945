"""Profile service layer: Telegram auth upsert, lookup and progress."""

from datetime import UTC, datetime

import structlog

from core.exceptions import (
    MissingTelegramIdError,
    ProfileNotFoundError,
    UnknownUserError,
)
from domain.entities.profile import Profile, ProfileId, full_name
from domain.repositories.profile_repository import IProfileRepository

logger = structlog.get_logger()


class ProfileService:
    """Service layer for Profile business logic."""

    def __init__(self, repository: IProfileRepository) -> None:
        self._profiles = repository

    async def authenticate_telegram(
        self,
        telegram_id: ProfileId | None,
        first_name: str | None = None,
        last_name: str | None = None,
        username: str | None = None,
        avatar: str | None = None,
    ) -> Profile:
        """Create or refresh a profile from Telegram login callback data.

        Identity fields are overwritten on every call. Score, level, total
        time and notification history survive a repeated login.
        """
        if telegram_id is None or telegram_id == "":
            raise MissingTelegramIdError()

        profile = await self._profiles.upsert(
            telegram_id,
            name=full_name(first_name, last_name),
            username=username,
            avatar=avatar,
            updated_at=datetime.now(UTC),
        )
        logger.info(
            "telegram_user_saved",
            profile_id=str(profile.id),
            name=profile.name,
            username=profile.username,
        )
        return profile

    async def get_profile(self, profile_id: ProfileId) -> Profile:
        """Get a profile or raise ProfileNotFoundError."""
        profile = await self._profiles.get(profile_id)
        if profile is None:
            raise ProfileNotFoundError(str(profile_id))
        return profile

    async def record_progress(
        self,
        profile_id: ProfileId | None,
        score: int | float | None = None,
        level: int | float | None = None,
        time: int | float | None = None,
    ) -> Profile:
        """Accumulate score/time and raise the level of an existing profile.

        Missing values count as no change: score and time default to 0,
        level to 1. Negative values are applied as given.
        """
        if profile_id is None or profile_id == "":
            raise UnknownUserError()

        def apply(profile: Profile) -> None:
            profile.apply_progress(
                score=score or 0,
                level=level or 1,
                time=time or 0,
            )

        try:
            return await self._profiles.mutate(profile_id, apply)
        except ProfileNotFoundError:
            raise UnknownUserError(str(profile_id)) from None

    async def count(self) -> int:
        """Number of known profiles."""
        return await self._profiles.count()
