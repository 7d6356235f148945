"""Unit tests for ProfileService."""

from unittest.mock import AsyncMock

import pytest

from core.exceptions import MissingTelegramIdError, ProfileNotFoundError, UnknownUserError
from domain.entities.notification import ActivityNotification
from domain.services.profile_service import ProfileService
from infrastructure.memory.profile_repo import InMemoryProfileRepository


@pytest.fixture
def service(profile_repository: InMemoryProfileRepository) -> ProfileService:
    return ProfileService(profile_repository)


# --- authenticate_telegram ---


class TestAuthenticateTelegram:
    @pytest.mark.asyncio
    async def test_creates_profile_with_defaults(self, service: ProfileService):
        profile = await service.authenticate_telegram(
            42, first_name="Ada", last_name="Lovelace", username="ada", avatar="https://a/p.jpg"
        )

        assert profile.id == 42
        assert profile.name == "Ada Lovelace"
        assert profile.username == "ada"
        assert profile.avatar == "https://a/p.jpg"
        assert profile.score == 0
        assert profile.level == 1
        assert profile.total_time == 0
        assert profile.notifications == []

    @pytest.mark.asyncio
    async def test_missing_id_raises(self, service: ProfileService):
        with pytest.raises(MissingTelegramIdError):
            await service.authenticate_telegram(None, first_name="Ada")

        assert await service.count() == 0

    @pytest.mark.asyncio
    async def test_missing_id_never_reaches_store(self):
        repo = AsyncMock()
        service = ProfileService(repo)

        with pytest.raises(MissingTelegramIdError):
            await service.authenticate_telegram("")

        repo.upsert.assert_not_called()

    @pytest.mark.asyncio
    async def test_repeat_call_is_idempotent_on_identity(self, service: ProfileService):
        first = await service.authenticate_telegram(7, first_name="Bob", username="bob")
        second = await service.authenticate_telegram(7, first_name="Bob", username="bob")

        assert (second.name, second.username, second.avatar) == (
            first.name,
            first.username,
            first.avatar,
        )
        assert second.updated_at >= first.updated_at
        assert await service.count() == 1

    @pytest.mark.asyncio
    async def test_overwrites_identity_fields(self, service: ProfileService):
        await service.authenticate_telegram(7, first_name="Bob", username="bob", avatar="a.jpg")

        profile = await service.authenticate_telegram(7, first_name="Robert")

        assert profile.name == "Robert"
        assert profile.username is None
        assert profile.avatar is None

    @pytest.mark.asyncio
    async def test_preserves_accumulators(
        self, service: ProfileService, profile_repository: InMemoryProfileRepository
    ):
        await service.authenticate_telegram(7, first_name="Bob")
        await service.record_progress(7, score=10, level=3, time=60)
        await profile_repository.mutate(
            7, lambda p: p.add_notification(ActivityNotification(message="hi"))
        )

        profile = await service.authenticate_telegram(7, first_name="Bob")

        assert profile.score == 10
        assert profile.level == 3
        assert profile.total_time == 60
        assert [n.message for n in profile.notifications] == ["hi"]


# --- get_profile ---


class TestGetProfile:
    @pytest.mark.asyncio
    async def test_returns_profile_by_string_id(self, service: ProfileService):
        await service.authenticate_telegram(42, first_name="Ada")

        profile = await service.get_profile("42")

        assert profile.id == 42
        assert profile.name == "Ada"

    @pytest.mark.asyncio
    async def test_unknown_id_raises(self, service: ProfileService):
        with pytest.raises(ProfileNotFoundError):
            await service.get_profile("missing")


# --- record_progress ---


class TestRecordProgress:
    @pytest.mark.asyncio
    async def test_accumulates(self, service: ProfileService):
        await service.authenticate_telegram(1)
        await service.record_progress(1, score=5, time=100)

        profile = await service.record_progress(1, score=3, level=2, time=20)

        assert profile.score == 8
        assert profile.total_time == 120
        assert profile.level == 2

    @pytest.mark.asyncio
    async def test_level_is_monotonic(self, service: ProfileService):
        await service.authenticate_telegram(1)
        await service.record_progress(1, level=3)

        profile = await service.record_progress(1, level=1)

        assert profile.level == 3

    @pytest.mark.asyncio
    async def test_missing_values_change_nothing(self, service: ProfileService):
        await service.authenticate_telegram(1)
        await service.record_progress(1, score=4, level=2, time=9)

        profile = await service.record_progress(1)

        assert (profile.score, profile.level, profile.total_time) == (4, 2, 9)

    @pytest.mark.asyncio
    async def test_unknown_user_raises_without_creating(self, service: ProfileService):
        with pytest.raises(UnknownUserError):
            await service.record_progress(99, score=1)

        assert await service.count() == 0

    @pytest.mark.asyncio
    async def test_missing_id_raises(self, service: ProfileService):
        with pytest.raises(UnknownUserError):
            await service.record_progress(None, score=1)
