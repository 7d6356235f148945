"""Dependency injection factories for the API."""

from functools import lru_cache

from fastapi import Depends

from domain.repositories.blob_storage import IBlobStorage
from domain.repositories.chat_directory import IChatDirectory
from domain.repositories.profile_repository import IProfileRepository
from domain.services.notification_service import NotificationService
from domain.services.profile_service import ProfileService
from domain.services.storage_service import StorageService
from domain.services.telegram_service import TelegramService
from infrastructure.memory.profile_repo import InMemoryProfileRepository
from infrastructure.pinata.client import PinataClient
from infrastructure.telegram.client import TelegramClient


@lru_cache
def get_profile_repository() -> IProfileRepository:
    """Get the process-wide profile store."""
    return InMemoryProfileRepository()


@lru_cache
def get_pinata_client() -> PinataClient:
    """Get the shared Pinata client."""
    return PinataClient()


@lru_cache
def get_telegram_client() -> TelegramClient:
    """Get the shared Telegram Bot API client."""
    return TelegramClient()


def get_blob_storage() -> IBlobStorage:
    return get_pinata_client()


def get_chat_directory() -> IChatDirectory:
    return get_telegram_client()


def get_profile_service(
    repository: IProfileRepository = Depends(get_profile_repository),
) -> ProfileService:
    """Get Profile service instance."""
    return ProfileService(repository)


def get_notification_service(
    repository: IProfileRepository = Depends(get_profile_repository),
) -> NotificationService:
    """Get Notification service instance."""
    return NotificationService(repository)


def get_storage_service(
    blob_storage: IBlobStorage = Depends(get_blob_storage),
) -> StorageService:
    """Get Storage service instance."""
    return StorageService(blob_storage)


def get_telegram_service(
    directory: IChatDirectory = Depends(get_chat_directory),
) -> TelegramService:
    """Get Telegram service instance."""
    return TelegramService(directory)


async def close_clients() -> None:
    """Close outbound HTTP clients created so far."""
    if get_pinata_client.cache_info().currsize:
        await get_pinata_client().close()
        get_pinata_client.cache_clear()
    if get_telegram_client.cache_info().currsize:
        await get_telegram_client().close()
        get_telegram_client.cache_clear()
