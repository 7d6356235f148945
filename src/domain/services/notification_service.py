"""Notification ingestion: fire-and-forget activity log entries."""

import time
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

import structlog

from core.exceptions import NotificationFailedError, ProfileNotFoundError
from domain.entities.notification import ActivityNotification, message_preview
from domain.entities.profile import Profile
from domain.repositories.profile_repository import IProfileRepository

logger = structlog.get_logger()


@dataclass(frozen=True, slots=True)
class NotificationReceipt:
    """Acknowledgement returned for every accepted notification."""

    notification_id: int
    timestamp: datetime
    stored: bool


class NotificationService:
    """Service layer for activity notifications sent by the client."""

    def __init__(self, repository: IProfileRepository) -> None:
        self._profiles = repository

    async def ingest(
        self,
        telegram_id: Any,
        message: Any = None,
        activity_type: Any = None,
        user_data: Any = None,
        metadata: Any = None,
    ) -> NotificationReceipt:
        """Log a notification and append it to the sender's profile.

        Fields are taken as sent by the client, whatever their JSON type.
        Unknown or missing senders are not an error: the notification is
        acknowledged and dropped.

        Raises:
            NotificationFailedError: on any unexpected failure.
        """
        try:
            return await self._ingest(telegram_id, message, activity_type, user_data, metadata)
        except Exception:
            logger.exception("notification_processing_failed", telegram_id=telegram_id)
            raise NotificationFailedError() from None

    async def _ingest(
        self,
        telegram_id: Any,
        message: Any,
        activity_type: Any,
        user_data: Any,
        metadata: Any,
    ) -> NotificationReceipt:
        if not isinstance(user_data, dict):
            user_data = {}
        received_at = datetime.now(UTC)

        logger.info(
            "notification_received",
            telegram_id=telegram_id,
            username=user_data.get("username") or "unknown",
            first_name=user_data.get("firstName") or "unknown",
            activity_type=activity_type,
            message=message_preview(message),
        )

        stored = False
        if telegram_id:
            notification = ActivityNotification(
                message=message,
                activity_type=activity_type,
                metadata=metadata,
                timestamp=received_at,
            )

            def append(profile: Profile) -> None:
                profile.add_notification(notification)

            try:
                await self._profiles.mutate(telegram_id, append)
                stored = True
            except ProfileNotFoundError:
                logger.debug("notification_dropped", telegram_id=telegram_id)

        return NotificationReceipt(
            notification_id=time.time_ns() // 1_000_000,
            timestamp=received_at,
            stored=stored,
        )
