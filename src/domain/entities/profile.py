"""Profile domain entity."""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from domain.entities.notification import ActivityNotification

MAX_NOTIFICATIONS = 50

ProfileId = str | int


def profile_key(profile_id: ProfileId) -> str:
    """Normalize an external identifier to the store key.

    Telegram sends numeric ids in JSON bodies while path parameters are
    strings; both must address the same profile.
    """
    return str(profile_id)


def full_name(first_name: str | None, last_name: str | None) -> str:
    """Join name parts, treating missing parts as empty."""
    return f"{first_name or ''} {last_name or ''}".strip()


@dataclass
class Profile:
    """Domain entity for a Telegram user profile and its progress."""

    id: ProfileId
    name: str = ""
    username: str | None = None
    avatar: str | None = None
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    score: int | float = 0
    level: int | float = 1
    total_time: int | float = 0
    notifications: list[ActivityNotification] = field(default_factory=list)

    def apply_identity(
        self,
        name: str,
        username: str | None,
        avatar: str | None,
        updated_at: datetime,
    ) -> None:
        """Overwrite identity fields; accumulators are left untouched."""
        self.name = name
        self.username = username
        self.avatar = avatar
        self.updated_at = updated_at

    def apply_progress(
        self, score: int | float = 0, level: int | float = 1, time: int | float = 0
    ) -> None:
        """Accumulate score and time, raise level to the higher value."""
        self.score += score
        self.level = max(self.level, level)
        self.total_time += time

    def add_notification(self, notification: ActivityNotification) -> None:
        """Append to the history, keeping only the most recent entries."""
        self.notifications.append(notification)
        if len(self.notifications) > MAX_NOTIFICATIONS:
            del self.notifications[:-MAX_NOTIFICATIONS]
