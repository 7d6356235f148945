"""Activity notification entity embedded in a profile."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

MESSAGE_PREVIEW_LENGTH = 100


@dataclass
class ActivityNotification:
    """Single activity-log entry stored in a profile's history.

    ``message`` and ``activity_type`` are kept exactly as the client sent
    them, which is usually but not always a string.
    """

    message: Any = None
    activity_type: Any = None
    metadata: Any = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))


def message_preview(message: Any) -> str:
    """Shorten a message for log output; the stored record keeps it whole."""
    if message is None or message == "":
        return "empty message"
    text = str(message)
    if len(text) > MESSAGE_PREVIEW_LENGTH:
        return text[:MESSAGE_PREVIEW_LENGTH] + "..."
    return text
