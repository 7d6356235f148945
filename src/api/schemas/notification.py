"""Pydantic schemas for notification ingestion."""

from datetime import datetime
from typing import Any

from api.schemas.common import CamelModel


class NotificationRequest(CamelModel):
    """Activity notification sent by the Telegram client.

    Every field is passed through untyped: the endpoint acknowledges
    whatever the client sends.
    """

    telegram_id: Any = None
    message: Any = None
    activity_type: Any = None
    user_data: Any = None
    metadata: Any = None


class NotificationAckResponse(CamelModel):
    """Acknowledgement returned for every notification."""

    success: bool = True
    received: bool = True
    timestamp: datetime
    notification_id: int
    message: str = "Notification processed successfully"
