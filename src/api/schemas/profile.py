"""Pydantic schemas for Profile API."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator

from api.schemas.common import CamelModel


class TelegramAuthRequest(BaseModel):
    """Payload of the Telegram login widget callback."""

    id: int | str | None = None
    first_name: str | None = None
    last_name: str | None = None
    username: str | None = None
    photo_url: str | None = None
    avatar: str | None = None

    @field_validator(
        "first_name", "last_name", "username", "photo_url", "avatar", mode="before"
    )
    @classmethod
    def stringify_scalars(cls, value: Any) -> Any:
        # Names are joined into text; numbers and booleans become their text form
        if isinstance(value, bool):
            return str(value).lower()
        if isinstance(value, int | float):
            return str(value)
        return value


class ProgressRequest(BaseModel):
    """Progress increment for a profile."""

    id: int | str | None = None
    score: int | float | None = Field(None, description="Points to add")
    level: int | float | None = Field(None, description="Level reached")
    time: int | float | None = Field(None, description="Play time to add")


class ActivityNotificationResponse(CamelModel):
    """Stored notification entry."""

    message: Any = None
    activity_type: Any = None
    timestamp: datetime
    metadata: Any = None


class ProfileResponse(CamelModel):
    """Profile with progress and notification history."""

    id: int | str
    name: str
    username: str | None = None
    avatar: str | None = None
    updated_at: datetime
    score: int | float
    level: int | float
    total_time: int | float
    notifications: list[ActivityNotificationResponse] = Field(default_factory=list)


class ProfileEnvelope(BaseModel):
    """Result of auth and progress calls."""

    success: bool = True
    profile: ProfileResponse
