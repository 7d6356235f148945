"""Common Pydantic schemas shared across the API."""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Schema serialized with camelCase keys, accepting either casing."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ErrorResponse(BaseModel):
    """Standardized error response."""

    error_code: str
    message: str
    details: Any | None = None
