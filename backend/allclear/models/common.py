from datetime import datetime, timezone
from typing import Annotated

from pydantic import BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel


def _as_utc(value: datetime) -> datetime:
    # Stored timestamps are naive UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


UtcDatetime = Annotated[datetime, PlainSerializer(lambda value: _as_utc(value).isoformat(), return_type=str)]


class CamelModel(BaseModel):
    """Schema whose JSON keys are camelCase (firstName, lastUpdated, ...)"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RequestModel(CamelModel):
    """Request body; defaults are validated too so missing fields get the rule's own message"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, validate_default=True)


class MessageResponse(BaseModel):
    """Plain acknowledgement"""
    message: str
