from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, field_validator


def _naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    # the timestamp column has no time zone; aware values are stored as UTC
    if value is not None and value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


class LogCreate(BaseModel):
    user_agent: StrictStr = Field(min_length=1)
    response_time: StrictInt = Field(ge=0)
    timestamp: Optional[datetime] = None

    @field_validator("timestamp")
    @classmethod
    def normalize_timestamp(cls, value: Optional[datetime]) -> Optional[datetime]:
        return _naive_utc(value)


class LogEntryOut(BaseModel):
    """Immutable view of a stored log row."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: int
    user_agent: str
    response_time: int
    timestamp: datetime


class LogQuery(BaseModel):
    limit: StrictInt = Field(gt=0)
    before: Optional[datetime] = None
    before_id: Optional[int] = None

    @field_validator("before")
    @classmethod
    def normalize_before(cls, value: Optional[datetime]) -> Optional[datetime]:
        return _naive_utc(value)
