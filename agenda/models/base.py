from datetime import datetime, timezone

from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel


def utcnow() -> datetime:
    """Current instant as naive UTC, the form every datetime column stores."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class TimestampedModel(SQLModel):
    created_at: datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=False), nullable=False)
    updated_at: datetime | None = Field(default=None, sa_type=DateTime(timezone=False), nullable=True)


class IntIDModel(SQLModel):
    id: int | None = Field(default=None, primary_key=True)
