from __future__ import annotations

from datetime import datetime
from enum import Enum

from sqlalchemy import Column, DateTime, Text
from sqlmodel import Field

from agenda.models.base import IntIDModel, TimestampedModel


class Gender(str, Enum):
    MASCULINO = "MASCULINO"
    FEMININO = "FEMININO"
    NAO_BINARIO = "NAO_BINARIO"
    OUTRO = "OUTRO"


class Contact(IntIDModel, TimestampedModel, table=True):
    __tablename__ = "contacts"

    name: str = Field(index=True, max_length=255)
    email: str = Field(max_length=255)
    phone: str = Field(max_length=32)
    gender: Gender | None = Field(default=None)
    date_of_birth: datetime | None = Field(default=None, sa_type=DateTime(timezone=False))
    # external URL or inline data: URI, kept opaque
    profile_picture_url: str | None = Field(default=None, sa_column=Column(Text, nullable=True))

    favorite: bool = Field(default=False)
    active: bool = Field(default=True, index=True)
