from __future__ import annotations

from datetime import datetime
from typing import Any

from agenda.models.contact import Gender
from agenda.schemas.common import CamelModel, IDModel, Timestamped


class ContactPayload(CamelModel):
    """Raw form fields as submitted.

    Values stay untyped so that the contact validator can report every
    problem in one response instead of failing on the first one.
    """

    name: Any = None
    email: Any = None
    phone: Any = None
    gender: Any = None
    date_of_birth: Any = None
    profile_picture_url: Any = None

    def submitted(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class ContactCreate(ContactPayload):
    pass


class ContactUpdate(ContactPayload):
    pass


class ContactFields(CamelModel):
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    gender: Gender | None = None
    date_of_birth: datetime | None = None
    profile_picture_url: str | None = None


class ContactRead(IDModel, Timestamped):
    name: str
    email: str
    phone: str
    gender: Gender | None = None
    date_of_birth: datetime | None = None
    profile_picture_url: str | None = None
    favorite: bool
    active: bool


class FieldErrorRead(CamelModel):
    path: list[str]
    message: str
    code: str


class ContactValidationResult(CamelModel):
    valid: bool
    contact: ContactFields | None = None
    errors: list[FieldErrorRead] = []
