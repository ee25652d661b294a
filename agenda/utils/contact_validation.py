from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from pydantic import TypeAdapter, ValidationError
from pydantic.alias_generators import to_camel

from agenda.models.contact import Gender

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PHONE_MIN_DIGITS = 10
PHONE_MAX_DIGITS = 11

_datetime_adapter = TypeAdapter(datetime)


class ErrorKind(str, Enum):
    REQUIRED = "required"
    INVALID_FORMAT = "invalid_format"
    INVALID_VALUE = "invalid_value"
    INVALID_LENGTH = "invalid_length"
    INVALID_DATE = "invalid_date"


class InvalidField(ValueError):
    """A single field value that failed validation."""

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message


@dataclass(frozen=True)
class FieldError:
    field: str
    kind: ErrorKind
    message: str

    def as_dict(self) -> dict[str, Any]:
        return {"path": [self.field], "message": self.message, "code": self.kind.value}


class ContactValidationError(ValueError):
    """Every field error found in one submission."""

    def __init__(self, errors: list[FieldError], message: str = "Verifique os dados do formulário.") -> None:
        super().__init__(message)
        self.errors = errors
        self.message = message

    def as_detail(self) -> dict[str, Any]:
        return {"message": self.message, "errors": [error.as_dict() for error in self.errors]}


def strip_non_digits(value: Any) -> str:
    return "".join(ch for ch in str(value) if ch.isdigit())


def normalize_phone(raw: Any) -> str:
    """Return the phone in display form: ``(DD) DDDDD-DDDD`` or ``(DD) DDDD-DDDD``."""
    if raw is None or raw == "":
        raise InvalidField(ErrorKind.REQUIRED, "Telefone é obrigatório.")
    if isinstance(raw, bool) or not isinstance(raw, (str, int)):
        raise InvalidField(ErrorKind.INVALID_FORMAT, "Formato de Telefone inválido.")

    digits = strip_non_digits(raw)
    if not PHONE_MIN_DIGITS <= len(digits) <= PHONE_MAX_DIGITS:
        raise InvalidField(
            ErrorKind.INVALID_LENGTH,
            "Telefone inválido. Deve ter 10 ou 11 dígitos (incluindo DDD).",
        )

    if len(digits) == PHONE_MAX_DIGITS:
        return f"({digits[:2]}) {digits[2:7]}-{digits[7:]}"
    return f"({digits[:2]}) {digits[2:6]}-{digits[6:]}"


def is_valid_email(raw: Any) -> bool:
    if not raw or not isinstance(raw, str):
        return False
    return EMAIL_PATTERN.fullmatch(raw) is not None


def normalize_email(raw: Any) -> str:
    if raw is None or raw == "":
        raise InvalidField(ErrorKind.REQUIRED, "E-mail é obrigatório.")
    if not is_valid_email(raw):
        raise InvalidField(ErrorKind.INVALID_FORMAT, "E-mail inválido.")
    return raw


def normalize_name(raw: Any) -> str:
    if raw is None:
        raise InvalidField(ErrorKind.REQUIRED, "Nome é obrigatório.")
    if not isinstance(raw, str):
        raise InvalidField(ErrorKind.INVALID_FORMAT, "Nome inválido ou vazio.")
    name = raw.strip()
    if not name:
        raise InvalidField(ErrorKind.REQUIRED, "Nome é obrigatório.")
    return name


def normalize_gender(raw: Any) -> Gender | None:
    if raw is None:
        return None
    if not isinstance(raw, str):
        raise InvalidField(ErrorKind.INVALID_FORMAT, "Formato de Gênero inválido.")
    try:
        return Gender(raw.upper())
    except ValueError as exc:
        raise InvalidField(
            ErrorKind.INVALID_VALUE,
            "Gênero inválido. Opções: Masculino, Feminino, Não Binário, Outro.",
        ) from exc


def parse_date(raw: Any) -> datetime | None:
    """Parse a date of birth; aware values are converted to naive UTC."""
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return None
    if isinstance(raw, bool):
        raise InvalidField(ErrorKind.INVALID_DATE, "Data de Nascimento inválida.")
    candidate = raw.strip() if isinstance(raw, str) else raw
    try:
        parsed = _datetime_adapter.validate_python(candidate)
    except ValidationError as exc:
        raise InvalidField(ErrorKind.INVALID_DATE, "Data de Nascimento inválida.") from exc
    if parsed.tzinfo is not None:
        try:
            parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
        except (OverflowError, ValueError) as exc:
            # the UTC instant falls outside datetime range
            raise InvalidField(ErrorKind.INVALID_DATE, "Data de Nascimento inválida.") from exc
    return parsed


def normalize_picture(raw: Any) -> str | None:
    if raw is None:
        return None
    if not isinstance(raw, str):
        raise InvalidField(ErrorKind.INVALID_FORMAT, "URL da Foto de Perfil inválida.")
    return raw.strip() or None


_NORMALIZERS = {
    "name": normalize_name,
    "email": normalize_email,
    "phone": normalize_phone,
    "gender": normalize_gender,
    "date_of_birth": parse_date,
    "profile_picture_url": normalize_picture,
}

# snake_case attribute -> name used on the wire and in error paths
FIELD_ALIASES = {field: to_camel(field) for field in _NORMALIZERS}


def _collect(data: Mapping[str, Any], fields: list[str]) -> tuple[dict[str, Any], list[FieldError]]:
    cleaned: dict[str, Any] = {}
    errors: list[FieldError] = []
    for field in fields:
        try:
            cleaned[field] = _NORMALIZERS[field](data.get(field))
        except InvalidField as exc:
            errors.append(FieldError(FIELD_ALIASES[field], exc.kind, exc.message))
    return cleaned, errors


def validate_contact_create(data: Mapping[str, Any]) -> dict[str, Any]:
    """Validate a full submission; raises ContactValidationError listing every bad field."""
    cleaned, errors = _collect(data, list(_NORMALIZERS))
    if errors:
        raise ContactValidationError(errors)
    return cleaned


def validate_contact_update(data: Mapping[str, Any]) -> dict[str, Any]:
    """Validate only the keys present in ``data``.

    A missing key leaves the stored value untouched; a key mapped to ``None``
    clears nullable fields and is rejected for name, email and phone.
    """
    present = [field for field in _NORMALIZERS if field in data]
    cleaned, errors = _collect(data, present)
    if errors:
        raise ContactValidationError(errors, "Verifique os dados do formulário para atualização.")
    return cleaned
