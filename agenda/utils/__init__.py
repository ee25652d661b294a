from agenda.utils.contact_validation import (
    ContactValidationError,
    is_valid_email,
    normalize_gender,
    normalize_phone,
    normalize_picture,
    parse_date,
)

__all__ = [
    "ContactValidationError",
    "is_valid_email",
    "normalize_gender",
    "normalize_phone",
    "normalize_picture",
    "parse_date",
]
