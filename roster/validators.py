"""
Validation rules for Person records.

Every submitted value goes through two steps:
1. Normalization: text is trimmed and blank text becomes ``None``
2. Validation: one function per field returns the list of violated rules

``validate_person`` composes both steps into a single pass that collects
every violation instead of stopping at the first one, so callers can show
all invalid fields at once.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date
from typing import Any

from django.core.exceptions import ValidationError
from django.core.validators import EmailValidator
from django.utils import timezone

NAME_MAX_LENGTH = 100
ADDRESS_MAX_LENGTH = 200
EMAIL_MAX_LENGTH = 100
PHONE_MIN_LENGTH = 9
PHONE_MAX_LENGTH = 13

PHONE_PATTERN = re.compile(r"\+?[0-9]+")

TEXT_FIELDS = ("first_name", "last_name", "address", "email", "phone")
PERSON_FIELDS = ("first_name", "last_name", "birth_date", "address", "email", "phone")

REQUIRED_MESSAGE = "This field is required."

_email_validator = EmailValidator()


@dataclass(frozen=True)
class FieldError:
    """A single violated rule: the field name and a human readable message."""

    field: str
    message: str


def normalize_text(value: Any) -> str | None:
    """
    Trim text and turn blank text into ``None``.

    Args:
        value: Submitted value, usually a string or ``None``

    Returns:
        The stripped string, or ``None`` when nothing is left after stripping
    """
    if value is None:
        return None
    stripped = str(value).strip()
    return stripped or None


def normalize_person_data(data: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of ``data`` with every text field normalized."""
    normalized = dict(data)
    for field_name in TEXT_FIELDS:
        normalized[field_name] = normalize_text(data.get(field_name))
    return normalized


def _required(value: str | None) -> list[str]:
    return [] if value is not None else [REQUIRED_MESSAGE]


def _max_length(value: str, limit: int) -> list[str]:
    if len(value) > limit:
        return [
            f"Ensure this value has at most {limit} characters (it has {len(value)})."
        ]
    return []


def _required_text(value: str | None, limit: int) -> list[str]:
    # Blank input is reported as missing, never as a length problem
    if value is None:
        return _required(value)
    return _max_length(value, limit)


def validate_first_name(value: str | None) -> list[str]:
    return _required_text(value, NAME_MAX_LENGTH)


def validate_last_name(value: str | None) -> list[str]:
    return _required_text(value, NAME_MAX_LENGTH)


def validate_address(value: str | None) -> list[str]:
    return _required_text(value, ADDRESS_MAX_LENGTH)


def validate_birth_date(value: date | None, today: date | None = None) -> list[str]:
    """
    Validate that a birth date, when given, is not in the future.

    Args:
        value: Birth date or ``None``
        today: Reference date, defaults to the current local date

    Returns:
        List of error messages (empty when valid)
    """
    if value is None:
        return []
    today = today or timezone.localdate()
    if value > today:
        return ["Birth date cannot be in the future."]
    return []


def validate_email(value: str | None) -> list[str]:
    """Validate an optional email address for length and syntax."""
    if value is None:
        return []
    errors = _max_length(value, EMAIL_MAX_LENGTH)
    try:
        _email_validator(value)
    except ValidationError:
        errors.append("Enter a valid email address.")
    return errors


def validate_phone(value: str | None) -> list[str]:
    """
    Validate an optional phone number.

    The number must be between 9 and 13 characters long and consist of
    digits with an optional leading ``+``. Length and format problems are
    reported independently.
    """
    if value is None:
        return []
    errors = []
    if not PHONE_MIN_LENGTH <= len(value) <= PHONE_MAX_LENGTH:
        errors.append(
            f"Phone number must be between {PHONE_MIN_LENGTH} and "
            f"{PHONE_MAX_LENGTH} characters long."
        )
    if not PHONE_PATTERN.fullmatch(value):
        errors.append(
            "Phone number may only contain digits with an optional leading '+'."
        )
    return errors


def validate_person(
    data: Mapping[str, Any], today: date | None = None
) -> list[FieldError]:
    """
    Normalize and validate a complete set of person fields.

    Args:
        data: Mapping with any of the person field names
        today: Reference date for the birth date check

    Returns:
        Every violation found, in field order. An empty list means the data
        can be stored.

    Example:
        >>> validate_person({"first_name": "  ", "last_name": "Doe"})
        [FieldError(field='first_name', message='This field is required.'),
         FieldError(field='address', message='This field is required.')]
    """
    normalized = normalize_person_data(data)
    checks = (
        ("first_name", validate_first_name(normalized["first_name"])),
        ("last_name", validate_last_name(normalized["last_name"])),
        ("birth_date", validate_birth_date(normalized.get("birth_date"), today)),
        ("address", validate_address(normalized["address"])),
        ("email", validate_email(normalized["email"])),
        ("phone", validate_phone(normalized["phone"])),
    )
    return [
        FieldError(field_name, message)
        for field_name, messages in checks
        for message in messages
    ]


def errors_by_field(violations: list[FieldError]) -> dict[str, list[str]]:
    """Group violations into the ``{field: [messages]}`` shape of ValidationError."""
    grouped: dict[str, list[str]] = {}
    for violation in violations:
        grouped.setdefault(violation.field, []).append(violation.message)
    return grouped
