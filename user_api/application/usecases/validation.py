"""
Name: Input Validation

Responsibilities:
  - Field-level validation for user and credential payloads
  - Collect messages per field ({"email": ["..."]})
  - Parse path ids and pagination query values

Collaborators:
  - email_validator: address syntax (no DNS/deliverability check)

Notes:
  - Strings are trimmed except passwords
  - Nothing here touches the persistence boundary
  - Special-use domains other than .test (.local, .localhost, .invalid,
    .onion, .arpa) are rejected by email_validator
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List

from email_validator import EmailNotValidError, validate_email

NAME_MAX_LENGTH = 100
EMAIL_MAX_LENGTH = 150
PASSWORD_MIN_LENGTH = 6

_DIGITS = re.compile(r"[0-9]+")


@dataclass
class FieldErrors:
    """R: Accumulates validation messages per field."""

    errors: Dict[str, List[str]] = field(default_factory=dict)

    def add(self, name: str, message: str) -> None:
        self.errors.setdefault(name, []).append(message)

    def __bool__(self) -> bool:
        return bool(self.errors)


def _label(name: str) -> str:
    return name.replace("_", " ")


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def require_string(
    errors: FieldErrors, name: str, value: Any, *, max_length: int | None = None
) -> str | None:
    if _is_blank(value):
        errors.add(name, f"The {_label(name)} field is required.")
        return None
    if not isinstance(value, str):
        errors.add(name, f"The {_label(name)} must be a string.")
        return None
    value = value.strip()
    if max_length is not None and len(value) > max_length:
        errors.add(
            name,
            f"The {_label(name)} must not be greater than {max_length} characters.",
        )
    return value


def require_email(
    errors: FieldErrors, value: Any, *, max_length: int | None = EMAIL_MAX_LENGTH
) -> str | None:
    email = require_string(errors, "email", value, max_length=max_length)
    if email is None:
        return None
    try:
        # R: test_environment admits *.test domains
        validate_email(email, check_deliverability=False, test_environment=True)
    except EmailNotValidError:
        errors.add("email", "The email must be a valid email address.")
    return email


def check_password(
    errors: FieldErrors, value: Any, *, required: bool, min_length: int | None
) -> str | None:
    """R: Validate a password; optional passwords treat None/"" as absent."""
    if value is None or value == "":
        if required:
            errors.add("password", "The password field is required.")
        return None
    if not isinstance(value, str):
        errors.add("password", "The password must be a string.")
        return None
    if min_length is not None and len(value) < min_length:
        errors.add(
            "password", f"The password must be at least {min_length} characters."
        )
    return value


@dataclass
class UserFields:
    first_name: str
    last_name: str
    email: str
    password: str | None


def validate_user_fields(
    first_name: Any,
    last_name: Any,
    email: Any,
    password: Any,
    *,
    password_required: bool,
) -> tuple[UserFields | None, FieldErrors]:
    """R: Validate a full user payload (register, create, update)."""
    errors = FieldErrors()
    clean_first = require_string(
        errors, "first_name", first_name, max_length=NAME_MAX_LENGTH
    )
    clean_last = require_string(
        errors, "last_name", last_name, max_length=NAME_MAX_LENGTH
    )
    clean_email = require_email(errors, email)
    clean_password = check_password(
        errors, password, required=password_required, min_length=PASSWORD_MIN_LENGTH
    )
    if errors:
        return None, errors
    return (
        UserFields(
            first_name=clean_first,
            last_name=clean_last,
            email=clean_email,
            password=clean_password,
        ),
        errors,
    )


def parse_user_id(value: Any) -> int | None:
    """R: Positive integer id or None (non-numeric, zero, negative)."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value > 0 else None
    if not isinstance(value, str) or not _DIGITS.fullmatch(value):
        return None
    user_id = int(value)
    return user_id if user_id > 0 else None


def parse_bounded_int(
    errors: FieldErrors,
    name: str,
    value: Any,
    *,
    default: int,
    minimum: int,
    maximum: int | None = None,
) -> int:
    """R: Optional integer query value with inclusive bounds."""
    if value is None or value == "":
        return default
    if isinstance(value, bool):
        errors.add(name, f"The {name} must be an integer.")
        return default
    try:
        number = int(str(value).strip())
    except ValueError:
        errors.add(name, f"The {name} must be an integer.")
        return default
    if number < minimum:
        errors.add(name, f"The {name} must be at least {minimum}.")
    elif maximum is not None and number > maximum:
        errors.add(name, f"The {name} must not be greater than {maximum}.")
    return number
