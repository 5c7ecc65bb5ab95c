"""
Validation rules for user input.

Two gates, kept apart on purpose:

* structural rules (``structural_errors``): required fields and the login
  format "ASCII digits or Unicode letters". Every write path runs these.
* the login charset rule (``is_letters_or_digits``): every character is a
  letter or a decimal digit. Only user creation runs this one, after the
  structural rules pass.

Binding a raw JSON payload to a DTO (``bind_payload``) reports type errors in
the same field error format so callers can merge everything into one 422.
"""

from typing import Any, TypeVar

from pydantic import ValidationError

from app.core.exceptions import FieldErrors, MissingBody
from app.schemas.user import FIELD_LABELS, FIELD_NAMES, UserFieldsBase

DtoType = TypeVar("DtoType", bound=UserFieldsBase)

ASCII_DIGITS = frozenset("0123456789")

LOGIN_REQUIRED = "The Login field is required."
LOGIN_FORMAT = "Login should contain only letters or digits"
LOGIN_CHARSET = "Login must contain only letters and digits"
FIRST_NAME_REQUIRED = "FirstName is required"
LAST_NAME_REQUIRED = "LastName is required"
INVALID_VALUE = "The value is invalid."


def normalize_keys(payload: dict[str, Any]) -> dict[str, Any]:
    """Map user field keys onto their wire names, ignoring case. Other keys pass through."""
    return {FIELD_NAMES.get(key.lower(), key): value for key, value in payload.items()}


def bind_payload(dto_type: type[DtoType], payload: Any) -> tuple[DtoType, FieldErrors]:
    """
    Bind a decoded JSON body to ``dto_type``.

    Raises MissingBody when there is nothing object-shaped to bind. Fields
    whose values have the wrong type are reported and left unset.
    """
    if not isinstance(payload, dict):
        raise MissingBody()
    data = normalize_keys(payload)
    try:
        return dto_type.model_validate(data), {}
    except ValidationError as exc:
        errors: FieldErrors = {}
        bad_fields = set()
        for error in exc.errors():
            field = str(error["loc"][0]) if error["loc"] else ""
            bad_fields.add(field)
            errors.setdefault(FIELD_LABELS.get(field, field), []).append(INVALID_VALUE)
        cleaned = {key: value for key, value in data.items() if key not in bad_fields}
        return dto_type.model_validate(cleaned), errors


def is_login_format_valid(login: str) -> bool:
    """Structural login rule: ASCII digits or Unicode letters only (empty is allowed here)."""
    return all(ch in ASCII_DIGITS or ch.isalpha() for ch in login)


def is_letters_or_digits(login: str) -> bool:
    """Charset rule used on create: letters or decimal digits of any script."""
    return all(ch.isalpha() or ch.isdecimal() for ch in login)


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def structural_errors(dto: UserFieldsBase) -> FieldErrors:
    """Required-field and login-format checks. Empty dict means valid."""
    errors: FieldErrors = {}
    if _is_blank(dto.login):
        errors["Login"] = [LOGIN_REQUIRED]
    elif not is_login_format_valid(dto.login):
        errors["Login"] = [LOGIN_FORMAT]
    if _is_blank(dto.first_name):
        errors["FirstName"] = [FIRST_NAME_REQUIRED]
    if _is_blank(dto.last_name):
        errors["LastName"] = [LAST_NAME_REQUIRED]
    return errors


def login_charset_errors(login: str) -> FieldErrors:
    if is_letters_or_digits(login):
        return {}
    return {"Login": [LOGIN_CHARSET]}
