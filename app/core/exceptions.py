"""
Domain errors for the users API.
Challenge: Consistent status codes without HTTP details leaking into services.
Design: Services raise these; app/api/errors.py turns them into responses.
"""

from fastapi import status

FieldErrors = dict[str, list[str]]


class UserApiError(Exception):
    """Base error. Subclasses carry the status code they map to."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR


class MissingBody(UserApiError):
    """Request body absent, empty, null or not the expected JSON shape."""

    status_code = status.HTTP_400_BAD_REQUEST


class InvalidIdentifier(UserApiError):
    status_code = status.HTTP_400_BAD_REQUEST


class UserNotFound(UserApiError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, user_id=None):
        super().__init__(f"User {user_id} not found")
        self.user_id = user_id


class NotAcceptable(UserApiError):
    """No supported media type satisfies the Accept header."""

    status_code = status.HTTP_406_NOT_ACCEPTABLE

    def __init__(self, accept: str | None = None):
        super().__init__(f"Cannot produce a response for Accept: {accept!r}")
        self.accept = accept


class ValidationFailure(UserApiError):
    """Field-level errors; rendered as a {field: [messages]} body."""

    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY

    def __init__(self, errors: FieldErrors):
        super().__init__(errors)
        self.errors = errors


class StructuralValidationFailure(ValidationFailure):
    pass


class LoginCharsetViolation(ValidationFailure):
    pass


class PatchApplicationFailure(ValidationFailure):
    pass


def merge_errors(*maps: FieldErrors) -> FieldErrors:
    """Combine field error maps, keeping message order per field."""
    merged: FieldErrors = {}
    for errors in maps:
        for key, messages in errors.items():
            merged.setdefault(key, []).extend(messages)
    return merged
