"""User request/response schemas - API contract (camelCase on the wire)."""

from uuid import UUID

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

# Wire name -> property name used as the key of field error maps
FIELD_LABELS = {
    "login": "Login",
    "firstName": "FirstName",
    "lastName": "LastName",
}

# Lower-cased wire name -> wire name, for case-insensitive binding and patch paths
FIELD_NAMES = {name.lower(): name for name in FIELD_LABELS}


class UserFieldsBase(BaseModel):
    """Raw user input. Fields stay optional here; required-ness is checked by validation rules."""

    # Bound by wire name only (see FIELD_NAMES); snake_case keys are unknown and ignored
    model_config = {
        "alias_generator": to_camel,
        "coerce_numbers_to_str": True,
    }

    login: str | None = None
    first_name: str | None = None
    last_name: str | None = None


class CreateUserDto(UserFieldsBase):
    pass


class UpdateUserDto(UserFieldsBase):
    """Full replacement body and the shape PATCH documents are applied to."""

    pass


class UserDto(BaseModel):
    id: UUID
    login: str
    full_name: str  # "<lastName> <firstName>"

    model_config = {"alias_generator": to_camel, "populate_by_name": True}
