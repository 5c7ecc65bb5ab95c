"""
JSON Patch tests - ordered application, field whitelisting, failure leaves the projection untouched.
"""

import pytest

from app.core.exceptions import MissingBody, PatchApplicationFailure
from app.services.patching import PATCH_ERROR_KEY, apply_patch, parse_operations, patch_errors


@pytest.fixture
def projection():
    return {"login": "johndoe", "firstName": "John", "lastName": "Doe"}


def test_replace_is_case_insensitive_on_path(projection):
    result = apply_patch(projection, [{"op": "replace", "path": "/FirstName", "value": "Jane"}])
    assert result["firstName"] == "Jane"
    assert projection["firstName"] == "John"


def test_operations_apply_in_order(projection):
    result = apply_patch(
        projection,
        [
            {"op": "replace", "path": "/firstName", "value": "Jane"},
            {"op": "copy", "from": "/firstName", "path": "/lastName"},
            {"op": "test", "path": "/lastName", "value": "Jane"},
        ],
    )
    assert result == {"login": "johndoe", "firstName": "Jane", "lastName": "Jane"}


def test_remove_drops_field(projection):
    result = apply_patch(projection, [{"op": "remove", "path": "/lastName"}])
    assert "lastName" not in result


def test_move_between_fields(projection):
    result = apply_patch(projection, [{"op": "move", "from": "/login", "path": "/firstName"}])
    assert result == {"firstName": "johndoe", "lastName": "Doe"}


@pytest.mark.parametrize(
    "operation",
    [
        {"op": "replace", "path": "/gamesPlayed", "value": 3},
        {"op": "replace", "path": "/login/0", "value": "x"},
        {"op": "replace", "path": "login", "value": "x"},
        {"op": "frobnicate", "path": "/login", "value": "x"},
        {"op": ["replace"], "path": "/login", "value": "x"},
        {"op": {"name": "replace"}, "path": "/login", "value": "x"},
        {"op": "replace", "path": "/login"},
        {"op": "test", "path": "/login", "value": "someoneelse"},
        {"op": "copy", "from": "/id", "path": "/login"},
        "replace",
    ],
)
def test_invalid_operations_fail_the_patch(projection, operation):
    with pytest.raises(PatchApplicationFailure) as exc_info:
        apply_patch(projection, [operation])
    assert PATCH_ERROR_KEY in exc_info.value.errors


def test_failure_stops_at_first_bad_operation(projection):
    result, errors = patch_errors(
        projection,
        [
            {"op": "replace", "path": "/firstName", "value": "Jane"},
            {"op": "replace", "path": "/unknown", "value": 1},
            {"op": "replace", "path": "/lastName", "value": "Roe"},
        ],
    )
    assert result is projection
    assert list(errors) == [PATCH_ERROR_KEY]


def test_parse_operations_requires_array():
    assert parse_operations([]) == []
    with pytest.raises(MissingBody):
        parse_operations({"op": "replace"})
    with pytest.raises(MissingBody):
        parse_operations(None)
