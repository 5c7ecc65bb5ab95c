"""
JSON Patch (RFC 6902) application for user projections.
Challenge: Reuse a real patch engine but only allow the three user fields as targets.
Design: Operations are checked and normalized first, then applied in order by jsonpatch on a copy.
"""

from typing import Any

import jsonpatch
import jsonpointer

from app.core.exceptions import FieldErrors, MissingBody, PatchApplicationFailure
from app.schemas.user import FIELD_NAMES

# Key used for patch errors in the field error map (the patch target type)
PATCH_ERROR_KEY = "UpdateUserDto"

SUPPORTED_OPERATIONS = frozenset({"add", "remove", "replace", "move", "copy", "test"})


def _fail(message: str) -> PatchApplicationFailure:
    return PatchApplicationFailure({PATCH_ERROR_KEY: [message]})


def _normalize_path(path: Any) -> str:
    """'/FirstName' -> '/firstName'. Only single-segment paths to user fields are valid."""
    if not isinstance(path, str) or not path.startswith("/"):
        raise _fail(f"The path '{path}' is not a valid JSON pointer to a user field.")
    segment = path[1:]
    name = FIELD_NAMES.get(segment.lower())
    if name is None:
        raise _fail(f"The target location specified by path segment '{segment}' was not found.")
    return "/" + name


def _normalize_operation(operation: Any) -> dict[str, Any]:
    if not isinstance(operation, dict):
        raise _fail("Each patch operation must be a JSON object.")
    op = operation.get("op")
    if not isinstance(op, str) or op not in SUPPORTED_OPERATIONS:
        raise _fail(f"Invalid JsonPatch operation '{op}'.")
    normalized = dict(operation)
    normalized["path"] = _normalize_path(operation.get("path"))
    if op in ("move", "copy"):
        normalized["from"] = _normalize_path(operation.get("from"))
    return normalized


def parse_operations(document: Any) -> list[Any]:
    """A patch document must be a JSON array; anything else counts as a missing body."""
    if not isinstance(document, list):
        raise MissingBody()
    return document


def apply_patch(projection: dict[str, Any], operations: list[Any]) -> dict[str, Any]:
    """
    Apply ``operations`` in order and return the patched copy.

    Raises PatchApplicationFailure on the first operation that cannot be
    applied; ``projection`` itself is never modified.
    """
    normalized = [_normalize_operation(operation) for operation in operations]
    try:
        return jsonpatch.apply_patch(projection, normalized, in_place=False)
    except (jsonpatch.JsonPatchException, jsonpointer.JsonPointerException) as exc:
        raise _fail(str(exc)) from exc


def patch_errors(projection: dict[str, Any], operations: list[Any]) -> tuple[dict[str, Any], FieldErrors]:
    """Like apply_patch, but returns (result, errors); on failure the result is the original projection."""
    try:
        return apply_patch(projection, operations), {}
    except PatchApplicationFailure as exc:
        return projection, exc.errors
