"""
User service - business logic for the users resource (SOLID: Single Responsibility).
Challenge: Orchestrate storage, validation and patching; keep controllers thin.
Design: Service depends on the UserStore abstraction; easy to test with a fresh in-memory store.
"""

import logging
from typing import Any
from uuid import UUID

from app.core.exceptions import (
    InvalidIdentifier,
    LoginCharsetViolation,
    PatchApplicationFailure,
    StructuralValidationFailure,
    UserNotFound,
    merge_errors,
)
from app.db.models.user import NIL_ID, UserEntity
from app.db.repositories.base_repository import PageList
from app.db.repositories.user_repository import UserStore
from app.schemas.user import CreateUserDto, UpdateUserDto, UserDto
from app.services.patching import parse_operations, patch_errors
from app.services.validation import bind_payload, login_charset_errors, structural_errors

logger = logging.getLogger(__name__)


def _to_user_dto(user: UserEntity) -> UserDto:
    """Map entity to API response; fullName is "<last> <first>"."""
    return UserDto(id=user.id, login=user.login, full_name=f"{user.last_name} {user.first_name}")


def _to_update_projection(user: UserEntity) -> dict[str, Any]:
    """Entity -> UpdateUserDto-shaped dict that patch operations are applied to."""
    return UpdateUserDto.model_validate(
        {"login": user.login, "firstName": user.first_name, "lastName": user.last_name}
    ).model_dump(by_alias=True)


def _to_entity(dto: CreateUserDto | UpdateUserDto, user_id: UUID = NIL_ID) -> UserEntity:
    """New record from input; counters start at zero and no game is attached."""
    return UserEntity(
        id=user_id,
        login=dto.login,
        last_name=dto.last_name,
        first_name=dto.first_name,
        games_played=0,
        current_game_id=None,
    )


class UserService:
    """Handles all user use cases: fetch, create, replace, patch, delete, list."""

    def __init__(self, user_repo: UserStore, persist_patches: bool = False):
        self.user_repo = user_repo
        self.persist_patches = persist_patches

    def get_by_id(self, user_id: UUID) -> UserDto:
        user = self.user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFound(user_id)
        return _to_user_dto(user)

    def create(self, payload: Any) -> UUID:
        """Validate structure, then the login charset, then store. Returns the new id."""
        dto, errors = bind_payload(CreateUserDto, payload)
        errors = merge_errors(errors, structural_errors(dto))
        if errors:
            raise StructuralValidationFailure(errors)

        charset_errors = login_charset_errors(dto.login)
        if charset_errors:
            raise LoginCharsetViolation(charset_errors)

        user = self.user_repo.insert(_to_entity(dto))
        logger.info("user created id=%s login=%s", user.id, user.login)
        return user.id

    def replace_or_create(self, user_id: UUID, payload: Any) -> bool:
        """
        Full replace (upsert). Returns True when the user did not exist before.

        Only the structural rules apply here; the create-only charset rule does not.
        """
        dto, errors = bind_payload(UpdateUserDto, payload)
        if user_id == NIL_ID:
            raise InvalidIdentifier()
        errors = merge_errors(errors, structural_errors(dto))
        if errors:
            raise StructuralValidationFailure(errors)

        _, is_inserted = self.user_repo.update_or_insert(_to_entity(dto, user_id))
        logger.info("user %s id=%s", "created" if is_inserted else "replaced", user_id)
        return is_inserted

    def partially_update(self, user_id: UUID, document: Any) -> None:
        """Apply a JSON Patch to the user's update projection and re-validate it."""
        operations = parse_operations(document)
        user = self.user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFound(user_id)

        patched, failed_ops = patch_errors(_to_update_projection(user), operations)
        dto, binding_errors = bind_payload(UpdateUserDto, patched)
        errors = merge_errors(failed_ops, binding_errors, structural_errors(dto))
        if failed_ops:
            raise PatchApplicationFailure(errors)
        if errors:
            raise StructuralValidationFailure(errors)

        if self.persist_patches:
            self.user_repo.update_or_insert(
                user.model_copy(
                    update={"login": dto.login, "first_name": dto.first_name, "last_name": dto.last_name}
                )
            )
            logger.info("user patched id=%s", user_id)

    def delete(self, user_id: UUID) -> None:
        if self.user_repo.find_by_id(user_id) is None:
            raise UserNotFound(user_id)
        self.user_repo.delete(user_id)
        logger.info("user deleted id=%s", user_id)

    def list_users(self, page_number: int, page_size: int) -> tuple[list[UserDto], PageList[UserEntity]]:
        """One page of users (already clamped by the caller) plus the raw page for metadata."""
        page = self.user_repo.get_page(page_number, page_size)
        return [_to_user_dto(u) for u in page.items], page
