"""
User repository - encapsulates all user data access (SOLID: Single Responsibility).
Challenge: Keep the storage contract small so the service never depends on a concrete store.
"""

from typing import Protocol
from uuid import UUID

from app.db.models.user import UserEntity
from app.db.repositories.base_repository import InMemoryRepository, PageList


class UserStore(Protocol):
    """
    Storage capabilities the users service relies on.

    Implementations serialize their own mutations; callers issue one call per
    step and never hold a lock across calls.
    """

    def find_by_id(self, id: UUID) -> UserEntity | None:
        ...

    def insert(self, entity: UserEntity) -> UserEntity:
        """Persist a new user under a generated id."""
        ...

    def update_or_insert(self, entity: UserEntity) -> tuple[UserEntity, bool]:
        """Replace or add the user with `entity.id`; second item is True when added."""
        ...

    def delete(self, id: UUID) -> None:
        ...

    def get_page(self, page_number: int, page_size: int) -> PageList[UserEntity]:
        ...


class InMemoryUserRepository(InMemoryRepository[UserEntity]):
    """Process-local user store. Base CRUD already covers every UserStore capability."""

    pass
