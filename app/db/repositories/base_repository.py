"""
Base repository - generic in-memory CRUD store (SOLID: Interface Segregation, Dependency Inversion).
Challenge: Safe shared state across requests, testability via fresh instances.
Design: One dict keyed by id, guarded by a lock; entities are immutable pydantic models.
"""

import logging
import threading
import uuid
from dataclasses import dataclass, field
from typing import Generic, TypeVar
from uuid import UUID

from pydantic import BaseModel

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=BaseModel)


@dataclass
class PageList(Generic[ModelType]):
    """One page of entities plus the size of the whole collection."""

    items: list[ModelType] = field(default_factory=list)
    total_count: int = 0
    current_page: int = 1
    page_size: int = 0


class InMemoryRepository(Generic[ModelType]):
    """Generic repository. Entities must expose an `id: UUID` field."""

    def __init__(self) -> None:
        self._entities: dict[UUID, ModelType] = {}
        self._lock = threading.RLock()

    def find_by_id(self, id: UUID) -> ModelType | None:
        """Fetch single entity by primary key. Used for detail endpoints."""
        with self._lock:
            return self._entities.get(id)

    def insert(self, entity: ModelType) -> ModelType:
        """Store entity under a freshly generated id and return the stored copy."""
        with self._lock:
            stored = entity.model_copy(update={"id": self._new_id()})
            self._entities[stored.id] = stored
        logger.debug("inserted %s id=%s", type(entity).__name__, stored.id)
        return stored

    def update_or_insert(self, entity: ModelType) -> tuple[ModelType, bool]:
        """Replace the entity with the same id, or add it. Returns (entity, was_inserted)."""
        with self._lock:
            is_inserted = entity.id not in self._entities
            self._entities[entity.id] = entity
        logger.debug("upserted %s id=%s inserted=%s", type(entity).__name__, entity.id, is_inserted)
        return entity, is_inserted

    def delete(self, id: UUID) -> None:
        """Remove entity; unknown ids are ignored."""
        with self._lock:
            self._entities.pop(id, None)

    def get_page(self, page_number: int, page_size: int) -> PageList[ModelType]:
        """Paginated list in insertion order. page_number is 1-based."""
        skip = (page_number - 1) * page_size
        with self._lock:
            entities = list(self._entities.values())
        return PageList(
            items=entities[skip:skip + page_size],
            total_count=len(entities),
            current_page=page_number,
            page_size=page_size,
        )

    def _new_id(self) -> UUID:
        while True:
            candidate = uuid.uuid4()
            if candidate not in self._entities:
                return candidate
