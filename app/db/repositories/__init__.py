# Repository pattern: abstract data access (SOLID - Dependency Inversion)

from app.db.repositories.base_repository import InMemoryRepository, PageList
from app.db.repositories.user_repository import InMemoryUserRepository, UserStore

__all__ = ["InMemoryRepository", "InMemoryUserRepository", "PageList", "UserStore"]
