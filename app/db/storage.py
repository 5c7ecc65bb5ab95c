"""
User storage lifetime management.
Challenge: One shared store for the whole process, swappable per test.
Design: Dependency injection of the store (tests override get_user_repository).
"""

from typing import Annotated

from fastapi import Depends

from app.db.repositories.user_repository import InMemoryUserRepository, UserStore

# Shared store, created on first use (same lifetime as the process)
_user_repository: InMemoryUserRepository | None = None


def get_user_repository() -> UserStore:
    """Return the process-wide user store. Used as FastAPI dependency."""
    global _user_repository
    if _user_repository is None:
        _user_repository = InMemoryUserRepository()
    return _user_repository


# Type alias for FastAPI dependency injection
UserRepo = Annotated[UserStore, Depends(get_user_repository)]
