"""
Pytest fixtures - isolated user store, settings and client (TDD/BDD support).
Challenge: Isolated tests; every test gets its own in-memory store.
"""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.config import Settings, get_settings
from app.db.models.user import UserEntity
from app.db.repositories.user_repository import InMemoryUserRepository
from app.db.storage import get_user_repository
from app.main import app


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def settings() -> Settings:
    return Settings(persist_patches=False)


@pytest_asyncio.fixture
async def client(user_repository: InMemoryUserRepository, settings: Settings):
    app.dependency_overrides[get_user_repository] = lambda: user_repository
    app.dependency_overrides[get_settings] = lambda: settings
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def existing_user(user_repository: InMemoryUserRepository) -> UserEntity:
    return user_repository.insert(
        UserEntity(login="johndoe", first_name="John", last_name="Doe", games_played=7)
    )
