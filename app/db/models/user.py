"""
User model - the stored record behind the /api/users resource.
"""

from uuid import UUID

from pydantic import BaseModel

NIL_ID = UUID(int=0)


class UserEntity(BaseModel):
    """User entity. Immutable: storage and services build new instances via model_copy."""

    model_config = {"frozen": True}

    id: UUID = NIL_ID
    login: str
    last_name: str
    first_name: str
    # Owned by game-session logic; the users API never sets these
    games_played: int = 0
    current_game_id: UUID | None = None

    def __repr__(self) -> str:
        return f"<UserEntity(id={self.id}, login={self.login})>"
