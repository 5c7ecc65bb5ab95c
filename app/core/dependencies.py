"""
FastAPI dependencies - injection for storage, settings, request parsing (SOLID: Dependency Inversion).
Challenge: Lenient parsing so endpoints decide between 400 and 422 themselves.
"""

import json
from typing import Annotated, Any
from uuid import UUID

from fastapi import Depends, Request

from app.config import Settings, get_settings
from app.db.models.user import NIL_ID
from app.db.storage import UserRepo
from app.services.user_service import UserService

AppSettings = Annotated[Settings, Depends(get_settings)]


async def read_json_body(request: Request) -> Any:
    """Decoded JSON body, or None when it is absent or not valid JSON."""
    raw = await request.body()
    if not raw.strip():
        return None
    try:
        return json.loads(raw)
    except ValueError:
        return None


def resolve_user_id(user_id: str) -> UUID:
    """Path segment -> UUID. Anything unparsable becomes the nil id, which never matches a user."""
    try:
        return UUID(user_id)
    except ValueError:
        return NIL_ID


def get_user_service(user_repo: UserRepo, settings: AppSettings) -> UserService:
    """Factory for service with repository injection (Dependency Inversion)."""
    return UserService(user_repo, persist_patches=settings.persist_patches)


JsonBody = Annotated[Any, Depends(read_json_body)]
UserId = Annotated[UUID, Depends(resolve_user_id)]
Users = Annotated[UserService, Depends(get_user_service)]
