"""
Health checks - for load balancers, Kubernetes, and monitoring.
Challenge: Fast liveness; readiness reports whether the user store is reachable.
"""

from fastapi import APIRouter

from app.config import get_settings
from app.db.storage import UserRepo

router = APIRouter()
settings = get_settings()


@router.get("")
async def health():
    """Liveness: is the process up?"""
    return {"status": "ok", "app": settings.app_name}


@router.get("/ready")
async def ready(user_repo: UserRepo):
    """Readiness: can accept traffic? Touches the user store once."""
    user_repo.get_page(1, 1)
    return {"status": "ready"}
