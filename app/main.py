"""
FastAPI application entry point.
Challenge: Mount routes, middleware (Prometheus, CORS), error handlers, logging.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import make_asgi_app

from app.api.errors import register_exception_handlers
from app.api.router import api_router
from app.config import get_settings
from app.core.logging_config import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown hooks. The user store is in memory, so there is nothing to open."""
    logger.info("%s starting", app.title)
    yield
    logger.info("%s stopped", app.title)


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging("DEBUG" if settings.debug else settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        description="User accounts REST API: CRUD, JSON Patch, paginated listing with X-Pagination links.",
        version="1.0.0",
        lifespan=lifespan,
    )

    # CORS for frontend/API consumers
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Location", "X-Pagination"],
    )

    # Prometheus metrics at /metrics
    metrics_app = make_asgi_app()
    app.mount("/metrics", metrics_app)

    app.include_router(api_router, prefix="/api")
    register_exception_handlers(app)

    return app


app = create_app()
