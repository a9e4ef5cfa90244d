"""
Main Application - Main Layer

Builds the FastAPI application: logging from the loaded settings, the
dependency container, and the session, prediction, history and system
routers.
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cvd_platform.main.config import get_settings
from cvd_platform.main.container import app_lifespan, init_container
from cvd_platform.presentation.controllers import (
    history_router,
    predictions_router,
    session_router,
    system_router,
)
from cvd_platform.shared import get_logger, update_logging_from_settings

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the persisted history on startup, release storage on shutdown."""
    app.state.started_at = datetime.now(timezone.utc)
    logger.info("app.startup", title=app.title, version=app.version)

    async with app_lifespan() as container:
        app.state.container = container
        yield

    logger.info("app.shutdown")


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Settings are read on every call, so tests can build an app per
    environment.
    """
    settings = get_settings()
    update_logging_from_settings(settings)

    init_container(settings)

    app = FastAPI(
        title=settings.app.title,
        description=settings.app.description,
        version=settings.app.version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    for router in (session_router, predictions_router, history_router, system_router):
        app.include_router(router)

    logger.info(
        "app.created",
        environment=str(getattr(settings.environment, "value", settings.environment)),
        history_backend=str(
            getattr(settings.history.backend, "value", settings.history.backend)
        ),
    )
    return app


app = create_app()
