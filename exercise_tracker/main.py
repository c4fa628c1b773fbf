"""Exercise Tracker API: FastAPI application factory and entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ExerciseTrackerError -> {"error": ...} JSON
    - CORS configured from settings (any origin, GET/POST by default)
    - The session manager lives on app.state; handlers reach it only via get_db

Design Decisions:
    - create_app(settings, db_manager): the store connection is a constructed
      dependency; tests pass an in-memory manager, production lets lifespan build one
    - Lifespan over @app.on_event: cleaner startup/shutdown pairing
    - An injected manager is owned by the caller and not disposed on shutdown
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from exercise_tracker.api.error_handlers import register_error_handlers
from exercise_tracker.api.routes import exercises, health, pages, users
from exercise_tracker.config import Settings, get_settings
from exercise_tracker.infrastructure.database import DatabaseSessionManager
from exercise_tracker.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)

    owned = app.state.db_manager is None
    if owned:
        app.state.db_manager = DatabaseSessionManager(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )
    await app.state.db_manager.create_schema()
    logger.info("Connected to database")
    logger.info(f"Exercise Tracker API started on port {settings.port}")
    yield
    logger.info("Exercise Tracker API shutting down")
    if owned:
        await app.state.db_manager.close()
        app.state.db_manager = None


def create_app(
    settings: Settings | None = None,
    db_manager: DatabaseSessionManager | None = None,
) -> FastAPI:
    """Build the application around the given settings and store connection."""
    settings = settings or get_settings()

    app = FastAPI(
        title="Exercise Tracker API", version=API_VERSION, lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.db_manager = db_manager

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=settings.cors_methods,
        allow_headers=["*"],
    )

    app.include_router(pages.router)
    app.include_router(health.router)
    app.include_router(users.router)
    app.include_router(exercises.router)

    register_error_handlers(app)
    return app


app = create_app()
