"""Threadboard API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ThreadboardError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: cleaner startup/shutdown pairing
    - Error handlers live in api/error_handlers.py
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from threadboard.api.error_handlers import register_error_handlers
from threadboard.infrastructure import database
from threadboard.infrastructure.observability import setup_logging
from threadboard.config import get_settings
from threadboard.api.routes import (
    admin, health, notifications, questions, replies, reports,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    database.init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Threadboard API started")
    yield
    if database.db_manager:
        await database.db_manager.dispose()
    logger.info("Threadboard API shutting down")


app = FastAPI(
    title="Threadboard API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes: explicit registration
app.include_router(health.router)
app.include_router(questions.router)
app.include_router(replies.router)
app.include_router(notifications.router)
app.include_router(reports.router)
app.include_router(admin.router)

register_error_handlers(app)
