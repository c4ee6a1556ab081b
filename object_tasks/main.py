"""Object Tasks API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ObjectTasksError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Logging configured on startup via lifespan context manager
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from object_tasks.api.error_handlers import register_error_handlers
from object_tasks.api.routes import exercises, health, objects, selectors
from object_tasks.config import get_settings
from object_tasks.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info("Object Tasks API started")
    yield
    logger.info("Object Tasks API shutting down")


settings = get_settings()
app = FastAPI(
    title="Object Tasks API", version=settings.service_version, lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(objects.router)
app.include_router(exercises.router)
app.include_router(selectors.router)

register_error_handlers(app)
