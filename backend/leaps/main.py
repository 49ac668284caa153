"""LEAPS Payload API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map LeapsError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Logging configured on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Error handlers live in api/error_handlers.py; main only wires them
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from leaps.api.error_handlers import register_error_handlers
from leaps.api.routes import health, payloads
from leaps.config import get_settings
from leaps.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info("LEAPS payload API started")
    yield
    logger.info("LEAPS payload API shutting down")


settings = get_settings()
app = FastAPI(
    title="LEAPS Payload API", version=settings.service_version, lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes: explicit registration
app.include_router(health.router)
app.include_router(payloads.router)

register_error_handlers(app)
