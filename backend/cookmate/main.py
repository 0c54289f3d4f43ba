"""CookMate API — FastAPI application entry point.

Invariants:
    - Settings validated when this module is imported: missing configuration raises
      ConfigurationError before uvicorn binds a socket
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map CookmateError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Access logging as a plain HTTP middleware (observability.log_requests)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cookmate.api.error_handlers import register_error_handlers
from cookmate.infrastructure import database
from cookmate.infrastructure.observability import setup_logging, log_requests
from cookmate.config import get_settings
from cookmate.api.routes import (
    accounts,
    health,
    requirements,
    services,
    translation,
    verification,
    worker_profile,
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
    logger.info("CookMate API started")
    yield
    if database.db_manager:
        await database.db_manager.dispose()
    logger.info("CookMate API shutting down")


app = FastAPI(
    title="CookMate API", version="1.0.0", lifespan=lifespan,
)

# CORS — configured from settings, not hardcoded
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.middleware("http")(log_requests)

# Routes — explicit registration
app.include_router(health.router)
app.include_router(accounts.router)
app.include_router(worker_profile.router)
app.include_router(services.router)
app.include_router(requirements.router)
app.include_router(translation.router)
app.include_router(verification.router)

register_error_handlers(app)
