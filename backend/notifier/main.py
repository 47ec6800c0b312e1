"""Notifier Worker API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map NotifierError → structured JSON responses
    - Database and provider client initialized on startup via lifespan, closed on shutdown
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

import notifier.infrastructure.database as db_module
from notifier.api.error_handlers import register_error_handlers
from notifier.api.routes import health, jobs
from notifier.config import get_settings
from notifier.infrastructure.observability import setup_logging
from notifier.infrastructure.twitter_client import TwitterDirectMessageClient

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = db_module.init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    jobs.dm_client = TwitterDirectMessageClient(
        base_url=settings.twitter_api_base_url,
        timeout_seconds=settings.twitter_timeout_seconds,
    )
    logger.info("Notifier worker started")
    yield
    logger.info("Notifier worker shutting down")
    await jobs.dm_client.aclose()
    jobs.dm_client = None
    await manager.dispose()


app = FastAPI(title="Notifier Worker", version="1.0.0", lifespan=lifespan)

app.include_router(health.router)
app.include_router(jobs.router)

register_error_handlers(app)
