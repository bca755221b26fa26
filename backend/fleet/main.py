"""Fleet Rental API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map FleetError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager; schema and
      demo car created there when enabled

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Three error handler layers (see api/error_handlers.py) — never leaks internal details
    - run() serves on the configured fixed port via uvicorn
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fleet.api.error_handlers import register_error_handlers
from fleet.api.routes import cars, health
from fleet.config import get_settings
from fleet.infrastructure.database import init_db
from fleet.infrastructure.observability import setup_logging
from fleet.services.rental_service import DEMO_CAR, RentalService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.auto_create_schema:
        await manager.create_schema()
    if settings.seed_demo_fleet:
        await RentalService(manager).ensure_car(DEMO_CAR)
    logger.info("Fleet API started")
    yield
    logger.info("Fleet API shutting down")
    await manager.dispose()


app = FastAPI(
    title="Fleet Rental API", version="1.0.0", lifespan=lifespan,
)

# CORS: configured from settings, not hardcoded
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes: explicit registration
app.include_router(health.router)
app.include_router(cars.router)

register_error_handlers(app)


def run() -> None:
    """Serve the API on the configured host and port."""
    settings = get_settings()
    uvicorn.run(
        "fleet.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
