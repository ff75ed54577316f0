"""Eventboard API: FastAPI application entry point.

Invariants:
    - Routers registered explicitly (no auto-discovery)
    - The record store and notification bus are built once in the lifespan and
      published on app.state; the GraphQL context reads them from there
    - Global error handlers map EventboardError to structured JSON responses
    - CORS configured from settings (not hardcoded)

Design Decisions:
    - Lifespan context manager owns startup/shutdown of the bus connections
    - A broken seed fixture aborts startup (FixtureLoadError)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from eventboard.api.error_handlers import register_error_handlers
from eventboard.api.gateway.schema import build_graphql_router
from eventboard.api.routes import health, records
from eventboard.config import Settings, get_settings
from eventboard.core.boundary_protocols import NotificationBus
from eventboard.infrastructure.fixture_loader import build_seeded_store
from eventboard.infrastructure.memory_bus import InMemoryNotificationBus
from eventboard.infrastructure.observability import setup_logging
from eventboard.infrastructure.redis_bus import RedisNotificationBus

logger = logging.getLogger(__name__)


def build_notification_bus(settings: Settings) -> NotificationBus:
    if settings.notification_backend == "memory":
        return InMemoryNotificationBus()
    return RedisNotificationBus.connect(
        host=settings.redis_uri,
        port=settings.redis_port,
        password=settings.redis_pass,
        step_ms=settings.redis_backoff_step_ms,
        cap_ms=settings.redis_backoff_cap_ms,
        max_pending=settings.redis_max_pending_publishes,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    app.state.store = build_seeded_store(settings.fixture_path)
    app.state.bus = build_notification_bus(settings)
    logger.info(
        f"Server is running on {settings.host}:{settings.port} "
        f"({settings.notification_backend} notifications)",
    )
    yield
    await app.state.bus.close()
    logger.info("Eventboard API shutting down")


app = FastAPI(
    title="Eventboard API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(records.router)
app.include_router(build_graphql_router(), prefix="/graphql")

register_error_handlers(app)
