"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from user_registry.api import users
from user_registry.api.error_handlers import register_error_handlers
from user_registry.config import get_settings
from user_registry.observability import setup_logging
from user_registry.services.registry import UserRegistry, get_registry

logger = logging.getLogger(__name__)

SAMPLE_USERS = [
    ("Alice Johnson", "alice@example.com"),
    ("Bob Smith", "bob@example.com"),
    ("Charlie Brown", "charlie@example.com"),
]


def seed_sample_users(registry: UserRegistry) -> None:
    """Create the sample users used for demos."""
    for name, email in SAMPLE_USERS:
        registry.create(name, email)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    settings = get_settings()
    setup_logging(settings.log_level)
    if settings.seed_sample_users:
        seed_sample_users(get_registry())
        logger.info(f"Seeded {len(SAMPLE_USERS)} sample users")
    logger.info("User registry API started")
    yield
    logger.info("User registry API shutting down")


app = FastAPI(
    title="User Registry API",
    description="In-memory user registry with soft-delete",
    version="0.1.0",
    lifespan=lifespan,
)

register_error_handlers(app)

# Register routers
app.include_router(users.router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "environment": get_settings().environment}
