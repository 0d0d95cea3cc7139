"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api import users
from src.config import get_settings
from src.database import init_db
from src.errors import register_exception_handlers
from src.logging_config import configure_logging

settings = get_settings()
configure_logging(settings.log_level)
logger = logging.getLogger(__name__)

DESCRIPTION = """
REST API for managing users.

- List, create, read, replace and delete users
- Email addresses are unique across all users
- Every error uses the same body: `timestamp`, `status`, `error`, `message`
  and, for validation failures, `errors` keyed by field name
"""


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    logger.info(f"Starting Users API in {settings.environment} mode")
    init_db()
    yield
    logger.info("Shutting down Users API")


app = FastAPI(
    title="Users API",
    description=DESCRIPTION,
    version="1.0.0",
    contact={"name": "Development Team", "email": "dev@example.com", "url": "https://example.com"},
    license_info={"name": "MIT License", "url": "https://opensource.org/licenses/MIT"},
    lifespan=lifespan,
)

# CORS middleware for development
if settings.is_development:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

register_exception_handlers(app)

# Register routers
app.include_router(users.router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "environment": settings.environment}
