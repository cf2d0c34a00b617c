"""FastAPI application factory.

Usage:
    # Development
    uvicorn seasonteams.api.app:create_app --factory --reload

    # Production
    uvicorn seasonteams.api.app:create_app --factory --host 0.0.0.0
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from seasonteams import configure_logging, get_logger
from seasonteams.api.middleware import RequestContextMiddleware
from seasonteams.api.routes import health_router, home_router, teams_router
from seasonteams.config import get_settings

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan - startup and shutdown."""
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_format.value)
    logger.info(
        "app_starting",
        environment=settings.environment.value,
        supabase_url=settings.supabase_url,
    )
    yield
    logger.info("app_shutdown")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="Season Teams",
        description="Teams taking part in a seasonal program",
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs" if not settings.is_production else None,
        redoc_url="/redoc" if not settings.is_production else None,
    )

    app.add_middleware(RequestContextMiddleware)

    app.include_router(health_router)
    app.include_router(home_router)
    app.include_router(teams_router)

    return app
