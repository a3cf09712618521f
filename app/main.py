"""
FastAPI application setup with dependency injection.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging
from contextlib import asynccontextmanager

from app.config import get_settings
from app.core.logging import configure_logging
from app.core.dependencies import service_container
from app.core.error_handlers import setup_error_handlers
from app.middleware import RequestContextMiddleware

# Get application settings
settings = get_settings()

configure_logging(
    level=settings.log_level.value,
    fmt=settings.log_format,
    log_file=settings.log_file,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan management with service container.
    Creates the guide session on startup and drops it on shutdown.
    """
    # Startup
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")

    container = getattr(app.state, "service_container", service_container)

    try:
        await container.initialize_services()
        app.state.service_container = container

        logger.info("Application startup complete")

        yield

    except Exception as e:
        logger.error(f"Application startup failed: {e}", exc_info=True)
        raise

    finally:
        # Shutdown
        logger.info("Shutting down application")

        try:
            await container.cleanup_services()
            logger.info("Application shutdown complete")

        except Exception as e:
            logger.error(f"Application shutdown failed: {e}", exc_info=True)


def create_app(container=None) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        container: Optional ServiceContainer to use instead of the global one

    Returns:
        FastAPI: Configured application instance
    """
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan
    )

    if container is not None:
        app.state.service_container = container

    # Add CORS middleware with configuration
    app.add_middleware(
        CORSMiddleware,
        **settings.get_cors_config()
    )

    # Request id and access logging
    app.add_middleware(RequestContextMiddleware)

    setup_error_handlers(app)

    @app.get("/")
    async def root():
        """Root endpoint for basic health check."""
        return {
            "message": f"Welcome to {settings.app_name}",
            "version": settings.app_version,
            "status": "running"
        }

    # Include API routers
    from app.api import guide_router, admin_router, advisor_router, health_router
    app.include_router(health_router)
    app.include_router(guide_router)
    app.include_router(admin_router)
    app.include_router(advisor_router)

    return app


# Create application instance
app = create_app()
