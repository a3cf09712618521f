"""
Health check API endpoint.

- GET /health: translator availability, advisor configuration and the
  languages currently held in the translation cache, plus error counts
"""

from fastapi import APIRouter, Request
import logging

from app.models.api_models import HealthCheckResponse
from app.core.dependencies import service_container
from app.core.error_handlers import error_handler
from app.config.settings import settings

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthCheckResponse,
    summary="Basic health check",
    description="Returns application health with translator and advisor status"
)
async def health_check(request: Request) -> HealthCheckResponse:
    container = getattr(request.app.state, "service_container", service_container)

    if not container.initialized:
        return HealthCheckResponse(
            status="unhealthy",
            version=settings.app_version,
            translator="unavailable",
            advisor_configured=False,
        )

    translator = container.get_translator()
    session = container.get_guide_session()

    try:
        translator_healthy = await translator.health_check()
    except Exception as e:
        logger.error(f"Translator health check failed: {e}")
        translator_healthy = False

    return HealthCheckResponse(
        status="healthy" if translator_healthy else "degraded",
        version=settings.app_version,
        translator=translator.name,
        advisor_configured=container.get_advisor().configured,
        cached_languages=[language.value for language in session.cache.languages()],
        error_statistics=error_handler.get_error_statistics(),
    )
