"""
Dependency injection setup for FastAPI.
Provides the guide session and advisor to endpoints with lifecycle management.
"""

from fastapi import Request
from typing import Optional
import logging
import asyncio

from app.config.settings import Settings, settings as default_settings
from app.services.advisor_service import AdvisorService
from app.services.guide_session import GuideSession
from app.services.translation_service import BaseTranslationModel, create_translation_model


logger = logging.getLogger(__name__)


class ServiceContainer:
    """
    Container for the single in-memory guide session and its collaborators.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        translator: Optional[BaseTranslationModel] = None,
        advisor: Optional[AdvisorService] = None,
    ):
        self.settings = settings or default_settings
        self._translator = translator
        self._advisor = advisor
        self._guide_session: Optional[GuideSession] = None
        self._initialized = False
        self._initialization_lock = asyncio.Lock()

    @property
    def initialized(self) -> bool:
        return self._initialized

    async def initialize_services(self) -> None:
        """Create the translator, advisor and guide session once."""
        async with self._initialization_lock:
            if self._initialized:
                return

            logger.info("Initializing service container")

            try:
                if self._translator is None:
                    self._translator = create_translation_model(self.settings.gemini)
                if self._advisor is None:
                    self._advisor = AdvisorService(self.settings.gemini)

                self._guide_session = GuideSession(
                    translator=self._translator,
                    config=self.settings.guide,
                )

                self._initialized = True
                logger.info(
                    f"Service container initialization completed (translator={self._translator.name})"
                )

            except Exception as e:
                logger.error(f"Service container initialization failed: {e}", exc_info=True)
                raise

    async def cleanup_services(self) -> None:
        """Drop the session; all guide data is in memory only."""
        logger.info("Cleaning up service container")
        self._guide_session = None
        self._initialized = False
        logger.info("Service container cleanup completed")

    def get_guide_session(self) -> GuideSession:
        if not self._initialized or self._guide_session is None:
            raise RuntimeError("Service container not initialized")
        return self._guide_session

    def get_translator(self) -> BaseTranslationModel:
        if not self._initialized or self._translator is None:
            raise RuntimeError("Service container not initialized")
        return self._translator

    def get_advisor(self) -> AdvisorService:
        if not self._initialized or self._advisor is None:
            raise RuntimeError("Service container not initialized")
        return self._advisor


# Global service container instance
service_container = ServiceContainer()


def _container(request: Request) -> ServiceContainer:
    return getattr(request.app.state, "service_container", service_container)


def get_guide_session(request: Request) -> GuideSession:
    """FastAPI dependency for the guide session."""
    return _container(request).get_guide_session()


def get_admin_session(request: Request) -> GuideSession:
    """FastAPI dependency for endpoints that need admin mode."""
    session = get_guide_session(request)
    session.admin.require_authenticated()
    return session


def get_advisor(request: Request) -> AdvisorService:
    """FastAPI dependency for the chat advisor."""
    return _container(request).get_advisor()
