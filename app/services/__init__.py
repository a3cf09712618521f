# Business logic services

from .content_store import ContentStore
from .translation_cache import TranslationCache
from .translation_service import (
    BaseTranslationModel,
    GeminiTranslationModel,
    MockTranslationModel,
    create_translation_model,
)
from .display_projector import DisplayProjector, Projection
from .filter_engine import FilterState, filter_spots
from .admin_session import AdminSession
from .spot_draft import SpotDraft
from .advisor_service import AdvisorService
from .guide_session import GuideSession

__all__ = [
    'ContentStore',
    'TranslationCache',
    'BaseTranslationModel',
    'GeminiTranslationModel',
    'MockTranslationModel',
    'create_translation_model',
    'DisplayProjector',
    'Projection',
    'FilterState',
    'filter_spots',
    'AdminSession',
    'SpotDraft',
    'AdvisorService',
    'GuideSession',
]
