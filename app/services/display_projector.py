"""
Display projection: which spots and categories are actually shown.

For the home language the projection is the content store itself. For any
other language it is a translated snapshot, taken from the translation
cache or fetched from the translator. A failed translation falls back to the
untranslated source data.

Projections can overlap while a translation is in flight. Each attempt gets
a token from a monotonically increasing counter and only the latest attempt
may replace the current projection; older completions are dropped.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from app.schemas.spot import CategoryConfig, Language, Spot
from app.services.content_store import ContentStore
from app.services.translation_cache import TranslationCache
from app.services.translation_service import BaseTranslationModel

logger = logging.getLogger(__name__)


@dataclass
class Projection:
    language: Language
    spots: List[Spot]
    categories: List[CategoryConfig]
    translated: bool = False
    from_cache: bool = False
    token: int = 0


class DisplayProjector:
    def __init__(
        self,
        store: ContentStore,
        cache: TranslationCache,
        translator: BaseTranslationModel,
        home_language: Language = Language.PORTUGUESE,
    ):
        self.store = store
        self.cache = cache
        self.translator = translator
        self.home_language = home_language
        self.loading = False
        self.translator_calls = 0
        self._latest_token = 0
        self.current = self._source_projection(home_language, token=0)

    def _source_projection(self, language: Language, token: int) -> Projection:
        return Projection(
            language=language,
            spots=self.store.spots,
            categories=self.store.categories,
            token=token,
        )

    def _apply(self, projection: Projection) -> Projection:
        self.current = projection
        return projection

    async def project(self, language: Language) -> Optional[Projection]:
        """
        Project the store into ``language``.

        Returns the applied projection, or None when a newer projection was
        started while this one waited on the translator.
        """
        self._latest_token += 1
        token = self._latest_token

        if language == self.home_language:
            self.loading = False
            return self._apply(self._source_projection(language, token))

        source_spots = self.store.spots
        source_categories = self.store.categories
        source_version = self.store.version

        cached = self.cache.get(language, len(source_spots))
        if cached is not None:
            self.loading = False
            return self._apply(Projection(
                language=language,
                spots=cached.spots,
                categories=cached.categories,
                translated=True,
                from_cache=True,
                token=token,
            ))

        self.loading = True
        self.translator_calls += 1
        try:
            snapshot = await self.translator.translate(source_spots, source_categories, language)
        except Exception as e:
            logger.error(f"Translation to {language.value} failed, showing source content: {e}", exc_info=True)
            if token != self._latest_token:
                return None
            self.loading = False
            return self._apply(self._source_projection(self.home_language, token))

        if self.store.version == source_version:
            self.cache.put(language, snapshot)
        else:
            logger.info(f"Content changed during {language.value} translation, result not cached")

        if token != self._latest_token:
            logger.info(f"Discarding stale {language.value} translation (token {token}, latest {self._latest_token})")
            return None

        self.loading = False
        return self._apply(Projection(
            language=language,
            spots=snapshot.spots,
            categories=snapshot.categories,
            translated=True,
            token=token,
        ))
