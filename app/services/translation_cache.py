"""
Process-lifetime cache of translated snapshots keyed by language.

An entry only counts as a hit while its spot count equals the current
source spot count. Edits that keep the count are not detected, so every
spot or category mutation must call invalidate().
"""

import logging
from typing import Dict, List, Optional

from app.schemas.spot import Language, TranslatedSnapshot

logger = logging.getLogger(__name__)


class TranslationCache:
    def __init__(self):
        self._entries: Dict[Language, TranslatedSnapshot] = {}
        self.hits = 0
        self.misses = 0
        self.invalidations = 0

    def get(self, language: Language, source_spot_count: int) -> Optional[TranslatedSnapshot]:
        snapshot = self._entries.get(language)
        if snapshot is not None and snapshot.spot_count == source_spot_count:
            self.hits += 1
            logger.debug(f"Translation cache hit for {language.value}")
            return snapshot

        self.misses += 1
        if snapshot is not None:
            logger.info(
                f"Translation cache entry for {language.value} is stale "
                f"({snapshot.spot_count} spots cached, {source_spot_count} in source)"
            )
        return None

    def put(self, language: Language, snapshot: TranslatedSnapshot) -> None:
        self._entries[language] = snapshot

    def invalidate(self) -> None:
        if self._entries:
            logger.info(f"Invalidating cached translations: {sorted(l.value for l in self._entries)}")
        self._entries.clear()
        self.invalidations += 1

    def languages(self) -> List[Language]:
        return list(self._entries)

    def __contains__(self, language: Language) -> bool:
        return language in self._entries

    def __len__(self) -> int:
        return len(self._entries)
