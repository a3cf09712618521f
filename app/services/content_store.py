"""
Content store: the home-language source of truth for the guide.

Spots, categories, neighborhoods and menu labels live here for the lifetime
of the process. Every mutation replaces the affected list instead of editing
it in place, so a display projection holding the previous list keeps a
consistent view. Cache invalidation is the caller's job.

``version`` counts changes to translatable content (spots and categories).
Neighborhoods and labels are never translated and leave it alone.
"""

import logging
import time
from typing import List, Optional

from app.core.exceptions import (
    DuplicateCategoryError,
    DuplicateNeighborhoodError,
    InvalidCategoryError,
    InvalidNeighborhoodError,
    SpotNotFoundError,
)
from app.schemas.spot import CategoryConfig, MenuLabels, Spot
from app.services.seed_data import FEATURED_SPOTS, INITIAL_CATEGORIES, INITIAL_NEIGHBORHOODS

logger = logging.getLogger(__name__)


class ContentStore:
    """In-memory spots, categories, neighborhoods and menu labels."""

    def __init__(
        self,
        spots: Optional[List[Spot]] = None,
        categories: Optional[List[CategoryConfig]] = None,
        neighborhoods: Optional[List[str]] = None,
        labels: Optional[MenuLabels] = None,
    ):
        self._spots: List[Spot] = list(spots or [])
        self._categories: List[CategoryConfig] = list(categories or [])
        self._neighborhoods: List[str] = list(neighborhoods or [])
        self._labels = labels or MenuLabels()
        self.version = 0

    @classmethod
    def with_seed_data(cls) -> "ContentStore":
        return cls(
            spots=[spot.model_copy(deep=True) for spot in FEATURED_SPOTS],
            categories=[category.model_copy() for category in INITIAL_CATEGORIES],
            neighborhoods=list(INITIAL_NEIGHBORHOODS),
        )

    @property
    def spots(self) -> List[Spot]:
        return self._spots

    @property
    def categories(self) -> List[CategoryConfig]:
        return self._categories

    @property
    def neighborhoods(self) -> List[str]:
        return self._neighborhoods

    @property
    def labels(self) -> MenuLabels:
        return self._labels

    def _touch(self) -> None:
        self.version += 1

    def next_spot_id(self) -> str:
        """Millisecond timestamp id, bumped until unused."""
        candidate = int(time.time() * 1000)
        existing = {spot.id for spot in self._spots}
        while str(candidate) in existing:
            candidate += 1
        return str(candidate)

    # Spots

    def get_spot(self, spot_id: str) -> Spot:
        for spot in self._spots:
            if spot.id == spot_id:
                return spot
        raise SpotNotFoundError(spot_id)

    def add_spot(self, spot: Spot) -> Spot:
        """Newest spots are listed first."""
        self._spots = [spot, *self._spots]
        self._touch()
        logger.info(f"Added spot {spot.id} '{spot.name}' ({len(self._spots)} spots)")
        return spot

    def remove_spot(self, spot_id: str) -> Spot:
        spot = self.get_spot(spot_id)
        self._spots = [s for s in self._spots if s.id != spot_id]
        self._touch()
        logger.info(f"Removed spot {spot_id} ({len(self._spots)} spots)")
        return spot

    # Neighborhoods

    def add_neighborhood(self, name: str) -> str:
        name = (name or "").strip()
        if not name:
            raise InvalidNeighborhoodError()
        if name in self._neighborhoods:
            raise DuplicateNeighborhoodError(name)
        self._neighborhoods = [*self._neighborhoods, name]
        return name

    def remove_neighborhood(self, name: str) -> None:
        self._neighborhoods = [n for n in self._neighborhoods if n != name]

    # Categories

    def add_category(self, category: CategoryConfig) -> CategoryConfig:
        name = (category.name or "").strip()
        icon = (category.icon or "").strip()
        missing = [field for field, value in (("name", name), ("icon", icon)) if not value]
        if missing:
            raise InvalidCategoryError(missing)
        if any(c.name == name for c in self._categories):
            raise DuplicateCategoryError(name)

        category = category.model_copy(update={"name": name, "icon": icon})
        self._categories = [*self._categories, category]
        self._touch()
        logger.info(f"Added category '{name}'")
        return category

    def remove_category(self, name: str) -> None:
        # Spots keep referencing the removed name.
        self._categories = [c for c in self._categories if c.name != name]
        self._touch()

    # Labels

    def update_labels(self, categories: Optional[str] = None, neighborhoods: Optional[str] = None) -> MenuLabels:
        update = {}
        if categories is not None:
            update["categories"] = categories
        if neighborhoods is not None:
            update["neighborhoods"] = neighborhoods
        self._labels = self._labels.model_copy(update=update)
        return self._labels
