"""Filtering of the displayed spots by category, neighborhood and search text."""

from dataclasses import dataclass
from typing import Iterable, List

from app.schemas.spot import Spot

ALL = "all"


def matches(spot: Spot, category: str = ALL, neighborhood: str = ALL, query: str = "") -> bool:
    if category != ALL and spot.category != category:
        return False
    if neighborhood != ALL and spot.neighborhood != neighborhood:
        return False
    needle = (query or "").lower()
    return needle in spot.name.lower() or needle in (spot.description or "").lower()


def filter_spots(
    spots: Iterable[Spot],
    category: str = ALL,
    neighborhood: str = ALL,
    query: str = "",
) -> List[Spot]:
    """Visible subset in display order. "all" and an empty query match everything."""
    return [spot for spot in spots if matches(spot, category, neighborhood, query)]


@dataclass
class FilterState:
    category: str = ALL
    neighborhood: str = ALL
    query: str = ""

    @property
    def active(self) -> bool:
        return self.category != ALL or self.neighborhood != ALL

    def apply(self, spots: Iterable[Spot]) -> List[Spot]:
        return filter_spots(spots, self.category, self.neighborhood, self.query)

    def reset(self) -> None:
        self.category = ALL
        self.neighborhood = ALL
        self.query = ""
