"""Content records shown by the guide: spots, categories and menu labels."""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class Language(str, Enum):
    """Display languages. Portuguese is the home language of the content."""
    PORTUGUESE = "pt"
    ENGLISH = "en"
    SPANISH = "es"


LANGUAGE_NAMES = {
    Language.PORTUGUESE: "Portuguese",
    Language.ENGLISH: "English",
    Language.SPANISH: "Spanish",
}


class Spot(BaseModel):
    id: str
    name: str
    description: str = ""
    category: str
    address: Optional[str] = None
    images: List[str] = Field(default_factory=list)
    rating: float = 5
    neighborhood: str
    link: Optional[str] = None


class CategoryConfig(BaseModel):
    name: str
    icon: str
    color: str = "#3b82f6"


class MenuLabels(BaseModel):
    """Sidebar section titles editable from the admin panel."""
    categories: str = "Categorias"
    neighborhoods: str = "Bairros"


class TranslatedSnapshot(BaseModel):
    """Spots and categories for one target language, aligned by position to the source lists."""
    language: Language
    spots: List[Spot]
    categories: List[CategoryConfig]

    @property
    def spot_count(self) -> int:
        return len(self.spots)
