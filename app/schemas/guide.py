"""Request and view models for the guide, admin and advisor endpoints."""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from app.schemas.spot import CategoryConfig, Language, MenuLabels, Spot


class LanguageUpdate(BaseModel):
    language: Language


class FilterUpdate(BaseModel):
    category: Optional[str] = None
    neighborhood: Optional[str] = None
    query: Optional[str] = None


class FilterRead(BaseModel):
    category: str
    neighborhood: str
    query: str
    active: bool


class CategoryView(CategoryConfig):
    """Category with the badge text color and icon kind resolved for rendering."""
    text_color: str
    icon_is_image: bool


class GuideView(BaseModel):
    language: Language
    displayed_language: Language
    loading: bool
    filters: FilterRead
    labels: MenuLabels
    categories: List[CategoryView]
    neighborhoods: List[str]
    spots: List[Spot]
    total_results: int
    is_admin: bool
    current_date: str


class LoginRequest(BaseModel):
    user: str = ""
    password: str = Field(default="", alias="pass")

    model_config = {"populate_by_name": True}


class AdminStatus(BaseModel):
    authenticated: bool
    login_error: bool


class SpotCreate(BaseModel):
    """Admin spot form. Images come from the spot draft."""
    name: str = Field(min_length=1)
    description: str = ""
    category: str
    neighborhood: str
    address: Optional[str] = None
    rating: float = Field(default=5, ge=0, le=5)
    link: Optional[str] = None


class DraftRead(BaseModel):
    images: List[str]
    max_images: int


class ImageUrlRequest(BaseModel):
    url: str


class NeighborhoodCreate(BaseModel):
    name: str = ""


class CategoryCreate(BaseModel):
    name: str = ""
    icon: str = ""
    color: Optional[str] = None


class IconRead(BaseModel):
    icon: str


class MenuLabelsUpdate(BaseModel):
    categories: Optional[str] = None
    neighborhoods: Optional[str] = None


class ChatMessage(BaseModel):
    role: Literal["user", "model"]
    text: str


class ChatRequest(BaseModel):
    prompt: str = Field(min_length=1)
