"""Rendering helpers for category badges and the guide view."""

from datetime import date
from typing import List, Optional

from app.schemas.guide import CategoryView, FilterRead, GuideView
from app.schemas.spot import CategoryConfig
from app.services.guide_session import GuideSession
from app.services.image_processor import is_image_reference


def contrast_color(hex_color: str) -> str:
    """Black or white text for a badge background, by YIQ brightness."""
    if not hex_color:
        return "#000000"
    try:
        r = int(hex_color[1:3], 16)
        g = int(hex_color[3:5], 16)
        b = int(hex_color[5:7], 16)
    except ValueError:
        return "#000000"
    yiq = (r * 299 + g * 587 + b * 114) / 1000
    return "#000000" if yiq >= 128 else "#ffffff"


_WEEKDAYS = (
    "segunda-feira", "terça-feira", "quarta-feira", "quinta-feira",
    "sexta-feira", "sábado", "domingo",
)
_MONTHS = ("jan.", "fev.", "mar.", "abr.", "mai.", "jun.", "jul.", "ago.", "set.", "out.", "nov.", "dez.")


def formatted_date(day: Optional[date] = None) -> str:
    """Header date in lowercase Brazilian Portuguese, e.g. "sábado, 1 de mar. de 2025"."""
    day = day or date.today()
    return f"{_WEEKDAYS[day.weekday()]}, {day.day} de {_MONTHS[day.month - 1]} de {day.year}"


def category_views(categories: List[CategoryConfig]) -> List[CategoryView]:
    return [
        CategoryView(
            **category.model_dump(),
            text_color=contrast_color(category.color),
            icon_is_image=is_image_reference(category.icon),
        )
        for category in categories
    ]


def filter_view(session: GuideSession) -> FilterRead:
    return FilterRead(
        category=session.filters.category,
        neighborhood=session.filters.neighborhood,
        query=session.filters.query,
        active=session.filters.active,
    )


def build_guide_view(session: GuideSession) -> GuideView:
    visible = session.visible_spots()
    return GuideView(
        language=session.language,
        displayed_language=session.display.language,
        loading=session.loading,
        filters=filter_view(session),
        labels=session.store.labels,
        categories=category_views(session.display_categories),
        neighborhoods=session.store.neighborhoods,
        spots=visible,
        total_results=len(visible),
        is_admin=session.admin.is_authenticated,
        current_date=formatted_date(),
    )
