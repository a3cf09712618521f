"""
Guide API endpoints - the public spot listing, language and filters
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, Query

from app.core.dependencies import get_guide_session
from app.models.api_models import Envelope
from app.schemas.guide import FilterRead, FilterUpdate, GuideView, LanguageUpdate
from app.schemas.spot import Spot
from app.services.filter_engine import filter_spots
from app.services.guide_session import GuideSession
from app.services.presentation import build_guide_view, filter_view

router = APIRouter(prefix="/guide", tags=["guide"])


@router.get("", response_model=Envelope[GuideView])
async def get_guide(session: GuideSession = Depends(get_guide_session)):
    """
    Full guide view in the selected language

    Spots are already filtered by the session's category, neighborhood and
    search text.
    """
    return Envelope(status="ok", data=build_guide_view(session))


@router.get("/spots", response_model=Envelope[List[Spot]])
async def list_spots(
    category: Optional[str] = Query(None),
    neighborhood: Optional[str] = Query(None),
    q: Optional[str] = Query(None),
    session: GuideSession = Depends(get_guide_session),
):
    """
    Displayed spots, filtered

    - **category**: Category name or "all" (default: session filter)
    - **neighborhood**: Neighborhood name or "all" (default: session filter)
    - **q**: Search text matched against name and description (default: session filter)
    """
    filters = session.filters
    spots = filter_spots(
        session.display_spots,
        category=category or filters.category,
        neighborhood=neighborhood or filters.neighborhood,
        query=q if q is not None else filters.query,
    )
    return Envelope(status="ok", data=spots)


@router.put("/language", response_model=Envelope[GuideView])
async def set_language(
    update: LanguageUpdate,
    session: GuideSession = Depends(get_guide_session),
):
    """
    Switch the display language

    Translates the content on a cache miss. If translation fails the guide
    keeps showing the Portuguese content.
    """
    await session.set_language(update.language)
    return Envelope(status="ok", data=build_guide_view(session))


@router.put("/filters", response_model=Envelope[FilterRead])
async def update_filters(
    update: FilterUpdate,
    session: GuideSession = Depends(get_guide_session),
):
    session.set_filters(
        category=update.category,
        neighborhood=update.neighborhood,
        query=update.query,
    )
    return Envelope(status="ok", data=filter_view(session))


@router.delete("/filters", response_model=Envelope[FilterRead])
async def clear_filters(session: GuideSession = Depends(get_guide_session)):
    session.clear_filters()
    return Envelope(status="ok", data=filter_view(session))
