"""
Admin API endpoints - login, spot submission and list management

Everything except login, logout and status requires an authenticated admin
session and answers 401 otherwise.
"""
from typing import List
from fastapi import APIRouter, Depends, File, UploadFile, status

from app.core.dependencies import get_admin_session, get_guide_session
from app.core.exceptions import InvalidCredentialsError
from app.models.api_models import Envelope
from app.schemas.guide import (
    AdminStatus,
    CategoryCreate,
    DraftRead,
    IconRead,
    ImageUrlRequest,
    LoginRequest,
    MenuLabelsUpdate,
    NeighborhoodCreate,
    SpotCreate,
)
from app.schemas.spot import CategoryConfig, MenuLabels, Spot
from app.services.guide_session import GuideSession

router = APIRouter(prefix="/admin", tags=["admin"])


def _status(session: GuideSession) -> AdminStatus:
    return AdminStatus(
        authenticated=session.admin.is_authenticated,
        login_error=session.admin.login_error,
    )


def _draft(session: GuideSession) -> DraftRead:
    return DraftRead(images=session.draft.images, max_images=session.draft.max_images)


# Session

@router.post("/login", response_model=Envelope[AdminStatus])
async def login(
    credentials: LoginRequest,
    session: GuideSession = Depends(get_guide_session),
):
    """
    Enter admin mode

    - **user**: Admin user name
    - **pass**: Admin password
    """
    if not session.login(credentials.user, credentials.password):
        raise InvalidCredentialsError()
    return Envelope(status="ok", data=_status(session))


@router.post("/logout", response_model=Envelope[AdminStatus])
async def logout(session: GuideSession = Depends(get_guide_session)):
    session.logout()
    return Envelope(status="ok", data=_status(session))


@router.get("/status", response_model=Envelope[AdminStatus])
async def admin_status(session: GuideSession = Depends(get_guide_session)):
    return Envelope(status="ok", data=_status(session))


# Spots

@router.post("/spots", response_model=Envelope[Spot], status_code=status.HTTP_201_CREATED)
async def create_spot(
    form: SpotCreate,
    session: GuideSession = Depends(get_admin_session),
):
    """
    Publish a new spot at the top of the list

    The spot takes its images from the draft, which needs at least one.
    The draft is reset to the placeholder photo afterwards.
    """
    spot = await session.add_spot(form)
    return Envelope(status="ok", data=spot)


@router.delete("/spots/{spot_id}", response_model=Envelope[Spot])
async def delete_spot(
    spot_id: str,
    session: GuideSession = Depends(get_admin_session),
):
    spot = await session.remove_spot(spot_id)
    return Envelope(status="ok", data=spot)


# Draft images

@router.get("/draft", response_model=Envelope[DraftRead])
async def get_draft(session: GuideSession = Depends(get_admin_session)):
    return Envelope(status="ok", data=_draft(session))


@router.post("/draft/images/url", response_model=Envelope[DraftRead])
async def add_draft_image_url(
    body: ImageUrlRequest,
    session: GuideSession = Depends(get_admin_session),
):
    """Append a pasted image URL. Blank URLs are ignored."""
    session.add_image_url(body.url)
    return Envelope(status="ok", data=_draft(session))


@router.post("/draft/images/upload", response_model=Envelope[DraftRead])
async def upload_draft_image(
    file: UploadFile = File(...),
    session: GuideSession = Depends(get_admin_session),
):
    """Append an uploaded photo, stored inline as a data URL."""
    image_data = await file.read()
    await session.add_image_upload(image_data)
    return Envelope(status="ok", data=_draft(session))


@router.delete("/draft/images/{index}", response_model=Envelope[DraftRead])
async def remove_draft_image(
    index: int,
    session: GuideSession = Depends(get_admin_session),
):
    session.remove_image(index)
    return Envelope(status="ok", data=_draft(session))


# Neighborhoods

@router.post("/neighborhoods", response_model=Envelope[List[str]], status_code=status.HTTP_201_CREATED)
async def create_neighborhood(
    body: NeighborhoodCreate,
    session: GuideSession = Depends(get_admin_session),
):
    return Envelope(status="ok", data=session.add_neighborhood(body.name))


@router.delete("/neighborhoods/{name}", response_model=Envelope[List[str]])
async def delete_neighborhood(
    name: str,
    session: GuideSession = Depends(get_admin_session),
):
    return Envelope(status="ok", data=session.remove_neighborhood(name))


# Categories

@router.post("/categories", response_model=Envelope[CategoryConfig], status_code=status.HTTP_201_CREATED)
async def create_category(
    body: CategoryCreate,
    session: GuideSession = Depends(get_admin_session),
):
    """
    Add a category

    - **name**: Unique category name
    - **icon**: Emoji, image URL or data URL from the icon upload endpoint
    - **color**: Badge color (default: configured category color)
    """
    category = await session.add_category(body)
    return Envelope(status="ok", data=category)


@router.delete("/categories/{name}", response_model=Envelope[List[CategoryConfig]])
async def delete_category(
    name: str,
    session: GuideSession = Depends(get_admin_session),
):
    categories = await session.remove_category(name)
    return Envelope(status="ok", data=categories)


@router.post("/categories/icon", response_model=Envelope[IconRead])
async def upload_category_icon(
    file: UploadFile = File(...),
    session: GuideSession = Depends(get_admin_session),
):
    """Encode an icon image as a data URL for use in a new category."""
    icon = await session.encode_category_icon(await file.read())
    return Envelope(status="ok", data=IconRead(icon=icon))


# Menu labels

@router.put("/labels", response_model=Envelope[MenuLabels])
async def update_labels(
    body: MenuLabelsUpdate,
    session: GuideSession = Depends(get_admin_session),
):
    labels = session.update_labels(categories=body.categories, neighborhoods=body.neighborhoods)
    return Envelope(status="ok", data=labels)
