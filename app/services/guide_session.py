"""
Guide session: the top-level context behind every endpoint.

Owns the content store, translation cache, display projector, admin gate,
filters and spot draft. Admin mutations of spots or categories invalidate
the translation cache here, at each mutation site, and then refresh the
display so a translated view is rebuilt from the new source data.
"""

import logging
from typing import List, Optional

from app.config.settings import GuideSettings
from app.core.exceptions import MissingImageError, UnsupportedLanguageError
from app.schemas.guide import CategoryCreate, SpotCreate
from app.schemas.spot import CategoryConfig, Language, MenuLabels, Spot
from app.services.admin_session import AdminSession
from app.services.content_store import ContentStore
from app.services.display_projector import DisplayProjector, Projection
from app.services.filter_engine import ALL, FilterState
from app.services.image_processor import read_as_data_url
from app.services.spot_draft import SpotDraft
from app.services.translation_cache import TranslationCache
from app.services.translation_service import BaseTranslationModel

logger = logging.getLogger(__name__)


class GuideSession:
    def __init__(
        self,
        translator: BaseTranslationModel,
        config: Optional[GuideSettings] = None,
        store: Optional[ContentStore] = None,
    ):
        self.config = config or GuideSettings()
        try:
            self.home_language = Language(self.config.home_language)
        except ValueError:
            raise UnsupportedLanguageError(self.config.home_language, [l.value for l in Language])

        self.store = store or ContentStore.with_seed_data()
        self.cache = TranslationCache()
        self.projector = DisplayProjector(self.store, self.cache, translator, self.home_language)
        self.admin = AdminSession()
        self.filters = FilterState()
        self.draft = SpotDraft(
            max_images=self.config.max_images_per_spot,
            placeholder_image_url=self.config.placeholder_image_url,
        )
        self.language = self.home_language

    # Display

    @property
    def loading(self) -> bool:
        return self.projector.loading

    @property
    def display(self) -> Projection:
        return self.projector.current

    @property
    def display_spots(self) -> List[Spot]:
        return self.projector.current.spots

    @property
    def display_categories(self) -> List[CategoryConfig]:
        return self.projector.current.categories

    def visible_spots(self) -> List[Spot]:
        return self.filters.apply(self.display_spots)

    async def set_language(self, language: Language) -> Projection:
        self.language = language
        return await self._project(language)

    async def refresh_display(self) -> Projection:
        return await self._project(self.language)

    async def _project(self, language: Language) -> Projection:
        previous = self.display
        projection = await self.projector.project(language)
        if projection is None:
            return self.display
        self._remap_category_filter(previous, projection)
        return projection

    def _remap_category_filter(self, previous: Projection, current: Projection) -> None:
        """
        Keep the category filter pointing at the same category.

        Across a change of displayed language the selection moves by position
        in the category list. Within one language it is kept by name, and
        reset to "all" once that name is gone.
        """
        selected = self.filters.category
        if selected == ALL or any(c.name == selected for c in current.categories):
            return

        index = None
        if previous.language != current.language:
            index = next((i for i, c in enumerate(previous.categories) if c.name == selected), None)

        if index is not None and index < len(current.categories):
            self.filters.category = current.categories[index].name
        else:
            self.filters.category = ALL
        logger.debug(f"Category filter remapped from '{selected}' to '{self.filters.category}'")

    # Filters

    def set_filters(
        self,
        category: Optional[str] = None,
        neighborhood: Optional[str] = None,
        query: Optional[str] = None,
    ) -> FilterState:
        if category is not None:
            self.filters.category = category or ALL
        if neighborhood is not None:
            self.filters.neighborhood = neighborhood or ALL
        if query is not None:
            self.filters.query = query
        return self.filters

    def clear_filters(self) -> FilterState:
        self.filters.reset()
        return self.filters

    # Admin session

    def login(self, user: str, password: str) -> bool:
        return self.admin.login(user, password)

    def logout(self) -> None:
        self.admin.logout()

    # Admin: spots

    async def add_spot(self, form: SpotCreate) -> Spot:
        self.admin.require_authenticated()
        images = self.draft.images
        if not images:
            raise MissingImageError()

        spot = Spot(id=self.store.next_spot_id(), images=images, **form.model_dump())
        self.store.add_spot(spot)
        self.cache.invalidate()
        self.draft.reset()
        await self.refresh_display()
        return spot

    async def remove_spot(self, spot_id: str) -> Spot:
        self.admin.require_authenticated()
        spot = self.store.remove_spot(spot_id)
        self.cache.invalidate()
        await self.refresh_display()
        return spot

    # Admin: spot draft images

    def add_image_url(self, url: str) -> List[str]:
        self.admin.require_authenticated()
        return self.draft.add_image_url(url)

    async def add_image_upload(self, image_data: bytes) -> List[str]:
        self.admin.require_authenticated()
        return await self.draft.add_image_upload(image_data)

    def remove_image(self, index: int) -> List[str]:
        self.admin.require_authenticated()
        return self.draft.remove_image(index)

    # Admin: neighborhoods

    def add_neighborhood(self, name: str) -> List[str]:
        self.admin.require_authenticated()
        self.store.add_neighborhood(name)
        return self.store.neighborhoods

    def remove_neighborhood(self, name: str) -> List[str]:
        self.admin.require_authenticated()
        self.store.remove_neighborhood(name)
        if self.filters.neighborhood == name:
            self.filters.neighborhood = ALL
        return self.store.neighborhoods

    # Admin: categories

    async def add_category(self, form: CategoryCreate) -> CategoryConfig:
        self.admin.require_authenticated()
        category = self.store.add_category(CategoryConfig(
            name=form.name,
            icon=form.icon,
            color=form.color or self.config.default_category_color,
        ))
        self.cache.invalidate()
        await self.refresh_display()
        return category

    async def remove_category(self, name: str) -> List[CategoryConfig]:
        self.admin.require_authenticated()
        self.store.remove_category(name)
        self.cache.invalidate()
        await self.refresh_display()
        return self.store.categories

    async def encode_category_icon(self, image_data: bytes) -> str:
        self.admin.require_authenticated()
        return await read_as_data_url(image_data)

    # Admin: labels

    def update_labels(self, categories: Optional[str] = None, neighborhoods: Optional[str] = None) -> MenuLabels:
        self.admin.require_authenticated()
        return self.store.update_labels(categories=categories, neighborhoods=neighborhoods)
