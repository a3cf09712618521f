"""The spot being composed in the admin panel, with its bounded image list."""

import logging
from typing import List

from app.core.exceptions import ImageIndexError, ImageLimitReachedError
from app.services.image_processor import read_as_data_url

logger = logging.getLogger(__name__)


class SpotDraft:
    """
    Images for the next spot, from pasted URLs or uploaded files.

    Both inputs share one list capped at ``max_images``. A fresh or reset
    draft starts with the placeholder photo.
    """

    def __init__(self, max_images: int = 5, placeholder_image_url: str = ""):
        self.max_images = max_images
        self.placeholder_image_url = placeholder_image_url
        self._images: List[str] = []
        self.reset()

    @property
    def images(self) -> List[str]:
        return list(self._images)

    @property
    def is_full(self) -> bool:
        return len(self._images) >= self.max_images

    def _ensure_room(self) -> None:
        if self.is_full:
            raise ImageLimitReachedError(self.max_images)

    def add_image_url(self, url: str) -> List[str]:
        url = (url or "").strip()
        if not url:
            return self.images
        self._ensure_room()
        self._images.append(url)
        return self.images

    async def add_image_upload(self, image_data: bytes) -> List[str]:
        self._ensure_room()
        data_url = await read_as_data_url(image_data)
        # Another addition may have filled the list while encoding.
        self._ensure_room()
        self._images.append(data_url)
        logger.info(f"Draft image uploaded ({len(self._images)}/{self.max_images})")
        return self.images

    def remove_image(self, index: int) -> List[str]:
        if index < 0 or index >= len(self._images):
            raise ImageIndexError(index, len(self._images))
        del self._images[index]
        return self.images

    def reset(self) -> None:
        self._images = [self.placeholder_image_url] if self.placeholder_image_url else []
