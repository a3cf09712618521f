"""
Image helpers for admin uploads.

Uploaded spot photos and category icons are kept inline, as base64
``data:`` URLs, so the guide never writes anything to disk.
"""

import asyncio
import base64
import io
import logging
from enum import Enum

from PIL import Image, UnidentifiedImageError

from app.core.exceptions import InvalidImageError

logger = logging.getLogger(__name__)


class ImageFormat(str, Enum):
    """Supported upload formats"""
    JPEG = "JPEG"
    PNG = "PNG"
    WEBP = "WEBP"
    GIF = "GIF"


SUPPORTED_FORMATS = {fmt.value for fmt in ImageFormat}
MAX_FILE_SIZE = 10 * 1024 * 1024  # 10MB


def is_image_reference(value: str) -> bool:
    """True for icons that should be rendered as an image rather than a glyph."""
    return value.startswith("http") or value.startswith("data:image")


def detect_image_format(image_data: bytes) -> str:
    if not image_data:
        raise InvalidImageError("Arquivo de imagem vazio.")
    if len(image_data) > MAX_FILE_SIZE:
        raise InvalidImageError(
            "Imagem muito grande.",
            details={"size_bytes": len(image_data), "max_size_bytes": MAX_FILE_SIZE},
        )

    try:
        with Image.open(io.BytesIO(image_data)) as image:
            format_name = image.format
            image.verify()
    except (UnidentifiedImageError, OSError) as e:
        raise InvalidImageError(details={"error": str(e)}) from e

    if format_name not in SUPPORTED_FORMATS:
        raise InvalidImageError(
            f"Formato de imagem não suportado: {format_name}",
            details={"format": format_name, "supported_formats": sorted(SUPPORTED_FORMATS)},
        )
    return format_name


def encode_data_url(image_data: bytes) -> str:
    format_name = detect_image_format(image_data)
    mime_type = Image.MIME.get(format_name, f"image/{format_name.lower()}")
    encoded = base64.b64encode(image_data).decode("ascii")
    logger.debug(f"Encoded {len(image_data)} byte {format_name} upload")
    return f"data:{mime_type};base64,{encoded}"


async def read_as_data_url(image_data: bytes) -> str:
    """Encode off the event loop; large photos take a while to verify and encode."""
    return await asyncio.to_thread(encode_data_url, image_data)
