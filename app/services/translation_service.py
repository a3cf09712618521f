"""
Batch translation of guide content through a hosted generative model.

The whole spots and categories payload is sent in one prompt and the model
is asked for a single JSON object with the same shape. Only the display
text is taken from the answer: every other field is copied from the source
records, so ids, images, ratings and links can never be altered by the
model. Any failure, including a reply that does not line up with the
source lists, is raised as TranslationError and treated as total failure.
"""

import asyncio
import json
import logging
import re
from abc import ABC, abstractmethod
from typing import List, Optional

from google import genai
from google.genai import types
from pydantic import BaseModel, ValidationError

from app.config.settings import GeminiSettings
from app.core.exceptions import TranslationError
from app.schemas.spot import LANGUAGE_NAMES, CategoryConfig, Language, Spot, TranslatedSnapshot

logger = logging.getLogger(__name__)

_FENCE_PATTERN = re.compile(r"```json|```")


class _TranslatedSpotText(BaseModel):
    name: str
    description: str
    category: str


class _TranslatedCategoryText(BaseModel):
    name: str


class _TranslationPayload(BaseModel):
    spots: List[_TranslatedSpotText]
    categories: List[_TranslatedCategoryText]


def build_translation_prompt(
    spots: List[Spot],
    categories: List[CategoryConfig],
    target_language: Language,
    source_language: Language = Language.PORTUGUESE,
) -> str:
    payload = json.dumps(
        {
            "spots": [spot.model_dump() for spot in spots],
            "categories": [category.model_dump() for category in categories],
        },
        ensure_ascii=False,
    )
    return f"""You are a professional translator. Translate the following JSON data from {LANGUAGE_NAMES[source_language]} to {LANGUAGE_NAMES[target_language]}.

1. Translate the 'description' and 'name' fields of the spots.
2. Translate the 'category' field of the spots so it matches the translated category names.
3. Translate the 'name' field of the category objects.

IMPORTANT:
- Keep all other fields ('id', 'images', 'rating', 'address', 'icon', 'color', 'neighborhood', 'link') EXACTLY as they are.
- Keep both lists in the same order and with the same number of items.
- Ensure the 'category' in the spots matches the 'name' in the categories list perfectly.
- Return ONLY the raw JSON object with keys "spots" and "categories". Do not add markdown blocks.

Input Data:
{payload}"""


def parse_translation_response(
    text: Optional[str],
    spots: List[Spot],
    categories: List[CategoryConfig],
    target_language: Language,
) -> TranslatedSnapshot:
    """Turn the model's reply into a snapshot aligned with the source lists."""
    content = _FENCE_PATTERN.sub("", text or "").strip()
    if not content:
        raise TranslationError("Empty translation response")

    try:
        payload = _TranslationPayload.model_validate(json.loads(content))
    except json.JSONDecodeError as e:
        raise TranslationError("Translation response is not valid JSON", details={"error": str(e)}) from e
    except ValidationError as e:
        raise TranslationError(
            "Translation response does not match the expected schema",
            details={"errors": e.error_count()},
        ) from e

    if len(payload.spots) != len(spots) or len(payload.categories) != len(categories):
        raise TranslationError(
            "Translation response is not aligned with the source data",
            details={
                "expected_spots": len(spots),
                "received_spots": len(payload.spots),
                "expected_categories": len(categories),
                "received_categories": len(payload.categories),
            },
        )

    translated_spots = [
        source.model_copy(update=translated.model_dump(), deep=True)
        for source, translated in zip(spots, payload.spots)
    ]
    translated_categories = [
        source.model_copy(update={"name": translated.name})
        for source, translated in zip(categories, payload.categories)
    ]
    return TranslatedSnapshot(
        language=target_language,
        spots=translated_spots,
        categories=translated_categories,
    )


class BaseTranslationModel(ABC):
    """Abstract base class for content translators"""

    name = "base"

    @abstractmethod
    async def translate(
        self,
        spots: List[Spot],
        categories: List[CategoryConfig],
        target_language: Language,
    ) -> TranslatedSnapshot:
        """Translate the display text of spots and categories"""
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Check if the translator can be used"""
        pass


class GeminiTranslationModel(BaseTranslationModel):
    """Translator backed by the Gemini generate_content API"""

    name = "gemini"

    def __init__(self, config: GeminiSettings, client: Optional[genai.Client] = None):
        self.logger = logging.getLogger(__name__)
        self.config = config
        self.client = client or (genai.Client(api_key=config.api_key) if config.api_key else None)

    async def translate(
        self,
        spots: List[Spot],
        categories: List[CategoryConfig],
        target_language: Language,
    ) -> TranslatedSnapshot:
        if not self.client:
            raise TranslationError("Gemini client is not configured")

        prompt = build_translation_prompt(spots, categories, target_language)
        self.logger.info(
            f"Requesting {target_language.value} translation of {len(spots)} spots "
            f"and {len(categories)} categories"
        )

        try:
            # The SDK call is blocking
            response = await asyncio.wait_for(
                asyncio.to_thread(
                    self.client.models.generate_content,
                    model=self.config.model,
                    contents=prompt,
                    config=types.GenerateContentConfig(response_mime_type="application/json"),
                ),
                timeout=self.config.timeout_seconds,
            )
        except asyncio.TimeoutError as e:
            raise TranslationError(
                f"Translation timed out after {self.config.timeout_seconds} seconds"
            ) from e
        except Exception as e:
            raise TranslationError(f"Gemini request failed: {e}") from e

        return parse_translation_response(response.text, spots, categories, target_language)

    async def health_check(self) -> bool:
        return self.client is not None


class MockTranslationModel(BaseTranslationModel):
    """
    Offline translator that tags every translated string with the target
    language code. Selected with GEMINI_MOCK_TRANSLATIONS for offline runs.
    """

    name = "mock"

    def __init__(self):
        self._translation_count = 0

    @staticmethod
    def _tag(text: str, target_language: Language) -> str:
        return f"[{target_language.value.upper()}] {text}" if text else text

    async def translate(
        self,
        spots: List[Spot],
        categories: List[CategoryConfig],
        target_language: Language,
    ) -> TranslatedSnapshot:
        self._translation_count += 1

        def tag(text: str) -> str:
            return self._tag(text, target_language)

        return TranslatedSnapshot(
            language=target_language,
            spots=[
                spot.model_copy(
                    update={
                        "name": tag(spot.name),
                        "description": tag(spot.description),
                        "category": tag(spot.category),
                    },
                    deep=True,
                )
                for spot in spots
            ],
            categories=[c.model_copy(update={"name": tag(c.name)}) for c in categories],
        )

    async def health_check(self) -> bool:
        return True


def create_translation_model(config: GeminiSettings) -> BaseTranslationModel:
    """
    Gemini translator for the configured key, or the mock when
    ``mock_translations`` is set.

    Without a key every translation fails, so the guide keeps showing its
    home-language content.
    """
    if config.mock_translations:
        logger.info("Using mock translations")
        return MockTranslationModel()
    if not config.api_key:
        logger.warning("No Gemini API key configured, translations will fall back to source content")
    return GeminiTranslationModel(config)
