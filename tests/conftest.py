"""
Shared fixtures: offline translators, a fresh guide session and a test client
wired to its own service container.
"""

import asyncio
import io
from types import SimpleNamespace
from typing import List

import pytest
from fastapi.testclient import TestClient
from PIL import Image

from app.config.settings import GeminiSettings, GuideSettings, Settings
from app.core.dependencies import ServiceContainer
from app.core.exceptions import TranslationError
from app.main import create_app
from app.schemas.spot import Language, Spot
from app.services.advisor_service import AdvisorService
from app.services.guide_session import GuideSession
from app.services.translation_service import MockTranslationModel


class RecordingTranslator(MockTranslationModel):
    """Mock translator that remembers what it was asked to translate."""

    name = "recording"

    def __init__(self):
        super().__init__()
        self.calls: List[tuple] = []

    async def translate(self, spots, categories, target_language):
        self.calls.append((target_language, len(spots), len(categories)))
        return await super().translate(spots, categories, target_language)


class FailingTranslator(RecordingTranslator):
    name = "failing"

    async def translate(self, spots, categories, target_language):
        self.calls.append((target_language, len(spots), len(categories)))
        raise TranslationError("translator offline")


class GatedTranslator(RecordingTranslator):
    """Holds every translation until the test releases it by language."""

    name = "gated"

    def __init__(self):
        super().__init__()
        self.gates = {language: asyncio.Event() for language in Language}

    def release(self, language: Language) -> None:
        self.gates[language].set()

    async def translate(self, spots, categories, target_language):
        await self.gates[target_language].wait()
        return await super().translate(spots, categories, target_language)


class FakeModels:
    def __init__(self, text=None, error=None):
        self.text = text
        self.error = error
        self.requests = []

    def generate_content(self, model, contents, config=None):
        self.requests.append({"model": model, "contents": contents, "config": config})
        if self.error:
            raise self.error
        return SimpleNamespace(text=self.text)


class FakeGenaiClient:
    """Stands in for google.genai.Client; only ``models.generate_content`` is used."""

    def __init__(self, text=None, error=None):
        self.models = FakeModels(text=text, error=error)


def make_image_bytes(fmt: str = "PNG", size=(4, 4)) -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", size, color=(200, 30, 30)).save(buffer, format=fmt)
    return buffer.getvalue()


def make_spot(spot_id: str, name: str, category: str = "Bares", neighborhood: str = "Urca", description: str = "") -> Spot:
    return Spot(
        id=spot_id,
        name=name,
        description=description,
        category=category,
        neighborhood=neighborhood,
        images=["https://example.com/photo.jpg"],
    )


@pytest.fixture
def gemini_config(monkeypatch):
    monkeypatch.delenv("GOOGLE_API_KEY", raising=False)
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    return GeminiSettings(api_key=None, mock_translations=False)


@pytest.fixture
def guide_config():
    return GuideSettings()


@pytest.fixture
def translator():
    return RecordingTranslator()


@pytest.fixture
def session(translator, guide_config):
    return GuideSession(translator=translator, config=guide_config)


@pytest.fixture
def admin_session(session):
    assert session.login("admin", "admin")
    return session


@pytest.fixture
def png_bytes():
    return make_image_bytes("PNG")


@pytest.fixture
def advisor_client():
    return FakeGenaiClient(text="**Mermão**, vai na Mureta da Urca no fim de tarde!")


@pytest.fixture
def container(translator, gemini_config, advisor_client):
    app_settings = Settings()
    return ServiceContainer(
        settings=app_settings,
        translator=translator,
        advisor=AdvisorService(gemini_config, client=advisor_client),
    )


@pytest.fixture
def client(container):
    with TestClient(create_app(container)) as test_client:
        yield test_client


@pytest.fixture
def admin_client(client):
    response = client.post("/admin/login", json={"user": "admin", "pass": "admin"})
    assert response.status_code == 200
    return client


@pytest.fixture
def failing_translator():
    return FailingTranslator()


@pytest.fixture
def gated_translator():
    return GatedTranslator()


@pytest.fixture
def session_factory(guide_config):
    def build(translator, store=None):
        return GuideSession(translator=translator, config=guide_config, store=store)
    return build


@pytest.fixture
def spot_factory():
    return make_spot


@pytest.fixture
def image_factory():
    return make_image_bytes


@pytest.fixture
def genai_client_factory():
    return FakeGenaiClient
