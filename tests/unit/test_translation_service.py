import json

import pytest

from app.config.settings import GeminiSettings
from app.core.exceptions import TranslationError
from app.schemas.spot import CategoryConfig, Language
from app.services.translation_service import (
    GeminiTranslationModel,
    MockTranslationModel,
    build_translation_prompt,
    create_translation_model,
    parse_translation_response,
)


@pytest.fixture
def source(spot_factory):
    spots = [
        spot_factory("1", "Bar do Mineiro", category="Bares", neighborhood="Santa Teresa", description="Feijoada"),
        spot_factory("2", "Mureta da Urca", category="Passeios", neighborhood="Urca", description="Pôr do sol"),
    ]
    categories = [
        CategoryConfig(name="Bares", icon="🍺", color="#fef9c3"),
        CategoryConfig(name="Passeios", icon="📸", color="#dbeafe"),
    ]
    return spots, categories


def _reply(**overrides):
    payload = {
        "spots": [
            {"name": "Mineiro's Bar", "description": "Feijoada stew", "category": "Bars"},
            {"name": "Urca Wall", "description": "Sunset", "category": "Tours"},
        ],
        "categories": [{"name": "Bars"}, {"name": "Tours"}],
    }
    payload.update(overrides)
    return json.dumps(payload)


def test_parse_merges_text_onto_source_records(source):
    spots, categories = source

    snapshot = parse_translation_response(_reply(), spots, categories, Language.ENGLISH)

    assert snapshot.language == Language.ENGLISH
    assert [s.name for s in snapshot.spots] == ["Mineiro's Bar", "Urca Wall"]
    assert snapshot.spots[0].category == "Bars"
    assert snapshot.spots[1].id == "2"
    assert snapshot.spots[1].neighborhood == "Urca"
    assert snapshot.spots[0].images == spots[0].images
    assert snapshot.categories[0] == CategoryConfig(name="Bars", icon="🍺", color="#fef9c3")
    # Source records are untouched
    assert spots[0].name == "Bar do Mineiro"


def test_parse_strips_markdown_fences(source):
    spots, categories = source
    text = f"```json\n{_reply()}\n```"

    snapshot = parse_translation_response(text, spots, categories, Language.ENGLISH)

    assert snapshot.spot_count == 2


_MISSING_DESCRIPTION = json.dumps({
    "spots": [{"name": "Mineiro's Bar", "category": "Bars"}, {"name": "Urca Wall", "category": "Tours"}],
    "categories": [{"name": "Bars"}, {"name": "Tours"}],
})


@pytest.mark.parametrize("text", ["", None, "{not json", json.dumps({"spots": []}), _MISSING_DESCRIPTION])
def test_parse_rejects_unusable_replies(source, text):
    spots, categories = source
    with pytest.raises(TranslationError):
        parse_translation_response(text, spots, categories, Language.SPANISH)


def test_parse_rejects_misaligned_lists(source):
    spots, categories = source
    text = _reply(categories=[{"name": "Bars"}])

    with pytest.raises(TranslationError) as exc_info:
        parse_translation_response(text, spots, categories, Language.ENGLISH)

    assert exc_info.value.details["expected_categories"] == 2
    assert exc_info.value.details["received_categories"] == 1


def test_prompt_names_languages_and_carries_payload(source):
    spots, categories = source

    prompt = build_translation_prompt(spots, categories, Language.SPANISH)

    assert "from Portuguese to Spanish" in prompt
    assert "Bar do Mineiro" in prompt
    assert "Pôr do sol" in prompt


@pytest.mark.asyncio
async def test_gemini_model_requests_json(source, gemini_config, genai_client_factory):
    spots, categories = source
    client = genai_client_factory(text=_reply())
    model = GeminiTranslationModel(gemini_config, client=client)

    snapshot = await model.translate(spots, categories, Language.ENGLISH)

    assert snapshot.spots[0].name == "Mineiro's Bar"
    request = client.models.requests[0]
    assert request["model"] == gemini_config.model
    assert request["config"].response_mime_type == "application/json"
    assert await model.health_check()


@pytest.mark.asyncio
async def test_gemini_model_wraps_sdk_errors(source, gemini_config, genai_client_factory):
    spots, categories = source
    model = GeminiTranslationModel(gemini_config, client=genai_client_factory(error=RuntimeError("quota")))

    with pytest.raises(TranslationError):
        await model.translate(spots, categories, Language.ENGLISH)


@pytest.mark.asyncio
async def test_gemini_model_without_key_fails(source, gemini_config):
    spots, categories = source
    model = GeminiTranslationModel(gemini_config)

    assert not await model.health_check()
    with pytest.raises(TranslationError):
        await model.translate(spots, categories, Language.ENGLISH)


@pytest.mark.asyncio
async def test_mock_translation_tags_text(source):
    spots, categories = source
    model = MockTranslationModel()

    snapshot = await model.translate(spots, categories, Language.SPANISH)

    assert snapshot.spots[0].name == "[ES] Bar do Mineiro"
    assert snapshot.spots[0].category == "[ES] Bares"
    assert snapshot.categories[0].name == "[ES] Bares"
    assert snapshot.categories[0].icon == "🍺"


def test_factory_selects_translator(gemini_config):
    assert isinstance(create_translation_model(GeminiSettings(api_key="test-key")), GeminiTranslationModel)
    assert isinstance(create_translation_model(GeminiSettings(mock_translations=True)), MockTranslationModel)


@pytest.mark.asyncio
async def test_factory_without_key_fails_instead_of_mocking(source, gemini_config):
    spots, categories = source
    model = create_translation_model(gemini_config)

    assert isinstance(model, GeminiTranslationModel)
    with pytest.raises(TranslationError):
        await model.translate(spots, categories, Language.ENGLISH)
