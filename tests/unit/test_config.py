import shutil

from app.config.loader import ConfigLoader
from app.config.settings import Environment, GeminiSettings, GuideSettings, Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("GOOGLE_API_KEY", raising=False)
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    settings = Settings()

    assert settings.app_name == "Rio Spots Guide"
    assert settings.gemini.model == "gemini-3-flash-preview"
    assert settings.gemini.chat_temperature == 0.7
    assert settings.guide.home_language == "pt"
    assert settings.guide.max_images_per_spot == 5
    assert settings.guide.placeholder_image_url == "https://picsum.photos/seed/rio/800/600"


def test_google_api_key_fallback(monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.setenv("GOOGLE_API_KEY", "from-google")
    assert GeminiSettings().api_key == "from-google"

    monkeypatch.setenv("GEMINI_API_KEY", "from-gemini")
    assert GeminiSettings().api_key == "from-gemini"


def test_guide_settings_from_environment(monkeypatch):
    monkeypatch.setenv("GUIDE_MAX_IMAGES_PER_SPOT", "3")
    assert GuideSettings().max_images_per_spot == 3


def test_sample_env_file_round_trip(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert not ConfigLoader.validate_environment_config("staging")

    sample = ConfigLoader.create_sample_env_file("staging")
    contents = (tmp_path / sample).read_text()
    assert "ENVIRONMENT=staging" in contents
    assert "GEMINI_API_KEY=" in contents
    assert ConfigLoader.get_available_environments() == []

    shutil.copy(sample, tmp_path / ".env.staging")

    assert ConfigLoader.get_available_environments() == ["staging"]
    assert ConfigLoader.validate_environment_config("staging")
    settings = ConfigLoader.load_environment_config("staging")
    assert settings.environment == Environment.STAGING
    assert not settings.debug


def test_unknown_environment_is_invalid():
    assert not ConfigLoader.validate_environment_config("moon")
