"""
Settings for the Rio Spots Guide, grouped by concern.

Each group reads its own prefixed environment variables (GEMINI_, GUIDE_,
SECURITY_); top-level settings use bare names such as PORT or LOG_LEVEL.
"""

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings
from typing import Optional, Dict, Any, List
from enum import Enum
import os


class Environment(str, Enum):
    """Supported deployment environments"""
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class LogLevel(str, Enum):
    """Supported log levels"""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class GeminiSettings(BaseSettings):
    """Hosted generative model configuration (translation and advisor chat)"""

    api_key: Optional[str] = Field(default=None, description="Gemini API key")
    model: str = Field(default="gemini-3-flash-preview")
    chat_temperature: float = Field(default=0.7, ge=0.0, le=2.0)
    timeout_seconds: int = Field(default=60, ge=5, le=300)
    mock_translations: bool = Field(default=False, description="Tag text instead of calling Gemini")

    @model_validator(mode="after")
    def fallback_api_key(self):
        """Accept the generic GOOGLE_API_KEY when no GEMINI_API_KEY is set"""
        if not self.api_key:
            self.api_key = os.getenv("GOOGLE_API_KEY") or None
        return self

    model_config = {"env_prefix": "GEMINI_", "env_file": ".env", "extra": "ignore"}


class GuideSettings(BaseSettings):
    """Content and admin form configuration"""

    home_language: str = Field(default="pt")
    max_images_per_spot: int = Field(default=5, ge=1, le=20)
    placeholder_image_url: str = Field(default="https://picsum.photos/seed/rio/800/600")
    default_category_color: str = Field(default="#3b82f6")

    model_config = {"env_prefix": "GUIDE_", "env_file": ".env", "extra": "ignore"}


class SecuritySettings(BaseSettings):
    """CORS configuration"""

    cors_origins: List[str] = Field(default_factory=lambda: ["*"])
    cors_allow_credentials: bool = Field(default=True)
    cors_allow_methods: List[str] = Field(
        default_factory=lambda: ["GET", "POST", "PUT", "DELETE"]
    )
    cors_allow_headers: List[str] = Field(default_factory=lambda: ["*"])

    @field_validator('cors_origins', mode='before')
    @classmethod
    def parse_cors_origins(cls, v):
        """An empty origin list means any origin"""
        if isinstance(v, str):
            v = [origin.strip() for origin in v.split(",")]
        return [origin for origin in v or [] if origin] or ["*"]

    model_config = {"env_prefix": "SECURITY_", "env_file": ".env", "extra": "ignore"}


class Settings(BaseSettings):
    """Application settings, read from the environment and .env"""

    # Application Configuration
    app_name: str = Field(default="Rio Spots Guide")
    app_version: str = Field(default="1.0.0")
    environment: Environment = Field(default=Environment.DEVELOPMENT)
    debug: bool = Field(default=False)

    # Server Configuration
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000, ge=1, le=65535)
    reload: bool = Field(default=False)

    # Logging Configuration
    log_level: LogLevel = Field(default=LogLevel.INFO)
    log_format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    log_file: Optional[str] = Field(default=None)

    # Nested Settings
    gemini: GeminiSettings = Field(default_factory=GeminiSettings)
    guide: GuideSettings = Field(default_factory=GuideSettings)
    security: SecuritySettings = Field(default_factory=SecuritySettings)

    @field_validator("environment", "log_level", mode="before")
    @classmethod
    def normalize_case(cls, v, info):
        """ENVIRONMENT is lower case and LOG_LEVEL upper case, whatever was typed"""
        if isinstance(v, str):
            return v.lower() if info.field_name == "environment" else v.upper()
        return v

    def get_cors_config(self) -> Dict[str, Any]:
        """Keyword arguments for CORSMiddleware"""
        return {
            "allow_origins": self.security.cors_origins,
            "allow_credentials": self.security.cors_allow_credentials,
            "allow_methods": self.security.cors_allow_methods,
            "allow_headers": self.security.cors_allow_headers,
        }

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get application settings instance"""
    return settings

