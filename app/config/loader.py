"""
Per-environment configuration files.

Each environment reads ``.env.<environment>`` from the working directory.
``create_sample_env_file`` writes a commented starting point listing every
setting with its current default.
"""

import json
import logging
import os
from pathlib import Path
from typing import Dict, List, Optional

from pydantic_settings import BaseSettings

from .settings import Environment, Settings

logger = logging.getLogger(__name__)

_SAMPLE_SUFFIX = ".sample"
_SECRET_PLACEHOLDERS = {"GEMINI_API_KEY": "your-gemini-api-key"}


def env_file_for(environment: Environment) -> Path:
    return Path(f".env.{environment.value}")


def _format_value(value) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, list):
        return json.dumps(value)
    if hasattr(value, "value"):
        return str(value.value)
    return "" if value is None else str(value)


def _settings_lines(group: BaseSettings, prefix: str) -> List[str]:
    lines = []
    for field_name in type(group).model_fields:
        key = f"{prefix}{field_name}".upper()
        value = _SECRET_PLACEHOLDERS.get(key) or _format_value(getattr(group, field_name))
        lines.append(f"{key}={value}")
    return lines


class ConfigLoader:
    """Loads, validates and scaffolds environment configuration files"""

    @staticmethod
    def load_environment_config(environment: Optional[str] = None) -> Settings:
        """
        Load settings for ``environment``, or for $ENVIRONMENT when omitted.

        A missing ``.env.<environment>`` file is not an error: defaults and
        process environment variables still apply.
        """
        env = Environment((environment or os.getenv("ENVIRONMENT", "development")).lower())
        env_file = env_file_for(env)

        if not env_file.exists():
            logger.warning(f"{env_file} not found, using defaults and environment variables")
            return Settings(environment=env)

        logger.info(f"Loading configuration from {env_file}")
        return Settings(_env_file=str(env_file), environment=env)

    @staticmethod
    def get_available_environments() -> List[str]:
        """Environments with a ``.env.<environment>`` file, samples excluded"""
        names = (
            path.name[len(".env."):]
            for path in Path(".").glob(".env.*")
        )
        return sorted(name for name in names if not name.endswith(_SAMPLE_SUFFIX))

    @staticmethod
    def validate_environment_config(environment: str) -> bool:
        """True when the environment is known, its file exists and it loads."""
        try:
            env = Environment(environment.lower())
        except ValueError:
            logger.error(f"Unknown environment '{environment}'")
            return False

        if not env_file_for(env).exists():
            return False

        try:
            settings = ConfigLoader.load_environment_config(env.value)
        except ValueError as e:
            logger.error(f"Configuration for {env.value} is invalid: {e}")
            return False

        # The guide cannot start without a supported home language
        return settings.guide.home_language in {"pt", "en", "es"}

    @staticmethod
    def create_sample_env_file(environment: str, output_path: Optional[str] = None) -> str:
        """Write ``.env.<environment>.sample`` (or ``output_path``) and return its path"""
        env = Environment(environment.lower())
        output_path = output_path or f"{env_file_for(env)}{_SAMPLE_SUFFIX}"

        defaults = Settings(environment=env, debug=env == Environment.DEVELOPMENT, reload=env == Environment.DEVELOPMENT)
        sections: Dict[str, List[str]] = {
            "Application": [
                f"APP_NAME={defaults.app_name}",
                f"APP_VERSION={defaults.app_version}",
                f"ENVIRONMENT={env.value}",
                f"DEBUG={_format_value(defaults.debug)}",
                f"HOST={defaults.host}",
                f"PORT={defaults.port}",
                f"RELOAD={_format_value(defaults.reload)}",
                f"LOG_LEVEL={defaults.log_level.value}",
            ],
            "Gemini": _settings_lines(defaults.gemini, "GEMINI_"),
            "Guide": _settings_lines(defaults.guide, "GUIDE_"),
            "Security": _settings_lines(defaults.security, "SECURITY_"),
        }

        lines = [
            f"# Sample configuration for the {env.value} environment",
            f"# Copy this file to {env_file_for(env)} and adjust as needed",
        ]
        for title, entries in sections.items():
            lines.extend(["", f"# {title}", *entries])

        Path(output_path).write_text("\n".join(lines) + "\n", encoding="utf-8")
        logger.info(f"Sample configuration written to {output_path}")
        return output_path


def load_config_for_environment(environment: Optional[str] = None) -> Settings:
    """Convenience function to load configuration for an environment"""
    return ConfigLoader.load_environment_config(environment)
