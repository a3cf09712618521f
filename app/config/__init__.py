"""
Configuration package for the Rio Spots Guide backend.
"""

from .settings import (
    Settings,
    Environment,
    LogLevel,
    GeminiSettings,
    GuideSettings,
    SecuritySettings,
    settings,
    get_settings,
)

__all__ = [
    "Settings",
    "Environment",
    "LogLevel",
    "GeminiSettings",
    "GuideSettings",
    "SecuritySettings",
    "settings",
    "get_settings",
]
