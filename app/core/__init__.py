"""
Core infrastructure for the Rio Spots Guide backend.
Provides exceptions, error handlers, logging setup and dependency wiring.
"""

from .exceptions import ErrorCode, SpotGuideException

__all__ = [
    "ErrorCode",
    "SpotGuideException",
]
