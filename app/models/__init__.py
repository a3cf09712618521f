"""
Models package for the Rio Spots Guide backend.

API response models: the success envelope, the error body and the health report.
Guide data models live in ``app.schemas``.
"""

from .api_models import (
    Envelope,
    HealthCheckResponse,
    StandardErrorResponse,
)

__all__ = [
    "Envelope",
    "HealthCheckResponse",
    "StandardErrorResponse",
]
