"""
API response models: the success envelope, the error body and the health report.
"""

from pydantic import BaseModel, Field, field_validator
from typing import Optional, Dict, Any, Generic, TypeVar
from datetime import datetime, timezone
import uuid


T = TypeVar("T")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Envelope(BaseModel, Generic[T]):
    """Success body of every guide, admin and advisor endpoint"""
    status: str = "ok"
    data: Optional[T] = None
    error: Optional[str] = None


class HealthCheckResponse(BaseModel):
    """Response model for health check endpoint"""
    status: str = Field(description="Overall system status: healthy, degraded, unhealthy")
    version: str = Field(description="API version")
    translator: str = Field(description="Translator backend in use")
    advisor_configured: bool
    cached_languages: list = Field(default_factory=list)
    error_statistics: Dict[str, Any] = Field(default_factory=dict)
    timestamp: datetime = Field(default_factory=_utcnow)

    @field_validator('status')
    @classmethod
    def validate_status(cls, v):
        """Validate health status values"""
        valid_statuses = {"healthy", "degraded", "unhealthy"}
        if v not in valid_statuses:
            raise ValueError(f"status must be one of: {valid_statuses}")
        return v


class StandardErrorResponse(BaseModel):
    """Standardized error response format"""
    error_code: str
    message: str
    details: Optional[Dict[str, Any]] = None
    request_id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    timestamp: datetime = Field(default_factory=_utcnow)

    @field_validator('error_code')
    @classmethod
    def validate_error_code(cls, v):
        """Validate error code format"""
        if not v or not v.isupper():
            raise ValueError("error_code must be a non-empty uppercase string")
        return v
