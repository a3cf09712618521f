"""
Custom exceptions for the Rio Spots Guide backend.

Admin form rejections carry the user-facing notice as their message; the
error handlers turn them into the standard error envelope.
"""

from typing import Optional, Dict, Any
from enum import Enum


class ErrorCode(str, Enum):
    """Standardized error codes for the application."""

    # Admin form validation
    MISSING_IMAGE = "MISSING_IMAGE"
    IMAGE_LIMIT_REACHED = "IMAGE_LIMIT_REACHED"
    INVALID_IMAGE = "INVALID_IMAGE"
    IMAGE_INDEX_OUT_OF_RANGE = "IMAGE_INDEX_OUT_OF_RANGE"
    INVALID_NEIGHBORHOOD = "INVALID_NEIGHBORHOOD"
    DUPLICATE_NEIGHBORHOOD = "DUPLICATE_NEIGHBORHOOD"
    INVALID_CATEGORY = "INVALID_CATEGORY"
    DUPLICATE_CATEGORY = "DUPLICATE_CATEGORY"
    SPOT_NOT_FOUND = "SPOT_NOT_FOUND"

    # Admin session
    NOT_AUTHENTICATED = "NOT_AUTHENTICATED"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"

    # Translation
    TRANSLATION_FAILED = "TRANSLATION_FAILED"
    UNSUPPORTED_LANGUAGE = "UNSUPPORTED_LANGUAGE"

    # Generic errors
    NOT_FOUND = "NOT_FOUND"
    PROCESSING_TIMEOUT = "PROCESSING_TIMEOUT"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


class SpotGuideException(Exception):
    """Base exception for the spots guide backend."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.status_code = status_code


class MissingImageError(SpotGuideException):
    """Raised when a spot is submitted without any image."""

    def __init__(self):
        super().__init__(
            message="Adicione pelo menos uma imagem.",
            error_code=ErrorCode.MISSING_IMAGE,
            status_code=400
        )


class ImageLimitReachedError(SpotGuideException):
    """Raised when the spot draft already holds the maximum number of images."""

    def __init__(self, max_images: int):
        super().__init__(
            message=f"Limite de {max_images} imagens atingido.",
            error_code=ErrorCode.IMAGE_LIMIT_REACHED,
            details={"max_images": max_images},
            status_code=400
        )


class InvalidImageError(SpotGuideException):
    """Raised when an uploaded file is not a readable image."""

    def __init__(self, message: str = "Arquivo de imagem inválido.", details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            error_code=ErrorCode.INVALID_IMAGE,
            details=details,
            status_code=400
        )


class ImageIndexError(SpotGuideException):
    """Raised when removing an image at a position that does not exist."""

    def __init__(self, index: int, size: int):
        super().__init__(
            message=f"Imagem {index} não existe.",
            error_code=ErrorCode.IMAGE_INDEX_OUT_OF_RANGE,
            details={"index": index, "size": size},
            status_code=400
        )


class InvalidNeighborhoodError(SpotGuideException):
    """Raised when a neighborhood name is empty."""

    def __init__(self):
        super().__init__(
            message="Informe o nome do bairro.",
            error_code=ErrorCode.INVALID_NEIGHBORHOOD,
            status_code=400
        )


class DuplicateNeighborhoodError(SpotGuideException):
    """Raised when a neighborhood with the same name already exists."""

    def __init__(self, name: str):
        super().__init__(
            message=f"O bairro '{name}' já existe.",
            error_code=ErrorCode.DUPLICATE_NEIGHBORHOOD,
            details={"name": name},
            status_code=400
        )


class InvalidCategoryError(SpotGuideException):
    """Raised when a category is missing its name or icon."""

    def __init__(self, missing_fields: list):
        super().__init__(
            message="Informe nome e ícone da categoria.",
            error_code=ErrorCode.INVALID_CATEGORY,
            details={"missing_fields": missing_fields},
            status_code=400
        )


class DuplicateCategoryError(SpotGuideException):
    """Raised when a category with the same name already exists."""

    def __init__(self, name: str):
        super().__init__(
            message=f"A categoria '{name}' já existe.",
            error_code=ErrorCode.DUPLICATE_CATEGORY,
            details={"name": name},
            status_code=400
        )


class SpotNotFoundError(SpotGuideException):
    """Raised when a spot id is not in the content store."""

    def __init__(self, spot_id: str):
        super().__init__(
            message=f"Spot '{spot_id}' not found",
            error_code=ErrorCode.SPOT_NOT_FOUND,
            details={"spot_id": spot_id},
            status_code=404
        )


class NotAuthenticatedError(SpotGuideException):
    """Raised when an admin operation is attempted from an anonymous session."""

    def __init__(self):
        super().__init__(
            message="Admin login required",
            error_code=ErrorCode.NOT_AUTHENTICATED,
            status_code=401
        )


class InvalidCredentialsError(SpotGuideException):
    """Raised when the admin credential pair does not match."""

    def __init__(self):
        super().__init__(
            message="Erro!",
            error_code=ErrorCode.INVALID_CREDENTIALS,
            status_code=401
        )


class TranslationError(SpotGuideException):
    """Raised when the external translator fails or returns unusable data."""

    def __init__(self, message: str = "Translation failed", details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            error_code=ErrorCode.TRANSLATION_FAILED,
            details=details,
            status_code=502
        )


class UnsupportedLanguageError(SpotGuideException):
    """Raised when requested language is not supported."""

    def __init__(self, language: str, supported_languages: Optional[list] = None):
        details = {"requested_language": language}
        if supported_languages:
            details["supported_languages"] = supported_languages

        super().__init__(
            message=f"Language '{language}' is not supported",
            error_code=ErrorCode.UNSUPPORTED_LANGUAGE,
            details=details,
            status_code=400
        )
