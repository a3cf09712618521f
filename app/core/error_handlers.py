"""
Exception handlers that render every failure as a StandardErrorResponse.

Admin form rejections keep their Portuguese notice as ``message`` so the
client can show it as-is. The request id comes from RequestContextMiddleware.
"""

import asyncio
import logging
import time
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.exceptions import ErrorCode, SpotGuideException
from app.models.api_models import StandardErrorResponse

logger = logging.getLogger(__name__)

_STATUS_CODES = {
    400: ErrorCode.VALIDATION_ERROR,
    401: ErrorCode.NOT_AUTHENTICATED,
    404: ErrorCode.NOT_FOUND,
    405: ErrorCode.NOT_FOUND,
    408: ErrorCode.PROCESSING_TIMEOUT,
}

# Repeated errors are logged again every this many occurrences
ALERT_EVERY = 10


def _request_id(request: Request) -> str:
    return getattr(request.state, "request_id", "unknown")


class ErrorHandler:
    """Builds error responses and keeps per-code counters for the health report."""

    def __init__(self):
        self.error_counts: Dict[str, int] = {}
        self.last_error_time: Dict[str, float] = {}

    def respond(
        self,
        request: Request,
        status_code: int,
        error_code: ErrorCode,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> JSONResponse:
        self._track_error(error_code.value)
        body = StandardErrorResponse(
            error_code=error_code.value,
            message=message,
            details=details,
            request_id=_request_id(request),
        )
        return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))

    async def handle_spot_guide_exception(self, request: Request, exc: SpotGuideException) -> JSONResponse:
        level = logging.ERROR if exc.status_code >= 500 else logging.WARNING
        logger.log(
            level,
            f"{type(exc).__name__} on {request.method} {request.url.path}: {exc.message}",
            extra={"request_id": _request_id(request), "error_code": exc.error_code.value, "details": exc.details},
        )
        return self.respond(request, exc.status_code, exc.error_code, exc.message, exc.details)

    async def handle_validation_error(self, request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = [
            {
                "field": ".".join(str(part) for part in error["loc"]),
                "message": error["msg"],
                "type": error["type"],
            }
            for error in exc.errors()
        ]
        logger.warning(
            f"Rejected {request.method} {request.url.path}: {len(errors)} invalid field(s)",
            extra={"request_id": _request_id(request), "validation_errors": errors},
        )
        return self.respond(
            request, 422, ErrorCode.VALIDATION_ERROR, "Request validation failed",
            {"validation_errors": errors},
        )

    async def handle_http_exception(self, request: Request, exc: StarletteHTTPException) -> JSONResponse:
        error_code = _STATUS_CODES.get(exc.status_code, ErrorCode.INTERNAL_SERVER_ERROR)
        logger.warning(
            f"HTTP {exc.status_code} on {request.method} {request.url.path}: {exc.detail}",
            extra={"request_id": _request_id(request)},
        )
        return self.respond(request, exc.status_code, error_code, str(exc.detail))

    async def handle_timeout_error(self, request: Request, exc: asyncio.TimeoutError) -> JSONResponse:
        logger.error(
            f"Timed out handling {request.method} {request.url.path}",
            extra={"request_id": _request_id(request)},
        )
        return self.respond(request, 408, ErrorCode.PROCESSING_TIMEOUT, "Request processing timed out")

    async def handle_generic_exception(self, request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            f"Unhandled {type(exc).__name__} on {request.method} {request.url.path}: {exc}",
            exc_info=exc,
            extra={"request_id": _request_id(request)},
        )
        return self.respond(request, 500, ErrorCode.INTERNAL_SERVER_ERROR, "An internal server error occurred")

    def _track_error(self, error_code: str) -> None:
        count = self.error_counts.get(error_code, 0) + 1
        self.error_counts[error_code] = count
        self.last_error_time[error_code] = time.time()
        if count % ALERT_EVERY == 0:
            logger.warning(f"{error_code} has now occurred {count} times")

    def get_error_statistics(self, window_seconds: float = 3600) -> Dict[str, Any]:
        cutoff = time.time() - window_seconds
        return {
            "error_counts": dict(self.error_counts),
            "recent_errors": {
                code: count for code, count in self.error_counts.items()
                if self.last_error_time.get(code, 0) >= cutoff
            },
            "total_errors": sum(self.error_counts.values()),
        }


# Global error handler instance
error_handler = ErrorHandler()


def setup_error_handlers(app: FastAPI) -> None:
    """Register the handlers on ``app``. HTTPException covers FastAPI's subclass too."""
    app.add_exception_handler(SpotGuideException, error_handler.handle_spot_guide_exception)
    app.add_exception_handler(RequestValidationError, error_handler.handle_validation_error)
    app.add_exception_handler(StarletteHTTPException, error_handler.handle_http_exception)
    app.add_exception_handler(asyncio.TimeoutError, error_handler.handle_timeout_error)
    app.add_exception_handler(Exception, error_handler.handle_generic_exception)
