"""
Error handling for the password validation service.

Provides centralized error handling for all API responses, ensuring consistent
error formats and proper logging. Malformed requests are reported as 400 before
the validation engine is ever invoked.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from fastapi import Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

# Error type reported for framework-raised HTTP errors; anything else is "http_error"
_HTTP_ERROR_TYPES = {
    status.HTTP_400_BAD_REQUEST: "validation_error",
    status.HTTP_404_NOT_FOUND: "not_found",
    status.HTTP_405_METHOD_NOT_ALLOWED: "method_not_allowed",
}


def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


def _summarize_errors(errors) -> List[Dict[str, Any]]:
    """Flatten pydantic error entries into field/message/type records."""
    summary = []
    for error in errors:
        # loc is ("body",) when the body is not valid JSON or not an object
        field_path = " -> ".join(str(loc) for loc in error.get("loc", ()))
        summary.append({
            "field": field_path,
            "message": error.get("msg", ""),
            "type": error.get("type", "")
        })
    return summary


class ErrorHandlerMiddleware:
    """
    Middleware for centralized error handling and response formatting.

    Catches unhandled exceptions and converts them to consistent JSON responses
    with proper HTTP status codes and error messages.
    """

    def __init__(self, app):
        self.app = app

    async def __call__(self, scope: Dict[str, Any], receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request = Request(scope, receive)

        try:
            await self.app(scope, receive, send)
        except Exception as exc:
            response = await self._handle_exception(request, exc)
            await response(scope, receive, send)

    async def _handle_exception(self, request: Request, exc: Exception) -> Response:
        """
        Convert exceptions to appropriate JSON error responses.

        Args:
            request: The incoming request
            exc: The exception that occurred

        Returns:
            JSONResponse with error details
        """
        error_id = str(uuid.uuid4())
        timestamp = _utc_timestamp()

        logger.error(
            f"Unexpected error {error_id} in {request.method} {request.url.path}: {type(exc).__name__}: {exc}",
            exc_info=exc,
            extra={
                "error_id": error_id,
                "request_method": request.method,
                "request_path": str(request.url.path),
                "exception_type": type(exc).__name__,
            }
        )

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": "internal_server_error",
                "message": "An unexpected error occurred",
                "error_id": error_id,
                "timestamp": timestamp
            }
        )


async def request_validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Report unparsable or incomplete request bodies as 400 Bad Request.

    Registered on the application in place of FastAPI's default 422 handler.
    """
    detail = _summarize_errors(exc.errors())
    logger.info(
        f"Rejected malformed request to {request.method} {request.url.path}",
        extra={"fields": [entry["field"] for entry in detail]}
    )
    return create_error_response(
        "validation_error",
        "Invalid request body",
        status.HTTP_400_BAD_REQUEST,
        detail
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """
    Wrap framework HTTP errors in the standard error envelope.

    Covers unknown routes, unsupported methods and bodies FastAPI cannot
    decode at all, such as JSON that is not valid UTF-8.
    """
    logger.info(f"HTTP {exc.status_code} for {request.method} {request.url.path}: {exc.detail}")
    response = create_error_response(
        _HTTP_ERROR_TYPES.get(exc.status_code, "http_error"),
        str(exc.detail),
        exc.status_code
    )
    if exc.headers:
        response.headers.update(exc.headers)
    return response


def create_error_response(
    error_type: str,
    message: str,
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
    detail: Optional[List[Dict[str, Any]]] = None
) -> JSONResponse:
    """
    Create a standardized error response.

    Utility function for creating consistent error responses in API endpoints.

    Args:
        error_type: Type of error (e.g., "validation_error", "not_found")
        message: Human-readable error message
        status_code: HTTP status code
        detail: Optional additional error details

    Returns:
        JSONResponse with standardized error format
    """
    content = {
        "error": error_type,
        "message": message,
        "error_id": str(uuid.uuid4()),
        "timestamp": _utc_timestamp()
    }

    if detail:
        content["detail"] = detail

    return JSONResponse(status_code=status_code, content=content)


def validation_error_response(message: str, detail: Optional[List[Dict[str, Any]]] = None) -> JSONResponse:
    """Create a validation error response."""
    return create_error_response("validation_error", message, status.HTTP_400_BAD_REQUEST, detail)
