"""
Exercise Tracker API - Exception Handlers.

Converts application exceptions and request validation failures into
`{"error": ...}` JSON responses.
"""

from typing import Any, Dict, List, Optional
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.utils.errors import ExerciseTrackerException

logger = logging.getLogger(__name__)


def create_error_response(
    status_code: int,
    message: str,
    details: Optional[List[Dict[str, Any]]] = None,
) -> JSONResponse:
    """Create a standardized error response."""
    content: Dict[str, Any] = {"error": message}
    if details:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content)


async def exercise_tracker_error_handler(
    request: Request,
    exc: ExerciseTrackerException,
) -> JSONResponse:
    """Handle all ExerciseTrackerException subclasses."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return create_error_response(exc.status_code, exc.message)


async def request_validation_error_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """Reject malformed input with 400 instead of FastAPI's default 422."""
    errors = []
    for error in exc.errors():
        loc = ".".join(str(x) for x in error["loc"])
        errors.append({
            "field": loc,
            "message": error["msg"],
            "type": error["type"],
        })

    return create_error_response(400, "Invalid request", details=errors)


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers with the FastAPI application.

    Args:
        app: The FastAPI application instance
    """
    app.add_exception_handler(ExerciseTrackerException, exercise_tracker_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
