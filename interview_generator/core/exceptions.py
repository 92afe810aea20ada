"""
Custom exceptions for the interview generator service.

Every application error carries the HTTP status it maps to, and all error
responses share the ``{"success": false, "error": ...}`` body shape.
"""
import logging
from typing import Optional
from fastapi import Request
from starlette.exceptions import HTTPException
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


# ============================================================================
# Custom Exception Classes
# ============================================================================

class AppError(Exception):
    """Base exception for all application errors."""
    status_code: int = 500

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class UnauthorizedRequestError(AppError):
    """Raised when the shared-secret header is missing or does not match."""
    status_code = 401

    def __init__(self, message: str = "Unauthorized VAPI request", details: Optional[dict] = None):
        super().__init__(message, details)


class QuestionParseError(AppError):
    """Raised when the model output cannot be reduced to a non-empty question list."""
    status_code = 502

    def __init__(self, message: str = "LLM did not return questions", details: Optional[dict] = None):
        super().__init__(message, details)


class InterviewGenerationError(AppError):
    """Any unexpected failure while generating or storing an interview."""
    status_code = 500


class ConfigurationError(AppError):
    """Exception raised when configuration is invalid or missing."""
    pass


# ============================================================================
# FastAPI Exception Handlers
# ============================================================================

def error_response(status_code: int, error: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": error},
    )


async def app_error_handler(request: Request, exc: AppError):
    if exc.status_code >= 500:
        logger.error(f"{type(exc).__name__}: {exc.message}")
    else:
        logger.warning(f"{type(exc).__name__}: {exc.message}")
    return error_response(exc.status_code, exc.message)


async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Global exception: {exc}", exc_info=True)
    return error_response(500, str(exc))


async def http_exception_handler(request: Request, exc: HTTPException):
    logger.warning(f"HTTP exception: {exc.detail}")
    return error_response(exc.status_code, str(exc.detail))
