"""
Response Utilities

Helpers for building the ``{"error": ..., "details": ...}`` failure bodies
returned by every API endpoint.
"""

from typing import Optional
from fastapi.responses import JSONResponse

from models.transcript_models import ErrorResponse
from services.errors import TranscriptFormatterError


def error_response(status_code: int, error: str, details: Optional[str] = None) -> JSONResponse:
    """Build a JSON failure response."""
    body = ErrorResponse(error=error, details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump())


def service_error_response(status_code: int, exc: TranscriptFormatterError) -> JSONResponse:
    """Build a JSON failure response from a pipeline exception."""
    return error_response(status_code, exc.message, exc.details)
