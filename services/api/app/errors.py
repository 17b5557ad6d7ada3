"""Map processing failures onto HTTP errors."""

from __future__ import annotations

from fastapi import HTTPException

from core.providers.base import (
    MalformedResponseError,
    ProcessingError,
    TransportError,
)
from shared.schemas.process import ErrorResponse


def error_code(err: ProcessingError) -> str:
    if isinstance(err, TransportError):
        return "TRANSPORT_ERROR"
    if isinstance(err, MalformedResponseError):
        return "MALFORMED_RESPONSE"
    return "UNKNOWN_ERROR"


def processing_http_error(err: ProcessingError) -> HTTPException:
    return HTTPException(
        status_code=502,
        detail={"code": error_code(err), "message": str(err)},
    )


def empty_input_error(message: str = "Input text is empty") -> HTTPException:
    return HTTPException(status_code=422, detail={"code": "EMPTY_INPUT", "message": message})


def error_responses(*status_codes: int) -> dict:
    """OpenAPI ``responses=`` entries for the ``{"detail": {...}}`` error body."""
    return {code: {"model": ErrorResponse} for code in status_codes}
