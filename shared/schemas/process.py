"""One-shot processing request/response schemas."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

__all__ = ["ActionName", "ProcessRequest", "ProcessResponse", "ActionInfo", "ErrorDetail", "ErrorResponse"]

ActionName = Literal["rephrase", "summarize", "tweetify"]


class ProcessRequest(BaseModel):
    """Request to process a piece of text once."""

    action: ActionName = "rephrase"
    text: str


class ProcessResponse(BaseModel):
    action: ActionName
    text: str
    output: str
    provider: str
    model: str
    latency_ms: int = 0


class ActionInfo(BaseModel):
    id: ActionName
    label: str
    shortcut: str


class ErrorDetail(BaseModel):
    """Body of ``detail`` on error responses."""

    code: Literal[
        "TRANSPORT_ERROR",
        "MALFORMED_RESPONSE",
        "UNKNOWN_ERROR",
        "EMPTY_INPUT",
        "SESSION_NOT_FOUND",
        "NO_OUTPUT",
        "INVALID_PROMPT",
    ]
    message: str = ""


class ErrorResponse(BaseModel):
    """Error body as returned by the API."""

    detail: ErrorDetail
