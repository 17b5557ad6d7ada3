"""Pasteboard session schemas."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field

from .process import ActionName

__all__ = [
    "SessionCreate",
    "SessionResponse",
    "ActionSelect",
    "InputChange",
    "CopyResponse",
    "PromptUpdate",
]


class SessionCreate(BaseModel):
    """Open a session, optionally with pasted text."""

    text: str = ""
    action: ActionName = "rephrase"


class SessionResponse(BaseModel):
    id: str
    state: Literal["idle", "loading", "ready", "error"]
    action: ActionName
    input_text: str = ""
    output_text: str = ""
    error: Optional[str] = None
    created_at: str
    updated_at: str


class ActionSelect(BaseModel):
    action: ActionName


class InputChange(BaseModel):
    text: str = ""


class CopyResponse(BaseModel):
    text: str


class PromptUpdate(BaseModel):
    content: str = Field(..., min_length=1)
