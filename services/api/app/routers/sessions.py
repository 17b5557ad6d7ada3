"""Pasteboard session endpoints.

Each event endpoint applies the event to the session state machine and,
when the machine asks for a request, awaits it before responding. The
response therefore always shows a settled state (idle, ready or error)
unless a newer request on the same session superseded this one.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from shared.schemas.sessions import (
    ActionSelect,
    CopyResponse,
    InputChange,
    SessionCreate,
    SessionResponse,
)
from src.rewrite.processor import TextProcessor
from src.session.machine import NoOutputError, PasteboardSession, PendingRequest

from .. import db
from ..deps import get_processor
from ..errors import error_responses

logger = logging.getLogger(__name__)
router = APIRouter()


def _get_or_404(session_id: str) -> PasteboardSession:
    session = db.get_session(session_id)
    if not session:
        raise HTTPException(status_code=404, detail={"code": "SESSION_NOT_FOUND"})
    return session


async def _settle(
    session: PasteboardSession,
    pending: Optional[PendingRequest],
    processor: TextProcessor,
) -> dict:
    applied = await session.execute(processor, pending)
    if pending is not None and not applied:
        logger.info("Session %s: request #%d superseded", session.id, pending.request_id)
    return session.snapshot()


@router.post("/sessions", status_code=201, response_model=SessionResponse)
async def create_session(
    body: SessionCreate,
    processor: TextProcessor = Depends(get_processor),
):
    """Open a session; pasted text is processed right away."""
    session = db.create_session(text=body.text, action=body.action)
    return await _settle(session, session.open(), processor)


@router.get("/sessions/{session_id}", response_model=SessionResponse, responses=error_responses(404))
async def get_session(session_id: str):
    return _get_or_404(session_id).snapshot()


@router.post("/sessions/{session_id}/action", response_model=SessionResponse, responses=error_responses(404))
async def select_action(
    session_id: str,
    body: ActionSelect,
    processor: TextProcessor = Depends(get_processor),
):
    """Switch the action; reprocesses when it actually changed."""
    session = _get_or_404(session_id)
    return await _settle(session, session.select_action(body.action), processor)


@router.post("/sessions/{session_id}/input", response_model=SessionResponse, responses=error_responses(404))
async def change_input(
    session_id: str,
    body: InputChange,
    processor: TextProcessor = Depends(get_processor),
):
    """Replace the input text; blank input returns the session to idle."""
    session = _get_or_404(session_id)
    return await _settle(session, session.change_input(body.text), processor)


@router.post("/sessions/{session_id}/rerun", response_model=SessionResponse, responses=error_responses(404))
async def rerun(
    session_id: str,
    processor: TextProcessor = Depends(get_processor),
):
    session = _get_or_404(session_id)
    return await _settle(session, session.rerun(), processor)


@router.post("/sessions/{session_id}/copy", response_model=CopyResponse, responses=error_responses(404, 409))
async def copy_output(session_id: str):
    """Return the output text for the client to put on its clipboard."""
    session = _get_or_404(session_id)
    try:
        return {"text": session.copy_output()}
    except NoOutputError as e:
        raise HTTPException(status_code=409, detail={"code": "NO_OUTPUT", "message": str(e)})


@router.delete("/sessions/{session_id}", responses=error_responses(404))
async def close_session(session_id: str):
    _get_or_404(session_id)
    db.delete_session(session_id)
    return {"status": "deleted", "session_id": session_id}
