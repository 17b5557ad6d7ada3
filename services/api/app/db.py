"""In-memory session store.

Sessions live in process memory only; there is no persistence. The store
is bounded: a session idle for longer than ``SESSION_TTL_SECONDS`` is
dropped, and once ``MAX_SESSIONS`` are open the least recently used one
makes room for a new one. All access goes through the functions below so
routers never touch the dicts directly.
"""

from __future__ import annotations

import logging
import os
import time
from collections import OrderedDict
from typing import Dict, Optional

from src.session.machine import PasteboardSession

logger = logging.getLogger(__name__)

MAX_SESSIONS = int(os.environ.get("PASTEBOARD_MAX_SESSIONS", "1000"))
SESSION_TTL_SECONDS = float(os.environ.get("PASTEBOARD_SESSION_TTL", "3600"))

_clock = time.monotonic

# ---------------------------------------------------------------------------
# In-memory store (least recently used first)
# ---------------------------------------------------------------------------

_mem_sessions: "OrderedDict[str, PasteboardSession]" = OrderedDict()
_mem_last_seen: Dict[str, float] = {}


def _touch(session_id: str) -> None:
    _mem_sessions.move_to_end(session_id)
    _mem_last_seen[session_id] = _clock()


def _drop(session_id: str) -> None:
    _mem_sessions.pop(session_id, None)
    _mem_last_seen.pop(session_id, None)


def _evict_expired() -> None:
    if SESSION_TTL_SECONDS <= 0:
        return
    now = _clock()
    for session_id in list(_mem_sessions):
        if now - _mem_last_seen.get(session_id, now) <= SESSION_TTL_SECONDS:
            break
        _drop(session_id)
        logger.info("Session %s expired", session_id)


def create_session(text: str = "", action: str = "rephrase") -> PasteboardSession:
    _evict_expired()
    while MAX_SESSIONS > 0 and len(_mem_sessions) >= MAX_SESSIONS:
        oldest = next(iter(_mem_sessions))
        _drop(oldest)
        logger.info("Session %s evicted (store full)", oldest)

    session = PasteboardSession(text=text, action=action)
    _mem_sessions[session.id] = session
    _touch(session.id)
    logger.info("Session %s created (action=%s, %d chars)", session.id, session.action.value, len(text))
    return session


def get_session(session_id: str) -> Optional[PasteboardSession]:
    _evict_expired()
    session = _mem_sessions.get(session_id)
    if session is not None:
        _touch(session_id)
    return session


def delete_session(session_id: str) -> bool:
    if session_id in _mem_sessions:
        _drop(session_id)
        logger.info("Session %s closed", session_id)
        return True
    return False


def clear_sessions() -> None:
    _mem_sessions.clear()
    _mem_last_seen.clear()
