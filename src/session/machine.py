"""Pasteboard session state machine.

One session is one lifetime of the pasteboard modal: the selected action,
the input text, and the last output or error. Events drive transitions::

    idle ──(non-blank input / action / rerun)──▶ loading
    loading ──resolve──▶ ready          loading ──reject──▶ error
    ready | error ──(input / action / rerun)──▶ loading
    any ──(blank input)──▶ idle

Every transition into ``loading`` hands back a ``PendingRequest`` with a
fresh id. Only the newest pending request may settle the session; a late
settlement of a superseded request is ignored. That is how a caller
"cancels": it simply issues a newer request.
"""
from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional

from core.actions import ActionKind
from core.providers.base import ProcessingError

logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


class NoOutputError(Exception):
    """Raised when copying from a session that has no output."""


@dataclass(frozen=True)
class PendingRequest:
    """A request the session wants issued."""

    request_id: int
    action: ActionKind
    text: str


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class PasteboardSession:
    """Explicit state machine replacing the modal's render-driven effects."""

    def __init__(
        self,
        text: str = "",
        action: ActionKind | str = ActionKind.REPHRASE,
        session_id: Optional[str] = None,
    ):
        self.id = session_id or str(uuid.uuid4())
        self.action = ActionKind.parse(action)
        self.input_text = text or ""
        self.output_text = ""
        self.error: Optional[str] = None
        self.state = SessionState.IDLE
        self._last_id = 0
        self._pending: Optional[PendingRequest] = None
        self.created_at = _now_iso()
        self.updated_at = self.created_at

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def open(self) -> Optional[PendingRequest]:
        """Modal opened: process any text it was opened with."""
        return self._issue()

    def select_action(self, action: ActionKind | str) -> Optional[PendingRequest]:
        action = ActionKind.parse(action)
        if action is self.action:
            return None
        self.action = action
        return self._issue()

    def change_input(self, text: str) -> Optional[PendingRequest]:
        text = text or ""
        if text == self.input_text:
            return None
        self.input_text = text
        return self._issue()

    def rerun(self) -> Optional[PendingRequest]:
        if self.state is SessionState.LOADING:
            return None
        return self._issue()

    def resolve(self, request_id: int, output: str) -> bool:
        """Settle ``request_id`` with ``output``. False if it was stale."""
        if not self._is_current(request_id):
            return False
        self._pending = None
        self.output_text = output
        self.error = None
        self._transition(SessionState.READY)
        return True

    def reject(self, request_id: int, message: str) -> bool:
        """Settle ``request_id`` with a failure. False if it was stale."""
        if not self._is_current(request_id):
            return False
        self._pending = None
        self.error = message or "Something went wrong"
        self._transition(SessionState.ERROR)
        return True

    def copy_output(self) -> str:
        if not self.output_text:
            raise NoOutputError("Nothing to copy")
        return self.output_text

    # ------------------------------------------------------------------

    async def execute(self, processor: Any, pending: Optional[PendingRequest]) -> bool:
        """Run ``pending`` through ``processor`` and settle the session.

        Returns whether the settlement was applied (False when ``pending``
        is None or was superseded while in flight).
        """
        if pending is None:
            return False
        try:
            output = await processor.process(pending.action, pending.text)
        except ProcessingError as e:
            return self.reject(pending.request_id, str(e))
        return self.resolve(pending.request_id, output)

    @property
    def pending(self) -> Optional[PendingRequest]:
        return self._pending

    def snapshot(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "state": self.state.value,
            "action": self.action.value,
            "input_text": self.input_text,
            "output_text": self.output_text,
            "error": self.error,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

    # ------------------------------------------------------------------

    def _issue(self) -> Optional[PendingRequest]:
        if not self.input_text.strip():
            self._pending = None
            self.output_text = ""
            self.error = None
            self._transition(SessionState.IDLE)
            return None
        self._last_id += 1
        self._pending = PendingRequest(self._last_id, self.action, self.input_text)
        self._transition(SessionState.LOADING)
        return self._pending

    def _is_current(self, request_id: int) -> bool:
        current = self._pending is not None and self._pending.request_id == request_id
        if not current:
            logger.debug("Session %s: ignoring stale settlement #%d", self.id, request_id)
        return current

    def _transition(self, new_state: SessionState) -> None:
        if new_state is not self.state:
            logger.debug("Session %s: %s -> %s", self.id, self.state.value, new_state.value)
        self.state = new_state
        self.updated_at = _now_iso()
