"""Pasteboard session state machine.

Public API
----------
.. autoclass:: PasteboardSession
.. autoclass:: SessionState
"""
from .machine import NoOutputError, PasteboardSession, PendingRequest, SessionState

__all__ = [
    "PasteboardSession",
    "PendingRequest",
    "SessionState",
    "NoOutputError",
]
