"""Shared fixtures for API integration tests.

Uses FastAPI TestClient (in-memory, no network) with the processor
dependency overridden by a stub provider, so tests run without an API
key or external services.
"""

from __future__ import annotations

import os
import sys
from typing import List, Optional

import pytest

# Ensure project root is on sys.path
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "..", ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

# No live calls from tests
os.environ.pop("ANTHROPIC_API_KEY", None)
os.environ.pop("PASTEBOARD_PROVIDER", None)

from core.actions import ProcessingRequest  # noqa: E402
from core.providers.base import ProcessingError, TextProvider  # noqa: E402


class StubProvider(TextProvider):
    """Echoes ``<action>:<text>`` or raises ``error`` when set."""

    provider_name = "stub"

    def __init__(self) -> None:
        super().__init__()
        self.error: Optional[ProcessingError] = None
        self.calls: List[ProcessingRequest] = []

    async def generate(self, request: ProcessingRequest, prompt: str) -> str:
        self.calls.append(request)
        if self.error is not None:
            raise self.error
        return f"{request.action.value}:{request.text}"


@pytest.fixture(autouse=True)
def _reset_state():
    """Clear in-memory sessions and prompt overrides before each test."""
    from services.api.app import db
    from src.rewrite.prompts import default_registry

    db.clear_sessions()
    default_registry().reset_all()
    yield
    default_registry().reset_all()


@pytest.fixture()
def stub_provider():
    return StubProvider()


@pytest.fixture()
def client(stub_provider):
    """FastAPI TestClient — no network, no server startup needed."""
    from fastapi.testclient import TestClient

    from services.api.app.deps import get_processor
    from services.api.app.main import app
    from src.rewrite.processor import TextProcessor
    from src.rewrite.prompts import default_registry

    processor = TextProcessor(stub_provider, prompts=default_registry())
    app.dependency_overrides[get_processor] = lambda: processor
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def sample_session(client):
    """Open a session with pasted text and return its id."""
    resp = client.post("/v1/sessions", json={"text": "Hello team, the launch moved to Friday."})
    assert resp.status_code == 201
    return resp.json()["id"]
