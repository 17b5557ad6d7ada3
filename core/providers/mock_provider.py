"""Offline provider used when no API key is configured.

Waits a fixed delay, then returns a placeholder built from the start of
the input. Output is deterministic and always starts with ``[mock]`` so
it cannot be mistaken for a live result.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, Optional

from ..actions import ActionKind, ProcessingRequest
from .base import ProviderConfig, TextProvider

logger = logging.getLogger(__name__)

MOCK_PREFIX = "[mock] "
REPHRASE_CHARS = 100
SUMMARY_WORDS = 10
TWEET_WORDS = 8


def _first_words(text: str, n: int) -> str:
    return " ".join(text.split(" ")[:n])


def mock_output(action: ActionKind, text: str) -> str:
    """Deterministic placeholder for ``action`` applied to ``text``."""
    if action is ActionKind.REPHRASE:
        body = (
            "Here's a crisp, professional rewrite of your text: "
            f'"{text[:REPHRASE_CHARS]}..." → Polished and refined for maximum impact.'
        )
    elif action is ActionKind.SUMMARIZE:
        body = f"Key insight: {_first_words(text, SUMMARY_WORDS)}... (summarized for clarity)"
    else:
        body = f"🚀 {_first_words(text, TWEET_WORDS)}... #productivity #flow"
    return MOCK_PREFIX + body


class MockProvider(TextProvider):
    """Provider that never touches the network."""

    provider_name = "mock"

    def __init__(
        self,
        config: Optional[ProviderConfig] = None,
        *,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        super().__init__(config)
        self._sleep = sleep

    @property
    def model(self) -> str:
        return "mock"

    async def generate(self, request: ProcessingRequest, prompt: str) -> str:
        delay = self.config.mock_delay_seconds
        if delay > 0:
            await self._sleep(delay)
        return mock_output(request.action, request.text)
