"""Shared fixtures for the Pasteboard Pro test suite.

Provides a recording sleep for the mock provider and a factory that wires
the Anthropic provider to an ``httpx.MockTransport`` so live-path tests
never touch the network.
"""

from typing import Callable, List

import httpx
import pytest

from core.providers.anthropic_provider import AnthropicProvider
from core.providers.base import ProviderConfig
from core.providers.mock_provider import MockProvider


class RecordingSleep:
    """Stands in for ``asyncio.sleep`` and remembers the requested delays."""

    def __init__(self) -> None:
        self.delays: List[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


@pytest.fixture
def fake_sleep():
    return RecordingSleep()


@pytest.fixture
def mock_provider(fake_sleep):
    return MockProvider(ProviderConfig(), sleep=fake_sleep)


@pytest.fixture
def sent_requests():
    """Requests captured by ``anthropic_factory`` handlers."""
    return []


@pytest.fixture
def anthropic_factory(sent_requests) -> Callable[..., AnthropicProvider]:
    """Build an AnthropicProvider whose HTTP traffic goes to ``handler``.

    ``handler`` receives the ``httpx.Request`` and returns an
    ``httpx.Response`` (or raises an ``httpx`` exception).
    """

    def _factory(handler, **config) -> AnthropicProvider:
        def _recording(request: httpx.Request) -> httpx.Response:
            sent_requests.append(request)
            return handler(request)

        config.setdefault("api_key", "sk-test")
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(_recording))
        return AnthropicProvider(ProviderConfig(**config), http_client=http_client)

    return _factory
