"""LLM provider abstraction layer.

A provider turns one formatted prompt into rewritten text. Two backends
exist: the Anthropic Messages API and an offline mock used when no API
key is configured.
"""

from .base import (
    MalformedResponseError,
    ProcessingError,
    ProviderConfig,
    TextProvider,
    TransportError,
    UnknownError,
)
from .anthropic_provider import AnthropicProvider
from .mock_provider import MockProvider
from .registry import get_provider, provider_for_config

__all__ = [
    "ProviderConfig",
    "TextProvider",
    "ProcessingError",
    "TransportError",
    "MalformedResponseError",
    "UnknownError",
    "AnthropicProvider",
    "MockProvider",
    "get_provider",
    "provider_for_config",
]
