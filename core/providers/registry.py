"""Provider factory.

Central place that decides which backend serves a given configuration.
"""
from __future__ import annotations

import logging
from typing import Any, Optional

from .base import ProviderConfig, TextProvider

logger = logging.getLogger(__name__)


def get_provider(
    provider_name: str,
    config: Optional[ProviderConfig] = None,
    **kwargs: Any,
) -> TextProvider:
    """Create a provider by name.

    Parameters
    ----------
    provider_name :
        One of "anthropic", "mock".
    config :
        Provider configuration; defaults to ``ProviderConfig()``.
    kwargs :
        Passed to the provider constructor (``http_client`` for
        anthropic, ``sleep`` for mock).

    Raises
    ------
    ValueError
        If the provider_name is not recognized.
    """
    config = config or ProviderConfig()
    if provider_name == "anthropic":
        from .anthropic_provider import AnthropicProvider
        return AnthropicProvider(config, **kwargs)
    elif provider_name == "mock":
        from .mock_provider import MockProvider
        return MockProvider(config, **kwargs)
    else:
        raise ValueError(
            f"Unknown provider: {provider_name!r}. Supported: anthropic, mock"
        )


def provider_for_config(config: ProviderConfig, **kwargs: Any) -> TextProvider:
    """Pick the live provider when a credential is present, else the mock."""
    name = "anthropic" if config.has_credential else "mock"
    if name == "mock":
        logger.info("No API key configured — using mock provider")
    else:
        logger.info("Using anthropic provider (model=%s)", config.model)
    return get_provider(name, config, **kwargs)
