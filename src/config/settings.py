"""
Pasteboard Pro - Settings
=========================

Pydantic v2 model for everything configurable from the outside world:
environment variables, a YAML/JSON config file, or CLI flags. Settings
are read only at the edges (CLI, API start-up) and handed inward as a
frozen ``ProviderConfig``.

Environment
-----------
``ANTHROPIC_API_KEY``      credential; empty means mock mode
``PASTEBOARD_PROVIDER``    force "anthropic" or "mock"
``PASTEBOARD_BASE_URL``    API base URL
``PASTEBOARD_MODEL``       model identifier
``PASTEBOARD_MAX_TOKENS``  token budget
``PASTEBOARD_TIMEOUT``     request timeout in seconds
``PASTEBOARD_MOCK_DELAY``  simulated delay of the mock provider
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml
from pydantic import BaseModel, Field, field_validator

from core.providers.base import (
    DEFAULT_BASE_URL,
    DEFAULT_MAX_TOKENS,
    DEFAULT_MOCK_DELAY,
    DEFAULT_MODEL,
    ProviderConfig,
)

logger = logging.getLogger(__name__)

_ENV_MAP = {
    "api_key": "ANTHROPIC_API_KEY",
    "provider": "PASTEBOARD_PROVIDER",
    "base_url": "PASTEBOARD_BASE_URL",
    "model": "PASTEBOARD_MODEL",
    "max_tokens": "PASTEBOARD_MAX_TOKENS",
    "timeout_seconds": "PASTEBOARD_TIMEOUT",
    "mock_delay_seconds": "PASTEBOARD_MOCK_DELAY",
}


def load_config_file(path: Optional[str | Path]) -> Dict[str, Any]:
    """Load a YAML or JSON config file. A missing path gives ``{}``."""
    if not path:
        return {}
    p = Path(path)
    if not p.exists():
        logger.warning("Config file not found: %s", p)
        return {}
    with p.open("r", encoding="utf-8") as f:
        if p.suffix.lower() in (".yml", ".yaml"):
            data = yaml.safe_load(f) or {}
        else:
            data = json.load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {p}")
    return data


class Settings(BaseModel):
    """Runtime settings.

    Attributes:
        api_key:            Anthropic API key. Empty selects the mock provider.
        provider:           Force a provider ("anthropic" / "mock"); None = auto.
        base_url:           API base URL (the client appends ``/v1/messages``).
        model:              Model identifier sent with each request.
        max_tokens:         Token budget per request.
        timeout_seconds:    Request timeout; None keeps the SDK default.
        mock_delay_seconds: Simulated latency of the mock provider.
    """

    api_key: str = Field(default="", repr=False)
    provider: Optional[str] = None
    base_url: str = DEFAULT_BASE_URL
    model: str = DEFAULT_MODEL
    max_tokens: int = Field(default=DEFAULT_MAX_TOKENS, gt=0)
    timeout_seconds: Optional[float] = Field(default=None, gt=0)
    mock_delay_seconds: float = Field(default=DEFAULT_MOCK_DELAY, ge=0)

    @field_validator("provider")
    @classmethod
    def _check_provider(cls, v: Optional[str]) -> Optional[str]:
        if v is None or v == "":
            return None
        v = v.strip().lower()
        if v not in ("anthropic", "mock"):
            raise ValueError(f"provider must be 'anthropic' or 'mock', got {v!r}")
        return v

    @field_validator("base_url")
    @classmethod
    def _strip_slash(cls, v: str) -> str:
        return v.rstrip("/")

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        values = {
            field: env[var]
            for field, var in _ENV_MAP.items()
            if env.get(var) not in (None, "")
        }
        return cls(**values)

    @classmethod
    def from_file(cls, path: Optional[str | Path]) -> "Settings":
        return cls(**load_config_file(path))

    @classmethod
    def load(
        cls,
        config_path: Optional[str | Path] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "Settings":
        """File values first, environment on top."""
        base = cls.from_file(config_path)
        env = cls.from_env(environ)
        return base.merged(**env.model_dump(exclude_unset=True))

    def merged(self, **overrides: Any) -> "Settings":
        """Return a copy with the non-None ``overrides`` applied."""
        values = self.model_dump()
        values.update({k: v for k, v in overrides.items() if v is not None})
        return Settings(**values)

    # ------------------------------------------------------------------

    @property
    def provider_name(self) -> str:
        if self.provider:
            return self.provider
        return "anthropic" if self.api_key.strip() else "mock"

    def to_provider_config(self) -> ProviderConfig:
        return ProviderConfig(
            api_key=self.api_key,
            base_url=self.base_url,
            model=self.model,
            max_tokens=self.max_tokens,
            timeout_seconds=self.timeout_seconds,
            mock_delay_seconds=self.mock_delay_seconds,
        )
