"""Provider interface — abstract base for the live and mock backends.

Every provider must implement ``generate``. The text processor receives
its provider via dependency injection, so tests can swap the Anthropic
backend for the mock (or a stub) without touching any global state.
"""

from __future__ import annotations

import abc
from dataclasses import dataclass
from typing import Optional

from ..actions import ProcessingRequest

DEFAULT_BASE_URL = "https://api.anthropic.com"
DEFAULT_MODEL = "claude-3-5-sonnet-20241022"
DEFAULT_MAX_TOKENS = 1000
DEFAULT_MOCK_DELAY = 1.5
ANTHROPIC_VERSION = "2023-06-01"


@dataclass(frozen=True)
class ProviderConfig:
    """Immutable configuration handed to a provider at construction time."""

    api_key: str = ""
    base_url: str = DEFAULT_BASE_URL
    model: str = DEFAULT_MODEL
    max_tokens: int = DEFAULT_MAX_TOKENS
    timeout_seconds: Optional[float] = None
    mock_delay_seconds: float = DEFAULT_MOCK_DELAY

    @property
    def has_credential(self) -> bool:
        return bool(self.api_key and self.api_key.strip())

    def __repr__(self) -> str:
        # Never leak the key into logs or tracebacks
        masked = "***" if self.has_credential else "''"
        return (
            f"ProviderConfig(api_key={masked}, base_url={self.base_url!r}, "
            f"model={self.model!r}, max_tokens={self.max_tokens}, "
            f"timeout_seconds={self.timeout_seconds}, "
            f"mock_delay_seconds={self.mock_delay_seconds})"
        )


class TextProvider(abc.ABC):
    """Abstract base class for text providers.

    Subclasses must implement ``generate``: take the request and the
    prompt already formatted for its action, return the processed text.
    """

    provider_name: str = "base"

    def __init__(self, config: Optional[ProviderConfig] = None):
        self.config = config or ProviderConfig()

    @property
    def model(self) -> str:
        return self.config.model

    @abc.abstractmethod
    async def generate(self, request: ProcessingRequest, prompt: str) -> str:
        """Return processed text for ``request``.

        Parameters
        ----------
        request : ProcessingRequest
            The action and the raw user text.
        prompt : str
            The formatted prompt for ``request.action``.

        Raises
        ------
        ProcessingError
            ``TransportError``, ``MalformedResponseError`` or
            ``UnknownError``.
        """
        ...

    async def aclose(self) -> None:
        """Release any underlying connections."""


class ProcessingError(Exception):
    """Base exception for provider failures.

    ``str(err)`` is the caller-facing message; ``detail`` is the bare
    reason without the prefix.
    """

    prefix = "Claude API failed: "

    def __init__(self, detail: str, provider: str = ""):
        super().__init__(f"{self.prefix}{detail}")
        self.detail = detail
        self.provider = provider

    @property
    def message(self) -> str:
        return str(self)


class TransportError(ProcessingError):
    """Non-2xx HTTP response."""

    def __init__(self, detail: str, status_code: int, provider: str = ""):
        super().__init__(detail, provider=provider)
        self.status_code = status_code


class MalformedResponseError(ProcessingError):
    """2xx response whose body lacks ``content[0].text``."""


class UnknownError(ProcessingError):
    """Network failure, unparseable body, or any unexpected exception."""

    generic_message = "Failed to process text with Claude"

    def __init__(self, detail: str = "", provider: str = ""):
        if detail:
            super().__init__(detail, provider=provider)
        else:
            # No original message to wrap
            Exception.__init__(self, self.generic_message)
            self.detail = self.generic_message
            self.provider = provider
