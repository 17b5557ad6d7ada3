"""Anthropic Claude provider implementation.

Sends one user message to the Messages API and extracts
``content[0].text`` from the raw JSON envelope. SDK retries are disabled:
a failed call is surfaced once and the caller decides whether to rerun.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Dict, Mapping, Optional

import anthropic
import httpx

from ..actions import ProcessingRequest
from .base import (
    ANTHROPIC_VERSION,
    MalformedResponseError,
    ProcessingError,
    ProviderConfig,
    TextProvider,
    TransportError,
    UnknownError,
)

logger = logging.getLogger(__name__)


def _error_message(body: Any) -> Optional[str]:
    """Pull ``error.message`` out of an error body, if there is one.

    Depending on the SDK version ``body`` is either the whole envelope or
    its inner ``error`` object, so both shapes are accepted.
    """
    if not isinstance(body, Mapping):
        return None
    err = body.get("error", body)
    if isinstance(err, Mapping):
        msg = err.get("message")
        if isinstance(msg, str) and msg:
            return msg
    return None


def extract_text(data: Any) -> str:
    """Return the trimmed ``content[0].text`` of a Messages API response."""
    content = data.get("content") if isinstance(data, Mapping) else None
    first = content[0] if isinstance(content, list) and content else None
    text = first.get("text") if isinstance(first, Mapping) else None
    if not isinstance(text, str) or not text:
        raise MalformedResponseError(
            "Invalid response format from Claude API",
            provider=AnthropicProvider.provider_name,
        )
    return text.strip()


class AnthropicProvider(TextProvider):
    """Provider backed by the Anthropic Messages API."""

    provider_name = "anthropic"

    def __init__(
        self,
        config: Optional[ProviderConfig] = None,
        *,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        super().__init__(config)
        self._http_client = http_client
        self._client: Optional[anthropic.AsyncAnthropic] = None

    @property
    def client(self) -> anthropic.AsyncAnthropic:
        if self._client is None:
            if not self.config.has_credential:
                raise UnknownError(
                    "ANTHROPIC_API_KEY is not set",
                    provider=self.provider_name,
                )
            kwargs: Dict[str, Any] = {
                "api_key": self.config.api_key,
                "base_url": self.config.base_url,
                "max_retries": 0,
                "default_headers": {"anthropic-version": ANTHROPIC_VERSION},
            }
            if self.config.timeout_seconds is not None:
                kwargs["timeout"] = self.config.timeout_seconds
            if self._http_client is not None:
                kwargs["http_client"] = self._http_client
            self._client = anthropic.AsyncAnthropic(**kwargs)
        return self._client

    async def generate(self, request: ProcessingRequest, prompt: str) -> str:
        t0 = time.time()
        try:
            raw = await self.client.messages.with_raw_response.create(
                model=self.config.model,
                max_tokens=self.config.max_tokens,
                messages=[{"role": "user", "content": prompt}],
            )
            data = raw.http_response.json()
        except ProcessingError:
            raise
        except anthropic.APIStatusError as e:
            detail = _error_message(e.body) or f"API error: {e.status_code}"
            logger.error(
                "Anthropic API returned %d for %s: %s",
                e.status_code, request.action.value, detail,
            )
            raise TransportError(
                detail, status_code=e.status_code, provider=self.provider_name,
            ) from e
        except anthropic.APIConnectionError as e:
            logger.error("Anthropic connection error: %s", e.__cause__ or e)
            raise UnknownError(
                str(e.__cause__ or e), provider=self.provider_name,
            ) from e
        except ValueError as e:
            # Body was not valid JSON
            logger.error("Anthropic response is not JSON: %s", e)
            raise UnknownError(
                f"Invalid JSON in response: {e}", provider=self.provider_name,
            ) from e
        except Exception as e:
            logger.error("Anthropic API error: %s", e)
            raise UnknownError(str(e), provider=self.provider_name) from e

        text = extract_text(data)
        logger.debug(
            "Anthropic %s done in %dms (%d chars)",
            request.action.value, int((time.time() - t0) * 1000), len(text),
        )
        return text

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.close()
            self._client = None
