"""Text processor — the single entry point that turns (action, text) into
rewritten text.

The provider (live or mock) is chosen once, at construction time; the
processor itself holds no per-call state, so one instance may serve any
number of independent calls.
"""
from __future__ import annotations

import logging
import time
from typing import Optional

from core.actions import ActionKind, ProcessingRequest, ProcessingResult
from core.providers.base import ProcessingError, ProviderConfig, TextProvider
from core.providers.registry import get_provider, provider_for_config

from .prompts import PromptRegistry

logger = logging.getLogger(__name__)


class TextProcessor:
    """Format the prompt for an action and hand it to the provider."""

    def __init__(
        self,
        provider: TextProvider,
        prompts: Optional[PromptRegistry] = None,
    ):
        self.provider = provider
        self.prompts = prompts or PromptRegistry()

    @classmethod
    def from_config(
        cls,
        config: ProviderConfig,
        *,
        provider_name: Optional[str] = None,
        prompts: Optional[PromptRegistry] = None,
    ) -> "TextProcessor":
        """Build a processor, picking the provider from ``config`` unless
        ``provider_name`` forces one."""
        if provider_name:
            provider = get_provider(provider_name, config)
        else:
            provider = provider_for_config(config)
        return cls(provider, prompts=prompts)

    @property
    def provider_name(self) -> str:
        return self.provider.provider_name

    async def process(self, action: ActionKind | str, text: str) -> str:
        """Return the processed text.

        Raises ``ValueError`` for blank input and ``ProcessingError`` when
        the provider fails.
        """
        request = ProcessingRequest(ActionKind.parse(action), text)
        prompt = self.prompts.format(request.action, request.text)
        t0 = time.time()
        try:
            output = await self.provider.generate(request, prompt)
        except ProcessingError as e:
            logger.error(
                "%s failed via %s: %s",
                request.action.value, self.provider_name, e,
            )
            raise
        logger.info(
            "%s via %s done in %dms",
            request.action.value, self.provider_name, int((time.time() - t0) * 1000),
        )
        return output

    async def run(self, request: ProcessingRequest) -> ProcessingResult:
        """Like ``process`` but never raises ``ProcessingError``: failures
        are recorded on the returned result."""
        t0 = time.time()
        result = ProcessingResult(
            action=request.action,
            provider=self.provider_name,
            model=self.provider.model,
        )
        try:
            result.output = await self.process(request.action, request.text)
        except ProcessingError as e:
            result.error = str(e)
        result.latency_ms = int((time.time() - t0) * 1000)
        return result

    async def aclose(self) -> None:
        await self.provider.aclose()
