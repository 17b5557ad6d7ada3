"""FastAPI dependencies.

The processor is built once from the environment on first use. Tests
replace it through ``app.dependency_overrides[get_processor]``.
"""

from __future__ import annotations

import logging
from typing import Optional

from src.config.settings import Settings
from src.rewrite.processor import TextProcessor
from src.rewrite.prompts import default_registry

logger = logging.getLogger(__name__)

_processor: Optional[TextProcessor] = None


def get_settings() -> Settings:
    return Settings.from_env()


def get_processor() -> TextProcessor:
    global _processor
    if _processor is None:
        settings = get_settings()
        _processor = TextProcessor.from_config(
            settings.to_provider_config(),
            provider_name=settings.provider,
            prompts=default_registry(),
        )
        logger.info("Text processor ready (provider=%s)", _processor.provider_name)
    return _processor


async def close_processor() -> None:
    global _processor
    if _processor is not None:
        await _processor.aclose()
        _processor = None
