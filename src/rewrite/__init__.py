"""Prompt formatting and the text processor for the three rewrite actions."""

from .processor import TextProcessor
from .prompts import PromptRegistry, default_registry, format_prompt

__all__ = [
    "TextProcessor",
    "PromptRegistry",
    "default_registry",
    "format_prompt",
]
