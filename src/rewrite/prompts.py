"""Prompt templates and the prompt registry.

Provides:
  - Default templates for all actions
  - ``format_prompt`` (pure, uses the defaults)
  - Runtime override via ``PromptRegistry.set`` and reset to defaults
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from core.actions import ActionKind

logger = logging.getLogger(__name__)

PLACEHOLDER = "{text}"

_PERSONA = "You are Pasteboard Pro, an expert writing assistant."

REPHRASE_PROMPT = f"""{_PERSONA} Rewrite the text below in a crisp, professional tone. Be concise and remove fluff. Return only the rewritten text.

---
{PLACEHOLDER}
---"""

SUMMARIZE_PROMPT = f"""{_PERSONA} Produce a 1-2 sentence summary of the text below. Focus on key points and strip jargon.

---
{PLACEHOLDER}
---"""

TWEETIFY_PROMPT = f"""{_PERSONA} Convert the following into a single high-engagement tweet. Keep it under 280 characters, use plain language, and feel free to add appropriate emoji.

---
{PLACEHOLDER}
---"""

DEFAULT_TEMPLATES: Dict[ActionKind, str] = {
    ActionKind.REPHRASE: REPHRASE_PROMPT,
    ActionKind.SUMMARIZE: SUMMARIZE_PROMPT,
    ActionKind.TWEETIFY: TWEETIFY_PROMPT,
}


def render(template: str, text: str) -> str:
    # Plain substitution: user text and templates may contain braces
    return template.replace(PLACEHOLDER, text)


def format_prompt(action: ActionKind | str, text: str) -> str:
    """Build the prompt for ``action`` from the default template."""
    return render(DEFAULT_TEMPLATES[ActionKind.parse(action)], text)


@dataclass
class PromptEntry:
    """A single registered prompt."""
    action: ActionKind
    display_name: str
    description: str
    default_content: str
    current_content: str = ""  # runtime value (empty = use default)

    @property
    def content(self) -> str:
        """Return current content, falling back to default."""
        return self.current_content if self.current_content else self.default_content

    @property
    def is_customized(self) -> bool:
        return bool(self.current_content) and self.current_content != self.default_content

    def reset(self) -> None:
        self.current_content = ""

    def to_dict(self) -> dict:
        return {
            "action": self.action.value,
            "display_name": self.display_name,
            "description": self.description,
            "content": self.content,
            "default_content": self.default_content,
            "is_customized": self.is_customized,
        }


class PromptRegistry:
    """Registry of the three action prompts.

    Usage::

        registry = PromptRegistry()
        registry.format(ActionKind.SUMMARIZE, text)
        registry.set("summarize", "Summarize in one line:\\n{text}")
        registry.reset("summarize")
    """

    def __init__(self) -> None:
        self._entries: Dict[ActionKind, PromptEntry] = {}
        self._register_defaults()

    def _register_defaults(self) -> None:
        descriptions = {
            ActionKind.REPHRASE: "Crisp, professional rewrite with the fluff removed",
            ActionKind.SUMMARIZE: "1-2 sentence summary of the key points",
            ActionKind.TWEETIFY: "Single tweet under 280 characters",
        }
        for action, template in DEFAULT_TEMPLATES.items():
            self._entries[action] = PromptEntry(
                action=action,
                display_name=action.label,
                description=descriptions[action],
                default_content=template,
            )

    def entry(self, action: ActionKind | str) -> PromptEntry:
        return self._entries[ActionKind.parse(action)]

    def get(self, action: ActionKind | str) -> str:
        return self.entry(action).content

    def set(self, action: ActionKind | str, content: str) -> None:
        """Override the template for ``action``; it must contain ``{text}``."""
        if PLACEHOLDER not in (content or ""):
            raise ValueError(f"Prompt template must contain {PLACEHOLDER}")
        entry = self.entry(action)
        entry.current_content = content
        logger.info("Prompt override set for %s (%d chars)", entry.action.value, len(content))

    def reset(self, action: ActionKind | str) -> None:
        self.entry(action).reset()

    def reset_all(self) -> None:
        for entry in self._entries.values():
            entry.reset()

    def is_customized(self, action: ActionKind | str) -> bool:
        return self.entry(action).is_customized

    def list_entries(self) -> List[PromptEntry]:
        return [self._entries[a] for a in ActionKind]

    def format(self, action: ActionKind | str, text: str) -> str:
        return render(self.get(action), text)


_default_registry: Optional[PromptRegistry] = None


def default_registry() -> PromptRegistry:
    """Process-wide registry shared by the API service."""
    global _default_registry
    if _default_registry is None:
        _default_registry = PromptRegistry()
    return _default_registry
