"""Action kinds and the request/result records passed through providers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional


class ActionKind(str, Enum):
    """The three rewrite modes."""

    REPHRASE = "rephrase"
    SUMMARIZE = "summarize"
    TWEETIFY = "tweetify"

    @property
    def label(self) -> str:
        return _ACTION_META[self]["label"]

    @property
    def shortcut(self) -> str:
        return _ACTION_META[self]["shortcut"]

    @classmethod
    def parse(cls, value: "str | ActionKind") -> "ActionKind":
        """Accept an ActionKind or its (case-insensitive) name."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            supported = ", ".join(a.value for a in cls)
            raise ValueError(
                f"Unknown action: {value!r}. Supported: {supported}"
            ) from None


# Tab order and shortcut hints of the pasteboard modal
_ACTION_META: Dict[ActionKind, Dict[str, str]] = {
    ActionKind.REPHRASE: {"label": "Rephrase", "shortcut": "⌘1"},
    ActionKind.SUMMARIZE: {"label": "Summarize", "shortcut": "⌘2"},
    ActionKind.TWEETIFY: {"label": "Tweetify", "shortcut": "⌘3"},
}


def list_actions() -> List[Dict[str, str]]:
    """Return action metadata for API/CLI consumption."""
    return [
        {"id": a.value, "label": a.label, "shortcut": a.shortcut}
        for a in ActionKind
    ]


@dataclass(frozen=True)
class ProcessingRequest:
    """An action plus the raw input text. The text must not be blank."""

    action: ActionKind
    text: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "action", ActionKind.parse(self.action))
        if not self.text or not self.text.strip():
            raise ValueError("Input text is empty")


@dataclass
class ProcessingResult:
    """Outcome of one request/response cycle."""

    action: ActionKind
    output: str = ""
    provider: str = ""
    model: str = ""
    latency_ms: int = 0
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict:
        return {
            "action": self.action.value,
            "output": self.output,
            "provider": self.provider,
            "model": self.model,
            "latency_ms": self.latency_ms,
            "error": self.error,
        }
