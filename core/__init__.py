"""Core logic for Pasteboard Pro.

This package contains the action model and the LLM provider layer
(live Anthropic calls and the offline mock). It has ZERO dependency on
the HTTP API or the CLI.
"""

__version__ = "0.1.0"
