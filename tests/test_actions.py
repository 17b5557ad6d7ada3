"""Tests for core.actions."""

import pytest

from core.actions import ActionKind, ProcessingRequest, ProcessingResult, list_actions


class TestActionKind:
    def test_values(self):
        assert [a.value for a in ActionKind] == ["rephrase", "summarize", "tweetify"]

    def test_parse_name(self):
        assert ActionKind.parse("Summarize") is ActionKind.SUMMARIZE
        assert ActionKind.parse(" tweetify ") is ActionKind.TWEETIFY

    def test_parse_passthrough(self):
        assert ActionKind.parse(ActionKind.REPHRASE) is ActionKind.REPHRASE

    def test_parse_unknown(self):
        with pytest.raises(ValueError, match="Unknown action"):
            ActionKind.parse("translate")

    def test_labels_and_shortcuts(self):
        assert ActionKind.REPHRASE.label == "Rephrase"
        assert ActionKind.SUMMARIZE.shortcut == "⌘2"

    def test_list_actions(self):
        assert list_actions()[0] == {"id": "rephrase", "label": "Rephrase", "shortcut": "⌘1"}


class TestProcessingRequest:
    def test_action_coerced(self):
        req = ProcessingRequest("summarize", "text")
        assert req.action is ActionKind.SUMMARIZE

    @pytest.mark.parametrize("text", ["", "   ", "\n\t"])
    def test_blank_text_rejected(self, text):
        with pytest.raises(ValueError, match="empty"):
            ProcessingRequest(ActionKind.REPHRASE, text)

    def test_immutable(self):
        req = ProcessingRequest(ActionKind.REPHRASE, "text")
        with pytest.raises(AttributeError):
            req.text = "other"


class TestProcessingResult:
    def test_ok_and_dict(self):
        res = ProcessingResult(action=ActionKind.TWEETIFY, output="hi", provider="mock")
        assert res.ok
        assert res.to_dict()["action"] == "tweetify"

    def test_error(self):
        res = ProcessingResult(action=ActionKind.TWEETIFY, error="boom")
        assert not res.ok
