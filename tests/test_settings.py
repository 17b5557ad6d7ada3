"""Tests for src.config.settings."""

import json

import pytest
from pydantic import ValidationError

from src.config.settings import Settings, load_config_file


class TestDefaults:
    def test_defaults(self):
        s = Settings()
        assert s.api_key == ""
        assert s.provider is None
        assert s.provider_name == "mock"
        assert s.max_tokens == 1000

    def test_key_selects_anthropic(self):
        assert Settings(api_key="sk-1").provider_name == "anthropic"

    def test_forced_provider(self):
        assert Settings(api_key="sk-1", provider="MOCK").provider_name == "mock"

    def test_key_hidden_from_repr(self):
        assert "sk-secret" not in repr(Settings(api_key="sk-secret"))


class TestValidation:
    def test_bad_provider(self):
        with pytest.raises(ValidationError):
            Settings(provider="openai")

    def test_max_tokens_positive(self):
        with pytest.raises(ValidationError):
            Settings(max_tokens=0)

    def test_negative_mock_delay(self):
        with pytest.raises(ValidationError):
            Settings(mock_delay_seconds=-1)

    def test_base_url_trailing_slash(self):
        assert Settings(base_url="https://x.example.com/").base_url == "https://x.example.com"


class TestSources:
    def test_from_env(self):
        s = Settings.from_env({
            "ANTHROPIC_API_KEY": "sk-env",
            "PASTEBOARD_MODEL": "claude-x",
            "PASTEBOARD_MAX_TOKENS": "256",
            "PASTEBOARD_MOCK_DELAY": "0",
            "PASTEBOARD_PROVIDER": "",
        })
        assert s.api_key == "sk-env"
        assert s.model == "claude-x"
        assert s.max_tokens == 256
        assert s.mock_delay_seconds == 0
        assert s.provider is None

    def test_from_yaml_file(self, tmp_path):
        path = tmp_path / "pasteboard.yaml"
        path.write_text("model: claude-yaml\nmax_tokens: 50\n", encoding="utf-8")
        s = Settings.from_file(path)
        assert s.model == "claude-yaml"
        assert s.max_tokens == 50

    def test_from_json_file(self, tmp_path):
        path = tmp_path / "pasteboard.json"
        path.write_text(json.dumps({"mock_delay_seconds": 0.25}), encoding="utf-8")
        assert Settings.from_file(path).mock_delay_seconds == 0.25

    def test_missing_file(self, tmp_path):
        assert load_config_file(tmp_path / "nope.yaml") == {}
        assert load_config_file(None) == {}

    def test_non_mapping_file(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ValueError):
            load_config_file(path)

    def test_env_overrides_file(self, tmp_path):
        path = tmp_path / "cfg.yaml"
        path.write_text("model: from-file\nmax_tokens: 50\n", encoding="utf-8")
        s = Settings.load(path, environ={"PASTEBOARD_MODEL": "from-env"})
        assert s.model == "from-env"
        assert s.max_tokens == 50

    def test_merged_ignores_none(self):
        s = Settings(model="a").merged(model=None, max_tokens=5)
        assert s.model == "a"
        assert s.max_tokens == 5


def test_to_provider_config():
    cfg = Settings(api_key="sk", model="m", max_tokens=9, timeout_seconds=3).to_provider_config()
    assert cfg.api_key == "sk"
    assert cfg.model == "m"
    assert cfg.max_tokens == 9
    assert cfg.timeout_seconds == 3
