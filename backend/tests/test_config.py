"""Configuration tests: env parsing, availability probe, capability table."""

import os
import sys

# Ensure the backend package is importable
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from app.check_ai_config import main as check_ai_config
from app.config import (
    DEFAULT_AI_API_URL,
    DEFAULT_AI_MODEL,
    DEFAULT_AI_TIMEOUT,
    AiConfig,
    capabilities_for,
    load_ai_config,
)


class TestLoadAiConfig:
    def test_defaults(self):
        config = load_ai_config({})
        assert config.enabled is True
        assert config.api_url == DEFAULT_AI_API_URL
        assert config.api_key == ""
        assert config.model == DEFAULT_AI_MODEL
        assert config.timeout == DEFAULT_AI_TIMEOUT
        assert config.is_available() is False

    def test_available_with_key(self):
        config = load_ai_config({"AI_API_KEY": "gsk-abc"})
        assert config.is_available() is True

    @pytest.mark.parametrize("flag", ["false", "FALSE", "0", "no", "off", " False "])
    def test_explicitly_disabled(self, flag):
        config = load_ai_config({"AI_ENABLED": flag, "AI_API_KEY": "gsk-abc"})
        assert config.enabled is False
        assert config.is_available() is False

    @pytest.mark.parametrize("flag", ["true", "1", "yes", "anything"])
    def test_other_flag_values_keep_it_enabled(self, flag):
        config = load_ai_config({"AI_ENABLED": flag, "AI_API_KEY": "gsk-abc"})
        assert config.enabled is True

    def test_blank_endpoint_is_unconfigured(self):
        config = load_ai_config({"AI_API_URL": "  ", "AI_API_KEY": "gsk-abc"})
        assert config.is_available() is False

    def test_blank_model_uses_default(self):
        assert load_ai_config({"AI_MODEL": ""}).model == DEFAULT_AI_MODEL

    def test_malformed_numbers_fall_back(self):
        config = load_ai_config({"AI_REQUEST_TIMEOUT": "soon", "AI_TEMPERATURE": "warm"})
        assert config.timeout == DEFAULT_AI_TIMEOUT
        assert config.temperature == 0.7

    def test_numbers_are_read(self):
        config = load_ai_config({"AI_REQUEST_TIMEOUT": "12.5", "AI_TEMPERATURE": "0.2"})
        assert config.timeout == 12.5
        assert config.temperature == 0.2

    def test_config_is_immutable(self):
        config = load_ai_config({})
        with pytest.raises(Exception):
            config.api_key = "changed"


class TestCapabilities:
    def test_known_models(self):
        assert capabilities_for("llama3-70b-8192").supports_structured_output is True
        assert capabilities_for("gpt-4o").supports_structured_output is True
        assert capabilities_for("mixtral-8x7b-32768").supports_structured_output is False

    def test_unknown_model_gets_plain_chat(self):
        # no substring guessing
        assert capabilities_for("gpt-4o-custom-proxy").supports_structured_output is False
        assert capabilities_for("my-local-model").supports_structured_output is False

    def test_config_exposes_capabilities(self):
        assert AiConfig(model="gpt-4.1").capabilities.supports_structured_output is True


class TestCheckAiConfig:
    def test_unavailable_report(self, capsys):
        code = check_ai_config(AiConfig(api_key=""))
        out = capsys.readouterr().out
        assert code == 1
        assert "NOT AVAILABLE" in out
        assert "AI_API_KEY: NOT SET" in out

    def test_available_report_masks_key(self, capsys):
        key = "gsk-0123456789-secret-tail"
        code = check_ai_config(AiConfig(api_key=key))
        out = capsys.readouterr().out
        assert code == 0
        assert "AVAILABLE and ready" in out
        assert "gsk-012345..." in out
        assert key not in out
