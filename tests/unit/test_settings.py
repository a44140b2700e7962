"""Unit tests for settings and structured logging."""

import logging

import pytest

from chat_policy_sdk.config import (
    get_image_generation_timeout_ms,
    get_lang,
    get_models_file,
    get_request_timeout_ms,
    get_thinking_timeout_ms,
)
from chat_policy_sdk.errors import ConfigurationError
from chat_policy_sdk.observability import PolicyLogger


class TestSettings:

    def test_defaults(self):
        assert get_lang() == "en"
        assert get_models_file() is None
        assert get_request_timeout_ms() == 60000
        assert get_thinking_timeout_ms() == 300000
        assert get_image_generation_timeout_ms() == 120000

    def test_lang_normalized(self, monkeypatch):
        monkeypatch.setenv("CHAT_POLICY_LANG", " CN ")
        assert get_lang() == "cn"

    def test_blank_values_fall_back(self, monkeypatch):
        monkeypatch.setenv("CHAT_POLICY_LANG", "")
        monkeypatch.setenv("CHAT_POLICY_MODELS_FILE", "  ")
        monkeypatch.setenv("CHAT_POLICY_THINKING_TIMEOUT_MS", "")
        assert get_lang() == "en"
        assert get_models_file() is None
        assert get_thinking_timeout_ms() == 300000

    def test_invalid_timeout_message(self, monkeypatch):
        monkeypatch.setenv("CHAT_POLICY_IMAGE_TIMEOUT_MS", "soon")
        with pytest.raises(ConfigurationError, match="CHAT_POLICY_IMAGE_TIMEOUT_MS"):
            get_image_generation_timeout_ms()


class TestPolicyLogger:

    def test_structured_format(self, caplog):
        caplog.set_level(logging.INFO, logger="chat_policy_sdk.test")
        PolicyLogger("test").info("Hello", model="gpt-4o", provider=None, budget="standard")

        assert "[component=test model=gpt-4o budget=standard] Hello" in caplog.text

    def test_track_logs_and_reraises_failures(self, caplog):
        caplog.set_level(logging.DEBUG, logger="chat_policy_sdk.test")
        logger = PolicyLogger("test")

        with pytest.raises(ValueError):
            with logger.track("explode", model="m"):
                raise ValueError("boom")

        assert "Starting explode" in caplog.text
        assert "Failed explode" in caplog.text
        assert "error_type=ValueError" in caplog.text
        assert "error_msg=boom" in caplog.text
