"""Shared pytest fixtures for Chat Policy SDK tests."""

import pytest
from datetime import datetime
from typing import List

from chat_policy_sdk.config.constants import (
    IMAGE_TIMEOUT_ENV_VAR,
    LANG_ENV_VAR,
    MODELS_FILE_ENV_VAR,
    REQUEST_TIMEOUT_ENV_VAR,
    THINKING_TIMEOUT_ENV_VAR,
)
from chat_policy_sdk.config.model_families import create_model_descriptors
from chat_policy_sdk.core.registry import ModelRegistry, reset_default_registry
from chat_policy_sdk.models.messages import RequestMessage

POLICY_ENV_VARS = (
    LANG_ENV_VAR,
    MODELS_FILE_ENV_VAR,
    REQUEST_TIMEOUT_ENV_VAR,
    THINKING_TIMEOUT_ENV_VAR,
    IMAGE_TIMEOUT_ENV_VAR,
)


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests of a single component")
    config.addinivalue_line("markers", "integration: tests through the HTTP or CLI surface")
    config.addinivalue_line("markers", "slow: long running tests")


def pytest_collection_modifyitems(config, items):
    for item in items:
        if "integration" in item.path.parts:
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


@pytest.fixture(autouse=True)
def clean_policy_env(monkeypatch):
    """Isolate tests from the caller's environment and the cached registry."""
    for var in POLICY_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    reset_default_registry()
    yield
    reset_default_registry()


@pytest.fixture
def empty_registry():
    return ModelRegistry()


@pytest.fixture
def make_registry():
    """Build a registry from {provider_family: [model names]}."""
    def _make(**families: List[str]) -> ModelRegistry:
        raw = []
        for family, names in families.items():
            raw.extend(create_model_descriptors(family, names))
        return ModelRegistry.from_raw(raw, source="test")
    return _make


@pytest.fixture
def fixed_now():
    return datetime(2026, 10, 18, 15, 4, 5)


@pytest.fixture
def multimodal_message():
    """User message with one text part and one image part."""
    return RequestMessage.model_validate({
        "role": "user",
        "content": [
            {"type": "text", "text": "hi"},
            {"type": "image_url", "image_url": {"url": "http://x"}},
        ],
    })


@pytest.fixture
def web_search_message():
    """User message carrying a single web search result."""
    return RequestMessage.model_validate({
        "role": "user",
        "content": "What happened today?",
        "webSearchReferences": {
            "results": [{"title": "T", "url": "U", "content": "C"}],
        },
    })
