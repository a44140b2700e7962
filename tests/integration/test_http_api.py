"""Integration tests for the HTTP endpoints."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from chat_policy_sdk.http.api import router


@pytest.fixture
def client():
    app = FastAPI()
    app.include_router(router, prefix="/policy")
    return TestClient(app)


class TestModelsEndpoint:

    def test_all_models(self, client):
        response = client.get("/policy/models")
        assert response.status_code == 200
        names = [entry["name"] for entry in response.json()]
        assert "gpt-4o" in names
        assert "gemini-2.0-flash" in names

    def test_filtered_by_provider(self, client):
        response = client.get("/policy/models", params={"provider": "google"})
        entries = response.json()
        assert entries
        assert all(entry["provider"]["id"] == "google" for entry in entries)
        assert entries[0]["provider"]["providerName"] == "Google"

    def test_broken_registry_file(self, client, tmp_path, monkeypatch):
        monkeypatch.setenv("CHAT_POLICY_MODELS_FILE", str(tmp_path / "absent.json"))
        response = client.get("/policy/models")
        assert response.status_code == 500
        assert "absent.json" in response.json()["detail"]


class TestCapabilitiesEndpoint:

    def test_vision_model(self, client):
        response = client.get("/policy/capabilities", params={"model": "gpt-4o", "provider": "openai"})
        assert response.status_code == 200
        data = response.json()
        assert data["provider"] == "OpenAI"
        assert data["capabilities"]["vision"] is True
        assert data["capabilities"]["rag"] is True
        assert data["timeout_budget"] == "standard"
        assert data["timeout_ms"] == 60000
        assert data["show_plugins"] is True

    def test_thinking_model_without_provider(self, client):
        data = client.get("/policy/capabilities", params={"model": "o1-preview"}).json()
        assert data["provider"] is None
        assert data["timeout_ms"] == 300000
        assert data["show_plugins"] is False

    def test_missing_model(self, client):
        assert client.get("/policy/capabilities").status_code == 422

    def test_invalid_timeout_setting(self, client, monkeypatch):
        monkeypatch.setenv("CHAT_POLICY_REQUEST_TIMEOUT_MS", "soon")
        response = client.get("/policy/capabilities", params={"model": "gpt-4o"})
        assert response.status_code == 500


class TestRequestPlanEndpoint:

    def test_plan(self, client):
        body = {
            "model": "gpt-4o",
            "provider": "openai",
            "message": {
                "role": "user",
                "content": [
                    {"type": "text", "text": "describe"},
                    {"type": "image_url", "image_url": {"url": "http://img"}},
                ],
            },
        }
        response = client.post("/policy/request-plan", json=body)
        assert response.status_code == 200
        data = response.json()
        assert data["text"] == "describe"
        assert data["images"] == ["http://img"]
        assert data["provider"] == "OpenAI"
        assert data["timeout_budget"] == "standard"
        assert data["capabilities"]["function_call"] is True

    def test_plan_for_text_only_model(self, client):
        body = {
            "model": "deepseek-reasoner",
            "message": {
                "content": [
                    {"type": "text", "text": "think"},
                    {"type": "image_url", "image_url": {"url": "http://img"}},
                ],
            },
        }
        data = client.post("/policy/request-plan", json=body).json()
        assert data["images"] == []
        assert data["timeout_ms"] == 300000


class TestWebSearchPromptEndpoint:

    def test_chinese_prompt(self, client):
        body = {
            "lang": "cn",
            "message": {
                "content": "今天发生了什么?",
                "webSearchReferences": {"results": [{"title": "T", "url": "U", "content": "C"}]},
            },
        }
        prompt = client.post("/policy/web-search-prompt", json=body).json()["prompt"]
        assert prompt.startswith("# 以下内容是基于用户发送的消息的搜索结果:")
        assert "[webpage 1 begin]" in prompt
        assert prompt.endswith("今天发生了什么?")

    def test_plain_message(self, client):
        body = {"message": {"content": "hello"}}
        assert client.post("/policy/web-search-prompt", json=body).json() == {"prompt": "hello"}


class TestVersionsEndpoint:

    def test_compare(self, client):
        data = client.get("/policy/versions/compare", params={"a": "2.16.0", "b": "2.15.8"}).json()
        assert data["result"] == 1
        assert data["newer"] is True

    def test_prerelease_is_older(self, client):
        data = client.get("/policy/versions/compare", params={"a": "1.2.0-beta", "b": "1.2.0"}).json()
        assert data["result"] == -1
        assert data["newer"] is False
