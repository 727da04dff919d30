from __future__ import annotations

import json

import pytest
from fastapi.testclient import TestClient

from ai_script_writer.errors import ErrorKind, GenerationError
from ai_script_writer.generator import ScriptGenerator
from conftest import WAKE_UP_REPLY, FakeScriptClient
from web_app import app as web_module
from web_app.app import GENERATION_ERROR_MESSAGE, app, get_generator, get_generator_factory


def use_generator(generator: ScriptGenerator) -> None:
    app.dependency_overrides[get_generator] = lambda: generator
    app.dependency_overrides[get_generator_factory] = lambda: (lambda: generator)


@pytest.fixture
def client(generator):
    use_generator(generator)
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def failing_client(config):
    failure = GenerationError(ErrorKind.SERVICE_FAILURE, "quota exceeded")
    fake = FakeScriptClient(error=failure)
    use_generator(ScriptGenerator(config, client=fake))
    yield TestClient(app), fake
    app.dependency_overrides.clear()


def test_index_renders_form(client):
    resp = client.get("/")
    assert resp.status_code == 200, resp.text
    assert 'name="topic"' in resp.text
    assert 'maxlength="300"' in resp.text
    assert '<option value="TikTok" selected>' in resp.text
    assert '<option value="Informational" selected>' in resp.text
    assert '<option value="30 seconds" selected>' in resp.text
    assert 'id="placeholder"' in resp.text


def test_generate_form_renders_result(client, fake_client):
    resp = client.post(
        "/generate",
        data={"topic": "how to wake up early", "platform": "TikTok", "tone": "Motivational", "duration": "30 seconds"},
    )
    assert resp.status_code == 200, resp.text
    assert "Stop hitting snooze." in resp.text
    assert "<li>Beat 2</li>" in resp.text
    assert 'id="copy-button"' in resp.text
    assert 'id="error-message"' not in resp.text
    assert len(fake_client.calls) == 1
    assert '<option value="Motivational" selected>' in resp.text


def test_generate_form_blank_topic_skips_generation(client, fake_client):
    resp = client.post("/generate", data={"topic": "   "})
    assert resp.status_code == 200
    assert fake_client.calls == []
    assert 'id="placeholder"' in resp.text
    assert 'id="error-message"' not in resp.text


def test_generate_form_too_long_topic(client, fake_client):
    resp = client.post("/generate", data={"topic": "x" * 301})
    assert resp.status_code == 200
    assert fake_client.calls == []
    assert "at most 300 characters" in resp.text


def test_generate_form_unknown_option_falls_back(client, fake_client):
    resp = client.post("/generate", data={"topic": "x", "platform": "MySpace"})
    assert resp.status_code == 200
    assert "Platform Style: Casual but clear" in fake_client.calls[0]["prompt"]


def test_generate_form_escapes_topic(client):
    resp = client.post("/generate", data={"topic": "<script>alert(1)</script>"})
    assert "<script>alert(1)</script>" not in resp.text
    assert "&lt;script&gt;" in resp.text


def test_generate_form_failure_shows_fixed_error(failing_client):
    client, fake = failing_client
    resp = client.post("/generate", data={"topic": "how to wake up early"})
    assert resp.status_code == 200
    assert GENERATION_ERROR_MESSAGE in resp.text
    assert 'id="copy-button"' not in resp.text
    assert "quota exceeded" not in resp.text
    assert len(fake.calls) == 1


def test_api_generate_script(client):
    resp = client.post(
        "/api/scripts",
        json={"topic": "how to wake up early", "platform": "TikTok", "tone": "Motivational", "duration": "30 seconds"},
    )
    assert resp.status_code == 200, resp.text
    data = resp.json()
    assert data["script"] == WAKE_UP_REPLY
    assert data["clipboard_text"].startswith("HOOK:\nStop hitting snooze.\n\nBODY:\n• Beat 1")


def test_api_rejects_invalid_payload(client, fake_client):
    resp = client.post("/api/scripts", json={"topic": "x", "duration": "90 seconds"})
    assert resp.status_code == 422
    resp = client.post("/api/scripts", json={"topic": ""})
    assert resp.status_code == 422
    assert fake_client.calls == []


def test_api_failure_is_bad_gateway(failing_client):
    client, _ = failing_client
    resp = client.post("/api/scripts", json={"topic": "x"})
    assert resp.status_code == 502
    assert resp.json() == {"detail": GENERATION_ERROR_MESSAGE}


def test_api_malformed_reply_is_bad_gateway(config):
    fake = FakeScriptClient(reply="not json")
    use_generator(ScriptGenerator(config, client=fake))
    try:
        resp = TestClient(app).post("/api/scripts", json={"topic": "x"})
    finally:
        app.dependency_overrides.clear()
    assert resp.status_code == 502
    assert resp.json()["detail"] == GENERATION_ERROR_MESSAGE


def test_missing_api_key_is_unavailable(monkeypatch):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    monkeypatch.setattr("ai_script_writer.config.load_dotenv", lambda: False)
    web_module._default_generator.cache_clear()
    try:
        resp = TestClient(app).post("/api/scripts", json={"topic": "x"})
    finally:
        web_module._default_generator.cache_clear()
    assert resp.status_code == 503


def test_options(client):
    resp = client.get("/api/options")
    assert resp.status_code == 200
    data = resp.json()
    assert data["tones"] == ["Emotional", "Informational", "Aggressive", "Motivational", "Storytelling"]
    assert data["defaults"] == {"platform": "TikTok", "tone": "Informational", "duration": "30 seconds"}


def test_healthz(client):
    assert client.get("/healthz").json() == {"status": "ok"}


def test_static_script_served(client):
    resp = client.get("/static/app.js")
    assert resp.status_code == 200
    assert "navigator.clipboard.writeText" in resp.text


@pytest.fixture
def unconfigured_client(monkeypatch):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    monkeypatch.setattr("ai_script_writer.config.load_dotenv", lambda: False)
    web_module._default_generator.cache_clear()
    yield TestClient(app)
    web_module._default_generator.cache_clear()


def test_form_without_api_key_shows_fixed_error(unconfigured_client):
    resp = unconfigured_client.post("/generate", data={"topic": "how to wake up early"})
    assert resp.status_code == 200, resp.text
    assert GENERATION_ERROR_MESSAGE in resp.text
    assert 'id="error-message"' in resp.text
    assert 'id="copy-button"' not in resp.text
    assert "OPENAI_API_KEY" not in resp.text


def test_form_without_api_key_blank_topic_renders_form(unconfigured_client):
    resp = unconfigured_client.post("/generate", data={"topic": "   "})
    assert resp.status_code == 200, resp.text
    assert 'id="placeholder"' in resp.text
    assert 'id="error-message"' not in resp.text
