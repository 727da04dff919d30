from __future__ import annotations

import json
from types import SimpleNamespace
from typing import Any, Dict, List, Optional

import pytest

from ai_script_writer.config import GeneratorConfig
from ai_script_writer.generator import ScriptGenerator

WAKE_UP_REPLY = {
    "hook": "Stop hitting snooze.",
    "body": ["Beat 1", "Beat 2", "Beat 3"],
    "payoff": "One clean sentence.",
    "cta": "Save this for tomorrow.",
}


class FakeScriptClient:
    """Stands in for OpenAIScriptClient; records prompts instead of calling the API."""

    def __init__(self, reply: Optional[str] = None, error: Optional[BaseException] = None) -> None:
        self.reply = reply
        self.error = error
        self.calls: List[Dict[str, Any]] = []

    def generate_json(self, prompt: str, schema: Dict[str, Any], name: str = "script_response") -> str:
        self.calls.append({"prompt": prompt, "schema": schema, "name": name})
        if self.error is not None:
            raise self.error
        return self.reply


class FakeCompletions:
    def __init__(self, content: Optional[str] = None, error: Optional[BaseException] = None) -> None:
        self.content = content
        self.error = error
        self.kwargs: Dict[str, Any] = {}

    def create(self, **kwargs: Any) -> SimpleNamespace:
        self.kwargs = kwargs
        if self.error is not None:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def fake_sdk(content: Optional[str] = None, error: Optional[BaseException] = None) -> SimpleNamespace:
    return SimpleNamespace(chat=SimpleNamespace(completions=FakeCompletions(content, error)))


@pytest.fixture
def config() -> GeneratorConfig:
    return GeneratorConfig(api_key="test-key", model="test-model")


@pytest.fixture
def wake_up_reply() -> str:
    return json.dumps(WAKE_UP_REPLY)


@pytest.fixture
def fake_client(wake_up_reply: str) -> FakeScriptClient:
    return FakeScriptClient(reply=wake_up_reply)


@pytest.fixture
def generator(config: GeneratorConfig, fake_client: FakeScriptClient) -> ScriptGenerator:
    return ScriptGenerator(config, client=fake_client)
