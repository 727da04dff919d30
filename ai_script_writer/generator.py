"""Core generation workflow for the AI Script Writer."""
from __future__ import annotations

import json
import logging
from typing import Any, Optional

from pydantic import ValidationError

from .config import ConfigError, GeneratorConfig
from .errors import ErrorKind, GenerationError
from .models import ScriptRequest, ScriptResponse
from .openai_client import OpenAIScriptClient
from .prompts import SCRIPT_RESPONSE_SCHEMA, build_script_prompt

logger = logging.getLogger(__name__)


def parse_script_response(text: str) -> ScriptResponse:
    """Parse the service reply into a ScriptResponse.

    The reply must be a JSON object with ``hook``, ``payoff`` and ``cta``
    strings and a non-empty ``body`` list of strings. Anything else raises
    ``GenerationError`` with kind ``MALFORMED_RESPONSE``.
    """
    try:
        data = json.loads(text.strip())
    except (json.JSONDecodeError, AttributeError) as exc:
        logger.error("Failed to parse generation response as JSON")
        raise GenerationError(
            ErrorKind.MALFORMED_RESPONSE, "Reply is not valid JSON", cause=exc
        ) from exc

    if not isinstance(data, dict):
        logger.error("Generation response is not a JSON object")
        raise GenerationError(
            ErrorKind.MALFORMED_RESPONSE,
            f"Expected a JSON object, got {type(data).__name__}",
        )

    try:
        return ScriptResponse.model_validate(data)
    except ValidationError as exc:
        logger.error("Generation response does not match the script shape")
        raise GenerationError(
            ErrorKind.MALFORMED_RESPONSE,
            f"Reply does not match the script shape: {exc.error_count()} error(s)",
            cause=exc,
        ) from exc


class ScriptGenerator:
    """Turns a ScriptRequest into a validated ScriptResponse with one service call."""

    def __init__(self, config: GeneratorConfig, client: Optional[Any] = None) -> None:
        self.config = config
        self.client = client or OpenAIScriptClient(config)

    def generate(self, request: ScriptRequest) -> ScriptResponse:
        prompt = build_script_prompt(request)
        logger.info(
            "Generating %s %s script (tone=%s)",
            request.duration,
            request.platform,
            request.tone,
        )
        text = self.client.generate_json(prompt, SCRIPT_RESPONSE_SCHEMA)
        script = parse_script_response(text)
        logger.info("Generated script with %d body beats", len(script.body))
        return script


def generate_script(
    request: ScriptRequest, config: Optional[GeneratorConfig] = None
) -> ScriptResponse:
    """Generate one script, reading configuration from the environment if none is given.

    A missing or invalid configuration is reported as a ``SERVICE_FAILURE``.
    """
    if config is None:
        try:
            config = GeneratorConfig.from_env()
        except ConfigError as exc:
            raise GenerationError(
                ErrorKind.SERVICE_FAILURE, f"Generator is not configured: {exc}", cause=exc
            ) from exc
    return ScriptGenerator(config).generate(request)
