"""OpenAI helper utilities."""
from __future__ import annotations

import logging
from typing import Any, Dict

from openai import OpenAI, OpenAIError

from .config import GeneratorConfig
from .errors import ErrorKind, GenerationError
from .prompts import SYSTEM_MESSAGE

logger = logging.getLogger(__name__)


class OpenAIScriptClient:
    """Wraps the OpenAI client for structured script generation.

    Works against any OpenAI-compatible endpoint when ``config.base_url`` is
    set (OpenRouter, Gemini's OpenAI-compatible API, a local gateway).
    """

    def __init__(self, config: GeneratorConfig, client: Any = None) -> None:
        self.config = config
        if client is None:
            kwargs: Dict[str, Any] = {"api_key": config.api_key, "timeout": config.timeout}
            if config.base_url:
                kwargs["base_url"] = config.base_url
            client = OpenAI(**kwargs)
        self.client = client

    def generate_json(self, prompt: str, schema: Dict[str, Any], name: str = "script_response") -> str:
        """Send ``prompt`` and return the raw reply text, requested as JSON matching ``schema``."""
        logger.debug("Requesting structured script from model %s", self.config.model)
        try:
            response = self.client.chat.completions.create(
                model=self.config.model,
                messages=[
                    {"role": "system", "content": SYSTEM_MESSAGE},
                    {"role": "user", "content": prompt},
                ],
                temperature=self.config.temperature,
                response_format={
                    "type": "json_schema",
                    "json_schema": {"name": name, "schema": schema, "strict": True},
                },
            )
        except OpenAIError as exc:
            raise GenerationError(
                ErrorKind.SERVICE_FAILURE,
                f"Script generation request failed: {exc}",
                cause=exc,
            ) from exc

        if not response.choices:
            return ""
        content = response.choices[0].message.content or ""
        logger.debug("Received reply with %d characters", len(content))
        return content.strip()
