"""Generator configuration loaded from the environment."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

DEFAULT_SCRIPT_MODEL = "gpt-4o-mini"
DEFAULT_TEMPERATURE = 0.8
DEFAULT_TIMEOUT = 60.0


class ConfigError(RuntimeError):
    """Raised when required configuration is missing or invalid."""


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from exc


@dataclass(frozen=True)
class GeneratorConfig:
    """Settings handed to the script generator at construction time."""

    api_key: str
    model: str = DEFAULT_SCRIPT_MODEL
    base_url: Optional[str] = None
    temperature: float = DEFAULT_TEMPERATURE
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        if not (self.api_key or "").strip():
            raise ConfigError(
                "OPENAI_API_KEY is not set. Export it or add it to a .env file."
            )

    @classmethod
    def from_env(cls, model: Optional[str] = None) -> "GeneratorConfig":
        load_dotenv()
        return cls(
            api_key=os.getenv("OPENAI_API_KEY", ""),
            model=model or os.getenv("SCRIPT_MODEL", DEFAULT_SCRIPT_MODEL),
            base_url=os.getenv("OPENAI_BASE_URL") or None,
            temperature=_env_float("SCRIPT_TEMPERATURE", DEFAULT_TEMPERATURE),
            timeout=_env_float("SCRIPT_TIMEOUT", DEFAULT_TIMEOUT),
        )
