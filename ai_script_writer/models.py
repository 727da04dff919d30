"""Domain models for the AI Script Writer."""
from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel, Field, StrictStr, field_validator

PLATFORMS: List[str] = ["TikTok", "Reels", "Shorts", "Twitter/X"]
TONES: List[str] = ["Emotional", "Informational", "Aggressive", "Motivational", "Storytelling"]
DURATIONS: List[str] = ["15 seconds", "30 seconds", "60 seconds"]

DEFAULT_PLATFORM = "TikTok"
DEFAULT_TONE = "Informational"
DEFAULT_DURATION = "30 seconds"

TOPIC_MAX_LENGTH = 300

PlatformName = Literal["TikTok", "Reels", "Shorts", "Twitter/X"]
ToneName = Literal["Emotional", "Informational", "Aggressive", "Motivational", "Storytelling"]
DurationName = Literal["15 seconds", "30 seconds", "60 seconds"]


class ScriptRequest(BaseModel):
    """Parameters for one script generation.

    Fields are plain strings: the generator does not check them against the
    closed option lists, callers do.
    """

    topic: str
    platform: str = DEFAULT_PLATFORM
    tone: str = DEFAULT_TONE
    duration: str = DEFAULT_DURATION

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "example": {
                "topic": "how to wake up early",
                "platform": "TikTok",
                "tone": "Motivational",
                "duration": "30 seconds",
            }
        },
    }


class ScriptRequestIn(BaseModel):
    """Form/API payload, restricted to the supported options."""

    topic: str = Field(min_length=1, max_length=TOPIC_MAX_LENGTH)
    platform: PlatformName = DEFAULT_PLATFORM
    tone: ToneName = DEFAULT_TONE
    duration: DurationName = DEFAULT_DURATION

    @field_validator("topic", mode="before")
    @classmethod
    def strip_topic(cls, value):
        if isinstance(value, str):
            return value.strip()
        return value

    def to_request(self) -> ScriptRequest:
        return ScriptRequest(**self.model_dump())


class ScriptResponse(BaseModel):
    """A generated script: hook, ordered body beats, payoff and call-to-action."""

    hook: StrictStr
    body: List[StrictStr] = Field(min_length=1)
    payoff: StrictStr
    cta: StrictStr

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "example": {
                "hook": "Stop hitting snooze.",
                "body": ["Beat 1", "Beat 2", "Beat 3"],
                "payoff": "One clean sentence.",
                "cta": "Save this for tomorrow.",
            }
        },
    }


class ScriptResult(BaseModel):
    script: ScriptResponse
    clipboard_text: str


class ScriptOptions(BaseModel):
    platforms: List[str] = Field(default_factory=lambda: list(PLATFORMS))
    tones: List[str] = Field(default_factory=lambda: list(TONES))
    durations: List[str] = Field(default_factory=lambda: list(DURATIONS))
    defaults: dict[str, str] = Field(
        default_factory=lambda: {
            "platform": DEFAULT_PLATFORM,
            "tone": DEFAULT_TONE,
            "duration": DEFAULT_DURATION,
        }
    )
    topic_max_length: int = TOPIC_MAX_LENGTH
