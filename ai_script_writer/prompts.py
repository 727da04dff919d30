"""Prompt templates for the AI Script Writer."""
from __future__ import annotations

from textwrap import dedent
from typing import Any, Dict, Optional

from .models import ScriptRequest

BEAT_COUNTS: Dict[str, int] = {
    "15 seconds": 2,
    "30 seconds": 3,
    "60 seconds": 5,
}

PLATFORM_NOTES: Dict[str, str] = {
    "TikTok": "Casual but clear, use trending phrases sparingly, focus on high retention",
    "Reels": "Instagram aesthetic, aspirational language, visual cues",
    "Shorts": "YouTube-friendly, direct and informational",
    "Twitter/X": "Punchy, thread-style thinking, controversial angles OK",
}

SCRIPT_RESPONSE_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "hook": {"type": "string"},
        "body": {"type": "array", "items": {"type": "string"}},
        "payoff": {"type": "string"},
        "cta": {"type": "string"},
    },
    "required": ["hook", "body", "payoff", "cta"],
    "additionalProperties": False,
}

SYSTEM_MESSAGE = "You write concise, high-conversion short video scripts."

_RULES = dedent(
    """
    SEO Rules:
    - Hook: Start with a searchable phrase directly (e.g., "How to fix X" or "Why your X does Y").
    - Hook Length: Keep the hook under 15 words max.
    - Keywords: Use natural keywords in body beats that people actually search for.
    - CTA: Encourage saves and shares to boost algorithmic performance.

    Clarity Rules:
    - No Filler: Cut all unnecessary filler words. Every word must earn its place.
    - Slang: Reduce Gen Z slang by 70%. Use it very sparingly, not in every sentence.
    - Payoff: One clean, powerful sentence with a clear benefit.
    - Tone Consistency: If tone is Informational, be direct and helpful, not overly casual.
    - Pacing: Fast pacing, high retention focus.

    Return ONLY a JSON object with this structure:
    {
      "hook": "string",
      "body": ["beat 1", "beat 2", "beat 3"],
      "payoff": "string",
      "cta": "string"
    }
    """
).strip()


def beat_count_for(duration: str) -> Optional[int]:
    """Return the number of body beats to request, or None for unknown durations."""
    return BEAT_COUNTS.get(duration)


def platform_hint_for(platform: str) -> Optional[str]:
    return PLATFORM_NOTES.get(platform)


def build_script_prompt(request: ScriptRequest) -> str:
    """Return the instruction used to generate a short-form video script."""
    lines = [
        "You are an expert short-form video script writer with a focus on SEO, "
        "clarity, and algorithmic performance.",
        "",
        f'Generate a {request.duration} {request.platform} video script about: "{request.topic}"',
        "",
        f"Tone: {request.tone}",
    ]

    beats = beat_count_for(request.duration)
    if beats is not None:
        lines.append(f"Required Body Beats: {beats}")

    platform_hint = platform_hint_for(request.platform)
    if platform_hint:
        lines.append(f"Platform Style: {platform_hint}")

    lines.extend(["", _RULES])
    return "\n".join(lines)
