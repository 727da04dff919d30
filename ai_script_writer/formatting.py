"""Plain-text formatting for generated scripts."""
from __future__ import annotations

import pyperclip

from .models import ScriptResponse


def script_to_text(script: ScriptResponse) -> str:
    body = "\n".join(f"• {beat}" for beat in script.body)
    return (
        f"HOOK:\n{script.hook}\n\n"
        f"BODY:\n{body}\n\n"
        f"PAYOFF:\n{script.payoff}\n\n"
        f"CTA:\n{script.cta}"
    )


def copy_to_clipboard(script: ScriptResponse) -> str:
    """Copy the formatted script to the system clipboard and return the copied text."""
    text = script_to_text(script)
    pyperclip.copy(text)
    return text
