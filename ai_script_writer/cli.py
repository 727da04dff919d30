"""Command line interface for the AI Script Writer."""
from __future__ import annotations

import argparse
import json
import logging
import sys

import pyperclip

from .config import ConfigError, GeneratorConfig
from .errors import GenerationError
from .formatting import copy_to_clipboard, script_to_text
from .generator import ScriptGenerator
from .models import (
    DEFAULT_DURATION,
    DEFAULT_PLATFORM,
    DEFAULT_TONE,
    DURATIONS,
    PLATFORMS,
    TONES,
    TOPIC_MAX_LENGTH,
    ScriptRequest,
    ScriptResponse,
)

logger = logging.getLogger(__name__)


def _topic(value: str) -> str:
    topic = value.strip()
    if not topic:
        raise argparse.ArgumentTypeError("topic must not be empty")
    if len(topic) > TOPIC_MAX_LENGTH:
        raise argparse.ArgumentTypeError(f"topic must be at most {TOPIC_MAX_LENGTH} characters")
    return topic


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="AI-powered short-form video script writer")
    parser.add_argument("--topic", required=True, type=_topic, help="What the video is about")
    parser.add_argument("--platform", default=DEFAULT_PLATFORM, choices=PLATFORMS, help="Target platform")
    parser.add_argument("--tone", default=DEFAULT_TONE, choices=TONES, help="Script tone")
    parser.add_argument("--duration", default=DEFAULT_DURATION, choices=DURATIONS, help="Target video length")
    parser.add_argument("--model", default=None, help="Model for script generation (defaults to SCRIPT_MODEL)")
    parser.add_argument("--json", action="store_true", help="Print the script as JSON")
    parser.add_argument("--copy", action="store_true", help="Copy the formatted script to the clipboard")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="[%(asctime)s] %(levelname)s - %(name)s: %(message)s",
    )


def run_generation(args: argparse.Namespace, generator: ScriptGenerator | None = None) -> ScriptResponse:
    configure_logging(args.log_level)

    if generator is None:
        generator = ScriptGenerator(GeneratorConfig.from_env(model=args.model))

    request = ScriptRequest(
        topic=args.topic,
        platform=args.platform,
        tone=args.tone,
        duration=args.duration,
    )
    return generator.generate(request)


def main(argv: list[str] | None = None, generator: ScriptGenerator | None = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    try:
        args = parse_args(argv)
    except SystemExit as exc:
        return int(exc.code or 0)

    try:
        script = run_generation(args, generator)
    except ConfigError as exc:
        logger.error("%s", exc)
        return 1
    except GenerationError as exc:
        logger.exception("Generation failed: %s", exc)
        return 1

    if args.json:
        print(json.dumps(script.model_dump(), ensure_ascii=False, indent=2))
    else:
        print(script_to_text(script))

    if args.copy:
        try:
            copy_to_clipboard(script)
        except pyperclip.PyperclipException as exc:
            logger.error("Could not copy to clipboard: %s", exc)
            return 1
        logger.info("Copied script to clipboard")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
