"""FastAPI application: AI Script Writer web UI and API."""
from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from dotenv import load_dotenv
from fastapi import APIRouter, Depends, FastAPI, Form, HTTPException, Request, status
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from starlette.concurrency import run_in_threadpool

from ai_script_writer.config import ConfigError, GeneratorConfig
from ai_script_writer.errors import GenerationError
from ai_script_writer.formatting import script_to_text
from ai_script_writer.generator import ScriptGenerator
from ai_script_writer.models import (
    DEFAULT_DURATION,
    DEFAULT_PLATFORM,
    DEFAULT_TONE,
    DURATIONS,
    PLATFORMS,
    TONES,
    TOPIC_MAX_LENGTH,
    ScriptOptions,
    ScriptRequest,
    ScriptRequestIn,
    ScriptResult,
)

logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent
TEMPLATES_DIR = BASE_DIR / "templates"
STATIC_DIR = BASE_DIR / "static"

GENERATION_ERROR_MESSAGE = "SYSTEM ERROR: GENERATION_FAILED_RETRY_LATER"


def sanitize_option(value: Optional[str], options: List[str], default: str) -> str:
    if value in options:
        return value
    return default


def default_form_values() -> Dict[str, Any]:
    return {
        "topic": "",
        "platform": DEFAULT_PLATFORM,
        "tone": DEFAULT_TONE,
        "duration": DEFAULT_DURATION,
    }


def build_result_payload(request: ScriptRequest, generator: ScriptGenerator) -> ScriptResult:
    script = generator.generate(request)
    return ScriptResult(script=script, clipboard_text=script_to_text(script))


@lru_cache(maxsize=1)
def _default_generator() -> ScriptGenerator:
    return ScriptGenerator(GeneratorConfig.from_env())


def get_generator() -> ScriptGenerator:
    try:
        return _default_generator()
    except ConfigError as exc:
        logger.error("Script generator is not configured: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=GENERATION_ERROR_MESSAGE,
        ) from exc


def get_generator_factory() -> Callable[[], ScriptGenerator]:
    """Return a callable building the generator, resolved only once a submission is accepted."""
    return _default_generator


load_dotenv()

app = FastAPI(title="AI Script Writer")
app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

api_router = APIRouter(prefix="/api", tags=["scripts"])


@api_router.get("/options", response_model=ScriptOptions)
def api_options() -> ScriptOptions:
    return ScriptOptions()


@api_router.post("/scripts", response_model=ScriptResult)
async def api_generate_script(
    payload: ScriptRequestIn,
    generator: ScriptGenerator = Depends(get_generator),
) -> ScriptResult:
    try:
        return await run_in_threadpool(build_result_payload, payload.to_request(), generator)
    except GenerationError as exc:
        logger.exception("Script generation failed: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=GENERATION_ERROR_MESSAGE,
        ) from exc


app.include_router(api_router)


def _render_index(
    request: Request,
    form_values: Dict[str, Any],
    result: Optional[ScriptResult] = None,
    error: Optional[str] = None,
):
    context = {
        "form_values": form_values,
        "result": result,
        "error": error,
        "platforms": PLATFORMS,
        "tones": TONES,
        "durations": DURATIONS,
        "topic_max_length": TOPIC_MAX_LENGTH,
    }
    return templates.TemplateResponse(request, "index.html", context)


@app.get("/", response_class=HTMLResponse)
async def index(request: Request):
    return _render_index(request, default_form_values())


@app.post("/generate", response_class=HTMLResponse)
async def generate(
    request: Request,
    topic: str = Form(""),
    platform: str = Form(DEFAULT_PLATFORM),
    tone: str = Form(DEFAULT_TONE),
    duration: str = Form(DEFAULT_DURATION),
    generator_factory: Callable[[], ScriptGenerator] = Depends(get_generator_factory),
):
    form_values = {
        "topic": topic,
        "platform": sanitize_option(platform, PLATFORMS, DEFAULT_PLATFORM),
        "tone": sanitize_option(tone, TONES, DEFAULT_TONE),
        "duration": sanitize_option(duration, DURATIONS, DEFAULT_DURATION),
    }

    cleaned_topic = topic.strip()
    if not cleaned_topic:
        return _render_index(request, form_values)
    if len(cleaned_topic) > TOPIC_MAX_LENGTH:
        return _render_index(
            request,
            form_values,
            error=f"Topic must be at most {TOPIC_MAX_LENGTH} characters.",
        )

    script_request = ScriptRequest(
        topic=cleaned_topic,
        platform=form_values["platform"],
        tone=form_values["tone"],
        duration=form_values["duration"],
    )

    result = None
    error = None
    try:
        generator = generator_factory()
        result = await run_in_threadpool(build_result_payload, script_request, generator)
    except ConfigError as exc:
        logger.error("Script generator is not configured: %s", exc)
        error = GENERATION_ERROR_MESSAGE
    except GenerationError as exc:
        logger.exception("Generation error: %s", exc)
        error = GENERATION_ERROR_MESSAGE

    return _render_index(request, form_values, result=result, error=error)


@app.get("/healthz")
def healthz() -> Dict[str, str]:
    return {"status": "ok"}
