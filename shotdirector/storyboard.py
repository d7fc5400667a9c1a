"""Storyboard rendering: 9-shot sequence -> single 3x3 grid image."""
from __future__ import annotations

import logging
from typing import Any

from google import genai
from google.genai import types

from schemas import AnalysisResult

from .config import Config
from .errors import NoImageReturned
from .prompts import (
    MOOD_SEPARATOR,
    PROMPT_VERSION,
    SHOT_SUMMARY_SEPARATOR,
    SHOT_SUMMARY_TEMPLATE,
    STORYBOARD_PROMPT_TEMPLATE,
)
from .utils.data_uri import encode_data_uri
from .utils.gemini_client import make_client

log = logging.getLogger(__name__)

STORYBOARD_MIME_TYPE = "image/png"


def build_storyboard_prompt(result: AnalysisResult) -> str:
    shot_descriptions = SHOT_SUMMARY_SEPARATOR.join(
        SHOT_SUMMARY_TEMPLATE.format(id=s.id, description=s.description)
        for s in result.shot_list
    )
    return STORYBOARD_PROMPT_TEMPLATE.format(
        shot_descriptions=shot_descriptions,
        lighting=result.visual_anchor.lighting,
        mood=MOOD_SEPARATOR.join(result.narrative_arc.mood),
    )


def build_storyboard_request(result: AnalysisResult, config: Config) -> dict[str, Any]:
    return {
        "model": config.image_model,
        "contents": [
            types.Content(
                role="user",
                parts=[types.Part.from_text(text=build_storyboard_prompt(result))],
            )
        ],
        "config": types.GenerateContentConfig(
            image_config=types.ImageConfig(aspect_ratio=config.storyboard_aspect_ratio),
        ),
    }


def extract_image(response: types.GenerateContentResponse) -> bytes:
    """Return the bytes of the first inline image part of the first candidate."""
    if response.candidates and response.candidates[0].content and response.candidates[0].content.parts:
        for part in response.candidates[0].content.parts:
            if part.inline_data is not None and part.inline_data.data:
                return part.inline_data.data
    raise NoImageReturned("Failed to generate storyboard image")


async def generate_storyboard(
    result: AnalysisResult,
    config: Config | None = None,
    client: genai.Client | None = None,
) -> str:
    """Render the storyboard grid and return it as a PNG data URI."""
    config = config or Config.load()
    if client is None:
        client = make_client(config)

    request = build_storyboard_request(result, config)

    log.info("Generating storyboard with %s (prompts v%s)", config.image_model, PROMPT_VERSION)
    response = await client.aio.models.generate_content(**request)

    data = extract_image(response)
    log.info("Storyboard image received (%d bytes)", len(data))
    return encode_data_uri(data, STORYBOARD_MIME_TYPE)
