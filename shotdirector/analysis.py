"""Vision analysis: reference image -> 9-shot cinematic sequence."""
from __future__ import annotations

import logging
from typing import Any

from google import genai
from google.genai import types
from pydantic import ValidationError

from schemas import AnalysisResult

from .config import Config
from .errors import EmptyResponse, ParseError
from .prompts import (
    ANALYSIS_INSTRUCTION,
    ANALYSIS_RESPONSE_SCHEMA,
    DIRECTOR_SYSTEM_INSTRUCTION,
    PROMPT_VERSION,
)
from .utils.data_uri import load_image_payload
from .utils.gemini_client import make_client

log = logging.getLogger(__name__)


def build_analysis_request(image: str, config: Config) -> dict[str, Any]:
    """Build the ``generate_content`` arguments for an image.

    ``image`` may be a data URI or bare base64; both produce the same request.
    """
    data, mime_type = load_image_payload(image, config.max_image_bytes)
    return {
        "model": config.analysis_model,
        "contents": [
            types.Content(
                role="user",
                parts=[
                    types.Part.from_text(text=ANALYSIS_INSTRUCTION),
                    types.Part.from_bytes(data=data, mime_type=mime_type),
                ],
            )
        ],
        "config": types.GenerateContentConfig(
            system_instruction=DIRECTOR_SYSTEM_INSTRUCTION,
            response_mime_type="application/json",
            response_schema=ANALYSIS_RESPONSE_SCHEMA,
        ),
    }


def parse_analysis(text: str | None) -> AnalysisResult:
    """Parse and validate the model's JSON answer."""
    if not text:
        raise EmptyResponse("No response from AI")
    try:
        return AnalysisResult.model_validate_json(text)
    except ValidationError as e:
        log.debug("Rejected analysis response:\n%s", text[:2000])
        raise ParseError(f"AI response does not match the shot-list schema: {e}") from e


async def analyze_image(
    image: str,
    config: Config | None = None,
    client: genai.Client | None = None,
) -> AnalysisResult:
    """Send the image to the vision model and return the parsed shot list."""
    config = config or Config.load()
    if client is None:
        client = make_client(config)

    request = build_analysis_request(image, config)

    log.info("Analyzing image with %s (prompts v%s)", config.analysis_model, PROMPT_VERSION)
    response = await client.aio.models.generate_content(**request)

    result = parse_analysis(response.text)
    log.info("Analysis returned %d shots: %s", len(result.shot_list), result.narrative_arc.logline)
    return result
