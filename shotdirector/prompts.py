"""Prompt templates and response schema sent to the Gemini models.

These strings are tuned against the remote models; rewording them changes the
model output. Bump PROMPT_VERSION whenever any of them changes.
"""
from __future__ import annotations

from google.genai import types

PROMPT_VERSION = "1"

# ---------------------------------------------------------------------------
# Vision analysis
# ---------------------------------------------------------------------------

ANALYSIS_INSTRUCTION = "Analyze this image as an AI Video Director and generate the 9-shot sequence."

DIRECTOR_SYSTEM_INSTRUCTION = """You are an expert AI Video Director and Prompt Engineer specializing in image-to-video workflows (Runway, Luma, Midjourney).

Task:
Analyze the provided reference image and expand it into a 9-shot "Micro-Narrative" sequence (20–40 seconds). This sequence must be strictly derived from the visual data in the image, focusing on atmosphere and tension rather than a complex plot.

Phase 1: Deep Analysis (The Anchor)
First, analyze the reference image and output a "Visual Anchor" summary.
This ensures consistency. List:
- Subject Details: Exact clothing textures, hair style, physical features.
- Spatial Geometry: Where the subject is relative to the background objects.
- Lighting & Grade: precise color codes (e.g., Teal/Orange, Desaturated), light source direction, and shadow hardness.

Phase 2: The Sequence Rules
- Continuity is King: Do not hallucinate new characters. If the image is empty, the video is about the environment.
- The Micro-Arc:
  Shots 1-3: Atmosphere establishment (The "Before").
  Shots 4-6: The Shift (Wind picks up, light changes, subject turns head).
  Shots 7-9: The Reaction (Focus on texture, eye movement, or stabilization).
- Motion Logic: Use realistic camera moves only (Pan, Tilt, Dolly, Truck, Rack Focus).

Phase 3: The Output
Return a structured JSON object according to the schema provided."""


def _string() -> types.Schema:
    return types.Schema(type=types.Type.STRING)


def _object(properties: dict[str, types.Schema]) -> types.Schema:
    # Every field the model returns is mandatory.
    return types.Schema(
        type=types.Type.OBJECT,
        properties=properties,
        required=list(properties),
    )


ANALYSIS_RESPONSE_SCHEMA = _object({
    "visualAnchor": _object({
        "subject": _string(),
        "geometry": _string(),
        "lighting": _string(),
    }),
    "narrativeArc": _object({
        "logline": _string(),
        "mood": types.Schema(type=types.Type.ARRAY, items=_string()),
    }),
    "shotList": types.Schema(
        type=types.Type.ARRAY,
        items=_object({
            "id": types.Schema(type=types.Type.INTEGER),
            "type": _string(),
            "duration": _string(),
            "description": _string(),
            "imagePrompt": _string(),
            "motionPrompt": _string(),
            "soundDesign": _string(),
        }),
    ),
    "consistencyCheck": _string(),
})

# ---------------------------------------------------------------------------
# Storyboard rendering
# ---------------------------------------------------------------------------

SHOT_SUMMARY_TEMPLATE = "Shot {id}: {description}"
SHOT_SUMMARY_SEPARATOR = "; "
MOOD_SEPARATOR = ", "

STORYBOARD_PROMPT_TEMPLATE = (
    "A professional 3x3 cinematic storyboard grid. There are 9 distinct panels arranged in a 3x3 layout. "
    "Each panel illustrates a scene from this cinematic sequence: {shot_descriptions}. "
    "Style: Highly realistic cinematic rendering, maintaining consistent lighting: {lighting}. "
    "Mood: {mood}. "
    "The storyboard shows technical camera angles. No text inside panels. Dark background."
)
