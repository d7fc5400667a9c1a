from pydantic import Field, field_validator
from typing import List

from .base import CamelModel

SHOT_COUNT = 9


class VisualAnchor(CamelModel):
    subject: str = Field(..., description="Clothing textures, hair style, physical features")
    geometry: str = Field(..., description="Where the subject sits relative to the background")
    lighting: str = Field(..., description="Colour grade, light direction and shadow hardness")


class NarrativeArc(CamelModel):
    logline: str
    mood: List[str] = Field(..., description="Short mood tags, in the order given by the model")


class Shot(CamelModel):
    id: int = Field(..., ge=1, le=SHOT_COUNT)
    type: str = Field(..., description="Camera / shot type label")
    duration: str = Field(..., description="Free text, e.g. '3s'")
    description: str
    image_prompt: str = Field(..., alias="imagePrompt")
    motion_prompt: str = Field(..., alias="motionPrompt")
    sound_design: str = Field(..., alias="soundDesign")


class AnalysisResult(CamelModel):
    """Produced by the vision analysis step, consumed by storyboard generation."""
    visual_anchor: VisualAnchor = Field(..., alias="visualAnchor")
    narrative_arc: NarrativeArc = Field(..., alias="narrativeArc")
    shot_list: List[Shot] = Field(..., alias="shotList")
    consistency_check: str = Field(..., alias="consistencyCheck")

    @field_validator("shot_list")
    @classmethod
    def _nine_shots_in_order(cls, shots: List[Shot]) -> List[Shot]:
        if len(shots) != SHOT_COUNT:
            raise ValueError(f"shotList must contain exactly {SHOT_COUNT} shots, got {len(shots)}")
        ids = [s.id for s in shots]
        if ids != list(range(1, SHOT_COUNT + 1)):
            raise ValueError(f"shotList ids must be 1..{SHOT_COUNT} in order, got {ids}")
        return shots
