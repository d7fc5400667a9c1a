"""Pydantic request/response models for the ShotDirector Web API."""
from __future__ import annotations

from pydantic import BaseModel, Field

from schemas import AnalysisResult, CamelModel


class ImageRequest(BaseModel):
    image: str = Field(..., min_length=1, description="Data URI or bare base64 image")


class SessionState(CamelModel):
    """Transient per-session state, mirrored by the front-end."""
    id: str
    image: str | None = None
    result: AnalysisResult | None = None
    storyboard_image_url: str | None = Field(None, alias="storyboardImageUrl")
    is_loading: bool = Field(False, alias="isLoading")
    is_generating_storyboard: bool = Field(False, alias="isGeneratingStoryboard")
    error: str | None = None
    storyboard_error: str | None = Field(None, alias="storyboardError")

    @property
    def busy(self) -> bool:
        return self.is_loading or self.is_generating_storyboard


class StoryboardResponse(CamelModel):
    image_url: str = Field(..., alias="imageUrl")


class SequenceResponse(CamelModel):
    result: AnalysisResult
    storyboard_image_url: str | None = Field(None, alias="storyboardImageUrl")
    storyboard_error: str | None = Field(None, alias="storyboardError")


class ConfigPayload(BaseModel):
    gemini_api_key: str = ""
    analysis_model: str = ""
    image_model: str = ""
    storyboard_aspect_ratio: str = ""
    max_image_bytes: int = Field(default=0, ge=0)
