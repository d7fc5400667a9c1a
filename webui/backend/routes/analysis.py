"""Stateless analysis / storyboard / sequence routes."""
from __future__ import annotations

from litestar import post

from schemas import AnalysisResult
from webui.backend.models import ImageRequest, SequenceResponse, StoryboardResponse
from webui.backend.session_manager import SessionManager


@post("/api/analyze")
async def analyze(data: ImageRequest, sessions: SessionManager) -> dict:
    result = await sessions.pipeline().step_analyze(data.image)
    return result.to_json_dict()


@post("/api/storyboard")
async def storyboard(data: AnalysisResult, sessions: SessionManager) -> dict:
    image_url = await sessions.pipeline().step_storyboard(data)
    return StoryboardResponse(image_url=image_url).to_json_dict()


@post("/api/sequence")
async def sequence(data: ImageRequest, sessions: SessionManager) -> dict:
    outcome = await sessions.pipeline().run(data.image)
    return SequenceResponse(
        result=outcome.result,
        storyboard_image_url=outcome.storyboard_image_url,
        storyboard_error=outcome.storyboard_error,
    ).to_json_dict()
