"""Config read/write routes."""
from __future__ import annotations

from litestar import get, post

from shotdirector.config import Config
from webui.backend.models import ConfigPayload


@get("/api/config")
async def get_config() -> ConfigPayload:
    cfg = Config.load()
    return ConfigPayload(
        # Mask secret keys — show only first/last 4 chars
        gemini_api_key=_mask(cfg.gemini_api_key),
        analysis_model=cfg.analysis_model,
        image_model=cfg.image_model,
        storyboard_aspect_ratio=cfg.storyboard_aspect_ratio,
        max_image_bytes=cfg.max_image_bytes,
    )


@post("/api/config")
async def save_config(data: ConfigPayload) -> dict:
    cfg = Config.load()
    # Only update secrets if the user sent a non-masked value
    if data.gemini_api_key and "…" not in data.gemini_api_key:
        cfg.gemini_api_key = data.gemini_api_key
    if data.analysis_model:
        cfg.analysis_model = data.analysis_model
    if data.image_model:
        cfg.image_model = data.image_model
    if data.storyboard_aspect_ratio:
        cfg.storyboard_aspect_ratio = data.storyboard_aspect_ratio
    if data.max_image_bytes:
        cfg.max_image_bytes = data.max_image_bytes
    cfg.save()
    return {"ok": True}


def _mask(value: str) -> str:
    if not value:
        return ""
    return value[:4] + "…" + value[-4:] if len(value) > 8 else "…"
