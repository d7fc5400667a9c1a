"""Settings and API key management."""
from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

log = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".shotdirector"
CONFIG_FILE = CONFIG_DIR / "config.json"

# Checked in order; the first non-empty one wins.
API_KEY_ENV_VARS = ("GEMINI_API_KEY", "GOOGLE_API_KEY", "API_KEY")

# Vision analysis (image -> 9-shot sequence JSON)
DEFAULT_ANALYSIS_MODEL = "gemini-3-flash-preview"

# Storyboard rendering (sequence -> 3x3 grid image)
DEFAULT_IMAGE_MODEL = "gemini-2.5-flash-image"
DEFAULT_STORYBOARD_ASPECT_RATIO = "1:1"

# Gemini rejects inline request payloads above 20 MB
DEFAULT_MAX_IMAGE_BYTES = 20 * 1024 * 1024


@dataclass
class Config:
    gemini_api_key: str = ""
    analysis_model: str = DEFAULT_ANALYSIS_MODEL
    image_model: str = DEFAULT_IMAGE_MODEL
    storyboard_aspect_ratio: str = DEFAULT_STORYBOARD_ASPECT_RATIO
    max_image_bytes: int = DEFAULT_MAX_IMAGE_BYTES

    @classmethod
    def load(cls) -> "Config":
        """Load config from env vars then config file."""
        cfg = cls()

        # Env var takes priority
        api_key = next((os.environ[v] for v in API_KEY_ENV_VARS if os.environ.get(v)), "")

        # Fall back to config file
        if CONFIG_FILE.exists():
            try:
                data = json.loads(CONFIG_FILE.read_text(encoding="utf-8-sig"))
                if not api_key:
                    api_key = data.get("gemini_api_key", "")
                if model := data.get("analysis_model"):
                    cfg.analysis_model = model
                if model := data.get("image_model"):
                    cfg.image_model = model
                if ratio := data.get("storyboard_aspect_ratio"):
                    cfg.storyboard_aspect_ratio = ratio
                if data.get("max_image_bytes") is not None:
                    cfg.max_image_bytes = int(data["max_image_bytes"])
            except (json.JSONDecodeError, OSError, ValueError) as e:
                log.warning("Ignoring unreadable config file %s: %s", CONFIG_FILE, e)

        cfg.gemini_api_key = api_key
        return cfg

    def save(self) -> None:
        CONFIG_DIR.mkdir(parents=True, exist_ok=True)
        data = {
            "gemini_api_key": self.gemini_api_key,
            "analysis_model": self.analysis_model,
            "image_model": self.image_model,
            "storyboard_aspect_ratio": self.storyboard_aspect_ratio,
            "max_image_bytes": self.max_image_bytes,
        }
        CONFIG_FILE.write_text(json.dumps(data, indent=2))
