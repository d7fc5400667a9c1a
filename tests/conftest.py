import base64
import io
from types import SimpleNamespace

import pytest
from google.genai import types
from PIL import Image

from shotdirector.config import Config

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"storyboard-grid"


class FakeModels:
    """Stands in for ``client.aio.models``; replays canned responses in order."""

    def __init__(self, responses):
        self.responses = list(responses)
        self.calls = []

    async def generate_content(self, **kwargs):
        self.calls.append(kwargs)
        resp = self.responses.pop(0)
        if isinstance(resp, Exception):
            raise resp
        return resp


class FakeClient:
    def __init__(self, *responses):
        self.models = FakeModels(responses)
        self.aio = SimpleNamespace(models=self.models)


def text_response(text):
    return types.GenerateContentResponse(
        candidates=[types.Candidate(content=types.Content(role="model", parts=[types.Part(text=text)]))]
    )


def image_response(data=PNG_BYTES, with_text=True):
    parts = [types.Part(text="Here is your storyboard.")] if with_text else []
    parts.append(types.Part(inline_data=types.Blob(data=data, mime_type="image/png")))
    return types.GenerateContentResponse(
        candidates=[types.Candidate(content=types.Content(role="model", parts=parts))]
    )


def empty_response():
    return types.GenerateContentResponse(candidates=[])


def make_result_dict(n_shots=9):
    return {
        "visualAnchor": {
            "subject": "Woman in a charcoal wool coat, wet bobbed hair",
            "geometry": "Centre frame, iron rail bridge receding behind her",
            "lighting": "Teal/orange dusk, hard rim light from camera left",
        },
        "narrativeArc": {
            "logline": "A commuter waits on the platform as the storm arrives.",
            "mood": ["tense", "melancholic", "hushed"],
        },
        "shotList": [
            {
                "id": i,
                "type": "Wide" if i < 4 else "Close-up",
                "duration": "3s",
                "description": f"Beat {i} on the platform",
                "imagePrompt": f"cinematic still, beat {i}",
                "motionPrompt": "slow dolly in",
                "soundDesign": "distant thunder",
            }
            for i in range(1, n_shots + 1)
        ],
        "consistencyCheck": "Coat, bridge and dusk grade are kept in every shot.",
    }


@pytest.fixture
def jpeg_bytes():
    buf = io.BytesIO()
    Image.new("RGB", (16, 16), color=(180, 40, 40)).save(buf, format="JPEG")
    return buf.getvalue()


@pytest.fixture
def jpeg_data_uri(jpeg_bytes):
    return "data:image/jpeg;base64," + base64.b64encode(jpeg_bytes).decode("ascii")


@pytest.fixture
def config():
    return Config(gemini_api_key="test-key-1234567890")


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Point the config file at tmp_path and clear API key env vars."""
    import shotdirector.config as config_mod

    monkeypatch.setattr(config_mod, "CONFIG_DIR", tmp_path)
    monkeypatch.setattr(config_mod, "CONFIG_FILE", tmp_path / "config.json")
    for var in config_mod.API_KEY_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    return tmp_path / "config.json"
