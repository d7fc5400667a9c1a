import asyncio
import json
import logging

import pytest
from google import genai
from google.genai import errors as genai_errors

from shotdirector.analysis import analyze_image, build_analysis_request, parse_analysis
from shotdirector.config import Config
from shotdirector.errors import ConfigurationError, EmptyResponse, InvalidImageError, ParseError
from shotdirector.prompts import (
    ANALYSIS_INSTRUCTION,
    ANALYSIS_RESPONSE_SCHEMA,
    DIRECTOR_SYSTEM_INSTRUCTION,
    PROMPT_VERSION,
)
from shotdirector.utils.data_uri import strip_data_uri

from conftest import FakeClient, empty_response, make_result_dict, text_response


def test_request_contents(jpeg_bytes, jpeg_data_uri, config):
    req = build_analysis_request(jpeg_data_uri, config)
    assert req["model"] == config.analysis_model

    parts = req["contents"][0].parts
    assert parts[0].text == ANALYSIS_INSTRUCTION
    assert parts[1].inline_data.data == jpeg_bytes
    assert parts[1].inline_data.mime_type == "image/jpeg"

    cfg = req["config"]
    assert cfg.system_instruction == DIRECTOR_SYSTEM_INSTRUCTION
    assert cfg.response_mime_type == "application/json"
    assert cfg.response_schema == ANALYSIS_RESPONSE_SCHEMA


def test_response_schema_requires_all_fields():
    assert ANALYSIS_RESPONSE_SCHEMA.required == ["visualAnchor", "narrativeArc", "shotList", "consistencyCheck"]
    shot = ANALYSIS_RESPONSE_SCHEMA.properties["shotList"].items
    assert shot.required == ["id", "type", "duration", "description", "imagePrompt", "motionPrompt", "soundDesign"]


def test_data_uri_and_bare_base64_build_same_request(jpeg_data_uri, config):
    assert build_analysis_request(jpeg_data_uri, config) == build_analysis_request(
        strip_data_uri(jpeg_data_uri), config
    )


def test_analyze_image_returns_nine_ordered_shots(jpeg_data_uri, config):
    client = FakeClient(text_response(json.dumps(make_result_dict())))
    result = asyncio.run(analyze_image(jpeg_data_uri, config=config, client=client))

    assert len(result.shot_list) == 9
    assert [s.id for s in result.shot_list] == list(range(1, 10))
    assert len(client.models.calls) == 1


def test_empty_response(jpeg_data_uri, config):
    client = FakeClient(empty_response())
    with pytest.raises(EmptyResponse):
        asyncio.run(analyze_image(jpeg_data_uri, config=config, client=client))


def test_invalid_json_is_parse_error():
    with pytest.raises(ParseError):
        parse_analysis("{not json")


def test_wrong_shape_is_parse_error(jpeg_data_uri, config):
    client = FakeClient(text_response(json.dumps(make_result_dict(n_shots=7))))
    with pytest.raises(ParseError):
        asyncio.run(analyze_image(jpeg_data_uri, config=config, client=client))


def test_missing_key_fails_before_any_request(jpeg_data_uri, monkeypatch):
    def _no_client(*args, **kwargs):
        raise AssertionError("client must not be created")

    monkeypatch.setattr(genai, "Client", _no_client)
    with pytest.raises(ConfigurationError):
        asyncio.run(analyze_image(jpeg_data_uri, config=Config(gemini_api_key="")))


def test_invalid_image_fails_before_any_request(config):
    client = FakeClient()
    with pytest.raises(InvalidImageError):
        asyncio.run(analyze_image("data:image/jpeg;base64,aGVsbG8=", config=config, client=client))
    assert client.models.calls == []


def test_transport_error_propagates_unchanged(jpeg_data_uri, config):
    err = genai_errors.ServerError(503, {"error": {"code": 503, "message": "overloaded", "status": "UNAVAILABLE"}})
    client = FakeClient(err)
    with pytest.raises(genai_errors.ServerError) as excinfo:
        asyncio.run(analyze_image(jpeg_data_uri, config=config, client=client))
    assert excinfo.value is err


def test_prompt_version_is_logged(jpeg_data_uri, config, caplog):
    client = FakeClient(text_response(json.dumps(make_result_dict())))
    with caplog.at_level(logging.INFO, logger="shotdirector.analysis"):
        asyncio.run(analyze_image(jpeg_data_uri, config=config, client=client))
    assert f"prompts v{PROMPT_VERSION}" in caplog.text
