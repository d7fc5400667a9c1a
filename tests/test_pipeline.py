import asyncio
import json

import pytest

from shotdirector.config import Config
from shotdirector.errors import ConfigurationError, EmptyResponse
from shotdirector.pipeline import SequencePipeline

from conftest import FakeClient, empty_response, image_response, make_result_dict, text_response


def test_run_analyzes_then_renders(jpeg_data_uri, config):
    client = FakeClient(text_response(json.dumps(make_result_dict())), image_response())
    messages = []
    pipeline = SequencePipeline(config, client=client, progress_cb=messages.append)

    outcome = asyncio.run(pipeline.run(jpeg_data_uri))

    assert [s.id for s in outcome.result.shot_list] == list(range(1, 10))
    assert outcome.storyboard_image_url.startswith("data:image/png;base64,")
    assert outcome.storyboard_error is None
    assert [c["model"] for c in client.models.calls] == [config.analysis_model, config.image_model]
    assert any("Stage 2/2" in m for m in messages)


def test_storyboard_failure_keeps_result(jpeg_data_uri, config):
    client = FakeClient(text_response(json.dumps(make_result_dict())), text_response("no image"))
    outcome = asyncio.run(SequencePipeline(config, client=client).run(jpeg_data_uri))

    assert len(outcome.result.shot_list) == 9
    assert outcome.storyboard_image_url is None
    assert "Failed to generate storyboard image" in outcome.storyboard_error


def test_retry_storyboard_with_kept_result(jpeg_data_uri, config):
    client = FakeClient(text_response(json.dumps(make_result_dict())), text_response("no image"), image_response())
    pipeline = SequencePipeline(config, client=client)
    outcome = asyncio.run(pipeline.run(jpeg_data_uri))

    uri = asyncio.run(pipeline.step_storyboard(outcome.result))
    assert uri.startswith("data:image/png;base64,")


def test_analysis_failure_skips_storyboard(jpeg_data_uri, config):
    client = FakeClient(empty_response())
    with pytest.raises(EmptyResponse):
        asyncio.run(SequencePipeline(config, client=client).run(jpeg_data_uri))
    assert len(client.models.calls) == 1


def test_missing_key_raises_configuration_error(jpeg_data_uri):
    pipeline = SequencePipeline(Config(gemini_api_key=""))
    with pytest.raises(ConfigurationError):
        asyncio.run(pipeline.run(jpeg_data_uri))
