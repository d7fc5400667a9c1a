"""Gemini API client factory."""
from __future__ import annotations

import logging

from google import genai

from ..config import Config
from ..errors import ConfigurationError

log = logging.getLogger(__name__)


def make_client(config: Config) -> genai.Client:
    """Create a Gemini client, failing fast when no API key is configured."""
    if not config.gemini_api_key:
        raise ConfigurationError("GEMINI_API_KEY is not set.")

    log.debug("Creating Gemini client")
    return genai.Client(api_key=config.gemini_api_key)
