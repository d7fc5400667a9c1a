"""Errors raised by the analysis and storyboard clients.

Transport failures (``google.genai.errors.APIError``, ``httpx`` errors) are not
wrapped; they reach the caller unchanged.
"""
from __future__ import annotations


class ShotDirectorError(Exception):
    pass


class ConfigurationError(ShotDirectorError, ValueError):
    """Missing or invalid credential. Raised before any request is sent."""


class InvalidImageError(ShotDirectorError, ValueError):
    """Uploaded image cannot be decoded, is unsupported, or is too large."""


class EmptyResponse(ShotDirectorError, RuntimeError):
    """The vision model answered without any text."""


class ParseError(ShotDirectorError, ValueError):
    """The vision model's text is not JSON or does not match the shot-list schema."""


class NoImageReturned(ShotDirectorError, RuntimeError):
    """The image model answered but no response part carried image bytes."""
