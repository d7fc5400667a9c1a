"""Helpers for base64 data URIs (``data:<mime>;base64,<payload>``)."""
from __future__ import annotations

import base64
import binascii
import io
import logging

from PIL import Image, UnidentifiedImageError

from ..errors import InvalidImageError

log = logging.getLogger(__name__)

# Pillow format name -> MIME type the Gemini vision models accept
SUPPORTED_IMAGE_FORMATS: dict[str, str] = {
    "JPEG": "image/jpeg",
    "PNG": "image/png",
    "WEBP": "image/webp",
}


def strip_data_uri(value: str) -> str:
    """Return the base64 payload, dropping a ``data:...,`` prefix if present.

    Idempotent: an already-stripped payload comes back unchanged.
    """
    value = value.strip()
    if value.startswith("data:") and "," in value:
        return value.split(",", 1)[1]
    return value


def encode_data_uri(data: bytes, mime_type: str) -> str:
    return f"data:{mime_type};base64,{base64.b64encode(data).decode('ascii')}"


def decode_data_uri(value: str) -> tuple[str | None, bytes]:
    """Split a data URI into (mime_type, raw bytes).

    Raw base64 without a prefix yields ``(None, bytes)``.
    """
    value = value.strip()
    mime_type = None
    if value.startswith("data:") and "," in value:
        header = value[len("data:"):value.index(",")]
        mime_type = header.split(";", 1)[0] or None
    payload = strip_data_uri(value)
    try:
        return mime_type, base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidImageError(f"Image payload is not valid base64: {e}") from e


def load_image_payload(value: str, max_bytes: int) -> tuple[bytes, str]:
    """Decode an uploaded image and detect its MIME type from the bytes.

    The data-URI prefix, if any, is ignored: the same payload always yields the
    same result whether or not it carries one.
    """
    _, raw = decode_data_uri(value)
    if not raw:
        raise InvalidImageError("Image payload is empty.")
    if len(raw) > max_bytes:
        raise InvalidImageError(
            f"Image is {len(raw)} bytes; the limit is {max_bytes} bytes."
        )

    try:
        with Image.open(io.BytesIO(raw)) as img:
            fmt = img.format
    except (UnidentifiedImageError, OSError) as e:
        raise InvalidImageError(f"Could not decode image: {e}") from e

    mime_type = SUPPORTED_IMAGE_FORMATS.get(fmt or "")
    if mime_type is None:
        raise InvalidImageError(f"Unsupported image format: {fmt}")

    log.debug("Decoded %s image payload (%d bytes)", fmt, len(raw))
    return raw, mime_type
