from .data_uri import decode_data_uri, encode_data_uri, load_image_payload, strip_data_uri
from .gemini_client import make_client

__all__ = ["decode_data_uri", "encode_data_uri", "load_image_payload", "strip_data_uri", "make_client"]
