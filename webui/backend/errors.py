"""Maps pipeline errors to JSON error responses."""
from __future__ import annotations

import logging

from google.genai import errors as genai_errors
from litestar import Request, Response
from litestar.status_codes import (
    HTTP_400_BAD_REQUEST,
    HTTP_409_CONFLICT,
    HTTP_413_REQUEST_ENTITY_TOO_LARGE,
    HTTP_500_INTERNAL_SERVER_ERROR,
    HTTP_502_BAD_GATEWAY,
    HTTP_503_SERVICE_UNAVAILABLE,
)

from shotdirector.errors import (
    ConfigurationError,
    EmptyResponse,
    InvalidImageError,
    NoImageReturned,
    ParseError,
    ShotDirectorError,
)

from .session_manager import SessionBusyError, SessionNotReadyError

log = logging.getLogger(__name__)

_STATUS_BY_ERROR: dict[type[Exception], int] = {
    ConfigurationError: HTTP_503_SERVICE_UNAVAILABLE,
    InvalidImageError: HTTP_400_BAD_REQUEST,
    EmptyResponse: HTTP_502_BAD_GATEWAY,
    ParseError: HTTP_502_BAD_GATEWAY,
    NoImageReturned: HTTP_502_BAD_GATEWAY,
    SessionBusyError: HTTP_409_CONFLICT,
    SessionNotReadyError: HTTP_400_BAD_REQUEST,
}


def _error_response(name: str, detail: str, status_code: int) -> Response:
    return Response(content={"error": name, "detail": detail}, status_code=status_code)


def handle_app_error(request: Request, exc: Exception) -> Response:
    status_code = next(
        (code for err, code in _STATUS_BY_ERROR.items() if isinstance(exc, err)),
        HTTP_500_INTERNAL_SERVER_ERROR,
    )
    log.info("%s %s -> %d %s: %s", request.method, request.url.path, status_code, type(exc).__name__, exc)
    return _error_response(type(exc).__name__, str(exc), status_code)


def handle_transport_error(request: Request, exc: genai_errors.APIError) -> Response:
    log.warning("Gemini API error on %s: %s", request.url.path, exc)
    return _error_response("TransportError", str(exc), HTTP_502_BAD_GATEWAY)


def handle_body_too_large(request: Request, exc: Exception) -> Response:
    log.info("%s %s -> 413: %s", request.method, request.url.path, exc)
    return _error_response(
        "InvalidImageError",
        "Request body exceeds the configured image size limit.",
        HTTP_413_REQUEST_ENTITY_TOO_LARGE,
    )


EXCEPTION_HANDLERS = {
    HTTP_413_REQUEST_ENTITY_TOO_LARGE: handle_body_too_large,
    ShotDirectorError: handle_app_error,
    SessionBusyError: handle_app_error,
    SessionNotReadyError: handle_app_error,
    genai_errors.APIError: handle_transport_error,
}
