"""Session create / analyze / storyboard routes."""
from __future__ import annotations

from typing import Annotated

from litestar import Response, delete, get, post
from litestar.background_tasks import BackgroundTask
from litestar.datastructures import UploadFile
from litestar.enums import RequestEncodingType
from litestar.exceptions import ClientException, NotFoundException
from litestar.params import Body

from shotdirector.utils.data_uri import decode_data_uri, encode_data_uri
from webui.backend.models import ImageRequest, SessionState
from webui.backend.session_manager import SessionManager


def _require(sessions: SessionManager, session_id: str) -> SessionState:
    state = sessions.get(session_id)
    if state is None:
        raise NotFoundException(f"Session {session_id!r} not found")
    return state


@post("/api/sessions")
async def create_session(data: ImageRequest, sessions: SessionManager) -> dict:
    return sessions.create(data.image).to_json_dict()


@post("/api/sessions/upload")
async def upload_session(
    data: Annotated[UploadFile, Body(media_type=RequestEncodingType.MULTI_PART)],
    sessions: SessionManager,
) -> dict:
    content = await data.read()
    if not content:
        raise ClientException("Uploaded file is empty")
    image = encode_data_uri(content, data.content_type or "application/octet-stream")
    return sessions.create(image).to_json_dict()


@get("/api/sessions/{session_id:str}")
async def get_session(session_id: str, sessions: SessionManager) -> dict:
    return _require(sessions, session_id).to_json_dict()


@delete("/api/sessions/{session_id:str}")
async def delete_session(session_id: str, sessions: SessionManager) -> None:
    _require(sessions, session_id)
    sessions.delete(session_id)


@post("/api/sessions/{session_id:str}/analyze")
async def analyze_session(session_id: str, sessions: SessionManager) -> Response:
    """Analyze the session image; the storyboard renders after the response is sent."""
    _require(sessions, session_id)
    state = await sessions.analyze(session_id)
    return Response(
        content=state.to_json_dict(),
        background=BackgroundTask(sessions.generate_storyboard, session_id),
    )


@post("/api/sessions/{session_id:str}/storyboard")
async def regenerate_storyboard(session_id: str, sessions: SessionManager) -> dict:
    _require(sessions, session_id)
    sessions.begin_storyboard(session_id)
    state = await sessions.generate_storyboard(session_id)
    return state.to_json_dict()


@get("/api/sessions/{session_id:str}/storyboard.png")
async def download_storyboard(session_id: str, sessions: SessionManager) -> Response:
    state = _require(sessions, session_id)
    if not state.storyboard_image_url:
        raise NotFoundException(f"Session {session_id!r} has no storyboard yet")
    mime_type, data = decode_data_uri(state.storyboard_image_url)
    return Response(
        content=data,
        media_type=mime_type or "image/png",
        headers={"Content-Disposition": 'attachment; filename="storyboard.png"'},
    )
