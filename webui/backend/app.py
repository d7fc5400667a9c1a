"""Litestar ASGI application — ShotDirector Web API."""
from __future__ import annotations

from litestar import Litestar
from litestar.config.cors import CORSConfig
from litestar.di import Provide
from litestar.logging import LoggingConfig

from webui.backend.errors import EXCEPTION_HANDLERS
from webui.backend.routes.analysis import analyze, sequence, storyboard
from webui.backend.routes.config import get_config, save_config
from webui.backend.routes.sessions import (
    analyze_session,
    create_session,
    delete_session,
    download_storyboard,
    get_session,
    regenerate_storyboard,
    upload_session,
)
from webui.backend.session_manager import SessionManager, session_manager

# Images arrive base64-encoded (4/3 of their size); the slack covers JSON and
# multipart framing.
REQUEST_BODY_SLACK = 1024 * 1024


def max_request_body_size(max_image_bytes: int) -> int:
    return max_image_bytes * 4 // 3 + REQUEST_BODY_SLACK


def create_app(sessions: SessionManager | None = None) -> Litestar:
    sessions = sessions or session_manager
    max_image_bytes = sessions.config().max_image_bytes

    def _provide_sessions() -> SessionManager:
        return sessions

    return Litestar(
        route_handlers=[
            get_config,
            save_config,
            create_session,
            upload_session,
            get_session,
            delete_session,
            analyze_session,
            regenerate_storyboard,
            download_storyboard,
            analyze,
            storyboard,
            sequence,
        ],
        request_max_body_size=max_request_body_size(max_image_bytes),
        dependencies={"sessions": Provide(_provide_sessions, sync_to_thread=False)},
        exception_handlers=EXCEPTION_HANDLERS,
        cors_config=CORSConfig(
            allow_origins=["http://localhost:5173", "http://127.0.0.1:5173"],
            allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
            allow_headers=["Content-Type"],
        ),
        logging_config=LoggingConfig(
            loggers={
                "shotdirector": {"level": "INFO", "handlers": ["queue_listener"]},
                "webui": {"level": "INFO", "handlers": ["queue_listener"]},
            }
        ),
    )


app = create_app()
