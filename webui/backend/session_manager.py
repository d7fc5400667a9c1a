"""Session lifecycle: hold an uploaded image, analyze it, render its storyboard."""
from __future__ import annotations

import logging
import time
import uuid

from google import genai

from shotdirector.config import Config
from shotdirector.pipeline import SequencePipeline

from .models import SessionState

log = logging.getLogger(__name__)

# Idle sessions are dropped after SESSION_TTL seconds since last access
SESSION_TTL = 60 * 60
MAX_SESSIONS = 32


class SessionBusyError(RuntimeError):
    """Analysis or storyboard generation is already running for the session."""


class SessionNotReadyError(ValueError):
    """The session lacks the input the requested step needs."""


class SessionManager:
    """In-memory session store. Nothing outlives the process.

    Each session holds an uploaded image and a rendered storyboard, so the store
    is bounded: idle sessions expire after ``ttl`` seconds and at most
    ``max_sessions`` are kept, the least recently used idle one going first.

    ``config`` and ``client`` pin the settings and Gemini client (tests);
    by default the config is reloaded for every pipeline so saved settings
    apply immediately.
    """

    def __init__(
        self,
        config: Config | None = None,
        client: genai.Client | None = None,
        ttl: float = SESSION_TTL,
        max_sessions: int = MAX_SESSIONS,
    ) -> None:
        self._sessions: dict[str, SessionState] = {}
        self._last_access: dict[str, float] = {}
        self.ttl = ttl
        self.max_sessions = max_sessions
        self._config = config
        self._client = client

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def config(self) -> Config:
        return self._config or Config.load()

    def pipeline(self) -> SequencePipeline:
        return SequencePipeline(self.config(), client=self._client, progress_cb=_log_progress)

    def create(self, image: str) -> SessionState:
        self._evict(reserve=1)
        session_id = str(uuid.uuid4())[:8]
        state = SessionState(id=session_id, image=image)
        self._sessions[session_id] = state
        self._last_access[session_id] = time.monotonic()
        log.info("Session %s created", session_id)
        return state

    def get(self, session_id: str) -> SessionState | None:
        self._evict()
        state = self._sessions.get(session_id)
        if state is not None:
            self._last_access[session_id] = time.monotonic()
        return state

    def delete(self, session_id: str) -> None:
        self._sessions.pop(session_id, None)
        self._last_access.pop(session_id, None)

    async def analyze(self, session_id: str) -> SessionState:
        """Run the analysis step, replacing any previous result.

        On success the session is flagged as generating its storyboard; the
        caller is expected to follow up with ``generate_storyboard``.
        """
        state = self._sessions[session_id]
        if state.busy:
            raise SessionBusyError(f"Session {session_id!r} is busy")
        if not state.image:
            raise SessionNotReadyError("Upload an image before running analysis.")

        state.is_loading = True
        state.error = None
        state.result = None
        state.storyboard_image_url = None
        state.storyboard_error = None
        try:
            result = await self.pipeline().step_analyze(state.image)
        except Exception as exc:
            log.warning("Analysis failed for session %s: %s", session_id, exc)
            state.error = str(exc)
            raise
        finally:
            state.is_loading = False

        state.result = result
        state.is_generating_storyboard = True
        return state

    def begin_storyboard(self, session_id: str) -> SessionState:
        """Claim the session for a manual storyboard (re)generation."""
        state = self._sessions[session_id]
        if state.busy:
            raise SessionBusyError(f"Session {session_id!r} is busy")
        if state.result is None:
            raise SessionNotReadyError("Run analysis before generating a storyboard.")
        state.is_generating_storyboard = True
        return state

    async def generate_storyboard(self, session_id: str) -> SessionState | None:
        """Render the storyboard for the held result.

        Failures are recorded on ``storyboard_error``; the analysis result is
        always kept so the step can be retried.
        """
        state = self._sessions.get(session_id)
        if state is None:
            # Session dropped while the background task was queued.
            return None
        if state.result is None:
            state.is_generating_storyboard = False
            return state

        state.storyboard_error = None
        try:
            state.storyboard_image_url = await self.pipeline().step_storyboard(state.result)
        except Exception as exc:
            log.warning("Storyboard generation failed for session %s: %s", session_id, exc)
            state.storyboard_error = str(exc)
        finally:
            state.is_generating_storyboard = False
        return state

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _evict(self, reserve: int = 0) -> None:
        """Drop expired idle sessions, then the oldest idle ones over capacity."""
        now = time.monotonic()
        idle = sorted(
            (sid for sid, state in self._sessions.items() if not state.busy),
            key=self._last_access.__getitem__,
        )
        for sid in idle:
            expired = now - self._last_access[sid] > self.ttl
            over_capacity = len(self._sessions) + reserve > self.max_sessions
            if not (expired or over_capacity):
                continue
            log.info("Session %s evicted (%s)", sid, "expired" if expired else "capacity")
            self.delete(sid)


def _log_progress(text: str) -> None:
    log.info(text.strip())


session_manager = SessionManager()
