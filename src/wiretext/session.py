"""Per-run analysis sessions.

Every analysis gets its own :class:`AnalysisSession` so concurrent runs
never write into a shared result slot.
"""

from __future__ import annotations

import os
import threading
import uuid
from collections import OrderedDict
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from enum import Enum
from typing import IO, Any, Optional

from .analyzer import analyze_file
from .core.config import settings
from .core.models import AnalysisResult
from .exceptions import SessionNotFoundError, WiretextError
from .logging import get_logger

logger = get_logger(__name__)


class SessionStatus(str, Enum):
    PENDING = "pending"
    RUNNING = "running"
    DONE = "done"
    FAILED = "failed"


@dataclass
class AnalysisSession:
    id: str
    status: SessionStatus = SessionStatus.PENDING
    progress: int = 0
    result: Optional[AnalysisResult] = None
    error: Optional[str] = None
    future: Optional[Future] = field(default=None, repr=False)

    @property
    def finished(self) -> bool:
        return self.status in (SessionStatus.DONE, SessionStatus.FAILED)


class SessionRegistry:
    """Own the sessions of a process and run analyses into them."""

    def __init__(self, max_sessions: Optional[int] = None, max_workers: Optional[int] = None) -> None:
        self.max_sessions = settings.max_sessions if max_sessions is None else max_sessions
        self.max_workers = max_workers
        self._sessions: "OrderedDict[str, AnalysisSession]" = OrderedDict()
        self._lock = threading.Lock()
        self._executor: Optional[ThreadPoolExecutor] = None

    def create(self) -> AnalysisSession:
        session = AnalysisSession(id=uuid.uuid4().hex)
        with self._lock:
            self._sessions[session.id] = session
        logger.debug("Created session %s", session.id)
        return session

    def get(self, session_id: str) -> AnalysisSession:
        with self._lock:
            session = self._sessions.get(session_id)
        if session is None:
            raise SessionNotFoundError(f"Unknown session: {session_id}")
        return session

    def discard(self, session_id: str) -> None:
        with self._lock:
            if self._sessions.pop(session_id, None) is None:
                raise SessionNotFoundError(f"Unknown session: {session_id}")

    def run(
        self,
        session_id: str,
        source: str | os.PathLike | IO[bytes],
        **kwargs: Any,
    ) -> AnalysisResult:
        """Analyze ``source`` into the session ``session_id``."""
        session = self.get(session_id)
        session.status = SessionStatus.RUNNING

        def _on_progress(percent: int) -> None:
            session.progress = percent

        try:
            result = analyze_file(source, _on_progress, **kwargs)
        except Exception as exc:
            session.status = SessionStatus.FAILED
            session.error = str(exc) or type(exc).__name__
            logger.error(
                "Session %s failed: %s",
                session_id,
                exc,
                exc_info=not isinstance(exc, WiretextError),
            )
            self._evict_finished()
            raise

        session.result = result
        session.status = SessionStatus.DONE
        self._evict_finished()
        return result

    def submit(self, source: str | os.PathLike | IO[bytes], **kwargs: Any) -> AnalysisSession:
        """Start an analysis in the background and return its session."""
        session = self.create()
        with self._lock:
            if self._executor is None:
                self._executor = ThreadPoolExecutor(max_workers=self.max_workers)
            executor = self._executor
        session.future = executor.submit(self.run, session.id, source, **kwargs)
        return session

    def shutdown(self, wait: bool = True) -> None:
        with self._lock:
            executor, self._executor = self._executor, None
        if executor is not None:
            executor.shutdown(wait=wait)

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def _evict_finished(self) -> None:
        with self._lock:
            finished = [sid for sid, s in self._sessions.items() if s.finished]
            for sid in finished[: max(0, len(finished) - self.max_sessions)]:
                del self._sessions[sid]
                logger.debug("Evicted session %s", sid)


__all__ = ["SessionStatus", "AnalysisSession", "SessionRegistry"]
