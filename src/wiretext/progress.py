"""Advisory progress reporting for a scan."""

from __future__ import annotations

from typing import Callable, Optional

from .core.config import settings
from .logging import get_logger

logger = get_logger(__name__)

ProgressCallback = Callable[[int], None]


class ProgressReporter:
    """Deliver a non-decreasing percentage to an optional callback.

    Signals before completion are clamped to 99; :meth:`complete` sends 100
    exactly once. A callback that raises is logged and then ignored so the
    scan is never interrupted by its observer.
    """

    def __init__(self, callback: Optional[ProgressCallback] = None, interval: Optional[int] = None) -> None:
        self.callback = callback
        self.interval = max(1, settings.progress_interval if interval is None else interval)
        self.last = -1
        self.completed = False

    def update(self, index: int, total: int) -> None:
        """Report progress for line ``index`` out of ``total`` at the configured cadence."""
        if index % self.interval != 0 or total <= 0:
            return
        self._emit(min(99, index * 100 // total))

    def complete(self) -> None:
        if self.completed:
            return
        self.completed = True
        self._emit(100)

    def _emit(self, percent: int) -> None:
        if percent <= self.last:
            return
        self.last = percent
        if self.callback is None:
            return
        try:
            self.callback(percent)
        except Exception as exc:
            logger.warning("Progress callback failed at %s%%: %s", percent, exc)
