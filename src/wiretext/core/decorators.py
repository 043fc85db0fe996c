"""Common decorators for error handling and performance logging."""

from __future__ import annotations

import time
from functools import wraps

from ..logging import get_logger
from ..exceptions import AnalysisError, CaptureReadError, WiretextError


logger = get_logger(__name__)


def handle_read_errors(func):
    """Wrap input acquisition to raise :class:`CaptureReadError` on I/O failure."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except CaptureReadError:
            raise
        except OSError as exc:
            logger.error("Read error in %s: %s", func.__name__, exc, exc_info=True)
            raise CaptureReadError(
                str(exc),
                context=getattr(exc, "filename", None),
                suggestion="Check that the capture export exists and is readable.",
            ) from exc

    return wrapper


def handle_analysis_errors(func):
    """Wrap analysis entry points to raise :class:`AnalysisError` on failure."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except WiretextError:
            raise
        except Exception as exc:  # pragma: no cover - runtime protection
            logger.error("Analysis error in %s: %s", func.__name__, exc, exc_info=True)
            raise AnalysisError(str(exc)) from exc

    return wrapper


def log_performance(func):
    """Log execution duration for ``func``."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        start_time = time.perf_counter()
        try:
            result = func(*args, **kwargs)
        except Exception:
            duration = time.perf_counter() - start_time
            logger.info("%s call failed after %.3f seconds", func.__name__, duration)
            raise
        duration = time.perf_counter() - start_time
        logger.info("%s executed in %.3f seconds", func.__name__, duration)
        return result

    return wrapper
