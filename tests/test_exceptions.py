"""Tests for custom exception hierarchy."""

import pytest

from wiretext.exceptions import (
    AnalysisError,
    CaptureReadError,
    SessionNotFoundError,
    WiretextError,
)


def test_exceptions_can_be_caught():
    """Each custom exception should be catchable via the base class."""
    with pytest.raises(WiretextError):
        raise WiretextError()
    for exc_cls in [CaptureReadError, AnalysisError, SessionNotFoundError]:
        with pytest.raises(WiretextError):
            raise exc_cls()


def test_context_and_suggestion():
    exc = CaptureReadError("boom", context="capture.txt", suggestion="retry")
    assert str(exc) == "boom"
    assert exc.context == "capture.txt"
    assert exc.suggestion == "retry"
