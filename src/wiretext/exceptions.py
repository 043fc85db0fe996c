"""Custom exceptions for the :mod:`wiretext` package."""


class WiretextError(Exception):
    """Base class for all custom ``wiretext`` exceptions.

    Parameters
    ----------
    message:
        Short description of the failure.
    context:
        Optional additional information about where/why the error occurred.
    suggestion:
        Optional hint that may help recover from the error.
    """

    def __init__(
        self,
        message: str = "",
        *,
        context: str | None = None,
        suggestion: str | None = None,
    ) -> None:
        super().__init__(message)
        self.context = context
        self.suggestion = suggestion


class CaptureReadError(WiretextError):
    """Raised when the capture text could not be produced at all."""


class AnalysisError(WiretextError):
    """Raised when an analysis run fails unexpectedly."""


class SessionNotFoundError(WiretextError):
    """Raised when a session identifier is unknown to the registry."""
