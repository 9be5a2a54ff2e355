"""Exception hierarchy for zscreen."""


class ZScreenError(Exception):
    """Base class for all zscreen errors."""


class GridError(ZScreenError):
    """Invalid operation on a Grid (e.g. appending rows to an overlay)."""


class RenderSequenceError(ZScreenError):
    """A render wait was requested while another one is still outstanding.

    This means display commands reached the session out of the expected
    cadence and points to a bug in command emission ordering.
    """


class InputNotPendingError(ZScreenError):
    """Input was submitted while the engine was not waiting for any."""


class SessionClosedError(ZScreenError):
    """The session has been closed and no longer accepts commands."""


class TranscriptError(ZScreenError):
    """A transcript file could not be parsed."""

    def __init__(self, message: str, line: int | None = None):
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)
