"""Exceptions raised by zonestrip and helpers to render them.

Stream and attribute operations wrap the underlying OSError in a
StreamOperationError so callers know which step failed. The wrapper's own
text is context only; describe_error() digs out the OS-level reason that
is worth showing to the user.
"""


class ZonestripError(Exception):
    """Base exception for zonestrip errors."""


class StreamOperationError(ZonestripError):
    """Raised when a marker stream or attribute operation fails.

    The original OSError is always chained as ``__cause__``.

    Attributes:
        path: File the operation targeted.
        operation: Short name of the failed step (e.g. "delete stream").
    """

    def __init__(self, path: str, operation: str) -> None:
        self.path = path
        self.operation = operation
        super().__init__(f"Failed to {operation}: {path}")


def describe_error(exc: BaseException) -> str:
    """Return the most specific human-readable message for an exception.

    StreamOperationError wrappers are unwrapped through ``__cause__`` until
    a non-wrapper exception is reached. If the chain bottoms out without a
    cause, the wrapper's own message is used.

    Args:
        exc: Exception to describe.

    Returns:
        Error message suitable for console output.
    """
    current = exc
    seen: set[int] = set()
    while isinstance(current, StreamOperationError) and id(current) not in seen:
        seen.add(id(current))
        cause = current.__cause__
        if cause is None:
            break
        current = cause

    if isinstance(current, OSError) and current.strerror:
        return current.strerror

    message = str(current)
    if message:
        return message
    if current is not exc and str(exc):
        return str(exc)
    return type(current).__name__
