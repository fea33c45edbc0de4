"""Exceptions raised by remember."""


class UsageError(TypeError):
    """Raised when an entry point is called with a malformed cache name."""
    pass


class StageStateError(RuntimeError):
    """Raised when a stage is written to or flushed after it left the open state."""
    pass
