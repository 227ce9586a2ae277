"""
Error taxonomy for minigrep.

Library code raises these; the CLI turns them into a one-line stderr message
and exit code 1.  Argument problems are ValueErrors, run problems are
RuntimeErrors, so callers can catch either family without importing minigrep.
"""


class MinigrepError(Exception):
    """Base class for every error minigrep raises on purpose."""


# ── Argument resolution ────────────────────────────────────────────────────────

class ConfigError(MinigrepError, ValueError):
    pass


class InsufficientArguments(ConfigError):
    def __init__(self, message: str = "Not enough arguments"):
        super().__init__(message)


class ConflictingFlags(ConfigError):
    def __init__(self, message: str = "Cannot use both -s and -S"):
        super().__init__(message)


# ── Running a search ───────────────────────────────────────────────────────────

class RunError(MinigrepError, RuntimeError):
    pass


class IoFailure(RunError):
    """The target file could not be read.  The OSError is kept as __cause__."""


class OutputFailure(RunError):
    """Matching lines could not be written to the output stream."""
