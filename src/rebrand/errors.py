# src/rebrand/errors.py


class RebrandError(Exception):
    """Base class for errors raised by rebrand."""


class InvalidNameError(RebrandError, ValueError):
    """Raised when a project name is not a non-empty string."""


class EmptyTokenSequenceError(InvalidNameError):
    """Raised when a name contains no word tokens (e.g. only separators)."""


class EnvironmentGuardError(RebrandError):
    """Raised when the environment guard refuses to let a rename proceed."""
