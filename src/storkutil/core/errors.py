"""
Error types raised by stork-util.

Every failure is fatal at this level: nothing here retries or returns a
partial result, so ``retryable`` is always False.
"""

from typing import Optional


class StorkUtilError(Exception):
    """Base class for all stork-util errors."""

    retryable = False

    def __init__(self, message: str, reason: Optional[str] = None):
        super().__init__(message)
        self.reason = reason


class PathParseError(StorkUtilError, ValueError):
    """A path string could not be parsed as a URI path component."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Invalid path {path!r}: {reason}", reason)
        self.path = path


class URIParseError(StorkUtilError, ValueError):
    """A string is not a valid URI, or the URI has no scheme."""

    def __init__(self, uri: str, reason: str):
        super().__init__(f"Invalid URI {uri!r}: {reason}", reason)
        self.uri = uri


class FileAccessError(StorkUtilError, OSError):
    """A filesystem operation (stat, listdir) failed."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Cannot access {path}: {reason}", reason)
        self.path = path
