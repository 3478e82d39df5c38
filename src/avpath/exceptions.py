"""
Custom exception hierarchy for avpath.

All exceptions inherit from AVPathError, which provides optional context
for structured error handling and logging. File and encoding errors also
inherit from the matching builtin so callers can catch either.
"""

from __future__ import annotations

from typing import Any


class AVPathError(Exception):
    """Base exception for all avpath errors.

    Attributes:
        message: Human-readable error message.
        context: Optional structured context for logging/debugging.
    """

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, context={self.context!r})"


class ConfigurationError(AVPathError):
    """Raised when configuration is invalid.

    Examples:
        - Unknown AUTHORITY_STYLE value
        - Negative SUBPATH_MAX_LENGTH
    """

    pass


class MalformedUriError(AVPathError):
    """Raised when a caller unwraps a failed URI conversion.

    The conversion functions never raise this themselves; see
    UriPathResult.unwrap().

    Context should include:
        - uri: The offending input
        - reason: The MalformedUriReason value
    """

    pass


class FileMissingError(AVPathError, FileNotFoundError):
    """Raised when a file to be read does not exist.

    Context should include:
        - path: The path that was opened
    """

    pass


class FileIOError(AVPathError, OSError):
    """Raised when a file exists but cannot be opened or read.

    Context should include:
        - path: The path that was opened
        - errno: The underlying OS error number, if any
    """

    pass


class EncodingError(AVPathError, ValueError):
    """Raised when text conversion meets an invalid sequence.

    Context should include:
        - encoding: The codec in use
        - position: Offset of the first bad unit
    """

    pass
