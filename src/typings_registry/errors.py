"""Error types raised by the registry.

Every failure in this package is a data or programmer error, so nothing
here is retried. ``recoverable`` is carried for callers that surface errors
to tooling; it is always ``False`` for the codes defined below.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorCode(StrEnum):
    PACKAGE_NOT_FOUND = "PACKAGE_NOT_FOUND"
    VERSION_NOT_FOUND = "VERSION_NOT_FOUND"
    AMBIGUOUS_PACKAGE = "AMBIGUOUS_PACKAGE"
    INVALID_NOT_NEEDED_PACKAGE = "INVALID_NOT_NEEDED_PACKAGE"
    INVALID_VERSION = "INVALID_VERSION"
    INVALID_LICENSE = "INVALID_LICENSE"
    INTERNAL_INCONSISTENCY = "INTERNAL_INCONSISTENCY"
    DATA_FILE_ERROR = "DATA_FILE_ERROR"


class RegistryError(Exception):
    """Raised for every registry failure; ``code`` identifies the kind."""

    def __init__(self, code: ErrorCode, message: str, recoverable: bool = False) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.recoverable = recoverable

    def __repr__(self) -> str:
        return f"RegistryError(code={self.code.value!r}, message={self.message!r})"
