"""Typed failures raised by the analyzer pipeline.

Only the fetch and parse stages surface errors to the caller; individual link
probe failures are absorbed by the accessibility checker and reported as a
count.
"""

from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Coarse failure classes an outer layer can map onto its own responses."""

    UNKNOWN = "unknown"
    NOT_FOUND = "not_found"
    INVALID_ARGUMENT = "invalid_argument"


_HTTP_STATUS = {
    ErrorCode.UNKNOWN: 500,
    ErrorCode.NOT_FOUND: 404,
    ErrorCode.INVALID_ARGUMENT: 400,
}


class AnalyzerError(Exception):
    """Base class for every error the analyzer raises."""

    code: ErrorCode = ErrorCode.UNKNOWN

    def __init__(self, message: str, *, code: ErrorCode | None = None) -> None:
        super().__init__(message)
        if code is not None:
            self.code = code

    @property
    def http_status(self) -> int:
        """HTTP status an API layer should answer with for this error."""
        return _HTTP_STATUS[self.code]


class InvalidURLError(AnalyzerError):
    """The analysis request did not carry a usable URL."""

    code = ErrorCode.INVALID_ARGUMENT


class FetchError(AnalyzerError):
    """The target page could not be retrieved with a 200 response."""

    def __init__(self, message: str, *, url: str, status_code: int | None = None) -> None:
        code = ErrorCode.NOT_FOUND if status_code == 404 else ErrorCode.UNKNOWN
        super().__init__(message, code=code)
        self.url = url
        self.status_code = status_code


class ParseError(AnalyzerError):
    """The fetched body could not be interpreted as markup."""
