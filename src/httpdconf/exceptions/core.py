"""
Exception and diagnostic classes for httpd configuration loading.

This module defines the exception types raised for failures the caller must
handle, and the diagnostic records collected for non-fatal problems found
while building the directive tree.
"""

from dataclasses import dataclass
from enum import Enum


class DiagnosticKind(Enum):
    """Kind of non-fatal problem recorded while loading a configuration."""

    UNMATCHED_END_CONTEXT = "unmatched_end_context"
    CONTEXT_NAME_MISMATCH = "context_name_mismatch"
    CLOSE_FAILED = "close_failed"
    INCLUDE_CYCLE = "include_cycle"


@dataclass(frozen=True)
class SourceLocation:
    """
    Location of a piece of configuration text.

    Params:
        filename: File the text was read from
        line_number: 1-based logical line number, or None when unknown
    """

    filename: str | None = None
    line_number: int | None = None

    def format_location(self) -> str:
        """
        Format the location as ``file:line``.

        Returns:
            Location string, or an empty string when nothing is known
        """
        if self.filename and self.line_number is not None:
            return f"{self.filename}:{self.line_number}"
        if self.filename:
            return self.filename
        if self.line_number is not None:
            return f"line {self.line_number}"
        return ""


@dataclass(frozen=True)
class Diagnostic:
    """A non-fatal problem found while loading, parsing continues afterwards."""

    kind: DiagnosticKind
    message: str
    location: SourceLocation = SourceLocation()

    def __str__(self) -> str:
        where = self.location.format_location()
        return f"{where}: {self.message}" if where else self.message


class HttpdConfError(Exception):
    """Base exception for all httpdconf errors."""

    pass


class ConfigLoadError(HttpdConfError):
    """Raised or recorded when a requested file or directory cannot be loaded."""

    def __init__(self, path: str, reason: str):
        """
        Initialize the exception.

        Params:
            path: The file or directory the caller asked to load
            reason: Why it could not be loaded
        """
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot load '{path}': {reason}")


class QueryError(HttpdConfError):
    """Raised when a tree query is called with an unusable starting node."""

    def __init__(self, message: str):
        super().__init__(message)
