"""
httpdconf exception and diagnostic classes.

This package provides the exception types and diagnostic records used
throughout httpdconf for consistent error handling and reporting.
"""

from httpdconf.exceptions.core import (
    ConfigLoadError,
    Diagnostic,
    DiagnosticKind,
    HttpdConfError,
    QueryError,
    SourceLocation,
)

__all__ = [
    "HttpdConfError",
    "ConfigLoadError",
    "QueryError",
    "Diagnostic",
    "DiagnosticKind",
    "SourceLocation",
]
