"""
httpdconf - load Apache httpd style configuration into a directive tree

httpdconf parses configuration files, or directories of them, into a tree of
directives and contexts, resolves relative paths against ServerRoot and
offers queries over the result.
"""

from importlib.metadata import version

from httpdconf.core import DirectiveNode, PathPredicate
from httpdconf.exceptions import ConfigLoadError, Diagnostic, DiagnosticKind
from httpdconf.session import ConfigParser, ParserOptions

__version__ = version("httpdconf")

__all__ = [
    "__version__",
    "ConfigParser",
    "ParserOptions",
    "DirectiveNode",
    "PathPredicate",
    "ConfigLoadError",
    "Diagnostic",
    "DiagnosticKind",
]
