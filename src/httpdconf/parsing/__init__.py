"""
httpdconf parsing components.

This package provides logical line assembly and path resolution.
"""

from httpdconf.parsing.lines import LogicalLine, assemble_lines
from httpdconf.parsing.path_resolver import PathResolver, resolve_directive_path

__all__ = [
    "LogicalLine",
    "assemble_lines",
    "PathResolver",
    "resolve_directive_path",
]
