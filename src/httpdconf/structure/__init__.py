"""
httpdconf tree building, file loading and query components.
"""

from httpdconf.structure.builder import (
    DIRECTIVE_PATTERN,
    END_CONTEXT_PATTERN,
    START_CONTEXT_PATTERN,
    TreeBuilder,
)
from httpdconf.structure.loader import FileLoader
from httpdconf.structure.queries import (
    find_among_siblings,
    find_ancestor_siblings,
    find_everywhere,
)

__all__ = [
    "TreeBuilder",
    "FileLoader",
    "END_CONTEXT_PATTERN",
    "START_CONTEXT_PATTERN",
    "DIRECTIVE_PATTERN",
    "find_everywhere",
    "find_among_siblings",
    "find_ancestor_siblings",
]
