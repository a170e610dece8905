"""
Core httpdconf components.

This package provides the directive tree node types, the value tokenizer and
the path classification tables.
"""

from httpdconf.core.directive import ROOT_NAME, UNSET_LINE_NUMBER, DirectiveNode
from httpdconf.core.path_classes import (
    INCLUDE_DIRECTIVES,
    PATH_DIRECTIVES,
    RELATIVE_PATH_DIRECTIVES,
    PathPredicate,
    classify_path,
    is_absolute,
    is_null_device,
    predicate_allows,
)
from httpdconf.core.tree_node import TreeNode
from httpdconf.core.types import PathTransform, ValueElements
from httpdconf.core.values import ValuePair, format_value, parse_value

__all__ = [
    "TreeNode",
    "DirectiveNode",
    "ROOT_NAME",
    "UNSET_LINE_NUMBER",
    "ValuePair",
    "parse_value",
    "format_value",
    "PathPredicate",
    "PATH_DIRECTIVES",
    "RELATIVE_PATH_DIRECTIVES",
    "INCLUDE_DIRECTIVES",
    "classify_path",
    "is_absolute",
    "is_null_device",
    "predicate_allows",
    "PathTransform",
    "ValueElements",
]
