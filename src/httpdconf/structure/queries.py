"""
Read-only queries over a built directive tree.

Names are matched case-insensitively; results come back in document order.
"""

from collections.abc import Iterable

from httpdconf.core.directive import DirectiveNode
from httpdconf.exceptions import QueryError


def _name_set(names: Iterable[str]) -> frozenset[str]:
    return frozenset(name.lower() for name in names)


def find_everywhere(
    start: DirectiveNode, names: Iterable[str], *, count_only: bool = False
) -> list[DirectiveNode] | int:
    """
    Find directives anywhere in the subtree under start.

    Params:
        start: Node to search from, included in the search
        names: Directive names to look for
        count_only: Return the number of matches instead of the nodes

    Returns:
        Matching nodes in pre-order, or their count
    """
    wanted = _name_set(names)
    found = [node for node in start.walk() if node.name in wanted]
    return len(found) if count_only else found


def find_among_siblings(
    start: DirectiveNode, names: Iterable[str]
) -> list[DirectiveNode]:
    """
    Find directives among start and its siblings.

    For the root, its children are searched.
    """
    wanted = _name_set(names)
    level = start.parent if start.parent is not None else start
    return [node for node in level.children if node.name in wanted]


def find_ancestor_siblings(
    start: DirectiveNode, names: Iterable[str]
) -> list[DirectiveNode]:
    """
    Find directives among start's siblings and the siblings of each ancestor.

    Useful for finding the directives in effect at a node, e.g. the
    DocumentRoot that applies inside a <VirtualHost>.

    Params:
        start: Non-root node to search from
        names: Directive names to look for

    Returns:
        Matches from the innermost level first, document order within a level

    Raises:
        QueryError: If start is the root of the tree
    """
    if start.parent is None:
        raise QueryError("find_ancestor_siblings needs a non-root starting node")
    wanted = _name_set(names)
    found: list[DirectiveNode] = []
    node = start
    while node.parent is not None:
        found.extend(child for child in node.parent.children if child.name in wanted)
        node = node.parent
    return found
