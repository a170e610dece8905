"""
Generic ordered tree node for httpdconf.

This module contains the TreeNode base class: an ordered list of children
with a back-reference to the parent. Subtrees are released with their
parent; no manual teardown is needed.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Optional


@dataclass(eq=False)
class TreeNode:
    """
    Base class for nodes of an ordered tree.

    Children are kept in insertion order. A node belongs to at most one
    parent; adding it elsewhere moves it.
    """

    parent: Optional["TreeNode"] = field(default=None, repr=False)
    children: list["TreeNode"] = field(default_factory=list, repr=False)

    def add_child(self, child: "TreeNode") -> "TreeNode":
        """
        Append child as the last child of this node.

        Params:
            child: Node to insert; detached from its previous parent first

        Returns:
            The inserted child
        """
        if child is self or child in self.ancestors():
            raise ValueError("cannot add a node beneath itself")
        child.detach()
        child.parent = self
        self.children.append(child)
        return child

    def remove_child(self, child: "TreeNode") -> None:
        """Remove child and its whole subtree from this node."""
        self.children.remove(child)
        child.parent = None

    def detach(self) -> None:
        """Remove this node, with its subtree, from its parent."""
        if self.parent is not None:
            self.parent.remove_child(self)

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def root(self) -> "TreeNode":
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    @property
    def depth(self) -> int:
        return sum(1 for _ in self.ancestors())

    def ancestors(self) -> Iterator["TreeNode"]:
        """Yield the parent, grandparent and so on up to the root."""
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    def walk(self) -> Iterator["TreeNode"]:
        """Traverse the subtree depth-first in pre-order, this node included."""
        stack: list[TreeNode] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))
