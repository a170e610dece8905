"""
Path resolution for path-bearing directives.

Relative paths given to directives such as CustomLog or Include are made
absolute against the ServerRoot recorded earlier in the same session. Two
optional hooks may rewrite the candidate path before and after that step.
"""

import logging
import os
from typing import TYPE_CHECKING

from httpdconf.core.directive import DirectiveNode
from httpdconf.core.path_classes import (
    PATH_DIRECTIVES,
    RELATIVE_PATH_DIRECTIVES,
    is_absolute,
    is_null_device,
    predicate_allows,
)
from httpdconf.core.types import PathTransform

if TYPE_CHECKING:
    from httpdconf.session import ConfigParser

logger = logging.getLogger(__name__)


class PathResolver:
    """
    Resolves the first value element of path-bearing directives.

    Holds the ServerRoot seen so far; the hooks are fixed at construction.

    Params:
        session: Session passed through to the transform hooks
        pre_transform: Hook applied before ServerRoot prefixing
        post_transform: Hook applied after ServerRoot prefixing
    """

    def __init__(
        self,
        session: "ConfigParser",
        pre_transform: PathTransform | None = None,
        post_transform: PathTransform | None = None,
    ):
        self._session = session
        self._pre_transform = pre_transform
        self._post_transform = post_transform
        self.server_root = ""

    def resolve(self, node: DirectiveNode, at_top_level: bool) -> bool:
        """
        Resolve node's first value element in place.

        A top-level ServerRoot is recorded verbatim instead of being
        resolved. Values the directive's predicate rejects (pipes, syslog,
        the null device) are left untouched.

        Params:
            node: Freshly tokenized directive
            at_top_level: True when the directive is not inside any context

        Returns:
            True if the value was rewritten
        """
        name = node.name
        predicate = PATH_DIRECTIVES.get(name)
        elements = node.value_elements
        if predicate is None or not elements:
            return False
        path = elements[0]
        if not path or is_null_device(path):
            return False

        if name == "serverroot" and at_top_level:
            self.server_root = path
            logger.debug("ServerRoot set to %s", path)
            return False

        if not predicate_allows(predicate, path):
            return False

        if self._pre_transform is not None:
            path = self._pre_transform(self._session, name, path)

        if (
            name in RELATIVE_PATH_DIRECTIVES
            and self.server_root
            and not is_absolute(path)
        ):
            path = os.path.join(self.server_root, path)

        if self._post_transform is not None:
            path = self._post_transform(self._session, name, path)

        node.value_elements = [path, *elements[1:]]
        return True


def resolve_directive_path(
    node: DirectiveNode,
    server_root: str = "",
    pre_transform: PathTransform | None = None,
    post_transform: PathTransform | None = None,
    session: "ConfigParser | None" = None,
) -> bool:
    """
    Resolve a single node's path outside of a parse.

    Params:
        node: Directive to rewrite in place
        server_root: Directory relative paths are resolved against
        pre_transform: Hook applied before ServerRoot prefixing
        post_transform: Hook applied after ServerRoot prefixing
        session: Value handed to the hooks as their first argument

    Returns:
        True if the value was rewritten
    """
    resolver = PathResolver(session, pre_transform, post_transform)
    resolver.server_root = server_root
    at_top_level = node.parent is None or node.parent.parent is None
    return resolver.resolve(node, at_top_level)
