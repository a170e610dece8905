"""
Parse sessions over httpd configuration files.

A ConfigParser owns one directive tree. Files and directories loaded through
it are appended at the current cursor, so a context opened in one file can be
closed in a file loaded by a later call.
"""

import logging
import os
from typing import Any

from pydantic import BaseModel, ConfigDict

from httpdconf.core.directive import ROOT_NAME, DirectiveNode
from httpdconf.core.types import PathTransform
from httpdconf.exceptions import ConfigLoadError, Diagnostic
from httpdconf.parsing.path_resolver import PathResolver
from httpdconf.structure.builder import TreeBuilder
from httpdconf.structure.loader import FileLoader
from httpdconf.structure.queries import (
    find_among_siblings,
    find_ancestor_siblings,
    find_everywhere,
)

logger = logging.getLogger(__name__)


class ParserOptions(BaseModel):
    """
    Options fixed for the lifetime of a ConfigParser.

    Params:
        pre_transform_path: Hook ``(parser, directive_name, path) -> path``
            applied before relative paths are prefixed with ServerRoot
        post_transform_path: Same signature, applied after prefixing
        file_encoding: Encoding used to read configuration files
        track_include_cycles: Refuse to include a file or directory that is
            still being loaded
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    pre_transform_path: PathTransform | None = None
    post_transform_path: PathTransform | None = None
    file_encoding: str = "utf-8"
    track_include_cycles: bool = True


class ConfigParser:
    """Loads httpd configuration files into a directive tree and queries it.

    Example:
        parser = ConfigParser()
        if not parser.parse_file("/etc/httpd/conf/httpd.conf"):
            raise SystemExit(parser.errstr)
        for node in parser.find_everywhere("CustomLog"):
            print(node.value_elements[0])

    Params:
        options: ParserOptions, or a mapping of its fields
    """

    def __init__(self, options: ParserOptions | dict[str, Any] | None = None):
        if options is None:
            options = ParserOptions()
        elif not isinstance(options, ParserOptions):
            options = ParserOptions.model_validate(options)
        self._options = options

        self._root = DirectiveNode(ROOT_NAME)
        self._diagnostics: list[Diagnostic] = []
        self.last_error: ConfigLoadError | None = None

        self._resolver = PathResolver(
            self, options.pre_transform_path, options.post_transform_path
        )
        self._loader = FileLoader(
            options.file_encoding,
            self._diagnostics.append,
            track_cycles=options.track_include_cycles,
        )
        self._builder = TreeBuilder(
            self._root, self._resolver, self._loader.include, self._diagnostics.append
        )
        self._loader.builder = self._builder

    @classmethod
    def load(
        cls,
        path: str | os.PathLike,
        options: ParserOptions | dict[str, Any] | None = None,
    ) -> "ConfigParser":
        """
        Create a parser and load path into it.

        Raises:
            ConfigLoadError: If path cannot be loaded
        """
        parser = cls(options)
        if not parser.parse_file(path):
            raise parser.last_error
        return parser

    @property
    def options(self) -> ParserOptions:
        return self._options

    @property
    def root(self) -> DirectiveNode:
        return self._root

    @property
    def cursor(self) -> DirectiveNode:
        """The context that receives the next directive."""
        return self._builder.cursor

    @property
    def server_root(self) -> str:
        return self._resolver.server_root

    @property
    def diagnostics(self) -> list[Diagnostic]:
        """Non-fatal problems found so far, oldest first."""
        return list(self._diagnostics)

    @property
    def errstr(self) -> str:
        """Message of the last failed load, or an empty string."""
        return str(self.last_error) if self.last_error is not None else ""

    def parse_file(self, path: str | os.PathLike) -> bool:
        """
        Load a configuration file or directory into the tree.

        Failures inside included files are skipped; only a failure to load
        path itself fails the call. Nodes added before a failure stay in the
        tree.

        Params:
            path: File or directory to load

        Returns:
            True on success; on failure ``last_error`` tells why
        """
        path = os.fspath(path)
        self.last_error = None
        try:
            self._loader.load(path)
        except ConfigLoadError as exc:
            logger.error("%s", exc)
            self.last_error = exc
            return False
        return True

    parse_file_or_directory = parse_file

    def unclosed_contexts(self) -> list[DirectiveNode]:
        """Contexts opened but not yet closed, innermost first."""
        contexts = []
        node = self.cursor
        while node.parent is not None:
            contexts.append(node)
            node = node.parent
        return contexts

    def find_everywhere(
        self,
        *names: str,
        start: DirectiveNode | None = None,
        count_only: bool = False,
    ) -> list[DirectiveNode] | int:
        """Find directives named any of names under start (default root), start included."""
        return find_everywhere(
            start if start is not None else self._root, names, count_only=count_only
        )

    def find_among_siblings(
        self, *names: str, start: DirectiveNode | None = None
    ) -> list[DirectiveNode]:
        """Find directives among start's siblings, or the root's children."""
        return find_among_siblings(start if start is not None else self._root, names)

    def find_ancestor_siblings(
        self, node: DirectiveNode, *names: str
    ) -> list[DirectiveNode]:
        """Find directives at node's level and every enclosing level, innermost first."""
        return find_ancestor_siblings(node, names)
