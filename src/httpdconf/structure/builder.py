"""
Context matching and directive tree building.

The TreeBuilder consumes logical lines and keeps a cursor on the context
currently accepting children. A start tag adds a child and moves the cursor
into it; an end tag naming the cursor's context moves it back out. Malformed
end tags are reported and dropped without moving the cursor.
"""

import logging
import re
from collections.abc import Callable

from httpdconf.core.directive import DirectiveNode
from httpdconf.core.path_classes import INCLUDE_DIRECTIVES
from httpdconf.exceptions import Diagnostic, DiagnosticKind, SourceLocation
from httpdconf.parsing.lines import LogicalLine
from httpdconf.parsing.path_resolver import PathResolver

logger = logging.getLogger(__name__)

END_CONTEXT_PATTERN = re.compile(r"^<\s*/\s*([^\s>]+)\s*>\s*$")
START_CONTEXT_PATTERN = re.compile(r"^<\s*([^\s/>][^\s>]*)(?:\s+(.*?))?\s*>\s*$")
DIRECTIVE_PATTERN = re.compile(r"^\s*(\S+)(?:\s+(.*?))?\s*$", re.DOTALL)

_WHITESPACE_RUN = re.compile(r"\s+")


class TreeBuilder:
    """
    Builds the directive tree one logical line at a time.

    Params:
        root: Root node of the tree; the cursor starts here
        resolver: Resolver applied to every plain directive
        include: Called with the resolved target of Include-like directives
        report: Sink for structural diagnostics
    """

    def __init__(
        self,
        root: DirectiveNode,
        resolver: PathResolver,
        include: Callable[[str], None],
        report: Callable[[Diagnostic], None],
    ):
        self.cursor = root
        self._resolver = resolver
        self._include = include
        self._report = report

    def feed(self, line: LogicalLine, filename: str) -> DirectiveNode | None:
        """
        Process one logical line.

        Params:
            line: Assembled line and its starting line number
            filename: File the line was read from

        Returns:
            The node created for the line, or None for an end tag or a
            blank line
        """
        end = END_CONTEXT_PATTERN.match(line.text)
        if end:
            self._close_context(end.group(1).lower(), filename, line.line_number)
            return None

        start = START_CONTEXT_PATTERN.match(line.text)
        if start:
            arguments = _WHITESPACE_RUN.sub(" ", start.group(2) or "")
            node = self._add_node(start.group(1), arguments, filename, line)
            self.cursor = node
            return node

        directive = DIRECTIVE_PATTERN.match(line.text)
        if directive is None:
            return None
        node = self._add_node(
            directive.group(1), directive.group(2) or "", filename, line
        )

        self._resolver.resolve(node, at_top_level=self.cursor.parent is None)

        if node.name in INCLUDE_DIRECTIVES:
            elements = node.value_elements
            if elements and elements[0]:
                self._include(elements[0])
        return node

    def _add_node(
        self, name: str, value: str, filename: str, line: LogicalLine
    ) -> DirectiveNode:
        node = DirectiveNode(
            name, value, filename=filename, line_number=line.line_number
        )
        self.cursor.add_child(node)
        return node

    def _close_context(self, closing: str, filename: str, line_number: int) -> None:
        location = SourceLocation(filename=filename, line_number=line_number)
        if self.cursor.parent is None:
            self._warn(
                DiagnosticKind.UNMATCHED_END_CONTEXT,
                f"end context '{closing}' without a matching start context",
                location,
            )
        elif self.cursor.name != closing:
            self._warn(
                DiagnosticKind.CONTEXT_NAME_MISMATCH,
                f"end context '{closing}' does not match start context "
                f"'{self.cursor.name}' opened at "
                f"{self.cursor.filename}:{self.cursor.line_number}",
                location,
            )
        else:
            self.cursor = self.cursor.parent

    def _warn(
        self, kind: DiagnosticKind, message: str, location: SourceLocation
    ) -> None:
        diagnostic = Diagnostic(kind=kind, message=message, location=location)
        logger.warning("%s", diagnostic)
        self._report(diagnostic)
