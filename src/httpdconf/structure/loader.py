"""
Recursive loading of configuration files and directories.

A directory is loaded by loading its entries in sorted name order; a file
is assembled into logical lines and fed to the TreeBuilder. Include-like
directives call back into the loader with the builder's cursor unchanged,
so included text lands in the context the directive appeared in.
"""

import glob
import logging
import os
import re
from collections.abc import Callable, Iterator
from contextlib import contextmanager

from httpdconf.exceptions import (
    ConfigLoadError,
    Diagnostic,
    DiagnosticKind,
    SourceLocation,
)
from httpdconf.parsing.lines import assemble_lines
from httpdconf.structure.builder import TreeBuilder

logger = logging.getLogger(__name__)

_GLOB_CHARS = re.compile(r"[*?\[]")


class FileLoader:
    """
    Loads files and directories into a TreeBuilder.

    Params:
        encoding: Text encoding of configuration files
        report: Sink for diagnostics
        track_cycles: Refuse to re-enter a file or directory that is still
            being loaded
    """

    def __init__(
        self,
        encoding: str,
        report: Callable[[Diagnostic], None],
        track_cycles: bool = True,
    ):
        self.builder: TreeBuilder | None = None
        self._encoding = encoding
        self._report = report
        self._track_cycles = track_cycles
        self._active: list[str] = []

    def load(self, path: str) -> None:
        """
        Load a file or directory requested by the caller.

        Params:
            path: File or directory to load

        Raises:
            ConfigLoadError: If path cannot be stat'ed or opened
        """
        self._active = []
        try:
            self._load(path)
        except OSError as exc:
            raise ConfigLoadError(path, exc.strerror or str(exc)) from exc

    def include(self, path: str) -> None:
        """
        Load the target of an Include-like directive.

        Missing or unreadable targets are skipped. A target that does not
        exist but holds wildcard characters is expanded, matches loaded in
        sorted order.

        Params:
            path: Resolved first value element of the directive
        """
        if os.path.exists(path):
            targets = [path]
        elif _GLOB_CHARS.search(path):
            targets = sorted(glob.glob(path))
        else:
            return
        for target in targets:
            self._load_nested(target)

    def _load_nested(self, path: str) -> None:
        try:
            self._load(path)
        except OSError as exc:
            logger.debug("Skipping %s: %s", path, exc)

    def _load(self, path: str) -> None:
        if os.path.isdir(path):
            entries = sorted(os.listdir(path))
            with self._entered(path) as entered:
                if entered:
                    for entry in entries:
                        self._load_nested(os.path.join(path, entry))
            return

        handle = open(path, encoding=self._encoding, errors="surrogateescape")
        try:
            with self._entered(path) as entered:
                if entered:
                    for line in assemble_lines(handle):
                        self.builder.feed(line, path)
        finally:
            try:
                handle.close()
            except OSError as exc:
                self._warn(
                    DiagnosticKind.CLOSE_FAILED,
                    f"cannot close '{path}': {exc}",
                    SourceLocation(filename=path),
                )

    @contextmanager
    def _entered(self, path: str) -> Iterator[bool]:
        """Mark path as being loaded; yields False if it already is."""
        if not self._track_cycles:
            yield True
            return
        key = os.path.realpath(path)
        if key in self._active:
            self._warn(
                DiagnosticKind.INCLUDE_CYCLE,
                f"'{path}' is already being loaded, not including it again",
                SourceLocation(filename=path),
            )
            yield False
            return
        self._active.append(key)
        try:
            yield True
        finally:
            self._active.pop()

    def _warn(
        self, kind: DiagnosticKind, message: str, location: SourceLocation
    ) -> None:
        diagnostic = Diagnostic(kind=kind, message=message, location=location)
        logger.warning("%s", diagnostic)
        self._report(diagnostic)
