"""
Logical line assembly for httpd configuration files.

Physical lines ending in a single backslash continue onto the next line.
Comments are recognized only on the assembled logical line, so a comment
ending in a backslash swallows the following line as well.
"""

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

_TRAILING_WHITESPACE = re.compile(r"\s+$")


@dataclass(frozen=True)
class LogicalLine:
    """One assembled line and the physical line number it starts on."""

    text: str
    line_number: int


def assemble_lines(physical_lines: Iterable[str]) -> Iterator[LogicalLine]:
    """
    Turn physical lines into logical lines.

    Per physical line: leading whitespace is stripped; a single trailing
    backslash continues the line, a doubled one stands for a literal
    backslash. Continued pieces are joined with a single space. Trailing
    whitespace of the logical line collapses to one space, and empty or
    ``#`` lines are dropped.

    Params:
        physical_lines: Lines of one file, with or without end-of-line markers

    Yields:
        LogicalLine records in file order
    """
    pending = ""
    pending_start = 0
    line_number = 0

    for line_number, raw in enumerate(physical_lines, start=1):
        line = raw.lstrip().rstrip("\r\n")

        if line.endswith("\\\\"):
            line = line[:-1]
        elif line.endswith("\\"):
            if not pending:
                pending_start = line_number
                pending = line[:-1]
            else:
                pending = f"{pending} {line[:-1]}"
            continue

        if pending:
            line = f"{pending} {line}"
            start = pending_start
            pending = ""
        else:
            start = line_number

        logical = _emit(line, start)
        if logical is not None:
            yield logical

    # Input ended inside a continuation
    if pending:
        logical = _emit(pending, pending_start)
        if logical is not None:
            yield logical


def _emit(text: str, line_number: int) -> LogicalLine | None:
    text = _TRAILING_WHITESPACE.sub(" ", text)
    if not text.strip() or text.startswith("#"):
        return None
    return LogicalLine(text=text, line_number=line_number)
