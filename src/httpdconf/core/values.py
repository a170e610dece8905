"""
Directive value tokenizing and formatting.

A directive value is held both as the raw string from the configuration file
and as the ordered list of elements it splits into. Elements are separated by
whitespace unless enclosed in double quotes; an escaped quote (\\") never
starts or ends an element. Inside quotes an escaped backslash (\\\\) stands for
one backslash, so formatted values parse back into the same elements.
"""

import re
from dataclasses import dataclass, field

# Stand-ins for \" and \\ while scanning, restored afterwards
_QUOTE_PLACEHOLDER = "\ue000"
_BACKSLASH_PLACEHOLDER = "\ue001"

_ESCAPED = re.compile(r'\\([\\"])')

_BARE_ELEMENT = re.compile(r"\s*(\S+)\s*(.*)", re.DOTALL)
_AFTER_QUOTE = re.compile(r"\s*")
_NEEDS_QUOTING = re.compile(r'[\s"\\]')
_ESCAPE = re.compile(r'(["\\])')


@dataclass
class ValuePair:
    """
    A defined directive value in its string and element forms.

    The element list is handed out by reference. Mutating it in place does
    not update ``text``; assign through the owning node's setter instead.
    """

    text: str
    elements: list[str] = field(default_factory=list)

    @classmethod
    def from_text(cls, text: str) -> "ValuePair":
        return cls(text=text, elements=parse_value(text))

    @classmethod
    def from_elements(cls, elements: list[str]) -> "ValuePair":
        return cls(text=format_value(elements), elements=elements)


def parse_value(raw: str) -> list[str]:
    """
    Split a raw directive value into its elements.

    Params:
        raw: Value text as it appears after the directive name

    Returns:
        Elements in left-to-right order; quoted elements keep their inner
        whitespace verbatim

    Examples:
        '"%h %l" common' -> ['%h %l', 'common']
        '"a \\"b\\" c" d' -> ['a "b" c', 'd']
    """
    elements: list[str] = []
    if not raw:
        return elements

    rest = _ESCAPED.sub(_hide_escape, raw)
    while rest:
        if rest.startswith('"'):
            rest = rest[1:]
            end = rest.find('"')
            if end < 0:
                # Unterminated quote, the remainder is the last element
                elements.append(_restore(rest, quoted=True))
                break
            elements.append(_restore(rest[:end], quoted=True))
            rest = rest[end + 1 :]
            rest = rest[_AFTER_QUOTE.match(rest).end() :]
        else:
            match = _BARE_ELEMENT.match(rest)
            if match is None:
                break
            elements.append(_restore(match.group(1), quoted=False))
            rest = match.group(2)
    return elements


def _hide_escape(match: re.Match) -> str:
    return _QUOTE_PLACEHOLDER if match.group(1) == '"' else _BACKSLASH_PLACEHOLDER


def _restore(text: str, quoted: bool) -> str:
    # Bare words keep a doubled backslash as written
    backslash = "\\" if quoted else "\\\\"
    return text.replace(_QUOTE_PLACEHOLDER, '"').replace(
        _BACKSLASH_PLACEHOLDER, backslash
    )


def format_value(elements: list[str]) -> str:
    """
    Join value elements back into a string usable in a configuration file.

    Elements holding whitespace, a quote or a backslash get the quote and
    backslash escaped and are wrapped in double quotes. Empty elements are
    left out of the string.

    Params:
        elements: Value elements

    Returns:
        The value string
    """
    parts = []
    for element in elements:
        if not element:
            continue
        if _NEEDS_QUOTING.search(element):
            parts.append('"' + _ESCAPE.sub(r"\\\1", element) + '"')
        else:
            parts.append(element)
    return " ".join(parts)
