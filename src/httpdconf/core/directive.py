"""
Directive nodes of a parsed httpd configuration tree.

Each DirectiveNode is a single directive or the opening tag of a context such
as <Directory> or <VirtualHost>; the directives inside a context are its
children. A node holds two independent values: ``value``, which the parser
may rewrite (e.g. to make a log file path absolute), and ``orig_value``,
which callers can use to keep the text as written. The parser never reads
``orig_value`` for its own decisions.
"""

from collections.abc import Iterable

from httpdconf.core.path_classes import (
    RELATIVE_PATH_DIRECTIVES,
    classify_path,
    is_absolute,
)
from httpdconf.core.tree_node import TreeNode
from httpdconf.core.types import ValueElements
from httpdconf.core.values import ValuePair

ROOT_NAME = "root"
UNSET_LINE_NUMBER = -1


class DirectiveNode(TreeNode):
    """
    A directive or context in the configuration tree.

    Both values are either defined, holding a string and its element list,
    or undefined (None for both). Setting the string re-tokenizes it;
    setting the elements re-formats the string.

    Params:
        name: Directive or context name, stored lowercased
        value: Value string, or None for an undefined value
        filename: File the directive was read from
        line_number: 1-based line number, UNSET_LINE_NUMBER until known
    """

    def __init__(
        self,
        name: str | None = None,
        value: str | None = "",
        *,
        filename: str = "",
        line_number: int = UNSET_LINE_NUMBER,
    ):
        super().__init__()
        self._name = ""
        if name is not None:
            self.name = name
        self._value: ValuePair | None = None
        self._orig_value: ValuePair | None = None
        self.value = value
        self.orig_value = value
        self.filename = filename
        self.line_number = line_number

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self._name!r}, value={self.value!r}, "
            f"filename={self.filename!r}, line_number={self.line_number})"
        )

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, name: str) -> None:
        if not name:
            raise ValueError("directive name must not be empty")
        self._name = name.lower()

    # Live value

    @property
    def value(self) -> str | None:
        return self._value.text if self._value is not None else None

    @value.setter
    def value(self, value: str | None) -> None:
        self._value = ValuePair.from_text(value) if value is not None else None

    @property
    def value_elements(self) -> ValueElements | None:
        """
        Value elements, or None when the value is undefined.

        The list is returned by reference; changing it in place leaves
        ``value`` stale until the elements are assigned back.
        """
        return self._value.elements if self._value is not None else None

    @value_elements.setter
    def value_elements(self, elements: Iterable[str] | None) -> None:
        self._value = (
            ValuePair.from_elements(list(elements)) if elements is not None else None
        )

    def set_value_elements(self, *elements: str) -> None:
        """Set the value from elements; no elements gives a defined, empty value."""
        self.value_elements = elements

    # Original value

    @property
    def orig_value(self) -> str | None:
        return self._orig_value.text if self._orig_value is not None else None

    @orig_value.setter
    def orig_value(self, value: str | None) -> None:
        self._orig_value = ValuePair.from_text(value) if value is not None else None

    @property
    def orig_value_elements(self) -> ValueElements | None:
        return self._orig_value.elements if self._orig_value is not None else None

    @orig_value_elements.setter
    def orig_value_elements(self, elements: Iterable[str] | None) -> None:
        self._orig_value = (
            ValuePair.from_elements(list(elements)) if elements is not None else None
        )

    def set_orig_value_elements(self, *elements: str) -> None:
        self.orig_value_elements = elements

    # Path predicates

    def is_path(self) -> bool:
        """Check if the first value element is a filesystem path for this directive."""
        return classify_path(self._name, self.value_elements) is not None

    def is_absolute_path(self) -> bool:
        path = classify_path(self._name, self.value_elements)
        return path is not None and is_absolute(path)

    def is_relative_path(self) -> bool:
        """Check for a path this directive allows relative to ServerRoot."""
        return _is_relative(self._name, self.value_elements)

    def is_orig_path(self) -> bool:
        return classify_path(self._name, self.orig_value_elements) is not None

    def is_orig_absolute_path(self) -> bool:
        path = classify_path(self._name, self.orig_value_elements)
        return path is not None and is_absolute(path)

    def is_orig_relative_path(self) -> bool:
        return _is_relative(self._name, self.orig_value_elements)


def _is_relative(name: str, elements: ValueElements | None) -> bool:
    if name not in RELATIVE_PATH_DIRECTIVES:
        return False
    path = classify_path(name, elements)
    return path is not None and not is_absolute(path)
