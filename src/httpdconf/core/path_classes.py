"""
Classification of directives whose first value element is a filesystem path.

The tables are plain module-level mappings so callers can inspect or extend
them, e.g. ``PATH_DIRECTIVES["wsgiscriptalias"] = PathPredicate.NOT_NULL_DEVICE``.
All keys are lowercased directive names.
"""

import os
import re
from enum import Enum

from httpdconf.core.types import ValueElements


class PathPredicate(Enum):
    """How to tell a path from the other values a directive accepts."""

    NOT_NULL_DEVICE = "not_null_device"
    NOT_NULL_DEVICE_OR_PIPE = "not_null_device_or_pipe"
    NOT_NULL_DEVICE_OR_PIPE_OR_SYSLOG = "not_null_device_or_pipe_or_syslog"


PATH_DIRECTIVES: dict[str, PathPredicate] = {
    "accessconfig": PathPredicate.NOT_NULL_DEVICE,
    "agentlog": PathPredicate.NOT_NULL_DEVICE_OR_PIPE,
    "authdbgroupfile": PathPredicate.NOT_NULL_DEVICE,
    "authdbmgroupfile": PathPredicate.NOT_NULL_DEVICE,
    "authdbmuserfile": PathPredicate.NOT_NULL_DEVICE,
    "authdbuserfile": PathPredicate.NOT_NULL_DEVICE,
    "authdigestfile": PathPredicate.NOT_NULL_DEVICE,
    "authgroupfile": PathPredicate.NOT_NULL_DEVICE,
    "authuserfile": PathPredicate.NOT_NULL_DEVICE,
    "cacheroot": PathPredicate.NOT_NULL_DEVICE,
    "cookielog": PathPredicate.NOT_NULL_DEVICE,
    "coredumpdirectory": PathPredicate.NOT_NULL_DEVICE,
    "customlog": PathPredicate.NOT_NULL_DEVICE_OR_PIPE,
    "directory": PathPredicate.NOT_NULL_DEVICE,
    "documentroot": PathPredicate.NOT_NULL_DEVICE,
    "errorlog": PathPredicate.NOT_NULL_DEVICE_OR_PIPE_OR_SYSLOG,
    "include": PathPredicate.NOT_NULL_DEVICE,
    "includeoptional": PathPredicate.NOT_NULL_DEVICE,
    "loadfile": PathPredicate.NOT_NULL_DEVICE,
    "lockfile": PathPredicate.NOT_NULL_DEVICE,
    "mimemagicfile": PathPredicate.NOT_NULL_DEVICE,
    "mmapfile": PathPredicate.NOT_NULL_DEVICE,
    "pidfile": PathPredicate.NOT_NULL_DEVICE,
    "refererlog": PathPredicate.NOT_NULL_DEVICE_OR_PIPE,
    "resourceconfig": PathPredicate.NOT_NULL_DEVICE,
    "rewritelock": PathPredicate.NOT_NULL_DEVICE,
    "scoreboardfile": PathPredicate.NOT_NULL_DEVICE,
    "scriptlog": PathPredicate.NOT_NULL_DEVICE,
    "serverroot": PathPredicate.NOT_NULL_DEVICE,
    "transferlog": PathPredicate.NOT_NULL_DEVICE_OR_PIPE,
    "typesconfig": PathPredicate.NOT_NULL_DEVICE,
}

# Path directives that may be given relative to ServerRoot
RELATIVE_PATH_DIRECTIVES: set[str] = {
    "accessconfig",
    "authgroupfile",
    "authuserfile",
    "cookielog",
    "customlog",
    "errorlog",
    "include",
    "includeoptional",
    "loadfile",
    "lockfile",
    "mimemagicfile",
    "pidfile",
    "refererlog",
    "resourceconfig",
    "scoreboardfile",
    "transferlog",
    "typesconfig",
}

# Directives that pull another file or directory into the current context
INCLUDE_DIRECTIVES: frozenset[str] = frozenset(
    {"include", "includeoptional", "accessconfig", "resourceconfig"}
)

_SYSLOG_TARGET = re.compile(r"syslog(?::|$)", re.IGNORECASE)


def is_null_device(path: str) -> bool:
    """Check if path names the platform's discard device."""
    if os.name == "nt":
        return path.lower() == os.devnull.lower()
    return path == os.devnull


def is_absolute(path: str) -> bool:
    """Check for a leading separator, or a drive prefix where the platform has them."""
    return os.path.isabs(path)


def predicate_allows(predicate: PathPredicate, value: str) -> bool:
    """
    Evaluate a path predicate against the first value element.

    Params:
        predicate: Classification of the directive
        value: First value element

    Returns:
        True if value should be treated as a filesystem path
    """
    if is_null_device(value):
        return False
    if predicate is PathPredicate.NOT_NULL_DEVICE:
        return True
    if predicate is PathPredicate.NOT_NULL_DEVICE_OR_PIPE:
        return not value.startswith("|")
    if predicate is PathPredicate.NOT_NULL_DEVICE_OR_PIPE_OR_SYSLOG:
        return not value.startswith("|") and not _SYSLOG_TARGET.match(value)
    raise AssertionError(f"unhandled path predicate {predicate!r}")


def classify_path(name: str, elements: ValueElements | None) -> str | None:
    """
    Return the first element of a directive value if it denotes a path.

    Params:
        name: Lowercased directive name
        elements: Value elements, or None for an undefined value

    Returns:
        The path, or None if the directive is unclassified or the value is
        empty, the null device, a pipe or a syslog target
    """
    predicate = PATH_DIRECTIVES.get(name)
    if predicate is None or not elements:
        return None
    first = elements[0]
    if not first or not predicate_allows(predicate, first):
        return None
    return first
