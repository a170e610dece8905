"""
Core type definitions for httpdconf.

This module contains type aliases shared by the parsing and structure
packages.
"""

from collections.abc import Callable
from typing import Any

ValueElements = list[str]

# (session, lowercased directive name, candidate path) -> replacement path
PathTransform = Callable[[Any, str, str], str]
