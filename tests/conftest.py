"""
Shared test fixtures and utilities for the httpdconf test suite.
"""

import textwrap

import pytest

from httpdconf import ConfigParser


@pytest.fixture
def write_config(tmp_path):
    """Write dedented configuration text below tmp_path and return its path.

    Usage:
        def test_something(write_config):
            path = write_config("httpd.conf", "ServerRoot /etc/httpd\\n")
    """

    def _write(relative: str, text: str) -> str:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(text), encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture
def parser():
    """A fresh parser with default options."""
    return ConfigParser()
