"""
Tests for recursive file and directory loading.

Focus Areas:
1. Directory loading order
2. Include handling, including wildcards and missing targets
3. Include cycle protection
4. Close failures
"""

import errno
import os

import pytest

from httpdconf import ConfigParser
from httpdconf.exceptions import DiagnosticKind
from httpdconf.structure import loader


class TestDirectoryLoading:
    """Test loading a directory tree."""

    def test_entries_loaded_in_sorted_order(self, tmp_path, write_config, parser):
        """Files are read in lexicographic order, depth first."""
        write_config("conf/b.conf", "Listen 2\nListen 3\n")
        write_config("conf/a.conf", "Listen 1\n")
        write_config("conf/c/d.conf", "Listen 4\n")
        write_config("conf/e.conf", "Listen 5\n")

        assert parser.parse_file(tmp_path / "conf")
        listens = parser.find_everywhere("Listen")
        assert [n.value for n in listens] == ["1", "2", "3", "4", "5"]
        assert parser.find_everywhere("listen", count_only=True) == 5
        assert listens[1].filename == os.path.join(str(tmp_path), "conf", "b.conf")
        assert listens[2].line_number == 2

    def test_empty_directory(self, tmp_path, parser):
        """An empty directory loads successfully and adds nothing."""
        (tmp_path / "empty").mkdir()
        assert parser.parse_file(tmp_path / "empty")
        assert parser.root.children == []


class TestIncludes:
    """Test Include-like directives."""

    def test_include_file_lands_in_current_context(self, tmp_path, write_config, parser):
        """Included directives become children of the enclosing context."""
        extra = write_config("extra.conf", "ServerAlias example.org\n")
        main = write_config(
            "httpd.conf",
            f"""\
            <VirtualHost *:80>
            Include {extra}
            ServerName example.com
            </VirtualHost>
            """,
        )
        assert parser.parse_file(main)
        vhost = parser.root.children[0]
        assert [c.name for c in vhost.children] == [
            "include",
            "serveralias",
            "servername",
        ]
        assert vhost.children[1].filename == extra
        assert parser.cursor is parser.root

    def test_include_relative_to_server_root(self, tmp_path, write_config, parser):
        """Relative include targets resolve against ServerRoot."""
        write_config("conf.d/one.conf", "LoadFile one.so\n")
        write_config("conf.d/two.conf", "LoadFile two.so\n")
        main = write_config(
            "httpd.conf",
            f"""\
            ServerRoot {tmp_path}
            Include conf.d
            """,
        )
        assert parser.parse_file(main)
        loads = parser.find_everywhere("LoadFile")
        assert [n.orig_value for n in loads] == ["one.so", "two.so"]
        assert loads[0].value == os.path.join(str(tmp_path), "one.so")

    def test_wildcard_include(self, tmp_path, write_config, parser):
        """Wildcard targets are expanded in sorted order."""
        write_config("conf.d/b.conf", "Listen 2\n")
        write_config("conf.d/a.conf", "Listen 1\n")
        write_config("conf.d/readme.txt", "Listen 99\n")
        main = write_config("httpd.conf", f"Include {tmp_path}/conf.d/*.conf\n")
        assert parser.parse_file(main)
        assert [n.value for n in parser.find_everywhere("Listen")] == ["1", "2"]

    def test_missing_include_is_skipped(self, tmp_path, write_config, parser):
        """A missing include target does not fail the load."""
        main = write_config(
            "httpd.conf",
            f"Include {tmp_path}/nope.conf\nListen 80\n",
        )
        assert parser.parse_file(main)
        assert parser.find_everywhere("Listen", count_only=True) == 1
        assert parser.diagnostics == []

    def test_context_opened_in_include_closed_in_parent(
        self, tmp_path, write_config, parser
    ):
        """Context state carries across included files."""
        opener = write_config("open.conf", "<Directory /srv>\n")
        main = write_config(
            "httpd.conf",
            f"Include {opener}\nOptions None\n</Directory>\nListen 80\n",
        )
        assert parser.parse_file(main)
        directory = parser.find_everywhere("Directory")[0]
        assert [c.name for c in directory.children] == ["options"]
        assert parser.find_among_siblings("Listen")[0].parent is parser.root


class TestIncludeCycles:
    """Test protection against include loops."""

    def test_self_include_is_refused(self, write_config, parser):
        """A file including itself is loaded once."""
        path = write_config("loop.conf", "Listen 80\n")
        with open(path, "a", encoding="utf-8") as handle:
            handle.write(f"Include {path}\n")
        assert parser.parse_file(path)
        assert parser.find_everywhere("Listen", count_only=True) == 1
        kinds = [d.kind for d in parser.diagnostics]
        assert kinds == [DiagnosticKind.INCLUDE_CYCLE]

    def test_mutual_includes_are_refused(self, tmp_path, write_config, parser):
        """Two files including each other stop after one round."""
        a = str(tmp_path / "a.conf")
        b = str(tmp_path / "b.conf")
        write_config("a.conf", f"Listen 1\nInclude {b}\n")
        write_config("b.conf", f"Listen 2\nInclude {a}\n")
        assert parser.parse_file(a)
        assert [n.value for n in parser.find_everywhere("Listen")] == ["1", "2"]

    def test_directory_symlink_loop(self, tmp_path, write_config, parser):
        """A symlink back to an enclosing directory is not followed forever."""
        write_config("conf/a.conf", "Listen 1\n")
        try:
            os.symlink(tmp_path / "conf", tmp_path / "conf" / "loop")
        except (OSError, NotImplementedError):
            pytest.skip("symlinks not supported")
        assert parser.parse_file(tmp_path / "conf")
        assert parser.find_everywhere("Listen", count_only=True) == 1

    def test_repeated_include_is_allowed(self, tmp_path, write_config, parser):
        """The same file may be included twice in sequence."""
        extra = write_config("extra.conf", "Listen 1\n")
        main = write_config("httpd.conf", f"Include {extra}\nInclude {extra}\n")
        assert parser.parse_file(main)
        assert parser.find_everywhere("Listen", count_only=True) == 2

    def test_tracking_can_be_disabled(self, tmp_path, write_config):
        """With tracking off, nothing is recorded for repeated loads."""
        extra = write_config("extra.conf", "Listen 1\n")
        main = write_config("httpd.conf", f"Include {extra}\n")
        parser = ConfigParser({"track_include_cycles": False})
        assert parser.parse_file(main)
        assert parser.diagnostics == []


class _FailingCloseHandle:
    """File handle whose close() reports an I/O error."""

    def __init__(self, handle):
        self._handle = handle

    def __iter__(self):
        return iter(self._handle)

    def close(self):
        self._handle.close()
        raise OSError(errno.EIO, "Input/output error")


class TestCloseFailure:
    """Test diagnostics for files that fail to close."""

    def test_close_failure_is_reported(self, monkeypatch, write_config, parser):
        """A failed close is a diagnostic, not a load failure."""
        main = write_config("httpd.conf", "Listen 80\n")

        def failing_open(*args, **kwargs):
            return _FailingCloseHandle(open(*args, **kwargs))

        monkeypatch.setattr(loader, "open", failing_open, raising=False)

        assert parser.parse_file(main)
        assert [d.kind for d in parser.diagnostics] == [DiagnosticKind.CLOSE_FAILED]
        assert parser.diagnostics[0].location.filename == main
        assert parser.find_everywhere("Listen", count_only=True) == 1
