"""
Tests for exception and diagnostic classes.
"""

from httpdconf.exceptions import (
    ConfigLoadError,
    Diagnostic,
    DiagnosticKind,
    HttpdConfError,
    QueryError,
    SourceLocation,
)


class TestSourceLocation:
    """Tests for SourceLocation formatting."""

    def test_file_and_line(self):
        """Both parts give file:line."""
        assert SourceLocation("httpd.conf", 12).format_location() == "httpd.conf:12"

    def test_file_only(self):
        """A file without a line gives the file name."""
        assert SourceLocation("httpd.conf").format_location() == "httpd.conf"

    def test_line_only(self):
        """A line without a file is labelled."""
        assert SourceLocation(line_number=3).format_location() == "line 3"

    def test_nothing_known(self):
        """An empty location formats as an empty string."""
        assert SourceLocation().format_location() == ""


class TestDiagnostic:
    """Tests for Diagnostic records."""

    def test_str_with_location(self):
        """The location prefixes the message."""
        diagnostic = Diagnostic(
            DiagnosticKind.UNMATCHED_END_CONTEXT,
            "end context 'foo' without a matching start context",
            SourceLocation("a.conf", 4),
        )
        assert str(diagnostic) == (
            "a.conf:4: end context 'foo' without a matching start context"
        )

    def test_str_without_location(self):
        """Without a location only the message is shown."""
        diagnostic = Diagnostic(DiagnosticKind.CLOSE_FAILED, "cannot close")
        assert str(diagnostic) == "cannot close"


class TestExceptions:
    """Tests for the exception hierarchy."""

    def test_config_load_error(self):
        """ConfigLoadError keeps its path and reason."""
        error = ConfigLoadError("/etc/httpd.conf", "No such file or directory")
        assert isinstance(error, HttpdConfError)
        assert error.path == "/etc/httpd.conf"
        assert error.reason == "No such file or directory"
        assert str(error) == "Cannot load '/etc/httpd.conf': No such file or directory"

    def test_query_error(self):
        """QueryError is an HttpdConfError."""
        assert isinstance(QueryError("bad start"), HttpdConfError)
