"""Tests for diagnostics, error templates and the exception hierarchy."""

from __future__ import annotations

import pytest

from i18nassets.diagnostics import (
    BundleLoadError,
    Diagnostic,
    DiagnosticCode,
    ErrorTemplate,
    I18nError,
    UnresolvedMessagesError,
)
from i18nassets.syntax import Cursor


class TestDiagnosticFormat:
    """Rust-style diagnostic rendering."""

    def test_full_format(self) -> None:
        diagnostic = Diagnostic(
            code=DiagnosticCode.MALFORMED_LINE,
            message="bad line",
            hint="fix it",
            location="messages.properties",
            line=3,
            severity="warning",
        )
        assert diagnostic.format_error() == (
            "warning[MALFORMED_LINE]: bad line\n"
            "  --> messages.properties:3\n"
            "  = help: fix it"
        )

    def test_location_without_line(self) -> None:
        diagnostic = ErrorTemplate.bundle_not_found("de", "i18n/messages_de.properties")
        assert "  --> i18n/messages_de.properties" in diagnostic.format_error()

    def test_line_without_location(self) -> None:
        diagnostic = ErrorTemplate.malformed_line(7, "oops")
        assert "  --> line 7" in diagnostic.format_error()

    def test_message_only(self) -> None:
        diagnostic = Diagnostic(code=DiagnosticCode.UNEXPECTED_EOF, message="eof")
        assert diagnostic.format_error() == "error[UNEXPECTED_EOF]: eof"
        assert str(diagnostic) == "eof"

    def test_control_characters_escaped(self) -> None:
        """A diagnostic never spans extra lines because of its message."""
        diagnostic = Diagnostic(code=DiagnosticCode.MALFORMED_LINE, message="a\nb\rc\x1bd")
        assert diagnostic.format_error() == "error[MALFORMED_LINE]: a\\nb\\rc\\x1bd"


class TestErrorTemplates:
    """Each template produces its own code and mentions its subject."""

    @pytest.mark.parametrize(
        ("diagnostic", "code", "fragment"),
        [
            (ErrorTemplate.message_not_found("foo.whee"), DiagnosticCode.MESSAGE_NOT_FOUND, "foo.whee"),
            (ErrorTemplate.unresolved_messages(["a", "b"]), DiagnosticCode.UNRESOLVED_MESSAGES, "'a', 'b'"),
            (ErrorTemplate.bundle_not_found("de", "x"), DiagnosticCode.BUNDLE_NOT_FOUND, "'de'"),
            (ErrorTemplate.bundle_read_failed("x", "denied"), DiagnosticCode.BUNDLE_READ_FAILED, "denied"),
            (ErrorTemplate.bundle_decode_failed("x", "utf-8"), DiagnosticCode.BUNDLE_DECODE_FAILED, "utf-8"),
            (ErrorTemplate.bundle_too_large("x", 20, 10), DiagnosticCode.BUNDLE_TOO_LARGE, "20 bytes"),
            (ErrorTemplate.locale_unknown("xx", "nope"), DiagnosticCode.LOCALE_UNKNOWN, "'xx'"),
            (ErrorTemplate.locale_unsafe("../x"), DiagnosticCode.LOCALE_UNSAFE, "'../x'"),
            (ErrorTemplate.unexpected_eof(4), DiagnosticCode.UNEXPECTED_EOF, "position 4"),
            (ErrorTemplate.malformed_line(2, "oops"), DiagnosticCode.MALFORMED_LINE, "'oops'"),
        ],
    )
    def test_template(self, diagnostic: Diagnostic, code: DiagnosticCode, fragment: str) -> None:
        assert diagnostic.code is code
        assert fragment in diagnostic.message
        assert diagnostic.hint

    def test_unresolved_count(self) -> None:
        assert ErrorTemplate.unresolved_messages(["a", "b", "c"]).message.startswith("3 ")

    def test_severities(self) -> None:
        assert ErrorTemplate.message_not_found("a").severity == "warning"
        assert ErrorTemplate.bundle_read_failed("x", "y").severity == "error"

    def test_bundle_too_large_hint_names_setting(self) -> None:
        """The hint points at the locator argument that sets the limit."""
        hint = ErrorTemplate.bundle_too_large("x", 20, 10).hint
        assert hint is not None
        assert "PathBundleLocator.max_size" in hint


class TestErrors:
    """Exception hierarchy."""

    def test_plain_message(self) -> None:
        error = I18nError("boom")
        assert str(error) == "boom"
        assert error.diagnostic is None

    def test_diagnostic_message(self) -> None:
        diagnostic = ErrorTemplate.bundle_read_failed("messages.properties", "denied")
        error = BundleLoadError(diagnostic, path="/tmp/messages.properties")
        assert error.diagnostic is diagnostic
        assert str(error) == diagnostic.format_error()
        assert error.path == "/tmp/messages.properties"
        assert isinstance(error, I18nError)

    def test_unresolved_error_fields(self) -> None:
        error = UnresolvedMessagesError("missing", codes=("a",), output="js")
        assert error.codes == ("a",)
        assert error.output == "js"

    def test_cursor_eof_uses_template(self) -> None:
        with pytest.raises(EOFError, match="position 0"):
            _ = Cursor("", 0).current
