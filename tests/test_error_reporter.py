"""Tests for the lexical error accumulator."""

import io
import logging

import pytest

from octothorp import error_reporter
from octothorp.error_reporter import (
    Diagnostic,
    ErrorKind,
    ErrorReporter,
    print_to_stderr,
)


class TestDiagnostic:
    def test_renders_like_a_report_line(self) -> None:
        diagnostic = Diagnostic(3, ErrorKind.UNEXPECTED_CHARACTER)

        assert diagnostic.message == "Unexpected character."
        assert str(diagnostic) == "[line 3] Error: Unexpected character."

    def test_is_immutable(self) -> None:
        diagnostic = Diagnostic(1, ErrorKind.UNTERMINATED_STRING)

        with pytest.raises(AttributeError):
            diagnostic.line = 2  # type: ignore[misc]


class TestErrorReporter:
    def test_starts_clean(self) -> None:
        reporter = ErrorReporter()

        assert not reporter.had_error
        assert reporter.diagnostics == []

    def test_accumulates_in_order(self) -> None:
        reporter = ErrorReporter()
        reporter.error(1, ErrorKind.UNEXPECTED_CHARACTER)
        reporter.error(4, ErrorKind.UNTERMINATED_STRING)

        assert reporter.had_error
        assert reporter.diagnostics == [
            Diagnostic(1, ErrorKind.UNEXPECTED_CHARACTER),
            Diagnostic(4, ErrorKind.UNTERMINATED_STRING),
        ]

    def test_forwards_to_sink(self) -> None:
        seen: list[Diagnostic] = []
        reporter = ErrorReporter(sink=seen.append)
        reporter.error(2, ErrorKind.UNEXPECTED_CHARACTER)

        assert seen == [Diagnostic(2, ErrorKind.UNEXPECTED_CHARACTER)]

    def test_reset_clears_error_state(self) -> None:
        reporter = ErrorReporter()
        reporter.error(1, ErrorKind.UNEXPECTED_CHARACTER)
        reporter.reset()

        assert not reporter.had_error
        assert reporter.diagnostics == []

    def test_logs_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        reporter = ErrorReporter()
        with caplog.at_level(logging.DEBUG, logger="octothorp"):
            reporter.error(5, ErrorKind.UNTERMINATED_STRING)

        assert "[line 5] Error: Unterminated string." in caplog.text
        assert all(r.name.startswith("octothorp.") for r in caplog.records)


def test_print_to_stderr(monkeypatch: pytest.MonkeyPatch) -> None:
    buffer = io.StringIO()
    monkeypatch.setattr(error_reporter, "stderr", buffer)

    print_to_stderr(Diagnostic(7, ErrorKind.UNEXPECTED_CHARACTER))

    assert buffer.getvalue() == "[line 7] Error: Unexpected character.\n"
