#!/usr/bin/env python3
from dataclasses import dataclass
from enum import Enum
from sys import stderr
from typing import Callable, List, Optional

from octothorp.logger import get_logger

logger = get_logger(__name__)


class ErrorKind(Enum):
    """Lexical error kinds.

    Every kind is recoverable: the Scanner reports it and keeps going. The
    value is the message shown to the user.
    """

    # A character that cannot start any token and is not whitespace.
    UNEXPECTED_CHARACTER = "Unexpected character."
    # A string literal still open when the source ran out.
    UNTERMINATED_STRING = "Unterminated string."


@dataclass(frozen=True)
class Diagnostic:
    """A single reported lexical error.

    Args:
        line: int. Line the Scanner's cursor was on when the error was found.
        kind: ErrorKind. What went wrong.
    """

    line: int
    kind: ErrorKind

    @property
    def message(self) -> str:
        return self.kind.value

    def __str__(self) -> str:
        return f"[line {self.line}] Error: {self.message}"


Sink = Callable[[Diagnostic], None]


def print_to_stderr(diagnostic: Diagnostic) -> None:
    """Default host sink, prints the rendered Diagnostic to stderr."""

    print(diagnostic, file=stderr)


class ErrorReporter:
    """Accumulates lexical errors reported while scanning a source.

    The reporter is owned by the caller and handed to the Scanner. Scanning
    never stops on an error; instead each one is recorded here (and forwarded
    to the sink, if any) so the caller can decide afterwards what a failed
    scan means, e.g. the CLI exiting with status 65.

    To use:
    reporter = ErrorReporter(sink=print_to_stderr)
    tokens = Scanner('"oops', reporter).scan_tokens()
    [line 1] Error: Unterminated string.
    reporter.had_error
    True

    Args:
        sink: Optional[Sink]. Called with each Diagnostic as it is reported.
            If None, diagnostics are only collected.

    Public Attributes:
        diagnostics: List[Diagnostic]. Every Diagnostic reported, in order.
    """

    def __init__(self, sink: Optional[Sink] = None) -> None:
        self.sink = sink
        self.diagnostics: List[Diagnostic] = []

    @property
    def had_error(self) -> bool:
        """Whether at least one error has been reported since the last reset."""

        return bool(self.diagnostics)

    def error(self, line: int, kind: ErrorKind) -> None:
        """Report a lexical error found while scanning.

        Args:
            line: int. Line number where the error was encountered.
            kind: ErrorKind. Kind of error, which carries the user message.
        """

        diagnostic = Diagnostic(line, kind)
        logger.debug("lexical error: %s", diagnostic)

        self.diagnostics.append(diagnostic)
        if self.sink is not None:
            self.sink(diagnostic)

    def reset(self) -> None:
        """Forget all reported errors, as between lines of the prompt."""

        self.diagnostics.clear()
