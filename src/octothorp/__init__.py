#!/usr/bin/env python3
from pathlib import Path
from sys import argv, exit, stderr, stdin
from typing import List, Optional

from octothorp.error_reporter import ErrorReporter, print_to_stderr
from octothorp.scanner import Scanner
from octothorp.token import Token

PROMPT = "~> "

# Exit statuses, sysexits.h style.
EXIT_USAGE = 64
EXIT_DATA_ERROR = 65
EXIT_NO_INPUT = 66


def main() -> None:
    """Main entrypoint for the OctothorP scanner.

    This function is invoked if this __init__.py is executed directly, or via
    the octothorp CLI entrypoint. Every command scans its source and prints the
    resulting Tokens, one per line.

    With no arguments it will start an interactive prompt.

    If the argument is a file, it will be scanned.

    Otherwise, the following commands are provided:
    octothorp run_prompt <- Run the interactive prompt
    octothorp run <source_or_stdin> <- Scan a source string, - for stdin.
    octothorp run_file <file> <- Read an OctothorP source at a path and scan it.
    """

    # First argument in argv is always the script itself in Python
    if len(argv) == 2:
        if argv[1] == "run_prompt":
            run_prompt()
            return

        run_file(argv[1])
    elif len(argv) == 3:
        command = argv[1]
        match command:
            case "run":
                source = argv[2]
                if source == "-":
                    try:
                        source = stdin.read()
                    except KeyboardInterrupt:
                        return

                reporter = ErrorReporter(sink=print_to_stderr)
                run(source, reporter)
                if reporter.had_error:
                    exit(EXIT_DATA_ERROR)
            case "run_file":
                run_file(argv[2])
            case _:
                print(f"unrecognized command: {command}", file=stderr)
                exit(EXIT_NO_INPUT)

    elif len(argv) > 3:
        print("Usage: octothorp [command] [script]")
        exit(EXIT_USAGE)
    else:
        run_prompt()


def scan(source: str, reporter: Optional[ErrorReporter] = None) -> List[Token]:
    """Scan a source text into Tokens.

    Args:
        source: str. Source text to scan.
        reporter: Optional[ErrorReporter]. Receives any lexical errors. Pass one
            in to find out whether the scan failed.

    Returns:
        tokens: List[Token]. Scanned Tokens, ending in EOF.
    """

    return Scanner(source, reporter).scan_tokens()


def run(source: str, reporter: Optional[ErrorReporter] = None) -> List[Token]:
    """Scan a source text and print each Token on its own line.

    Args:
        source: str. Source text to scan.
        reporter: Optional[ErrorReporter]. Receives any lexical errors, see scan.

    Returns:
        tokens: List[Token]. Scanned Tokens, ending in EOF.
    """

    tokens = scan(source, reporter)

    for token in tokens:
        print(token.to_string())

    return tokens


def run_file(path: str) -> None:
    script_path = Path(path)
    if not script_path.exists():
        print(f"File at {script_path} not found", file=stderr)
        exit(EXIT_NO_INPUT)

    reporter = ErrorReporter(sink=print_to_stderr)
    run(script_path.read_text(), reporter)

    # Indicate an error in the exit code.
    if reporter.had_error:
        exit(EXIT_DATA_ERROR)


def run_prompt() -> None:
    reporter = ErrorReporter(sink=print_to_stderr)
    try:
        while True:
            # An empty line still scans, to just EOF. The session ends on
            # end-of-input.
            line = input(PROMPT)
            run(line, reporter)

            # Each line stands alone in an interactive session.
            reporter.reset()
    except (KeyboardInterrupt, EOFError):
        return


if __name__ == "__main__":
    main()
