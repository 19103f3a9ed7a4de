#!/usr/bin/env python3
from types import MappingProxyType
from typing import List, Mapping, Optional

from octothorp.error_reporter import ErrorKind, ErrorReporter
from octothorp.logger import get_logger
from octothorp.textual import is_alpha, is_alpha_numeric, is_digit
from octothorp.token import Literal, Token
from octothorp.token_type import TokenType

logger = get_logger(__name__)

# Maps the exact spelling of a reserved word to its TokenType. Read-only, so
# every Scanner can share it.
KEYWORDS: Mapping[str, TokenType] = MappingProxyType(
    {
        "and": TokenType.AND,
        "class": TokenType.CLASS,
        "else": TokenType.ELSE,
        "false": TokenType.FALSE,
        "for": TokenType.FOR,
        "fn": TokenType.FN,
        "if": TokenType.IF,
        "nil": TokenType.NIL,
        "or": TokenType.OR,
        "print": TokenType.PRINT,
        "return": TokenType.RETURN,
        "super": TokenType.SUPER,
        "this": TokenType.THIS,
        "true": TokenType.TRUE,
        "let": TokenType.LET,
        "while": TokenType.WHILE,
    }
)

# Characters which always form a Token on their own.
SINGLE_CHAR_TOKENS: Mapping[str, TokenType] = MappingProxyType(
    {
        "(": TokenType.LEFT_PAREN,
        ")": TokenType.RIGHT_PAREN,
        "{": TokenType.LEFT_BRACE,
        "}": TokenType.RIGHT_BRACE,
        ",": TokenType.COMMA,
        ".": TokenType.DOT,
        "-": TokenType.MINUS,
        "+": TokenType.PLUS,
        ";": TokenType.SEMICOLON,
        "*": TokenType.STAR,
        "/": TokenType.SLASH,
    }
)


class Scanner:
    """OctothorP Scanner

    This class scans a given source text and returns the full list of Tokens
    in it, always terminated by a single EOF Token.

    To use:
    Scanner("let a = 2; # two").scan_tokens()
    [LET let None,
     IDENTIFIER a None,
     EQUAL = None,
     NUMBER 2 2.0,
     SEMICOLON ; None,
     EOF  None]

    Lexical errors do not stop the scan. They are reported to the
    ErrorReporter and scanning resumes with the next unread character. A
    Scanner is single use: create one per source text.

    Args:
        source: str. The OctothorP source text to scan.
        reporter: Optional[ErrorReporter]. Receives lexical errors. If None, a
            new reporter without a sink is created.
        keywords: Mapping[str, TokenType]. Reserved word table, KEYWORDS unless
            overridden.

    Public Attributes:
        tokens: List[Token]. All scanned tokens.
        start: int. Start index in the source for the Token currently being
            scanned.
        current: int. Index of the next unread character. Never decreases.
        line: int. Current line being scanned, incremented on every newline.
        start_line: int. Line the Token currently being scanned begins on.
        reporter: ErrorReporter. Where lexical errors are reported.
    """

    def __init__(
        self,
        source: str,
        reporter: Optional[ErrorReporter] = None,
        keywords: Mapping[str, TokenType] = KEYWORDS,
    ) -> None:
        self.source = source
        self.reporter = reporter if reporter is not None else ErrorReporter()
        self.keywords = keywords
        self.tokens: List[Token] = []
        self.start = 0
        self.current = 0
        self.line = 1
        self.start_line = 1

    def scan_tokens(self) -> List[Token]:
        """Scan the source text and return all scanned Tokens.

        This method will return regardless of whether or not there were errors
        during scanning, see ErrorReporter.had_error.

        Returns:
            tokens: List[Token]. All successfully scanned Tokens, ending in EOF.
        """

        while not self.is_at_end():
            # Move the start of the next token up to the cursor.
            self.start = self.current
            self.start_line = self.line
            self.scan_token()

        self.tokens.append(Token(TokenType.EOF, "", None, self.line))

        logger.debug(
            "scanned %d tokens over %d lines, %d errors",
            len(self.tokens),
            self.line,
            len(self.reporter.diagnostics),
        )
        return self.tokens

    def is_at_end(self) -> bool:
        return self.current >= len(self.source)

    def scan_token(self) -> None:
        """Scan a single lexeme starting at the current index.

        This adds at most one Token. Whitespace, newlines and comments are
        consumed without adding anything.
        """

        c = self.advance()
        match c:
            case "(" | ")" | "{" | "}" | "," | "." | "-" | "+" | ";" | "*" | "/":
                self.add_token(SINGLE_CHAR_TOKENS[c])
            # Line comment, runs until (but not including) the newline.
            case "#":
                while self.peek() != "\n" and not self.is_at_end():
                    self.advance()
            # One or two character lexemes.
            case "!":
                self.add_token(
                    TokenType.BANG_EQUAL if self.match("=") else TokenType.BANG
                )
            case "=":
                self.add_token(
                    TokenType.EQUAL_EQUAL if self.match("=") else TokenType.EQUAL
                )
            case "<":
                self.add_token(
                    TokenType.LESS_EQUAL if self.match("=") else TokenType.LESS
                )
            case ">":
                self.add_token(
                    TokenType.GREATER_EQUAL if self.match("=") else TokenType.GREATER
                )
            case " " | "\r" | "\t":
                pass
            case "\n":
                self.line += 1
            case '"':
                self.string()
            case _:
                if is_digit(c):
                    # Leading decimal points (.5) are not numbers, the "."
                    # scans as DOT.
                    self.number()
                elif is_alpha(c):
                    self.identifier()
                else:
                    # Skip the character but keep scanning, there may be more
                    # errors to report.
                    self.reporter.error(self.line, ErrorKind.UNEXPECTED_CHARACTER)

    def identifier(self) -> None:
        """Scan an identifier or reserved word.

        Examples:
        print  -> Token(TokenType.PRINT,      "print",  None, 1)
        letx   -> Token(TokenType.IDENTIFIER, "letx",   None, 1)
        """

        while is_alpha_numeric(self.peek()):
            self.advance()

        # Only an exact, complete match is a keyword.
        text = self.source[self.start : self.current]
        self.add_token(self.keywords.get(text, TokenType.IDENTIFIER))

    def number(self) -> None:
        """Scan a number literal.

        Examples:
        4    -> Token(TokenType.NUMBER, "4",   4.0, 1)
        4.2  -> Token(TokenType.NUMBER, "4.2", 4.2, 1)
        4.   -> Token(TokenType.NUMBER, "4",   4.0, 1), Token(TokenType.DOT, ...)
        """

        while is_digit(self.peek()):
            self.advance()

        # A fractional part needs at least one digit after the ".", otherwise
        # the "." is left for the next token (4.foo()).
        if self.peek() == "." and is_digit(self.peek(1)):
            self.advance()

            while is_digit(self.peek()):
                self.advance()

        self.add_token(TokenType.NUMBER, float(self.source[self.start : self.current]))

    def string(self) -> None:
        """Scan a string literal.

        Strings may span lines. The lexeme keeps the quotes, the literal does
        not. An unterminated string is reported and produces no Token.

        Examples:
        "foo"      -> Token(TokenType.STRING, '"foo"',      "foo",      1)
        "foo\\nbar" -> Token(TokenType.STRING, '"foo\\nbar"', "foo\\nbar", 1)
        """

        while self.peek() != '"' and not self.is_at_end():
            if self.peek() == "\n":
                self.line += 1

            self.advance()

        if self.is_at_end():
            self.reporter.error(self.line, ErrorKind.UNTERMINATED_STRING)
            return

        # The closing ".
        self.advance()

        value = self.source[self.start + 1 : self.current - 1]
        self.add_token(TokenType.STRING, value)

    def advance(self) -> str:
        """Consume one char, moving the cursor forward.

        Returns:
            char: str. The char that was consumed.
        """

        self.current += 1
        return self.source[self.current - 1]

    def match(self, expected: str) -> bool:
        """Consume the next char only when it is the expected one.

        Used for the second half of != == <= >=.

        Args:
            expected. str. Char that completes the two char lexeme.

        Returns:
            matched: bool. True if the char was consumed.
        """

        if self.peek() != expected:
            return False

        self.current += 1
        return True

    def peek(self, ahead: int = 0) -> str:
        """Look at an unread char without consuming it.

        Args:
            ahead: int. How far past the next unread char to look, 1 for the
                char after it.

        Returns:
            char: str. The char, or "\\0" when that position is past the end of
                the source. "\\0" is never alphanumeric, a quote or a newline.
        """

        index = self.current + ahead
        if index >= len(self.source):
            return "\0"

        return self.source[index]

    def add_token(self, type: TokenType, literal: Literal = None) -> None:
        """Add a Token for the lexeme between the start and current indexes.

        Args:
            type: TokenType. Type of Token being added.
            literal: Literal. Decoded value of the lexeme, if any.
        """

        text = self.source[self.start : self.current]
        self.tokens.append(Token(type, text, literal, self.start_line))
