#!/usr/bin/env python3
from enum import IntEnum, auto


class TokenType(IntEnum):
    """OctothorP token kinds

    The closed set of categories a lexeme can be scanned into. Nothing else is
    ever produced, and no kinds can be added at runtime.

    Some things never get a kind of their own. Spaces, tabs, carriage returns
    and newlines only separate lexemes. A "#" starts a comment that runs to the
    end of its line, so "//" is just two SLASHes. IDENTIFIER and the keywords
    are made only of ASCII letters, digits and "_", so a letter such as "é" is
    an unexpected character rather than part of a name. NUMBER is
    digits with an optional fraction: "1.5" and "1" are numbers, but ".5" is
    DOT NUMBER.
    """

    # Single-character tokens.
    LEFT_PAREN = auto()  # (
    RIGHT_PAREN = auto()  # )
    LEFT_BRACE = auto()  # {
    RIGHT_BRACE = auto()  # }
    COMMA = auto()  # ,
    DOT = auto()  # .
    MINUS = auto()  # -
    PLUS = auto()  # +
    SEMICOLON = auto()  # ;
    SLASH = auto()  # /
    STAR = auto()  # *

    # One or two character tokens
    BANG = auto()  # !
    BANG_EQUAL = auto()  # !=
    EQUAL = auto()  # =
    EQUAL_EQUAL = auto()  # ==
    GREATER = auto()  # >
    GREATER_EQUAL = auto()  # >=
    LESS = auto()  # <
    LESS_EQUAL = auto()  # <=

    # Literals
    IDENTIFIER = auto()  # fooVar
    STRING = auto()  # "foobar"
    NUMBER = auto()  # 42

    # Keywords
    # Reserved, case-sensitive spellings, see scanner.KEYWORDS
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FN = auto()
    FOR = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    LET = auto()
    WHILE = auto()

    # End of input
    EOF = auto()
