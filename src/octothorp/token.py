#!/usr/bin/env python3
from dataclasses import dataclass
from typing import Optional, Union

from octothorp.token_type import TokenType

# Decoded literal value, a float for NUMBER and a str for STRING.
Literal = Optional[Union[float, str]]


@dataclass(frozen=True)
class Token:
    """Scanner Token

    A Token is one classified lexeme of the source text. A list of them,
    always ending in a single EOF Token, is what the Scanner hands to whatever
    consumes the source next.

    For example:
    let a = 2;

    Has 5 Tokens (plus EOF):
    Scanner("let a = 2;").scan_tokens()
    Token(TokenType.LET,        "let", None, 1)
    Token(TokenType.IDENTIFIER, "a",   None, 1)
    Token(TokenType.EQUAL,      "=",   None, 1)
    Token(TokenType.NUMBER,     "2",   2.0,  1)
    Token(TokenType.SEMICOLON,  ";",   None, 1)
    Token(TokenType.EOF,        "",    None, 1)

    Args:
        type: TokenType. The kind of Token, see the TokenType enum.
        lexeme: str. Exact source text this Token was scanned from. Empty only
            for EOF.
        literal: Literal. Decoded value for NUMBER (float) and STRING (str)
            Tokens, otherwise None.
        line: int. 1-based line on which the Token's first character sits.
    """

    type: TokenType
    lexeme: str
    literal: Literal
    line: int

    def __repr__(self) -> str:
        return self.to_string()

    def to_string(self) -> str:
        return self.type.name + " " + self.lexeme + " " + str(self.literal)
