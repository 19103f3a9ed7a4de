#!/usr/bin/env python3


def is_alpha(c: str) -> bool:
    """Check if a given char is an ASCII letter or underscore [a-zA-Z_]

    Args:
        c: str. Char to check.

    Returns:
        alpha: bool. Whether char is in [a-zA-Z_]
    """

    return "a" <= c <= "z" or "A" <= c <= "Z" or c == "_"


def is_digit(c: str) -> bool:
    """Check if a given char is an ASCII digit [0-9]

    Args:
        c: str. Char to check.

    Returns:
        digit: bool. Whether char is in [0-9]
    """

    return "0" <= c <= "9"


def is_alpha_numeric(c: str) -> bool:
    return is_alpha(c) or is_digit(c)
