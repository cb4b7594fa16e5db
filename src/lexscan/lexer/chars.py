"""
Character Classification
========================

Stateless predicates used by the scanner to decide which recognizer owns
the current character. All predicates accept the empty string (the
scanner's end-of-buffer sentinel) and return False for it.

Only ASCII letters and digits count for identifiers and numbers; Unicode
identifiers are not part of the language.
"""

import string

WHITESPACE = " \t\n\v\f\r"
IDENT_START = string.ascii_letters + "_"
IDENT_CHARS = string.ascii_letters + string.digits + "_"
DIGITS = string.digits
OPERATOR_CHARS = "+-*/%<>=!&|^~"


def is_whitespace(char: str) -> bool:
    """Return True for space, tab, newline, vertical tab, form feed or CR."""
    return char != "" and char in WHITESPACE


def is_identifier_start(char: str) -> bool:
    """Return True for a letter or underscore."""
    return char != "" and char in IDENT_START


def is_identifier_continue(char: str) -> bool:
    """Return True for a letter, digit or underscore."""
    return char != "" and char in IDENT_CHARS


def is_digit(char: str) -> bool:
    return char != "" and char in DIGITS


def is_operator_char(char: str) -> bool:
    """Return True if the character can appear in an operator spelling."""
    return char != "" and char in OPERATOR_CHARS
