"""
Token Types and Token Data Class
================================

Every lexical element the scanner recognizes is reported as a Token
carrying a TokenKind, the exact lexeme text and the line it started on.

TokenKind is an IntEnum: the numeric value of each kind is the TOKEN ID
printed in the analysis report, so the order of members is fixed and new
kinds must only ever be appended before ERROR.
"""

from dataclasses import dataclass
from enum import IntEnum


# =============================================================================
# Token Kind Enumeration
# =============================================================================

class TokenKind(IntEnum):
    """
    Lexical categories recognized by the scanner.

    EOF exists for completeness but is never emitted; a scan simply stops
    at the end of the buffer.
    """

    # === Structural ===
    EOF = 0

    # === Identifiers and Literals ===
    IDENTIFIER = 1
    INTEGER_CONSTANT = 2
    FLOAT_CONSTANT = 3
    STRING_LITERAL = 4
    CHARACTER_LITERAL = 5
    RESERVED_WORD = 6

    # === Arithmetic Operators ===
    PLUS = 7                # +
    MINUS = 8               # -
    MULTIPLY = 9            # *
    DIVIDE = 10             # /
    MODULUS = 11            # %
    INCREMENT = 12          # ++
    DECREMENT = 13          # --

    # === Relational Operators ===
    EQUAL = 14              # ==
    NOT_EQUAL = 15          # !=
    LESS_THAN = 16          # <
    LESS_EQUAL = 17         # <=
    GREATER_THAN = 18       # >
    GREATER_EQUAL = 19      # >=

    # === Logical Operators ===
    LOGICAL_AND = 20        # &&
    LOGICAL_OR = 21         # ||
    LOGICAL_NOT = 22        # !

    # === Bitwise Operators ===
    BITWISE_AND = 23        # &
    BITWISE_OR = 24         # |
    BITWISE_XOR = 25        # ^
    BITWISE_NOT = 26        # ~
    LEFT_SHIFT = 27         # <<
    RIGHT_SHIFT = 28        # >>

    # === Assignment Operators ===
    ASSIGN = 29             # =
    PLUS_ASSIGN = 30        # +=
    MINUS_ASSIGN = 31       # -=
    MUL_ASSIGN = 32         # *=
    DIV_ASSIGN = 33         # /=
    MOD_ASSIGN = 34         # %=
    AND_ASSIGN = 35         # &=
    OR_ASSIGN = 36          # |=
    XOR_ASSIGN = 37         # ^=
    LSHIFT_ASSIGN = 38      # <<=
    RSHIFT_ASSIGN = 39      # >>=

    # === Delimiters and Punctuation ===
    LPAREN = 40             # (
    RPAREN = 41             # )
    LBRACE = 42             # {
    RBRACE = 43             # }
    LBRACKET = 44           # [
    RBRACKET = 45           # ]
    SEMICOLON = 46          # ;
    COMMA = 47              # ,
    COLON = 48              # :
    DOT = 49                # .
    QUESTION = 50           # ?
    BACKSLASH = 51          # \
    PREPROCESSOR = 52       # #

    # === Lexical Error Marker ===
    ERROR = 53


OPERATOR_KINDS = frozenset(range(TokenKind.PLUS, TokenKind.RSHIFT_ASSIGN + 1))
PUNCTUATION_KINDS = frozenset(range(TokenKind.LPAREN, TokenKind.PREPROCESSOR + 1))


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single token produced by the scanner.

    Attributes:
        kind: The TokenKind classification
        lexeme: The exact source text matched (never empty)
        line: Line number where the lexeme starts (1-indexed)
    """
    kind: TokenKind
    lexeme: str
    line: int

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.lexeme!r}, line {self.line})"

    @property
    def is_error(self) -> bool:
        """Return True if this token marks a lexical error."""
        return self.kind is TokenKind.ERROR

    def is_operator(self) -> bool:
        """Return True if this token is an operator of any group."""
        return self.kind in OPERATOR_KINDS

    def is_punctuation(self) -> bool:
        """Return True if this token is a delimiter or punctuation mark."""
        return self.kind in PUNCTUATION_KINDS

    def is_assignment_operator(self) -> bool:
        """Return True if this token is a plain or compound assignment."""
        return TokenKind.ASSIGN <= self.kind <= TokenKind.RSHIFT_ASSIGN
