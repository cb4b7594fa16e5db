"""
Reserved Word, Operator and Punctuation Tables
==============================================

Static exact-match lookup tables. Lookups are whole-string comparisons;
there is no prefix matching here. Longest-match behaviour for operators
is implemented by the scanner, which tries progressively shorter
prefixes against OPERATORS.
"""

from typing import Optional

from lexscan.lexer.tokens import TokenKind


# =============================================================================
# Reserved Words
# =============================================================================

RESERVED_WORDS: frozenset[str] = frozenset({
    # Type specifiers
    "int", "float", "char", "double", "void",
    "short", "long", "signed", "unsigned",

    # Control flow
    "if", "else", "while", "for", "do",
    "switch", "case", "default", "break", "continue",
    "return", "goto",

    # Declarations and qualifiers
    "sizeof", "typedef", "struct", "union", "enum",
    "const", "volatile", "extern", "static", "auto", "register",
})


def is_reserved_word(text: str) -> bool:
    """Return True if text is exactly a keyword (case-sensitive)."""
    return text in RESERVED_WORDS


# =============================================================================
# Operators
# =============================================================================

# Map operator spellings to their token kinds
OPERATORS: dict[str, TokenKind] = {
    # Three-character operators
    "<<=": TokenKind.LSHIFT_ASSIGN,
    ">>=": TokenKind.RSHIFT_ASSIGN,

    # Two-character operators
    "++": TokenKind.INCREMENT,
    "--": TokenKind.DECREMENT,
    "==": TokenKind.EQUAL,
    "!=": TokenKind.NOT_EQUAL,
    "<=": TokenKind.LESS_EQUAL,
    ">=": TokenKind.GREATER_EQUAL,
    "&&": TokenKind.LOGICAL_AND,
    "||": TokenKind.LOGICAL_OR,
    "+=": TokenKind.PLUS_ASSIGN,
    "-=": TokenKind.MINUS_ASSIGN,
    "*=": TokenKind.MUL_ASSIGN,
    "/=": TokenKind.DIV_ASSIGN,
    "%=": TokenKind.MOD_ASSIGN,
    "&=": TokenKind.AND_ASSIGN,
    "|=": TokenKind.OR_ASSIGN,
    "^=": TokenKind.XOR_ASSIGN,
    "<<": TokenKind.LEFT_SHIFT,
    ">>": TokenKind.RIGHT_SHIFT,

    # Single-character operators
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.MULTIPLY,
    "/": TokenKind.DIVIDE,
    "%": TokenKind.MODULUS,
    "=": TokenKind.ASSIGN,
    "<": TokenKind.LESS_THAN,
    ">": TokenKind.GREATER_THAN,
    "&": TokenKind.BITWISE_AND,
    "|": TokenKind.BITWISE_OR,
    "^": TokenKind.BITWISE_XOR,
    "~": TokenKind.BITWISE_NOT,
    "!": TokenKind.LOGICAL_NOT,
}

MAX_OPERATOR_LENGTH = max(len(spelling) for spelling in OPERATORS)


def lookup_operator(spelling: str) -> Optional[TokenKind]:
    """Return the token kind for an exact operator spelling, or None."""
    return OPERATORS.get(spelling)


# =============================================================================
# Punctuation and Delimiters
# =============================================================================

PUNCTUATION: dict[str, TokenKind] = {
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
    "[": TokenKind.LBRACKET,
    "]": TokenKind.RBRACKET,
    ";": TokenKind.SEMICOLON,
    ",": TokenKind.COMMA,
    ":": TokenKind.COLON,
    ".": TokenKind.DOT,
    "?": TokenKind.QUESTION,
    "\\": TokenKind.BACKSLASH,
    "#": TokenKind.PREPROCESSOR,
}
