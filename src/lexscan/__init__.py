"""
lexscan - Lexical Analyser for a C-like Language
================================================

This package converts C-like source text into a stream of classified
tokens: identifiers, reserved words, integer and float constants, string
and character literals, operators and punctuation. It is the first stage
of a compiler front end, used standalone to report the token stream.

Main Components
---------------
- **lexer**: the Scanner, its lookup tables and token emitters
- **loader**: reads the input file into a bounded text buffer
- **report**: renders tokens as a fixed-width table
- **cli**: the ``lexscan`` command

Quick Start
-----------
Scan a string:
    >>> from lexscan import tokenize
    >>> for token in tokenize('x = "hi";'):
    ...     print(token)
    Token(IDENTIFIER, 'x', line 1)
    Token(ASSIGN, '=', line 1)
    Token(STRING_LITERAL, '"hi"', line 1)
    Token(SEMICOLON, ';', line 1)

Stream tokens to your own sink:
    >>> from lexscan import Scanner, CallbackEmitter
    >>> Scanner("a+b").analyze(CallbackEmitter(print))
    Token(IDENTIFIER, 'a', line 1)
    Token(PLUS, '+', line 1)
    Token(IDENTIFIER, 'b', line 1)
    3

Or use the command-line tool:
    $ lexscan input.c
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from lexscan.errors import (
    LexScanError,
    SourceLocation,
    SourceLoadError,
    SourceTooLargeError,
    LexemeOverflowError,
)
from lexscan.lexer import (
    Token,
    TokenKind,
    TokenEmitter,
    CollectingEmitter,
    CallbackEmitter,
    Scanner,
    ScannerOptions,
    analyze,
    tokenize,
)
from lexscan.loader import load_source, DEFAULT_INPUT_PATH, DEFAULT_MAX_SOURCE_SIZE
from lexscan.report import TokenTableReporter, format_header, format_row

__all__ = [
    # Version info
    "__version__",
    # Scanner
    "Scanner",
    "ScannerOptions",
    "analyze",
    "tokenize",
    # Tokens
    "Token",
    "TokenKind",
    # Emitters and reporting
    "TokenEmitter",
    "CollectingEmitter",
    "CallbackEmitter",
    "TokenTableReporter",
    "format_header",
    "format_row",
    # Loading
    "load_source",
    "DEFAULT_INPUT_PATH",
    "DEFAULT_MAX_SOURCE_SIZE",
    # Exception hierarchy
    "LexScanError",
    "SourceLocation",
    "SourceLoadError",
    "SourceTooLargeError",
    "LexemeOverflowError",
]
