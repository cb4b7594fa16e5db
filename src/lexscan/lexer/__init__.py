"""
lexscan Lexer
=============

The scanning engine: character classification, the keyword, operator and
punctuation tables, the Scanner itself, and the emitters that receive its
tokens.

Pipeline
--------
    Source text → Scanner → TokenEmitter (collector, report, callback)

Usage
-----
>>> from lexscan.lexer import tokenize
>>> [t.kind.name for t in tokenize("while (i <= 10) i++;")]
['RESERVED_WORD', 'LPAREN', 'IDENTIFIER', 'LESS_EQUAL', 'INTEGER_CONSTANT', \
'RPAREN', 'IDENTIFIER', 'INCREMENT', 'SEMICOLON']
"""

from lexscan.lexer.tokens import Token, TokenKind
from lexscan.lexer.tables import (
    RESERVED_WORDS,
    OPERATORS,
    PUNCTUATION,
    is_reserved_word,
    lookup_operator,
)
from lexscan.lexer.emitter import TokenEmitter, CollectingEmitter, CallbackEmitter
from lexscan.lexer.scanner import Scanner, ScannerOptions, analyze, tokenize

__all__ = [
    # Tokens
    "Token",
    "TokenKind",
    # Tables
    "RESERVED_WORDS",
    "OPERATORS",
    "PUNCTUATION",
    "is_reserved_word",
    "lookup_operator",
    # Emitters
    "TokenEmitter",
    "CollectingEmitter",
    "CallbackEmitter",
    # Scanner
    "Scanner",
    "ScannerOptions",
    "analyze",
    "tokenize",
]
