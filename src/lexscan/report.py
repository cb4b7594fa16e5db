"""
Token Table Report
==================

Renders the token stream as a fixed-width table:

    Lexical Analysis Output:

    INPUT      TOKEN TYPE      TOKEN ID
    ------------------------------------------------------
    int        RESERVED_WORD   6
    main       IDENTIFIER      1

Columns are left-justified to widths 10, 15 and 10 and separated by a
single space. Values longer than their column are printed in full and
push the rest of the row to the right; nothing is truncated.
"""

from typing import Callable, Optional

import click

from lexscan.lexer.tokens import Token

TITLE = "Lexical Analysis Output:"
SEPARATOR = "-" * 54

LEXEME_WIDTH = 10
KIND_WIDTH = 15
ID_WIDTH = 10


def format_header() -> str:
    """Return the column header line."""
    return f"{'INPUT':<{LEXEME_WIDTH}} {'TOKEN TYPE':<{KIND_WIDTH}} {'TOKEN ID':<{ID_WIDTH}}"


def format_row(token: Token) -> str:
    """Return the report row for one token."""
    return (
        f"{token.lexeme:<{LEXEME_WIDTH}} "
        f"{token.kind.name:<{KIND_WIDTH}} "
        f"{int(token.kind):<{ID_WIDTH}}"
    )


class TokenTableReporter:
    """
    Emitter that prints each token as a report row.

    The title and header are written by ``start()``; rows are written as
    tokens arrive, so nothing is buffered.

    Attributes:
        rows: Number of rows written so far
    """

    def __init__(self, echo: Optional[Callable[[str], None]] = None) -> None:
        self._echo = echo or click.echo
        self.rows = 0

    def start(self) -> None:
        """Write the title, header and separator lines."""
        self._echo(TITLE)
        self._echo("")
        self._echo(format_header())
        self._echo(SEPARATOR)

    def emit(self, token: Token) -> None:
        self._echo(format_row(token))
        self.rows += 1
