# =============================================================================
# test_report.py - Token Table Report Tests
# =============================================================================

from lexscan.lexer import analyze
from lexscan.lexer.tokens import Token, TokenKind
from lexscan.report import (
    SEPARATOR,
    TITLE,
    TokenTableReporter,
    format_header,
    format_row,
)


class TestFormatting:
    """Fixed-width header and rows."""

    def test_header(self):
        assert format_header() == "INPUT      TOKEN TYPE      TOKEN ID  "

    def test_separator(self):
        assert SEPARATOR == "-" * 54

    def test_row_columns(self):
        row = format_row(Token(TokenKind.RESERVED_WORD, "int", 1))
        assert row[:10] == "int       "
        assert row[11:26] == "RESERVED_WORD  "
        assert row[27:] == "6         "

    def test_row_uses_numeric_id(self):
        row = format_row(Token(TokenKind.ERROR, "@", 1))
        assert row.split() == ["@", "ERROR", "53"]

    def test_long_lexeme_not_truncated(self):
        row = format_row(Token(TokenKind.IDENTIFIER, "a_very_long_name", 1))
        assert row.startswith("a_very_long_name IDENTIFIER")


class TestReporter:
    """Reporter as a token emitter."""

    def test_start_writes_preamble(self):
        lines = []
        TokenTableReporter(lines.append).start()
        assert lines == [TITLE, "", format_header(), SEPARATOR]

    def test_rows_follow_scan_order(self):
        lines = []
        reporter = TokenTableReporter(lines.append)
        analyze("x += 1;", reporter)
        assert reporter.rows == 4
        assert [line.split() for line in lines] == [
            ["x", "IDENTIFIER", "1"],
            ["+=", "PLUS_ASSIGN", "30"],
            ["1", "INTEGER_CONSTANT", "2"],
            [";", "SEMICOLON", "46"],
        ]
