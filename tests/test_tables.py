# =============================================================================
# test_tables.py - Lookup Table and Character Class Tests
# =============================================================================
# Tests for lexscan.lexer.tables, lexscan.lexer.chars and TokenKind ids.
# =============================================================================

import pytest

from lexscan.lexer import chars
from lexscan.lexer.tables import (
    MAX_OPERATOR_LENGTH,
    OPERATORS,
    PUNCTUATION,
    RESERVED_WORDS,
    is_reserved_word,
    lookup_operator,
)
from lexscan.lexer.tokens import Token, TokenKind


# =============================================================================
# Reserved Word Table
# =============================================================================

class TestReservedWords:
    """Exact, case-sensitive keyword membership."""

    def test_keyword_count(self):
        assert len(RESERVED_WORDS) == 32

    @pytest.mark.parametrize("word", ["int", "register", "sizeof", "volatile"])
    def test_members(self, word):
        assert is_reserved_word(word)

    @pytest.mark.parametrize("word", ["INT", "Int", "in", "intx", "main", "bool", ""])
    def test_non_members(self, word):
        assert not is_reserved_word(word)


# =============================================================================
# Operator Table
# =============================================================================

class TestOperatorTable:
    """Exact-match operator lookup."""

    def test_longest_spelling(self):
        assert MAX_OPERATOR_LENGTH == 3

    def test_spelling_counts(self):
        lengths = [len(s) for s in OPERATORS]
        assert lengths.count(3) == 2
        assert lengths.count(2) == 18
        assert lengths.count(1) == 13

    def test_exact_match_only(self):
        """No prefix matching inside the table itself."""
        assert lookup_operator("<<=") is TokenKind.LSHIFT_ASSIGN
        assert lookup_operator("<<<") is None
        assert lookup_operator("=<") is None
        assert lookup_operator("") is None

    def test_every_spelling_uses_operator_chars(self):
        for spelling in OPERATORS:
            assert all(chars.is_operator_char(c) for c in spelling)

    def test_every_operator_char_has_single_spelling(self):
        """Backoff always succeeds at length one."""
        for c in chars.OPERATOR_CHARS:
            assert lookup_operator(c) is not None


# =============================================================================
# Character Classes
# =============================================================================

class TestCharacterClasses:
    """Character predicates."""

    @pytest.mark.parametrize("predicate", [
        chars.is_whitespace,
        chars.is_identifier_start,
        chars.is_identifier_continue,
        chars.is_digit,
        chars.is_operator_char,
    ])
    def test_end_of_buffer_matches_nothing(self, predicate):
        assert not predicate("")

    def test_whitespace(self):
        for c in " \t\n\v\f\r":
            assert chars.is_whitespace(c)
        assert not chars.is_whitespace("x")

    def test_identifier_start(self):
        assert chars.is_identifier_start("_")
        assert chars.is_identifier_start("Z")
        assert not chars.is_identifier_start("7")
        assert not chars.is_identifier_start("é")

    def test_identifier_continue(self):
        assert chars.is_identifier_continue("7")
        assert not chars.is_identifier_continue("-")

    def test_digit_is_ascii_only(self):
        assert chars.is_digit("0")
        assert not chars.is_digit("٣")

    def test_operator_chars(self):
        assert all(chars.is_operator_char(c) for c in "+-*/%<>=!&|^~")
        assert not any(chars.is_operator_char(c) for c in "()[]{};,:.?\\#")


# =============================================================================
# Token Kinds
# =============================================================================

class TestTokenKinds:
    """Numeric ids printed in the report."""

    def test_fixed_ids(self):
        assert TokenKind.EOF == 0
        assert TokenKind.IDENTIFIER == 1
        assert TokenKind.RESERVED_WORD == 6
        assert TokenKind.PLUS == 7
        assert TokenKind.ASSIGN == 29
        assert TokenKind.LPAREN == 40
        assert TokenKind.PREPROCESSOR == 52
        assert TokenKind.ERROR == 53

    def test_ids_are_contiguous(self):
        assert [int(k) for k in TokenKind] == list(range(len(TokenKind)))

    def test_punctuation_kinds(self):
        assert set(PUNCTUATION.values()) == {
            k for k in TokenKind if Token(k, "x", 1).is_punctuation()
        }

    def test_operator_kinds(self):
        assert set(OPERATORS.values()) == {
            k for k in TokenKind if Token(k, "x", 1).is_operator()
        }

    def test_token_predicates(self):
        assert Token(TokenKind.ERROR, "@", 1).is_error
        assert Token(TokenKind.XOR_ASSIGN, "^=", 1).is_assignment_operator()
        assert not Token(TokenKind.EQUAL, "==", 1).is_assignment_operator()

    def test_token_repr(self):
        assert repr(Token(TokenKind.DOT, ".", 4)) == "Token(DOT, '.', line 4)"
