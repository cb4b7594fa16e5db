"""
Scanner
=======

This module implements the single-pass scanner that turns C-like source
text into a stream of classified tokens.

Dispatch Order
--------------
On each step the scanner looks at the current character and hands it to
the first recognizer whose guard matches. The order is significant and
must not be rearranged:

1. Whitespace (counts newlines, emits nothing)
2. Line comment ``// ...``
3. Block comment ``/* ... */``
4. Identifier or reserved word
5. Numeric literal (a digit, or ``.`` followed by a digit)
6. String literal ``"..."``
7. Character literal ``'...'``
8. Operator (longest match, backing off one character at a time)
9. Punctuation ``( ) { } [ ] ; , : . ? \\ #``

Lexical problems never stop the scan. An unterminated string, a broken
character literal or an unmatched operator character becomes an ERROR
token and scanning carries on with the next character. The one exception
is a lexeme longer than the configured limit, which raises
LexemeOverflowError.

Example Usage
-------------
>>> from lexscan.lexer import Scanner
>>> for token in Scanner("x <<= 2;").tokenize():
...     print(token)
Token(IDENTIFIER, 'x', line 1)
Token(LSHIFT_ASSIGN, '<<=', line 1)
Token(INTEGER_CONSTANT, '2', line 1)
Token(SEMICOLON, ';', line 1)
"""

import logging
from dataclasses import dataclass
from typing import Iterator, Optional

from lexscan.errors import LexemeOverflowError, SourceLocation
from lexscan.lexer.chars import (
    is_digit,
    is_identifier_continue,
    is_identifier_start,
    is_operator_char,
    is_whitespace,
)
from lexscan.lexer.emitter import CollectingEmitter, TokenEmitter
from lexscan.lexer.tables import (
    MAX_OPERATOR_LENGTH,
    PUNCTUATION,
    is_reserved_word,
    lookup_operator,
)
from lexscan.lexer.tokens import Token, TokenKind

logger = logging.getLogger(__name__)

# Single trailing suffix accepted after a numeric literal
NUMBER_SUFFIXES = "fFuUlL"

DEFAULT_MAX_LEXEME_LENGTH = 100


# =============================================================================
# Scanner Options
# =============================================================================

@dataclass
class ScannerOptions:
    """
    Scanner configuration options.

    Attributes:
        max_lexeme_length: Longest lexeme the scanner will build. Exceeding
                           it raises LexemeOverflowError.
        report_unknown_characters: Emit a one-character ERROR token for a
                           character no recognizer accepts. When False the
                           character is dropped silently.
        report_unterminated_comments: Emit an ERROR token with lexeme "/*"
                           when a block comment runs to the end of input.
                           When False (default) the comment is consumed
                           silently.
        first_line: Line number assigned to the first line of the buffer.
    """
    max_lexeme_length: int = DEFAULT_MAX_LEXEME_LENGTH
    report_unknown_characters: bool = True
    report_unterminated_comments: bool = False
    first_line: int = 1

    def __post_init__(self):
        # Every operator spelling and the "/*" marker must fit in a lexeme
        if self.max_lexeme_length < MAX_OPERATOR_LENGTH:
            raise ValueError(
                f"max_lexeme_length must be at least {MAX_OPERATOR_LENGTH}, "
                f"got {self.max_lexeme_length}"
            )
        if self.first_line < 1:
            raise ValueError(f"first_line must be >= 1, got {self.first_line}")


# =============================================================================
# Scanner Implementation
# =============================================================================

class Scanner:
    """
    Scans one source buffer into tokens.

    A Scanner owns its cursor and line counter and makes exactly one pass
    over its buffer. Independent instances share no state, so separate
    buffers can be scanned in parallel by separate scanners.

    Usage:
        scanner = Scanner(source_text, "input.c")
        count = scanner.analyze(emitter)

    Attributes:
        source: The text being scanned
        filename: Name used in error locations
        options: Scanner configuration
    """

    def __init__(
        self,
        source: str,
        filename: str = "<input>",
        options: Optional[ScannerOptions] = None,
    ):
        self.source = source
        self.filename = filename
        self.options = options or ScannerOptions()

        self._pos = 0
        self._line = self.options.first_line
        self._started = False

        # Lexeme under construction and the line it started on
        self._chars: list[str] = []
        self._token_line = self._line

    @property
    def cursor(self) -> int:
        """Index of the next unread character."""
        return self._pos

    @property
    def line(self) -> int:
        """Current line number."""
        return self._line

    def tokenize(self) -> Iterator[Token]:
        """
        Generate tokens from the source buffer.

        Yields:
            Token objects in source order. No EOF token is produced.

        Raises:
            LexemeOverflowError: If a lexeme exceeds max_lexeme_length
            RuntimeError: If this scanner has already been run
        """
        if self._started:
            raise RuntimeError("a Scanner makes a single pass; create a new one")
        self._started = True
        return self._generate()

    def analyze(self, emitter: TokenEmitter) -> int:
        """
        Scan the whole buffer, handing each token to the emitter.

        Returns:
            Number of tokens emitted
        """
        count = 0
        for token in self.tokenize():
            emitter.emit(token)
            count += 1
        logger.debug(f"{self.filename}: emitted {count} tokens over {self._line} lines")
        return count

    def _generate(self) -> Iterator[Token]:
        logger.debug(f"Scanning {self.filename} ({len(self.source)} characters)")
        while not self._at_end():
            token = self._scan_step()
            if token is not None:
                yield token

    # =========================================================================
    # Character Access Methods
    # =========================================================================

    def _at_end(self) -> bool:
        """Check if we've reached the end of source."""
        return self._pos >= len(self.source)

    def _peek(self, offset: int = 0) -> str:
        """
        Look at character at current position + offset without advancing.

        Returns empty string if past end of source.
        """
        pos = self._pos + offset
        if pos >= len(self.source):
            return ""
        return self.source[pos]

    def _advance(self) -> str:
        """Consume and return the current character, counting newlines."""
        if self._at_end():
            return ""

        char = self.source[self._pos]
        self._pos += 1

        if char == "\n":
            self._line += 1

        return char

    # =========================================================================
    # Lexeme Buffer
    # =========================================================================

    def _begin_lexeme(self) -> None:
        self._chars = []
        self._token_line = self._line

    def _take(self) -> str:
        """
        Consume the current character and append it to the lexeme.

        Raises:
            LexemeOverflowError: If the lexeme is already at the limit
        """
        if len(self._chars) >= self.options.max_lexeme_length:
            raise LexemeOverflowError(
                self.options.max_lexeme_length,
                "".join(self._chars),
                SourceLocation(self.filename, self._token_line),
            )
        char = self._advance()
        self._chars.append(char)
        return char

    def _take_digits(self) -> None:
        while is_digit(self._peek()):
            self._take()

    def _make_token(self, kind: TokenKind) -> Token:
        return Token(kind, "".join(self._chars), self._token_line)

    # =========================================================================
    # Dispatch
    # =========================================================================

    def _scan_step(self) -> Optional[Token]:
        """
        Run one dispatch step.

        Returns:
            The recognized token, or None if the step consumed input
            without producing one (whitespace, comments, dropped bytes)
        """
        char = self._peek()

        if is_whitespace(char):
            self._advance()
            return None

        if char == "/" and self._peek(1) == "/":
            self._skip_line_comment()
            return None

        if char == "/" and self._peek(1) == "*":
            return self._skip_block_comment()

        self._begin_lexeme()

        if is_identifier_start(char):
            return self._scan_identifier()

        # ".5" is a number, a lone "." is punctuation
        if is_digit(char) or (char == "." and is_digit(self._peek(1))):
            return self._scan_number()

        if char == '"':
            return self._scan_string()

        if char == "'":
            return self._scan_char()

        if is_operator_char(char):
            return self._scan_operator()

        return self._scan_punctuation()

    # =========================================================================
    # Comment Handling
    # =========================================================================

    def _skip_line_comment(self) -> None:
        """Skip a // comment, leaving the terminating newline unread."""
        while not self._at_end() and self._peek() != "\n":
            self._advance()

    def _skip_block_comment(self) -> Optional[Token]:
        """
        Skip a /* ... */ comment.

        Returns:
            None, or an ERROR token if the comment is unterminated and
            report_unterminated_comments is set
        """
        start_line = self._line

        # Consume the /*
        self._advance()
        self._advance()

        while not self._at_end():
            if self._peek() == "*" and self._peek(1) == "/":
                self._advance()
                self._advance()
                return None
            self._advance()

        logger.warning(f"{self.filename}:{start_line}: unterminated block comment")
        if self.options.report_unterminated_comments:
            return Token(TokenKind.ERROR, "/*", start_line)
        return None

    # =========================================================================
    # Recognizers
    # =========================================================================

    def _scan_identifier(self) -> Token:
        """Scan the maximal identifier run and classify it."""
        while is_identifier_continue(self._peek()):
            self._take()

        if is_reserved_word("".join(self._chars)):
            return self._make_token(TokenKind.RESERVED_WORD)
        return self._make_token(TokenKind.IDENTIFIER)

    def _scan_number(self) -> Token:
        """
        Scan a numeric literal.

        Shape: [.] digits [. digits] [(e|E) [+|-] digits] [suffix]

        The literal is not validated: "1e" and "1.e+" are accepted as
        FLOAT_CONSTANT lexemes as they stand.
        """
        is_float = False

        if self._peek() == ".":
            is_float = True
            self._take()

        self._take_digits()

        if self._peek() == "." and not is_float:
            is_float = True
            self._take()
            self._take_digits()

        if self._peek() in ("e", "E"):
            is_float = True
            self._take()
            if self._peek() in ("+", "-"):
                self._take()
            self._take_digits()

        suffix = self._peek()
        if suffix and suffix in NUMBER_SUFFIXES:
            self._take()

        if is_float:
            return self._make_token(TokenKind.FLOAT_CONSTANT)
        return self._make_token(TokenKind.INTEGER_CONSTANT)

    def _scan_string(self) -> Token:
        """
        Scan a double-quoted string literal.

        Escapes are copied verbatim (backslash and the following
        character), never interpreted. A string that runs off the end of
        the buffer becomes an ERROR token holding what was read.
        """
        self._take()  # opening "

        while not self._at_end():
            char = self._peek()

            if char == '"':
                self._take()  # closing "
                return self._make_token(TokenKind.STRING_LITERAL)

            if char == "\\":
                self._take()
                if self._at_end():
                    break

            self._take()

        logger.debug(f"{self.filename}:{self._token_line}: unterminated string literal")
        return self._make_token(TokenKind.ERROR)

    def _scan_char(self) -> Token:
        """
        Scan a single-quoted character literal.

        Accepts exactly one escape pair or one character between the
        quotes. Anything else (missing closing quote, more than one
        character) yields an ERROR token for the part read so far; the
        remaining characters are scanned normally afterwards.
        """
        self._take()  # opening '

        if self._peek() == "\\":
            self._take()
        if not self._at_end():
            self._take()

        if self._peek() == "'":
            self._take()  # closing '
            return self._make_token(TokenKind.CHARACTER_LITERAL)

        logger.debug(f"{self.filename}:{self._token_line}: malformed character literal")
        return self._make_token(TokenKind.ERROR)

    def _scan_operator(self) -> Token:
        """
        Scan an operator using longest match with backoff.

        Up to MAX_OPERATOR_LENGTH operator characters are examined; the
        longest prefix that is a known spelling wins. Only the matched
        characters are consumed, so "=/*" yields "=" and leaves the
        comment for the next step.
        """
        candidate = ""
        while (
            len(candidate) < MAX_OPERATOR_LENGTH
            and is_operator_char(self._peek(len(candidate)))
        ):
            candidate += self._peek(len(candidate))

        for length in range(len(candidate), 0, -1):
            kind = lookup_operator(candidate[:length])
            if kind is not None:
                for _ in range(length):
                    self._take()
                return self._make_token(kind)

        self._take()
        return self._make_token(TokenKind.ERROR)

    def _scan_punctuation(self) -> Optional[Token]:
        """Scan a single punctuation character, or handle an unknown one."""
        char = self._take()

        kind = PUNCTUATION.get(char)
        if kind is not None:
            return self._make_token(kind)

        if self.options.report_unknown_characters:
            logger.debug(
                f"{self.filename}:{self._token_line}: unknown character {char!r}"
            )
            return self._make_token(TokenKind.ERROR)

        logger.debug(f"{self.filename}:{self._token_line}: dropped character {char!r}")
        return None


# =============================================================================
# Convenience Functions
# =============================================================================

def analyze(
    source: str,
    emitter: TokenEmitter,
    options: Optional[ScannerOptions] = None,
    filename: str = "<input>",
) -> int:
    """
    Scan source text, handing each token to the emitter.

    Args:
        source: Complete source text
        emitter: Receives every token in order
        options: Scanner configuration (defaults if None)
        filename: Name used in error locations

    Returns:
        Number of tokens emitted
    """
    return Scanner(source, filename, options).analyze(emitter)


def tokenize(
    source: str,
    options: Optional[ScannerOptions] = None,
    filename: str = "<input>",
) -> list[Token]:
    """Scan source text and return all tokens as a list."""
    collector = CollectingEmitter()
    analyze(source, collector, options, filename)
    return collector.tokens
