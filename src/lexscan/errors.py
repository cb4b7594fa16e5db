"""
lexscan Error Hierarchy
=======================

This module defines the exception hierarchy for lexscan.
All exceptions inherit from LexScanError, allowing callers to catch every
lexscan failure with a single except clause if desired.

Exception Hierarchy
-------------------
LexScanError (base)
├── SourceLoadError - input file missing, unreadable or undecodable
│   └── SourceTooLargeError - input exceeds the loader's size bound
└── LexemeOverflowError - a single lexeme grew past the configured limit

Malformed literals and unknown operators are NOT exceptions: the scanner
reports them as ERROR tokens in the token stream and keeps going. The
exceptions here cover the conditions that stop a scan from starting or
from completing safely.

Error messages follow this format:
    filename:line: error: description
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class LexScanError(Exception):
    """
    Base exception for all lexscan errors.

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
    """

    def __init__(
        self,
        message: str,
        location: Optional["SourceLocation"] = None,
        hint: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location and hint.

        Example output:
            input.c:12: error: lexeme exceeds 100 characters
            hint: split the literal or raise --max-lexeme-length
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    A position in source text for error reporting.

    Only line numbers are tracked; the scanner has no notion of columns.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
    """
    filename: str
    line: int

    def __str__(self) -> str:
        """Format as 'filename:line' for error messages."""
        return f"{self.filename}:{self.line}"


# =============================================================================
# Source Acquisition Errors
# =============================================================================

class SourceLoadError(LexScanError):
    """
    The input file could not be acquired.

    Raised by the loader before any scanning starts. This is the only
    fatal condition in a normal run: no tokens are produced.
    """

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"cannot open input file '{path}': {reason}")


class SourceTooLargeError(SourceLoadError):
    """Input is longer than the loader's maximum buffer size (strict mode only)."""

    def __init__(self, path: str, size: int, limit: int):
        self.size = size
        self.limit = limit
        super().__init__(path, f"{size} characters exceeds the limit of {limit}")


# =============================================================================
# Scanner Errors
# =============================================================================

class LexemeOverflowError(LexScanError):
    """
    A lexeme grew past the scanner's maximum lexeme length.

    The scanner checks every character it appends to the current lexeme,
    so the lexeme never exceeds the bound; the scan stops with this error
    instead.

    Attributes:
        limit: The configured maximum lexeme length
        prefix: The first characters of the offending lexeme
    """

    def __init__(
        self,
        limit: int,
        prefix: str,
        location: Optional[SourceLocation] = None,
    ):
        self.limit = limit
        self.prefix = prefix
        shown = prefix if len(prefix) <= 20 else prefix[:20] + "..."
        super().__init__(
            f"lexeme exceeds {limit} characters: {shown!r}",
            location=location,
            hint="split the token or raise --max-lexeme-length",
        )
