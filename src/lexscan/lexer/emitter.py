"""
Token Emitters
==============

The scanner never stores the tokens it produces. Each one is handed to a
TokenEmitter as soon as it is recognized; what happens next (printing a
report row, collecting for a test, counting) is up to the emitter.
"""

from typing import Callable, Protocol

from lexscan.lexer.tokens import Token, TokenKind


class TokenEmitter(Protocol):
    """
    Protocol for token sinks.

    Any object with an ``emit(token)`` method can receive the scanner's
    output.
    """

    def emit(self, token: Token) -> None:
        """Receive one token."""
        ...


class CollectingEmitter:
    """
    Emitter that keeps every token it receives, in order.

    Used by tests and by the ``tokenize()`` convenience function.

    Attributes:
        tokens: Tokens received so far
    """

    def __init__(self) -> None:
        self.tokens: list[Token] = []

    def emit(self, token: Token) -> None:
        self.tokens.append(token)

    def __len__(self) -> int:
        return len(self.tokens)

    @property
    def kinds(self) -> list[TokenKind]:
        """Kinds of the collected tokens, in order."""
        return [t.kind for t in self.tokens]

    @property
    def lexemes(self) -> list[str]:
        """Lexemes of the collected tokens, in order."""
        return [t.lexeme for t in self.tokens]


class CallbackEmitter:
    """Emitter that forwards each token to a plain callable."""

    def __init__(self, callback: Callable[[Token], None]) -> None:
        self._callback = callback

    def emit(self, token: Token) -> None:
        self._callback(token)
