"""Single-token lookahead over a :class:`Tokenizer`."""

from __future__ import annotations

from typing import Optional

from .keywords import TokenKind
from .lexer import EOF_TOKEN, Token, Tokenizer


class TokenCursor:
    """
    The parser's view of the token stream.

    Holds exactly one lookahead token. ``advance()`` consumes it and pulls the
    next one from the tokenizer; there is no way to step back.
    """

    def __init__(self, tokenizer: Tokenizer) -> None:
        self.tokenizer = tokenizer
        self._current: Optional[Token] = None

    def prime(self) -> Token:
        """Load the first token. Must be called once before parsing."""
        self._current = self.tokenizer.start()
        return self._current

    def peek(self) -> Token:
        return self._current if self._current is not None else EOF_TOKEN

    def advance(self) -> Token:
        """Consume the current token and return it."""
        consumed = self.peek()
        self._current = self.tokenizer.next()
        return consumed

    def at(self, *kinds: TokenKind) -> bool:
        return self.peek().kind in kinds

    def at_end(self) -> bool:
        return self.peek().is_eof
