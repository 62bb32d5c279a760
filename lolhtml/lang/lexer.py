"""Lexical analyzer (tokenizer) for LOLCODE markup.

Source text is split on whitespace into words. Each word becomes an
immutable :class:`Token` whose kind is classified once, up front. Validity is
checked lazily, when the parser pulls the token, so a bad word is only
reported if parsing actually reaches it.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import List, Optional

from ..errors import LOLLexicalError, LOLUserError
from .keywords import TokenKind, classify, is_valid_word

logger = logging.getLogger(__name__)

_WORD_RE = re.compile(r"\S+")


@dataclass(frozen=True)
class Token:
    """A single token with position information."""

    text: str
    kind: TokenKind = field(default=TokenKind.TEXT)
    line: Optional[int] = None
    column: Optional[int] = None

    @classmethod
    def from_word(cls, text: str, line: Optional[int] = None, column: Optional[int] = None) -> "Token":
        return cls(text=text, kind=classify(text), line=line, column=column)

    @property
    def is_eof(self) -> bool:
        return self.kind is TokenKind.EOF


EOF_TOKEN = Token(text="", kind=TokenKind.EOF)


def split_words(source: str) -> List[Token]:
    """
    Split source text into tokens.

    A single leading ``#`` is stripped from each word. A word that is empty
    after stripping produces no token.

    Examples:
        >>> [t.text for t in split_words("HAI #OBTW  x\\n KTHXBYE")]
        ['HAI', 'OBTW', 'x', 'KTHXBYE']
    """
    tokens: List[Token] = []
    line = 1
    line_start = 0
    scanned = 0
    for match in _WORD_RE.finditer(source):
        start = match.start()
        # Track line numbers incrementally; only newlines between words matter.
        newlines = source.count("\n", scanned, start)
        if newlines:
            line += newlines
            line_start = source.rfind("\n", scanned, start) + 1
        scanned = start

        word = match.group()
        column = start - line_start + 1
        if word.startswith("#"):
            # Leading '#' is dropped; the reason for this rule is undocumented.
            word = word[1:]
            column += 1
        if not word:
            continue
        tokens.append(Token.from_word(word, line=line, column=column))
    return tokens


class Tokenizer:
    """
    Pull-based tokenizer.

    ``start()`` hands out the first token, ``next()`` every following one and
    then the end-of-stream sentinel for as long as it is called.
    """

    def __init__(self, source: str, *, path: str = "") -> None:
        self.path = path
        self._tokens = split_words(source)
        self._pos = 0
        logger.debug("Split %d words from %s", len(self._tokens), path or "<source>")

    def start(self) -> Token:
        """Return the first token; the stream must not be empty."""
        if not self._tokens:
            raise LOLUserError(path=self.path or None)
        self._pos = 0
        return self._take()

    def next(self) -> Token:
        """Return the next token, or the end-of-stream sentinel."""
        if self._pos >= len(self._tokens):
            return EOF_TOKEN
        return self._take()

    @staticmethod
    def is_valid(word: str) -> bool:
        return is_valid_word(word)

    def _take(self) -> Token:
        token = self._tokens[self._pos]
        self._pos += 1
        if not self.is_valid(token.text):
            raise LOLLexicalError(
                token.text,
                path=self.path or None,
                line=token.line,
                column=token.column,
            )
        return token


__all__ = ["Token", "EOF_TOKEN", "Tokenizer", "split_words"]
