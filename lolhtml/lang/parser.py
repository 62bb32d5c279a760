"""Recursive descent parser for LOLCODE markup.

Parsing and translation happen in the same pass: each grammar rule consumes
tokens through the parser's :class:`TokenCursor` and runs its semantic
actions (symbol table writes and HTML fragment emission) as soon as the
production matches. There is no intermediate tree.

Grammar::

    program         := comment* HAI comment* head body comment* KTHXBYE comment* EOF
    comment         := OBTW anyToken* (TLDR | EOF)
    head            := [ MAEK ( HEAD [ GIMMEH TITLE anyToken* MKAY ] OIC | makeBlock ) ]
    body            := ( comment | paragraphOrList | mediaOrText | variableStmt | skip )*
    paragraphOrList := MAEK makeBlock
    makeBlock       := PARAGRAF textToken* OIC
                     | LIST ( ITEM textToken )* OIC
    mediaOrText     := GIMMEH mediaKeyword textToken* MKAY
    variableStmt    := I HAZ name [ ITZ value ] MKAY
                     | LEMME SEE name MKAY
"""

from __future__ import annotations

import html
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from ..errors import LOLSemanticError, LOLSyntaxError
from .cursor import TokenCursor
from .keywords import (
    MEDIA_KINDS,
    TokenKind,
    format_keyword_list,
    get_keyword_description,
    suggest_keyword,
)
from .lexer import Token, Tokenizer
from .state import CompilerState

logger = logging.getLogger(__name__)


_MEDIA_TEMPLATES: Dict[TokenKind, str] = {
    TokenKind.BOLD: "<b>{content}</b>",
    TokenKind.ITALICS: "<i>{content}</i>",
    TokenKind.NEWLINE: "<br>",
    TokenKind.SOUNDZ: '<audio src="{content}" controls></audio>',
    TokenKind.VIDZ: '<a href="{content}" target="_blank">{content}</a>',
}

_MEDIA_NAMES = sorted(kind.value for kind in MEDIA_KINDS)


@dataclass
class CompileResult:
    """Outcome of a successful compilation."""

    fragments: List[str] = field(default_factory=list)
    symbols: Dict[str, str] = field(default_factory=dict)
    title: Optional[str] = None


class LOLParser:
    """
    Single-pass LOLCODE to HTML translator.

    A parser instance compiles exactly one source text. All errors are fatal
    and raised as :class:`lolhtml.errors.LOLError` subclasses; nothing is
    returned from a failed run.
    """

    def __init__(self, source: str, *, path: str = "") -> None:
        self.source = source
        self.path = path
        self.cursor = TokenCursor(Tokenizer(source, path=path))
        self.state = CompilerState()

    def parse(self) -> CompileResult:
        self.cursor.prime()
        self.program()
        logger.debug(
            "Compiled %s: %d fragments, %d symbols",
            self.path or "<source>",
            len(self.state.fragments),
            len(self.state.symbols),
        )
        return CompileResult(
            fragments=list(self.state.fragments),
            symbols=dict(self.state.symbols),
            title=self.state.title,
        )

    # ====================================================================
    # Token Management
    # ====================================================================

    def current(self) -> Token:
        return self.cursor.peek()

    def advance(self) -> Token:
        return self.cursor.advance()

    def match(self, *kinds: TokenKind) -> bool:
        return self.cursor.at(*kinds)

    def at_end(self) -> bool:
        return self.cursor.at_end()

    def expect(self, keyword: TokenKind) -> Token:
        """Consume the current token if it is ``keyword``; fail otherwise."""
        if not self.match(keyword):
            raise self.error([keyword.value])
        return self.advance()

    def error(
        self,
        expected: Sequence[str] = (),
        *,
        description: Optional[str] = None,
    ) -> LOLSyntaxError:
        """Create a syntax error at the current token."""
        token = self.current()
        hint = None
        if token.kind is TokenKind.TEXT:
            suggestion = suggest_keyword(token.text)
            if suggestion is not None and suggestion in expected:
                hint = f"Did you mean '{suggestion}' ({get_keyword_description(suggestion)})?"
        return LOLSyntaxError(
            token.text,
            expected,
            description=description,
            path=self.path or None,
            line=token.line,
            column=token.column,
            hint=hint,
        )

    def _collect_until(self, terminator: TokenKind) -> List[str]:
        """Consume tokens up to (not including) ``terminator`` or end of input."""
        words: List[str] = []
        while not self.match(terminator) and not self.at_end():
            words.append(self.advance().text)
        return words

    # ====================================================================
    # Grammar Rules
    # ====================================================================

    def program(self) -> None:
        self.comments()
        self.expect(TokenKind.HAI)
        self.comments()
        self.head()
        self.body()
        self.comments()
        self.expect(TokenKind.KTHXBYE)
        self.comments()
        if not self.at_end():
            raise self.error(description="the end of the file")

    def comments(self) -> None:
        while self.match(TokenKind.OBTW):
            self.advance()
            skipped = self._collect_until(TokenKind.TLDR)
            if self.match(TokenKind.TLDR):
                self.advance()
            logger.debug("Skipped comment of %d words", len(skipped))

    def head(self) -> None:
        if not self.match(TokenKind.MAEK):
            return
        self.advance()
        if not self.match(TokenKind.HEAD):
            # MAEK already consumed; this is the first body block.
            self.make_block()
            return
        self.advance()
        if self.match(TokenKind.GIMMEH):
            self.advance()
            self.expect(TokenKind.TITLE)
            words = self._collect_until(TokenKind.MKAY)
            self.expect(TokenKind.MKAY)
            self.state.title = " ".join(words)
            logger.debug("Captured title %r", self.state.title)
        self.expect(TokenKind.OIC)

    def body(self) -> None:
        while not self.at_end() and not self.match(TokenKind.KTHXBYE):
            kind = self.current().kind
            if kind is TokenKind.OBTW:
                self.comments()
            elif kind is TokenKind.MAEK:
                self.paragraph_or_list()
            elif kind is TokenKind.GIMMEH:
                self.media_or_text()
            elif kind in (TokenKind.I, TokenKind.LEMME):
                self.variable_statement()
            else:
                self.advance()

    def paragraph_or_list(self) -> None:
        self.expect(TokenKind.MAEK)
        self.make_block()

    def make_block(self) -> None:
        if self.match(TokenKind.PARAGRAF):
            self.advance()
            count = 0
            while not self.match(TokenKind.OIC) and not self.at_end():
                # One paragraph per word.
                self.state.emit(f"<p>{html.escape(self.advance().text)}</p>")
                count += 1
            self.expect(TokenKind.OIC)
            logger.debug("Emitted paragraph block with %d paragraphs", count)
        elif self.match(TokenKind.LIST):
            self.advance()
            self.state.emit("<ul>")
            while self.match(TokenKind.ITEM):
                self.advance()
                self.state.emit(f"<li>{html.escape(self.advance().text)}</li>")
            self.state.emit("</ul>")
            self.expect(TokenKind.OIC)
            logger.debug("Emitted list block")
        else:
            raise self.error([TokenKind.PARAGRAF.value, TokenKind.LIST.value])

    def media_or_text(self) -> None:
        self.expect(TokenKind.GIMMEH)
        media = self.advance()
        content = html.escape(" ".join(self._collect_until(TokenKind.MKAY)))

        if media.kind not in MEDIA_KINDS:
            raise LOLSyntaxError(
                media.text.upper(),
                description="a media keyword",
                hint=f"Use one of {format_keyword_list(_MEDIA_NAMES)}",
                path=self.path or None,
                line=media.line,
                column=media.column,
            )
        self.state.emit(_MEDIA_TEMPLATES[media.kind].format(content=content))
        self.expect(TokenKind.MKAY)
        logger.debug("Emitted %s element", media.kind.value)

    def variable_statement(self) -> None:
        first = self.advance()
        if first.kind is TokenKind.I:
            if not self.match(TokenKind.HAZ):
                return
            self.advance()
            name = self.advance().text
            value: Optional[str] = None
            if self.match(TokenKind.ITZ):
                self.advance()
                value = self.advance().text
            self.expect(TokenKind.MKAY)
            if value is not None:
                self.declare_symbol(name, value)
        elif first.kind is TokenKind.LEMME:
            if not self.match(TokenKind.SEE):
                return
            self.advance()
            self.check_reference(self.current())
            self.advance()
            self.expect(TokenKind.MKAY)

    # ====================================================================
    # Symbol Table Management
    # ====================================================================

    def declare_symbol(self, name: str, value: str) -> None:
        if self.state.is_declared(name):
            logger.debug("Redeclaring variable %r", name)
        self.state.declare(name, value)

    def check_reference(self, token: Token) -> None:
        if not self.state.is_declared(token.text):
            raise LOLSemanticError(
                token.text,
                path=self.path or None,
                line=token.line,
                column=token.column,
            )


def compile_source(source: str, *, path: str = "") -> CompileResult:
    """
    Compile LOLCODE markup into HTML fragments.

    Args:
        source: Source text, already read into memory
        path: Optional file path used in diagnostics

    Returns:
        CompileResult with the fragments in emission order, the final symbol
        table and the head title (if any)

    Raises:
        LOLUserError: If the source contains no tokens
        LOLLexicalError: If a consumed token has disallowed characters
        LOLSyntaxError: If the token stream does not fit the grammar
        LOLSemanticError: If a variable is checked before it is declared

    Example:
        >>> compile_source("HAI MAEK PARAGRAF hello OIC KTHXBYE").fragments
        ['<p>hello</p>']
    """
    return LOLParser(source, path=path).parse()


__all__ = ["CompileResult", "LOLParser", "compile_source"]
