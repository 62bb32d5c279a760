"""
LOLCODE keyword vocabulary and token classification.

This module is the single source of truth for the fixed keyword set, the
token validity predicate and the per-token kind classification used by the
parser.

**Usage:**
    from lolhtml.lang.keywords import TokenKind, classify, is_valid_word

    kind = classify("maek")          # TokenKind.MAEK
    is_valid_word("https://a.b/c")   # True
    is_valid_word("<script>")        # False
"""

from __future__ import annotations

import difflib
from enum import Enum
from typing import Dict, FrozenSet, List, Optional


class TokenKind(Enum):
    """Classification computed once per token.

    Every keyword has its own member; anything else that passes the validity
    predicate is ``TEXT``. ``EOF`` marks the end-of-stream sentinel.
    """

    HAI = "HAI"
    KTHXBYE = "KTHXBYE"
    OBTW = "OBTW"
    TLDR = "TLDR"
    MAEK = "MAEK"
    OIC = "OIC"
    GIMMEH = "GIMMEH"
    MKAY = "MKAY"
    HEAD = "HEAD"
    TITLE = "TITLE"
    PARAGRAF = "PARAGRAF"
    BOLD = "BOLD"
    ITALICS = "ITALICS"
    LIST = "LIST"
    ITEM = "ITEM"
    NEWLINE = "NEWLINE"
    SOUNDZ = "SOUNDZ"
    VIDZ = "VIDZ"
    I = "I"  # noqa: E741
    HAZ = "HAZ"
    ITZ = "ITZ"
    LEMME = "LEMME"
    SEE = "SEE"

    TEXT = "TEXT"
    EOF = "EOF"

    @property
    def is_keyword(self) -> bool:
        return self not in (TokenKind.TEXT, TokenKind.EOF)


# ============================================================================
# Keyword sets
# ============================================================================

KEYWORDS: FrozenSet[str] = frozenset(
    kind.value for kind in TokenKind if kind.is_keyword
)

MEDIA_KINDS: FrozenSet[TokenKind] = frozenset({
    TokenKind.BOLD,
    TokenKind.ITALICS,
    TokenKind.NEWLINE,
    TokenKind.SOUNDZ,
    TokenKind.VIDZ,
})

# Punctuation allowed inside free text (URLs, prose) besides alphanumerics.
TEXT_PUNCTUATION: FrozenSet[str] = frozenset("-/:.,?")

KEYWORD_DESCRIPTIONS: Dict[str, str] = {
    "HAI": "Program start",
    "KTHXBYE": "Program end",
    "OBTW": "Comment start",
    "TLDR": "Comment end",
    "MAEK": "Create a HEAD, PARAGRAF or LIST block",
    "OIC": "Block end",
    "GIMMEH": "Insert a title or a media tag",
    "MKAY": "Statement end",
    "HEAD": "Document head block",
    "TITLE": "Document title",
    "PARAGRAF": "Paragraph block",
    "BOLD": "Bold text",
    "ITALICS": "Italic text",
    "LIST": "Unordered list block",
    "ITEM": "List item",
    "NEWLINE": "Line break",
    "SOUNDZ": "Audio element",
    "VIDZ": "Video link",
    "I": "Variable declaration (I HAZ)",
    "HAZ": "Variable declaration (I HAZ)",
    "ITZ": "Variable value",
    "LEMME": "Variable check (LEMME SEE)",
    "SEE": "Variable check (LEMME SEE)",
}


# ============================================================================
# Classification and validation
# ============================================================================

_KIND_BY_WORD: Dict[str, TokenKind] = {kind.value: kind for kind in TokenKind if kind.is_keyword}


def classify(word: str) -> TokenKind:
    """
    Classify a word as a keyword kind or plain text.

    Matching is case-insensitive. The empty string is the end-of-stream
    sentinel.

    Examples:
        >>> classify("Kthxbye")
        <TokenKind.KTHXBYE: 'KTHXBYE'>
        >>> classify("hello")
        <TokenKind.TEXT: 'TEXT'>
    """
    if word == "":
        return TokenKind.EOF
    return _KIND_BY_WORD.get(word.upper(), TokenKind.TEXT)


def is_keyword(word: str) -> bool:
    return word.upper() in KEYWORDS


def is_valid_word(word: str) -> bool:
    """
    Check whether a word is an acceptable token.

    A word is valid when it is a keyword (any case) or every character is
    alphanumeric or one of ``-/:.,?``.

    Examples:
        >>> is_valid_word("gimmeh")
        True
        >>> is_valid_word("http://example.com/a.mp3")
        True
        >>> is_valid_word("hello!")
        False
    """
    if is_keyword(word):
        return True
    return all(ch.isalnum() or ch in TEXT_PUNCTUATION for ch in word)


def suggest_keyword(word: str) -> Optional[str]:
    """
    Suggest the closest keyword for a misspelled word.

    Examples:
        >>> suggest_keyword("PARAGRAPH")
        'PARAGRAF'
        >>> suggest_keyword("zzz") is None
        True
    """
    matches = difflib.get_close_matches(word.upper(), sorted(KEYWORDS), n=1, cutoff=0.75)
    return matches[0] if matches else None


def get_keyword_description(word: str) -> Optional[str]:
    return KEYWORD_DESCRIPTIONS.get(word.upper())


def format_keyword_list(keywords: List[str], max_items: int = 10) -> str:
    """
    Format a list of keywords for display in error messages.

    Examples:
        >>> format_keyword_list(['BOLD', 'ITALICS'])
        'BOLD, ITALICS'
    """
    if len(keywords) <= max_items:
        return ', '.join(keywords)

    shown = ', '.join(keywords[:max_items])
    return f"{shown}, ... ({len(keywords)} total)"


__all__ = [
    "TokenKind",
    "KEYWORDS",
    "MEDIA_KINDS",
    "TEXT_PUNCTUATION",
    "KEYWORD_DESCRIPTIONS",
    "classify",
    "is_keyword",
    "is_valid_word",
    "suggest_keyword",
    "get_keyword_description",
    "format_keyword_list",
]
