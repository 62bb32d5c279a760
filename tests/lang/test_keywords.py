"""Tests for the keyword vocabulary and token classification."""

import pytest

from lolhtml.lang.keywords import (
    KEYWORDS,
    MEDIA_KINDS,
    TokenKind,
    classify,
    format_keyword_list,
    get_keyword_description,
    is_valid_word,
    suggest_keyword,
)


class TestVocabulary:
    """The fixed keyword set."""

    def test_keyword_set_is_complete(self):
        assert KEYWORDS == {
            "HAI", "KTHXBYE", "OBTW", "TLDR", "MAEK", "OIC", "GIMMEH", "MKAY",
            "HEAD", "TITLE", "PARAGRAF", "BOLD", "ITALICS", "LIST", "ITEM",
            "NEWLINE", "SOUNDZ", "VIDZ", "I", "HAZ", "ITZ", "LEMME", "SEE",
        }

    def test_media_kinds(self):
        assert {kind.value for kind in MEDIA_KINDS} == {"BOLD", "ITALICS", "NEWLINE", "SOUNDZ", "VIDZ"}

    def test_text_and_eof_are_not_keywords(self):
        assert not TokenKind.TEXT.is_keyword
        assert not TokenKind.EOF.is_keyword
        assert TokenKind.HAI.is_keyword

    def test_every_keyword_has_a_description(self):
        for keyword in KEYWORDS:
            assert get_keyword_description(keyword)
        assert get_keyword_description("paragraf") == "Paragraph block"
        assert get_keyword_description("meow") is None


class TestClassify:
    """Case-insensitive kind classification."""

    @pytest.mark.parametrize("word", ["HAI", "hai", "Hai", "hAi"])
    def test_keywords_match_any_case(self, word):
        assert classify(word) is TokenKind.HAI

    def test_plain_words_are_text(self):
        assert classify("hello") is TokenKind.TEXT
        assert classify("http://example.com") is TokenKind.TEXT

    def test_empty_string_is_eof(self):
        assert classify("") is TokenKind.EOF


class TestIsValidWord:
    """The token validity predicate."""

    @pytest.mark.parametrize(
        "word",
        ["HAI", "kthxbye", "hello", "abc123", "http://example.com/a.mp3", "what?", "a,b", "x-y", "naïve"],
    )
    def test_valid_words(self, word):
        assert is_valid_word(word)

    @pytest.mark.parametrize(
        "word",
        ["hello!", "<p>", "a&b", "\"quoted\"", "it's", "a_b", "50%", "x=y"],
    )
    def test_invalid_words(self, word):
        assert not is_valid_word(word)


class TestSuggestions:
    """Typo suggestions used in diagnostics."""

    def test_close_misspelling(self):
        assert suggest_keyword("PARAGRAPH") == "PARAGRAF"
        assert suggest_keyword("kthxby") == "KTHXBYE"

    def test_unrelated_word(self):
        assert suggest_keyword("zzz") is None

    def test_format_keyword_list(self):
        assert format_keyword_list(["BOLD", "ITALICS"]) == "BOLD, ITALICS"
        assert format_keyword_list(["A", "B", "C"], max_items=2) == "A, B, ... (3 total)"
