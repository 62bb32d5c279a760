"""LOLCODE markup language: keywords, tokenizer and parser.

Public API:
    compile_source(source, path) -> CompileResult
    LOLParser - the recursive descent parser
    Tokenizer, Token - the pull-based tokenizer
"""

from .keywords import (
    KEYWORDS,
    MEDIA_KINDS,
    TokenKind,
    classify,
    format_keyword_list,
    get_keyword_description,
    is_valid_word,
    suggest_keyword,
)
from .lexer import EOF_TOKEN, Token, Tokenizer, split_words
from .cursor import TokenCursor
from .state import CompilerState
from .parser import CompileResult, LOLParser, compile_source

__all__ = [
    # Keywords
    "KEYWORDS",
    "MEDIA_KINDS",
    "TokenKind",
    "classify",
    "format_keyword_list",
    "get_keyword_description",
    "is_valid_word",
    "suggest_keyword",
    # Tokenizer
    "EOF_TOKEN",
    "Token",
    "Tokenizer",
    "split_words",
    "TokenCursor",
    # Parser
    "CompilerState",
    "CompileResult",
    "LOLParser",
    "compile_source",
]
