"""Unified error model for lolhtml.

Every error the compiler can detect is fatal. Each class carries the
offending token (where there is one) plus an optional source location, and
renders a single diagnostic line through :meth:`LOLError.format`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence


@dataclass
class ErrorLocation:
    path: Optional[str] = None
    line: Optional[int] = None
    column: Optional[int] = None

    def describe(self) -> str:
        """``path:line:column`` with missing parts left out; empty if nothing is known."""
        parts = [self.path] if self.path else []
        if self.line is not None:
            parts.append(str(self.line))
            if self.column is not None:
                parts.append(str(self.column))
        return ":".join(parts)


class LOLError(Exception):
    """Base class for all compiler errors surfaced to users.

    Subclasses fix ``code`` and build the message from the offending token.
    """

    code: str = "LOL_ERROR"

    def __init__(
        self,
        message: str,
        *,
        path: Optional[str] = None,
        line: Optional[int] = None,
        column: Optional[int] = None,
        hint: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.path = path
        self.line = line
        self.column = column
        self.hint = hint

    @property
    def location(self) -> ErrorLocation:
        return ErrorLocation(self.path, self.line, self.column)

    def format(self) -> str:
        """The single diagnostic line: ``message (where; CODE) Hint: ...``."""
        meta = "; ".join(part for part in (self.location.describe(), self.code) if part)
        text = f"{self.message} ({meta})"
        if self.hint:
            text = f"{text} Hint: {self.hint}"
        return text


class LOLUserError(LOLError):
    """Raised when there is nothing to compile."""

    code = "USER_ERROR"

    def __init__(self, message: str = "A user error was encountered. The file is empty.", **kwargs) -> None:
        super().__init__(message, **kwargs)


class LOLLexicalError(LOLError):
    """Raised when a token contains characters outside the accepted set."""

    code = "LEXICAL_ERROR"

    def __init__(self, token: str, **kwargs) -> None:
        super().__init__(
            f"A lexical error was encountered. '{token}' is not a recognized token.",
            **kwargs,
        )
        self.token = token


class LOLSyntaxError(LOLError):
    """Raised when the current token does not fit the grammar.

    ``expected`` lists the keywords the parser would have accepted; when a
    whole class of keywords was acceptable, ``description`` names the class
    instead (e.g. "a media keyword"). ``found`` is the token text actually
    seen; end of input is reported as an empty string.
    """

    code = "SYNTAX_ERROR"

    def __init__(
        self,
        found: str,
        expected: Sequence[str] = (),
        *,
        description: Optional[str] = None,
        **kwargs,
    ) -> None:
        wanted = description or " or ".join(f"'{keyword}'" for keyword in expected)
        super().__init__(
            f"A syntax error was encountered. '{found}' was found when {wanted} was expected.",
            **kwargs,
        )
        self.found = found
        self.expected: List[str] = list(expected)
        self.description = description


class LOLSemanticError(LOLError):
    """Raised when a variable is read before it was declared."""

    code = "SEMANTIC_ERROR"

    def __init__(self, name: str, **kwargs) -> None:
        super().__init__(
            f"A semantic error was encountered. The variable '{name}' was used before being defined.",
            **kwargs,
        )
        self.name = name


__all__ = [
    "ErrorLocation",
    "LOLError",
    "LOLUserError",
    "LOLLexicalError",
    "LOLSyntaxError",
    "LOLSemanticError",
]
