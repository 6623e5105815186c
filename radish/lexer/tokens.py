"""
Token definitions for the Radish scanner.

This module defines the token types produced by the scanner and the
lookup tables it uses to classify grapheme clusters:
- Single-grapheme operators and punctuation
- Keywords (boolean literals)
- The whitespace allow-list

Author: Radish developers
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING

from .source import Span

if TYPE_CHECKING:
    from .errors import Diagnostic


class TokenType(Enum):
    """Enumeration of all token types in Radish."""

    # Operators
    PLUS = auto()                   # +
    MINUS = auto()                  # -
    STAR = auto()                   # *
    SLASH = auto()                  # /

    # Punctuation
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )

    # Literals and names
    NUMBER = auto()                 # 42
    IDENT = auto()                  # radishes
    TRUE = auto()                   # true
    FALSE = auto()                  # false

    # Special tokens
    ERROR = auto()                  # Unrecognized grapheme
    EOF = auto()                    # End of input

    @property
    def description(self) -> str:
        """Human readable name used in diagnostics."""
        return _DESCRIPTIONS.get(self, self.name)


_DESCRIPTIONS = {
    TokenType.EOF: "end of input",
    TokenType.NUMBER: "number",
    TokenType.IDENT: "identifier",
    TokenType.ERROR: "invalid character",
}


@dataclass(frozen=True)
class Token:
    """
    A classified lexeme with its literal text and span.

    For ERROR tokens ``text`` holds the diagnostic message and ``diagnostic``
    holds the structured form of the same failure.
    """
    type: TokenType
    text: str
    span: Span
    diagnostic: Optional["Diagnostic"] = None

    def __str__(self) -> str:
        return f"{self.type.name}({self.text!r})"

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.text!r}, {self.span!r})"

    @property
    def is_literal(self) -> bool:
        """Check if this token is a literal value."""
        return self.type in {TokenType.NUMBER, TokenType.TRUE, TokenType.FALSE}

    @property
    def is_operator(self) -> bool:
        """Check if this token is an arithmetic operator."""
        return self.type in {TokenType.PLUS, TokenType.MINUS,
                             TokenType.STAR, TokenType.SLASH}


# Lookup tables used by the scanner for classification

OPERATORS = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.STAR,
    "/": TokenType.SLASH,
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
}

KEYWORDS = {
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
}

# A fixed allow-list, not the Unicode White_Space property.
WHITESPACE = frozenset({
    "\u0009",   # tab
    "\u000B",   # vertical tab
    "\u000C",   # form feed
    "\u000D",   # carriage return
    "\u0020",   # space
    "\u0085",   # NEXT LINE
    "\u200E",   # LEFT-TO-RIGHT MARK
    "\u200F",   # RIGHT-TO-LEFT MARK
    "\u2028",   # LINE SEPARATOR
    "\u2029",   # PARAGRAPH SEPARATOR
})
