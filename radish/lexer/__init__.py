"""
Radish Lexer Package

Implements the grapheme-aware scanner for the Radish language.

Key Features:
- Offsets counted in extended grapheme clusters, never bytes
- On-demand token stream with single-token lookahead
- Lexical errors surface as ERROR tokens; scanning continues past them
- Spans share the Source instead of copying text

Author: Radish developers
"""

from .source import Source, Span
from .tokens import Token, TokenType
from .scanner import Scanner, tokenize_string, tokenize_file
from .errors import Diagnostic, LexerError

__all__ = [
    "Scanner",
    "Source",
    "Span",
    "Token",
    "TokenType",
    "Diagnostic",
    "LexerError",
    "tokenize_string",
    "tokenize_file",
]
