"""
Radish Front-End Package

Scanner, parser and runtime value model for the Radish language.

Architecture:
    radish/
    ├── lexer/           # Grapheme-aware scanning, sources and spans
    ├── parser/          # Recursive descent parsing and AST generation
    ├── runtime/         # Tagged values, operator semantics, evaluator
    ├── config.py        # Settings for the command line host
    └── cli.py           # `radish` command

Author: Radish developers
License: MIT
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .lexer import Scanner, Source, Span, Token, TokenType, LexerError
from .parser import Parser, AST, ParseError
from .runtime import Value, ValueType, Function, Evaluator, RadishRuntimeError

__all__ = [
    # Core classes
    "Source",
    "Span",
    "Scanner",
    "Token",
    "TokenType",
    "Parser",
    "AST",
    "Value",
    "ValueType",
    "Function",
    "Evaluator",

    # Errors
    "LexerError",
    "ParseError",
    "RadishRuntimeError",

    # Version info
    "__version__",
    "__license__",
]
