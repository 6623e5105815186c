"""
Radish Parser Package

Implements a recursive descent parser for Radish expressions.
Produces AST nodes annotated with grapheme-indexed source spans.

Key Features:
- One token of lookahead, no backtracking
- Left-associative '+'/'-' and '*'/'/' levels, unary minus at factor level
- Composite spans computed from child spans
- Structured ParseError diagnostics instead of console output

Author: Radish developers
"""

from .ast_nodes import (
    AST, ASTNode, ASTNodeType, ASTVisitor,
    BinaryExpr, Literal, LiteralKind, Op, ParenExpr, UnaryExpr,
)
from .parser import Parser, parse_string, parse_file, MAX_NESTING_DEPTH
from .errors import ParseError

__all__ = [
    # Core parser
    "Parser", "parse_string", "parse_file", "MAX_NESTING_DEPTH",

    # AST nodes
    "AST", "ASTNode", "ASTNodeType", "ASTVisitor",
    "Literal", "LiteralKind", "BinaryExpr", "UnaryExpr", "ParenExpr", "Op",

    # Error handling
    "ParseError",
]
