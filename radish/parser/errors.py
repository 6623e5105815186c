"""
Error handling for the Radish parser.

Syntax errors are fatal to the current parse: the parser raises a
ParseError carrying a Diagnostic and no partial tree is returned.

Author: Radish developers
"""

from typing import Optional, List

from ..lexer.source import Span
from ..lexer.tokens import Token, TokenType
from ..lexer.errors import Diagnostic


class ParseError(Exception):
    """
    Exception raised when the parser encounters a fatal syntax error.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        span: Span,
        token: Optional[Token] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.message = message
        self.diagnostic = Diagnostic(
            message=message,
            span=span,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )
        self.token = token

    @property
    def span(self) -> Span:
        return self.diagnostic.span

    def __str__(self) -> str:
        return str(self.diagnostic)


# Common parser error codes for categorization
PARSER_ERROR_CODES = {
    "P001": "Unexpected token",
    "P002": "Expected token not found",
    "P003": "Unexpected trailing input",
    "P004": "Expression nested too deeply",
}

_TOKEN_SUGGESTIONS = {
    TokenType.RIGHT_PAREN: ["Add a closing parenthesis ')'"],
}


def describe_token(token: Token) -> str:
    """Name a token the way diagnostics mention it."""
    if token.type == TokenType.EOF:
        return token.type.description
    return f"{token.type.name} '{token.text}'"


def create_unexpected_token_error(found: Token) -> ParseError:
    """Create an error for a token that cannot start an expression."""
    if found.type == TokenType.IDENT:
        help_text = "Variables are not supported; expressions are built from numbers and booleans."
    elif found.type == TokenType.EOF:
        help_text = "The input ended where an expression was expected."
    else:
        help_text = "Expected a number, 'true', 'false', '(' or '-'."

    return ParseError(
        message=f"Unexpected token: {describe_token(found)}",
        span=found.span,
        token=found,
        code="P001",
        help_text=help_text,
    )


def create_missing_token_error(expected: TokenType, message: str, found: Token) -> ParseError:
    """Create an error for an expected token that is absent."""
    return ParseError(
        message=message,
        span=found.span,
        token=found,
        code="P002",
        help_text=f"Found {describe_token(found)} instead.",
        suggestions=_TOKEN_SUGGESTIONS.get(expected),
    )


def create_trailing_input_error(found: Token) -> ParseError:
    """Create an error for tokens left over after a complete expression."""
    return ParseError(
        message=f"Unexpected trailing input: {describe_token(found)}",
        span=found.span,
        token=found,
        code="P003",
        help_text="Only a single expression is allowed.",
        suggestions=["Join the expressions with an operator such as '+'"],
    )


def create_nesting_too_deep_error(token: Token, limit: int) -> ParseError:
    """Create an error for parentheses or unary minus nested past the limit."""
    return ParseError(
        message="Expression nested too deeply",
        span=token.span,
        token=token,
        code="P004",
        help_text=f"Parentheses and unary minus may nest at most {limit} levels.",
    )
