"""
Radish Recursive Descent Parser

Consumes the scanner's token stream with one token of lookahead and builds
the expression AST. Grammar, lowest precedence first:

    sum    := term (('+' | '-') term)*
    term   := factor (('*' | '/') factor)*
    factor := NUMBER | TRUE | FALSE | '(' sum ')' | '-' factor

Both binary levels are left associative; unary minus binds at factor level,
so ``-1 + 2`` is ``(-1) + 2``. Parentheses and unary minus together may
nest at most MAX_NESTING_DEPTH levels; deeper input is a ParseError.

Author: Radish developers
"""

from typing import List, Optional, Union

from ..lexer.source import Source
from ..lexer.tokens import Token, TokenType
from ..lexer.scanner import Scanner
from ..lexer.errors import Diagnostic, LexerError
from .ast_nodes import AST, ASTNode, BinaryExpr, Literal, Op, ParenExpr, UnaryExpr
from .errors import (
    ParseError, create_unexpected_token_error, create_missing_token_error,
    create_trailing_input_error, create_nesting_too_deep_error
)


# Token types that continue each binary precedence level
SUM_OPERATORS = {
    TokenType.PLUS: Op.ADD,
    TokenType.MINUS: Op.SUBTRACT,
}

TERM_OPERATORS = {
    TokenType.STAR: Op.MULTIPLY,
    TokenType.SLASH: Op.DIVIDE,
}

# Parentheses and unary minus recurse; deeper input is rejected
MAX_NESTING_DEPTH = 200


class Parser:
    """
    Radish recursive descent parser.

    Lexical ERROR tokens are skipped while advancing and recorded in
    ``diagnostics``; syntax errors abort the parse with a ParseError.
    """

    def __init__(self, source: Union[Source, str], filename: str = "<string>",
                 require_eof: bool = False):
        """
        Initialize the parser over a source.

        Args:
            source: A Source, or raw text to wrap in one
            filename: Name used for diagnostics when ``source`` is raw text
            require_eof: Reject tokens left over after the expression
        """
        if not isinstance(source, Source):
            source = Source(source, filename)
        self.source = source
        self.scanner = Scanner(source)
        self.require_eof = require_eof
        self.previous: Optional[Token] = None
        self.current: Optional[Token] = None
        self.depth = 0
        self.diagnostics: List[Diagnostic] = []

    def parse(self) -> AST:
        """
        Parse the source into an AST holding a single expression.

        Returns:
            AST whose ``items`` contains the parsed expression

        Raises:
            ParseError: On an unexpected or missing token, or nesting
                deeper than MAX_NESTING_DEPTH
        """
        self.depth = 0
        self._advance()

        expression = self._parse_sum()

        if self.require_eof and not self._check(TokenType.EOF):
            raise create_trailing_input_error(self.current)

        return AST([expression])

    def has_lexical_errors(self) -> bool:
        return len(self.diagnostics) > 0

    # Grammar rules

    def _parse_sum(self) -> ASTNode:
        node = self._parse_term()

        while self.current.type in SUM_OPERATORS:
            op = SUM_OPERATORS[self.current.type]
            self._advance()
            right = self._parse_term()
            node = BinaryExpr.spanning(node, op, right)

        return node

    def _parse_term(self) -> ASTNode:
        node = self._parse_factor()

        while self.current.type in TERM_OPERATORS:
            op = TERM_OPERATORS[self.current.type]
            self._advance()
            right = self._parse_factor()
            node = BinaryExpr.spanning(node, op, right)

        return node

    def _parse_factor(self) -> ASTNode:
        token = self.current

        if token.type == TokenType.NUMBER:
            self._advance()
            return Literal(float(token.text), token.span)

        if token.type == TokenType.TRUE:
            self._advance()
            return Literal(True, token.span)

        if token.type == TokenType.FALSE:
            self._advance()
            return Literal(False, token.span)

        if token.type == TokenType.LEFT_PAREN:
            self._descend(token)
            inner = self._parse_sum()
            close = self._consume(
                TokenType.RIGHT_PAREN, "Expected ')' after grouping expression."
            )
            self.depth -= 1
            return ParenExpr(inner, token.span.merge(close.span))

        if token.type == TokenType.MINUS:
            self._descend(token)
            operand = self._parse_factor()
            self.depth -= 1
            return UnaryExpr(Op.SUBTRACT, operand, token.span.merge(operand.span))

        raise create_unexpected_token_error(token)

    # Utility methods

    def _descend(self, token: Token):
        """Consume a nesting token, failing past MAX_NESTING_DEPTH."""
        self.depth += 1
        if self.depth > MAX_NESTING_DEPTH:
            raise create_nesting_too_deep_error(token, MAX_NESTING_DEPTH)
        self._advance()

    def _advance(self) -> Token:
        """Move to the next non-ERROR token and return the one just left."""
        self.previous = self.current

        while True:
            token = self.scanner.scan_token()
            if token.type != TokenType.ERROR:
                self.current = token
                break
            self.diagnostics.append(token.diagnostic)

        return self.previous

    def _check(self, token_type: TokenType) -> bool:
        return self.current.type == token_type

    def _consume(self, token_type: TokenType, message: str) -> Token:
        """Consume a token of the expected type or raise a ParseError."""
        if self._check(token_type):
            self._advance()
            return self.previous

        raise create_missing_token_error(token_type, message, self.current)


def _parse_checked(parser: Parser) -> AST:
    ast = parser.parse()

    if parser.has_lexical_errors():
        # Raise the first error encountered
        raise LexerError.from_diagnostic(parser.diagnostics[0])

    return ast


def parse_string(source: Union[Source, str], filename: str = "<string>") -> AST:
    """
    Convenience function to parse a source string.

    Args:
        source: Source code string or Source
        filename: Filename for error reporting

    Returns:
        AST

    Raises:
        ParseError: If parsing fails
        LexerError: If the source contains an unexpected character
    """
    return _parse_checked(Parser(source, filename, require_eof=True))


def parse_file(filepath: str) -> AST:
    """
    Convenience function to parse a source file.

    Raises:
        ParseError: If parsing fails
        LexerError: If the file contains an unexpected character
        OSError: If the file cannot be read
    """
    return _parse_checked(Parser(Source.from_file(filepath), require_eof=True))
