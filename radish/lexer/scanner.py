"""
Radish Scanner - turns source text into tokens on demand.

The scanner walks the grapheme clusters of a Source one at a time, so a
glyph made of several code points always occupies exactly one position.
Unrecognized graphemes become ERROR tokens and scanning carries on, which
lets a single pass report every lexical problem in the input.

Author: Radish developers
"""

from typing import Iterator, List, Optional, Union

from .source import Source, Span
from .tokens import Token, TokenType, OPERATORS, KEYWORDS, WHITESPACE
from .errors import LexerError, create_unexpected_character_error


class Scanner:
    """
    Radish lexical analyzer.

    Produces one token per call to :meth:`scan_token`. ``current`` is the
    grapheme index of the next unread cluster and ``previous`` the start of
    the token being built.
    """

    def __init__(self, source: Union[Source, str], filename: str = "<string>"):
        """
        Initialize the scanner with source code.

        Args:
            source: A Source, or raw text to wrap in one
            filename: Name used for diagnostics when ``source`` is raw text
        """
        if not isinstance(source, Source):
            source = Source(source, filename)
        self.source = source
        self.current = 0
        self.previous = 0
        self.errors: List[LexerError] = []

    def scan_token(self) -> Token:
        """Scan and return the next token. Returns EOF forever once exhausted."""
        self._skip_whitespace()
        self.previous = self.current

        grapheme = self._advance()
        if grapheme is None:
            return self._make_token(TokenType.EOF)

        token_type = OPERATORS.get(grapheme)
        if token_type is not None:
            return self._make_token(token_type)

        if _is_alpha(grapheme):
            return self._identifier()

        if _is_digit(grapheme):
            return self._number()

        return self._error_token(grapheme)

    def peek(self) -> Optional[str]:
        """Return the next unread grapheme without consuming it."""
        if self.current >= len(self.source):
            return None
        return self.source.grapheme(self.current)

    def tokens(self) -> Iterator[Token]:
        """Yield tokens up to and including EOF."""
        while True:
            token = self.scan_token()
            yield token
            if token.type == TokenType.EOF:
                return

    __iter__ = tokens

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source from the beginning.

        Returns:
            List of tokens including ERROR tokens and the final EOF token
        """
        self.current = 0
        self.previous = 0
        self.errors.clear()
        return list(self.tokens())

    def has_errors(self) -> bool:
        """Check if the scanner produced any ERROR tokens."""
        return len(self.errors) > 0

    def _identifier(self) -> Token:
        while self.peek() is not None and _is_alpha(self.peek()):
            self._advance()

        lexeme = self.source.slice(self.previous, self.current)
        return self._make_token(KEYWORDS.get(lexeme, TokenType.IDENT))

    def _number(self) -> Token:
        while self.peek() is not None and _is_digit(self.peek()):
            self._advance()

        return self._make_token(TokenType.NUMBER)

    def _make_token(self, token_type: TokenType) -> Token:
        span = Span(self.source, self.previous, self.current)
        return Token(token_type, span.text, span)

    def _error_token(self, grapheme: str) -> Token:
        span = Span(self.source, self.previous, self.current)
        diagnostic = create_unexpected_character_error(grapheme, span)
        self.errors.append(LexerError.from_diagnostic(diagnostic))
        return Token(TokenType.ERROR, diagnostic.message, span, diagnostic)

    def _advance(self) -> Optional[str]:
        grapheme = self.peek()
        if grapheme is not None:
            self.current += 1
        return grapheme

    def _skip_whitespace(self):
        while self.peek() is not None and self.peek() in WHITESPACE:
            self._advance()


def _is_alpha(grapheme: str) -> bool:
    """ASCII letter or underscore, as a whole grapheme cluster."""
    return grapheme.isascii() and (grapheme.isalpha() or grapheme == '_')


def _is_digit(grapheme: str) -> bool:
    return grapheme.isascii() and grapheme.isdigit()


def tokenize_string(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting

    Returns:
        List of tokens

    Raises:
        LexerError: If the source contains an unexpected character
    """
    scanner = Scanner(source, filename)
    tokens = scanner.tokenize()

    if scanner.has_errors():
        # Raise the first error encountered
        raise scanner.errors[0]

    return tokens


def tokenize_file(filepath: str) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Raises:
        LexerError: If the file contains an unexpected character
        OSError: If the file cannot be read
    """
    scanner = Scanner(Source.from_file(filepath))
    tokens = scanner.tokenize()

    if scanner.has_errors():
        raise scanner.errors[0]

    return tokens
