"""
Error handling for the Radish scanner.

Provides diagnostics with span information so callers can report lexical
failures without the scanner performing any output itself.

Author: Radish developers
"""

from typing import Optional, List
from dataclasses import dataclass

from .source import Span


@dataclass
class Diagnostic:
    """Base class for front-end diagnostics (errors, warnings, info)."""
    message: str
    span: Span
    severity: str  # "error", "warning", "info", "hint"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> {self.span}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result

    def render_source_line(self) -> str:
        """
        Render the source line containing the span with a caret underline.

        Widths are counted in graphemes, so the underline lines up for
        multi-codepoint characters as long as the terminal draws each
        grapheme in one cell.
        """
        graphemes = self.span.source.graphemes
        line_start = self.span.start
        while line_start > 0 and graphemes[line_start - 1] not in ('\n', '\r\n'):
            line_start -= 1
        line_end = self.span.start
        while line_end < len(graphemes) and graphemes[line_end] not in ('\n', '\r\n'):
            line_end += 1

        line = ''.join(graphemes[line_start:line_end])
        width = max(1, min(self.span.end, line_end) - self.span.start)
        marker = ' ' * (self.span.start - line_start) + '^' * width
        return f"  | {line}\n  | {marker}\n"


class LexerError(Exception):
    """
    Exception raised when lexical diagnostics must stop a caller.

    The scanner itself never raises this; it emits ERROR tokens. The
    convenience helpers raise it to refuse input with lexical errors.
    """

    def __init__(
        self,
        message: str,
        span: Span,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            span=span,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @classmethod
    def from_diagnostic(cls, diagnostic: Diagnostic) -> "LexerError":
        return cls(
            diagnostic.message,
            diagnostic.span,
            code=diagnostic.code,
            help_text=diagnostic.help_text,
            suggestions=diagnostic.suggestions,
        )

    @property
    def span(self) -> Span:
        return self.diagnostic.span

    def __str__(self) -> str:
        return str(self.diagnostic)


# Common error codes for categorization
ERROR_CODES = {
    "L001": "Unexpected character",
}

# ASCII look-alikes people paste from word processors and math fonts
_LOOKALIKES = {
    '−': '-',   # MINUS SIGN
    '–': '-',   # EN DASH
    '×': '*',   # MULTIPLICATION SIGN
    '⋅': '*',   # DOT OPERATOR
    '÷': '/',   # DIVISION SIGN
    '∕': '/',   # DIVISION SLASH
    '（': '(',   # FULLWIDTH LEFT PARENTHESIS
    '）': ')',   # FULLWIDTH RIGHT PARENTHESIS
    '＋': '+',   # FULLWIDTH PLUS SIGN
}


def suggest_ascii_alternative(grapheme: str) -> List[str]:
    """Suggest the ASCII operator a Unicode look-alike was probably meant to be."""
    replacement = _LOOKALIKES.get(grapheme)
    return [replacement] if replacement else []


def create_unexpected_character_error(grapheme: str, span: Span) -> Diagnostic:
    """Create the diagnostic for a grapheme the scanner cannot classify."""
    suggestions = suggest_ascii_alternative(grapheme)
    help_text = None

    if suggestions:
        help_text = f"Did you mean '{suggestions[0]}'?"
    elif grapheme == '\n' or grapheme == '\r\n':
        help_text = "Line breaks are not allowed inside an expression."
    elif not grapheme.isprintable():
        codepoints = ' '.join(f"U+{ord(c):04X}" for c in grapheme)
        help_text = f"Non-printable character ({codepoints}) is not allowed."

    return Diagnostic(
        message=f"Unexpected character: '{grapheme}'",
        span=span,
        severity="error",
        code="L001",
        help_text=help_text,
        suggestions=suggestions or None,
    )
