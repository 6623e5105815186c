"""
Source text and grapheme-indexed spans for the Radish front-end.

All offsets in Radish count extended grapheme clusters (user-perceived
characters), not bytes or code points. A base letter followed by a combining
accent is one position, so spans stay correct for any UTF-8 input.

Author: Radish developers
"""

from dataclasses import dataclass, field
from typing import Tuple

import regex


_GRAPHEME_PATTERN = regex.compile(r'\X')


class Source:
    """
    Immutable source text shared by every Span and Token derived from it.

    The grapheme clusters are segmented once up front; spans only store
    indices into that sequence and never copy text.
    """

    __slots__ = ("_text", "_graphemes", "_name")

    def __init__(self, text: str, name: str = "<string>"):
        self._text = text
        self._graphemes: Tuple[str, ...] = tuple(_GRAPHEME_PATTERN.findall(text))
        self._name = name

    @classmethod
    def from_file(cls, path: str) -> "Source":
        """Read a UTF-8 file into a Source named after its path."""
        with open(path, 'r', encoding='utf-8') as f:
            return cls(f.read(), path)

    @property
    def text(self) -> str:
        return self._text

    @property
    def name(self) -> str:
        return self._name

    @property
    def graphemes(self) -> Tuple[str, ...]:
        return self._graphemes

    def grapheme(self, index: int) -> str:
        """Return the grapheme cluster at ``index``."""
        return self._graphemes[index]

    def slice(self, start: int, end: int) -> str:
        """Return the text covered by grapheme indices ``[start, end)``."""
        return ''.join(self._graphemes[start:end])

    def __len__(self) -> int:
        return len(self._graphemes)

    def __repr__(self) -> str:
        return f"Source({self._name!r}, {len(self._graphemes)} graphemes)"


@dataclass(frozen=True)
class Span:
    """
    Half-open range ``[start, end)`` of grapheme indices into a Source.

    Spans carry no semantic weight; they exist for diagnostics and for
    computing the extent of composite expressions.
    """
    source: Source = field(compare=False)
    start: int
    end: int

    def __post_init__(self):
        if not 0 <= self.start <= self.end <= len(self.source):
            raise ValueError(
                f"invalid span [{self.start}, {self.end}) for source of "
                f"length {len(self.source)}"
            )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Span):
            return NotImplemented
        return (self.source is other.source and
                self.start == other.start and self.end == other.end)

    def __hash__(self) -> int:
        return hash((id(self.source), self.start, self.end))

    def __len__(self) -> int:
        return self.end - self.start

    @property
    def text(self) -> str:
        """The source text this span covers."""
        return self.source.slice(self.start, self.end)

    def merge(self, other: "Span") -> "Span":
        """Span from the start of ``self`` to the end of ``other``."""
        if other.source is not self.source:
            raise ValueError("cannot merge spans from different sources")
        return Span(self.source, self.start, other.end)

    def line_col(self) -> Tuple[int, int]:
        """1-based line and column of ``start``, counted in graphemes."""
        line, column = 1, 1
        for grapheme in self.source.graphemes[:self.start]:
            if grapheme in ('\n', '\r\n'):
                line += 1
                column = 1
            else:
                column += 1
        return line, column

    def __str__(self) -> str:
        line, column = self.line_col()
        return f"{self.source.name}:{line}:{column}"

    def __repr__(self) -> str:
        return f"Span({self.start}, {self.end})"
