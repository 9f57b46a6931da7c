"""
Source location tracking for tokens and directives.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Span:
    """
    A location in the source text.

    start/end are UTF-8 byte offsets (end exclusive), line and col are
    1-indexed and point at the first character covered by the span.
    """

    start: int = 0
    end: int = 0
    line: int = 1
    col: int = 1

    @classmethod
    def at(cls, pos: int, line: int, col: int) -> "Span":
        """Create a zero-length span at a position."""
        return cls(start=pos, end=pos, line=line, col=col)

    def merge(self, other: "Span") -> "Span":
        """Combine two spans into one that covers both."""
        return Span(
            start=min(self.start, other.start),
            end=max(self.end, other.end),
            line=min(self.line, other.line),
            col=min(self.col, other.col),
        )

    @property
    def length(self) -> int:
        """Length of the span in bytes."""
        return max(self.end - self.start, 0)

    def __len__(self) -> int:
        return self.length

    @property
    def is_empty(self) -> bool:
        return self.start >= self.end

    def slice(self, source: str) -> str | None:
        """
        Get the text covered by this span.

        Returns None if the span does not fit the source or cuts through
        a multi-byte character.
        """
        data = source.encode("utf-8")
        if self.start > self.end or self.end > len(data):
            return None
        try:
            return data[self.start:self.end].decode("utf-8")
        except UnicodeDecodeError:
            return None

    def __str__(self) -> str:
        return f"line {self.line}, column {self.col}"
