"""Tagged text spans.

A Span pairs an opaque semantic tag (typically a token kind) with a Cursor
whose remainder is exactly the spanned text. Spans never copy text; they
carry a cursor over the shared source.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass

from .cursor import CharPredicate, Cursor, LinePredicate

__all__ = ["Span"]


@dataclass(slots=True)
class Span[K]:
    """Semantic tag attached to a cursor over a sub-range of text.

    Every Cursor operation is available on the span itself and acts on the
    embedded cursor, which is also exposed as ``span.cursor``.

    Type Parameters:
        K: The tag type, opaque to this module

    Example:
        >>> cursor = Cursor.from_str("foo bar")
        >>> word = Span("ident", cursor.focus_while(str.isalpha))
        >>> word.text
        'foo'
        >>> word.to_kind("keyword").kind
        'keyword'
    """

    kind: K
    cursor: Cursor

    @classmethod
    def new(cls, kind: K, cursor: Cursor) -> Span[K]:
        return cls(kind, cursor)

    def to_kind[O](self, other_kind: O) -> Span[O]:
        """Same text range under a different tag.

        The new span gets its own copy of the cursor, so advancing one span
        does not move the other.
        """
        return Span(other_kind, self.cursor.copy())

    @property
    def text(self) -> str:
        """Spanned text not yet consumed through this span."""
        return self.cursor.as_str()

    # ------------------------------------------------------------------
    # Cursor forwarding
    # ------------------------------------------------------------------

    @property
    def input(self) -> str:
        return self.cursor.input

    @property
    def end(self) -> int:
        return self.cursor.end

    @property
    def position(self) -> int:
        return self.cursor.position

    @property
    def is_empty(self) -> bool:
        return self.cursor.is_empty

    def as_str(self) -> str:
        return self.cursor.as_str()

    def chars(self) -> Iterator[str]:
        return self.cursor.chars()

    def previous(self) -> str:
        return self.cursor.previous()

    def first(self) -> str | None:
        return self.cursor.first()

    def second(self) -> str | None:
        return self.cursor.second()

    def consume(self) -> str | None:
        return self.cursor.consume()

    def consume_with(self, action: Callable[[Cursor], object]) -> Cursor:
        return self.cursor.consume_with(action)

    def consume_while(self, predicate: CharPredicate) -> Cursor:
        return self.cursor.consume_while(predicate)

    def consume_until(self, predicate: CharPredicate) -> Cursor:
        return self.cursor.consume_until(predicate)

    def consume_line(self) -> Cursor:
        return self.cursor.consume_line()

    def consume_lines_while(self, predicate: LinePredicate) -> Cursor:
        return self.cursor.consume_lines_while(predicate)

    def consume_lines_until(self, predicate: LinePredicate) -> Cursor:
        return self.cursor.consume_lines_until(predicate)

    def focus(self, start: int, end: int) -> Cursor:
        return self.cursor.focus(start, end)

    def focus_with(self, action: Callable[[Cursor], object]) -> Cursor:
        return self.cursor.focus_with(action)

    def focus_char(self) -> Cursor:
        return self.cursor.focus_char()

    def focus_line(self) -> Cursor:
        return self.cursor.focus_line()

    def focus_while(self, predicate: CharPredicate) -> Cursor:
        return self.cursor.focus_while(predicate)

    def focus_until(self, predicate: CharPredicate) -> Cursor:
        return self.cursor.focus_until(predicate)

    def focus_lines_while(self, predicate: LinePredicate) -> Cursor:
        return self.cursor.focus_lines_while(predicate)

    def focus_lines_until(self, predicate: LinePredicate) -> Cursor:
        return self.cursor.focus_lines_until(predicate)

    def compute_line_col(self) -> tuple[int, int]:
        return self.cursor.compute_line_col()
