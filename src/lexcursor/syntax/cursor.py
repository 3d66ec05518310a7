"""Cursor infrastructure for lexical scanning.

A Cursor walks an immutable text buffer, tracks its position, and carves
out sub-ranges ("focus" results) without copying the underlying text.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Text is never copied or mutated; cursors share the source string
    - A cursor is a (source, pos, end) triple: cloning copies two integers
    - Exhaustion is never an exception: lookahead and consume return None
    - consume() is the only primitive that advances state
    - Line:column computed on-demand (O(n) only for errors)

Offsets:
    Positions are Python string indices (Unicode code points). A focused
    sub-cursor keeps the full source, so its position is still an offset
    into the original text; only its end is narrowed.

Line Ending Support:
    - LF (Unix, \\n): Fully supported
    - CRLF (Windows, \\r\\n): Supported (\\n is the line delimiter, the \\r
      is stripped from the line text handed to line predicates)
    - CR-only (Classic Mac, \\r): NOT a line delimiter

Pattern Reference:
    - rustc_lexer Cursor
    - Rust str::lines()
"""

from __future__ import annotations

from collections.abc import Callable, Iterator

from lexcursor.constants import START_OF_INPUT_SENTINEL

__all__ = ["CharPredicate", "Cursor", "LineOffsetCache", "LinePredicate", "iter_lines"]

type CharPredicate = Callable[[str], bool]
type LinePredicate = Callable[[str], bool]


def iter_lines(text: str) -> Iterator[str]:
    """Split text into lines the way the cursor's line operations see them.

    Lines end at "\\n". The terminator is not part of the line, and neither
    is a "\\r" directly before it. A final "\\n" does not start an empty
    trailing line.

    Example:
        >>> list(iter_lines("a\\r\\nb\\n\\nc"))
        ['a', 'b', '', 'c']
        >>> list(iter_lines("a\\n"))
        ['a']
        >>> list(iter_lines(""))
        []
    """
    start = 0
    length = len(text)
    while start < length:
        newline = text.find("\n", start)
        if newline == -1:
            yield text[start:]
            return
        line_end = newline - 1 if newline > start and text[newline - 1] == "\r" else newline
        yield text[start:line_end]
        start = newline + 1


class Cursor:
    """Position-tracking view over an immutable source string.

    Holds the complete source text and a movable remainder view
    ``source[pos:end]``. Full cursors have ``end == len(source)``; focused
    sub-cursors share the same source with a narrower end.

    Mutability Note:
        Intentionally mutable: consume*() advances this cursor in place and
        returns it for chaining. Use copy() for a snapshot; it shares the
        source text and copies only the offsets.

    Example:
        >>> cursor = Cursor.from_str("hello")
        >>> cursor.first()
        'h'
        >>> cursor.consume()
        'h'
        >>> cursor.position
        1
        >>> cursor.as_str()
        'ello'
        >>> cursor.consume_while(str.isalpha).is_empty
        True
    """

    __slots__ = ("_end", "_pos", "_source")

    def __init__(self, source: str, pos: int = 0, end: int | None = None) -> None:
        """Create cursor over source[pos:end].

        Args:
            source: Complete original text, shared for the cursor's lifetime
            pos: Offset of the remainder start (default: 0)
            end: Exclusive end of the view (default: len(source))

        Raises:
            ValueError: If the view is not contained in source. This is a
                caller bug, never a property of the scanned text.
        """
        if end is None:
            end = len(source)
        if not 0 <= pos <= end <= len(source):
            msg = f"Cursor view [{pos}, {end}) is outside source of length {len(source)}"
            raise ValueError(msg)
        self._source = source
        self._pos = pos
        self._end = end

    @classmethod
    def from_str(cls, text: str) -> Cursor:
        """Full cursor over text, positioned at 0."""
        return cls(text)

    def focus(self, start: int, end: int) -> Cursor:
        """New cursor over source[start:end] sharing this cursor's source.

        Raises:
            ValueError: If the range is outside the source
        """
        return Cursor(self._source, start, end)

    def copy(self) -> Cursor:
        """Snapshot sharing the source text."""
        return Cursor(self._source, self._pos, self._end)

    __copy__ = copy

    def __repr__(self) -> str:
        return f"Cursor(pos={self._pos}, end={self._end}, remaining={self.as_str()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cursor):
            return NotImplemented
        return (self._pos, self._end, self._source) == (other._pos, other._end, other._source)

    __hash__ = None  # type: ignore[assignment]

    # ------------------------------------------------------------------
    # Read-only access
    # ------------------------------------------------------------------

    @property
    def input(self) -> str:
        """Complete original text."""
        return self._source

    @property
    def end(self) -> int:
        """Exclusive end offset of this cursor's view in the original text."""
        return self._end

    @property
    def position(self) -> int:
        """Offset of the remainder start in the original text.

        Never decreases across consume*() calls on the same cursor.
        """
        return self._pos

    @property
    def is_empty(self) -> bool:
        """True when no characters remain."""
        return self._pos >= self._end

    def as_str(self) -> str:
        """Unconsumed remainder."""
        return self._source[self._pos : self._end]

    def chars(self) -> Iterator[str]:
        """Independent iterator over the remainder.

        Advancing the iterator does not move the cursor.
        """
        return iter(self.as_str())

    def previous(self) -> str:
        """Character just before the remainder in the original text.

        Returns "\\n" at position 0, so "previous is newline" checks succeed
        at the start of input.

        Example:
            >>> cursor = Cursor.from_str("ab")
            >>> cursor.previous()
            '\\n'
            >>> _ = cursor.consume()
            >>> cursor.previous()
            'a'
        """
        if self._pos == 0:
            return START_OF_INPUT_SENTINEL
        return self._source[self._pos - 1]

    def first(self) -> str | None:
        """Character at offset 0 of the remainder, or None."""
        if self._pos >= self._end:
            return None
        return self._source[self._pos]

    def second(self) -> str | None:
        """Character at offset 1 of the remainder, or None."""
        if self._pos + 1 >= self._end:
            return None
        return self._source[self._pos + 1]

    # ------------------------------------------------------------------
    # Consumption
    # ------------------------------------------------------------------

    def consume(self) -> str | None:
        """Remove and return the first remaining character, or None if empty."""
        if self._pos >= self._end:
            return None
        ch = self._source[self._pos]
        self._pos += 1
        return ch

    def consume_with(self, action: Callable[[Cursor], object]) -> Cursor:
        """Let action advance this cursor, then return the cursor."""
        action(self)
        return self

    def consume_while(self, predicate: CharPredicate) -> Cursor:
        """Consume the maximal prefix whose characters all satisfy predicate.

        Stops BEFORE the first character failing predicate; that character
        stays available.

        Example:
            >>> cursor = Cursor.from_str("123abc")
            >>> cursor.consume_while(str.isdigit).as_str()
            'abc'
        """
        while (ch := self.first()) is not None and predicate(ch):
            self.consume()
        return self

    def consume_until(self, predicate: CharPredicate) -> Cursor:
        """Consume characters through the first one satisfying predicate.

        Each character is consumed first and tested afterwards, so the
        matching character is consumed too (inclusive). Consumes everything
        when no character matches.

        Example:
            >>> cursor = Cursor.from_str("key=value")
            >>> cursor.consume_until(lambda ch: ch == "=").as_str()
            'value'
        """
        while (ch := self.consume()) is not None:
            if predicate(ch):
                break
        return self

    def consume_line(self) -> Cursor:
        """Consume through and including the next "\\n", or everything."""
        return self.consume_until(_is_newline)

    def consume_lines_while(self, predicate: LinePredicate) -> Cursor:
        """Consume whole lines while predicate holds for each line's text.

        Stops before the first line failing predicate.

        Example:
            >>> cursor = Cursor.from_str("# a\\n# b\\ncode\\n")
            >>> cursor.consume_lines_while(lambda line: line.startswith("#")).as_str()
            'code\\n'
        """
        for line in iter_lines(self.as_str()):
            if not predicate(line):
                break
            self.consume_line()
        return self

    def consume_lines_until(self, predicate: LinePredicate) -> Cursor:
        """Consume whole lines through the first one satisfying predicate.

        Each line is consumed first and tested afterwards (inclusive).
        """
        for line in iter_lines(self.as_str()):
            self.consume_line()
            if predicate(line):
                break
        return self

    # ------------------------------------------------------------------
    # Focusing
    # ------------------------------------------------------------------

    def focus_with(self, action: Callable[[Cursor], object]) -> Cursor:
        """Run action and return a cursor over exactly what it consumed.

        This cursor advances by whatever action consumed. The returned
        cursor shares the source text, starts where action started and ends
        where it stopped; it can be walked independently.

        Example:
            >>> cursor = Cursor.from_str("let x")
            >>> word = cursor.focus_while(str.isalpha)
            >>> word.as_str(), word.position
            ('let', 0)
            >>> cursor.as_str()
            ' x'
        """
        start = self._pos
        action(self)
        return Cursor(self._source, start, self._pos)

    def focus_char(self) -> Cursor:
        """Focus on the next character (empty focus at end of input)."""
        return self.focus_with(Cursor.consume)

    def focus_line(self) -> Cursor:
        """Focus on the next line including its terminator."""
        return self.focus_with(Cursor.consume_line)

    def focus_while(self, predicate: CharPredicate) -> Cursor:
        return self.focus_with(lambda cursor: cursor.consume_while(predicate))

    def focus_until(self, predicate: CharPredicate) -> Cursor:
        return self.focus_with(lambda cursor: cursor.consume_until(predicate))

    def focus_lines_while(self, predicate: LinePredicate) -> Cursor:
        return self.focus_with(lambda cursor: cursor.consume_lines_while(predicate))

    def focus_lines_until(self, predicate: LinePredicate) -> Cursor:
        return self.focus_with(lambda cursor: cursor.consume_lines_until(predicate))

    # ------------------------------------------------------------------
    # Error reporting
    # ------------------------------------------------------------------

    def compute_line_col(self) -> tuple[int, int]:
        """Compute line and column for current position.

        Returns:
            (line, column) tuple (1-indexed, like text editors)

        Performance:
            O(n) where n = current position
            Only call for error reporting, not during normal scanning!

        Example:
            >>> source = "line1\\nline2\\nline3"
            >>> Cursor(source, 0).compute_line_col()
            (1, 1)
            >>> Cursor(source, 6).compute_line_col()  # Start of line2
            (2, 1)
            >>> Cursor(source, 8).compute_line_col()  # Middle of line2
            (2, 3)
        """
        line = self._source.count("\n", 0, self._pos) + 1
        last_newline = self._source.rfind("\n", 0, self._pos)
        col = self._pos - last_newline if last_newline >= 0 else self._pos + 1
        return (line, col)


def _is_newline(ch: str) -> bool:
    return ch == "\n"


class LineOffsetCache:
    """Cached line offset computation for efficient position lookups.

    Precomputes line start offsets in O(n) single pass, then provides
    O(log n) lookups using binary search. Use this when you need to
    compute line:column for multiple positions in the same source, e.g.
    every failing unit reported by the escape decoder.

    Example:
        >>> cache = LineOffsetCache("line1\\nline2\\nline3")
        >>> cache.get_line_col(0)   # Start of line 1
        (1, 1)
        >>> cache.get_line_col(6)   # Start of line 2
        (2, 1)
        >>> cache.get_line_col(8)   # Third char of line 2
        (2, 3)

    Thread Safety:
        Thread-safe. Internal state is only set during __init__.
    """

    __slots__ = ("_offsets", "_source_len")

    def __init__(self, source: str) -> None:
        """Build line offset cache from source.

        Complexity:
            O(n) where n = len(source)
        """
        offsets = [0]
        for i, char in enumerate(source):
            if char == "\n":
                offsets.append(i + 1)
        self._offsets: tuple[int, ...] = tuple(offsets)
        self._source_len = len(source)

    def get_line_col(self, pos: int) -> tuple[int, int]:
        """Get 1-indexed (line, column) for pos, clamped to the source."""
        pos = min(max(pos, 0), self._source_len)

        # Line index = index of largest offset <= pos
        left, right = 0, len(self._offsets) - 1
        while left < right:
            mid = (left + right + 1) // 2
            if self._offsets[mid] <= pos:
                left = mid
            else:
                right = mid - 1

        return (left + 1, pos - self._offsets[left] + 1)
