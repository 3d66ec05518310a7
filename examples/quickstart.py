"""Quickstart - Scanning and Decoding Literals.

Demonstrates the building blocks a tokenizer is made from:

1. Walk text with a Cursor (lookahead and consumption)
2. Carve tagged Spans with focus_*() without copying text
3. Decode literal content and react to escape errors

Python 3.13+.
"""

from __future__ import annotations

from enum import Enum, auto


class Kind(Enum):
    IDENT = auto()
    STRING = auto()
    WHITESPACE = auto()
    PUNCT = auto()


def example_1_cursor_basics() -> None:
    """Lookahead and consumption."""
    from lexcursor import Cursor

    print("=" * 60)
    print("Example 1: Cursor Basics")
    print("=" * 60)

    cursor = Cursor.from_str("count = 42\nnext line")
    print(f"first={cursor.first()!r} second={cursor.second()!r}")

    word = cursor.focus_while(str.isalpha)
    print(f"word={word.as_str()!r} at {word.position}, cursor now at {cursor.position}")

    cursor.consume_line()
    print(f"after consume_line: {cursor.as_str()!r}, line:col={cursor.compute_line_col()}")
    print()


def example_2_spans() -> None:
    """Split a line into tagged spans."""
    from lexcursor import Cursor, Span

    print("=" * 60)
    print("Example 2: Spans")
    print("=" * 60)

    cursor = Cursor.from_str('greet "hi\\tthere" ;')
    spans: list[Span[Kind]] = []
    while (ch := cursor.first()) is not None:
        if ch.isalpha():
            spans.append(Span(Kind.IDENT, cursor.focus_while(str.isalnum)))
        elif ch.isspace():
            spans.append(Span(Kind.WHITESPACE, cursor.focus_while(str.isspace)))
        elif ch == '"':
            cursor.consume()
            escaped = False

            def in_string(c: str) -> bool:
                nonlocal escaped
                if escaped:
                    escaped = False
                    return True
                escaped = c == "\\"
                return c != '"'

            spans.append(Span(Kind.STRING, cursor.focus_while(in_string)))
            cursor.consume()
        else:
            spans.append(Span(Kind.PUNCT, cursor.focus_char()))

    for span in spans:
        print(f"{span.kind.name:<10} {span.position:>3} {span.text!r}")
    print()


def example_3_unescape() -> None:
    """Decode literal content, unit by unit and as a whole."""
    from lexcursor import (
        Cursor,
        EscapeError,
        LiteralSyntaxError,
        Mode,
        unescape,
        unescape_str,
    )

    print("=" * 60)
    print("Example 3: Escape Decoding")
    print("=" * 60)

    def report(unit_range: range, outcome: str | EscapeError) -> None:
        print(f"  {unit_range.start:>2}..{unit_range.stop:<2} {outcome!r}")

    unescape_str(Cursor.from_str("a\\n\\u{1F63B}\\q"), Mode.DOUBLE, report)

    print(unescape("tab\\there"))
    try:
        unescape("bad \\u{D800}")
    except LiteralSyntaxError as e:
        print(f"rejected: {e}")
    print()


if __name__ == "__main__":
    example_1_cursor_basics()
    example_2_spans()
    example_3_unescape()
