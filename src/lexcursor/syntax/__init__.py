"""Lexical scanning package.

Provides the text cursor, tagged spans, and the literal escape decoder.
Token grammars are left to callers: this package carves and decodes text,
it does not assign token kinds.

Python 3.13+.
"""

from .cursor import CharPredicate, Cursor, LineOffsetCache, LinePredicate, iter_lines
from .span import Span
from .unescape import (
    Outcome,
    UnescapeResult,
    iter_unescape,
    scan_escape,
    unescape,
    unescape_literal,
    unescape_str,
)

__all__ = [
    "CharPredicate",
    "Cursor",
    "LineOffsetCache",
    "LinePredicate",
    "Outcome",
    "Span",
    "UnescapeResult",
    "iter_lines",
    "iter_unescape",
    "scan_escape",
    "unescape",
    "unescape_literal",
    "unescape_str",
]
