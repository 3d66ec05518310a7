"""lexcursor - building blocks for tokenizers.

A non-copying text cursor with lookahead, consumption and focusing
operations, tagged spans over cursor ranges, and an escape decoder for the
content of quoted string and character literals.

Public API:
    Cursor - Position-tracking view over an immutable text buffer
    Span - Semantic tag attached to a cursor range
    Mode - Kind of literal being decoded (SINGLE or DOUBLE quoted)
    EscapeError - Closed set of literal decoding failures
    unescape_str - Callback-driven decoder over a cursor
    iter_unescape - Generator form of unescape_str
    unescape_literal - Decode literal content, collecting diagnostics
    unescape - Strict decoding, raises on the first invalid unit

Exceptions:
    LexCursorError - Base exception class
    LiteralSyntaxError - Literal content rejected by strict decoding

Submodules:
    lexcursor.syntax.cursor - Cursor, LineOffsetCache, iter_lines
    lexcursor.syntax.unescape - Escape grammar and decoding helpers
    lexcursor.diagnostics - Diagnostics, spans and error templates
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .diagnostics import Diagnostic, EscapeError, LexCursorError, LiteralSyntaxError
from .enums import Mode
from .syntax import (
    Cursor,
    Span,
    UnescapeResult,
    iter_unescape,
    unescape,
    unescape_literal,
    unescape_str,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("lexcursor")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Cursor",
    "Diagnostic",
    "EscapeError",
    "LexCursorError",
    "LiteralSyntaxError",
    "Mode",
    "Span",
    "UnescapeResult",
    "__version__",
    "iter_unescape",
    "unescape",
    "unescape_literal",
    "unescape_str",
]
