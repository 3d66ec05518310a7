"""Diagnostic system for lexcursor errors.

Provides escape error kinds and structured diagnostics with spans and hints.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, EscapeError, SourceSpan
from .errors import LexCursorError, LiteralSyntaxError
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "ErrorTemplate",
    "EscapeError",
    "LexCursorError",
    "LiteralSyntaxError",
    "SourceSpan",
]
