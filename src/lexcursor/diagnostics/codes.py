"""Diagnostic codes and data structures.

Defines escape error kinds, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "EscapeError",
    "SourceSpan",
]


class EscapeError(Enum):
    """Failures reported while decoding quoted literal content.

    Members carry no payload; the location of a failure travels separately
    as the range handed to the decoder callback.

    Organized by category:
        3100-3199: Plain characters and simple escapes
        3200-3299: Hexadecimal escapes (\\xHH)
        3300-3399: Unicode escapes (\\u{...})
    """

    # Plain characters and simple escapes (3100-3199)
    LONE_SLASH = 3101
    """Backslash at the end of the content."""
    INVALID_ESCAPE = 3102
    """Unknown character after a backslash, e.g. '\\z'."""
    BARE_CARRIAGE_RETURN = 3103
    """Raw carriage return in the content."""
    ESCAPE_ONLY_CHAR = 3104
    """Unescaped quote matching the literal's own delimiter."""

    # Hexadecimal escapes (3200-3299)
    TOO_SHORT_HEX_ESCAPE = 3201
    """'\\x' followed by fewer than two characters, e.g. '\\x1'."""
    INVALID_CHAR_IN_HEX_ESCAPE = 3202
    """Non-hexadecimal character in '\\xHH', e.g. '\\xz'."""

    # Unicode escapes (3300-3399)
    NO_BRACE_IN_UNICODE_ESCAPE = 3301
    """'\\u' not followed by '{'."""
    INVALID_CHAR_IN_UNICODE_ESCAPE = 3302
    """Non-hexadecimal character in '\\u{..}'."""
    EMPTY_UNICODE_ESCAPE = 3303
    """'\\u{}'."""
    UNCLOSED_UNICODE_ESCAPE = 3304
    """Content ends before the closing brace, e.g. '\\u{12'."""
    LEADING_UNDERSCORE_UNICODE_ESCAPE = 3305
    """'\\u{_12}'."""
    OVERLONG_UNICODE_ESCAPE = 3306
    """More than six digits in '\\u{..}', e.g. '\\u{10FFFF_FF}'."""
    LONE_SURROGATE_UNICODE_ESCAPE = 3307
    """Code point in the surrogate range, e.g. '\\u{DFFF}'."""
    OUT_OF_RANGE_UNICODE_ESCAPE = 3308
    """Code point above U+10FFFF, e.g. '\\u{FFFFFF}'."""

    @property
    def is_unicode_escape(self) -> bool:
        """True for failures inside a '\\u{..}' escape."""
        return 3300 <= self.value < 3400  # noqa: PLR2004 - category bounds

    @property
    def is_hex_escape(self) -> bool:
        """True for failures inside a '\\xHH' escape."""
        return 3200 <= self.value < 3300  # noqa: PLR2004 - category bounds


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Source code location for error reporting.

    Note:
        Python strings measure positions in characters (Unicode code points),
        not bytes. For multi-byte UTF-8 characters, character offset differs
        from byte offset.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, line is
                less than 1 (lines are 1-indexed), or column is less than 1
                (columns are 1-indexed).
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Built by ErrorTemplate; never
    constructed with ad-hoc messages at call sites.

    Attributes:
        code: Escape error kind
        message: Human-readable error description
        span: Source location (None when not attached to a literal)
        hint: Suggestion for fixing the error
        severity: Error severity level
    """

    code: EscapeError
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic as a single line.

        Example output:
            error[LONE_SLASH]: Backslash at end of literal (1:4)

        Returns:
            Formatted error message
        """
        text = f"{self.severity}[{self.code.name}]: {self.message}"
        if self.span is not None:
            text += f" ({self.span.line}:{self.span.column})"
        return text
