"""Shared constants for lexcursor.

Single source of truth for the limits of the escape grammar and the
sentinels used by the cursor. Placing them here keeps the syntax and
diagnostics packages free of circular imports.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Unicode limits
    "MAX_UNICODE_CODE_POINT",
    "SURROGATE_RANGE_START",
    "SURROGATE_RANGE_END",
    # Escape grammar
    "HEX_ESCAPE_DIGITS",
    "MAX_UNICODE_ESCAPE_DIGITS",
    "HEX_DIGITS",
    # Cursor
    "START_OF_INPUT_SENTINEL",
]

# ============================================================================
# UNICODE LIMITS
# ============================================================================

# Code points above U+10FFFF cannot be encoded in UTF-8/UTF-16/UTF-32.
MAX_UNICODE_CODE_POINT: int = 0x10FFFF

# UTF-16 surrogate code points are not characters on their own.
SURROGATE_RANGE_START: int = 0xD800
SURROGATE_RANGE_END: int = 0xDFFF

# ============================================================================
# ESCAPE GRAMMAR
# ============================================================================

# \xHH takes exactly two digits, high nibble first.
HEX_ESCAPE_DIGITS: int = 2

# \u{...} accepts at most six significant digits; underscores do not count.
MAX_UNICODE_ESCAPE_DIGITS: int = 6

# str.isdigit()/int() accept non-ASCII digits, so membership is checked here.
HEX_DIGITS: str = "0123456789abcdefABCDEF"

# ============================================================================
# CURSOR
# ============================================================================

# Cursor.previous() at position 0. Makes "previous is newline" checks hold
# at the start of input.
START_OF_INPUT_SENTINEL: str = "\n"
