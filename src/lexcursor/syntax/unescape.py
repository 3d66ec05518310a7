"""Escape decoding for quoted literal content.

Turns the raw content of a string or character literal (quotes already
stripped) into the characters it denotes. Every logical unit, a plain
character or a complete escape sequence, is reported with its offset range
and either the decoded character or an EscapeError.

Supported escape sequences:
    \\" → "
    \\' → '
    \\\\ → \\
    \\n → newline
    \\r → carriage return
    \\t → tab
    \\0 → NUL
    \\xHH → character with code 0x00-0xFF (2 hex digits)
    \\u{HEX} → Unicode character (1-6 hex digits, '_' separators allowed)

The scan is total: a failing unit never stops decoding of the units after
it. Callers decide whether to abort.

Offsets:
    Ranges are Python string indices (Unicode code points), not UTF-8 byte
    offsets. They slice the decoded str directly; to slice encoded bytes,
    map them with len(text[:offset].encode()) first. The two agree for
    ASCII content only.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass

from lexcursor.constants import (
    HEX_DIGITS,
    HEX_ESCAPE_DIGITS,
    MAX_UNICODE_CODE_POINT,
    MAX_UNICODE_ESCAPE_DIGITS,
    SURROGATE_RANGE_END,
    SURROGATE_RANGE_START,
)
from lexcursor.diagnostics import Diagnostic, ErrorTemplate, EscapeError, LiteralSyntaxError
from lexcursor.diagnostics.codes import SourceSpan
from lexcursor.enums import Mode

from .cursor import Cursor, LineOffsetCache

__all__ = [
    "Outcome",
    "UnescapeResult",
    "iter_unescape",
    "scan_escape",
    "unescape",
    "unescape_literal",
    "unescape_str",
]

logger = logging.getLogger(__name__)

type Outcome = str | EscapeError

# Single-character escapes: character after the backslash -> decoded value
_SIMPLE_ESCAPES: dict[str, str] = {
    '"': '"',
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "\\": "\\",
    "'": "'",
    "0": "\0",
}


def _hex_value(ch: str) -> int | None:
    """Value of a single ASCII hex digit, or None."""
    if ch in HEX_DIGITS:
        return int(ch, 16)
    return None


def _scan_hex_escape(cursor: Cursor) -> Outcome:
    """Parse the two digits of \\xHH (cursor is after the 'x').

    The byte value is taken as a code point directly; values 0x80-0xFF are
    accepted and decode to U+0080-U+00FF.
    """
    value = 0
    for _ in range(HEX_ESCAPE_DIGITS):
        ch = cursor.consume()
        if ch is None:
            return EscapeError.TOO_SHORT_HEX_ESCAPE
        digit = _hex_value(ch)
        if digit is None:
            return EscapeError.INVALID_CHAR_IN_HEX_ESCAPE
        value = value * 16 + digit
    return chr(value)


def _scan_unicode_escape(cursor: Cursor) -> Outcome:  # noqa: PLR0911
    """Parse {HEX} of \\u{HEX} (cursor is after the 'u').

    Note: PLR0911 (too many returns) is acceptable here. Each return is one
    failure mode of the escape grammar.
    """
    if cursor.consume() != "{":
        return EscapeError.NO_BRACE_IN_UNICODE_ESCAPE

    # First character must be a hexadecimal digit.
    first = cursor.consume()
    if first is None:
        return EscapeError.UNCLOSED_UNICODE_ESCAPE
    if first == "_":
        return EscapeError.LEADING_UNDERSCORE_UNICODE_ESCAPE
    if first == "}":
        return EscapeError.EMPTY_UNICODE_ESCAPE
    value = _hex_value(first)
    if value is None:
        return EscapeError.INVALID_CHAR_IN_UNICODE_ESCAPE

    n_digits = 1
    while True:
        ch = cursor.consume()
        if ch is None:
            return EscapeError.UNCLOSED_UNICODE_ESCAPE
        if ch == "_":
            continue
        if ch == "}":
            break
        digit = _hex_value(ch)
        if digit is None:
            return EscapeError.INVALID_CHAR_IN_UNICODE_ESCAPE
        n_digits += 1
        if n_digits > MAX_UNICODE_ESCAPE_DIGITS:
            # Already overlong; keep scanning only to find the closing brace.
            continue
        value = value * 16 + digit

    # Syntax errors take priority over the value check.
    if n_digits > MAX_UNICODE_ESCAPE_DIGITS:
        return EscapeError.OVERLONG_UNICODE_ESCAPE
    if value > MAX_UNICODE_CODE_POINT:
        return EscapeError.OUT_OF_RANGE_UNICODE_ESCAPE
    if SURROGATE_RANGE_START <= value <= SURROGATE_RANGE_END:
        return EscapeError.LONE_SURROGATE_UNICODE_ESCAPE
    return chr(value)


def scan_escape(cursor: Cursor) -> Outcome:
    """Decode the escape sequence following a backslash.

    Args:
        cursor: Positioned right AFTER the backslash

    Returns:
        The decoded character, or the EscapeError describing the failure.
        The cursor is left after the last character the escape consumed.
    """
    assert cursor.previous() == "\\", "scan_escape() must follow a backslash"

    second_char = cursor.consume()
    if second_char is None:
        return EscapeError.LONE_SLASH

    simple = _SIMPLE_ESCAPES.get(second_char)
    if simple is not None:
        return simple
    if second_char == "x":
        return _scan_hex_escape(cursor)
    if second_char == "u":
        return _scan_unicode_escape(cursor)
    return EscapeError.INVALID_ESCAPE


def iter_unescape(cursor: Cursor, mode: Mode) -> Iterator[tuple[range, Outcome]]:
    """Decode literal content unit by unit.

    Drives the cursor to exhaustion. Ranges are relative to the cursor's
    remainder at the time of the call; together they tile it without gaps
    or overlaps. Offsets count code points, not UTF-8 bytes.

    Args:
        cursor: Positioned over literal content (quotes already removed)
        mode: Kind of literal; its delimiter must appear escaped

    Yields:
        (range, outcome) per unit, in source order
    """
    base = cursor.position
    delimiter = mode.delimiter
    while (first_char := cursor.consume()) is not None:
        start = cursor.position - base - 1

        outcome: Outcome
        if first_char == "\\":
            outcome = scan_escape(cursor)
        elif first_char in ("\n", "\t"):
            outcome = first_char
        elif first_char == delimiter:
            outcome = EscapeError.ESCAPE_ONLY_CHAR
        elif first_char == "\r":
            outcome = EscapeError.BARE_CARRIAGE_RETURN
        else:
            outcome = first_char

        yield range(start, cursor.position - base), outcome


def unescape_str(
    cursor: Cursor, mode: Mode, callback: Callable[[range, Outcome], object]
) -> None:
    """Decode literal content, reporting every unit through callback.

    Example:
        >>> units = []
        >>> unescape_str(Cursor.from_str("a\\\\n"), Mode.DOUBLE,
        ...              lambda r, out: units.append((r, out)))
        >>> units
        [(range(0, 1), 'a'), (range(1, 3), '\\n')]
    """
    for unit_range, outcome in iter_unescape(cursor, mode):
        callback(unit_range, outcome)


@dataclass(frozen=True, slots=True)
class UnescapeResult:
    """Decoded literal content.

    Attributes:
        value: Concatenation of every successfully decoded unit
        diagnostics: One Diagnostic per failing unit, in source order
    """

    value: str
    diagnostics: tuple[Diagnostic, ...] = ()

    @property
    def is_valid(self) -> bool:
        """True when no unit failed."""
        return not self.diagnostics


def unescape_literal(text: str, mode: Mode = Mode.DOUBLE) -> UnescapeResult:
    """Decode literal content, collecting failures instead of stopping.

    Args:
        text: Literal content without its surrounding quotes
        mode: Kind of literal (default: string literal)

    Returns:
        UnescapeResult with the decoded value and a Diagnostic (with line
        and column inside text) for every failing unit

    Example:
        >>> unescape_literal("tab\\\\there").value
        'tab\\there'
        >>> [d.code.name for d in unescape_literal("\\\\q").diagnostics]
        ['INVALID_ESCAPE']
    """
    parts: list[str] = []
    diagnostics: list[Diagnostic] = []
    lines: LineOffsetCache | None = None

    for unit_range, outcome in iter_unescape(Cursor.from_str(text), mode):
        if isinstance(outcome, EscapeError):
            if lines is None:
                lines = LineOffsetCache(text)
            line, column = lines.get_line_col(unit_range.start)
            span = SourceSpan(unit_range.start, unit_range.stop, line, column)
            diagnostics.append(ErrorTemplate.escape_error(outcome, span))
        else:
            parts.append(outcome)

    if diagnostics:
        logger.debug(
            "Literal content of length %d has %d invalid unit(s), first %s at %d",
            len(text),
            len(diagnostics),
            diagnostics[0].code.name,
            diagnostics[0].span.start if diagnostics[0].span else -1,
        )
    return UnescapeResult("".join(parts), tuple(diagnostics))


def unescape(text: str, mode: Mode = Mode.DOUBLE) -> str:
    """Decode literal content, rejecting it on the first invalid unit.

    Args:
        text: Literal content without its surrounding quotes
        mode: Kind of literal (default: string literal)

    Returns:
        Decoded value

    Raises:
        LiteralSyntaxError: If any unit fails; carries all diagnostics
    """
    result = unescape_literal(text, mode)
    if not result.is_valid:
        logger.debug(
            "Rejecting %s literal content: %d invalid unit(s)",
            mode,
            len(result.diagnostics),
        )
        raise LiteralSyntaxError(
            ErrorTemplate.literal_rejected(result.diagnostics[0], len(result.diagnostics)),
            result.diagnostics,
        )
    return result.value
