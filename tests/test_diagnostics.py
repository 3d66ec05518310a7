"""Tests for diagnostics: codes, spans, templates and exceptions."""

from __future__ import annotations

import pytest

from lexcursor.diagnostics import (
    Diagnostic,
    ErrorTemplate,
    EscapeError,
    LexCursorError,
    LiteralSyntaxError,
    SourceSpan,
)


class TestEscapeError:
    """Error kinds."""

    def test_fourteen_kinds(self) -> None:
        """The error set is closed and complete."""
        assert len(EscapeError) == 14

    def test_codes_are_unique(self) -> None:
        """Every kind has its own numeric code."""
        assert len({e.value for e in EscapeError}) == len(EscapeError)

    def test_categories(self) -> None:
        """Hex and unicode categories are derived from the code."""
        assert EscapeError.TOO_SHORT_HEX_ESCAPE.is_hex_escape
        assert not EscapeError.TOO_SHORT_HEX_ESCAPE.is_unicode_escape
        assert EscapeError.OVERLONG_UNICODE_ESCAPE.is_unicode_escape
        assert not EscapeError.LONE_SLASH.is_hex_escape
        assert not EscapeError.LONE_SLASH.is_unicode_escape


class TestSourceSpan:
    """Span validation."""

    def test_valid_span(self) -> None:
        """A well-formed span is accepted."""
        span = SourceSpan(start=1, end=3, line=1, column=2)

        assert span.end - span.start == 2

    @pytest.mark.parametrize(
        ("start", "end", "line", "column", "match"),
        [
            (-1, 0, 1, 1, "start"),
            (3, 2, 1, 1, "end"),
            (0, 0, 0, 1, "line"),
            (0, 0, 1, 0, "column"),
        ],
    )
    def test_invalid_span(self, start: int, end: int, line: int, column: int, match: str) -> None:
        """Invariant violations raise ValueError."""
        with pytest.raises(ValueError, match=match):
            SourceSpan(start=start, end=end, line=line, column=column)


class TestErrorTemplate:
    """Diagnostic factories."""

    @pytest.mark.parametrize("error", list(EscapeError))
    def test_every_kind_has_message_and_hint(self, error: EscapeError) -> None:
        """Each error kind produces a complete diagnostic."""
        diagnostic = ErrorTemplate.escape_error(error)

        assert diagnostic.code is error
        assert diagnostic.message
        assert diagnostic.hint
        assert diagnostic.severity == "error"
        assert str(diagnostic) == diagnostic.message

    def test_format_error_with_span(self) -> None:
        """format_error() includes the code name and line:column."""
        span = SourceSpan(start=3, end=4, line=1, column=4)
        diagnostic = ErrorTemplate.escape_error(EscapeError.LONE_SLASH, span)

        assert diagnostic.format_error() == "error[LONE_SLASH]: Backslash at end of literal (1:4)"

    def test_format_error_without_span(self) -> None:
        """format_error() omits the location when there is no span."""
        diagnostic = Diagnostic(code=EscapeError.INVALID_ESCAPE, message="bad")

        assert diagnostic.format_error() == "error[INVALID_ESCAPE]: bad"


class TestExceptions:
    """Exception hierarchy."""

    def test_base_accepts_string(self) -> None:
        """Plain messages leave diagnostic unset."""
        error = LexCursorError("boom")

        assert str(error) == "boom"
        assert error.diagnostic is None

    def test_base_accepts_diagnostic(self) -> None:
        """Diagnostics are formatted into the message."""
        diagnostic = ErrorTemplate.escape_error(EscapeError.EMPTY_UNICODE_ESCAPE)
        error = LexCursorError(diagnostic)

        assert error.diagnostic is diagnostic
        assert str(error) == "error[EMPTY_UNICODE_ESCAPE]: Empty unicode escape"

    def test_literal_syntax_error_is_lexcursor_error(self) -> None:
        """LiteralSyntaxError fits into the hierarchy."""
        diagnostic = ErrorTemplate.escape_error(EscapeError.LONE_SLASH)
        error = LiteralSyntaxError("bad literal", (diagnostic,))

        assert isinstance(error, LexCursorError)
        assert error.diagnostic is diagnostic
        assert error.diagnostics == (diagnostic,)
