"""Fuzz property-based tests for the escape decoder."""

from __future__ import annotations

import pytest
from hypothesis import event, example, given
from hypothesis import strategies as st

from lexcursor.diagnostics import EscapeError
from lexcursor.enums import Mode
from lexcursor.syntax.cursor import Cursor
from lexcursor.syntax.unescape import Outcome, unescape_literal, unescape_str
from tests.strategies import literal_content, plain_literal_content

pytestmark = pytest.mark.fuzz


def _decode(text: str, mode: Mode) -> list[tuple[range, Outcome]]:
    units: list[tuple[range, Outcome]] = []
    unescape_str(Cursor.from_str(text), mode, lambda r, out: units.append((r, out)))
    return units


@pytest.mark.fuzz
class TestDecoderTotality:
    """The decoder reports every unit of arbitrary input exactly once."""

    @given(text=st.text(max_size=200), mode=st.sampled_from(Mode))
    @example(text="\\u{", mode=Mode.DOUBLE)
    @example(text="\\", mode=Mode.SINGLE)
    def test_ranges_tile_input(self, text: str, mode: Mode) -> None:
        """Ranges are non-empty, contiguous and cover the whole input."""
        units = _decode(text, mode)

        expected_start = 0
        for unit_range, outcome in units:
            assert unit_range.start == expected_start
            assert unit_range.stop > unit_range.start
            expected_start = unit_range.stop
            if isinstance(outcome, EscapeError):
                event(f"error={outcome.name}")
            else:
                assert len(outcome) == 1
        assert expected_start == len(text)

    @given(text=st.text(alphabet="\\xu{}_0123456789abcdefABCDEFgz\"'\r\n", max_size=60))
    def test_escape_heavy_input(self, text: str) -> None:
        """Escape-dense input never raises and stays total."""
        units = _decode(text, Mode.DOUBLE)

        assert sum(len(r) for r, _ in units) == len(text)


@pytest.mark.fuzz
class TestDecoderRoundTrip:
    """Valid content decodes to the expected value."""

    @given(text=plain_literal_content, mode=st.sampled_from(Mode))
    def test_plain_content_is_identity(self, text: str, mode: Mode) -> None:
        """Content without special characters decodes to itself, unit per char."""
        units = _decode(text, mode)

        assert [out for _, out in units] == list(text)
        assert [(r.start, r.stop) for r, _ in units] == [(i, i + 1) for i in range(len(text))]

    @given(content=literal_content())
    def test_escaped_content_decodes(self, content: tuple[str, str]) -> None:
        """Generated escapes decode to their intended characters."""
        source, expected = content

        result = unescape_literal(source)

        assert result.is_valid
        assert result.value == expected

    @given(code_point=st.integers(min_value=0, max_value=0x10FFFF))
    def test_unicode_escape_covers_code_space(self, code_point: int) -> None:
        """Every scalar value round-trips; surrogates are rejected."""
        units = _decode(f"\\u{{{code_point:x}}}", Mode.DOUBLE)

        (unit,) = units
        if 0xD800 <= code_point <= 0xDFFF:
            assert unit[1] is EscapeError.LONE_SURROGATE_UNICODE_ESCAPE
        else:
            assert unit[1] == chr(code_point)
