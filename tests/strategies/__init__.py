"""Hypothesis strategies for lexcursor property-based testing.

Usage:
    from tests.strategies import source_text, literal_content
"""

from .text import (
    ESCAPE_SOURCES,
    PLAIN_CHARS,
    escape_sequences,
    literal_content,
    multiline_text,
    plain_literal_content,
    source_text,
)

__all__ = [
    "ESCAPE_SOURCES",
    "PLAIN_CHARS",
    "escape_sequences",
    "literal_content",
    "multiline_text",
    "plain_literal_content",
    "source_text",
]
