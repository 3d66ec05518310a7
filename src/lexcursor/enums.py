"""Enumerations for lexcursor type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class Mode(StrEnum):
    """Kind of quoted literal whose content is being decoded.

    Selects which quote character must be escaped inside the content. The
    other quote character is not special and decodes as itself.

    StrEnum provides automatic string conversion: str(Mode.DOUBLE) == "double"
    """

    SINGLE = "single"
    """Character literal: 'a'"""

    DOUBLE = "double"
    """String literal: "abc" """

    @property
    def delimiter(self) -> str:
        """Quote character governed by this mode."""
        return "'" if self is Mode.SINGLE else '"'


__all__ = [
    "Mode",
]
