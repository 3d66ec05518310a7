"""lexcursor exception hierarchy with structured diagnostics.

Decoder failures are reported as data through the decoder callback.
Exceptions exist only for callers that opt into strict decoding.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class LexCursorError(Exception):
    """Base exception for all lexcursor errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize LexCursorError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class LiteralSyntaxError(LexCursorError):
    """Literal content contains at least one invalid unit.

    Raised by strict decoding only. Carries the first failing unit's
    Diagnostic and every Diagnostic collected for the literal.

    Attributes:
        diagnostics: All failures, in source order
    """

    def __init__(self, message: str, diagnostics: tuple[Diagnostic, ...]) -> None:
        super().__init__(message)
        self.diagnostic = diagnostics[0] if diagnostics else None
        self.diagnostics = diagnostics
