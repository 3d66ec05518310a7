"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, EscapeError, SourceSpan

# (message, hint) per escape error kind
_ESCAPE_TEXT: dict[EscapeError, tuple[str, str]] = {
    EscapeError.LONE_SLASH: (
        "Backslash at end of literal",
        "Escape the backslash itself as '\\\\'",
    ),
    EscapeError.INVALID_ESCAPE: (
        "Unknown character escape",
        "Valid escapes are \\\" \\' \\\\ \\n \\r \\t \\0 \\xHH and \\u{HEX}",
    ),
    EscapeError.BARE_CARRIAGE_RETURN: (
        "Bare carriage return in literal",
        "Use the escape '\\r' instead of a raw carriage return",
    ),
    EscapeError.ESCAPE_ONLY_CHAR: (
        "Quote character must be escaped",
        "Prefix the quote with a backslash",
    ),
    EscapeError.TOO_SHORT_HEX_ESCAPE: (
        "Numeric character escape is too short",
        "Hexadecimal escapes take exactly two digits, e.g. '\\x7f'",
    ),
    EscapeError.INVALID_CHAR_IN_HEX_ESCAPE: (
        "Invalid character in numeric character escape",
        "Use only 0-9, a-f and A-F after '\\x'",
    ),
    EscapeError.NO_BRACE_IN_UNICODE_ESCAPE: (
        "Incorrect unicode escape sequence",
        "Unicode escapes are written as '\\u{HEX}'",
    ),
    EscapeError.INVALID_CHAR_IN_UNICODE_ESCAPE: (
        "Invalid character in unicode escape",
        "Use only 0-9, a-f, A-F and '_' inside '\\u{...}'",
    ),
    EscapeError.EMPTY_UNICODE_ESCAPE: (
        "Empty unicode escape",
        "Put at least one hexadecimal digit between the braces",
    ),
    EscapeError.UNCLOSED_UNICODE_ESCAPE: (
        "Unterminated unicode escape",
        "Close the escape with '}'",
    ),
    EscapeError.LEADING_UNDERSCORE_UNICODE_ESCAPE: (
        "Invalid start of unicode escape",
        "The first character inside '\\u{' must be a hexadecimal digit",
    ),
    EscapeError.OVERLONG_UNICODE_ESCAPE: (
        "Overlong unicode escape",
        "Unicode escapes take at most 6 hexadecimal digits",
    ),
    EscapeError.LONE_SURROGATE_UNICODE_ESCAPE: (
        "Invalid unicode character escape",
        "Surrogate code points U+D800 to U+DFFF are not characters",
    ),
    EscapeError.OUT_OF_RANGE_UNICODE_ESCAPE: (
        "Invalid unicode character escape",
        "Unicode escapes must be at most U+10FFFF",
    ),
}


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This solves EM101/EM102 violations while providing:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    @staticmethod
    def escape_error(error: EscapeError, span: SourceSpan | None = None) -> Diagnostic:
        """Failure of a single decoded unit.

        Args:
            error: The escape error kind reported by the decoder
            span: Location of the failing unit inside the literal content

        Returns:
            Diagnostic with the error kind as code
        """
        message, hint = _ESCAPE_TEXT[error]
        return Diagnostic(code=error, message=message, span=span, hint=hint)

    @staticmethod
    def literal_rejected(diagnostic: Diagnostic, error_count: int) -> str:
        """Summary line for a literal rejected by strict decoding.

        Args:
            diagnostic: First failure in the literal
            error_count: Total number of failing units

        Returns:
            Message string for LiteralSyntaxError
        """
        msg = diagnostic.format_error()
        if error_count > 1:
            msg += f" (and {error_count - 1} more)"
        return msg
