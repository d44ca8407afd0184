"""linguaengine exception hierarchy with structured diagnostics.

All exceptions optionally store Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class LinguaError(Exception):
    """Base exception for all linguaengine errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize LinguaError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class LinguaSyntaxError(LinguaError):
    """Template syntax error.

    Fatal to the parse of one template. Callers parsing many templates
    (e.g. a translation file) decide whether to continue.

    Attributes:
        source: The template that failed to parse
    """

    def __init__(self, message: str | Diagnostic, *, source: str = "") -> None:
        """Initialize LinguaSyntaxError.

        Args:
            message: Error message string OR Diagnostic object
            source: The template that failed to parse
        """
        super().__init__(message)
        self.source = source

    @property
    def position(self) -> int | None:
        """Character offset of the error in the template, if known."""
        if self.diagnostic is None or self.diagnostic.span is None:
            return None
        return self.diagnostic.span.start

    def format_with_context(self) -> str:
        """Format error with the template and a pointer to the offending character.

        Returns:
            Multi-line formatted error with context

        Example:
            >>> try:
            ...     parse("Hi :name|upper")
            ... except LinguaSyntaxError as e:
            ...     print(e.format_with_context())
            1:10: Unknown transformer 'upper'
            <BLANKLINE>
               1 | Hi :name|upper
                            ^
        """
        if self.diagnostic is None or self.diagnostic.span is None:
            return str(self)

        span = self.diagnostic.span
        lines = self.source.split("\n")
        result_lines = [f"{span.line}:{span.column}: {self.diagnostic.message}", ""]

        line_num_str = f"{span.line:4} | "
        if span.line <= len(lines):
            result_lines.append(line_num_str + lines[span.line - 1])
        pointer = " " * (len(line_num_str) + span.column - 1) + "^"
        result_lines.append(pointer)

        return "\n".join(result_lines)


class LinguaLexError(LinguaSyntaxError):
    """Character-level template error found by the lexer.

    Examples:
    - Unknown transformer name
    - Missing digits after '=' or '-' in a plural case
    - Unterminated plural case body
    """


class LinguaParseError(LinguaSyntaxError):
    """Token-level template error found by the parser.

    Examples:
    - Unexpected token in a plural case head
    - Plural transformer without an 'other' case
    """


class LinguaLoadError(LinguaError):
    """Translation file could not be loaded.

    Carries the offending file and key in its diagnostic when known.
    """


class LinguaLanguageError(LinguaError, ValueError):
    """Language tag could not be parsed."""
