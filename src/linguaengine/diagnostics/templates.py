"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan

_KNOWN_TRANSFORMERS = "capitalize, plural, replace"


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This provides:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    # ------------------------------------------------------------------
    # Lexer
    # ------------------------------------------------------------------

    @staticmethod
    def transformer_name_expected(span: SourceSpan | None) -> Diagnostic:
        """Pipe not followed by a lowercase transformer name."""
        return Diagnostic(
            code=DiagnosticCode.TRANSFORMER_NAME_EXPECTED,
            message="Expected lowercase transformer name",
            span=span,
            hint=f"Known transformers are: {_KNOWN_TRANSFORMERS}",
        )

    @staticmethod
    def unknown_transformer(name: str, span: SourceSpan | None) -> Diagnostic:
        """Transformer name is not one of the known transformers.

        Args:
            name: The unrecognized transformer name
            span: Location of the name

        Returns:
            Diagnostic for TRANSFORMER_UNKNOWN
        """
        msg = f"Unknown transformer '{name}'"
        return Diagnostic(
            code=DiagnosticCode.TRANSFORMER_UNKNOWN,
            message=msg,
            span=span,
            hint=f"Known transformers are: {_KNOWN_TRANSFORMERS}",
        )

    @staticmethod
    def plural_open_paren_expected(span: SourceSpan | None) -> Diagnostic:
        """'plural' not immediately followed by '('."""
        return Diagnostic(
            code=DiagnosticCode.PLURAL_OPEN_PAREN_EXPECTED,
            message="Expected '(' after plural transformer",
            span=span,
            hint="Write plural cases as :count|plural(=1 {one} other {#})",
        )

    @staticmethod
    def plural_args_unexpected_char(char: str, span: SourceSpan | None) -> Diagnostic:
        """Character that cannot start a plural argument.

        Args:
            char: The offending character
            span: Location of the character

        Returns:
            Diagnostic for PLURAL_ARGS_UNEXPECTED_CHAR
        """
        msg = f"Unexpected character {char!r} in plural arguments"
        return Diagnostic(
            code=DiagnosticCode.PLURAL_ARGS_UNEXPECTED_CHAR,
            message=msg,
            span=span,
            hint="Plural arguments start with '=N', '=N-M' or 'other', and end with ')'",
        )

    @staticmethod
    def plural_args_unexpected_eof(span: SourceSpan | None) -> Diagnostic:
        """Template ends inside a plural argument list."""
        return Diagnostic(
            code=DiagnosticCode.PLURAL_ARGS_UNEXPECTED_EOF,
            message="Unexpected end of input in plural arguments",
            span=span,
            hint="Close the plural argument list with ')'",
        )

    @staticmethod
    def plural_number_expected(after: str, span: SourceSpan | None) -> Diagnostic:
        """Missing digits after '=' or '-'.

        Args:
            after: The character the digits should follow
            span: Location where digits were expected

        Returns:
            Diagnostic for PLURAL_NUMBER_EXPECTED
        """
        msg = f"Expected number after '{after}'"
        return Diagnostic(
            code=DiagnosticCode.PLURAL_NUMBER_EXPECTED,
            message=msg,
            span=span,
        )

    @staticmethod
    def plural_body_start_expected(span: SourceSpan | None) -> Diagnostic:
        """Plural case head not followed by '{'."""
        return Diagnostic(
            code=DiagnosticCode.PLURAL_BODY_START_EXPECTED,
            message="Expected '{' to start plural case",
            span=span,
        )

    @staticmethod
    def plural_body_unexpected_eof(span: SourceSpan | None) -> Diagnostic:
        """Template ends inside a plural case body."""
        return Diagnostic(
            code=DiagnosticCode.PLURAL_BODY_UNEXPECTED_EOF,
            message="Unexpected end of input in plural case",
            span=span,
            hint="Close the plural case with '}'",
        )

    # ------------------------------------------------------------------
    # Parser
    # ------------------------------------------------------------------

    @staticmethod
    def plural_case_unexpected_token(kind: str, span: SourceSpan | None) -> Diagnostic:
        """Token that cannot appear in a plural case head.

        Args:
            kind: Kind of the offending token
            span: Location of the token

        Returns:
            Diagnostic for PLURAL_CASE_UNEXPECTED_TOKEN
        """
        msg = f"Unexpected token in plural case: {kind}"
        return Diagnostic(
            code=DiagnosticCode.PLURAL_CASE_UNEXPECTED_TOKEN,
            message=msg,
            span=span,
        )

    @staticmethod
    def plural_translation_start_expected(
        kind: str | None, span: SourceSpan | None
    ) -> Diagnostic:
        """Plural case head not followed by a body.

        Args:
            kind: Kind of the token found instead (None at end of tokens)
            span: Location of the token

        Returns:
            Diagnostic for PLURAL_TRANSLATION_START_EXPECTED
        """
        found = kind if kind is not None else "end of input"
        msg = f"Expected translation start, got {found}"
        return Diagnostic(
            code=DiagnosticCode.PLURAL_TRANSLATION_START_EXPECTED,
            message=msg,
            span=span,
        )

    @staticmethod
    def plural_case_unterminated(span: SourceSpan | None) -> Diagnostic:
        """Token stream ended inside a plural case body."""
        return Diagnostic(
            code=DiagnosticCode.PLURAL_CASE_UNTERMINATED,
            message="Unterminated plural case",
            span=span,
        )

    @staticmethod
    def plural_other_missing(key: str, span: SourceSpan | None) -> Diagnostic:
        """Plural transformer without a default case.

        Args:
            key: Replacement key the plural transformer belongs to
            span: Location of the placeholder

        Returns:
            Diagnostic for PLURAL_OTHER_MISSING
        """
        msg = f"Missing 'other' case for plural transformer on ':{key}'"
        return Diagnostic(
            code=DiagnosticCode.PLURAL_OTHER_MISSING,
            message=msg,
            span=span,
            hint="Add a non-empty catch-all case: other {# items}",
        )

    @staticmethod
    def plural_value_invalid(text: str, span: SourceSpan | None) -> Diagnostic:
        """Numeric plural argument could not be converted to int.

        Args:
            text: The digits as written
            span: Location of the digits

        Returns:
            Diagnostic for PLURAL_VALUE_INVALID
        """
        shown = text if len(text) <= 20 else text[:20] + "..."
        msg = f"Invalid plural case value '{shown}'"
        return Diagnostic(
            code=DiagnosticCode.PLURAL_VALUE_INVALID,
            message=msg,
            span=span,
        )

    @staticmethod
    def unexpected_token(kind: str, span: SourceSpan | None) -> Diagnostic:
        """Token that cannot appear at the top level of a template.

        Args:
            kind: Kind of the offending token
            span: Location of the token

        Returns:
            Diagnostic for UNEXPECTED_TOKEN
        """
        msg = f"Unexpected token: {kind}"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_TOKEN,
            message=msg,
            span=span,
        )

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    @staticmethod
    def invalid_yaml(source_path: str, detail: str) -> Diagnostic:
        """Translation file is not valid YAML.

        Args:
            source_path: File being decoded
            detail: YAML library error text

        Returns:
            Diagnostic for LOAD_INVALID_YAML
        """
        msg = f"Unable to decode YAML: {detail}"
        return Diagnostic(
            code=DiagnosticCode.LOAD_INVALID_YAML,
            message=msg,
            source_path=source_path,
        )

    @staticmethod
    def not_a_mapping(source_path: str, type_name: str) -> Diagnostic:
        """Translation file does not contain a key/value mapping.

        Args:
            source_path: File being decoded
            type_name: Type of the decoded document

        Returns:
            Diagnostic for LOAD_NOT_A_MAPPING
        """
        msg = f"Expected a mapping of keys to messages, got {type_name}"
        return Diagnostic(
            code=DiagnosticCode.LOAD_NOT_A_MAPPING,
            message=msg,
            source_path=source_path,
            hint="Translation files map each key to a template string: greeting: Hi :name",
        )

    @staticmethod
    def value_not_scalar(source_path: str, key: str, type_name: str) -> Diagnostic:
        """Translation value is a nested structure instead of a string.

        Args:
            source_path: File being decoded
            key: Translation key holding the value
            type_name: Type of the decoded value

        Returns:
            Diagnostic for LOAD_VALUE_NOT_SCALAR
        """
        msg = f"Expected a template string, got {type_name}"
        return Diagnostic(
            code=DiagnosticCode.LOAD_VALUE_NOT_SCALAR,
            message=msg,
            source_path=source_path,
            message_key=key,
        )

    @staticmethod
    def duplicate_language(file_name: str, language: str) -> Diagnostic:
        """Two files in one directory resolve to the same language.

        Args:
            file_name: Second file found for the language
            language: The duplicated language

        Returns:
            Diagnostic for LOAD_DUPLICATE_LANGUAGE
        """
        msg = f"Duplicate language file '{file_name}' for language {language}"
        return Diagnostic(
            code=DiagnosticCode.LOAD_DUPLICATE_LANGUAGE,
            message=msg,
            source_path=file_name,
        )

    @staticmethod
    def matcher_no_group(file_name: str) -> Diagnostic:
        """File matcher regex lacks the language capture group.

        Args:
            file_name: File name being matched

        Returns:
            Diagnostic for LOAD_MATCHER_NO_GROUP
        """
        return Diagnostic(
            code=DiagnosticCode.LOAD_MATCHER_NO_GROUP,
            message="File matcher regex is missing a capture group",
            source_path=file_name,
            hint="The first capture group of the pattern must capture the language",
        )

    @staticmethod
    def template_invalid(source_path: str, key: str, detail: str) -> Diagnostic:
        """Template in a translation file failed to parse.

        Args:
            source_path: File containing the template
            key: Translation key of the template
            detail: Lexer or parser error text

        Returns:
            Diagnostic for LOAD_TEMPLATE_INVALID
        """
        msg = f"Unable to parse message '{key}': {detail}"
        return Diagnostic(
            code=DiagnosticCode.LOAD_TEMPLATE_INVALID,
            message=msg,
            source_path=source_path,
            message_key=key,
        )

    @staticmethod
    def directory_unreadable(path: str, detail: str) -> Diagnostic:
        """Translation directory could not be listed.

        Args:
            path: Directory path
            detail: OS error text

        Returns:
            Diagnostic for LOAD_DIRECTORY_UNREADABLE
        """
        msg = f"Unable to read translation directory: {detail}"
        return Diagnostic(
            code=DiagnosticCode.LOAD_DIRECTORY_UNREADABLE,
            message=msg,
            source_path=path,
        )

    # ------------------------------------------------------------------
    # Language
    # ------------------------------------------------------------------

    @staticmethod
    def language_invalid(raw: str) -> Diagnostic:
        """No language tag found in the input.

        Args:
            raw: Input text

        Returns:
            Diagnostic for LANGUAGE_INVALID
        """
        msg = f"Invalid language: {raw!r}"
        return Diagnostic(
            code=DiagnosticCode.LANGUAGE_INVALID,
            message=msg,
            hint="Use a tag such as 'en', 'en-US' or 'pt_BR'",
        )

    @staticmethod
    def language_unknown(raw: str, detail: str) -> Diagnostic:
        """Language tag is well-formed but the base language is unknown.

        Args:
            raw: Input text
            detail: Locale data error text

        Returns:
            Diagnostic for LANGUAGE_UNKNOWN
        """
        msg = f"Unknown language {raw!r}: {detail}"
        return Diagnostic(
            code=DiagnosticCode.LANGUAGE_UNKNOWN,
            message=msg,
        )
