"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan

__all__ = ["ErrorTemplate"]


def _span(subtag: str, index: int, offset: int) -> SourceSpan:
    return SourceSpan(start=offset, end=offset + len(subtag), subtag_index=index)


class ErrorTemplate:
    """Centralized error message templates.

    All diagnostics are created here. NO f-strings in exception constructors!
    Positional templates take the offending subtag, its index in the split
    input, and its character offset in the raw string.
    """

    _RFC_URL = "https://www.rfc-editor.org/rfc/rfc5646#section-2.1"
    _UTS35_URL = "https://unicode.org/reports/tr35/#Unicode_locale_identifier"

    @staticmethod
    def empty_tag() -> Diagnostic:
        """Input string is empty."""
        return Diagnostic(
            code=DiagnosticCode.EMPTY_TAG,
            message="Language tag is empty",
            hint="Use 'und' for an undetermined locale",
            help_url=ErrorTemplate._RFC_URL,
        )

    @staticmethod
    def tag_too_long(length: int, limit: int) -> Diagnostic:
        """Input exceeds the accepted size.

        Args:
            length: Actual input length in characters
            limit: Maximum accepted length
        """
        msg = f"Language tag is {length} characters long (limit {limit})"
        return Diagnostic(
            code=DiagnosticCode.TAG_TOO_LONG,
            message=msg,
            hint="Language tags are short identifiers; check the input source",
        )

    @staticmethod
    def empty_subtag(index: int, offset: int) -> Diagnostic:
        """Two separators in a row, or a leading/trailing separator."""
        return Diagnostic(
            code=DiagnosticCode.EMPTY_SUBTAG,
            message=f"Empty subtag at position {index + 1}",
            span=_span("", index, offset),
            subtag="",
            hint="Remove the extra '-' separator",
            help_url=ErrorTemplate._RFC_URL,
        )

    @staticmethod
    def invalid_character(subtag: str, index: int, offset: int) -> Diagnostic:
        """Subtag contains something other than ASCII letters and digits."""
        msg = f"Subtag '{subtag}' contains characters other than ASCII letters and digits"
        return Diagnostic(
            code=DiagnosticCode.INVALID_CHARACTER,
            message=msg,
            span=_span(subtag, index, offset),
            subtag=subtag,
            hint="Subtags are separated by '-' only; '_' is not a separator",
            help_url=ErrorTemplate._RFC_URL,
        )

    @staticmethod
    def subtag_too_long(subtag: str, index: int, offset: int) -> Diagnostic:
        """Subtag longer than 8 characters."""
        msg = f"Subtag '{subtag}' is longer than 8 characters"
        return Diagnostic(
            code=DiagnosticCode.SUBTAG_TOO_LONG,
            message=msg,
            span=_span(subtag, index, offset),
            subtag=subtag,
            help_url=ErrorTemplate._RFC_URL,
        )

    @staticmethod
    def invalid_language(subtag: str, index: int, offset: int) -> Diagnostic:
        """First subtag is neither a language nor the private-use singleton."""
        msg = f"Expected a language subtag or 'x', got '{subtag}'"
        return Diagnostic(
            code=DiagnosticCode.INVALID_LANGUAGE,
            message=msg,
            span=_span(subtag, index, offset),
            subtag=subtag,
            hint="Languages are 2-3, 4 or 5-8 letters; use 'und' if unknown",
            help_url=ErrorTemplate._RFC_URL,
        )

    @staticmethod
    def subtag_out_of_place(subtag: str, index: int, offset: int) -> Diagnostic:
        """Subtag does not fit any slot still open at its position."""
        msg = f"Subtag '{subtag}' is not valid at position {index + 1}"
        return Diagnostic(
            code=DiagnosticCode.SUBTAG_OUT_OF_PLACE,
            message=msg,
            span=_span(subtag, index, offset),
            subtag=subtag,
            hint="Order is language, script, region, variants, extensions, private use",
            help_url=ErrorTemplate._RFC_URL,
        )

    @staticmethod
    def duplicate_variant(subtag: str, index: int, offset: int) -> Diagnostic:
        """Variant subtag repeated."""
        msg = f"Variant subtag '{subtag}' appears more than once"
        return Diagnostic(
            code=DiagnosticCode.DUPLICATE_VARIANT,
            message=msg,
            span=_span(subtag, index, offset),
            subtag=subtag,
            hint="Remove the repeated variant",
        )

    @staticmethod
    def duplicate_singleton(singleton: str, index: int, offset: int) -> Diagnostic:
        """Extension singleton repeated."""
        msg = f"Extension singleton '{singleton}' appears more than once"
        return Diagnostic(
            code=DiagnosticCode.DUPLICATE_SINGLETON,
            message=msg,
            span=_span(singleton, index, offset),
            subtag=singleton,
            hint=f"Merge the subtags into a single '{singleton}' extension block",
        )

    @staticmethod
    def empty_extension(singleton: str, index: int, offset: int) -> Diagnostic:
        """Singleton with no subtags before the next singleton or end of input."""
        msg = f"Singleton '{singleton}' must be followed by at least one subtag"
        return Diagnostic(
            code=DiagnosticCode.EMPTY_EXTENSION,
            message=msg,
            span=_span(singleton, index, offset),
            subtag=singleton,
            help_url=ErrorTemplate._RFC_URL,
        )

    @staticmethod
    def platform_locale_unset() -> Diagnostic:
        """No locale environment variable is set."""
        return Diagnostic(
            code=DiagnosticCode.PLATFORM_LOCALE_UNSET,
            message="Could not determine the platform default locale",
            hint="Set LANGUAGE, LC_ALL, LC_CTYPE or LANG",
        )

    @staticmethod
    def platform_locale_invalid(value: str, reason: str) -> Diagnostic:
        """Platform returned a value that is not a locale identifier.

        Args:
            value: Raw value reported by the platform
            reason: Underlying parse failure
        """
        msg = f"Platform locale '{value}' is not a valid identifier: {reason}"
        return Diagnostic(
            code=DiagnosticCode.PLATFORM_LOCALE_INVALID,
            message=msg,
            subtag=value,
        )

    @staticmethod
    def unsupported_accessor(accessor: str) -> Diagnostic:
        """Accessor needs locale data this package does not ship.

        Args:
            accessor: Name of the accessor that was called
        """
        msg = f"Locale.{accessor}() requires locale data that is not available"
        return Diagnostic(
            code=DiagnosticCode.UNSUPPORTED_ACCESSOR,
            message=msg,
            hint="Read the raw keyword from the tag instead (calendar, collation, ...)",
            help_url=ErrorTemplate._UTS35_URL,
        )
