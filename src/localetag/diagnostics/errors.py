"""Locale tag exception hierarchy with structured diagnostics.

All exceptions optionally store a Diagnostic object for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "LocaleTagError",
    "MalformedTagError",
    "PlatformLookupError",
    "UnsupportedAccessorError",
]


class LocaleTagError(Exception):
    """Base exception for all localetag errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize LocaleTagError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class MalformedTagError(LocaleTagError, ValueError):
    """Tag string violates the grammar at some subtag position.

    Carries no partial result. Also a ValueError so callers treating a bad
    identifier as a bad value keep working.

    Attributes:
        input_value: The raw string that failed to parse
    """

    def __init__(self, message: str | Diagnostic, *, input_value: str = "") -> None:
        """Initialize MalformedTagError.

        Args:
            message: Error message string OR Diagnostic object
            input_value: The raw string that failed to parse
        """
        super().__init__(message)
        self.input_value = input_value


class PlatformLookupError(LocaleTagError):
    """The platform could not report a default locale identifier.

    Absorbed by the current-locale registry, which falls back to 'und'.
    """


class UnsupportedAccessorError(LocaleTagError, NotImplementedError):
    """Accessor whose backing locale data is not provided.

    Distinct from an accessor returning None: None means "not requested in
    the tag", this error means "not implemented".

    Attributes:
        accessor: Name of the accessor that was called
    """

    def __init__(self, message: str | Diagnostic, *, accessor: str = "") -> None:
        """Initialize UnsupportedAccessorError.

        Args:
            message: Error message string OR Diagnostic object
            accessor: Name of the accessor that was called
        """
        super().__init__(message)
        self.accessor = accessor
