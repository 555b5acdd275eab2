"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
    "SourceSpan",
]


class ErrorCategory(StrEnum):
    """Error categorization matching the exception hierarchy.

    Categories:
        SYNTAX: Tag string violates the grammar
        PLATFORM: Default-locale lookup could not produce an identifier
        ACCESSOR: Accessor whose backing locale data is not provided
    """

    SYNTAX = "syntax"
    PLATFORM = "platform"
    ACCESSOR = "accessor"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Syntax errors (malformed tags)
        2000-2999: Platform lookup errors
        3000-3999: Accessor errors
    """

    # Syntax errors (1000-1999)
    EMPTY_TAG = 1001
    EMPTY_SUBTAG = 1002
    INVALID_CHARACTER = 1003
    SUBTAG_TOO_LONG = 1004
    INVALID_LANGUAGE = 1005
    SUBTAG_OUT_OF_PLACE = 1006
    DUPLICATE_VARIANT = 1007
    DUPLICATE_SINGLETON = 1008
    EMPTY_EXTENSION = 1009
    TAG_TOO_LONG = 1010

    # Platform errors (2000-2999)
    PLATFORM_LOCALE_UNSET = 2001
    PLATFORM_LOCALE_INVALID = 2002

    # Accessor errors (3000-3999)
    UNSUPPORTED_ACCESSOR = 3001

    @property
    def category(self) -> ErrorCategory:
        """Category derived from the code's numeric range."""
        if self.value < 2000:
            return ErrorCategory.SYNTAX
        if self.value < 3000:
            return ErrorCategory.PLATFORM
        return ErrorCategory.ACCESSOR


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Location of the offending subtag inside the raw tag string.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        subtag_index: Position of the subtag in the split input (0-indexed)
    """

    start: int
    end: int
    subtag_index: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start or subtag_index is negative, or end precedes start.
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.subtag_index < 0:
            msg = f"SourceSpan.subtag_index must be >= 0, got {self.subtag_index}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Location of the offending subtag (None when not positional)
        hint: Suggestion for fixing the error
        help_url: Documentation URL for this error
        subtag: The offending subtag text, when there is one
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    help_url: str | None = None
    subtag: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic in compiler style.

        Example output:
            error[DUPLICATE_VARIANT]: Variant subtag '1996' appears more than once
              --> subtag 3, offset 8..12
              = subtag: 1996
              = help: Remove the repeated variant

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
