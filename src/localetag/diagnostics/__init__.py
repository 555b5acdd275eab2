"""Diagnostic system for locale tag errors.

Provides structured error diagnostics with codes, spans, hints, and help URLs.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory, SourceSpan
from .errors import (
    LocaleTagError,
    MalformedTagError,
    PlatformLookupError,
    UnsupportedAccessorError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorCategory",
    "ErrorTemplate",
    "LocaleTagError",
    "MalformedTagError",
    "OutputFormat",
    "PlatformLookupError",
    "SourceSpan",
    "UnsupportedAccessorError",
]
