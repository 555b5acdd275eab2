"""Rendering of tag diagnostics.

Every exception built from a Diagnostic gets its message from here, so a
malformed tag reads the same in a traceback, a log line or a JSON report.

Python 3.13+. Zero external dependencies.
"""

import json
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]


class OutputFormat(StrEnum):
    """How a diagnostic is laid out."""

    RUST = "rust"  # multi-line, pointing at the subtag (default)
    SIMPLE = "simple"  # CODE: message
    JSON = "json"  # one object per diagnostic


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Turns a Diagnostic into text.

    Example:
        >>> from localetag.diagnostics import ErrorTemplate
        >>> diagnostic = ErrorTemplate.duplicate_singleton("u", 3, 8)
        >>> print(DiagnosticFormatter().format(diagnostic))
        error[DUPLICATE_SINGLETON]: Extension singleton 'u' appears more than once
          --> subtag 4, offset 8..9
          = subtag: u
          = help: Merge the subtags into a single 'u' extension block
        >>> print(DiagnosticFormatter(OutputFormat.SIMPLE).format(diagnostic))
        DUPLICATE_SINGLETON: Extension singleton 'u' appears more than once
    """

    output_format: OutputFormat = OutputFormat.RUST

    def format(self, diagnostic: Diagnostic) -> str:
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return f"{diagnostic.code.name}: {diagnostic.message}"
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    @staticmethod
    def _format_rust(diagnostic: Diagnostic) -> str:
        lines = [f"{diagnostic.severity}[{diagnostic.code.name}]: {diagnostic.message}"]
        if (span := diagnostic.span) is not None:
            # Subtag positions are shown 1-based, offsets 0-based like str slicing.
            lines.append(f"  --> subtag {span.subtag_index + 1}, offset {span.start}..{span.end}")
        if diagnostic.subtag is not None:
            lines.append(f"  = subtag: {diagnostic.subtag}")
        if diagnostic.hint:
            lines.append(f"  = help: {diagnostic.hint}")
        if diagnostic.help_url:
            lines.append(f"  = note: see {diagnostic.help_url}")
        return "\n".join(lines)

    @staticmethod
    def _format_json(diagnostic: Diagnostic) -> str:
        data: dict[str, str | int] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "category": str(diagnostic.code.category),
            "message": diagnostic.message,
            "severity": diagnostic.severity,
        }
        if (span := diagnostic.span) is not None:
            data |= {"subtag_index": span.subtag_index, "start": span.start, "end": span.end}
        optional = {
            "subtag": diagnostic.subtag,
            "hint": diagnostic.hint,
            "help_url": diagnostic.help_url,
        }
        data |= {key: value for key, value in optional.items() if value is not None}
        return json.dumps(data, ensure_ascii=False)
