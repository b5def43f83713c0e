"""Diagnostic formatting service.

Centralizes diagnostic output formatting with configurable options.
Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]

# Control characters rendered as escapes so patterns print on one line.
_CONTROL_ESCAPES = {code: f"\\x{code:02x}" for code in (*range(0x20), 0x7F)} | {
    ord("\n"): "\\n",
    ord("\r"): "\\r",
    ord("\t"): "\\t",
}


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Compiler-style multi-line output (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Attributes:
        output_format: Output style (rust, simple, json)
        sanitize: Truncate embedded patterns and messages
        max_content_length: Maximum content length when sanitizing

    Example:
        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(ErrorTemplate.pattern_null()))
        PATTERN_NULL: The pattern must not be None
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    max_content_length: int = 100

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: Diagnostic to format

        Returns:
            Formatted diagnostic string
        """
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Format several diagnostics separated by blank lines."""
        return "\n\n".join(self.format(d) for d in diagnostics)

    def _clean(self, text: str) -> str:
        """Escape control characters; truncate when sanitizing."""
        escaped = text.translate(_CONTROL_ESCAPES)
        if self.sanitize and len(escaped) > self.max_content_length:
            return escaped[: self.max_content_length] + "..."
        return escaped

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in compiler style.

        Example output:
            error[PATTERN_UNKNOWN_FIELD]: Illegal pattern component: qq
              --> pattern 'yyyy-qq', offset 5
              = help: Quote literal letters, e.g. yyyy-MM-dd'T'HH:mm
        """
        lines = [f"{diagnostic.severity}[{diagnostic.code.name}]: {self._clean(diagnostic.message)}"]
        if diagnostic.pattern is not None:
            location = f"  --> pattern '{self._clean(diagnostic.pattern)}'"
            if diagnostic.position is not None:
                location += f", offset {diagnostic.position}"
            lines.append(location)
        if diagnostic.received_type is not None:
            lines.append(f"  = received: {diagnostic.received_type}")
        if diagnostic.hint:
            lines.append(f"  = help: {diagnostic.hint}")
        return "\n".join(lines)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        return f"{diagnostic.code.name}: {self._clean(diagnostic.message)}"

    def _format_json(self, diagnostic: Diagnostic) -> str:
        data: dict[str, str | int] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": self._clean(diagnostic.message),
            "severity": diagnostic.severity,
        }
        if diagnostic.pattern is not None:
            data["pattern"] = self._clean(diagnostic.pattern)
        if diagnostic.position is not None:
            data["position"] = diagnostic.position
        if diagnostic.received_type is not None:
            data["received_type"] = diagnostic.received_type
        if diagnostic.hint:
            data["hint"] = diagnostic.hint
        return json.dumps(data, ensure_ascii=False)
