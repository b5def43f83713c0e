"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Pattern errors (compile-time failures)
        2000-2999: Style/locale resolution errors
        3000-3999: Formatting input errors
        4000-4999: Configuration errors (locale and time-zone lookup)
    """

    # Pattern errors (1000-1999)
    PATTERN_NULL = 1001
    PATTERN_UNKNOWN_FIELD = 1002
    PATTERN_PADDING_TOO_NARROW = 1003

    # Style/locale errors (2000-2999)
    STYLE_DATE_UNDEFINED = 2001
    STYLE_TIME_UNDEFINED = 2002
    STYLE_DATETIME_UNDEFINED = 2003

    # Formatting input errors (3000-3999)
    INPUT_TYPE_UNSUPPORTED = 3001

    # Configuration errors (4000-4999)
    LOCALE_UNKNOWN = 4001
    TIMEZONE_UNKNOWN = 4002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        pattern: Pattern being compiled (pattern errors only)
        position: Character offset of the offending token in pattern
        received_type: Actual type received (input errors only)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    pattern: str | None = None
    position: int | None = None
    received_type: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like a compiler error.

        Delegates to DiagnosticFormatter for consistent output with
        control-character escaping.

        Example output:
            error[PATTERN_UNKNOWN_FIELD]: Illegal pattern component: qq
              --> pattern 'yyyy-qq', offset 5
              = help: Quote literal letters, e.g. yyyy-MM-dd'T'HH:mm

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
