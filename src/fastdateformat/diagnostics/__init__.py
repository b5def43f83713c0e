"""Diagnostic system for fastdateformat errors.

Provides structured error diagnostics with codes, hints, and pattern offsets.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    FastDateFormatError,
    InvalidLocaleError,
    InvalidPatternError,
    InvalidStyleLocaleError,
    InvalidTimeZoneError,
    UnsupportedInputTypeError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "FastDateFormatError",
    "InvalidLocaleError",
    "InvalidPatternError",
    "InvalidStyleLocaleError",
    "InvalidTimeZoneError",
    "OutputFormat",
    "UnsupportedInputTypeError",
]
