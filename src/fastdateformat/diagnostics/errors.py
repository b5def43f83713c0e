"""fastdateformat exception hierarchy with structured diagnostics.

All exceptions optionally carry a Diagnostic object for rich error information.
Each concrete error also derives from the builtin a caller would expect
(ValueError, TypeError) so generic handlers keep working.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class FastDateFormatError(Exception):
    """Base exception for all fastdateformat errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize FastDateFormatError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class InvalidPatternError(FastDateFormatError, ValueError):
    """Pattern could not be compiled.

    Raised for a None pattern, an unrecognized pattern letter, or a padded
    numeric field narrower than three digits. Raised before anything is cached.
    """


class InvalidStyleLocaleError(FastDateFormatError, ValueError):
    """Locale defines no date, time, or date-time pattern for the requested style."""


class UnsupportedInputTypeError(FastDateFormatError, TypeError):
    """format() received a value that is not an epoch millisecond count,
    date, datetime, or Calendar.

    Attributes:
        value_type: Name of the rejected type
    """

    def __init__(self, message: str | Diagnostic, *, value_type: str = "") -> None:
        super().__init__(message)
        self.value_type = value_type


class InvalidLocaleError(FastDateFormatError, ValueError):
    """Locale identifier is malformed or unknown to CLDR.

    Attributes:
        locale_code: The identifier that failed to resolve
    """

    def __init__(self, message: str | Diagnostic, *, locale_code: str = "") -> None:
        super().__init__(message)
        self.locale_code = locale_code


class InvalidTimeZoneError(FastDateFormatError, ValueError):
    """Time-zone name is unknown to the zone database.

    Attributes:
        zone_name: The name that failed to resolve
    """

    def __init__(self, message: str | Diagnostic, *, zone_name: str = "") -> None:
        super().__init__(message)
        self.zone_name = zone_name
