"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and documents every error case in one place.
    """

    @staticmethod
    def pattern_null() -> Diagnostic:
        """Pattern argument was None.

        Returns:
            Diagnostic for PATTERN_NULL
        """
        return Diagnostic(
            code=DiagnosticCode.PATTERN_NULL,
            message="The pattern must not be None",
            hint="Pass a pattern string such as 'yyyy-MM-dd', or omit it for the locale default",
        )

    @staticmethod
    def unknown_pattern_field(pattern: str, token: str, position: int) -> Diagnostic:
        """Pattern contains a letter with no formatting rule.

        Args:
            pattern: Pattern being compiled
            token: The offending letter run
            position: Offset of the token in pattern

        Returns:
            Diagnostic for PATTERN_UNKNOWN_FIELD
        """
        msg = f"Illegal pattern component: {token}"
        return Diagnostic(
            code=DiagnosticCode.PATTERN_UNKNOWN_FIELD,
            message=msg,
            hint="Quote literal letters, e.g. yyyy-MM-dd'T'HH:mm",
            pattern=pattern,
            position=position,
        )

    @staticmethod
    def padding_too_narrow(width: int) -> Diagnostic:
        """Padded numeric rule constructed with a width below three.

        Args:
            width: The requested width

        Returns:
            Diagnostic for PATTERN_PADDING_TOO_NARROW
        """
        msg = f"Padded number width must be at least 3, got {width}"
        return Diagnostic(
            code=DiagnosticCode.PATTERN_PADDING_TOO_NARROW,
            message=msg,
            hint="Widths 1 and 2 use the unpadded and two-digit number rules",
        )

    @staticmethod
    def no_date_pattern(style: str, locale: str) -> Diagnostic:
        """Locale has no date pattern for a style.

        Args:
            style: CLDR style name
            locale: Locale identifier

        Returns:
            Diagnostic for STYLE_DATE_UNDEFINED
        """
        msg = f"No date pattern for locale: {locale} (style '{style}')"
        return Diagnostic(code=DiagnosticCode.STYLE_DATE_UNDEFINED, message=msg)

    @staticmethod
    def no_time_pattern(style: str, locale: str) -> Diagnostic:
        """Locale has no time pattern for a style.

        Args:
            style: CLDR style name
            locale: Locale identifier

        Returns:
            Diagnostic for STYLE_TIME_UNDEFINED
        """
        msg = f"No time pattern for locale: {locale} (style '{style}')"
        return Diagnostic(code=DiagnosticCode.STYLE_TIME_UNDEFINED, message=msg)

    @staticmethod
    def no_datetime_pattern(date_style: str, time_style: str, locale: str) -> Diagnostic:
        """Locale has no date-time pattern for a style pair.

        Args:
            date_style: CLDR date style name
            time_style: CLDR time style name
            locale: Locale identifier

        Returns:
            Diagnostic for STYLE_DATETIME_UNDEFINED
        """
        msg = f"No date time pattern for locale: {locale} (styles '{date_style}', '{time_style}')"
        return Diagnostic(code=DiagnosticCode.STYLE_DATETIME_UNDEFINED, message=msg)

    @staticmethod
    def unsupported_input(type_name: str) -> Diagnostic:
        """format() received an unsupported value.

        Args:
            type_name: Name of the received type

        Returns:
            Diagnostic for INPUT_TYPE_UNSUPPORTED
        """
        msg = f"Unknown class: {type_name}"
        return Diagnostic(
            code=DiagnosticCode.INPUT_TYPE_UNSUPPORTED,
            message=msg,
            hint="Pass epoch milliseconds (int), a date, a datetime, or a Calendar",
            received_type=type_name,
        )

    @staticmethod
    def unknown_locale(locale_code: str, reason: str) -> Diagnostic:
        """Locale identifier could not be resolved.

        Args:
            locale_code: The identifier as supplied
            reason: Underlying Babel error text

        Returns:
            Diagnostic for LOCALE_UNKNOWN
        """
        msg = f"Unknown locale identifier '{locale_code}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_UNKNOWN,
            message=msg,
            hint="Use a CLDR identifier such as 'en_US' or 'de-DE'",
        )

    @staticmethod
    def unknown_timezone(zone_name: str) -> Diagnostic:
        """Time-zone name could not be resolved.

        Args:
            zone_name: The name as supplied

        Returns:
            Diagnostic for TIMEZONE_UNKNOWN
        """
        msg = f"Unknown time zone '{zone_name}'"
        return Diagnostic(
            code=DiagnosticCode.TIMEZONE_UNKNOWN,
            message=msg,
            hint="Use an IANA zone name such as 'America/New_York', or pass a tzinfo",
        )
