"""Formatting rules: the compiled program of a date pattern.

Each pattern token compiles to one rule. A rule knows an upper bound on the
text it produces (estimate_length) and appends that text for a Calendar to a
list[str] buffer (append). Numeric rules additionally expose
append_value(buffer, value) so the hour-wrapping rules can delegate to them.

Rules are frozen dataclasses and hold no per-call state, so one compiled
formatter may be shared freely across threads.

Rule Variants:
    Literals:  CharacterLiteral, StringLiteral
    Text:      TextField (era, month, weekday, am/pm names)
    Numbers:   UnpaddedNumberField, UnpaddedMonthField, TwoDigitNumberField,
               TwoDigitYearField, TwoDigitMonthField, PaddedNumberField
    Hours:     TwelveHourField, TwentyFourHourField (wrap hour 0)
    Zones:     TimeZoneNameRule, TimeZoneNumberRule

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import tzinfo
from typing import TYPE_CHECKING, TypeAlias

from babel import Locale

from fastdateformat.constants import (
    LONG_ZONE_NAME_ESTIMATE,
    MIN_PADDED_WIDTH,
    SHORT_ZONE_NAME_ESTIMATE,
    TWO_DIGIT_ESTIMATE,
    UNPADDED_NUMBER_ESTIMATE,
    ZONE_NUMBER_ESTIMATE,
)
from fastdateformat.diagnostics import ErrorTemplate, InvalidPatternError
from fastdateformat.enums import CalendarField, TimeZoneNameStyle
from fastdateformat.runtime.calendar import Calendar, observes_daylight_time

if TYPE_CHECKING:
    from fastdateformat.runtime.timezone_display import TimeZoneDisplayCache

__all__ = [
    "CharacterLiteral",
    "NumberRule",
    "PaddedNumberField",
    "Rule",
    "StringLiteral",
    "TextField",
    "TimeZoneNameRule",
    "TimeZoneNumberRule",
    "TwelveHourField",
    "TwentyFourHourField",
    "TwoDigitMonthField",
    "TwoDigitNumberField",
    "TwoDigitYearField",
    "UnpaddedMonthField",
    "UnpaddedNumberField",
]

_MILLIS_PER_MINUTE = 60_000
_MILLIS_PER_HOUR = 3_600_000

# Lookup tables for the common case: every calendar field except YEAR,
# DAY_OF_YEAR and MILLISECOND is always below 100.
_UNPADDED: tuple[str, ...] = tuple(str(i) for i in range(100))
_TWO_DIGITS: tuple[str, ...] = tuple(f"{i:02d}" for i in range(100))


def _check_non_negative(value: int) -> None:
    if value < 0:
        msg = f"Negative field value: {value}"
        raise ValueError(msg)


def _digit_count(value: int) -> int:
    return len(str(value))


# ============================================================================
# LITERALS
# ============================================================================


@dataclass(frozen=True, slots=True)
class CharacterLiteral:
    """Single literal character."""

    value: str

    def estimate_length(self) -> int:
        return 1

    def append(self, buffer: list[str], calendar: Calendar) -> None:
        buffer.append(self.value)


@dataclass(frozen=True, slots=True)
class StringLiteral:
    """Literal text run. May be empty (a pattern consisting of a lone quote)."""

    value: str

    def estimate_length(self) -> int:
        return len(self.value)

    def append(self, buffer: list[str], calendar: Calendar) -> None:
        buffer.append(self.value)


# ============================================================================
# TEXT
# ============================================================================


@dataclass(frozen=True, slots=True)
class TextField:
    """Field rendered through a name table.

    Attributes:
        field: Calendar field to read
        names: Name table
        first: Field value stored at names[0] (1 for MONTH, 0 otherwise)

    Example:
        >>> rule = TextField(CalendarField.AM_PM, ("AM", "PM"))
        >>> rule.estimate_length()
        2
    """

    field: CalendarField
    names: tuple[str, ...]
    first: int = 0

    def estimate_length(self) -> int:
        return max((len(name) for name in self.names), default=0)

    def append(self, buffer: list[str], calendar: Calendar) -> None:
        buffer.append(self.names[calendar.get(self.field) - self.first])


# ============================================================================
# NUMBERS
# ============================================================================


@dataclass(frozen=True, slots=True)
class UnpaddedNumberField:
    """Number without padding (pattern width 1)."""

    field: CalendarField

    def estimate_length(self) -> int:
        return UNPADDED_NUMBER_ESTIMATE

    def append(self, buffer: list[str], calendar: Calendar) -> None:
        self.append_value(buffer, calendar.get(self.field))

    def append_value(self, buffer: list[str], value: int) -> None:
        _check_non_negative(value)
        buffer.append(_UNPADDED[value] if value < 100 else str(value))


@dataclass(frozen=True, slots=True)
class UnpaddedMonthField:
    """Month number 1-12 without padding ("M")."""

    def estimate_length(self) -> int:
        return TWO_DIGIT_ESTIMATE

    def append(self, buffer: list[str], calendar: Calendar) -> None:
        self.append_value(buffer, calendar.get(CalendarField.MONTH))

    def append_value(self, buffer: list[str], value: int) -> None:
        _check_non_negative(value)
        buffer.append(_UNPADDED[value])


@dataclass(frozen=True, slots=True)
class TwoDigitNumberField:
    """Number zero-padded to two digits; values from 100 up print in full.

    The estimate widens to the field maximum's digit count so that "DD"
    (day of year, up to 366) and "SS" (milliseconds, up to 999) stay bounded.
    """

    field: CalendarField

    def estimate_length(self) -> int:
        return max(TWO_DIGIT_ESTIMATE, _digit_count(Calendar.get_maximum(self.field)))

    def append(self, buffer: list[str], calendar: Calendar) -> None:
        self.append_value(buffer, calendar.get(self.field))

    def append_value(self, buffer: list[str], value: int) -> None:
        _check_non_negative(value)
        buffer.append(_TWO_DIGITS[value] if value < 100 else str(value))


@dataclass(frozen=True, slots=True)
class TwoDigitYearField:
    """Year modulo 100, always two digits ("yy")."""

    def estimate_length(self) -> int:
        return TWO_DIGIT_ESTIMATE

    def append(self, buffer: list[str], calendar: Calendar) -> None:
        self.append_value(buffer, calendar.get(CalendarField.YEAR) % 100)

    def append_value(self, buffer: list[str], value: int) -> None:
        _check_non_negative(value)
        buffer.append(_TWO_DIGITS[value])


@dataclass(frozen=True, slots=True)
class TwoDigitMonthField:
    """Month 01-12 ("MM")."""

    def estimate_length(self) -> int:
        return TWO_DIGIT_ESTIMATE

    def append(self, buffer: list[str], calendar: Calendar) -> None:
        self.append_value(buffer, calendar.get(CalendarField.MONTH))

    def append_value(self, buffer: list[str], value: int) -> None:
        _check_non_negative(value)
        buffer.append(_TWO_DIGITS[value])


@dataclass(frozen=True, slots=True)
class PaddedNumberField:
    """Number zero-padded to width (3 or more); wider values print in full.

    Raises:
        InvalidPatternError: If width is below 3

    Example:
        >>> buffer: list[str] = []
        >>> PaddedNumberField(CalendarField.MILLISECOND, 4).append_value(buffer, 7)
        >>> buffer
        ['0007']
    """

    field: CalendarField
    width: int

    def __post_init__(self) -> None:
        if self.width < MIN_PADDED_WIDTH:
            raise InvalidPatternError(ErrorTemplate.padding_too_narrow(self.width))

    def estimate_length(self) -> int:
        return max(
            UNPADDED_NUMBER_ESTIMATE,
            self.width,
            _digit_count(Calendar.get_maximum(self.field)),
        )

    def append(self, buffer: list[str], calendar: Calendar) -> None:
        self.append_value(buffer, calendar.get(self.field))

    def append_value(self, buffer: list[str], value: int) -> None:
        _check_non_negative(value)
        buffer.append(str(value).rjust(self.width, "0"))


NumberRule: TypeAlias = (
    UnpaddedNumberField
    | UnpaddedMonthField
    | TwoDigitNumberField
    | TwoDigitYearField
    | TwoDigitMonthField
    | PaddedNumberField
)


# ============================================================================
# HOURS
# ============================================================================


@dataclass(frozen=True, slots=True)
class TwelveHourField:
    """Hour in am/pm with 0 shown as 12 ("h")."""

    rule: NumberRule

    def estimate_length(self) -> int:
        return self.rule.estimate_length()

    def append(self, buffer: list[str], calendar: Calendar) -> None:
        value = calendar.get(CalendarField.HOUR)
        if value == 0:
            value = Calendar.get_least_maximum(CalendarField.HOUR) + 1
        self.rule.append_value(buffer, value)

    def append_value(self, buffer: list[str], value: int) -> None:
        self.rule.append_value(buffer, value)


@dataclass(frozen=True, slots=True)
class TwentyFourHourField:
    """Hour in day with 0 shown as 24 ("k")."""

    rule: NumberRule

    def estimate_length(self) -> int:
        return self.rule.estimate_length()

    def append(self, buffer: list[str], calendar: Calendar) -> None:
        value = calendar.get(CalendarField.HOUR_OF_DAY)
        if value == 0:
            value = Calendar.get_maximum(CalendarField.HOUR_OF_DAY) + 1
        self.rule.append_value(buffer, value)

    def append_value(self, buffer: list[str], value: int) -> None:
        self.rule.append_value(buffer, value)


# ============================================================================
# ZONES
# ============================================================================


@dataclass(frozen=True, slots=True)
class TimeZoneNameRule:
    """Zone display name ("z" short, "zzzz" long).

    With a forced zone both variants are resolved at compile time and the
    choice at format time is a field read. Otherwise the calendar's own zone
    is named through the display cache on every call.

    The daylight variant is used only when the zone observes DST and the
    calendar's DST offset is non-zero.

    Attributes:
        timezone: Formatter zone
        timezone_forced: Whether timezone overrides the calendar's zone
        locale: Locale for names
        style: SHORT or LONG
        zone_names: Display cache consulted when the zone is not forced
        standard: Precomputed standard name (forced zones only)
        daylight: Precomputed daylight name (forced zones only)
    """

    timezone: tzinfo
    timezone_forced: bool
    locale: Locale
    style: TimeZoneNameStyle
    zone_names: TimeZoneDisplayCache = field(compare=False, repr=False)
    standard: str = ""
    daylight: str = ""

    @classmethod
    def create(
        cls,
        timezone: tzinfo,
        timezone_forced: bool,
        locale: Locale,
        style: TimeZoneNameStyle,
        zone_names: TimeZoneDisplayCache,
    ) -> TimeZoneNameRule:
        """Build the rule, resolving both names up front for a forced zone."""
        if not timezone_forced:
            return cls(timezone, False, locale, style, zone_names)
        return cls(
            timezone,
            True,
            locale,
            style,
            zone_names,
            standard=zone_names.get_display(timezone, False, style, locale),
            daylight=zone_names.get_display(timezone, True, style, locale),
        )

    def estimate_length(self) -> int:
        if self.timezone_forced:
            return max(len(self.standard), len(self.daylight))
        if self.style is TimeZoneNameStyle.SHORT:
            return SHORT_ZONE_NAME_ESTIMATE
        return LONG_ZONE_NAME_ESTIMATE

    def append(self, buffer: list[str], calendar: Calendar) -> None:
        in_dst = calendar.get(CalendarField.DST_OFFSET) != 0
        if self.timezone_forced:
            year = calendar.get(CalendarField.YEAR)
            if in_dst and observes_daylight_time(self.timezone, year):
                buffer.append(self.daylight)
            else:
                buffer.append(self.standard)
            return

        zone = calendar.timezone
        daylight = in_dst and calendar.uses_daylight_time()
        buffer.append(self.zone_names.get_display(zone, daylight, self.style, self.locale))


@dataclass(frozen=True, slots=True)
class TimeZoneNumberRule:
    """Numeric UTC offset: "+HHMM" ("Z") or "+HH:MM" ("ZZ")."""

    colon: bool

    def estimate_length(self) -> int:
        return ZONE_NUMBER_ESTIMATE + 1 if self.colon else ZONE_NUMBER_ESTIMATE

    def append(self, buffer: list[str], calendar: Calendar) -> None:
        offset = calendar.get(CalendarField.ZONE_OFFSET) + calendar.get(CalendarField.DST_OFFSET)

        if offset < 0:
            buffer.append("-")
            offset = -offset
        else:
            buffer.append("+")

        hours = offset // _MILLIS_PER_HOUR
        minutes = offset // _MILLIS_PER_MINUTE - 60 * hours
        buffer.append(_TWO_DIGITS[hours])
        if self.colon:
            buffer.append(":")
        buffer.append(_TWO_DIGITS[minutes])


Rule: TypeAlias = (
    CharacterLiteral
    | StringLiteral
    | TextField
    | NumberRule
    | TwelveHourField
    | TwentyFourHourField
    | TimeZoneNameRule
    | TimeZoneNumberRule
)
