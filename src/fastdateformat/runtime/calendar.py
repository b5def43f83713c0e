"""Calendar abstraction over aware datetimes.

A Calendar pairs an aware datetime with the Babel Locale that governs
week numbering. Formatting rules read integer fields from it through get();
the field semantics follow the legacy Gregorian calendar API (hour-in-am/pm,
day-of-week-in-month, zone and DST offsets in milliseconds) while the
arithmetic itself is delegated to datetime and Babel's DateTimeFormat.

Calendars are immutable. with_timezone() returns a new instance, so a
formatter that overrides the zone never mutates a caller's value.

Python 3.13+. Uses Babel for CLDR week rules.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from datetime import UTC, date, datetime, time, timedelta, tzinfo

from babel import Locale
from babel.dates import DateTimeFormat

from fastdateformat.enums import CalendarField

__all__ = ["Calendar", "localize", "observes_daylight_time"]

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_ONE_MILLISECOND = timedelta(milliseconds=1)
_MILLIS_PER_HOUR = 60 * 60 * 1000

# Largest value each field can take in any month/year.
_MAXIMUM: dict[CalendarField, int] = {
    CalendarField.ERA: 1,
    CalendarField.YEAR: 9999,
    CalendarField.MONTH: 12,
    CalendarField.WEEK_OF_YEAR: 53,
    CalendarField.WEEK_OF_MONTH: 6,
    CalendarField.DAY_OF_MONTH: 31,
    CalendarField.DAY_OF_YEAR: 366,
    CalendarField.DAY_OF_WEEK: 6,
    CalendarField.DAY_OF_WEEK_IN_MONTH: 6,
    CalendarField.AM_PM: 1,
    CalendarField.HOUR: 11,
    CalendarField.HOUR_OF_DAY: 23,
    CalendarField.MINUTE: 59,
    CalendarField.SECOND: 59,
    CalendarField.MILLISECOND: 999,
    CalendarField.ZONE_OFFSET: 14 * _MILLIS_PER_HOUR,
    CalendarField.DST_OFFSET: 2 * _MILLIS_PER_HOUR,
}

# Smallest per-period maximum (e.g. February's 28 days).
_LEAST_MAXIMUM: dict[CalendarField, int] = {
    **_MAXIMUM,
    CalendarField.WEEK_OF_YEAR: 52,
    CalendarField.WEEK_OF_MONTH: 4,
    CalendarField.DAY_OF_MONTH: 28,
    CalendarField.DAY_OF_YEAR: 365,
    CalendarField.DAY_OF_WEEK_IN_MONTH: 4,
    CalendarField.DST_OFFSET: 20 * 60 * 1000,
}


def localize(zone: tzinfo, naive: datetime) -> datetime:
    """Attach zone to a naive wall-clock datetime (pytz and zoneinfo aware)."""
    if hasattr(zone, "localize"):  # pytz
        return zone.localize(naive)  # type: ignore[no-any-return]
    return naive.replace(tzinfo=zone)


def _to_millis(delta: timedelta | None) -> int:
    if delta is None:
        return 0
    return delta // _ONE_MILLISECOND


@functools.lru_cache(maxsize=256)
def observes_daylight_time(zone: tzinfo, year: int) -> bool:
    """Whether zone applies a daylight saving rule during year.

    Probes mid-January and mid-July so both hemispheres are detected.
    Fixed-offset zones never observe DST.
    """
    for month in (1, 7):
        probe = localize(zone, datetime(year, month, 15, 12))
        if probe.dst():
            return True
    return False


@dataclass(frozen=True, slots=True)
class Calendar:
    """Immutable calendar value: an aware instant plus a week-rule locale.

    Attributes:
        instant: Aware datetime; its tzinfo is the calendar's zone
        locale: Locale whose first-day-of-week and minimal-days rules drive
            WEEK_OF_YEAR and WEEK_OF_MONTH

    Example:
        >>> from datetime import UTC
        >>> cal = Calendar.from_millis(0, UTC, Locale.parse("en_US"))
        >>> cal.get(CalendarField.YEAR)
        1970
    """

    instant: datetime
    locale: Locale

    def __post_init__(self) -> None:
        """Reject naive datetimes.

        Raises:
            ValueError: If instant carries no tzinfo
        """
        if self.instant.tzinfo is None:
            msg = "Calendar requires an aware datetime; use Calendar.from_datetime() for naive values"
            raise ValueError(msg)

    @classmethod
    def from_millis(cls, millis: int, zone: tzinfo, locale: Locale) -> Calendar:
        """Calendar for an epoch millisecond count viewed in zone."""
        return cls((_EPOCH + timedelta(milliseconds=millis)).astimezone(zone), locale)

    @classmethod
    def from_datetime(cls, value: date | datetime, zone: tzinfo, locale: Locale) -> Calendar:
        """Calendar for a date or datetime viewed in zone.

        Aware datetimes are converted to zone. Naive datetimes are taken as
        wall-clock times in zone, and plain dates as midnight in zone.
        """
        if not isinstance(value, datetime):
            value = datetime.combine(value, time())
        if value.tzinfo is None:
            return cls(localize(zone, value), locale)
        return cls(value.astimezone(zone), locale)

    @property
    def timezone(self) -> tzinfo:
        """The calendar's zone."""
        return self.instant.tzinfo  # type: ignore[return-value]

    def with_timezone(self, zone: tzinfo) -> Calendar:
        """Copy of this calendar showing the same instant in zone."""
        return Calendar(self.instant.astimezone(zone), self.locale)

    def to_millis(self) -> int:
        """Epoch milliseconds of the instant."""
        return _to_millis(self.instant - _EPOCH)

    def get(self, field: CalendarField) -> int:
        """Read one calendar field as an integer."""
        instant = self.instant
        match field:
            case CalendarField.ERA:
                # datetime covers years 1-9999, all in the common era
                return 1
            case CalendarField.YEAR:
                return instant.year
            case CalendarField.MONTH:
                return instant.month
            case CalendarField.WEEK_OF_YEAR:
                return DateTimeFormat(instant, self.locale).get_week_of_year()
            case CalendarField.WEEK_OF_MONTH:
                return DateTimeFormat(instant, self.locale).get_week_of_month()
            case CalendarField.DAY_OF_MONTH:
                return instant.day
            case CalendarField.DAY_OF_YEAR:
                return instant.timetuple().tm_yday
            case CalendarField.DAY_OF_WEEK:
                return instant.weekday()
            case CalendarField.DAY_OF_WEEK_IN_MONTH:
                return (instant.day - 1) // 7 + 1
            case CalendarField.AM_PM:
                return 0 if instant.hour < 12 else 1
            case CalendarField.HOUR:
                return instant.hour % 12
            case CalendarField.HOUR_OF_DAY:
                return instant.hour
            case CalendarField.MINUTE:
                return instant.minute
            case CalendarField.SECOND:
                return instant.second
            case CalendarField.MILLISECOND:
                return instant.microsecond // 1000
            case CalendarField.ZONE_OFFSET:
                return _to_millis(instant.utcoffset()) - _to_millis(instant.dst())
            case CalendarField.DST_OFFSET:
                return _to_millis(instant.dst())

    @staticmethod
    def get_maximum(field: CalendarField) -> int:
        """Largest value field can take."""
        return _MAXIMUM[field]

    @staticmethod
    def get_least_maximum(field: CalendarField) -> int:
        """Smallest maximum of field across periods (HOUR: 11, DAY_OF_MONTH: 28)."""
        return _LEAST_MAXIMUM[field]

    def uses_daylight_time(self) -> bool:
        """Whether the calendar's zone observes DST in the calendar's year."""
        return observes_daylight_time(self.timezone, self.instant.year)
