"""Enumerations for fastdateformat type-safe constants.

Style uses IntEnum so the ordinals line up with the legacy DateFormat style
constants (FULL=0 .. SHORT=3); cldr_name gives the matching Babel/CLDR key.

Python 3.13+.
"""

from enum import IntEnum, StrEnum

__all__ = [
    "CalendarField",
    "Style",
    "TimeZoneNameStyle",
]


class Style(IntEnum):
    """Locale format style selecting a canonical CLDR pattern.

    IntEnum keeps the legacy ordinals: int(Style.SHORT) == 3
    """

    FULL = 0
    """Full style: Tuesday, April 12, 1952 AD"""

    LONG = 1
    """Long style: January 12, 1952"""

    MEDIUM = 2
    """Medium style: Jan 12, 1952"""

    SHORT = 3
    """Short style: 12/13/52"""

    @property
    def cldr_name(self) -> str:
        """Key used by Babel's date_formats/time_formats/datetime_formats."""
        return self.name.lower()


class TimeZoneNameStyle(StrEnum):
    """Width of a rendered time-zone display name.

    StrEnum values are the Babel `width` argument: str(TimeZoneNameStyle.LONG) == "long"
    """

    SHORT = "short"
    """Abbreviated name: EST"""

    LONG = "long"
    """Full name: Eastern Standard Time"""


class CalendarField(IntEnum):
    """Calendar component read by numeric and text rules."""

    ERA = 0
    YEAR = 1
    MONTH = 2
    """Month of year, 1-12."""
    WEEK_OF_YEAR = 3
    WEEK_OF_MONTH = 4
    DAY_OF_MONTH = 5
    DAY_OF_YEAR = 6
    DAY_OF_WEEK = 7
    """Weekday, 0=Monday .. 6=Sunday (Babel's day table indexing)."""
    DAY_OF_WEEK_IN_MONTH = 8
    AM_PM = 9
    """0=AM, 1=PM."""
    HOUR = 10
    """Hour in am/pm, 0-11."""
    HOUR_OF_DAY = 11
    """Hour in day, 0-23."""
    MINUTE = 12
    SECOND = 13
    MILLISECOND = 14
    ZONE_OFFSET = 15
    """Raw (standard) offset from UTC in milliseconds."""
    DST_OFFSET = 16
    """Daylight saving offset in milliseconds."""
