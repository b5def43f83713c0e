"""Formatting runtime package.

Provides the calendar abstraction, locale data adapters, formatting rules,
the FastDateFormat engine, and the formatter instance cache.

Python 3.13+.
"""

# Leaf modules first: the compiler (syntax.compiler) imports rules and
# locale_data, and formatter imports the compiler.
from .calendar import Calendar, observes_daylight_time
from .locale_data import (
    LocaleSymbols,
    cldr_to_legacy,
    date_pattern,
    datetime_pattern,
    default_pattern,
    time_pattern,
)
from .rules import Rule
from .timezone_display import (
    TimeZoneDisplayCache,
    TimeZoneDisplayKey,
    resolve_timezone_display_name,
)

from .formatter import FastDateFormat, FormatterKey, ParsePosition  # isort: skip
from .cache import (  # isort: skip
    CacheKind,
    FormatterCache,
    StyleKey,
    get_date_instance,
    get_datetime_instance,
    get_instance,
    get_shared_cache,
    get_time_instance,
)

__all__ = [
    "CacheKind",
    "Calendar",
    "FastDateFormat",
    "FormatterCache",
    "FormatterKey",
    "LocaleSymbols",
    "ParsePosition",
    "Rule",
    "StyleKey",
    "TimeZoneDisplayCache",
    "TimeZoneDisplayKey",
    "cldr_to_legacy",
    "date_pattern",
    "datetime_pattern",
    "default_pattern",
    "get_date_instance",
    "get_datetime_instance",
    "get_instance",
    "get_shared_cache",
    "get_time_instance",
    "observes_daylight_time",
    "resolve_timezone_display_name",
    "time_pattern",
]
