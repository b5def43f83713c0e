"""Time-zone display name resolution and caching.

Zone names ("EST", "Central European Summer Time") come from CLDR through
Babel. Resolution walks CLDR's zone and metazone tables and is far slower than
formatting a number, so names are memoized per
(zone, daylight, style, locale).

Zones are looked up by IANA key when they have one (zoneinfo, pytz). Zones
without a key, such as datetime.timezone fixed offsets, report their own
tzname().

Thread Safety:
    TimeZoneDisplayCache shares the owning FormatterCache's RLock.
    Entries are populate-once and never evicted.

Python 3.13+. Uses Babel for CLDR zone names.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, tzinfo
from threading import RLock

from babel import Locale
from babel import dates as babel_dates

from fastdateformat.constants import ZONE_NAME_PROBE_YEAR
from fastdateformat.enums import TimeZoneNameStyle
from fastdateformat.runtime.calendar import localize

__all__ = [
    "TimeZoneDisplayCache",
    "TimeZoneDisplayKey",
    "resolve_timezone_display_name",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TimeZoneDisplayKey:
    """Cache key for a rendered zone name."""

    timezone: tzinfo
    daylight: bool
    style: TimeZoneNameStyle
    locale: Locale


def _zone_key(zone: tzinfo) -> str | None:
    key = getattr(zone, "key", None) or getattr(zone, "zone", None)
    return key if isinstance(key, str) else None


def _probe(zone: tzinfo, daylight: bool) -> datetime:
    """Representative instant in zone whose DST state matches daylight.

    Falls back to mid-January when zone never matches (e.g. a daylight
    name requested for a zone without DST).
    """
    candidates = [localize(zone, datetime(ZONE_NAME_PROBE_YEAR, month, 15, 12)) for month in (1, 7)]
    for candidate in candidates:
        if bool(candidate.dst()) == daylight:
            return candidate
    return candidates[0]


def resolve_timezone_display_name(
    timezone: tzinfo,
    daylight: bool,
    style: TimeZoneNameStyle,
    locale: Locale,
) -> str:
    """Render the display name of timezone, uncached.

    Args:
        timezone: Zone to name
        daylight: Whether to name the daylight variant
        style: SHORT ("EST") or LONG ("Eastern Standard Time")
        locale: Locale for the name

    Returns:
        CLDR display name. Zones CLDR does not name render as a GMT offset
        ("GMT+01:00"). The SHORT width has no abbreviation for many zones
        in many locales, and Babel then falls back to a short offset, so
        Europe/London summer is "+0100" in en_GB; such names can exceed
        SHORT_ZONE_NAME_ESTIMATE. Keyless zones render their own tzname().

    Example:
        >>> from zoneinfo import ZoneInfo
        >>> resolve_timezone_display_name(
        ...     ZoneInfo("America/New_York"), False, TimeZoneNameStyle.LONG, Locale.parse("en_US")
        ... )
        'Eastern Standard Time'
    """
    probe = _probe(timezone, daylight)
    if _zone_key(timezone) is None:
        return probe.tzname() or ""
    return babel_dates.get_timezone_name(
        probe,
        width=style.value,
        locale=locale,
        zone_variant="daylight" if daylight else "standard",
    )


class TimeZoneDisplayCache:
    """Memoized zone display names.

    Unbounded: the key space is small (zones in use x 2 variants x 2 styles
    x locales in use).

    Example:
        >>> from datetime import UTC
        >>> names = TimeZoneDisplayCache()
        >>> names.get_display(UTC, False, TimeZoneNameStyle.SHORT, Locale.parse("en"))
        'UTC'
    """

    __slots__ = ("_entries", "_lock")

    def __init__(self, lock: RLock | None = None) -> None:
        """Initialize the cache.

        Args:
            lock: Lock to share with an owning cache (default: a private RLock)
        """
        self._lock = lock if lock is not None else RLock()
        self._entries: dict[TimeZoneDisplayKey, str] = {}

    def get_display(
        self,
        timezone: tzinfo,
        daylight: bool,
        style: TimeZoneNameStyle,
        locale: Locale,
    ) -> str:
        """Get the (cached) display name for a zone variant.

        Thread-safe. Concurrent first requests may resolve the name twice;
        the first one published is returned to everyone.
        """
        key = TimeZoneDisplayKey(timezone, daylight, style, locale)
        with self._lock:
            cached = self._entries.get(key)
        if cached is not None:
            return cached

        name = resolve_timezone_display_name(timezone, daylight, style, locale)
        logger.debug("Resolved zone name %r for %s", name, key)

        with self._lock:
            return self._entries.setdefault(key, name)

    def clear(self) -> None:
        """Drop every cached name. Thread-safe."""
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
