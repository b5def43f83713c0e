"""Formatter instance cache.

Compiling a pattern is far more expensive than formatting with it, and most
programs use a handful of patterns. FormatterCache memoizes compiled
formatters so that every request for the same (pattern, zone, locale) returns
the identical FastDateFormat object.

Architecture:
    - One threading.RLock per FormatterCache guards every map
    - Maps: formatter instances, date/time/date-time style lookups, and the
      zone display names used by zone name rules
    - get_or_compile() is the single mutation entry point
    - Entries are created on first miss and never evicted

Cache Key Structure:
    instances: FormatterKey (pattern, zone, zone forced, locale, locale forced)
    styles:    StyleKey (kind, styles, zone or None, locale or None)

    The style caches key on the arguments as supplied. The date and
    date-time caches default the locale before keying; the time cache keys on
    the locale only when one is supplied.

Thread Safety:
    Lookups and publication happen under the lock; compilation happens
    outside it. When two threads compile the same key concurrently, the first
    to publish wins and the other returns the winner.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable
from dataclasses import dataclass
from datetime import tzinfo
from enum import StrEnum
from threading import RLock

from babel import Locale

from fastdateformat.diagnostics import ErrorTemplate, InvalidPatternError
from fastdateformat.enums import Style, TimeZoneNameStyle
from fastdateformat.locale_utils import coerce_locale, coerce_timezone, get_default_locale
from fastdateformat.runtime.formatter import FastDateFormat, FormatterKey
from fastdateformat.runtime.locale_data import (
    date_pattern,
    datetime_pattern,
    default_pattern,
    time_pattern,
)
from fastdateformat.runtime.timezone_display import TimeZoneDisplayCache

__all__ = [
    "CacheKind",
    "FormatterCache",
    "StyleKey",
    "get_date_instance",
    "get_datetime_instance",
    "get_instance",
    "get_shared_cache",
    "get_time_instance",
]

logger = logging.getLogger(__name__)


class CacheKind(StrEnum):
    """Map within a FormatterCache."""

    INSTANCE = "instance"
    DATE = "date"
    TIME = "time"
    DATETIME = "datetime"


@dataclass(frozen=True, slots=True)
class StyleKey:
    """Key of a style lookup.

    Attributes:
        kind: Style cache the key belongs to
        styles: (style,) for date/time, (date_style, time_style) for date-time
        timezone: Zone as supplied, or None
        locale: Locale as keyed, or None (time cache without a locale)
    """

    kind: CacheKind
    styles: tuple[Style, ...]
    timezone: tzinfo | None
    locale: Locale | None


class FormatterCache:
    """Thread-safe memo of compiled formatters.

    Example:
        >>> cache = FormatterCache()
        >>> a = cache.get_instance("yyyy-MM-dd", "UTC", "en_US")
        >>> b = cache.get_instance("yyyy-MM-dd", "UTC", "en_US")
        >>> a is b
        True
    """

    __slots__ = ("_default_pattern", "_lock", "_maps", "_zone_names")

    def __init__(self) -> None:
        self._lock = RLock()
        self._maps: dict[CacheKind, dict[Hashable, FastDateFormat]] = {kind: {} for kind in CacheKind}
        self._zone_names = TimeZoneDisplayCache(self._lock)
        self._default_pattern: str | None = None

    @property
    def zone_names(self) -> TimeZoneDisplayCache:
        """Zone display cache shared by the formatters this cache compiles."""
        return self._zone_names

    def get_or_compile(
        self,
        kind: CacheKind,
        key: Hashable,
        compute: Callable[[], FastDateFormat],
    ) -> FastDateFormat:
        """Return the formatter cached under key, computing it on a miss.

        compute() runs outside the lock. Exceptions it raises propagate and
        leave the cache unchanged.

        Args:
            kind: Map to use
            key: Lookup key
            compute: Builds the formatter on a miss

        Returns:
            The published formatter for key
        """
        entries = self._maps[kind]
        with self._lock:
            cached = entries.get(key)
        if cached is not None:
            return cached

        logger.debug("Formatter cache miss (%s): %r", kind, key)
        value = compute()

        # Double-check: another thread may have published while we compiled
        with self._lock:
            return entries.setdefault(key, value)

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    def get_instance(
        self,
        pattern: str | None = None,
        timezone: tzinfo | str | None = None,
        locale: Locale | str | None = None,
    ) -> FastDateFormat:
        """Get the shared formatter for pattern.

        Args:
            pattern: Legacy date pattern; None with no zone and no locale
                selects the platform default locale's SHORT date and SHORT
                time pattern
            timezone: Zone (tzinfo or IANA name); None uses the platform zone
                and lets Calendar values keep their own zone
            locale: Locale (Locale or identifier); None uses the platform locale

        Raises:
            InvalidPatternError: If pattern does not compile, or is None
                while a zone or locale is given
            InvalidTimeZoneError: If timezone names an unknown zone
            InvalidLocaleError: If locale is an unknown identifier
        """
        if pattern is None:
            if timezone is not None or locale is not None:
                raise InvalidPatternError(ErrorTemplate.pattern_null())
            pattern = self._get_default_pattern()
        key = FormatterKey.create(pattern, timezone, locale)
        return self.get_or_compile(
            CacheKind.INSTANCE,
            key,
            lambda: FastDateFormat.from_key(key, self._zone_names),
        )

    def get_date_instance(
        self,
        style: Style | int,
        timezone: tzinfo | str | None = None,
        locale: Locale | str | None = None,
    ) -> FastDateFormat:
        """Get the shared formatter for a locale's date style.

        Raises:
            InvalidStyleLocaleError: If the locale has no such date pattern
        """
        style = Style(style)
        zone = coerce_timezone(timezone)
        resolved = coerce_locale(locale) or get_default_locale()
        key = StyleKey(CacheKind.DATE, (style,), zone, resolved)
        return self.get_or_compile(
            CacheKind.DATE,
            key,
            lambda: self.get_instance(date_pattern(style, resolved), zone, resolved),
        )

    def get_time_instance(
        self,
        style: Style | int,
        timezone: tzinfo | str | None = None,
        locale: Locale | str | None = None,
    ) -> FastDateFormat:
        """Get the shared formatter for a locale's time style.

        Raises:
            InvalidStyleLocaleError: If the locale has no such time pattern
        """
        style = Style(style)
        zone = coerce_timezone(timezone)
        keyed_locale = coerce_locale(locale)
        key = StyleKey(CacheKind.TIME, (style,), zone, keyed_locale)

        def compute() -> FastDateFormat:
            resolved = keyed_locale or get_default_locale()
            return self.get_instance(time_pattern(style, resolved), zone, resolved)

        return self.get_or_compile(CacheKind.TIME, key, compute)

    def get_datetime_instance(
        self,
        date_style: Style | int,
        time_style: Style | int,
        timezone: tzinfo | str | None = None,
        locale: Locale | str | None = None,
    ) -> FastDateFormat:
        """Get the shared formatter for a locale's date and time styles.

        Raises:
            InvalidStyleLocaleError: If the locale lacks either pattern
        """
        date_style = Style(date_style)
        time_style = Style(time_style)
        zone = coerce_timezone(timezone)
        resolved = coerce_locale(locale) or get_default_locale()
        key = StyleKey(CacheKind.DATETIME, (date_style, time_style), zone, resolved)
        return self.get_or_compile(
            CacheKind.DATETIME,
            key,
            lambda: self.get_instance(datetime_pattern(date_style, time_style, resolved), zone, resolved),
        )

    def get_timezone_display(
        self,
        timezone: tzinfo,
        daylight: bool,
        style: TimeZoneNameStyle,
        locale: Locale,
    ) -> str:
        """Get the (cached) display name of a zone variant."""
        return self._zone_names.get_display(timezone, daylight, style, locale)

    # ------------------------------------------------------------------
    # Management
    # ------------------------------------------------------------------

    def _get_default_pattern(self) -> str:
        with self._lock:
            if self._default_pattern is None:
                self._default_pattern = default_pattern(get_default_locale())
                logger.debug("Default pattern: %r", self._default_pattern)
            return self._default_pattern

    def clear(self) -> None:
        """Drop every cached formatter, style lookup and zone name.

        Thread-safe. Formatters already handed out remain valid.
        """
        with self._lock:
            for entries in self._maps.values():
                entries.clear()
            self._zone_names.clear()
            self._default_pattern = None

    def cache_info(self) -> dict[str, int]:
        """Get entry counts per map.

        Thread-safe.

        Returns:
            Dict with keys instance, date, time, datetime, timezone_display
        """
        with self._lock:
            info = {kind.value: len(entries) for kind, entries in self._maps.items()}
            info["timezone_display"] = len(self._zone_names)
            return info


# Module-level shared cache backing the module-level factories.
# Initialized lazily on first access to avoid import-time side effects.
_SHARED_CACHE: FormatterCache | None = None
_SHARED_CACHE_LOCK = RLock()


def get_shared_cache() -> FormatterCache:
    """Get the process-wide FormatterCache.

    Thread-safe. Always returns the same instance.
    """
    # pylint: disable=global-statement
    global _SHARED_CACHE  # noqa: PLW0603
    if _SHARED_CACHE is None:
        with _SHARED_CACHE_LOCK:
            if _SHARED_CACHE is None:
                _SHARED_CACHE = FormatterCache()
    return _SHARED_CACHE


def get_instance(
    pattern: str | None = None,
    timezone: tzinfo | str | None = None,
    locale: Locale | str | None = None,
) -> FastDateFormat:
    """Get a shared formatter for pattern from the process-wide cache.

    Example:
        >>> fdf = get_instance("yyyy-MM-dd'T'HH:mm:ssZZ", "UTC")
        >>> fdf.format(0)
        '1970-01-01T00:00:00+00:00'
    """
    return get_shared_cache().get_instance(pattern, timezone, locale)


def get_date_instance(
    style: Style | int,
    timezone: tzinfo | str | None = None,
    locale: Locale | str | None = None,
) -> FastDateFormat:
    """Get a shared date-style formatter from the process-wide cache."""
    return get_shared_cache().get_date_instance(style, timezone, locale)


def get_time_instance(
    style: Style | int,
    timezone: tzinfo | str | None = None,
    locale: Locale | str | None = None,
) -> FastDateFormat:
    """Get a shared time-style formatter from the process-wide cache."""
    return get_shared_cache().get_time_instance(style, timezone, locale)


def get_datetime_instance(
    date_style: Style | int,
    time_style: Style | int,
    timezone: tzinfo | str | None = None,
    locale: Locale | str | None = None,
) -> FastDateFormat:
    """Get a shared date-time-style formatter from the process-wide cache."""
    return get_shared_cache().get_datetime_instance(date_style, time_style, timezone, locale)
