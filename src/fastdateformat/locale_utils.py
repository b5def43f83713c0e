"""Locale and time-zone resolution utilities.

Centralizes BCP-47 to POSIX normalization, Babel Locale lookup, and detection
of the platform default locale and time zone. All locale and zone arguments
accepted by the public API are coerced here, at the system boundary.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
import os
from datetime import tzinfo

from babel import Locale, UnknownLocaleError
from babel import dates as babel_dates

from fastdateformat.constants import FALLBACK_LOCALE
from fastdateformat.diagnostics import (
    ErrorTemplate,
    InvalidLocaleError,
    InvalidTimeZoneError,
)

__all__ = [
    "coerce_locale",
    "coerce_timezone",
    "get_babel_locale",
    "get_default_locale",
    "get_default_timezone",
    "get_system_locale",
    "normalize_locale",
]

logger = logging.getLogger(__name__)

# Values that name no real locale ("C.UTF-8" is stripped to "C" first).
_PSEUDO_LOCALES = frozenset({"", "C", "POSIX"})


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        InvalidLocaleError: If locale is not recognized or malformed

    Example:
        >>> get_babel_locale("en-US").territory
        'US'
    """
    try:
        return Locale.parse(normalize_locale(locale_code))
    except (UnknownLocaleError, ValueError) as e:
        raise InvalidLocaleError(
            ErrorTemplate.unknown_locale(locale_code, str(e)), locale_code=locale_code
        ) from None


def get_system_locale(*, raise_on_failure: bool = False) -> str:
    """Detect system locale from OS and environment variables.

    Detection order:
    1. Python locale.getlocale() (OS-level locale)
    2. LC_ALL environment variable (overrides all)
    3. LC_TIME environment variable (for date/time formatting)
    4. LANG environment variable (default locale)

    Filters out "C" and "POSIX" pseudo-locales.

    Args:
        raise_on_failure: If True, raise RuntimeError when locale cannot be
            determined. If False (default), return "en_US" as fallback.

    Returns:
        Detected locale code in POSIX format.

    Raises:
        RuntimeError: If raise_on_failure is True and locale cannot be determined.
    """
    import locale as locale_module  # noqa: PLC0415

    try:
        system_locale, _ = locale_module.getlocale()
        if system_locale:
            system_locale = system_locale.split(".")[0]
            if system_locale not in _PSEUDO_LOCALES:
                return normalize_locale(system_locale)
    except (ValueError, AttributeError):
        pass

    for var in ("LC_ALL", "LC_TIME", "LANG"):
        # Strip encoding suffix (e.g., ".UTF-8")
        value = os.environ.get(var, "").split(".")[0]
        if value not in _PSEUDO_LOCALES:
            return normalize_locale(value)

    if raise_on_failure:
        msg = (
            "Could not determine system locale. "
            "Set LC_ALL, LC_TIME, or LANG environment variable."
        )
        raise RuntimeError(msg)

    return FALLBACK_LOCALE


@functools.cache
def get_default_locale() -> Locale:
    """Platform default locale, resolved once per process.

    Unknown or malformed system locales fall back to en_US with a warning.
    """
    locale_code = get_system_locale()
    try:
        return get_babel_locale(locale_code)
    except InvalidLocaleError as e:
        logger.warning("Unknown system locale '%s': %s. Falling back to %s", locale_code, e, FALLBACK_LOCALE)
        return get_babel_locale(FALLBACK_LOCALE)


def get_default_timezone() -> tzinfo:
    """Platform default time zone (Babel's detected local zone)."""
    return babel_dates.LOCALTZ


def coerce_locale(locale: Locale | str | None) -> Locale | None:
    """Resolve a user-supplied locale argument.

    Args:
        locale: Babel Locale, locale identifier, or None

    Returns:
        Babel Locale, or None if locale is None

    Raises:
        InvalidLocaleError: If a string identifier cannot be resolved
    """
    if locale is None or isinstance(locale, Locale):
        return locale
    return get_babel_locale(locale)


def coerce_timezone(timezone: tzinfo | str | None) -> tzinfo | None:
    """Resolve a user-supplied time-zone argument.

    Args:
        timezone: tzinfo instance, IANA zone name, or None

    Returns:
        tzinfo, or None if timezone is None

    Raises:
        InvalidTimeZoneError: If a zone name is unknown
    """
    if timezone is None or isinstance(timezone, tzinfo):
        return timezone
    try:
        return babel_dates.get_timezone(timezone)
    except (LookupError, ValueError):
        raise InvalidTimeZoneError(
            ErrorTemplate.unknown_timezone(timezone), zone_name=timezone
        ) from None
