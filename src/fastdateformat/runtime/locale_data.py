"""Locale symbol tables and default patterns from CLDR.

Adapts Babel's CLDR data to the two collaborators the pattern compiler and
the style factories need:

- LocaleSymbols: era, month, weekday and am/pm name tables
- date_pattern/time_pattern/datetime_pattern: a locale's canonical pattern
  for a Style, converted to the legacy pattern grammar

Results are cached per locale for performance.

Thread-safe. Uses Babel CLDR data.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass

from babel import Locale

from fastdateformat.diagnostics import ErrorTemplate, InvalidStyleLocaleError
from fastdateformat.enums import Style
from fastdateformat.syntax.tokenizer import TokenKind, tokenize

__all__ = [
    "LocaleSymbols",
    "cldr_to_legacy",
    "date_pattern",
    "datetime_pattern",
    "default_pattern",
    "time_pattern",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LocaleSymbols:
    """Immutable name tables for text fields.

    Index conventions match Calendar field values after subtracting the
    field's first value: eras[1] is the common era, months[0] is January,
    weekdays[0] is Monday, am_pm[0] is AM.

    Attributes:
        eras: Abbreviated era names (BC, AD)
        months: Wide month names
        short_months: Abbreviated month names
        weekdays: Wide weekday names
        short_weekdays: Abbreviated weekday names
        am_pm: Abbreviated day-period markers

    Example:
        >>> symbols = LocaleSymbols.for_locale(Locale.parse("en_US"))
        >>> symbols.short_months[0]
        'Jan'
    """

    eras: tuple[str, ...]
    months: tuple[str, ...]
    short_months: tuple[str, ...]
    weekdays: tuple[str, ...]
    short_weekdays: tuple[str, ...]
    am_pm: tuple[str, ...]

    @classmethod
    def for_locale(cls, locale: Locale) -> LocaleSymbols:
        """Get the (cached) symbol tables for locale."""
        return _load_symbols(locale)


@functools.cache
def _load_symbols(locale: Locale) -> LocaleSymbols:
    months = locale.months["format"]
    days = locale.days["format"]
    eras = locale.eras["abbreviated"]
    periods = locale.day_periods["format"]["abbreviated"]
    return LocaleSymbols(
        eras=(eras[0], eras[1]),
        months=tuple(months["wide"][m] for m in range(1, 13)),
        short_months=tuple(months["abbreviated"][m] for m in range(1, 13)),
        weekdays=tuple(days["wide"][d] for d in range(7)),
        short_weekdays=tuple(days["abbreviated"][d] for d in range(7)),
        am_pm=(periods["am"], periods["pm"]),
    )


# ==============================================================================
# CLDR -> LEGACY PATTERN CONVERSION
# ==============================================================================
#
# CLDR patterns share the legacy grammar's letters for almost every field, but
# a few letters differ in meaning or only exist in CLDR:
#
#   CLDR    | Meaning                    | Legacy equivalent
#   --------|----------------------------|------------------
#   y, yyy  | full year, no padding      | yyyy (legacy y/yyy is two-digit)
#   L+      | stand-alone month          | M+
#   c+      | stand-alone weekday        | E+
#   b, B    | day period (noon/midnight) | a
#   v, vvvv | generic zone name          | z, zzzz
#
# Everything else passes through; letters with no legacy meaning are left in
# place so the compiler reports them.
#
# ==============================================================================

_LETTER_MAP: dict[str, str] = {
    "L": "M",
    "c": "E",
    "b": "a",
    "B": "a",
    "v": "z",
}


def _quote_literal(text: str) -> str:
    escaped = text.replace("'", "''")
    if any("A" <= ch <= "Z" or "a" <= ch <= "z" for ch in text):
        return f"'{escaped}'"
    return escaped


def cldr_to_legacy(pattern: str) -> str:
    """Rewrite a CLDR date pattern in the legacy pattern grammar.

    Args:
        pattern: CLDR pattern (e.g., "MMM d, y")

    Returns:
        Equivalent legacy pattern (e.g., "MMM d, yyyy")

    Example:
        >>> cldr_to_legacy("d. LLLL y")
        'd. MMMM yyyy'
        >>> cldr_to_legacy("h 'o''clock' a")  # literal runs are re-quoted whole
        "h' o''clock 'a"
    """
    parts: list[str] = []
    for token in tokenize(pattern):
        if token.kind is TokenKind.LITERAL:
            parts.append(_quote_literal(token.text))
            continue
        letter = token.letter
        length = len(token.text)
        if letter == "y" and length != 2:
            parts.append("y" * max(length, 4))
        elif letter in _LETTER_MAP:
            parts.append(_LETTER_MAP[letter] * (1 if letter in "bB" else length))
        else:
            parts.append(token.text)
    return "".join(parts)


def _style_pattern(formats: object, style: Style) -> str:
    return str(formats[style.cldr_name])  # type: ignore[index]


@functools.cache
def date_pattern(style: Style, locale: Locale) -> str:
    """Locale's date pattern for style, in the legacy grammar.

    Raises:
        InvalidStyleLocaleError: If the locale defines no such pattern
    """
    try:
        pattern = _style_pattern(locale.date_formats, style)
    except KeyError:
        raise InvalidStyleLocaleError(
            ErrorTemplate.no_date_pattern(style.cldr_name, str(locale))
        ) from None
    logger.debug("Resolved %s date pattern for %s: %r", style.cldr_name, locale, pattern)
    return cldr_to_legacy(pattern)


@functools.cache
def time_pattern(style: Style, locale: Locale) -> str:
    """Locale's time pattern for style, in the legacy grammar.

    Raises:
        InvalidStyleLocaleError: If the locale defines no such pattern
    """
    try:
        pattern = _style_pattern(locale.time_formats, style)
    except KeyError:
        raise InvalidStyleLocaleError(
            ErrorTemplate.no_time_pattern(style.cldr_name, str(locale))
        ) from None
    logger.debug("Resolved %s time pattern for %s: %r", style.cldr_name, locale, pattern)
    return cldr_to_legacy(pattern)


@functools.cache
def datetime_pattern(date_style: Style, time_style: Style, locale: Locale) -> str:
    """Locale's combined date-time pattern, in the legacy grammar.

    The CLDR dateTimeFormat for date_style glues the two parts together:
    {1} is replaced by the date pattern and {0} by the time pattern.

    Raises:
        InvalidStyleLocaleError: If any of the three patterns is undefined
    """
    try:
        glue = _style_pattern(locale.datetime_formats, date_style)
        date_part = _style_pattern(locale.date_formats, date_style)
        time_part = _style_pattern(locale.time_formats, time_style)
    except KeyError:
        raise InvalidStyleLocaleError(
            ErrorTemplate.no_datetime_pattern(date_style.cldr_name, time_style.cldr_name, str(locale))
        ) from None
    return cldr_to_legacy(_substitute(glue, date_part, time_part))


def _substitute(glue: str, date_part: str, time_part: str) -> str:
    # Single left-to-right pass: the inserted parts are never rescanned
    # for placeholders.
    out: list[str] = []
    i = 0
    while i < len(glue):
        if glue.startswith("{0}", i):
            out.append(time_part)
            i += 3
        elif glue.startswith("{1}", i):
            out.append(date_part)
            i += 3
        else:
            out.append(glue[i])
            i += 1
    return "".join(out)


def default_pattern(locale: Locale) -> str:
    """Pattern used when a formatter is requested without one.

    The SHORT date and SHORT time pattern of locale, combined.
    """
    return datetime_pattern(Style.SHORT, Style.SHORT, locale)
