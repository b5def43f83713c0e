"""Pattern compiler: tokens to formatting rules.

Maps each pattern token to a rule by its letter and run length:

    Letter  | Rule
    --------|---------------------------------------------------------------
    G       | era name
    y       | n>=4 padded year of width n; otherwise two-digit year
    M       | n>=4 month name; 3 short month name; 2 two-digit; 1 unpadded
    E       | n>=4 weekday name; otherwise short weekday name
    a       | am/pm marker
    h       | hour 1-12 (0 shown as 12)
    k       | hour 1-24 (0 shown as 24)
    K H     | hour 0-11 / 0-23
    d D F   | day of month / day of year / day-of-week in month
    w W     | week of year / week of month
    m s S   | minute / second / millisecond
    z       | n>=4 long zone name; otherwise short zone name
    Z       | n=1 +HHMM; n>=2 +HH:MM

Numeric letters use the padding rule: width 1 unpadded, 2 two digits, 3+
zero-padded to the width. Any other letter is an error. Literal tokens become
character or string literals.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import tzinfo
from typing import TYPE_CHECKING

from babel import Locale

from fastdateformat.diagnostics import ErrorTemplate, InvalidPatternError
from fastdateformat.enums import CalendarField, TimeZoneNameStyle
from fastdateformat.runtime.locale_data import LocaleSymbols
from fastdateformat.runtime.rules import (
    CharacterLiteral,
    NumberRule,
    PaddedNumberField,
    Rule,
    StringLiteral,
    TextField,
    TimeZoneNameRule,
    TimeZoneNumberRule,
    TwelveHourField,
    TwentyFourHourField,
    TwoDigitMonthField,
    TwoDigitNumberField,
    TwoDigitYearField,
    UnpaddedMonthField,
    UnpaddedNumberField,
)
from fastdateformat.syntax.tokenizer import PatternToken, TokenKind, tokenize

if TYPE_CHECKING:
    from fastdateformat.runtime.timezone_display import TimeZoneDisplayCache

__all__ = ["CompiledPattern", "compile_pattern", "select_number_rule"]

logger = logging.getLogger(__name__)

# Letters rendered purely by the padding rule.
_NUMERIC_FIELDS: dict[str, CalendarField] = {
    "d": CalendarField.DAY_OF_MONTH,
    "D": CalendarField.DAY_OF_YEAR,
    "F": CalendarField.DAY_OF_WEEK_IN_MONTH,
    "w": CalendarField.WEEK_OF_YEAR,
    "W": CalendarField.WEEK_OF_MONTH,
    "H": CalendarField.HOUR_OF_DAY,
    "K": CalendarField.HOUR,
    "m": CalendarField.MINUTE,
    "s": CalendarField.SECOND,
    "S": CalendarField.MILLISECOND,
}

# Run length from which text fields use the full (wide) name.
_FULL_NAME_LENGTH = 4


@dataclass(frozen=True, slots=True)
class CompiledPattern:
    """Result of compiling a pattern.

    Attributes:
        rules: Rules in pattern order
        max_length_estimate: Sum of the rules' length estimates
    """

    rules: tuple[Rule, ...]
    max_length_estimate: int


def select_number_rule(field: CalendarField, width: int) -> NumberRule:
    """Pick the numeric rule for a field rendered at width.

    Example:
        >>> select_number_rule(CalendarField.MINUTE, 2)
        TwoDigitNumberField(field=<CalendarField.MINUTE: 12>)
    """
    match width:
        case 1:
            return UnpaddedNumberField(field)
        case 2:
            return TwoDigitNumberField(field)
        case _:
            return PaddedNumberField(field, width)


def _select_rule(
    token: PatternToken,
    pattern: str,
    symbols: LocaleSymbols,
    timezone: tzinfo,
    timezone_forced: bool,
    locale: Locale,
    zone_names: TimeZoneDisplayCache,
) -> Rule:
    if token.kind is TokenKind.LITERAL:
        if len(token) == 1:
            return CharacterLiteral(token.text)
        return StringLiteral(token.text)

    length = len(token)
    full = length >= _FULL_NAME_LENGTH

    match token.letter:
        case "G":
            return TextField(CalendarField.ERA, symbols.eras)
        case "y":
            if full:
                return select_number_rule(CalendarField.YEAR, length)
            return TwoDigitYearField()
        case "M":
            if full:
                return TextField(CalendarField.MONTH, symbols.months, first=1)
            match length:
                case 3:
                    return TextField(CalendarField.MONTH, symbols.short_months, first=1)
                case 2:
                    return TwoDigitMonthField()
                case _:
                    return UnpaddedMonthField()
        case "E":
            names = symbols.weekdays if full else symbols.short_weekdays
            return TextField(CalendarField.DAY_OF_WEEK, names)
        case "a":
            return TextField(CalendarField.AM_PM, symbols.am_pm)
        case "h":
            return TwelveHourField(select_number_rule(CalendarField.HOUR, length))
        case "k":
            return TwentyFourHourField(select_number_rule(CalendarField.HOUR_OF_DAY, length))
        case "z":
            style = TimeZoneNameStyle.LONG if full else TimeZoneNameStyle.SHORT
            return TimeZoneNameRule.create(timezone, timezone_forced, locale, style, zone_names)
        case "Z":
            return TimeZoneNumberRule(colon=length >= 2)
        case letter if letter in _NUMERIC_FIELDS:
            return select_number_rule(_NUMERIC_FIELDS[letter], length)
        case _:
            raise InvalidPatternError(
                ErrorTemplate.unknown_pattern_field(pattern, token.text, token.position)
            )


def compile_pattern(
    pattern: str | None,
    timezone: tzinfo,
    timezone_forced: bool,
    locale: Locale,
    zone_names: TimeZoneDisplayCache,
) -> CompiledPattern:
    """Compile pattern into formatting rules.

    Args:
        pattern: Legacy date pattern (e.g., "yyyy-MM-dd'T'HH:mm:ssZ")
        timezone: Formatter zone
        timezone_forced: Whether timezone overrides input calendars' zones
        locale: Locale supplying text field names and zone names
        zone_names: Zone display cache for zone name rules

    Returns:
        CompiledPattern with the rules and their summed length estimate

    Raises:
        InvalidPatternError: If pattern is None or contains an unknown letter

    Example:
        >>> from datetime import UTC
        >>> from fastdateformat.runtime.timezone_display import TimeZoneDisplayCache
        >>> compiled = compile_pattern("HH:mm", UTC, True, Locale.parse("en"), TimeZoneDisplayCache())
        >>> compiled.max_length_estimate
        5
    """
    if pattern is None:
        raise InvalidPatternError(ErrorTemplate.pattern_null())

    symbols = LocaleSymbols.for_locale(locale)
    rules = tuple(
        _select_rule(token, pattern, symbols, timezone, timezone_forced, locale, zone_names)
        for token in tokenize(pattern)
    )
    estimate = sum(rule.estimate_length() for rule in rules)
    logger.debug("Compiled %r into %d rules (estimate %d)", pattern, len(rules), estimate)
    return CompiledPattern(rules, estimate)
