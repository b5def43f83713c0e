"""FastDateFormat: compiled, immutable, thread-safe date formatter.

A FastDateFormat is a pattern compiled once into a tuple of rules. Formatting
walks the rules and appends each one's text for a Calendar, so the per-call
work is a handful of integer reads and list appends.

Instances are normally obtained through the factories (get_instance,
get_date_instance, ...), which return one shared object per distinct
(pattern, zone, locale) combination. FastDateFormat.compile() builds an
uncached instance.

Accepted values:
    int       Epoch milliseconds (bool is rejected)
    datetime  Aware values are converted to the formatter zone; naive values
              are wall-clock times in the formatter zone
    date      Midnight in the formatter zone
    Calendar  Formatted in its own zone, unless the formatter's zone was
              given explicitly (then the zone is overridden on a copy)

Thread Safety:
    Immutable after construction. Safe to share across threads.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, tzinfo
from typing import TYPE_CHECKING, TypeAlias

from babel import Locale

from fastdateformat.constants import FORMATTER_STR_TEMPLATE
from fastdateformat.diagnostics import ErrorTemplate, UnsupportedInputTypeError
from fastdateformat.enums import Style
from fastdateformat.locale_utils import (
    coerce_locale,
    coerce_timezone,
    get_babel_locale,
    get_default_locale,
    get_default_timezone,
)
from fastdateformat.runtime.calendar import Calendar
from fastdateformat.runtime.rules import Rule
from fastdateformat.syntax.compiler import compile_pattern

if TYPE_CHECKING:
    from fastdateformat.runtime.timezone_display import TimeZoneDisplayCache

__all__ = ["FastDateFormat", "FormatterKey", "ParsePosition"]

FormattableValue: TypeAlias = int | date | datetime | Calendar


@dataclass(frozen=True, slots=True)
class FormatterKey:
    """Identity of a formatter: two formatters are equal iff their keys are.

    Attributes:
        pattern: Pattern text
        timezone: Formatter zone (the platform default when none was given)
        timezone_forced: Whether the zone was given explicitly
        locale: Formatter locale (the platform default when none was given)
        locale_forced: Whether the locale was given explicitly
    """

    pattern: str
    timezone: tzinfo
    timezone_forced: bool
    locale: Locale
    locale_forced: bool

    @classmethod
    def create(
        cls,
        pattern: str,
        timezone: tzinfo | str | None = None,
        locale: Locale | str | None = None,
    ) -> FormatterKey:
        """Build a key, filling unset zone/locale with platform defaults.

        Raises:
            InvalidTimeZoneError: If timezone names an unknown zone
            InvalidLocaleError: If locale is an unknown identifier
        """
        zone = coerce_timezone(timezone)
        resolved_locale = coerce_locale(locale)
        return cls(
            pattern,
            zone if zone is not None else get_default_timezone(),
            zone is not None,
            resolved_locale if resolved_locale is not None else get_default_locale(),
            resolved_locale is not None,
        )


@dataclass(slots=True)
class ParsePosition:
    """Cursor for parse_object(): index to read from, error_index on failure."""

    index: int = 0
    error_index: int = -1


def _restore(
    pattern: str,
    timezone: tzinfo,
    timezone_forced: bool,
    locale_code: str,
    locale_forced: bool,
) -> FastDateFormat:
    """Unpickle: rebuild the rules by recompiling the pattern."""
    key = FormatterKey(pattern, timezone, timezone_forced, get_babel_locale(locale_code), locale_forced)
    return FastDateFormat.from_key(key)


@dataclass(frozen=True, slots=True)
class FastDateFormat:
    """Compiled date formatter.

    Equality and hashing cover the pattern, zone and locale together with
    whether each was given explicitly; the compiled rules are derived data.

    Attributes:
        pattern: Pattern the formatter was compiled from
        timezone: Zone used for int/date/datetime values
        timezone_forced: Whether timezone also overrides Calendar zones
        locale: Locale of text fields and zone names
        locale_forced: Whether locale was given explicitly
        rules: Compiled rules in pattern order
        max_length_estimate: Upper bound on formatted length for bounded fields

    Example:
        >>> from datetime import UTC
        >>> fdf = FastDateFormat.compile("yyyy-MM-dd", UTC, "en_US")
        >>> fdf.format(0)
        '1970-01-01'
        >>> str(fdf)
        'FastDateFormat[yyyy-MM-dd]'
    """

    pattern: str
    timezone: tzinfo
    timezone_forced: bool
    locale: Locale
    locale_forced: bool
    rules: tuple[Rule, ...] = field(default=(), compare=False, repr=False)
    max_length_estimate: int = field(default=0, compare=False, repr=False)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_key(
        cls,
        key: FormatterKey,
        zone_names: TimeZoneDisplayCache | None = None,
    ) -> FastDateFormat:
        """Compile the formatter identified by key.

        Args:
            key: Formatter identity
            zone_names: Zone display cache for zone name rules
                (default: the shared cache's)

        Raises:
            InvalidPatternError: If the pattern does not compile
        """
        if zone_names is None:
            from fastdateformat.runtime.cache import get_shared_cache  # noqa: PLC0415

            zone_names = get_shared_cache().zone_names

        compiled = compile_pattern(key.pattern, key.timezone, key.timezone_forced, key.locale, zone_names)
        return cls(
            key.pattern,
            key.timezone,
            key.timezone_forced,
            key.locale,
            key.locale_forced,
            compiled.rules,
            compiled.max_length_estimate,
        )

    @classmethod
    def compile(
        cls,
        pattern: str,
        timezone: tzinfo | str | None = None,
        locale: Locale | str | None = None,
    ) -> FastDateFormat:
        """Compile an uncached formatter.

        Equal to, but not the same object as, the instance the factories
        return for the same arguments.

        Raises:
            InvalidPatternError: If pattern is None or does not compile
            InvalidTimeZoneError: If timezone names an unknown zone
            InvalidLocaleError: If locale is an unknown identifier
        """
        return cls.from_key(FormatterKey.create(pattern, timezone, locale))

    # ------------------------------------------------------------------
    # Cached factories
    # ------------------------------------------------------------------

    @classmethod
    def get_instance(
        cls,
        pattern: str | None = None,
        timezone: tzinfo | str | None = None,
        locale: Locale | str | None = None,
    ) -> FastDateFormat:
        """Shared formatter for pattern (no arguments: the locale's SHORT date-time pattern)."""
        from fastdateformat.runtime.cache import get_shared_cache  # noqa: PLC0415

        return get_shared_cache().get_instance(pattern, timezone, locale)

    @classmethod
    def get_date_instance(
        cls,
        style: Style | int,
        timezone: tzinfo | str | None = None,
        locale: Locale | str | None = None,
    ) -> FastDateFormat:
        """Shared formatter for a locale's date style."""
        from fastdateformat.runtime.cache import get_shared_cache  # noqa: PLC0415

        return get_shared_cache().get_date_instance(style, timezone, locale)

    @classmethod
    def get_time_instance(
        cls,
        style: Style | int,
        timezone: tzinfo | str | None = None,
        locale: Locale | str | None = None,
    ) -> FastDateFormat:
        """Shared formatter for a locale's time style."""
        from fastdateformat.runtime.cache import get_shared_cache  # noqa: PLC0415

        return get_shared_cache().get_time_instance(style, timezone, locale)

    @classmethod
    def get_datetime_instance(
        cls,
        date_style: Style | int,
        time_style: Style | int,
        timezone: tzinfo | str | None = None,
        locale: Locale | str | None = None,
    ) -> FastDateFormat:
        """Shared formatter for a locale's combined date and time styles."""
        from fastdateformat.runtime.cache import get_shared_cache  # noqa: PLC0415

        return get_shared_cache().get_datetime_instance(date_style, time_style, timezone, locale)

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def format(self, value: FormattableValue) -> str:
        """Format value.

        Args:
            value: Epoch milliseconds, date, datetime, or Calendar

        Returns:
            Formatted string

        Raises:
            UnsupportedInputTypeError: If value is of any other type
        """
        calendar = self._to_calendar(value, self.locale)
        return "".join(self._apply_rules(calendar, []))

    def append_to(self, buffer: list[str], value: FormattableValue) -> list[str]:
        """Append the formatted text of value to buffer.

        Calendars built here from int/date/datetime values take their week
        rules from the platform default locale rather than the formatter's.

        Returns:
            buffer, for chaining

        Raises:
            UnsupportedInputTypeError: If value is of an unsupported type
        """
        calendar = self._to_calendar(value, get_default_locale())
        return self._apply_rules(calendar, buffer)

    def _to_calendar(self, value: object, locale: Locale) -> Calendar:
        match value:
            case bool():
                pass
            case int():
                return Calendar.from_millis(value, self.timezone, locale)
            case datetime() | date():
                return Calendar.from_datetime(value, self.timezone, locale)
            case Calendar():
                if self.timezone_forced:
                    return value.with_timezone(self.timezone)
                return value
        type_name = type(value).__name__
        raise UnsupportedInputTypeError(ErrorTemplate.unsupported_input(type_name), value_type=type_name)

    def _apply_rules(self, calendar: Calendar, buffer: list[str]) -> list[str]:
        for rule in self.rules:
            rule.append(buffer, calendar)
        return buffer

    def parse_object(self, source: str, position: ParsePosition) -> None:
        """Parsing is not supported.

        Always resets position.index and position.error_index to 0 and
        returns None. Never raises.
        """
        position.index = 0
        position.error_index = 0

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def timezone_overrides_calendar(self) -> bool:
        """Whether the formatter zone replaces the zone of Calendar values."""
        return self.timezone_forced

    @property
    def key(self) -> FormatterKey:
        """Identity of this formatter in the instance cache."""
        return FormatterKey(self.pattern, self.timezone, self.timezone_forced, self.locale, self.locale_forced)

    def __str__(self) -> str:
        return FORMATTER_STR_TEMPLATE.format(pattern=self.pattern)

    def __reduce__(self) -> tuple[object, tuple[object, ...]]:
        return (
            _restore,
            (self.pattern, self.timezone, self.timezone_forced, str(self.locale), self.locale_forced),
        )
