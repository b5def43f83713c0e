"""fastdateformat - fast, thread-safe, locale-aware date formatting.

Formats instants with the legacy SimpleDateFormat pattern language
("yyyy-MM-dd'T'HH:mm:ssZ"). Patterns are compiled once into immutable rule
programs and shared through a memoizing cache, so repeated formatter lookups
are free and formatting is a walk over precompiled rules. Locale data comes
from CLDR via Babel.

Public API:
    FastDateFormat - Compiled formatter (format, append_to, parse_object)
    get_instance - Shared formatter for a pattern
    get_date_instance / get_time_instance / get_datetime_instance - Shared
        formatters for a locale's FULL, LONG, MEDIUM or SHORT styles
    FormatterCache - Formatter cache service (the factories use a shared one)
    Calendar - Aware instant plus week-rule locale, accepted by format()
    Style - FULL, LONG, MEDIUM, SHORT (re-exported as module constants)

Exceptions:
    FastDateFormatError - Base exception class
    InvalidPatternError - Pattern does not compile
    InvalidStyleLocaleError - Locale has no pattern for a style
    UnsupportedInputTypeError - format() given an unsupported value
    InvalidLocaleError / InvalidTimeZoneError - Unknown locale or zone name

Submodules:
    fastdateformat.syntax - Pattern tokenizer and compiler
    fastdateformat.runtime - Rules, calendar, locale data and caches
    fastdateformat.diagnostics - Error types and diagnostic rendering
"""

# Runtime first: it loads the syntax package in dependency order.
from .runtime import (
    Calendar,
    FastDateFormat,
    FormatterCache,
    ParsePosition,
    get_date_instance,
    get_datetime_instance,
    get_instance,
    get_shared_cache,
    get_time_instance,
)

from .diagnostics import (  # isort: skip
    FastDateFormatError,
    InvalidLocaleError,
    InvalidPatternError,
    InvalidStyleLocaleError,
    InvalidTimeZoneError,
    UnsupportedInputTypeError,
)
from .enums import Style, TimeZoneNameStyle  # isort: skip

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as _get_version
except ImportError as e:
    # This should never happen on Python 3.13+ (importlib.metadata is stdlib since 3.8)
    raise RuntimeError("importlib.metadata unavailable - Python version too old? " + str(e)) from e

try:
    __version__ = _get_version("fastdateformat")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

# Style constants, matching the legacy DateFormat ordinals
FULL = Style.FULL
LONG = Style.LONG
MEDIUM = Style.MEDIUM
SHORT = Style.SHORT

__all__ = [
    "FULL",
    "LONG",
    "MEDIUM",
    "SHORT",
    "Calendar",
    "FastDateFormat",
    "FastDateFormatError",
    "FormatterCache",
    "InvalidLocaleError",
    "InvalidPatternError",
    "InvalidStyleLocaleError",
    "InvalidTimeZoneError",
    "ParsePosition",
    "Style",
    "TimeZoneNameStyle",
    "UnsupportedInputTypeError",
    "__version__",
    "get_date_instance",
    "get_datetime_instance",
    "get_instance",
    "get_shared_cache",
    "get_time_instance",
]
