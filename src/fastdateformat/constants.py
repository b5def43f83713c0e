"""Shared constants for fastdateformat.

Centralized configuration constants used across the syntax and runtime
packages. Placing constants here avoids circular imports and provides a
single source of truth.

Constants are grouped by domain:
- Width estimates: Upper bounds used to presize output buffers
- Locale defaults: Fallbacks when the platform default cannot be detected
- Display formats: String forms used by repr/str

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Width estimates
    "UNPADDED_NUMBER_ESTIMATE",
    "TWO_DIGIT_ESTIMATE",
    "ZONE_NUMBER_ESTIMATE",
    "SHORT_ZONE_NAME_ESTIMATE",
    "LONG_ZONE_NAME_ESTIMATE",
    "MIN_PADDED_WIDTH",
    "ZONE_NAME_PROBE_YEAR",
    # Locale defaults
    "FALLBACK_LOCALE",
    # Display formats
    "FORMATTER_STR_TEMPLATE",
]

# ============================================================================
# WIDTH ESTIMATES
# ============================================================================

# Unpadded numeric fields: covers four-digit years, the widest calendar value.
UNPADDED_NUMBER_ESTIMATE: int = 4

# Two-digit fields (month, two-digit year, padded day/hour/minute/second).
TWO_DIGIT_ESTIMATE: int = 2

# Numeric zone offset without colon: +HHMM
ZONE_NUMBER_ESTIMATE: int = 5

# Zone names are only known at format time when the zone is not forced.
# Short names are typically abbreviations (EST, CEST), but where CLDR has
# no abbreviation Babel renders an offset such as "+0100" that can
# exceed this estimate. Long names are bounded conservatively.
SHORT_ZONE_NAME_ESTIMATE: int = 4
LONG_ZONE_NAME_ESTIMATE: int = 40

# Narrowest width handled by PaddedNumberField. Widths 1 and 2 have
# dedicated unpadded and two-digit rules.
MIN_PADDED_WIDTH: int = 3

# Zone display names are resolved from a representative mid-January or
# mid-July instant of this year, whichever matches the requested variant.
ZONE_NAME_PROBE_YEAR: int = 2024

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

# Used when the platform locale is unset, "C"/"POSIX", or unknown to CLDR.
FALLBACK_LOCALE: str = "en_US"

# ============================================================================
# DISPLAY FORMATS
# ============================================================================

FORMATTER_STR_TEMPLATE: str = "FastDateFormat[{pattern}]"
