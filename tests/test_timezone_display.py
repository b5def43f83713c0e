"""Tests for zone display name resolution and caching."""

from datetime import UTC, timedelta, timezone
from threading import RLock
from zoneinfo import ZoneInfo

import pytest
from babel import Locale

from fastdateformat.constants import SHORT_ZONE_NAME_ESTIMATE
from fastdateformat.enums import TimeZoneNameStyle
from fastdateformat.runtime import timezone_display
from fastdateformat.runtime.timezone_display import (
    TimeZoneDisplayCache,
    TimeZoneDisplayKey,
    resolve_timezone_display_name,
)

EN = Locale.parse("en_US")
DE = Locale.parse("de_DE")
NEW_YORK = ZoneInfo("America/New_York")


class TestResolve:
    """Uncached resolution."""

    @pytest.mark.parametrize(
        ("daylight", "style", "expected"),
        [
            (False, TimeZoneNameStyle.LONG, "Eastern Standard Time"),
            (True, TimeZoneNameStyle.LONG, "Eastern Daylight Time"),
            (False, TimeZoneNameStyle.SHORT, "EST"),
            (True, TimeZoneNameStyle.SHORT, "EDT"),
        ],
    )
    def test_new_york(self, daylight: bool, style: TimeZoneNameStyle, expected: str) -> None:
        """English names of all four New York variants."""
        assert resolve_timezone_display_name(NEW_YORK, daylight, style, EN) == expected

    def test_localized(self) -> None:
        """Names follow the locale."""
        name = resolve_timezone_display_name(ZoneInfo("Europe/Berlin"), True, TimeZoneNameStyle.LONG, DE)
        assert name == "Mitteleuropäische Sommerzeit"

    def test_fixed_offset_uses_tzname(self) -> None:
        """Keyless zones render their own name."""
        zone = timezone(timedelta(hours=-5), "EST")
        assert resolve_timezone_display_name(zone, False, TimeZoneNameStyle.LONG, EN) == "EST"

    def test_utc(self) -> None:
        """datetime.UTC renders as UTC."""
        assert resolve_timezone_display_name(UTC, False, TimeZoneNameStyle.SHORT, EN) == "UTC"

    def test_daylight_of_zone_without_dst(self) -> None:
        """A daylight name for a zone without DST falls back to its standard instant."""
        kolkata = ZoneInfo("Asia/Kolkata")
        daylight = resolve_timezone_display_name(kolkata, True, TimeZoneNameStyle.LONG, EN)
        assert daylight
        assert "India" in resolve_timezone_display_name(kolkata, False, TimeZoneNameStyle.LONG, EN)

    def test_short_name_without_abbreviation_is_an_offset(self) -> None:
        """Without a CLDR abbreviation the short name is an offset wider than the estimate."""
        name = resolve_timezone_display_name(
            ZoneInfo("Europe/London"), True, TimeZoneNameStyle.SHORT, Locale.parse("en_GB")
        )
        assert name == "+0100"
        assert len(name) > SHORT_ZONE_NAME_ESTIMATE


class TestTimeZoneDisplayCache:
    """Memoized names."""

    def test_caches(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Each key is resolved once."""
        calls: list[TimeZoneDisplayKey] = []
        real = timezone_display.resolve_timezone_display_name

        def counting(zone, daylight, style, locale):  # type: ignore[no-untyped-def]
            calls.append(TimeZoneDisplayKey(zone, daylight, style, locale))
            return real(zone, daylight, style, locale)

        monkeypatch.setattr(timezone_display, "resolve_timezone_display_name", counting)
        names = TimeZoneDisplayCache()
        for _ in range(3):
            assert names.get_display(NEW_YORK, False, TimeZoneNameStyle.SHORT, EN) == "EST"
        assert len(calls) == 1
        assert len(names) == 1

    def test_variants_are_separate_entries(self) -> None:
        """Daylight, style and locale are part of the key."""
        names = TimeZoneDisplayCache()
        names.get_display(NEW_YORK, False, TimeZoneNameStyle.SHORT, EN)
        names.get_display(NEW_YORK, True, TimeZoneNameStyle.SHORT, EN)
        names.get_display(NEW_YORK, True, TimeZoneNameStyle.LONG, EN)
        names.get_display(NEW_YORK, True, TimeZoneNameStyle.LONG, DE)
        assert len(names) == 4

    def test_clear(self) -> None:
        """clear() drops every entry."""
        names = TimeZoneDisplayCache()
        names.get_display(UTC, False, TimeZoneNameStyle.SHORT, EN)
        names.clear()
        assert len(names) == 0

    def test_shared_lock(self) -> None:
        """A supplied lock is used as the cache lock."""
        lock = RLock()
        names = TimeZoneDisplayCache(lock)
        with lock:
            # Reentrant: the owner of the lock can still look names up.
            assert names.get_display(UTC, False, TimeZoneNameStyle.SHORT, EN) == "UTC"
