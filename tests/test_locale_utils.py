"""Tests for locale and zone resolution utilities."""

import locale as locale_module
from datetime import UTC, tzinfo
from zoneinfo import ZoneInfo

import pytest
from babel import Locale

from fastdateformat.constants import FALLBACK_LOCALE
from fastdateformat.diagnostics import DiagnosticCode, InvalidLocaleError, InvalidTimeZoneError
from fastdateformat.locale_utils import (
    coerce_locale,
    coerce_timezone,
    get_babel_locale,
    get_default_locale,
    get_default_timezone,
    get_system_locale,
    normalize_locale,
)


@pytest.fixture
def no_os_locale(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Hide the OS locale and locale environment variables."""
    monkeypatch.setattr(locale_module, "getlocale", lambda: (None, None))
    for var in ("LC_ALL", "LC_TIME", "LANG"):
        monkeypatch.delenv(var, raising=False)
    return monkeypatch


class TestNormalize:
    """BCP-47 to POSIX."""

    @pytest.mark.parametrize(("code", "expected"), [("en-US", "en_US"), ("en", "en"), ("zh-Hant-TW", "zh_Hant_TW")])
    def test_normalize(self, code: str, expected: str) -> None:
        """Hyphens become underscores."""
        assert normalize_locale(code) == expected


class TestGetBabelLocale:
    """Locale lookup."""

    def test_both_spellings(self) -> None:
        """BCP-47 and POSIX spellings resolve to the same cached Locale."""
        assert get_babel_locale("de-DE") is get_babel_locale("de-DE")
        assert get_babel_locale("de-DE") == get_babel_locale("de_DE")

    @pytest.mark.parametrize("code", ["xx_INVALID", "not a locale", ""])
    def test_unknown(self, code: str) -> None:
        """Unknown identifiers raise InvalidLocaleError."""
        with pytest.raises(InvalidLocaleError) as exc_info:
            get_babel_locale(code)
        assert exc_info.value.locale_code == code
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.LOCALE_UNKNOWN


class TestSystemLocale:
    """Platform locale detection."""

    def test_os_locale_wins(self, no_os_locale: pytest.MonkeyPatch) -> None:
        """locale.getlocale() is consulted first."""
        no_os_locale.setattr(locale_module, "getlocale", lambda: ("fr_FR", "UTF-8"))
        no_os_locale.setenv("LANG", "de_DE.UTF-8")
        assert get_system_locale() == "fr_FR"

    def test_environment_order(self, no_os_locale: pytest.MonkeyPatch) -> None:
        """LC_ALL, then LC_TIME, then LANG."""
        no_os_locale.setenv("LANG", "de_DE.UTF-8")
        assert get_system_locale() == "de_DE"
        no_os_locale.setenv("LC_TIME", "it_IT.UTF-8")
        assert get_system_locale() == "it_IT"
        no_os_locale.setenv("LC_ALL", "es_ES")
        assert get_system_locale() == "es_ES"

    @pytest.mark.parametrize("value", ["C", "C.UTF-8", "POSIX"])
    def test_pseudo_locales_skipped(self, no_os_locale: pytest.MonkeyPatch, value: str) -> None:
        """C and POSIX name no locale."""
        no_os_locale.setattr(locale_module, "getlocale", lambda: (value, None))
        no_os_locale.setenv("LC_ALL", value)
        no_os_locale.setenv("LANG", "pt-BR")
        assert get_system_locale() == "pt_BR"

    def test_fallback(self, no_os_locale: pytest.MonkeyPatch) -> None:
        """Nothing set falls back to en_US."""
        assert get_system_locale() == FALLBACK_LOCALE == "en_US"

    def test_raise_on_failure(self, no_os_locale: pytest.MonkeyPatch) -> None:
        """raise_on_failure turns the fallback into an error."""
        with pytest.raises(RuntimeError, match="Could not determine system locale"):
            get_system_locale(raise_on_failure=True)


class TestDefaults:
    """Process defaults."""

    def test_default_locale_is_cached(self) -> None:
        """The default locale is resolved once."""
        assert isinstance(get_default_locale(), Locale)
        assert get_default_locale() is get_default_locale()

    def test_default_locale_falls_back(self, no_os_locale: pytest.MonkeyPatch) -> None:
        """An unknown system locale falls back to en_US."""
        no_os_locale.setenv("LANG", "zz_ZZ")
        get_default_locale.cache_clear()
        try:
            assert get_default_locale() == Locale.parse("en_US")
        finally:
            get_default_locale.cache_clear()

    def test_default_timezone(self) -> None:
        """The default zone is a tzinfo."""
        assert isinstance(get_default_timezone(), tzinfo)


class TestCoerce:
    """Boundary coercion."""

    def test_locale(self) -> None:
        """Strings resolve; Locales and None pass through."""
        en = Locale.parse("en_US")
        assert coerce_locale("en-US") == en
        assert coerce_locale(en) is en
        assert coerce_locale(None) is None

    def test_timezone(self) -> None:
        """Names resolve; tzinfo and None pass through."""
        assert str(coerce_timezone("America/New_York")) == "America/New_York"
        zone = ZoneInfo("Asia/Tokyo")
        assert coerce_timezone(zone) is zone
        assert coerce_timezone(UTC) is UTC
        assert coerce_timezone(None) is None

    def test_unknown_timezone(self) -> None:
        """Unknown names raise InvalidTimeZoneError."""
        with pytest.raises(InvalidTimeZoneError, match="Unknown time zone 'Mars/Base'") as exc_info:
            coerce_timezone("Mars/Base")
        assert exc_info.value.zone_name == "Mars/Base"
