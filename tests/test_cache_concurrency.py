"""Concurrency tests for FormatterCache.

Many threads requesting the same key must all receive one published object,
and clear() racing with lookups must never corrupt the maps.
"""

import threading
from concurrent.futures import ThreadPoolExecutor
from datetime import UTC
from zoneinfo import ZoneInfo

from fastdateformat import SHORT, FastDateFormat, FormatterCache
from fastdateformat.enums import TimeZoneNameStyle
from fastdateformat.locale_utils import get_babel_locale

WORKERS = 16


class TestConcurrentLookups:
    """Racing first requests."""

    def test_same_key_same_object(self) -> None:
        """Every thread gets the identical formatter."""
        cache = FormatterCache()
        barrier = threading.Barrier(WORKERS)

        def request(_: int) -> FastDateFormat:
            barrier.wait()
            return cache.get_instance("yyyy-MM-dd HH:mm:ss.SSS zzzz", ZoneInfo("Europe/Paris"), "fr_FR")

        with ThreadPoolExecutor(max_workers=WORKERS) as executor:
            results = list(executor.map(request, range(WORKERS)))

        assert all(result is results[0] for result in results)
        assert cache.cache_info()["instance"] == 1

    def test_style_instances_same_object(self) -> None:
        """Concurrent style requests resolve to one formatter."""
        cache = FormatterCache()
        barrier = threading.Barrier(WORKERS)

        def request(_: int) -> FastDateFormat:
            barrier.wait()
            return cache.get_datetime_instance(SHORT, SHORT, UTC, "en_US")

        with ThreadPoolExecutor(max_workers=WORKERS) as executor:
            results = list(executor.map(request, range(WORKERS)))

        assert all(result is results[0] for result in results)
        assert cache.cache_info()["datetime"] == 1

    def test_zone_names_same_object(self) -> None:
        """Concurrent zone name lookups publish one string."""
        cache = FormatterCache()
        barrier = threading.Barrier(WORKERS)
        locale = get_babel_locale("en_US")
        zone = ZoneInfo("America/Chicago")

        def request(_: int) -> str:
            barrier.wait()
            return cache.get_timezone_display(zone, False, TimeZoneNameStyle.LONG, locale)

        with ThreadPoolExecutor(max_workers=WORKERS) as executor:
            results = list(executor.map(request, range(WORKERS)))

        assert results[0] == "Central Standard Time"
        assert all(result is results[0] for result in results)

    def test_mixed_keys(self) -> None:
        """Distinct keys from many threads each get one entry."""
        cache = FormatterCache()
        patterns = ["yyyy", "MM", "dd", "HH:mm", "EEEE", "MMMM d"]

        def request(index: int) -> FastDateFormat:
            return cache.get_instance(patterns[index % len(patterns)], UTC, "en_US")

        with ThreadPoolExecutor(max_workers=WORKERS) as executor:
            results = list(executor.map(request, range(WORKERS * 8)))

        assert cache.cache_info()["instance"] == len(patterns)
        by_pattern = {fdf.pattern: fdf for fdf in results}
        assert all(fdf is by_pattern[fdf.pattern] for fdf in results)


class TestConcurrentClear:
    """clear() racing with lookups."""

    def test_clear_during_lookups(self) -> None:
        """Lookups keep returning working formatters while the cache is cleared."""
        cache = FormatterCache()
        stop = threading.Event()

        def clearer() -> None:
            while not stop.is_set():
                cache.clear()

        def request(index: int) -> str:
            fdf = cache.get_instance("yyyy-MM-dd", UTC, "en_US")
            return fdf.format(index * 86_400_000)

        thread = threading.Thread(target=clearer)
        thread.start()
        try:
            with ThreadPoolExecutor(max_workers=WORKERS) as executor:
                results = list(executor.map(request, range(200)))
        finally:
            stop.set()
            thread.join()

        assert results[0] == "1970-01-01"
        assert results[31] == "1970-02-01"
        assert cache.cache_info()["instance"] <= 1

    def test_shared_formatter_across_threads(self) -> None:
        """One formatter formats correctly from many threads at once."""
        fdf = FastDateFormat.compile("EEEE d MMMM yyyy HH:mm", UTC, "en_US")
        expected = {i: fdf.format(i * 3_600_000) for i in range(100)}

        def render(i: int) -> tuple[int, str]:
            return i, fdf.format(i * 3_600_000)

        with ThreadPoolExecutor(max_workers=WORKERS) as executor:
            results = dict(executor.map(render, range(100)))

        assert results == expected
