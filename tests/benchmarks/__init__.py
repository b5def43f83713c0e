"""Performance benchmarks for fastdateformat.

Benchmarks use pytest-benchmark to track the cost of formatting, cached
lookups and pattern compilation.

Python 3.13+.
"""

from __future__ import annotations

__all__: list[str] = []
