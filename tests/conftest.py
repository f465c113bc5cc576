"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import os
from collections.abc import Callable
from pathlib import Path

import pytest

# Base access time for generated cache files (2024-01-15T10:00:00Z)
BASE_ATIME_NS = 1_705_312_800 * 1_000_000_000
SECOND_NS = 1_000_000_000


@pytest.fixture
def cache_dir(tmp_path: Path) -> Path:
    """An empty cache directory."""
    path = tmp_path / "cache"
    path.mkdir()
    return path


@pytest.fixture
def make_file(cache_dir: Path) -> Callable[[str, int], Path]:
    """Factory creating a cache file with a given access time offset.

    ``make_file("a/b.bin", 5)`` creates ``cache_dir/a/b.bin`` whose
    access time is 5 seconds after 2024-01-15T10:00:00Z.
    """

    def _make(relpath: str, atime_offset: int) -> Path:
        path = cache_dir / relpath
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"cached")
        mtime_ns = os.stat(path).st_mtime_ns
        os.utime(path, ns=(BASE_ATIME_NS + atime_offset * SECOND_NS, mtime_ns))
        return path

    return _make


@pytest.fixture
def make_cache(make_file: Callable[[str, int], Path]) -> Callable[[int], list[Path]]:
    """Factory populating the cache with files of increasing access time.

    ``make_cache(n)`` creates ``n`` files with access time offsets 1..n,
    spread over three shard directories. Files are returned
    oldest-accessed first.
    """

    def _make(count: int) -> list[Path]:
        return [make_file(f"shard{i % 3}/item-{i:04d}.bin", i) for i in range(1, count + 1)]

    return _make
