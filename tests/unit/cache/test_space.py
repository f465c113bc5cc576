"""Unit tests for free-space monitoring."""

import logging
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from cachedecimate.cache.errors import FilesystemAccessError
from cachedecimate.cache.space import check_pressure, free_percent, is_under_pressure, read_space


def _usage(free: int, total: int) -> MagicMock:
    """Build a fake shutil.disk_usage result."""
    return MagicMock(total=total, used=total - free, free=free)


class TestReadSpace:
    """Tests for read_space."""

    def test_reads_real_volume(self, tmp_path: Path) -> None:
        """Reading an existing directory returns a sane percentage."""
        reading = read_space(tmp_path)

        assert reading.path == str(tmp_path)
        assert reading.total_bytes > 0
        assert 0.0 <= reading.free_percent <= 100.0

    def test_uses_disk_usage(self) -> None:
        """Free and total come from shutil.disk_usage for the given path."""
        with patch(
            "cachedecimate.cache.space.shutil.disk_usage",
            return_value=_usage(free=300, total=1200),
        ) as mock_usage:
            reading = read_space("/data/cache")

        mock_usage.assert_called_once_with("/data/cache")
        assert reading.free_bytes == 300
        assert reading.total_bytes == 1200
        assert reading.free_percent == 25.0

    def test_missing_path_raises(self, tmp_path: Path) -> None:
        """A nonexistent path raises FilesystemAccessError."""
        missing = tmp_path / "does-not-exist"

        with pytest.raises(FilesystemAccessError) as exc_info:
            read_space(missing)

        assert exc_info.value.path == str(missing)

    def test_zero_capacity_raises(self) -> None:
        """A volume reporting zero capacity raises FilesystemAccessError."""
        with (
            patch(
                "cachedecimate.cache.space.shutil.disk_usage",
                return_value=_usage(free=0, total=0),
            ),
            pytest.raises(FilesystemAccessError, match="no capacity"),
        ):
            read_space("/data/cache")

    def test_no_caching(self) -> None:
        """Every call re-queries the OS."""
        with patch(
            "cachedecimate.cache.space.shutil.disk_usage",
            side_effect=[_usage(free=10, total=100), _usage(free=50, total=100)],
        ):
            assert free_percent("/data/cache") == 10.0
            assert free_percent("/data/cache") == 50.0


class TestIsUnderPressure:
    """Tests for the eviction gate."""

    def test_below_threshold(self) -> None:
        """Free space below the threshold triggers eviction."""
        assert is_under_pressure(5.0, 10.0) is True

    def test_exactly_at_threshold(self) -> None:
        """Free space exactly at the threshold triggers eviction."""
        assert is_under_pressure(10.0, 10.0) is True

    def test_just_above_threshold(self) -> None:
        """Free space strictly above the threshold does not trigger eviction."""
        assert is_under_pressure(10.01, 10.0) is False

    def test_one_unit_above_threshold(self) -> None:
        """One percentage point above the threshold does not trigger eviction."""
        assert is_under_pressure(11.0, 10.0) is False


class TestCheckPressure:
    """Tests for check_pressure."""

    def test_logs_percentage_when_under_pressure(self, caplog: pytest.LogCaptureFixture) -> None:
        """The computed percentage is logged and the gate is applied."""
        caplog.set_level(logging.INFO)
        with patch(
            "cachedecimate.cache.space.shutil.disk_usage",
            return_value=_usage(free=1000, total=10000),
        ):
            reading, under_pressure = check_pressure("/data/cache", 10.0)

        assert reading.free_percent == 10.0
        assert under_pressure is True
        assert "Disk has 10.00% free" in caplog.messages

    def test_logs_percentage_when_not_under_pressure(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        """The percentage is logged even when eviction is not needed."""
        caplog.set_level(logging.INFO)
        with patch(
            "cachedecimate.cache.space.shutil.disk_usage",
            return_value=_usage(free=1001, total=10000),
        ):
            _, under_pressure = check_pressure("/data/cache", 10.0)

        assert under_pressure is False
        assert "Disk has 10.01% free" in caplog.messages

    def test_uses_injected_logger(self) -> None:
        """An injected logger receives the percentage line."""
        log = MagicMock(spec=logging.Logger)
        with patch(
            "cachedecimate.cache.space.shutil.disk_usage",
            return_value=_usage(free=50, total=100),
        ):
            check_pressure("/data/cache", 10.0, log=log)

        log.info.assert_called_once_with("Disk has %.2f%% free", 50.0)
