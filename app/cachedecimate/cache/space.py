"""Free-space monitoring for the volume hosting a cache directory.

Every call re-queries the OS; nothing is cached between readings.
"""

import logging
import shutil
from pathlib import Path

from cachedecimate.cache.errors import FilesystemAccessError
from cachedecimate.cache.models import SpaceReading

logger = logging.getLogger(__name__)


def read_space(path: str | Path) -> SpaceReading:
    """Query available and total capacity of the volume hosting a path.

    Args:
        path: Any path on the volume of interest (usually the cache root).

    Returns:
        SpaceReading for the volume.

    Raises:
        FilesystemAccessError: If the path does not exist, cannot be
            queried, or the volume reports no capacity.
    """
    path_str = str(path)
    try:
        usage = shutil.disk_usage(path_str)
    except OSError as e:
        msg = f"Cannot query free space of {path_str}: {e}"
        raise FilesystemAccessError(msg, path=path_str) from e

    if usage.total <= 0:
        msg = f"Volume hosting {path_str} reports no capacity"
        raise FilesystemAccessError(msg, path=path_str)

    return SpaceReading(path=path_str, free_bytes=usage.free, total_bytes=usage.total)


def free_percent(path: str | Path) -> float:
    """Return free space of the volume hosting ``path`` as a percentage.

    Raises:
        FilesystemAccessError: If the volume cannot be queried.
    """
    return read_space(path).free_percent


def is_under_pressure(free: float, threshold: float) -> bool:
    """Decide whether free space is low enough to trigger eviction.

    A reading exactly at the threshold triggers eviction; only a reading
    strictly above it is left alone.

    Args:
        free: Free-space percentage of the cache volume.
        threshold: Configured free-space threshold percentage.

    Returns:
        True if eviction should run.
    """
    return free <= threshold


def check_pressure(
    path: str | Path,
    threshold: float,
    *,
    log: logging.Logger | None = None,
) -> tuple[SpaceReading, bool]:
    """Read free space for a cache and apply the eviction gate.

    The computed percentage is logged whatever the outcome.

    Args:
        path: Cache root directory.
        threshold: Free-space threshold percentage.
        log: Logger to report to. Defaults to this module's logger.

    Returns:
        Tuple of (reading, under_pressure).

    Raises:
        FilesystemAccessError: If the volume cannot be queried.
    """
    log = log or logger
    reading = read_space(path)
    log.info("Disk has %.2f%% free", reading.free_percent)
    return reading, is_under_pressure(reading.free_percent, threshold)
