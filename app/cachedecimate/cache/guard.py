"""Guard a cache directory against low free space.

Runs the space check first and only decimates the cache when free
space is at or below the threshold.
"""

import logging
from pathlib import Path

from cachedecimate.cache.decimator import decimate
from cachedecimate.cache.models import DEFAULT_EVICT_PERCENT, GuardReport
from cachedecimate.cache.operator import ProgressWrapper
from cachedecimate.cache.space import check_pressure

logger = logging.getLogger(__name__)


def guard(
    cache_path: str | Path,
    threshold: float,
    commit: bool = False,
    *,
    evict_percent: int = DEFAULT_EVICT_PERCENT,
    log: logging.Logger | None = None,
    progress: ProgressWrapper | None = None,
) -> GuardReport:
    """Check free space and decimate the cache if it is under pressure.

    Args:
        cache_path: Cache root directory.
        threshold: Free-space percentage at or below which eviction runs.
        commit: If True, delete victims. Otherwise only report them.
        evict_percent: Share of files to evict under pressure.
        log: Logger to report to. Defaults to this module's logger.
        progress: Optional wrapper around the victim iterable.

    Returns:
        GuardReport with the reading and, under pressure, the decimation.

    Raises:
        FilesystemAccessError: If the volume or cache root cannot be read.
    """
    log = log or logger
    reading, under_pressure = check_pressure(cache_path, threshold, log=log)

    if not under_pressure:
        log.debug("Free space above %.2f%% threshold, nothing to do", threshold)
        return GuardReport(reading=reading, threshold=threshold, under_pressure=False)

    report = decimate(
        cache_path,
        commit,
        evict_percent=evict_percent,
        log=log,
        progress=progress,
    )
    return GuardReport(
        reading=reading,
        threshold=threshold,
        under_pressure=True,
        decimation=report,
    )
