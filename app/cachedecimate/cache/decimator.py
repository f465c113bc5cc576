"""Decimation of a cache directory.

Scans the cache, ranks every regular file by last access time and
evicts the oldest-accessed share of them (10% by default). Eviction is
by file count, not size: evicting 10% of the files can free far more or
far less than 10% of the space the cache uses.
"""

import logging
from collections.abc import Iterable
from pathlib import Path

from cachedecimate.cache.models import (
    DEFAULT_EVICT_PERCENT,
    DecimationReport,
    EvictionPlan,
    FileRecord,
)
from cachedecimate.cache.operator import EvictionOperator, ProgressWrapper
from cachedecimate.cache.scanner import CacheScanner

logger = logging.getLogger(__name__)


def plan_eviction(
    records: Iterable[FileRecord],
    evict_percent: int = DEFAULT_EVICT_PERCENT,
) -> EvictionPlan:
    """Rank records oldest-accessed first and select the victims.

    Args:
        records: File records from a single directory walk.
        evict_percent: Share of files to select (1-100).

    Returns:
        EvictionPlan whose victims are the first
        ``floor(len(records) * evict_percent / 100)`` records.
    """
    return EvictionPlan.from_records(list(records), evict_percent=evict_percent)


def scan_and_plan(
    cache_path: str | Path,
    evict_percent: int = DEFAULT_EVICT_PERCENT,
    *,
    log: logging.Logger | None = None,
) -> tuple[EvictionPlan, int]:
    """Walk a cache directory once and build its eviction plan.

    Args:
        cache_path: Cache root directory.
        evict_percent: Share of files to select.
        log: Logger for skipped entries.

    Returns:
        Tuple of (plan, number of skipped unreadable entries).

    Raises:
        FilesystemAccessError: If the cache root cannot be listed.
    """
    scanner = CacheScanner(cache_path, log=log)
    plan = plan_eviction(scanner.scan(), evict_percent)
    return plan, scanner.skipped


def decimate(
    cache_path: str | Path,
    commit: bool = False,
    *,
    evict_percent: int = DEFAULT_EVICT_PERCENT,
    log: logging.Logger | None = None,
    progress: ProgressWrapper | None = None,
) -> DecimationReport:
    """Evict the least-recently-accessed files of a cache directory.

    The walk, selection and logging are identical with and without
    ``commit``; only the final unlink is skipped in dry-run mode.

    Args:
        cache_path: Cache root directory.
        commit: If True, delete victims. Otherwise only report them.
        evict_percent: Share of files to evict.
        log: Logger to report to. Defaults to this module's logger.
        progress: Optional wrapper around the victim iterable.

    Returns:
        DecimationReport describing the plan and per-file results.

    Raises:
        FilesystemAccessError: If the cache root cannot be listed.
    """
    log = log or logger
    plan, skipped = scan_and_plan(cache_path, evict_percent, log=log)

    log.info("%d files found - removing %d of them", plan.total_files, plan.victim_count)
    for record in plan.victims:
        log.info("Removing %s (last accessed %s)", record.path, record.accessed_at.isoformat())

    operator = EvictionOperator(commit=commit, log=log)
    results = operator.evict(plan.victims, progress=progress)

    return DecimationReport(plan=plan, results=tuple(results), commit=commit, skipped=skipped)
