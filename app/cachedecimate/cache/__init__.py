"""Cache eviction module.

This module provides free-space monitoring, the cache directory scanner,
eviction planning and the eviction operator for the cache domain.
"""

from cachedecimate.cache.decimator import decimate, plan_eviction, scan_and_plan
from cachedecimate.cache.errors import (
    DecimateError,
    DeletionError,
    EntryReadError,
    FilesystemAccessError,
)
from cachedecimate.cache.guard import guard
from cachedecimate.cache.models import (
    DEFAULT_EVICT_PERCENT,
    DecimationReport,
    EvictionPlan,
    EvictionResult,
    FileRecord,
    GuardReport,
    SpaceReading,
)
from cachedecimate.cache.operator import EvictionOperator
from cachedecimate.cache.scanner import CacheScanner
from cachedecimate.cache.space import check_pressure, free_percent, is_under_pressure, read_space

__all__ = [
    "DEFAULT_EVICT_PERCENT",
    "CacheScanner",
    "DecimateError",
    "DecimationReport",
    "DeletionError",
    "EntryReadError",
    "EvictionOperator",
    "EvictionPlan",
    "EvictionResult",
    "FileRecord",
    "FilesystemAccessError",
    "GuardReport",
    "SpaceReading",
    "check_pressure",
    "decimate",
    "free_percent",
    "guard",
    "is_under_pressure",
    "plan_eviction",
    "read_space",
    "scan_and_plan",
]
