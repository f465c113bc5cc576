"""Cache eviction domain models.

This module defines the immutable data structures produced while
guarding a cache directory: free-space readings, the file records
collected by the directory walk, the eviction plan derived from them,
and the per-file and per-run results of carrying the plan out.
"""

from dataclasses import dataclass
from datetime import UTC, datetime

# Default share of discovered files that is evicted under pressure
DEFAULT_EVICT_PERCENT: int = 10


@dataclass(frozen=True, slots=True, order=True)
class FileRecord:
    """A regular file found under the cache root.

    Records compare by access time first and path second, so sorting a
    list of records yields the oldest-accessed file first with ties
    broken deterministically by path.

    Attributes:
        atime_ns: Last access time in nanoseconds since the epoch.
        path: Absolute filesystem path of the file.
    """

    atime_ns: int
    path: str

    def __post_init__(self) -> None:
        """Validate record data after initialization."""
        if not self.path:
            msg = "Path cannot be empty"
            raise ValueError(msg)

    @property
    def atime(self) -> float:
        """Last access time in seconds since the epoch."""
        return self.atime_ns / 1_000_000_000

    @property
    def accessed_at(self) -> datetime:
        """Last access time as a timezone-aware UTC datetime."""
        return datetime.fromtimestamp(self.atime, tz=UTC)


@dataclass(frozen=True, slots=True)
class SpaceReading:
    """Capacity of the volume hosting a path, as reported by the OS.

    Attributes:
        path: Path whose volume was queried.
        free_bytes: Bytes available to unprivileged users.
        total_bytes: Total capacity of the volume in bytes.
    """

    path: str
    free_bytes: int
    total_bytes: int

    def __post_init__(self) -> None:
        """Validate reading data after initialization."""
        if self.total_bytes <= 0:
            msg = f"Total capacity must be positive, got {self.total_bytes}"
            raise ValueError(msg)
        if self.free_bytes < 0:
            msg = f"Free capacity cannot be negative, got {self.free_bytes}"
            raise ValueError(msg)

    @property
    def free_percent(self) -> float:
        """Free space as a percentage of total capacity."""
        return self.free_bytes * 100.0 / self.total_bytes


@dataclass(frozen=True, slots=True)
class EvictionPlan:
    """Files ranked for eviction, oldest access first.

    The victims are always a prefix of ``records``: every victim was
    accessed no later than any survivor.

    Attributes:
        records: All discovered files sorted by (atime_ns, path).
        evict_percent: Share of files selected for eviction (1-100).
    """

    records: tuple[FileRecord, ...]
    evict_percent: int = DEFAULT_EVICT_PERCENT

    def __post_init__(self) -> None:
        """Validate plan data after initialization."""
        if not (1 <= self.evict_percent <= 100):
            msg = f"Evict percent must be between 1 and 100, got {self.evict_percent}"
            raise ValueError(msg)

    @classmethod
    def from_records(
        cls,
        records: list[FileRecord] | tuple[FileRecord, ...],
        evict_percent: int = DEFAULT_EVICT_PERCENT,
    ) -> "EvictionPlan":
        """Build a plan by sorting records oldest-accessed first.

        Args:
            records: Unordered file records from a directory walk.
            evict_percent: Share of files to select for eviction.

        Returns:
            EvictionPlan over the sorted records.
        """
        return cls(records=tuple(sorted(records)), evict_percent=evict_percent)

    @property
    def total_files(self) -> int:
        """Number of files discovered by the walk."""
        return len(self.records)

    @property
    def victim_count(self) -> int:
        """Number of files to evict, truncated toward zero."""
        return self.total_files * self.evict_percent // 100

    @property
    def victims(self) -> tuple[FileRecord, ...]:
        """The oldest-accessed files selected for eviction."""
        return self.records[: self.victim_count]

    @property
    def survivors(self) -> tuple[FileRecord, ...]:
        """Files that stay in the cache."""
        return self.records[self.victim_count :]


@dataclass(frozen=True, slots=True)
class EvictionResult:
    """Result of evicting a single file.

    Attributes:
        record: The file that was operated on.
        success: Whether the operation completed successfully.
        error: Error message if the operation failed, None otherwise.
        dry_run: Whether this was a dry-run (no actual deletion).
    """

    record: FileRecord
    success: bool
    error: str | None = None
    dry_run: bool = False

    @property
    def path(self) -> str:
        """Path of the evicted file."""
        return self.record.path


@dataclass(frozen=True, slots=True)
class DecimationReport:
    """Outcome of one decimation pass over a cache directory.

    Attributes:
        plan: The eviction plan that was carried out.
        results: One EvictionResult per victim, in plan order.
        commit: Whether deletions were real.
        skipped: Number of entries skipped because they could not be read.
    """

    plan: EvictionPlan
    results: tuple[EvictionResult, ...]
    commit: bool
    skipped: int = 0

    @property
    def removed_count(self) -> int:
        """Number of files actually removed from disk."""
        return sum(1 for r in self.results if r.success and not r.dry_run)

    @property
    def failed_count(self) -> int:
        """Number of victims that could not be removed."""
        return sum(1 for r in self.results if not r.success)


@dataclass(frozen=True, slots=True)
class GuardReport:
    """Outcome of a full guard run: space check plus optional decimation.

    Attributes:
        reading: Free-space reading of the cache volume.
        threshold: Free-space percentage at or below which eviction runs.
        under_pressure: Whether the reading triggered eviction.
        decimation: Decimation outcome, None when eviction was not needed.
    """

    reading: SpaceReading
    threshold: float
    under_pressure: bool
    decimation: DecimationReport | None = None
