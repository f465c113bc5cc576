"""Eviction operator.

Removes victim files selected by an eviction plan, with dry-run
support. A failure to remove one file is logged and reported in its
result; it never stops the remaining evictions.
"""

import logging
from collections.abc import Callable, Iterable, Sequence
from pathlib import Path

from cachedecimate.cache.errors import DeletionError
from cachedecimate.cache.models import EvictionResult, FileRecord

logger = logging.getLogger(__name__)

# Wraps the victim iterable, e.g. to render a progress bar
ProgressWrapper = Callable[[Sequence[FileRecord]], Iterable[FileRecord]]


class EvictionOperator:
    """Handles deletion of evicted cache files.

    Attributes:
        _commit: If False, report evictions without modifying the filesystem.
    """

    def __init__(self, commit: bool = False, *, log: logging.Logger | None = None) -> None:
        """Initialize the EvictionOperator.

        Args:
            commit: If True, actually delete files. Otherwise dry-run.
            log: Logger to report failures to. Defaults to this module's logger.
        """
        self._commit = commit
        self._log = log or logger

    @property
    def commit(self) -> bool:
        """Whether deletions are real."""
        return self._commit

    def evict(
        self,
        victims: Sequence[FileRecord],
        progress: ProgressWrapper | None = None,
    ) -> list[EvictionResult]:
        """Evict victims in order and return one result per victim.

        Args:
            victims: Files to remove, oldest-accessed first.
            progress: Optional wrapper around the victim iterable.

        Returns:
            List of EvictionResult in the same order as ``victims``.
        """
        items = progress(victims) if progress is not None else victims
        return [self._evict_single(record) for record in items]

    def _evict_single(self, record: FileRecord) -> EvictionResult:
        """Evict a single file.

        Args:
            record: The file to remove.

        Returns:
            EvictionResult indicating success or failure.
        """
        if not self._commit:
            return EvictionResult(record=record, success=True, dry_run=True)

        try:
            self._remove(record.path)
        except DeletionError as e:
            self._log.warning("Failed to remove %s: %s", record.path, e)
            return EvictionResult(record=record, success=False, error=str(e))

        return EvictionResult(record=record, success=True)

    @staticmethod
    def _remove(path: str) -> None:
        """Unlink a file.

        Raises:
            DeletionError: If the file cannot be removed.
        """
        try:
            Path(path).unlink()
        except OSError as e:
            raise DeletionError(e.strerror or str(e), path=path) from e
