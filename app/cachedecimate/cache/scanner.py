"""Cache directory scanner.

Walks a cache directory depth-first and yields a FileRecord for every
regular file below it. Symlinks are never followed, so the walk cannot
leave the cache tree. Entries whose metadata cannot be read are logged
and skipped; only a failure to read the cache root itself is fatal.
"""

import logging
import os
import stat
from collections.abc import Iterator
from pathlib import Path

from cachedecimate.cache.errors import EntryReadError, FilesystemAccessError
from cachedecimate.cache.models import FileRecord

logger = logging.getLogger(__name__)


class CacheScanner:
    """Collects access-time records for all regular files in a cache.

    Args:
        root: Cache root directory. Scanning never leaves this tree.
        log: Logger to report skipped entries to. Defaults to this
            module's logger.
    """

    def __init__(self, root: str | Path, *, log: logging.Logger | None = None) -> None:
        self._root = Path(root).absolute()
        self._log = log or logger
        self._skipped = 0

    @property
    def root(self) -> Path:
        """Absolute path of the cache root."""
        return self._root

    @property
    def skipped(self) -> int:
        """Number of unreadable entries skipped during the last scan."""
        return self._skipped

    def scan(self) -> Iterator[FileRecord]:
        """Walk the cache root and yield a record per regular file.

        The root is listed eagerly on the first ``next()`` so that a
        missing or unreadable root fails before any record is produced.

        Yields:
            FileRecord for each regular file found.

        Raises:
            FilesystemAccessError: If the root is missing, is not a
                directory, or cannot be listed.
        """
        self._skipped = 0

        if not self._root.is_dir():
            msg = f"Cache directory does not exist or is not a directory: {self._root}"
            raise FilesystemAccessError(msg, path=str(self._root))

        try:
            entries = self._list(self._root)
        except OSError as e:
            msg = f"Cannot list cache directory {self._root}: {e}"
            raise FilesystemAccessError(msg, path=str(self._root)) from e

        yield from self._walk(entries)

    def _walk(self, entries: list[Path]) -> Iterator[FileRecord]:
        """Yield records for entries, descending into subdirectories.

        Open directories are kept as iterators on an explicit stack
        instead of recursive calls, so depth is unbounded. Entries are
        visited depth-first in sorted-name order.

        Args:
            entries: Sorted entries of the root directory.

        Yields:
            FileRecord for each regular file at or below the entries.
        """
        stack: list[Iterator[Path]] = [iter(entries)]
        while stack:
            entry = next(stack[-1], None)
            if entry is None:
                stack.pop()
                continue

            try:
                st = self._read_entry(entry)
            except EntryReadError as e:
                self._skipped += 1
                self._log.warning("Skipping unreadable entry: %s", e)
                continue

            mode = st.st_mode
            if stat.S_ISREG(mode):
                yield FileRecord(atime_ns=st.st_atime_ns, path=str(entry))
            elif stat.S_ISDIR(mode):
                try:
                    children = self._list(entry)
                except OSError as e:
                    self._skipped += 1
                    self._log.warning("Cannot list directory %s: %s", entry, e)
                    continue
                stack.append(iter(children))
            elif stat.S_ISLNK(mode):
                self._log.debug("Skipping symlink: %s", entry)
            else:
                self._log.debug("Skipping special file: %s", entry)

    @staticmethod
    def _list(directory: Path) -> list[Path]:
        """List a directory in sorted order for reproducible walks."""
        return sorted(directory.iterdir())

    @staticmethod
    def _read_entry(entry: Path) -> os.stat_result:
        """Read entry metadata without following symlinks.

        Raises:
            EntryReadError: If the metadata cannot be read.
        """
        try:
            return os.lstat(entry)
        except OSError as e:
            raise EntryReadError(f"{entry}: {e.strerror or e}", path=str(entry)) from e
