"""Saved-log storage on the removable volume.

:class:`LogStorageManager` owns the ``catlog`` directory tree under one
storage root. Temporary capture files are rewritten per session; saved logs
are appended to across saves and only removed by an explicit delete. Saved
logs written by older releases to ``<root>/catlog_saved_logs`` are moved
into the current layout by :meth:`LogStorageManager.migrate_legacy_if_needed`.

Every call runs synchronously on the calling thread. The two mutating
operations on saved logs, :meth:`~LogStorageManager.save_log` and
:meth:`~LogStorageManager.migrate_legacy_if_needed`, share one lock; reads
do not take it and may observe a migration half-way through.
"""

from __future__ import annotations

import logging
import os
import threading
from datetime import datetime
from pathlib import Path
from typing import Callable, Iterable, List, Optional

from ..config import log_paths
from ..config.runtime import StorageConfig, check_encoding
from ..dataio.log_loader import read_lines
from ..dataio.text_writer import write_text
from .errors import IOFailure, StorageUnavailable
from .models import LogContent, SavedLogInfo, as_content

logger = logging.getLogger(__name__)

ContentLike = LogContent | str | Iterable[str]


def _mtime_or_oldest(path: Path) -> float:
    try:
        return path.stat().st_mtime
    except OSError:
        return float("-inf")


class LogStorageManager:
    """Store, list, read, delete and migrate log files under one root."""

    def __init__(
        self,
        storage_root: Path | str,
        *,
        legacy_dir_name: str = log_paths.LEGACY_SAVED_LOGS_DIR,
        encoding: str = "utf-8",
        line_separator: str = "\n",
    ) -> None:
        self.storage_root = Path(storage_root).expanduser()
        self.legacy_dir_name = legacy_dir_name
        self.encoding = check_encoding(encoding)
        self.line_separator = line_separator
        self._mutation_lock = threading.Lock()

    @classmethod
    def from_config(cls, config: StorageConfig) -> LogStorageManager:
        cfg = config.sanitized()
        return cls(
            cfg.resolve_root(),
            legacy_dir_name=cfg.legacy_dir_name,
            encoding=cfg.encoding,
            line_separator=cfg.line_separator,
        )

    # ------------------------------------------------------------------ directories
    def root(self) -> Path:
        """Return the storage root, raising :class:`StorageUnavailable` if unlistable."""
        if not self.check_storage_available():
            raise StorageUnavailable(self.storage_root)
        return self.storage_root

    def catlog_dir(self) -> Path:
        return log_paths.catlog_dir(self.root())

    def temp_dir(self) -> Path:
        return log_paths.temp_dir(self.root())

    def saved_logs_dir(self) -> Path:
        return log_paths.saved_logs_dir(self.root())

    def legacy_dir(self) -> Path:
        return log_paths.legacy_dir(self.storage_root, self.legacy_dir_name)

    # ------------------------------------------------------------------ availability
    def check_storage_available(self) -> bool:
        """
        Return True if the storage root exists and can be listed.

        Creates nothing. An empty root counts as available.
        """
        try:
            with os.scandir(self.storage_root):
                pass
        except OSError:
            return False
        return True

    def check_storage(self, notify: Optional[Callable[[str], None]] = None) -> bool:
        """
        Like :meth:`check_storage_available`, but tell *notify* when it fails.

        Callers are expected to abort their write path on ``False``.
        """
        available = self.check_storage_available()
        if not available:
            logger.warning("Storage root not found: %s", self.storage_root)
            if notify is not None:
                notify(f"Storage not found: {self.storage_root}")
        return available

    # ------------------------------------------------------------------ writers
    def save_temporary(self, filename: str, content: ContentLike) -> Path:
        """
        Overwrite ``tmp/<filename>`` with *content* and return its path.

        Raises :class:`IOFailure` if the file cannot be opened or written,
        including text the configured encoding cannot represent.
        """
        payload = as_content(content)
        temp_file = self.temp_dir() / filename
        try:
            write_text(
                temp_file,
                payload,
                encoding=self.encoding,
                line_separator=self.line_separator,
            )
        except (OSError, ValueError) as exc:
            logger.exception("Unexpected error writing temp file %s", temp_file)
            raise IOFailure(temp_file, "Couldn't write temporary file") from exc

        logger.debug("Saved temp file: %s", temp_file)
        return temp_file

    def save_log(self, filename: str, content: ContentLike) -> bool:
        """
        Append *content* to the saved log *filename*, creating it if needed.

        Returns False if the file could not be created, opened or written.
        Lines written before a failure stay in the file.
        """
        payload = as_content(content)
        with self._mutation_lock:
            try:
                new_file = self.saved_logs_dir() / filename
            except StorageUnavailable:
                logger.error("Can't save log %s: storage unavailable", filename)
                return False

            try:
                new_file.touch(exist_ok=True)
            except (OSError, ValueError):
                logger.exception("Couldn't create new file %s", new_file)
                return False

            try:
                write_text(
                    new_file,
                    payload,
                    append=True,
                    encoding=self.encoding,
                    line_separator=self.line_separator,
                )
            except (OSError, ValueError):
                logger.exception("Couldn't append to %s", new_file)
                return False

        logger.debug("Saved log: %s", new_file)
        return True

    # ------------------------------------------------------------------ queries
    def get_file(self, filename: str) -> Path:
        """Return the path of the saved log *filename*; it may not exist."""
        return log_paths.saved_logs_dir(self.storage_root) / filename

    def delete_if_exists(self, filename: str) -> None:
        path = self.get_file(filename)
        try:
            path.unlink()
        except FileNotFoundError:
            pass
        except (OSError, ValueError):
            logger.exception("Couldn't delete %s", path)

    def last_modified(self, filename: str) -> datetime:
        """
        Return the last-modified time of the saved log *filename*.

        If the file does not exist the current time is returned instead.
        That value is a placeholder, not a real timestamp.
        """
        path = self.get_file(filename)
        try:
            return datetime.fromtimestamp(path.stat().st_mtime)
        except (OSError, ValueError):
            logger.error("File last modified date not found: %s", filename)
            return datetime.now()

    def _sorted_entries(self) -> List[Path]:
        try:
            entries = list(log_paths.saved_logs_dir(self.storage_root).iterdir())
        except OSError:
            return []
        # sort() is stable, so ties keep the directory enumeration order
        entries.sort(key=_mtime_or_oldest, reverse=True)
        return entries

    def list_log_filenames(self) -> List[str]:
        """Return saved-log filenames, most recently modified first."""
        return [entry.name for entry in self._sorted_entries()]

    def list_logs(self) -> List[SavedLogInfo]:
        """Return :class:`SavedLogInfo` entries, most recently modified first."""
        infos: List[SavedLogInfo] = []
        for entry in self._sorted_entries():
            try:
                st = entry.stat()
            except OSError:
                continue
            infos.append(
                SavedLogInfo(
                    name=entry.name,
                    path=entry,
                    last_modified=datetime.fromtimestamp(st.st_mtime),
                    size=st.st_size,
                )
            )
        return infos

    # ------------------------------------------------------------------ reader
    def open_log(self, filename: str) -> List[str]:
        """
        Return the lines of the saved log *filename*.

        A read error returns whatever was read before it, never raises.
        """
        return read_lines(self.get_file(filename), encoding=self.encoding)

    # ------------------------------------------------------------------ migration
    def legacy_dir_exists(self) -> bool:
        return self.legacy_dir().is_dir()

    def migrate_legacy_if_needed(self) -> int:
        """
        Move every legacy saved log into ``catlog/saved_logs``.

        Entries are renamed, overwriting same-named saved logs, and the
        emptied legacy directory is removed. Returns the number of entries
        moved; a second call finds nothing to do and returns 0.
        """
        with self._mutation_lock:
            legacy = self.legacy_dir()
            if not legacy.is_dir():
                return 0

            try:
                target = self.saved_logs_dir()
            except StorageUnavailable:
                logger.error("Can't migrate %s: storage unavailable", legacy)
                return 0

            try:
                entries = list(legacy.iterdir())
            except OSError:
                logger.exception("Couldn't list legacy directory %s", legacy)
                return 0

            moved = 0
            for entry in entries:
                try:
                    entry.replace(target / entry.name)
                except OSError:
                    logger.exception("Couldn't move legacy log %s", entry)
                    continue
                moved += 1

            try:
                legacy.rmdir()
            except OSError:
                logger.exception("Couldn't remove legacy directory %s", legacy)

        logger.info("Moved %d legacy saved logs from %s", moved, legacy)
        return moved
