"""Shared helpers that codify the saved-log directory conventions.

These helpers keep the temp capture files, the saved logs, and the
pre-migration legacy directory in agreement about where files live::

    <root>/catlog/tmp/                  temporary capture files
    <root>/catlog/saved_logs/<name>     user-saved logs
    <root>/catlog_saved_logs/<name>     legacy saved logs
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

# ---- Constants ---------------------------------------------------------

CATLOG_DIR = "catlog"
TMP_DIR = "tmp"
SAVED_LOGS_DIR = "saved_logs"

# Saved logs used to live directly under the root in this directory.
LEGACY_SAVED_LOGS_DIR = "catlog_saved_logs"

# Well-known temporary capture files.
TEMP_DEVICE_INFO_FILENAME = "device_info.txt"
TEMP_LOG_FILENAME = "logcat.txt"


# ---- Directory helpers -------------------------------------------------

def ensure_dir(path: Path) -> Path:
    """
    Return *path*, creating the directory first if it does not exist.

    Creation is best-effort: a failure is logged and the path is returned
    anyway, so the later open/list call reports the real problem.
    """
    if path.is_dir():
        return path
    try:
        path.mkdir(exist_ok=True)
    except OSError as exc:
        logger.warning("Could not create directory %s: %s", path, exc)
    return path


def catlog_dir(root: Path) -> Path:
    """Return ``<root>/catlog``, created if absent."""

    return ensure_dir(Path(root) / CATLOG_DIR)


def temp_dir(root: Path) -> Path:
    """Return ``<root>/catlog/tmp``, created if absent."""

    return ensure_dir(catlog_dir(root) / TMP_DIR)


def saved_logs_dir(root: Path) -> Path:
    """Return ``<root>/catlog/saved_logs``, created if absent."""

    return ensure_dir(catlog_dir(root) / SAVED_LOGS_DIR)


def legacy_dir(root: Path, name: str = LEGACY_SAVED_LOGS_DIR) -> Path:
    """Return the legacy saved-logs directory. It is never created here."""

    return Path(root) / name
