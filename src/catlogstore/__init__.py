"""Saved-log storage for the log viewer.

Typical use::

    from catlogstore import LogStorageManager

    store = LogStorageManager("/sdcard")
    if store.check_storage_available():
        store.migrate_legacy_if_needed()
        store.save_log("crash.txt", ["line one", "line two"])
        lines = store.open_log("crash.txt")
"""

from .config.log_paths import TEMP_DEVICE_INFO_FILENAME, TEMP_LOG_FILENAME
from .config.runtime import StorageConfig, load_config
from .core import (
    CatlogStoreError,
    IOFailure,
    LineSequence,
    LogContent,
    LogStorageManager,
    SavedLogInfo,
    StorageUnavailable,
    TextBlock,
)

__all__ = [
    "TEMP_DEVICE_INFO_FILENAME",
    "TEMP_LOG_FILENAME",
    "StorageConfig",
    "load_config",
    "CatlogStoreError",
    "IOFailure",
    "LineSequence",
    "LogContent",
    "LogStorageManager",
    "SavedLogInfo",
    "StorageUnavailable",
    "TextBlock",
]
