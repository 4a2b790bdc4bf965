"""Configuration objects and helpers for the log store.

This package knows where the storage volume lives and how the log
directories are laid out beneath it:
- :mod:`log_paths` names the ``catlog`` / ``tmp`` / ``saved_logs`` layout
- :mod:`app_config` resolves the storage root (``CATLOG_STORAGE_ROOT``)
- :mod:`runtime` loads/saves the YAML config file
"""

from .app_config import StoragePaths
from .runtime import StorageConfig, config_from_mapping, load_config, save_config

__all__ = [
    "StorageConfig",
    "StoragePaths",
    "config_from_mapping",
    "load_config",
    "save_config",
]
