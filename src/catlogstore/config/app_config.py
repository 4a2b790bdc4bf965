"""Default storage paths for the log store."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from .log_paths import LEGACY_SAVED_LOGS_DIR


DEFAULT_STORAGE_ROOT = Path("~")


@dataclass
class StoragePaths:
    """
    Location of the removable storage volume used by the log viewer.

    ``CATLOG_STORAGE_ROOT`` overrides the default root (the user's home
    directory) so that a mounted card or an alternate layout can be used
    without touching the config file.
    """

    storage_root: Path = field(init=False)
    legacy_dir_name: str = LEGACY_SAVED_LOGS_DIR

    def __post_init__(self) -> None:
        env_root = os.environ.get("CATLOG_STORAGE_ROOT")
        if env_root:
            self.storage_root = Path(env_root).expanduser()
        else:
            self.storage_root = DEFAULT_STORAGE_ROOT.expanduser()
