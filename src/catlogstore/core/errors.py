"""Exceptions raised by the log store."""

from __future__ import annotations

from pathlib import Path


class CatlogStoreError(Exception):
    """Base class for log store failures."""


class StorageUnavailable(CatlogStoreError):
    """The storage root is missing or cannot be listed."""

    def __init__(self, root: Path) -> None:
        super().__init__(f"Storage root is not available: {root}")
        self.root = root


class IOFailure(CatlogStoreError, OSError):
    """Opening, writing or reading a file under a reachable root failed."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"{message}: {path}")
        self.path = path
