"""Core storage: the saved-log manager, its content types and errors.

:class:`LogStorageManager` is the only stateful piece; the models describe
what gets written and what a listing returns.
"""

from .errors import CatlogStoreError, IOFailure, StorageUnavailable
from .models import LineSequence, LogContent, SavedLogInfo, TextBlock, as_content
from .storage_manager import LogStorageManager

__all__ = [
    "CatlogStoreError",
    "IOFailure",
    "StorageUnavailable",
    "LineSequence",
    "LogContent",
    "SavedLogInfo",
    "TextBlock",
    "as_content",
    "LogStorageManager",
]
