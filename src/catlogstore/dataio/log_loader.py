"""Utilities for reading saved logs back for display."""

import logging
from pathlib import Path
from typing import List

logger = logging.getLogger(__name__)


def read_lines(path: Path, encoding: str = "utf-8") -> List[str]:
    """
    Read *path* line by line, stripping line endings.

    Reading is lenient: if opening, reading or decoding fails part-way, the
    lines collected so far are returned and the error is only logged.
    A missing file therefore yields an empty list.
    """
    lines: List[str] = []
    try:
        with path.open("r", encoding=encoding) as fh:
            for line in fh:
                lines.append(line.rstrip("\r\n"))
    except (OSError, ValueError, LookupError) as exc:
        logger.error("Couldn't read file %s after %d lines: %s", path, len(lines), exc)
    return lines
