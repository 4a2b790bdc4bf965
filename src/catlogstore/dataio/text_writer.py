"""Text writing helpers for temporary and saved logs."""

from pathlib import Path
from typing import TextIO

from ..core.models import LineSequence, LogContent, TextBlock

# Matches the buffer size the log viewer has always used for its streams.
WRITE_BUFFER_SIZE = 8192


def _write_content(fh: TextIO, content: LogContent, line_separator: str) -> None:
    if isinstance(content, TextBlock):
        fh.write(content.text)
    elif isinstance(content, LineSequence):
        for line in content.lines:
            fh.write(line)
            fh.write(line_separator)
    else:
        raise TypeError(f"unsupported log content: {type(content).__name__}")


def write_text(
    path: Path,
    content: LogContent,
    *,
    append: bool = False,
    encoding: str = "utf-8",
    line_separator: str = "\n",
) -> None:
    """
    Write *content* to *path*, truncating unless *append* is set.

    The handle is closed on every exit path; errors from ``open`` or
    ``write`` propagate as :class:`OSError`.
    """
    mode = "a" if append else "w"
    with path.open(
        mode, encoding=encoding, newline="", buffering=WRITE_BUFFER_SIZE
    ) as fh:
        _write_content(fh, content, line_separator)
