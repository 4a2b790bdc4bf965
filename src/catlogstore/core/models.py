"""Shared dataclasses for log content and saved-log listings."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Iterable, Union


@dataclass(frozen=True)
class LineSequence:
    """Ordered lines; each is written followed by a line separator."""

    lines: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "lines", tuple(str(line) for line in self.lines))


@dataclass(frozen=True)
class TextBlock:
    """One opaque block of text, written verbatim."""

    text: str = ""


LogContent = Union[LineSequence, TextBlock]


def as_content(value: LogContent | str | Iterable[str]) -> LogContent:
    """
    Coerce *value* into a :data:`LogContent` variant.

    A ``str`` is a :class:`TextBlock`; any other iterable is a
    :class:`LineSequence`.
    """
    if isinstance(value, (LineSequence, TextBlock)):
        return value
    if isinstance(value, str):
        return TextBlock(value)
    if value is None:
        raise TypeError("log content must not be None")
    return LineSequence(tuple(value))


@dataclass
class SavedLogInfo:
    name: str
    path: Path
    last_modified: datetime
    size: int
