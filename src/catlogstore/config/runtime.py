"""Runtime configuration for the log store, backed by a YAML file."""

from __future__ import annotations

import codecs
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Mapping

import yaml

from .app_config import StoragePaths
from .log_paths import LEGACY_SAVED_LOGS_DIR


DEFAULT_ENCODING = "utf-8"
DEFAULT_LINE_SEPARATOR = "\n"


@dataclass(slots=True)
class StorageConfig:
    """
    Where logs are stored and how their text is encoded.

    ``storage_root`` of ``None`` means "use :class:`StoragePaths`", which
    honours the ``CATLOG_STORAGE_ROOT`` environment variable.
    """

    storage_root: str | None = None
    legacy_dir_name: str = LEGACY_SAVED_LOGS_DIR
    encoding: str = DEFAULT_ENCODING
    line_separator: str = DEFAULT_LINE_SEPARATOR

    def sanitized(self) -> StorageConfig:
        """
        Return a copy with blank values replaced by defaults.

        Raises :class:`ValueError` if ``encoding`` names an unknown codec.
        """
        root = str(self.storage_root).strip() if self.storage_root is not None else ""
        legacy = str(self.legacy_dir_name or "").strip().strip("/\\")
        return StorageConfig(
            storage_root=root or None,
            legacy_dir_name=legacy or LEGACY_SAVED_LOGS_DIR,
            encoding=check_encoding(str(self.encoding or "").strip() or DEFAULT_ENCODING),
            line_separator=str(self.line_separator or "") or DEFAULT_LINE_SEPARATOR,
        )

    def resolve_root(self) -> Path:
        """Return the storage root as an expanded :class:`Path`."""
        if self.storage_root:
            return Path(self.storage_root).expanduser()
        return StoragePaths().storage_root


def check_encoding(name: str) -> str:
    """Return *name* if Python knows the codec, else raise :class:`ValueError`."""
    try:
        codecs.lookup(name)
    except LookupError as exc:
        raise ValueError(f"Unknown text encoding: {name!r}") from exc
    return name


def config_from_mapping(data: Mapping[str, Any] | None) -> StorageConfig:
    """
    Build :class:`StorageConfig` from a flat mapping of its field names.

    Keys that are not config fields are ignored.
    """
    if not data:
        return StorageConfig()
    payload = {f.name: data[f.name] for f in fields(StorageConfig) if f.name in data}
    return StorageConfig(**payload).sanitized()


def load_config(path: str | Path | None) -> StorageConfig:
    """
    Load configuration from the YAML file at ``path``.

    Settings may sit at the top level or under a ``storage:`` block; the
    block wins when a key appears in both. Missing files fall back to the
    default :class:`StorageConfig`.
    """
    if path is None or not Path(path).exists():
        return StorageConfig()
    cfg_path = Path(path)
    with cfg_path.open("r", encoding="utf-8") as fh:
        raw = yaml.safe_load(fh) or {}
    if not isinstance(raw, Mapping):
        raise ValueError(f"Expected mapping in {cfg_path}, got {type(raw).__name__}")

    settings = {key: value for key, value in raw.items() if key != "storage"}
    section = raw.get("storage")
    if isinstance(section, Mapping):
        settings.update(section)
    return config_from_mapping(settings)


def save_config(path: str | Path, config: StorageConfig) -> None:
    """Write *config* to ``path`` under a ``storage`` block."""
    cfg_path = Path(path)
    cfg_path.parent.mkdir(parents=True, exist_ok=True)
    with cfg_path.open("w", encoding="utf-8") as fh:
        yaml.safe_dump(
            {"storage": asdict(config.sanitized())},
            fh,
            default_flow_style=False,
            sort_keys=False,
        )


__all__ = ["StorageConfig", "check_encoding", "config_from_mapping", "load_config", "save_config"]
