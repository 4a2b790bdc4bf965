from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from catlogstore import LogStorageManager
from catlogstore.config import StoragePaths, config_from_mapping, load_config, save_config
from catlogstore.config.runtime import StorageConfig


def test_storage_paths_env_override(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("CATLOG_STORAGE_ROOT", str(tmp_path))
    assert StoragePaths().storage_root == tmp_path


def test_storage_paths_default_is_home(monkeypatch) -> None:
    monkeypatch.delenv("CATLOG_STORAGE_ROOT", raising=False)
    assert StoragePaths().storage_root == Path("~").expanduser()


def test_load_config_missing_file_gives_defaults(tmp_path) -> None:
    cfg = load_config(tmp_path / "absent.yaml")
    assert cfg == StorageConfig()
    assert load_config(None) == StorageConfig()


def test_load_config_flattens_storage_block(tmp_path) -> None:
    path = tmp_path / "catlog.yaml"
    path.write_text(
        "storage:\n"
        f"  storage_root: {tmp_path}\n"
        "  legacy_dir_name: old_logs\n"
        "  unknown_key: 1\n",
        encoding="utf-8",
    )
    cfg = load_config(path)
    assert cfg.storage_root == str(tmp_path)
    assert cfg.legacy_dir_name == "old_logs"
    assert cfg.encoding == "utf-8"
    assert cfg.line_separator == "\n"


def test_load_config_rejects_non_mapping(tmp_path) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(path)


def test_sanitized_restores_blank_values() -> None:
    cfg = config_from_mapping(
        {"storage_root": "  ", "legacy_dir_name": "", "encoding": "", "line_separator": ""}
    )
    assert cfg == StorageConfig()


def test_save_config_round_trips(tmp_path) -> None:
    path = tmp_path / "conf" / "catlog.yaml"
    cfg = StorageConfig(storage_root=str(tmp_path), encoding="latin-1")
    save_config(path, cfg)

    with path.open("r", encoding="utf-8") as fh:
        raw = yaml.safe_load(fh)
    assert raw["storage"]["encoding"] == "latin-1"
    assert load_config(path) == cfg


def test_resolve_root_uses_env_when_unset(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("CATLOG_STORAGE_ROOT", str(tmp_path))
    assert StorageConfig().resolve_root() == tmp_path


def test_manager_from_config(tmp_path) -> None:
    cfg = StorageConfig(storage_root=str(tmp_path), line_separator="\r\n")
    store = LogStorageManager.from_config(cfg)

    assert store.storage_root == tmp_path
    store.save_log("x.txt", ["a"])
    assert store.get_file("x.txt").read_bytes() == b"a\r\n"


def test_unknown_encoding_is_rejected(tmp_path) -> None:
    with pytest.raises(ValueError, match="utf-9"):
        config_from_mapping({"encoding": "utf-9"})

    path = tmp_path / "catlog.yaml"
    path.write_text("storage:\n  encoding: utf-9\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(path)


def test_top_level_keys_are_read_and_storage_block_wins(tmp_path) -> None:
    path = tmp_path / "catlog.yaml"
    path.write_text(
        "encoding: latin-1\n"
        "legacy_dir_name: top\n"
        "storage:\n"
        "  legacy_dir_name: nested\n",
        encoding="utf-8",
    )
    cfg = load_config(path)
    assert cfg.encoding == "latin-1"
    assert cfg.legacy_dir_name == "nested"
