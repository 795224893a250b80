"""Tests for configuration path resolution helpers."""

from pathlib import Path

import pytest

from settingpath.config.paths import (
    default_config_path,
    default_log_file,
    locate_snapshot,
    snapshot_library,
)


def test_default_log_file(portable_repo_root: Path) -> None:
    """The log file lives under the checkout's logs/ folder."""

    assert default_log_file() == portable_repo_root / "logs" / "settingpath.log"


def test_default_config_path(portable_repo_root: Path) -> None:
    assert default_config_path() == portable_repo_root / "config" / "config.toml"


def test_snapshot_library_honours_environment_override(
    portable_repo_root: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """SETTINGPATH_DATA_DIR replaces the checkout-local data folder."""

    monkeypatch.delenv("SETTINGPATH_DATA_DIR", raising=False)
    assert snapshot_library() == portable_repo_root / ".data" / "snapshots"

    override = tmp_path / "snapshots-home"
    monkeypatch.setenv("SETTINGPATH_DATA_DIR", str(override))
    assert snapshot_library() == (override / "snapshots").resolve()


def test_blank_override_uses_checkout_data(portable_repo_root: Path) -> None:
    library = snapshot_library({"SETTINGPATH_DATA_DIR": "   "})

    assert library == portable_repo_root / ".data" / "snapshots"


def test_locate_snapshot_prefers_library_for_bare_names(tmp_path: Path) -> None:
    stored = tmp_path / "snapshots" / "find.json"
    stored.parent.mkdir()
    _ = stored.write_text("{}", encoding="utf-8")
    environ = {"SETTINGPATH_DATA_DIR": str(tmp_path)}

    assert locate_snapshot(Path("find.json"), environ) == stored.resolve()
    assert locate_snapshot(Path("missing.json"), environ) == Path("missing.json")


def test_locate_snapshot_keeps_absolute_paths(tmp_path: Path) -> None:
    absolute = tmp_path / "elsewhere.json"

    assert locate_snapshot(absolute, {"SETTINGPATH_DATA_DIR": str(tmp_path)}) == absolute
