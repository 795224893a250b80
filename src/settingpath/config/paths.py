"""Where: config/paths.py
What: Locate the config file, the log file and the recorded snapshot library.
Why: Every on-disk location hangs off one detected checkout root.

The snapshot library defaults to ``<root>/.data/snapshots``; setting
``SETTINGPATH_DATA_DIR`` moves its parent directory elsewhere.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Final

SNAPSHOT_HOME_ENV: Final[str] = "SETTINGPATH_DATA_DIR"
ROOT_MARKERS: Final[tuple[str, ...]] = ("pyproject.toml", ".git")


def _detect_repo_root(start: Path | None = None) -> Path:
    """Return the nearest parent of ``start`` carrying a root marker.

    Falls back to the working directory when no marker is found.
    """
    here = (start or Path(__file__).resolve()).parent
    for candidate in (here, *here.parents):
        if any((candidate / marker).exists() for marker in ROOT_MARKERS):
            return candidate
    return Path.cwd()


def default_config_path() -> Path:
    return (_detect_repo_root() / "config" / "config.toml").resolve()


def default_log_file() -> Path:
    return (_detect_repo_root() / "logs" / "settingpath.log").resolve()


def snapshot_library(environ: Mapping[str, str] | None = None) -> Path:
    """Directory that recorded snapshots are looked up in by bare name.

    Args:
        environ: Environment to read the override from. Defaults to ``os.environ``.

    Returns:
        Path: ``snapshots`` below the overridden or checkout-local data home.
    """
    mapping = os.environ if environ is None else environ
    override = (mapping.get(SNAPSHOT_HOME_ENV) or "").strip()
    home = Path(override).expanduser() if override else _detect_repo_root() / ".data"
    return (home / "snapshots").resolve()


def locate_snapshot(name: Path, environ: Mapping[str, str] | None = None) -> Path:
    """Resolve a snapshot argument against the working directory, then the library.

    Existing files and absolute paths are returned unchanged, so callers
    still report the path the user typed when nothing matches.
    """
    if name.is_file() or name.is_absolute():
        return name
    stored = snapshot_library(environ) / name
    return stored if stored.is_file() else name


__all__ = [
    "SNAPSHOT_HOME_ENV",
    "default_config_path",
    "default_log_file",
    "locate_snapshot",
    "snapshot_library",
]
