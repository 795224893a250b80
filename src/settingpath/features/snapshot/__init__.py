# Path: `src/settingpath/features/snapshot/__init__.py`
# Summary: Export the JSON snapshot adapter.
# Why: Let the CLI and tests build component trees without a live IDE.

from .adapters import (
    Snapshot,
    SnapshotComponent,
    SnapshotError,
    SnapshotLoader,
    load_snapshot,
    load_snapshot_file,
)

__all__ = [
    "Snapshot",
    "SnapshotComponent",
    "SnapshotError",
    "SnapshotLoader",
    "load_snapshot",
    "load_snapshot_file",
]
