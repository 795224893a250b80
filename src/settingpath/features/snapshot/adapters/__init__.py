"""Snapshot adapters exposing recorded UI trees through the capability model."""

from .components import (
    SnapshotCategories,
    SnapshotComponent,
    SnapshotList,
    SnapshotRenderer,
    SnapshotSurface,
    SnapshotTabGroup,
    SnapshotTable,
    SnapshotTree,
    SnapshotValue,
)
from .loader import Snapshot, SnapshotError, SnapshotLoader, load_snapshot, load_snapshot_file

__all__ = [
    "Snapshot",
    "SnapshotCategories",
    "SnapshotComponent",
    "SnapshotError",
    "SnapshotList",
    "SnapshotLoader",
    "SnapshotRenderer",
    "SnapshotSurface",
    "SnapshotTabGroup",
    "SnapshotTable",
    "SnapshotTree",
    "SnapshotValue",
    "load_snapshot",
    "load_snapshot_file",
]
