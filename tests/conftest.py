"""Shared fixtures building component trees from snapshot documents."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

import pytest

from settingpath.features.snapshot import Snapshot, load_snapshot

SnapshotBuilder = Callable[..., Snapshot]


@pytest.fixture
def build_snapshot() -> SnapshotBuilder:
    """Return a helper turning a root component mapping into a loaded snapshot."""

    def _build(root: Mapping[str, Any], actions: Mapping[str, str] | None = None) -> Snapshot:
        document: dict[str, Any] = {"root": dict(root)}
        if actions is not None:
            document["actions"] = dict(actions)
        return load_snapshot(document)

    return _build


@pytest.fixture
def auto_import_dialog() -> dict[str, Any]:
    """Settings dialog with an Editor tab and an Auto Import group holding a labelled combo."""

    return {
        "id": "dialog",
        "role": "dialog",
        "title": "Settings",
        "bounds": [0, 0, 800, 600],
        "children": [
            {
                "id": "tabs",
                "role": "tabs",
                "selected_tab": "Editor",
                "bounds": [0, 0, 800, 600],
                "children": [
                    {
                        "id": "group",
                        "role": "panel",
                        "border_title": "Auto Import",
                        "bounds": [10, 40, 600, 200],
                        "children": [
                            {
                                "id": "label",
                                "role": "label",
                                "text": "Insert imports on paste:",
                                "label_for": "combo",
                                "bounds": [20, 60, 180, 20],
                            },
                            {
                                "id": "combo",
                                "role": "combo",
                                "value": "Ask",
                                "labeled_by": "label",
                                "bounds": [210, 58, 120, 24],
                            },
                        ],
                    }
                ],
            }
        ],
    }
