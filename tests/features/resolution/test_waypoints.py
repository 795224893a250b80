"""Tests for ancestor waypoints and the preceding group separator."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from settingpath.features.resolution.usecases.waypoints import WaypointCollector
from settingpath.features.snapshot import Snapshot

SnapshotBuilder = Callable[..., Snapshot]


@pytest.fixture
def collector() -> WaypointCollector:
    return WaypointCollector()


def _separated_page(extra_children: list[dict[str, Any]] | None = None) -> dict[str, Any]:
    children: list[dict[str, Any]] = [
        {"id": "general", "role": "separator", "text": "General", "bounds": [10, 100, 500, 16]},
        {"id": "first", "role": "checkbox", "text": "Show hints", "bounds": [20, 130, 200, 20]},
        {"id": "advanced", "role": "separator", "text": "Advanced", "bounds": [10, 200, 500, 16]},
        {"id": "second", "role": "checkbox", "text": "Use cache", "bounds": [20, 250, 200, 20]},
        {"id": "top", "role": "checkbox", "text": "Early", "bounds": [20, 50, 200, 20]},
    ]
    children.extend(extra_children or [])
    return {
        "id": "dialog",
        "role": "dialog",
        "bounds": [0, 0, 600, 400],
        "children": [{"id": "page", "role": "page", "bounds": [0, 0, 600, 400], "children": children}],
    }


def test_collect_orders_tab_before_border_title(
    collector: WaypointCollector,
    build_snapshot: SnapshotBuilder,
    auto_import_dialog: dict[str, Any],
) -> None:
    snapshot = build_snapshot(auto_import_dialog)

    waypoints = collector.collect(snapshot.find("label"), snapshot.find("dialog"))

    assert waypoints == ["Editor", "Auto Import"]


def test_collect_stops_at_boundary(
    collector: WaypointCollector,
    build_snapshot: SnapshotBuilder,
    auto_import_dialog: dict[str, Any],
) -> None:
    snapshot = build_snapshot(auto_import_dialog)

    assert collector.collect(snapshot.find("label"), snapshot.find("tabs")) == ["Auto Import"]


def test_collect_appends_nearest_separator_above(
    collector: WaypointCollector,
    build_snapshot: SnapshotBuilder,
) -> None:
    snapshot = build_snapshot(_separated_page())
    page = snapshot.find("page")

    assert collector.collect(snapshot.find("second"), page) == ["Advanced"]
    assert collector.collect(snapshot.find("first"), page) == ["General"]
    assert collector.collect(snapshot.find("top"), page) == []


def test_separator_under_hidden_page_is_ignored(
    collector: WaypointCollector,
    build_snapshot: SnapshotBuilder,
) -> None:
    """An inactive card page keeps its separators out of the path."""

    hidden_card = {
        "id": "card",
        "role": "panel",
        "visible": False,
        "children": [
            {"id": "hidden", "role": "separator", "text": "Hidden", "bounds": [10, 220, 500, 16]},
        ],
    }
    snapshot = build_snapshot(_separated_page([hidden_card]))

    separator = collector.preceding_group_separator(snapshot.find("second"), snapshot.find("page"))

    assert separator is snapshot.find("advanced")


def test_separator_at_same_height_qualifies_and_first_wins_ties(
    collector: WaypointCollector,
    build_snapshot: SnapshotBuilder,
) -> None:
    snapshot = build_snapshot(
        {
            "id": "dialog",
            "role": "dialog",
            "bounds": [0, 0, 600, 400],
            "children": [
                {"id": "left", "role": "separator", "text": "Left", "bounds": [0, 100, 200, 16]},
                {"id": "right", "role": "separator", "text": "Right", "bounds": [300, 100, 200, 16]},
                {"id": "target", "role": "label", "text": "Aligned", "bounds": [20, 100, 100, 20]},
            ],
        }
    )

    separator = collector.preceding_group_separator(snapshot.find("target"), None)

    assert separator is snapshot.find("left")


def test_target_inside_separator_gets_no_separator(
    collector: WaypointCollector,
    build_snapshot: SnapshotBuilder,
) -> None:
    snapshot = build_snapshot(
        {
            "id": "dialog",
            "role": "dialog",
            "bounds": [0, 0, 600, 400],
            "children": [
                {"id": "above", "role": "separator", "text": "Above", "bounds": [0, 10, 600, 16]},
                {
                    "id": "titled",
                    "role": "separator",
                    "bounds": [0, 100, 600, 16],
                    "children": [{"id": "title", "role": "label", "text": "Titled", "bounds": [0, 100, 80, 16]}],
                },
            ],
        }
    )

    assert collector.preceding_group_separator(snapshot.find("title"), snapshot.find("dialog")) is None


def test_target_without_bounds_gets_no_separator(
    collector: WaypointCollector,
    build_snapshot: SnapshotBuilder,
) -> None:
    snapshot = build_snapshot(
        {
            "id": "dialog",
            "role": "dialog",
            "children": [
                {"id": "above", "role": "separator", "text": "Above", "bounds": [0, 10, 600, 16]},
                {"id": "floating", "role": "label", "text": "Floating"},
            ],
        }
    )

    assert collector.collect(snapshot.find("floating"), snapshot.find("dialog")) == []


def test_collect_includes_selected_toolbar_toggle(
    collector: WaypointCollector,
    build_snapshot: SnapshotBuilder,
) -> None:
    snapshot = build_snapshot(
        {
            "id": "popup",
            "role": "popup",
            "children": [
                {
                    "id": "scopes",
                    "role": "toolbar",
                    "children": [
                        {"id": "project", "role": "toggle_button", "text": "In Project", "selected": True},
                        {"id": "module", "role": "toggle_button", "text": "Module"},
                        {"id": "directory", "role": "toggle_button", "text": "Directory", "selected": True},
                    ],
                }
            ],
        }
    )

    # Only the first selected toggle names the toolbar
    assert collector.collect(snapshot.find("module"), snapshot.find("popup")) == ["In Project"]


def test_toolbar_without_selected_toggle_adds_nothing(
    collector: WaypointCollector,
    build_snapshot: SnapshotBuilder,
) -> None:
    snapshot = build_snapshot(
        {
            "id": "popup",
            "role": "popup",
            "children": [
                {
                    "id": "scopes",
                    "role": "toolbar",
                    "children": [{"id": "module", "role": "toggle_button", "text": "Module"}],
                }
            ],
        }
    )

    assert collector.collect(snapshot.find("module"), snapshot.find("popup")) == []
