"""
Summary: End-to-end tests for PathResolver over snapshot trees.
Why: Guard the ordering of base path, waypoints, selection and label/value segments.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from pytest_mock import MockerFixture

from settingpath.features.resolution.usecases.contexts import ContextClassifier
from settingpath.features.resolution.usecases.ports import InputEvent
from settingpath.features.resolution.usecases.resolver import PathResolver
from settingpath.features.snapshot import Snapshot
from settingpath.shared.geometry import Point
from settingpath.shared.separators import PathSeparator

SnapshotBuilder = Callable[..., Snapshot]

PIPE = PathSeparator.PIPE.literal


@pytest.fixture
def resolver() -> PathResolver:
    return PathResolver()


def test_label_path_in_titled_group(
    resolver: PathResolver,
    build_snapshot: SnapshotBuilder,
    auto_import_dialog: dict[str, Any],
) -> None:
    snapshot = build_snapshot(auto_import_dialog)
    expected = "Settings | Editor | Auto Import | Insert imports on paste: Ask"

    assert resolver.resolve_path(snapshot.find("label"), None, PIPE) == expected
    assert resolver.resolve_path(snapshot.find("combo"), None, PIPE) == expected


def test_separator_style_is_applied(
    resolver: PathResolver,
    build_snapshot: SnapshotBuilder,
    auto_import_dialog: dict[str, Any],
) -> None:
    snapshot = build_snapshot(auto_import_dialog)

    path = resolver.resolve_path(snapshot.find("label"), None, PathSeparator.UNICODE_ARROW.literal)

    assert path == "Settings → Editor → Auto Import → Insert imports on paste: Ask"


def test_adjacent_value_can_be_left_out(
    build_snapshot: SnapshotBuilder,
    auto_import_dialog: dict[str, Any],
) -> None:
    snapshot = build_snapshot(auto_import_dialog)
    resolver = PathResolver(include_adjacent_value=False)

    path = resolver.resolve_path(snapshot.find("label"), None, PIPE)

    assert path == "Settings | Editor | Auto Import | Insert imports on paste:"


def test_settings_page_uses_provided_path_names(
    resolver: PathResolver,
    build_snapshot: SnapshotBuilder,
) -> None:
    snapshot = build_snapshot(
        {
            "id": "dialog",
            "role": "dialog",
            "title": "Settings",
            "bounds": [0, 0, 900, 700],
            "children": [
                {
                    "id": "page",
                    "role": "page",
                    "path_names": ["Editor", "Code Style", "Java"],
                    "bounds": [250, 0, 650, 700],
                    "children": [
                        {"id": "imports", "role": "separator", "text": "Imports", "bounds": [260, 80, 600, 16]},
                        {
                            "id": "single",
                            "role": "checkbox",
                            "text": "Use single class import",
                            "bounds": [270, 110, 300, 20],
                        },
                    ],
                }
            ],
        }
    )

    path = resolver.resolve_path(snapshot.find("single"), None, PIPE)

    assert path == "Settings | Editor | Code Style | Java | Imports | Use single class import"


def test_settings_navigation_tree_does_not_repeat_its_selection(
    resolver: PathResolver,
    build_snapshot: SnapshotBuilder,
) -> None:
    snapshot = build_snapshot(
        {
            "id": "dialog",
            "role": "dialog",
            "title": "Settings",
            "legacy_path": ["Editor", "General"],
            "bounds": [0, 0, 900, 700],
            "children": [
                {
                    "id": "nav",
                    "role": "settings_tree",
                    "bounds": [0, 0, 250, 700],
                    "root_visible": False,
                    "rows": [["root"], ["root", "Editor"], ["root", "Editor", "General"]],
                    "selected": 2,
                }
            ],
        }
    )

    assert resolver.resolve_path(snapshot.find("nav"), None, PIPE) == "Settings | Editor | General"


def test_panel_tree_selection_deduplicates_adjacent_names(
    resolver: PathResolver,
    build_snapshot: SnapshotBuilder,
) -> None:
    snapshot = build_snapshot(
        {
            "id": "window",
            "role": "tool_window",
            "title": "Project",
            "bounds": [0, 0, 300, 600],
            "children": [
                {
                    "id": "tree",
                    "role": "tree",
                    "bounds": [0, 30, 300, 570],
                    "rows": [["Project"], ["Project", "src"], ["Project", "src", "main.kt"]],
                    "selected": 0,
                }
            ],
        }
    )
    tree = snapshot.find("tree")

    arrow = PathSeparator.ARROW.literal

    assert resolver.resolve_path(tree, InputEvent(Point(20, 75)), arrow) == "Project > src > main.kt"


def test_search_everywhere_overlay_path(resolver: PathResolver, build_snapshot: SnapshotBuilder) -> None:
    snapshot = build_snapshot(
        {
            "id": "popup",
            "role": "popup",
            "overlay": "search",
            "selected_tab": "Actions",
            "bounds": [100, 100, 600, 400],
            "children": [
                {
                    "id": "results",
                    "role": "list",
                    "bounds": [100, 140, 600, 360],
                    "items": ["Reformat Code", "Optimize Imports"],
                    "selected": 0,
                }
            ],
        }
    )

    path = resolver.resolve_path(snapshot.find("results"), None, PIPE)

    assert path == "Search Everywhere | Actions | Reformat Code"


def test_menu_items_take_the_menu_walk(resolver: PathResolver, build_snapshot: SnapshotBuilder) -> None:
    snapshot = build_snapshot(
        {
            "id": "frame",
            "role": "tool_window",
            "title": "Ignored",
            "children": [
                {"id": "bar", "role": "menu_bar", "children": [{"id": "file", "role": "menu", "text": "File"}]},
                {
                    "id": "popup",
                    "role": "menu_popup",
                    "invoker": "file",
                    "children": [{"id": "open", "role": "menu_item", "text": "Open..."}],
                },
            ],
        }
    )

    assert resolver.resolve_path(snapshot.find("open"), None, PIPE) == "File | Open..."


def test_component_without_context_resolves_to_none(
    resolver: PathResolver,
    build_snapshot: SnapshotBuilder,
) -> None:
    snapshot = build_snapshot({"id": "root", "role": "panel", "children": [{"id": "label", "role": "label", "text": "Lonely"}]})

    assert resolver.resolve_path(snapshot.find("label"), None, PIPE) is None


def test_untitled_empty_panel_resolves_to_none(resolver: PathResolver, build_snapshot: SnapshotBuilder) -> None:
    snapshot = build_snapshot({"id": "window", "role": "tool_window", "children": [{"id": "blank", "role": "panel"}]})

    assert resolver.resolve_path(snapshot.find("blank"), None, PIPE) is None


def test_failures_are_logged_and_swallowed(
    resolver: PathResolver,
    build_snapshot: SnapshotBuilder,
    auto_import_dialog: dict[str, Any],
    mocker: MockerFixture,
) -> None:
    snapshot = build_snapshot(auto_import_dialog)
    _ = mocker.patch.object(ContextClassifier, "classify", side_effect=RuntimeError("host went away"))
    mock_logger = mocker.patch("settingpath.features.resolution.usecases.resolver.logger")

    assert resolver.resolve_path(snapshot.find("label"), None, PIPE) is None
    mock_logger.error.assert_called_once()
    assert mock_logger.error.call_args.kwargs["extra"]["resolution_event"] == "resolution.error"


def test_find_overlay_path_names_selected_scope(resolver: PathResolver, build_snapshot: SnapshotBuilder) -> None:
    snapshot = build_snapshot(
        {
            "id": "popup",
            "role": "popup",
            "overlay": "find",
            "children": [
                {
                    "id": "scopes",
                    "role": "toolbar",
                    "children": [
                        {"id": "project", "role": "toggle_button", "text": "In Project", "selected": True},
                        {"id": "module", "role": "toggle_button", "text": "Module"},
                    ],
                }
            ],
        }
    )

    assert resolver.resolve_path(snapshot.find("project"), None, PIPE) == "Find in Path | In Project"


def test_category_dialog_path(resolver: PathResolver, build_snapshot: SnapshotBuilder) -> None:
    snapshot = build_snapshot(
        {
            "id": "dialog",
            "role": "dialog",
            "title": "Project Structure",
            "categories": {
                "names": ["Project", "Modules", "SDKs"],
                "sections": {"0": "Project Settings", "2": "Platform Settings"},
                "selected": "Modules",
            },
            "children": [{"id": "name", "role": "label", "text": "Name", "bounds": [10, 10, 80, 20]}],
        }
    )

    path = resolver.resolve_path(snapshot.find("name"), None, PIPE)

    assert path == "Project Structure | Project Settings | Modules | Name"


def test_grouping_border_repeated_by_label_keeps_value(
    resolver: PathResolver,
    build_snapshot: SnapshotBuilder,
) -> None:
    """A label repeating the grouping border title still receives the adjacent value."""

    snapshot = build_snapshot(
        {
            "id": "dialog",
            "role": "dialog",
            "title": "Code Style",
            "bounds": [0, 0, 600, 400],
            "children": [
                {
                    "id": "group",
                    "role": "panel",
                    "border_title": "Tab size:",
                    "bounds": [10, 10, 400, 100],
                    "children": [
                        {
                            "id": "label",
                            "role": "label",
                            "text": "Tab size:",
                            "label_for": "spinner",
                            "bounds": [20, 40, 80, 20],
                        },
                        {"id": "spinner", "role": "spinner", "value": 4, "bounds": [110, 40, 60, 20]},
                    ],
                }
            ],
        }
    )

    assert resolver.resolve_path(snapshot.find("label"), None, PIPE) == "Code Style | Tab size: 4"
