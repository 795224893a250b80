"""Where: features/snapshot/adapters/loader.py
What: Build snapshot components from JSON documents describing a UI tree.
Why: Give the resolver a concrete host to run against outside the IDE.
Assumptions: - Bounds are absolute screen coordinates ``[x, y, width, height]``.
"""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any, ClassVar, final

from settingpath.features.resolution.domain.components import (
    Capability,
    OverlayKind,
    SurfaceKind,
    TextFragment,
    ValueKind,
)
from settingpath.platform.logging import logger
from settingpath.shared.geometry import Rect

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


class SnapshotError(ValueError):
    """Raised when a snapshot document is malformed."""


@dataclass(slots=True, frozen=True)
class Snapshot:
    """A loaded UI tree plus the action labels recorded with it."""

    root: SnapshotComponent
    components: Mapping[str, SnapshotComponent]
    actions: Mapping[str, str]

    def find(self, component_id: str) -> SnapshotComponent:
        """Return the component registered under ``component_id``.

        Raises:
            SnapshotError: If no component carries that id.
        """
        try:
            return self.components[component_id]
        except KeyError:
            msg = f"Unknown component id '{component_id}'"
            raise SnapshotError(msg) from None


@final
class SnapshotLoader:
    """Translate snapshot documents into linked ``SnapshotComponent`` trees."""

    ROLE_CAPABILITIES: ClassVar[dict[str, frozenset[Capability]]] = {
        "panel": frozenset({Capability.CONTAINER}),
        "page": frozenset({Capability.CONTAINER, Capability.PAGE_BOUNDARY}),
        "header": frozenset({Capability.CONTAINER, Capability.HEADER}),
        "dialog": frozenset({Capability.CONTAINER, Capability.SURFACE}),
        "popup": frozenset({Capability.CONTAINER, Capability.SURFACE}),
        "tool_window": frozenset({Capability.CONTAINER, Capability.SURFACE}),
        "tabs": frozenset({Capability.CONTAINER, Capability.TAB}),
        "toolbar": frozenset({Capability.CONTAINER, Capability.TOOLBAR}),
        "label": frozenset({Capability.LABEL}),
        "text": frozenset({Capability.LABEL}),
        "separator": frozenset({Capability.GROUP_SEPARATOR}),
        "button": frozenset({Capability.BUTTON}),
        "toggle_button": frozenset({Capability.BUTTON, Capability.TOGGLE}),
        "checkbox": frozenset({Capability.TOGGLE, Capability.VALUE_WIDGET}),
        "radio": frozenset({Capability.TOGGLE, Capability.VALUE_WIDGET}),
        "combo": frozenset({Capability.VALUE_WIDGET}),
        "combo_button": frozenset({Capability.VALUE_WIDGET, Capability.BUTTON}),
        "text_field": frozenset({Capability.VALUE_WIDGET}),
        "text_area": frozenset({Capability.VALUE_WIDGET}),
        "spinner": frozenset({Capability.VALUE_WIDGET}),
        "slider": frozenset({Capability.VALUE_WIDGET}),
        "tree": frozenset({Capability.SELECTABLE_LIST}),
        "settings_tree": frozenset({Capability.SELECTABLE_LIST, Capability.SETTINGS_NAVIGATION}),
        "table": frozenset({Capability.SELECTABLE_LIST}),
        "list": frozenset({Capability.SELECTABLE_LIST}),
        "menu_bar": frozenset({Capability.MENU_BAR}),
        "menu_popup": frozenset({Capability.MENU_POPUP}),
        "menu": frozenset({Capability.MENU}),
        "menu_item": frozenset({Capability.MENU_ITEM}),
    }

    ROLE_VALUE_KINDS: ClassVar[dict[str, ValueKind]] = {
        "checkbox": ValueKind.TOGGLE,
        "radio": ValueKind.TOGGLE,
        "toggle_button": ValueKind.TOGGLE,
        "combo": ValueKind.SELECTION,
        "combo_button": ValueKind.BUTTON,
        "text_field": ValueKind.TEXT_ENTRY,
        "text_area": ValueKind.DESCRIPTION,
        "spinner": ValueKind.NUMERIC,
        "slider": ValueKind.NUMERIC,
    }

    ROLE_SURFACE_KINDS: ClassVar[dict[str, SurfaceKind]] = {
        "dialog": SurfaceKind.DIALOG,
        "popup": SurfaceKind.POPUP,
        "tool_window": SurfaceKind.PANEL,
    }

    def __init__(self) -> None:
        self._registry: dict[str, SnapshotComponent] = {}
        self._links: list[tuple[SnapshotComponent, str, str]] = []
        self._anonymous = 0

    def load(self, document: Mapping[str, Any]) -> Snapshot:
        """Build a snapshot from a decoded document.

        The document holds a ``root`` component and optional ``actions``
        mapping action ids to labels.

        Raises:
            SnapshotError: If the document is malformed.
        """
        if not isinstance(document, Mapping):
            raise SnapshotError("Snapshot document must be a JSON object")
        root_data = document.get("root")
        if not isinstance(root_data, Mapping):
            raise SnapshotError("Snapshot document requires a 'root' component object")

        self._registry = {}
        self._links = []
        self._anonymous = 0
        root = self._build(root_data, parent=None)
        self._resolve_links()

        actions = document.get("actions", {})
        if not isinstance(actions, Mapping) or not all(
            isinstance(key, str) and isinstance(label, str) for key, label in actions.items()
        ):
            raise SnapshotError("'actions' must map action ids to labels")

        logger.debug("Loaded snapshot with %d components", len(self._registry))
        return Snapshot(root=root, components=dict(self._registry), actions=dict(actions))

    def load_file(self, path: Path) -> Snapshot:
        """Read and build a snapshot from a JSON file.

        Raises:
            SnapshotError: If the file cannot be read or decoded.
        """
        try:
            with open(path, encoding="utf-8") as handle:
                document = json.load(handle)
        except OSError as exc:
            msg = f"Cannot read snapshot {path}: {exc}"
            raise SnapshotError(msg) from exc
        except json.JSONDecodeError as exc:
            msg = f"Invalid JSON in snapshot {path}: {exc}"
            raise SnapshotError(msg) from exc
        return self.load(document)

    # Components ---------------------------------------------------------------

    def _build(self, data: Mapping[str, Any], parent: SnapshotComponent | None) -> SnapshotComponent:
        role = str(data.get("role", "panel"))
        if role not in self.ROLE_CAPABILITIES:
            valid = ", ".join(sorted(self.ROLE_CAPABILITIES))
            msg = f"Unknown role '{role}'. Valid roles: {valid}"
            raise SnapshotError(msg)

        component_id = self._component_id(data)
        bounds = _parse_bounds(data.get("bounds"), component_id)
        capabilities = set(self.ROLE_CAPABILITIES[role])
        for extra in data.get("capabilities", ()):
            try:
                capabilities.add(Capability(extra))
            except ValueError:
                msg = f"Unknown capability '{extra}' on '{component_id}'"
                raise SnapshotError(msg) from None

        component = SnapshotComponent(
            id=component_id,
            role=role,
            parent=parent,
            bounds=bounds,
            visible=bool(data.get("visible", True)),
            text=_optional_str(data.get("text")),
            bold=bool(data.get("bold", False)),
            fragments=_parse_fragments(data.get("fragments", ())),
        )

        border_title = _optional_str(data.get("border_title"))
        if border_title is not None:
            component.border_title = border_title
            capabilities.add(Capability.BORDER_TITLE)

        if Capability.TAB in capabilities:
            component.tab_group = SnapshotTabGroup(_optional_str(data.get("selected_tab")))

        if role in self.ROLE_VALUE_KINDS:
            component.value = self._parse_value(role, data, component)

        if role in self.ROLE_SURFACE_KINDS:
            component.surface = self._parse_surface(role, data)

        path_names = data.get("path_names")
        if path_names is not None:
            component.provided_path_names = tuple(str(name) for name in path_names)
            capabilities.add(Capability.PATH_NAME_PROVIDER)

        if role in ("tree", "settings_tree"):
            component.selection = self._parse_tree(data, bounds)
        elif role == "table":
            component.selection = self._parse_table(data, bounds)
        elif role == "list":
            component.selection = self._parse_list(data, bounds)

        for field_name in ("labeled_by", "label_for", "invoker"):
            reference = data.get(field_name)
            if reference is not None:
                self._links.append((component, field_name, str(reference)))
        if data.get("labeled_by") is not None:
            capabilities.add(Capability.LABEL_TARGET_LINK)

        component.capabilities = frozenset(capabilities)
        self._registry[component_id] = component

        children = _mappings(data.get("children", ()), component_id)
        component.children = [self._build(child, component) for child in children]
        return component

    def _component_id(self, data: Mapping[str, Any]) -> str:
        raw = data.get("id")
        if raw is None:
            self._anonymous += 1
            return f"_anonymous-{self._anonymous}"
        component_id = str(raw)
        if component_id in self._registry:
            msg = f"Duplicate component id '{component_id}'"
            raise SnapshotError(msg)
        return component_id

    def _resolve_links(self) -> None:
        for component, field_name, reference in self._links:
            target = self._registry.get(reference)
            if target is None:
                msg = f"'{component.id}.{field_name}' references unknown component '{reference}'"
                raise SnapshotError(msg)
            setattr(component, field_name, target)

    # Facets -------------------------------------------------------------------

    def _parse_value(
        self,
        role: str,
        data: Mapping[str, Any],
        component: SnapshotComponent,
    ) -> SnapshotValue:
        kind = self.ROLE_VALUE_KINDS[role]
        current = data.get("value")
        if kind is ValueKind.TEXT_ENTRY and current is None:
            current = data.get("text", "")
        return SnapshotValue(
            kind=kind,
            current=current,
            text=component.text,
            selected=bool(data.get("selected", False)),
            exclusive=role == "radio",
            renderer=_parse_renderer(data.get("renderer")),
        )

    @staticmethod
    def _parse_surface(role: str, data: Mapping[str, Any]) -> SnapshotSurface:
        overlay_raw = data.get("overlay")
        try:
            overlay = OverlayKind(overlay_raw) if overlay_raw is not None else None
        except ValueError:
            valid = ", ".join(kind.value for kind in OverlayKind)
            msg = f"Unknown overlay '{overlay_raw}'. Valid overlays: {valid}"
            raise SnapshotError(msg) from None
        return SnapshotSurface(
            kind=SnapshotLoader.ROLE_SURFACE_KINDS[role],
            title=_optional_str(data.get("title")),
            overlay=overlay,
            selected_tab_title=_optional_str(data.get("selected_tab")),
            selected_content_title=_optional_str(data.get("selected_content")),
            legacy_path=tuple(str(name) for name in data.get("legacy_path", ())),
            categories=_parse_categories(data.get("categories")),
        )

    @staticmethod
    def _parse_tree(data: Mapping[str, Any], bounds: Rect | None) -> SnapshotTree:
        rows = data.get("rows", [])
        if not isinstance(rows, list) or not all(isinstance(row, list) for row in rows):
            raise SnapshotError("Tree 'rows' must be a list of node chains")
        return SnapshotTree(
            rows=[tuple(row) for row in rows],
            row_height=int(data.get("row_height", 20)),
            root_visible=bool(data.get("root_visible", True)),
            selected=_optional_int(data.get("selected")),
            renderer=_parse_renderer(data.get("renderer")),
            owner_bounds=bounds,
        )

    @staticmethod
    def _parse_table(data: Mapping[str, Any], bounds: Rect | None) -> SnapshotTable:
        cells = data.get("cells", [])
        if not isinstance(cells, list) or not all(isinstance(row, list) for row in cells):
            raise SnapshotError("Table 'cells' must be a list of rows")
        widths = [int(width) for width in data.get("column_widths", ())]
        renderers: dict[int, SnapshotRenderer] = {}
        for column, table in dict(data.get("renderers", {})).items():
            renderer = _parse_renderer(table)
            if renderer is not None:
                renderers[int(column)] = renderer
        return SnapshotTable(
            cells=[list(row) for row in cells],
            column_widths=widths,
            row_height=int(data.get("row_height", 20)),
            selected_row_index=_optional_int(data.get("selected_row")),
            selected_column_index=_optional_int(data.get("selected_column")),
            renderers=renderers,
            owner_bounds=bounds,
        )

    @staticmethod
    def _parse_list(data: Mapping[str, Any], bounds: Rect | None) -> SnapshotList:
        items = data.get("items", [])
        if not isinstance(items, list):
            raise SnapshotError("List 'items' must be a list")
        return SnapshotList(
            items=list(items),
            item_height=int(data.get("item_height", 20)),
            selected=_optional_int(data.get("selected")),
            renderer=_parse_renderer(data.get("renderer")),
            owner_bounds=bounds,
        )


def _mappings(raw: Any, owner: str) -> list[Mapping[str, Any]]:
    if not isinstance(raw, Sequence) or isinstance(raw, str):
        msg = f"'children' of '{owner}' must be a list"
        raise SnapshotError(msg)
    children: list[Mapping[str, Any]] = []
    for child in raw:
        if not isinstance(child, Mapping):
            msg = f"Children of '{owner}' must be component objects"
            raise SnapshotError(msg)
        children.append(child)
    return children


def _parse_bounds(raw: Any, owner: str) -> Rect | None:
    if raw is None:
        return None
    if (
        not isinstance(raw, Sequence)
        or isinstance(raw, str)
        or len(raw) != 4
        or not all(isinstance(part, int) and not isinstance(part, bool) for part in raw)
    ):
        msg = f"Bounds of '{owner}' must be [x, y, width, height] integers"
        raise SnapshotError(msg)
    x, y, width, height = raw
    return Rect(x, y, width, height)


def _parse_fragments(raw: Any) -> tuple[TextFragment, ...]:
    if not isinstance(raw, Sequence) or isinstance(raw, str):
        raise SnapshotError("Fragments must be a list")
    fragments: list[TextFragment] = []
    for entry in raw:
        if isinstance(entry, str):
            fragments.append(TextFragment(entry))
        elif isinstance(entry, Mapping):
            fragments.append(TextFragment(str(entry.get("text", "")), bool(entry.get("bold", False))))
        else:
            raise SnapshotError("Fragments must be strings or {text, bold} objects")
    return tuple(fragments)


def _parse_categories(raw: Any) -> SnapshotCategories | None:
    if raw is None:
        return None
    if not isinstance(raw, Mapping):
        raise SnapshotError("'categories' must be an object with names, sections and selected")
    names = raw.get("names", [])
    if not isinstance(names, list):
        raise SnapshotError("Category 'names' must be a list")
    sections = raw.get("sections", {})
    if not isinstance(sections, Mapping):
        raise SnapshotError("Category 'sections' must map indices to headings")
    try:
        headings = {int(index): str(title) for index, title in sections.items()}
    except ValueError:
        raise SnapshotError("Category section keys must be integer indices") from None
    return SnapshotCategories(
        names=tuple(str(name) for name in names),
        sections=headings,
        selected=_optional_str(raw.get("selected")),
    )


def _parse_renderer(raw: Any) -> SnapshotRenderer | None:
    if raw is None:
        return None
    if not isinstance(raw, Mapping):
        raise SnapshotError("A renderer must map value keys to display text")
    return SnapshotRenderer({str(key): str(text) for key, text in raw.items()})


def _optional_str(raw: Any) -> str | None:
    return None if raw is None else str(raw)


def _optional_int(raw: Any) -> int | None:
    if raw is None:
        return None
    if isinstance(raw, bool) or not isinstance(raw, int):
        msg = f"Expected an integer index, got {raw!r}"
        raise SnapshotError(msg)
    return raw


def load_snapshot(document: Mapping[str, Any]) -> Snapshot:
    """Convenience wrapper around ``SnapshotLoader().load``."""

    return SnapshotLoader().load(document)


def load_snapshot_file(path: Path) -> Snapshot:
    """Convenience wrapper around ``SnapshotLoader().load_file``."""

    return SnapshotLoader().load_file(path)


__all__ = [
    "Snapshot",
    "SnapshotError",
    "SnapshotLoader",
    "load_snapshot",
    "load_snapshot_file",
]
