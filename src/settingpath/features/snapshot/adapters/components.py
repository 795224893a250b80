"""Snapshot-backed implementations of the component capability model."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import override

from settingpath.features.resolution.domain.components import (
    Capability,
    Component,
    OverlayKind,
    SelectionShape,
    SurfaceKind,
    TextFragment,
    ValueKind,
)
from settingpath.shared.geometry import Point, Rect


def render_key(value: object) -> str:
    """Key used to look a model value up in a renderer table."""

    if isinstance(value, Mapping):
        identifier = value.get("id")
        return "" if identifier is None else str(identifier)
    return str(value)


@dataclass(slots=True, eq=False)
class SnapshotComponent:
    """A recorded UI component with its facets."""

    id: str
    role: str
    capabilities: frozenset[Capability] = frozenset()
    parent: Component | None = None
    children: list[Component] = field(default_factory=list)
    bounds: Rect | None = None
    visible: bool = True
    text: str | None = None
    bold: bool = False
    fragments: Sequence[TextFragment] = ()
    labeled_by: Component | None = None
    label_for: Component | None = None
    border_title: str | None = None
    tab_group: SnapshotTabGroup | None = None
    value: SnapshotValue | None = None
    selection: SnapshotTree | SnapshotTable | SnapshotList | None = None
    surface: SnapshotSurface | None = None
    invoker: Component | None = None
    provided_path_names: tuple[str, ...] | None = None

    def path_names(self) -> Sequence[str] | None:
        return self.provided_path_names

    @override
    def __repr__(self) -> str:
        return f"SnapshotComponent(id={self.id!r}, role={self.role!r})"


@dataclass(slots=True, frozen=True)
class SnapshotRenderer:
    """Renderer painting mapped values as plain labels."""

    labels: Mapping[str, str]

    def render(self, value: object, index: int) -> Component | None:
        text = self.labels.get(render_key(value))
        if text is None:
            return None
        return SnapshotComponent(
            id=f"rendered-{index}",
            role="label",
            capabilities=frozenset({Capability.LABEL}),
            text=text,
        )


@dataclass(slots=True, frozen=True)
class SnapshotTabGroup:
    selected: str | None = None

    def selected_tab_title(self) -> str | None:
        return self.selected


@dataclass(slots=True, frozen=True)
class SnapshotValue:
    """Recorded state of a value widget."""

    kind: ValueKind
    current: object = None
    text: str | None = None
    selected: bool = False
    exclusive: bool = False
    renderer: SnapshotRenderer | None = None

    def current_value(self) -> object:
        return self.current


def _band(start: int, size: int, offset: int, count: int) -> int | None:
    """Index of the fixed-size band containing ``offset``, or None outside."""

    if size <= 0 or offset < start:
        return None
    index = (offset - start) // size
    return index if index < count else None


@dataclass(slots=True)
class SnapshotTree:
    """Tree with fixed-height rows, each recorded as its root-to-row node chain."""

    rows: list[tuple[object, ...]]
    row_height: int = 20
    root_visible: bool = True
    selected: int | None = None
    renderer: SnapshotRenderer | None = None
    owner_bounds: Rect | None = None
    shape: SelectionShape = SelectionShape.TREE

    def row_at(self, point: Point) -> int | None:
        if self.owner_bounds is None or not self.owner_bounds.contains(point):
            return None
        return _band(self.owner_bounds.y, self.row_height, point.y, len(self.rows))

    def selected_row(self) -> int | None:
        return self.selected

    def node_chain(self, row: int) -> Sequence[object]:
        return self.rows[row]


@dataclass(slots=True)
class SnapshotTable:
    """Table with fixed-height rows and recorded column widths."""

    cells: list[list[object]]
    column_widths: list[int]
    row_height: int = 20
    selected_row_index: int | None = None
    selected_column_index: int | None = None
    renderers: dict[int, SnapshotRenderer] = field(default_factory=dict)
    owner_bounds: Rect | None = None
    shape: SelectionShape = SelectionShape.TABLE

    def row_at(self, point: Point) -> int | None:
        if self.owner_bounds is None or not self.owner_bounds.contains(point):
            return None
        return _band(self.owner_bounds.y, self.row_height, point.y, len(self.cells))

    def column_at(self, point: Point) -> int | None:
        if self.owner_bounds is None or not self.owner_bounds.contains(point):
            return None
        left = self.owner_bounds.x
        for index, width in enumerate(self.column_widths):
            if left <= point.x < left + width:
                return index
            left += width
        return None

    def selected_row(self) -> int | None:
        return self.selected_row_index

    def selected_column(self) -> int | None:
        return self.selected_column_index

    def cell_value(self, row: int, column: int) -> object:
        return self.cells[row][column]

    def renderer_for(self, column: int) -> SnapshotRenderer | None:
        return self.renderers.get(column)


@dataclass(slots=True)
class SnapshotList:
    """Flat list with fixed-height items.

    ``index_at`` mirrors host toolkits and returns the closest item, clamping
    points below the last item to the last index.
    """

    items: list[object]
    item_height: int = 20
    selected: int | None = None
    renderer: SnapshotRenderer | None = None
    owner_bounds: Rect | None = None
    shape: SelectionShape = SelectionShape.LIST

    def index_at(self, point: Point) -> int | None:
        if self.owner_bounds is None or not self.items or self.item_height <= 0:
            return None
        index = (point.y - self.owner_bounds.y) // self.item_height
        return max(0, min(index, len(self.items) - 1))

    def cell_bounds(self, index: int) -> Rect | None:
        if self.owner_bounds is None or not 0 <= index < len(self.items):
            return None
        bounds = self.owner_bounds
        return Rect(bounds.x, bounds.y + index * self.item_height, bounds.width, self.item_height)

    def selected_index(self) -> int | None:
        return self.selected

    def item(self, index: int) -> object:
        return self.items[index]


@dataclass(slots=True, frozen=True)
class SnapshotCategories:
    """Recorded side panel of a category-navigated dialog."""

    names: tuple[str, ...]
    sections: Mapping[int, str] = field(default_factory=dict)
    selected: str | None = None

    def categories(self) -> Sequence[str]:
        return self.names

    def section_titles(self) -> Mapping[int, str]:
        return self.sections

    def selected_category(self) -> str | None:
        return self.selected


@dataclass(slots=True, frozen=True)
class SnapshotSurface:
    """Recorded dialog, popup or panel surface."""

    kind: SurfaceKind
    title: str | None = None
    overlay: OverlayKind | None = None
    selected_tab_title: str | None = None
    selected_content_title: str | None = None
    legacy_path: tuple[str, ...] = ()
    categories: SnapshotCategories | None = None

    def legacy_path_names(self) -> Sequence[str]:
        return self.legacy_path


__all__ = [
    "SnapshotCategories",
    "SnapshotComponent",
    "SnapshotList",
    "SnapshotRenderer",
    "SnapshotSurface",
    "SnapshotTabGroup",
    "SnapshotTable",
    "SnapshotTree",
    "SnapshotValue",
    "render_key",
]
