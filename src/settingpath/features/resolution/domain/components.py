"""
Summary: Capability model describing the host UI tree the resolver walks.
Why: Let heuristics depend on capabilities and facets, never on concrete toolkit classes.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Final, Protocol, runtime_checkable

from settingpath.shared.geometry import Point, Rect


class Capability(str, Enum):
    """Capabilities a component may advertise."""

    CONTAINER = "container"
    LABEL = "label"
    VALUE_WIDGET = "value_widget"
    SELECTABLE_LIST = "selectable_list"
    BORDER_TITLE = "border_title"
    TAB = "tab"
    LABEL_TARGET_LINK = "label_target_link"
    BUTTON = "button"
    TOGGLE = "toggle"
    HEADER = "header"
    GROUP_SEPARATOR = "group_separator"
    PAGE_BOUNDARY = "page_boundary"
    PATH_NAME_PROVIDER = "path_name_provider"
    SETTINGS_NAVIGATION = "settings_navigation"
    SURFACE = "surface"
    MENU_BAR = "menu_bar"
    MENU_POPUP = "menu_popup"
    MENU = "menu"
    MENU_ITEM = "menu_item"
    TOOLBAR = "toolbar"


class ValueKind(str, Enum):
    """Kinds of value widgets, used to pick the value extraction rule."""

    SELECTION = "selection"
    TOGGLE = "toggle"
    TEXT_ENTRY = "text_entry"
    NUMERIC = "numeric"
    BUTTON = "button"
    DESCRIPTION = "description"


class SelectionShape(str, Enum):
    """List-like container shapes the selection extractor understands."""

    TREE = "tree"
    TABLE = "table"
    LIST = "list"


class SurfaceKind(str, Enum):
    """Top-level surfaces that establish a resolution context."""

    DIALOG = "dialog"
    POPUP = "popup"
    PANEL = "panel"


class OverlayKind(str, Enum):
    """Known floating overlay shapes with dedicated title rules."""

    SEARCH = "search"
    SWITCHER = "switcher"
    FIND = "find"


@dataclass(slots=True, frozen=True)
class TextFragment:
    """One run of a multi-fragment coloured text component."""

    text: str
    bold: bool = False


@runtime_checkable
class Renderer(Protocol):
    """Cell renderer that turns a model value into a presentable component."""

    def render(self, value: object, index: int) -> Component | None:
        """Return the component the host would paint for ``value``."""
        ...


@runtime_checkable
class TabGroup(Protocol):
    """Facet of tab containers."""

    def selected_tab_title(self) -> str | None:
        """Return the title of the currently selected tab."""
        ...


@runtime_checkable
class ValueWidget(Protocol):
    """Facet of widgets whose state carries user data."""

    kind: ValueKind
    text: str | None
    selected: bool
    exclusive: bool
    renderer: Renderer | None

    def current_value(self) -> object:
        """Return the raw current value (selected item, number, text)."""
        ...


@runtime_checkable
class TreeSelection(Protocol):
    """Facet of tree-shaped selectable containers."""

    shape: SelectionShape
    root_visible: bool
    renderer: Renderer | None

    def row_at(self, point: Point) -> int | None:
        """Return the row under ``point`` or None."""
        ...

    def selected_row(self) -> int | None:
        """Return the lead selected row or None."""
        ...

    def node_chain(self, row: int) -> Sequence[object]:
        """Return the node values from the root down to ``row``."""
        ...


@runtime_checkable
class TableSelection(Protocol):
    """Facet of table-shaped selectable containers."""

    shape: SelectionShape

    def row_at(self, point: Point) -> int | None:
        """Return the row under ``point`` or None."""
        ...

    def column_at(self, point: Point) -> int | None:
        """Return the column under ``point`` or None."""
        ...

    def selected_row(self) -> int | None:
        """Return the selected row or None."""
        ...

    def selected_column(self) -> int | None:
        """Return the selected column or None."""
        ...

    def cell_value(self, row: int, column: int) -> object:
        """Return the raw model value of a cell."""
        ...

    def renderer_for(self, column: int) -> Renderer | None:
        """Return the renderer configured for ``column``."""
        ...


@runtime_checkable
class ListSelection(Protocol):
    """Facet of flat list containers."""

    shape: SelectionShape
    renderer: Renderer | None

    def index_at(self, point: Point) -> int | None:
        """Return the index of the item closest to ``point`` or None."""
        ...

    def cell_bounds(self, index: int) -> Rect | None:
        """Return the on-screen bounds of an item."""
        ...

    def selected_index(self) -> int | None:
        """Return the selected index or None."""
        ...

    def item(self, index: int) -> object:
        """Return the raw item at ``index``."""
        ...


@runtime_checkable
class CategoryNavigator(Protocol):
    """Facet of dialogs navigated through a side panel of categories.

    Section headings split the categories into groups; a heading applies to
    the category at its index and every category after it.
    """

    def categories(self) -> Sequence[str]:
        """Return the category names in side-panel order."""
        ...

    def section_titles(self) -> Mapping[int, str]:
        """Return section headings keyed by the index of their first category."""
        ...

    def selected_category(self) -> str | None:
        """Return the name of the category currently shown."""
        ...


@runtime_checkable
class Surface(Protocol):
    """Facet of dialogs, popups and docked panels."""

    kind: SurfaceKind
    title: str | None
    overlay: OverlayKind | None
    selected_tab_title: str | None
    selected_content_title: str | None
    categories: CategoryNavigator | None

    def legacy_path_names(self) -> Sequence[str]:
        """Return breadcrumbs recorded by older settings dialogs."""
        ...


@runtime_checkable
class Component(Protocol):
    """Read-only node of the host UI tree."""

    parent: Component | None
    children: Sequence[Component]
    bounds: Rect | None
    visible: bool
    capabilities: frozenset[Capability]
    text: str | None
    bold: bool
    fragments: Sequence[TextFragment]
    labeled_by: Component | None
    label_for: Component | None
    border_title: str | None
    tab_group: TabGroup | None
    value: ValueWidget | None
    selection: TreeSelection | TableSelection | ListSelection | None
    surface: Surface | None
    invoker: Component | None

    def path_names(self) -> Sequence[str] | None:
        """Return a ready-made ordered segment list, when the component provides one."""
        ...


# Row alignment -----------------------------------------------------------------

ROW_ALIGNMENT_TOLERANCE: Final[int] = 5


def has(component: Component | None, capability: Capability) -> bool:
    """Return True when ``component`` advertises ``capability``."""

    return component is not None and capability in component.capabilities


def ancestors(component: Component) -> Iterator[Component]:
    """Yield the parents of ``component`` from nearest to root."""

    current = component.parent
    while current is not None:
        yield current
        current = current.parent


def self_and_ancestors(component: Component) -> Iterator[Component]:
    yield component
    yield from ancestors(component)


def descendants(component: Component) -> Iterator[Component]:
    """Yield every descendant in depth-first pre-order."""

    for child in component.children:
        yield child
        yield from descendants(child)


def is_showing(component: Component) -> bool:
    """A component is showing only when it and every ancestor are visible."""

    return all(node.visible for node in self_and_ancestors(component))


def is_same_row(first: Rect, second: Rect) -> bool:
    """Return True when two boxes share a visual row.

    The centres must lie within half the smaller height plus a small tolerance.
    """

    limit = min(first.height, second.height) // 2 + ROW_ALIGNMENT_TOLERANCE
    return abs(first.center_y - second.center_y) <= limit


__all__ = [
    "Capability",
    "CategoryNavigator",
    "Component",
    "ListSelection",
    "OverlayKind",
    "ROW_ALIGNMENT_TOLERANCE",
    "Renderer",
    "SelectionShape",
    "Surface",
    "SurfaceKind",
    "TabGroup",
    "TableSelection",
    "TextFragment",
    "TreeSelection",
    "ValueKind",
    "ValueWidget",
    "ancestors",
    "descendants",
    "has",
    "is_same_row",
    "is_showing",
    "self_and_ancestors",
]
