"""Summary: Resolve the clicked or selected item inside trees, tables and lists.
Why: The leaf of many paths is an item of a list-like container, not a component."""

from __future__ import annotations

import re
from typing import Final, final

from settingpath.features.resolution.domain.components import (
    Capability,
    Component,
    ListSelection,
    SelectionShape,
    TableSelection,
    TreeSelection,
    has,
)
from settingpath.features.resolution.domain.strategies import attempt
from settingpath.features.resolution.domain.text import presentable
from settingpath.shared.geometry import Point

from .display_text import DisplayTextResolver
from .ports import ActionRegistry, InputEvent

# Plain identifiers such as "EditorCopy" or "Vcs.ShowHistory"
ACTION_ID_SHAPE: Final[re.Pattern[str]] = re.compile(r"^[A-Za-z][\w.$-]*$")


@final
class SelectionExtractor:
    """Extract path segments for the item under the pointer or the selection."""

    def __init__(
        self,
        text_resolver: DisplayTextResolver | None = None,
        action_registry: ActionRegistry | None = None,
    ) -> None:
        self._text = text_resolver or DisplayTextResolver()
        self._actions = action_registry

    def extract(self, target: Component, event: InputEvent | None) -> list[str]:
        """Return the segments contributed by ``target``'s selection.

        Args:
            target: Component the user interacted with.
            event: Triggering event; its point takes precedence over the selection.

        Returns:
            list[str]: One segment per tree node, or a single table/list segment.
            Empty when the target is not a selectable container.
        """
        if not has(target, Capability.SELECTABLE_LIST) or target.selection is None:
            return []

        selection = target.selection
        point = event.point if event is not None else None
        if selection.shape is SelectionShape.TREE and isinstance(selection, TreeSelection):
            return self._tree_segments(selection, point)
        if selection.shape is SelectionShape.TABLE and isinstance(selection, TableSelection):
            return self._table_segments(selection, point)
        if selection.shape is SelectionShape.LIST and isinstance(selection, ListSelection):
            return self._list_segments(selection, point)
        return []

    def _tree_segments(self, tree: TreeSelection, point: Point | None) -> list[str]:
        row: int | None = None
        if point is not None:
            row = _valid_index(attempt("tree-row-at", lambda: tree.row_at(point)))
        if row is None:
            row = _valid_index(attempt("tree-selected-row", tree.selected_row))
        if row is None:
            return []

        chain = list(attempt("tree-node-chain", lambda: tree.node_chain(row)) or ())
        # A lone hidden root is still the only node to report
        if len(chain) > 1 and not tree.root_visible:
            chain = chain[1:]

        segments: list[str] = []
        for node in chain:
            text = self._node_text(node, tree, row)
            if text:
                segments.append(text)
        return segments

    def _node_text(self, node: object, tree: TreeSelection, row: int) -> str | None:
        if isinstance(node, str) and ACTION_ID_SHAPE.match(node) and self._actions is not None:
            actions = self._actions
            label = presentable(attempt("action-lookup", lambda: actions.action_text(node)))
            return label or presentable(node)
        return self._text.resolve(node, tree.renderer, row)

    def _table_segments(self, table: TableSelection, point: Point | None) -> list[str]:
        row: int | None = None
        column: int | None = None
        if point is not None:
            row = _valid_index(attempt("table-row-at", lambda: table.row_at(point)))
            column = _valid_index(attempt("table-column-at", lambda: table.column_at(point)))
        if row is None:
            row = _valid_index(attempt("table-selected-row", table.selected_row))
        if column is None:
            column = _valid_index(attempt("table-selected-column", table.selected_column))
        if column is None:
            column = 0
        if row is None:
            return []

        value = attempt("table-cell", lambda: table.cell_value(row, column))
        renderer = attempt("table-renderer", lambda: table.renderer_for(column))
        text = self._text.resolve(value, renderer, row)
        return [text] if text else []

    def _list_segments(self, items: ListSelection, point: Point | None) -> list[str]:
        index: int | None = None
        if point is not None:
            index = _valid_index(attempt("list-index-at", lambda: items.index_at(point)))
            if index is not None:
                bounds = attempt("list-cell-bounds", lambda: items.cell_bounds(index))
                if bounds is None or not bounds.contains(point):
                    index = None
        if index is None:
            index = _valid_index(attempt("list-selected-index", items.selected_index))
        if index is None:
            return []

        item = attempt("list-item", lambda: items.item(index))
        text = self._text.resolve(item, items.renderer, index)
        return [text] if text else []


def _valid_index(index: int | None) -> int | None:
    """Map the negative "nothing here" indices some hosts report to None."""

    if index is None or index < 0:
        return None
    return index


__all__ = ["ACTION_ID_SHAPE", "SelectionExtractor"]
