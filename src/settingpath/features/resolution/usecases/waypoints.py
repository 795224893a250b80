"""Ancestor waypoint collection: tab titles, toolbar toggles, titled borders and the group separator above a target."""

from __future__ import annotations

from collections import deque
from typing import final

from settingpath.features.resolution.domain.components import (
    Capability,
    Component,
    descendants,
    has,
    is_showing,
    self_and_ancestors,
)
from settingpath.features.resolution.domain.strategies import attempt
from settingpath.features.resolution.domain.text import presentable

from .display_text import DisplayTextResolver


@final
class WaypointCollector:
    """Collect structural waypoints between a target and its boundary."""

    def __init__(self, text_resolver: DisplayTextResolver | None = None) -> None:
        self._text = text_resolver or DisplayTextResolver()

    def collect(self, target: Component, boundary: Component | None) -> list[str]:
        """Return waypoints ordered from the boundary down to ``target``.

        The titled group separator visually above the target, if any, comes last.

        Args:
            target: Component the user interacted with.
            boundary: Exclusive upper limit of the walk; None walks to the root.

        Returns:
            list[str]: Waypoint texts, possibly empty.
        """
        waypoints: deque[str] = deque()
        for node in self_and_ancestors(target):
            if node is boundary:
                break
            tab_title = self._selected_tab_title(node) or self._selected_toolbar_toggle(node)
            if tab_title:
                waypoints.appendleft(tab_title)
            border_title = self._border_title(node)
            if border_title:
                waypoints.appendleft(border_title)

        separator = self.preceding_group_separator(target, boundary)
        if separator is not None:
            text = self._text.component_text(separator)
            if text:
                waypoints.append(text)
        return list(waypoints)

    def preceding_group_separator(
        self,
        target: Component,
        boundary: Component | None,
    ) -> Component | None:
        """Find the showing group separator closest above ``target`` inside ``boundary``.

        Among separators whose top edge is at or above the target's top edge the
        one with the largest ``y`` wins; on ties the first in traversal order is kept.
        Separators under a hidden ancestor, such as an inactive card page, never qualify.
        """
        if target.bounds is None:
            return None
        if any(has(node, Capability.GROUP_SEPARATOR) for node in self_and_ancestors(target)):
            return None

        container = boundary if boundary is not None else self._root_of(target)
        target_y = target.bounds.y
        best: Component | None = None
        best_y = 0
        for candidate in descendants(container):
            if not has(candidate, Capability.GROUP_SEPARATOR):
                continue
            bounds = candidate.bounds
            if bounds is None or bounds.y > target_y:
                continue
            if not is_showing(candidate):
                continue
            if best is None or bounds.y > best_y:
                best = candidate
                best_y = bounds.y
        return best

    @staticmethod
    def _selected_tab_title(node: Component) -> str | None:
        if not has(node, Capability.TAB) or node.tab_group is None:
            return None
        tab_group = node.tab_group
        return presentable(attempt("selected-tab", tab_group.selected_tab_title))

    @staticmethod
    def _selected_toolbar_toggle(node: Component) -> str | None:
        """Text of the first selected toggle of an action toolbar, e.g. a search scope."""

        if not has(node, Capability.TOOLBAR):
            return None
        for child in node.children:
            widget = child.value
            if not has(child, Capability.TOGGLE) or widget is None or not widget.selected:
                continue
            text = presentable(child.text) or presentable(widget.text)
            if text:
                return text
        return None

    @staticmethod
    def _border_title(node: Component) -> str | None:
        if not has(node, Capability.BORDER_TITLE):
            return None
        return presentable(node.border_title)

    @staticmethod
    def _root_of(component: Component) -> Component:
        root = component
        while root.parent is not None:
            root = root.parent
        return root


__all__ = ["WaypointCollector"]
