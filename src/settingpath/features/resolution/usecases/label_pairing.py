"""Where: features/resolution/usecases/label_pairing.py
What: Pair a clicked label with the value of the widget next to it.
Why: A label ending with ":" reads best together with its current value ("Indent: 4").
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Final, final

from settingpath.features.resolution.domain.components import (
    Capability,
    Component,
    ValueKind,
    has,
    is_same_row,
)
from settingpath.features.resolution.domain.strategies import attempt
from settingpath.features.resolution.domain.text import is_grouping_label, presentable
from settingpath.shared.geometry import Rect

from .display_text import DisplayTextResolver

MAX_SEARCH_DEPTH: Final[int] = 5
GOOD_CANDIDATE_DISTANCE: Final[int] = 50
HORIZONTAL_OVERLAP_TOLERANCE: Final[int] = 5
MAX_VALUE_COMPONENT_HEIGHT: Final[int] = 80
MAX_VALUE_COMPONENT_WIDTH: Final[int] = 400


@dataclass(slots=True, frozen=True)
class LabelValue:
    """A resolved label and, for grouping labels, the adjacent value."""

    label: str
    value: str | None = None


@dataclass(slots=True, frozen=True)
class _LabelSource:
    text: str
    component: Component
    via_link: bool


@final
class LabelValuePairing:
    """Resolve a target's label and the value of its adjacent widget."""

    _LABELLED_CAPABILITIES: ClassVar[tuple[Capability, ...]] = (
        Capability.LABEL,
        Capability.BUTTON,
        Capability.TOGGLE,
    )
    _WIDE_VALUE_KINDS: ClassVar[frozenset[ValueKind]] = frozenset(
        {ValueKind.SELECTION, ValueKind.TEXT_ENTRY}
    )

    def __init__(
        self,
        text_resolver: DisplayTextResolver | None = None,
        include_adjacent_value: bool = True,
    ) -> None:
        self._text = text_resolver or DisplayTextResolver()
        self._include_adjacent_value = include_adjacent_value

    def pair(self, target: Component) -> LabelValue | None:
        """Return the label of ``target`` and its adjacent value, if any.

        Args:
            target: Component the user interacted with.

        Returns:
            LabelValue | None: None when no label could be resolved.
        """
        source = self._label_source(target)
        if source is None:
            return None
        value: str | None = None
        if self._include_adjacent_value and is_grouping_label(source.text):
            widget = self._adjacent_value_widget(target, source)
            if widget is not None:
                value = self.extract_value(widget)
        return LabelValue(source.text, value)

    # Label --------------------------------------------------------------------

    def _label_source(self, target: Component) -> _LabelSource | None:
        linked = target.labeled_by
        if linked is not None:
            text = self._text.component_text(linked)
            if text:
                return _LabelSource(text, linked, via_link=True)

        if any(has(target, capability) for capability in self._LABELLED_CAPABILITIES):
            text = self._own_text(target)
            if text:
                if has(target, Capability.TOGGLE):
                    recovered = self._sibling_toggle_label(target)
                    if recovered is not None:
                        return recovered
                return _LabelSource(text, target, via_link=False)

        if has(target, Capability.TOGGLE):
            return self._sibling_toggle_label(target)
        return None

    def _own_text(self, target: Component) -> str | None:
        own = presentable(target.text) or presentable(
            "".join(fragment.text for fragment in target.fragments)
        )
        if own:
            return own
        if target.value is not None:
            return presentable(target.value.text)
        return None

    def _sibling_toggle_label(self, target: Component) -> _LabelSource | None:
        """Recover a group label carried by another toggle of the same button group."""

        parent = target.parent
        if parent is None or target.bounds is None:
            return None
        for sibling in parent.children:
            if sibling is target or not has(sibling, Capability.TOGGLE):
                continue
            label = sibling.labeled_by
            if label is None or label.bounds is None:
                continue
            text = self._text.component_text(label)
            if text and is_grouping_label(text) and is_same_row(label.bounds, target.bounds):
                return _LabelSource(text, label, via_link=True)
        return None

    # Value --------------------------------------------------------------------

    def _adjacent_value_widget(self, target: Component, source: _LabelSource) -> Component | None:
        linked = self._linked_value_widget(target, source)
        if linked is not None:
            return linked

        anchor = source.component
        anchor_bounds = anchor.bounds
        if anchor_bounds is None:
            return None
        sibling = self._next_sibling_value_widget(anchor, anchor_bounds)
        if sibling is not None:
            return sibling
        return self._nearby_value_widget(anchor, anchor_bounds)

    def _linked_value_widget(self, target: Component, source: _LabelSource) -> Component | None:
        candidates: list[Component] = []
        if source.via_link:
            candidates.append(target)
        if source.component.label_for is not None:
            candidates.append(source.component.label_for)
        for candidate in candidates:
            found = self.find_value_widget(candidate)
            if found is not None:
                return found
        return None

    def _next_sibling_value_widget(self, anchor: Component, anchor_bounds: Rect) -> Component | None:
        parent = anchor.parent
        if parent is None:
            return None
        siblings = list(parent.children)
        index = next((i for i, child in enumerate(siblings) if child is anchor), -1)
        if index < 0:
            return None
        for sibling in siblings[index + 1 :]:
            if not sibling.visible:
                continue
            found = self.find_value_widget(sibling)
            if found is not None and found.bounds is not None and is_same_row(anchor_bounds, found.bounds):
                return found
        return None

    def _nearby_value_widget(self, anchor: Component, anchor_bounds: Rect) -> Component | None:
        """Climb up to MAX_SEARCH_DEPTH containers for the closest row-aligned widget on the right."""

        best: Component | None = None
        best_distance: int | None = None
        container = anchor.parent
        depth = 0
        while container is not None and depth < MAX_SEARCH_DEPTH:
            found = self._best_in_container(anchor, anchor_bounds, container, best_distance)
            if found is not None:
                best, best_distance = found
            if best is not None and best_distance is not None and best_distance < GOOD_CANDIDATE_DISTANCE:
                break
            container = container.parent
            depth += 1
        return best

    def _best_in_container(
        self,
        anchor: Component,
        anchor_bounds: Rect,
        container: Component,
        best_distance: int | None,
    ) -> tuple[Component, int] | None:
        best: tuple[Component, int] | None = None
        for child in container.children:
            if child is anchor or not child.visible:
                continue
            widget = self.find_value_widget(child)
            if widget is not None:
                bounds = widget.bounds
                if (
                    bounds is not None
                    and bounds.x >= anchor_bounds.right - HORIZONTAL_OVERLAP_TOLERANCE
                    and is_same_row(anchor_bounds, bounds)
                ):
                    distance = bounds.x - anchor_bounds.right
                    if best_distance is None or distance < best_distance:
                        best = (widget, distance)
                        best_distance = distance
                continue
            if child is not anchor.parent:
                nested = self._best_in_container(anchor, anchor_bounds, child, best_distance)
                if nested is not None:
                    best = nested
                    best_distance = nested[1]
        return best

    def is_value_bearing(self, component: Component) -> bool:
        """Return True for widgets whose state is user data.

        Description text areas never qualify; oversized widgets only qualify
        when they are selection or text-entry widgets.
        """
        widget = component.value
        if not has(component, Capability.VALUE_WIDGET) or widget is None:
            return False
        if widget.kind is ValueKind.DESCRIPTION:
            return False
        bounds = component.bounds
        oversized = bounds is not None and (
            bounds.height > MAX_VALUE_COMPONENT_HEIGHT or bounds.width > MAX_VALUE_COMPONENT_WIDTH
        )
        return not oversized or widget.kind in self._WIDE_VALUE_KINDS

    def find_value_widget(self, component: Component) -> Component | None:
        """Return ``component`` or its first visible value-bearing descendant."""

        if self.is_value_bearing(component):
            return component
        for child in component.children:
            if not child.visible:
                continue
            found = self.find_value_widget(child)
            if found is not None:
                return found
        return None

    def extract_value(self, component: Component) -> str | None:
        """Return the presentable value of a value-bearing widget."""

        widget = component.value
        if widget is None:
            return None
        match widget.kind:
            case ValueKind.SELECTION:
                current = attempt("selected-item", widget.current_value)
                return self._text.resolve(current, widget.renderer, -1)
            case ValueKind.TOGGLE:
                text = presentable(widget.text) or presentable(component.text)
                if not text:
                    return "Enabled" if widget.selected else "Disabled"
                if widget.exclusive:
                    return text if widget.selected else None
                return text
            case ValueKind.TEXT_ENTRY:
                current = attempt("entry-text", widget.current_value)
                if current is None:
                    return widget.text or ""
                return str(current)
            case ValueKind.NUMERIC:
                current = attempt("numeric-value", widget.current_value)
                return None if current is None else str(current)
            case ValueKind.BUTTON:
                return presentable(widget.text) or presentable(component.text)
            case _:
                return None


__all__ = [
    "GOOD_CANDIDATE_DISTANCE",
    "HORIZONTAL_OVERLAP_TOLERANCE",
    "LabelValue",
    "LabelValuePairing",
    "MAX_SEARCH_DEPTH",
    "MAX_VALUE_COMPONENT_HEIGHT",
    "MAX_VALUE_COMPONENT_WIDTH",
]
