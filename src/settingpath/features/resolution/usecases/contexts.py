"""Where: features/resolution/usecases/contexts.py
What: Classify the surface a target lives in and build the context base path.
Why: Dialogs, overlays and docked panels each name themselves differently.
Assumptions: - Dialog surfaces take priority over overlays and panels in the same chain.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, final

from settingpath.features.resolution.domain.components import (
    Capability,
    CategoryNavigator,
    Component,
    OverlayKind,
    Surface,
    SurfaceKind,
    has,
    self_and_ancestors,
)
from settingpath.features.resolution.domain.strategies import attempt
from settingpath.features.resolution.domain.text import presentable

from .ports import InputEvent
from .title_search import TitleSearch

DEFAULT_SETTINGS_TITLE = "Settings"
DEFAULT_OVERLAY_TITLE = "Popup"

# Side panels use a bare "--" heading for an untitled section
IGNORED_SECTION_TITLE = "--"


class ContextKind(str, Enum):
    """Terminal outcomes of context classification, in priority order."""

    SETTINGS = "settings"
    DIALOG = "dialog"
    OVERLAY = "overlay"
    PANEL = "panel"


@dataclass(slots=True, frozen=True)
class ResolutionContext:
    """Per-call view of where a target lives; discarded after the call."""

    target: Component
    event: InputEvent | None
    kind: ContextKind
    surface_component: Component
    surface: Surface
    boundary: Component
    path_names: tuple[str, ...] = ()

    @property
    def structured_settings(self) -> bool:
        return self.kind is ContextKind.SETTINGS


@final
class ContextClassifier:
    """Pick the dialog, overlay or panel context of a target."""

    _PRIORITY: ClassVar[tuple[tuple[SurfaceKind, ContextKind], ...]] = (
        (SurfaceKind.DIALOG, ContextKind.DIALOG),
        (SurfaceKind.POPUP, ContextKind.OVERLAY),
        (SurfaceKind.PANEL, ContextKind.PANEL),
    )

    def classify(self, target: Component, event: InputEvent | None) -> ResolutionContext | None:
        """Return the resolution context of ``target`` or None when it has none.

        Args:
            target: Component the user interacted with.
            event: Triggering input event, kept for downstream extractors.

        Returns:
            ResolutionContext | None: The first surface kind present in the
            parent chain, in dialog, overlay, panel priority.
        """
        surfaces = [
            node
            for node in self_and_ancestors(target)
            if has(node, Capability.SURFACE) and node.surface is not None
        ]
        for surface_kind, context_kind in self._PRIORITY:
            for node in surfaces:
                surface = node.surface
                if surface is None or surface.kind is not surface_kind:
                    continue
                boundary = self._boundary(target, node)
                if context_kind is ContextKind.DIALOG:
                    names = self._settings_path_names(target, node, surface)
                    if names:
                        return ResolutionContext(
                            target, event, ContextKind.SETTINGS, node, surface, boundary, names
                        )
                return ResolutionContext(target, event, context_kind, node, surface, boundary)
        return None

    @staticmethod
    def _boundary(target: Component, surface_component: Component) -> Component:
        """Nearest page boundary between target and surface, else the surface itself."""

        for node in self_and_ancestors(target):
            if node is surface_component:
                break
            if has(node, Capability.PAGE_BOUNDARY):
                return node
        return surface_component

    @staticmethod
    def _settings_path_names(
        target: Component,
        dialog: Component,
        surface: Surface,
    ) -> tuple[str, ...]:
        """Ready-made names from a path-name provider, else the dialog's legacy breadcrumbs."""

        for node in self_and_ancestors(target):
            if has(node, Capability.PATH_NAME_PROVIDER):
                names = _clean_names(attempt("path-names", node.path_names))
                if names:
                    return names
            if node is dialog:
                break
        return _clean_names(attempt("legacy-path-names", surface.legacy_path_names))


def _clean_names(names: Sequence[str] | None) -> tuple[str, ...]:
    if not names:
        return ()
    return tuple(text for text in (presentable(name) for name in names) if text)


def category_segments(navigator: CategoryNavigator) -> list[str]:
    """Return the section heading and name of the category a side-panel dialog shows.

    The heading is the last one declared at or before the category's position.
    Untitled sections contribute nothing.
    """
    category = presentable(attempt("selected-category", navigator.selected_category))
    if category is None:
        return []
    names = [presentable(name) for name in attempt("categories", navigator.categories) or ()]
    if category not in names:
        return [category]

    position = names.index(category)
    headings = attempt("section-titles", navigator.section_titles) or {}
    section: str | None = None
    for index in sorted(headings):
        if index > position:
            break
        section = headings[index]
    section = presentable(section)
    if section is None or section == IGNORED_SECTION_TITLE:
        return [category]
    return [section, category]


@final
class ContextBasePath:
    """Build the base segments of each context kind."""

    OVERLAY_DEFAULT_TITLES: ClassVar[dict[OverlayKind, str]] = {
        OverlayKind.SEARCH: "Search Everywhere",
        OverlayKind.SWITCHER: "Recent Files",
        OverlayKind.FIND: "Find in Path",
    }

    def __init__(self, title_search: TitleSearch | None = None) -> None:
        self._titles = title_search or TitleSearch()

    def segments(self, context: ResolutionContext) -> list[str]:
        match context.kind:
            case ContextKind.SETTINGS:
                return self._settings(context)
            case ContextKind.DIALOG:
                return self._dialog(context)
            case ContextKind.OVERLAY:
                return self._overlay(context)
            case ContextKind.PANEL:
                return self._panel(context)

    @staticmethod
    def _settings(context: ResolutionContext) -> list[str]:
        prefix = presentable(context.surface.title) or DEFAULT_SETTINGS_TITLE
        return [prefix, *context.path_names]

    def _dialog(self, context: ResolutionContext) -> list[str]:
        title = presentable(context.surface.title) or self._titles.find_title(context.surface_component)
        segments = [title] if title else []
        navigator = context.surface.categories
        if navigator is not None:
            segments.extend(category_segments(navigator))
        return segments

    def _overlay(self, context: ResolutionContext) -> list[str]:
        surface = context.surface
        title = presentable(surface.title)
        if surface.overlay is None:
            title = title or self._titles.find_title(context.surface_component)
            return [title or DEFAULT_OVERLAY_TITLE]

        segments = [title or self.OVERLAY_DEFAULT_TITLES[surface.overlay]]
        if surface.overlay is OverlayKind.SEARCH:
            tab = presentable(surface.selected_tab_title)
            if tab:
                segments.append(tab)
        return segments

    @staticmethod
    def _panel(context: ResolutionContext) -> list[str]:
        segments: list[str] = []
        name = presentable(context.surface.title)
        if name:
            segments.append(name)
        content = presentable(context.surface.selected_content_title)
        if content and content != name:
            segments.append(content)
        return segments


__all__ = [
    "ContextBasePath",
    "ContextClassifier",
    "ContextKind",
    "DEFAULT_OVERLAY_TITLE",
    "DEFAULT_SETTINGS_TITLE",
    "IGNORED_SECTION_TITLE",
    "ResolutionContext",
    "category_segments",
]
