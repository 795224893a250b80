"""Where: features/resolution/usecases/resolver.py
What: Orchestrate context classification and the segment extractors into one path.
Why: The clipboard glue needs a single entry point that never raises.
"""

from __future__ import annotations

from typing import final

from settingpath.features.resolution.domain.accumulator import PathAccumulator
from settingpath.features.resolution.domain.components import Capability, Component, has
from settingpath.platform.logging import logger

from .contexts import ContextBasePath, ContextClassifier, ResolutionContext
from .display_text import DisplayTextResolver
from .label_pairing import LabelValuePairing
from .menu_path import MenuPathWalker
from .ports import ActionRegistry, InputEvent
from .selection import SelectionExtractor
from .title_search import TitleSearch
from .waypoints import WaypointCollector


@final
class PathResolver:
    """Resolve the breadcrumb path of a UI component.

    Menu items take the menu walk. Everything else gets its context base path,
    then waypoints, then the selection, then the label/value pair.
    """

    def __init__(
        self,
        include_adjacent_value: bool = True,
        action_registry: ActionRegistry | None = None,
    ) -> None:
        text_resolver = DisplayTextResolver()
        self._menus = MenuPathWalker(text_resolver)
        self._classifier = ContextClassifier()
        self._base_path = ContextBasePath(TitleSearch())
        self._waypoints = WaypointCollector(text_resolver)
        self._selection = SelectionExtractor(text_resolver, action_registry)
        self._pairing = LabelValuePairing(text_resolver, include_adjacent_value)

    def resolve_path(
        self,
        target: Component,
        event: InputEvent | None,
        separator: str,
    ) -> str | None:
        """Return the path of ``target`` joined with ``separator``.

        Args:
            target: Component the user interacted with.
            event: Triggering input event, used for the pointer location.
            separator: Literal placed between segments.

        Returns:
            str | None: The path, or None when nothing could be resolved.
        """
        try:
            if MenuPathWalker.is_menu_item(target):
                menu_path = self._menus.walk(target, separator)
                if menu_path:
                    return menu_path

            context = self._classifier.classify(target, event)
            if context is None:
                logger.debug("No dialog, overlay or panel context for %r", target)
                return None
            logger.debug(
                "Context %s bounded by %r",
                context.kind.value,
                context.boundary,
                extra={"resolution_event": "resolution.context", "context": context.kind.value},
            )
            return self._assemble(context, separator)
        except Exception as exc:
            logger.error(
                "Path resolution failed: %s",
                exc,
                extra={"resolution_event": "resolution.error", "error_message": str(exc)},
            )
            return None

    def _assemble(self, context: ResolutionContext, separator: str) -> str | None:
        target = context.target
        accumulator = PathAccumulator()
        accumulator.extend(self._base_path.segments(context), separator)
        accumulator.extend(self._waypoints.collect(target, context.boundary), separator)

        # The settings navigation tree already produced the base path.
        if not (context.structured_settings and has(target, Capability.SETTINGS_NAVIGATION)):
            accumulator.extend(self._selection.extract(target, context.event), separator)

        pair = self._pairing.pair(target)
        if pair is not None:
            accumulator.append(pair.label, separator)
            accumulator.append_value(pair.value, separator)

        if accumulator.is_empty():
            return None
        return accumulator.finish() or None


__all__ = ["PathResolver"]
