"""Summary: Walk main-menu items up their invoker chain to the menu bar.
Why: Menu hierarchy is purely structural, so it bypasses context and spatial heuristics."""

from __future__ import annotations

from typing import Final, final

from settingpath.features.resolution.domain.accumulator import PathAccumulator
from settingpath.features.resolution.domain.components import (
    Capability,
    Component,
    ancestors,
    has,
)

from .display_text import DisplayTextResolver

# Menu chains are shallow; the cap only guards against malformed invoker cycles.
MAX_MENU_DEPTH: Final[int] = 64


@final
class MenuPathWalker:
    """Resolve ``File | Manage IDE Settings | Export Settings`` style paths."""

    def __init__(self, text_resolver: DisplayTextResolver | None = None) -> None:
        self._text = text_resolver or DisplayTextResolver()

    @staticmethod
    def is_menu_item(target: Component) -> bool:
        """Return True for menu entries hosted by a menu popup or the menu bar."""

        if not (has(target, Capability.MENU_ITEM) or has(target, Capability.MENU)):
            return False
        return any(
            has(node, Capability.MENU_POPUP) or has(node, Capability.MENU_BAR)
            for node in ancestors(target)
        )

    def walk(self, target: Component, separator: str) -> str | None:
        """Return the root-to-leaf menu path of ``target`` or None.

        Args:
            target: Clicked menu item.
            separator: Literal placed between menu names.
        """
        texts: list[str] = []
        own = self._text.component_text(target)
        if own:
            texts.append(own)

        current = target
        for _ in range(MAX_MENU_DEPTH):
            parent = current.parent
            if parent is None or has(parent, Capability.MENU_BAR):
                break
            if has(parent, Capability.MENU_POPUP):
                invoker = parent.invoker
                if invoker is None:
                    break
                text = self._text.component_text(invoker)
                if text:
                    texts.append(text)
                current = invoker
                continue
            if has(parent, Capability.MENU):
                text = self._text.component_text(parent)
                if text:
                    texts.append(text)
            current = parent

        accumulator = PathAccumulator()
        for text in reversed(texts):
            accumulator.append(text, separator)
        return accumulator.finish() or None


__all__ = ["MenuPathWalker"]
