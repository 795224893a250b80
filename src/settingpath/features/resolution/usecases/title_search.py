"""Title heuristics for dialogs and overlays that carry no explicit title."""

from __future__ import annotations

from collections.abc import Iterator
from typing import ClassVar, Final, final

from settingpath.features.resolution.domain.components import Capability, Component, has
from settingpath.features.resolution.domain.strategies import Strategy, first_success
from settingpath.features.resolution.domain.text import GROUPING_MARKER, presentable

MAX_TITLE_SEARCH_DEPTH: Final[int] = 10
MIN_TITLE_LENGTH: Final[int] = 3
MAX_TITLE_LENGTH: Final[int] = 50


@final
class TitleSearch:
    """Search visible content for a title-shaped label.

    Tried in order: a label inside a header sub-panel, a bold label, bold
    fragments of coloured text, then any short title-like label.
    """

    SHORTCUT_HINTS: ClassVar[tuple[str, ...]] = ("Ctrl+", "Cmd+", "Alt+")

    def find_title(self, root: Component) -> str | None:
        strategies: tuple[Strategy[Component, str], ...] = (
            Strategy("header-panel", self._header_panel_title),
            Strategy("bold-label", self._bold_label_title),
            Strategy("bold-fragments", self._bold_fragments_title),
            Strategy("title-like-label", self._title_like_label),
        )
        return first_success(strategies, root)

    def _header_panel_title(self, root: Component) -> str | None:
        for header in self._visible_tree(root):
            if not has(header, Capability.HEADER):
                continue
            for node in self._visible_tree(header):
                if not has(node, Capability.LABEL):
                    continue
                text = presentable(node.text)
                if text and not text.endswith(GROUPING_MARKER):
                    return text
        return None

    def _bold_label_title(self, root: Component) -> str | None:
        for node in self._visible_tree(root):
            if has(node, Capability.LABEL) and node.bold:
                text = presentable(node.text)
                if text:
                    return text
        return None

    def _bold_fragments_title(self, root: Component) -> str | None:
        for node in self._visible_tree(root):
            bold = [fragment.text.strip() for fragment in node.fragments if fragment.bold]
            text = presentable(" ".join(part for part in bold if part))
            if text:
                return text
        return None

    def _title_like_label(self, root: Component) -> str | None:
        for node in self._visible_tree(root):
            if not has(node, Capability.LABEL):
                continue
            text = presentable(node.text)
            if text and self.is_title_like(text):
                return text
        return None

    @classmethod
    def is_title_like(cls, text: str) -> bool:
        """Short text that is neither a field label nor a keyboard shortcut hint."""

        if not MIN_TITLE_LENGTH <= len(text) <= MAX_TITLE_LENGTH:
            return False
        if text.endswith(GROUPING_MARKER):
            return False
        return not any(hint in text for hint in cls.SHORTCUT_HINTS)

    def _visible_tree(self, root: Component, depth: int = 0) -> Iterator[Component]:
        """Yield visible descendants of ``root`` in pre-order, bounded in depth."""

        if depth >= MAX_TITLE_SEARCH_DEPTH:
            return
        for child in root.children:
            if not child.visible:
                continue
            yield child
            yield from self._visible_tree(child, depth + 1)


__all__ = ["MAX_TITLE_SEARCH_DEPTH", "TitleSearch"]
