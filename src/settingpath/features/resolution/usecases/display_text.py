"""Where: features/resolution/usecases/display_text.py
What: Turn components, model values and rendered cells into presentable text.
Why: Many host values stringify to opaque references; rendered output and accessors carry the real label.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import ClassVar, final

from settingpath.features.resolution.domain.components import (
    Component,
    Renderer,
    descendants,
)
from settingpath.features.resolution.domain.strategies import (
    Strategy,
    attempt,
    first_success,
)
from settingpath.features.resolution.domain.text import presentable


@final
class DisplayTextResolver:
    """Resolve opaque values to display text using ordered strategies.

    Order: rendered output, direct text, well-known accessors. Every
    candidate is cleaned and rejected when blank or reference-shaped.
    """

    ACCESSORS: ClassVar[tuple[str, ...]] = (
        "display_name",
        "name",
        "text",
        "presentable_text",
        "title",
    )

    def resolve(
        self,
        thing: object,
        renderer: Renderer | None = None,
        index: int = 0,
    ) -> str | None:
        """Return presentable text for ``thing`` or None.

        Args:
            thing: Component, model value or plain string.
            renderer: Renderer configured on the owning widget, if any.
            index: Row or item index handed to the renderer.

        Returns:
            str | None: Cleaned text, or None when no strategy produced any.
        """
        if thing is None:
            return None

        strategies: tuple[Strategy[object, str], ...] = (
            Strategy("renderer", lambda value: self._rendered_text(value, renderer, index)),
            Strategy("direct-text", self._direct_text),
            Strategy("accessors", self._accessor_text),
        )
        return first_success(strategies, thing)

    def component_text(self, component: Component) -> str | None:
        """Return the label text of a component.

        Own text first, then its fragments joined in order, then the first
        text found among nested children.
        """
        own = presentable(component.text)
        if own:
            return own
        joined = presentable("".join(fragment.text for fragment in component.fragments))
        if joined:
            return joined
        for child in descendants(component):
            nested = presentable(child.text) or presentable(
                "".join(fragment.text for fragment in child.fragments)
            )
            if nested:
                return nested
        return None

    def _rendered_text(self, value: object, renderer: Renderer | None, index: int) -> str | None:
        if renderer is None:
            return None
        rendered = renderer.render(value, index)
        if rendered is None:
            return None
        return self.component_text(rendered)

    def _direct_text(self, value: object) -> str | None:
        if isinstance(value, str):
            return presentable(value)
        if isinstance(value, Component):
            return self.component_text(value)
        # int and float inherit object.__str__ but still print meaningfully
        if isinstance(value, int | float):
            return presentable(str(value))
        if type(value).__str__ is object.__str__:
            return None
        return presentable(str(value))

    def _accessor_text(self, value: object) -> str | None:
        if isinstance(value, str):
            return None
        for name in self.ACCESSORS:
            raw = attempt(name, lambda name=name: self._read_accessor(value, name))
            if isinstance(raw, str):
                text = presentable(raw)
                if text:
                    return text
        return None

    @staticmethod
    def _read_accessor(value: object, name: str) -> object:
        if isinstance(value, Mapping):
            raw = value.get(name)
        else:
            raw = getattr(value, name, None)
        if callable(raw):
            raw = raw()
        return raw


__all__ = ["DisplayTextResolver"]
