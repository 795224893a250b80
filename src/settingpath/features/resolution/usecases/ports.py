"""Summary: Ports the resolution use cases depend on.
Why: Keep host input events and action lookups behind small protocols."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from settingpath.shared.geometry import Point


@dataclass(slots=True, frozen=True)
class InputEvent:
    """Triggering input event; only the pointer location is consulted."""

    point: Point | None = None


@runtime_checkable
class ActionRegistry(Protocol):
    """Port for resolving action identifiers to human labels."""

    def action_text(self, action_id: str) -> str | None:
        """Return the presentable label registered for ``action_id``."""
        ...


@dataclass(slots=True, frozen=True)
class MappingActionRegistry:
    """Action registry backed by a plain id-to-label mapping."""

    labels: Mapping[str, str]

    def action_text(self, action_id: str) -> str | None:
        return self.labels.get(action_id)


__all__ = ["ActionRegistry", "InputEvent", "MappingActionRegistry"]
