"""Screen geometry value objects shared by adapters and heuristics."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class Point:
    """A point in screen coordinates."""

    x: int
    y: int


@dataclass(slots=True, frozen=True)
class Rect:
    """An axis-aligned rectangle in screen coordinates."""

    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def center_y(self) -> int:
        return self.y + self.height // 2

    def contains(self, point: Point) -> bool:
        """Return True when ``point`` lies inside the rectangle (right/bottom exclusive)."""

        return self.x <= point.x < self.right and self.y <= point.y < self.bottom
