"""Path accumulator: ordered segment buffer with dedup and formatting rules."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import final

from settingpath.shared.separators import separator_characters

from .text import clean_text, is_grouping_label, trim_trailing_markup


@dataclass(slots=True, frozen=True)
class PathSegment:
    """A cleaned segment and whether it introduces an adjacent value."""

    text: str
    grouping: bool = False


@final
@dataclass(slots=True)
class PathAccumulator:
    """Collect segments root-to-leaf and render them with separators.

    A grouping segment (ending with ``:``) is followed by a single space rather
    than the separator so the next append reads as its value.
    """

    _parts: list[str] = field(default_factory=list)
    _segments: list[PathSegment] = field(default_factory=list)
    _separators: set[str] = field(default_factory=set)
    awaiting_value: bool = False

    @property
    def segments(self) -> tuple[PathSegment, ...]:
        return tuple(self._segments)

    @property
    def last_segment(self) -> PathSegment | None:
        return self._segments[-1] if self._segments else None

    def is_empty(self) -> bool:
        return not self._segments

    def append(self, item: str | None, separator: str) -> None:
        """Append ``item`` followed by ``separator``.

        Blank items and immediate repetitions of the last segment are ignored.

        Args:
            item: Raw segment text, possibly None or carrying markup.
            separator: Literal placed after the segment.
        """
        cleaned = clean_text(item)
        if not cleaned:
            return
        last = self.last_segment
        if last is not None and last.text == cleaned:
            return

        grouping = is_grouping_label(cleaned)
        self._segments.append(PathSegment(cleaned, grouping))
        self._separators.add(separator)
        self._parts.append(cleaned)
        self._parts.append(" " if grouping else separator)
        self.awaiting_value = grouping

    def append_value(self, value: str | None, separator: str) -> None:
        """Append ``value`` to the grouping label still waiting for it.

        Does nothing unless a grouping label is pending, so a value never
        lands behind a plain segment.
        """
        if not self.awaiting_value:
            return
        cleaned = clean_text(value)
        if not cleaned:
            return
        self._segments.append(PathSegment(cleaned))
        self._separators.add(separator)
        self._parts.append(cleaned)
        self._parts.append(separator)
        self.awaiting_value = False

    def extend(self, items: list[str], separator: str) -> None:
        for item in items:
            self.append(item, separator)

    def finish(self) -> str:
        """Return the assembled path with trailing separators and markup trimmed."""

        trailing = set(separator_characters())
        for separator in self._separators:
            trailing.update(separator)
        trailing.update(" \t\r\n")
        strip = "".join(trailing)
        # Segments were cleaned on append; only the tail may still need trimming
        assembled = "".join(self._parts).rstrip(strip)
        return trim_trailing_markup(assembled).rstrip(strip)


__all__ = ["PathAccumulator", "PathSegment"]
