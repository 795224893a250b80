"""
Summary: Enumerate the separator styles placed between path segments.
Why: Keep separator literals and their trimming alphabet in one place.
"""

from __future__ import annotations

from enum import Enum
from functools import cache
from typing import Final


class PathSeparator(str, Enum):
    """Separator styles offered to users, keyed by their configuration name."""

    PIPE = "pipe"
    ARROW = "arrow"
    UNICODE_ARROW = "unicode_arrow"
    GUILLEMET = "guillemet"
    TRIANGLE = "triangle"

    @property
    def literal(self) -> str:
        """Return the text inserted between two segments."""

        return _LITERALS[self]

    @staticmethod
    def from_user_input(value: str) -> "PathSeparator":
        """Translate a configuration or CLI value into the matching style.

        Both the style name (``arrow``) and the literal (``" > "``) are accepted.
        """

        normalized = value.strip().lower().replace("-", "_")
        for style in PathSeparator:
            if style.value == normalized:
                return style
        for style in PathSeparator:
            if value == style.literal or (value.strip() and value.strip() == style.literal.strip()):
                return style
        valid = ", ".join(s.value for s in PathSeparator)
        msg = f"Unsupported separator style '{value}'. Valid options: {valid}"
        raise ValueError(msg)


_LITERALS: Final[dict[PathSeparator, str]] = {
    PathSeparator.PIPE: " | ",
    PathSeparator.ARROW: " > ",
    PathSeparator.UNICODE_ARROW: " → ",
    PathSeparator.GUILLEMET: " » ",
    PathSeparator.TRIANGLE: " ▸ ",
}


@cache
def separator_characters() -> frozenset[str]:
    """Return every character used by any separator style."""

    return frozenset("".join(_LITERALS.values()))


__all__ = ["PathSeparator", "separator_characters"]
