# Where: settingpath.shared.__init__
# What: Provide a concise import surface for shared value objects.
# Why: Encourage consistent reuse of shared helpers across features.

"""Shared cross-cutting utilities exposed at the package level."""

from .geometry import Point, Rect
from .separators import PathSeparator, separator_characters

__all__ = ["PathSeparator", "Point", "Rect", "separator_characters"]
