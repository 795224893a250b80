"""Domain types for path resolution: capability model, text rules, accumulator."""

from .accumulator import PathAccumulator, PathSegment
from .components import (
    Capability,
    CategoryNavigator,
    Component,
    ListSelection,
    OverlayKind,
    Renderer,
    SelectionShape,
    Surface,
    SurfaceKind,
    TabGroup,
    TableSelection,
    TextFragment,
    TreeSelection,
    ValueKind,
    ValueWidget,
)
from .strategies import Strategy, first_success
from .text import clean_text, looks_like_reference

__all__ = [
    "Capability",
    "CategoryNavigator",
    "Component",
    "ListSelection",
    "OverlayKind",
    "PathAccumulator",
    "PathSegment",
    "Renderer",
    "SelectionShape",
    "Strategy",
    "Surface",
    "SurfaceKind",
    "TabGroup",
    "TableSelection",
    "TextFragment",
    "TreeSelection",
    "ValueKind",
    "ValueWidget",
    "clean_text",
    "first_success",
    "looks_like_reference",
]
