# Path: `src/settingpath/features/resolution/__init__.py`
# Summary: Export the path-resolution engine and its capability model.
# Why: Provide a stable import surface for adapters, the copy action and tests.

from .domain import (
    Capability,
    Component,
    OverlayKind,
    PathAccumulator,
    PathSegment,
    SelectionShape,
    SurfaceKind,
    TextFragment,
    ValueKind,
)
from .usecases import (
    ActionRegistry,
    DisplayTextResolver,
    InputEvent,
    LabelValue,
    LabelValuePairing,
    MappingActionRegistry,
    MenuPathWalker,
    PathResolver,
    SelectionExtractor,
    WaypointCollector,
)

__all__ = [
    "ActionRegistry",
    "Capability",
    "Component",
    "DisplayTextResolver",
    "InputEvent",
    "LabelValue",
    "LabelValuePairing",
    "MappingActionRegistry",
    "MenuPathWalker",
    "OverlayKind",
    "PathAccumulator",
    "PathResolver",
    "PathSegment",
    "SelectionExtractor",
    "SelectionShape",
    "SurfaceKind",
    "TextFragment",
    "ValueKind",
    "WaypointCollector",
]
