"""Use cases composing the resolution heuristics."""

from .contexts import ContextBasePath, ContextClassifier, ContextKind, ResolutionContext
from .display_text import DisplayTextResolver
from .label_pairing import LabelValue, LabelValuePairing
from .menu_path import MenuPathWalker
from .ports import ActionRegistry, InputEvent, MappingActionRegistry
from .resolver import PathResolver
from .selection import SelectionExtractor
from .title_search import TitleSearch
from .waypoints import WaypointCollector

__all__ = [
    "ActionRegistry",
    "ContextBasePath",
    "ContextClassifier",
    "ContextKind",
    "DisplayTextResolver",
    "InputEvent",
    "LabelValue",
    "LabelValuePairing",
    "MappingActionRegistry",
    "MenuPathWalker",
    "PathResolver",
    "ResolutionContext",
    "SelectionExtractor",
    "TitleSearch",
    "WaypointCollector",
]
