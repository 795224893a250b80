"""setting-path: copy the breadcrumb path of IDE settings and UI elements."""

__version__ = "0.1.0"
