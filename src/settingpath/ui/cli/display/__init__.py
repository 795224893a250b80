"""Display management for CLI interface."""

from settingpath.ui.cli.display.result import ResultDisplay

__all__ = ["ResultDisplay"]
