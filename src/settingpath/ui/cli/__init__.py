"""Command line interface exposing the ``settingpath`` console script."""

from settingpath.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
