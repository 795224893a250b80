"""Command execution package for CLI."""

from settingpath.ui.cli.commands.resolve import ResolveCommand
from settingpath.ui.cli.commands.separators import SeparatorsCommand

__all__ = ["ResolveCommand", "SeparatorsCommand"]
