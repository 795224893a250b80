"""Command line argument handling package."""

from settingpath.ui.cli.args.parser import ArgumentParser
from settingpath.ui.cli.args.options import CLIArgs, ResolveArgs, SeparatorsArgs

__all__ = ["ArgumentParser", "CLIArgs", "ResolveArgs", "SeparatorsArgs"]
