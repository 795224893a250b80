"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, final

from settingpath.shared.geometry import Point
from settingpath.shared.separators import PathSeparator


@final
@dataclass(slots=True)
class ResolveArgs:
    """Command line arguments for the ``resolve`` subcommand."""

    command: Literal["resolve"]
    snapshot_path: Path
    target_id: str
    point: Point | None
    separator: PathSeparator
    copy: bool
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class SeparatorsArgs:
    """Command line arguments for the ``separators`` subcommand."""

    command: Literal["separators"]


CLIArgs = ResolveArgs | SeparatorsArgs

__all__ = ["CLIArgs", "ResolveArgs", "SeparatorsArgs"]
