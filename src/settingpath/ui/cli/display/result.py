"""Display utilities for resolved paths and separator styles."""

from __future__ import annotations

from typing import final

from rich.console import Console
from rich.table import Table

from settingpath.shared.separators import PathSeparator


@final
class ResultDisplay:
    """Render command outcomes in the CLI."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_path(self, path: str | None, *, quiet: bool = False) -> None:
        """Print the resolved path on stdout so it can be piped."""

        if path is None:
            if not quiet:
                self.console.print("[yellow]No path could be resolved for this component.[/yellow]")
            return
        self.console.print(path, markup=False, highlight=False)

    def show_copy_failure(self, path: str) -> None:
        """Report a path that resolved but could not be placed on the clipboard."""

        self.console.print("[red]Resolved the path but could not copy it to the clipboard:[/red]")
        self.console.print(path, markup=False, highlight=False)

    def show_separators(self, default: PathSeparator) -> None:
        """Print every separator style with its literal."""

        table = Table(title="Separator styles")
        table.add_column("Style", style="cyan")
        table.add_column("Literal", style="magenta")
        table.add_column("Example")
        for style in PathSeparator:
            name = f"{style.value} (default)" if style is default else style.value
            example = style.literal.join(("Settings", "Editor", "General"))
            table.add_row(name, repr(style.literal), example)
        self.console.print(table)
