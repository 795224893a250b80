"""List separator styles."""

from __future__ import annotations

from typing import final

from settingpath.config.settings import PATH_SEPARATOR_STYLE
from settingpath.ui.cli.display.result import ResultDisplay


@final
class SeparatorsCommand:
    """Command that prints the available separator styles."""

    def __init__(self) -> None:
        self.display = ResultDisplay()

    def execute(self) -> None:
        self.display.show_separators(PATH_SEPARATOR_STYLE)
