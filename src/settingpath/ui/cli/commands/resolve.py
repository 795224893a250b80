"""Where: ui/cli/commands/resolve.py
What: Resolve and copy the path of a component recorded in a snapshot.
Why: Exercise the copy action end to end from the command line.
"""

from __future__ import annotations

from typing import final

from settingpath.config.settings import (
    INCLUDE_ADJACENT_VALUE,
    NOTIFICATION_DELAY_SECONDS,
    SHOW_NOTIFICATION,
)
from settingpath.features.copy_action import CopyOutcome, CopySettingPathAction
from settingpath.features.resolution import InputEvent, MappingActionRegistry, PathResolver
from settingpath.features.snapshot import SnapshotLoader
from settingpath.platform.clipboard import PyperclipClipboard
from settingpath.platform.notifications import NotificationManager
from settingpath.ui.cli.args.options import ResolveArgs
from settingpath.ui.cli.display.result import ResultDisplay


@final
class ResolveCommand:
    """Command that resolves one snapshot component."""

    def __init__(self, args: ResolveArgs) -> None:
        self.args = args
        self.loader = SnapshotLoader()
        self.display = ResultDisplay()

    def execute(self) -> str | None:
        """Execute the resolve command.

        Returns:
            str | None: The resolved path, or None when nothing was resolved
            or the clipboard rejected it.

        Raises:
            SnapshotError: If the snapshot is malformed or the target id is unknown.
        """
        snapshot = self.loader.load_file(self.args.snapshot_path)
        target = snapshot.find(self.args.target_id)

        resolver = PathResolver(
            include_adjacent_value=INCLUDE_ADJACENT_VALUE,
            action_registry=MappingActionRegistry(snapshot.actions),
        )
        copy = self.args.copy
        action = CopySettingPathAction(
            resolver=resolver,
            clipboard=PyperclipClipboard() if copy else None,
            separator=self.args.separator,
            notifications=NotificationManager(delay_seconds=NOTIFICATION_DELAY_SECONDS) if copy else None,
            show_notification=SHOW_NOTIFICATION and copy and not self.args.quiet,
        )
        path = action.perform(target, InputEvent(self.args.point))
        if action.last_outcome is CopyOutcome.COPY_FAILED and action.last_resolved is not None:
            self.display.show_copy_failure(action.last_resolved)
        else:
            self.display.show_path(path, quiet=self.args.quiet)
        return path
