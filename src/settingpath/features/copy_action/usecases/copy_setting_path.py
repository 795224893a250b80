"""Where: features/copy_action/usecases/copy_setting_path.py
What: Resolve a target's path, put it on the clipboard and announce it.
Why: Glue the resolution engine to the clipboard and notification collaborators.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import final

from settingpath.features.resolution.domain.components import Component
from settingpath.features.resolution.usecases.ports import InputEvent
from settingpath.features.resolution.usecases.resolver import PathResolver
from settingpath.platform.clipboard import ClipboardError, ClipboardPort
from settingpath.platform.logging import logger
from settingpath.platform.notifications import NotificationManager
from settingpath.shared.separators import PathSeparator


class CopyOutcome(str, Enum):
    """How the last copy attempt ended."""

    COPIED = "copied"
    RESOLVED = "resolved"
    NOTHING_RESOLVED = "nothing_resolved"
    COPY_FAILED = "copy_failed"


@final
@dataclass(slots=True)
class CopySettingPathAction:
    """Copy the breadcrumb path of the component the user interacted with."""

    resolver: PathResolver
    clipboard: ClipboardPort | None
    separator: PathSeparator = PathSeparator.PIPE
    notifications: NotificationManager | None = None
    show_notification: bool = True
    last_path: str | None = field(default=None, init=False)
    last_resolved: str | None = field(default=None, init=False)
    last_outcome: CopyOutcome | None = field(default=None, init=False)

    def perform(self, target: Component, event: InputEvent | None = None) -> str | None:
        """Resolve and copy the path of ``target``.

        Args:
            target: Component the user interacted with.
            event: Triggering input event, if any.

        Returns:
            str | None: The resolved path, copied when a clipboard is configured.
            None when nothing was resolved or the clipboard rejected it;
            ``last_outcome`` tells the two apart.
        """
        path = self.resolver.resolve_path(target, event, self.separator.literal)
        self.last_resolved = path or None
        if not path:
            self.last_outcome = CopyOutcome.NOTHING_RESOLVED
            logger.info(
                "Nothing to copy",
                extra={"resolution_event": "resolution.empty", "target": repr(target)},
            )
            return None

        if self.clipboard is None:
            logger.debug("Resolved %s without copying", path)
            self.last_outcome = CopyOutcome.RESOLVED
            self.last_path = path
            return path

        try:
            self.clipboard.copy(path)
        except ClipboardError as exc:
            logger.error(
                "Clipboard copy failed: %s",
                exc,
                extra={"resolution_event": "resolution.error", "error_message": str(exc)},
            )
            self.last_outcome = CopyOutcome.COPY_FAILED
            return None

        logger.info(
            "Copied %s",
            path,
            extra={
                "resolution_event": "resolution.copied",
                "path": path,
                "separator": self.separator.literal,
            },
        )
        if self.show_notification and self.notifications is not None:
            _ = self.notifications.show(path)
        self.last_outcome = CopyOutcome.COPIED
        self.last_path = path
        return path


__all__ = ["CopyOutcome", "CopySettingPathAction"]
