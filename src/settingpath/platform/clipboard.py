"""Clipboard adapter backed by pyperclip."""

from __future__ import annotations

from typing import Protocol, final, runtime_checkable

import pyperclip

from settingpath.platform.logging import logger


class ClipboardError(RuntimeError):
    """Raised when the system clipboard rejects a write."""


@runtime_checkable
class ClipboardPort(Protocol):
    """Port for placing text on the clipboard."""

    def copy(self, text: str) -> None:
        """Replace the clipboard contents with ``text``."""
        ...


@final
class PyperclipClipboard:
    """Write to the system clipboard through pyperclip."""

    def copy(self, text: str) -> None:
        """Copy ``text`` to the system clipboard.

        Raises:
            ClipboardError: If no clipboard mechanism is available.
        """
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as exc:
            logger.error("Cannot copy to clipboard: %s", exc)
            raise ClipboardError(str(exc)) from exc
        logger.debug("Copied %d characters to the clipboard", len(text))


__all__ = ["ClipboardError", "ClipboardPort", "PyperclipClipboard"]
