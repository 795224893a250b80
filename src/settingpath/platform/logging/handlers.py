"""Rich console handler for setting-path log records.

Where: platform/logging/handlers.py
What: Render structured ``resolution.*`` events with icons and highlighted separators.
Why: Keep console output readable while plain messages fall through to RichHandler.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class SegmentRichHandler(RichHandler):
    """Custom Rich handler that displays resolved paths with coloured separators."""

    _RESOLUTION_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "resolution.context": ("🧭", "cyan"),
        "resolution.copied": ("📋", "green"),
        "resolution.empty": ("ℹ️", "yellow"),
        "resolution.error": ("❌", "red"),
    }
    _SEGMENT_LIMIT: ClassVar[int] = 8

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with custom settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _format_segments(self, path: str, separator: str | None) -> Text:
        """Format a resolved path, colouring separators and eliding long middles.

        Args:
            path: The assembled path string.
            separator: Separator literal used to assemble ``path``.

        Returns:
            Text: Styled path with ``…`` replacing segments beyond the limit.
        """
        text = Text()
        if not separator or separator not in path:
            _ = text.append(path, style=Style(color="white"))
            return text

        segments = path.split(separator)
        if len(segments) > self._SEGMENT_LIMIT:
            keep = self._SEGMENT_LIMIT - 1
            segments = [segments[0], "…", *segments[-(keep - 1):]]

        for index, segment in enumerate(segments):
            if index:
                _ = text.append(separator, style=Style(color="magenta"))
            style = Style(color="magenta") if segment == "…" else Style(color="white")
            _ = text.append(segment, style=style)
        return text

    def _render_resolution_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured resolution events with dedicated styling."""

        event = getattr(record, "resolution_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._RESOLUTION_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        if event == "resolution.context":
            context = getattr(record, "context", None)
            _ = body.append("Context")
            if context:
                _ = body.append(f" {context}")
            target = getattr(record, "target", None)
            if target:
                _ = body.append(f" @ {target}")
        elif event == "resolution.copied":
            _ = body.append("Copied ")
            path = getattr(record, "path", None)
            if isinstance(path, str):
                _ = body.append_text(
                    self._format_segments(path, getattr(record, "separator", None))
                )
        elif event == "resolution.empty":
            _ = body.append("Nothing to copy")
            target = getattr(record, "target", None)
            if target:
                _ = body.append(f" @ {target}")
        else:
            _ = body.append("Resolution failed")
            error = getattr(record, "error_message", None)
            if error:
                _ = body.append(f" ({error})")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for resolution events."""

        resolution_text = self._render_resolution_message(record)
        if resolution_text is not None:
            return resolution_text

        return super().render_message(record, message)


__all__ = ["SegmentRichHandler"]
