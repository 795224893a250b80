"""Tests for the ``SegmentRichHandler`` resolution event rendering."""

from __future__ import annotations

import logging
from io import StringIO
from typing import Any

from rich.console import Console
from rich.text import Text

from settingpath.platform.logging import SegmentRichHandler


def _make_handler() -> SegmentRichHandler:
    """Create a handler instance with an in-memory console."""

    console = Console(file=StringIO(), force_terminal=True, soft_wrap=True)
    return SegmentRichHandler(console=console)


def _build_record(**extras: Any) -> logging.LogRecord:
    """Create a ``LogRecord`` populated with resolution extras for testing."""

    record = logging.LogRecord(
        name="settingpath",
        level=logging.INFO,
        pathname="test",
        lineno=0,
        msg="",
        args=(),
        exc_info=None,
    )
    for key, value in extras.items():
        setattr(record, key, value)
    return record


def test_copied_event_renders_path_segments() -> None:
    handler = _make_handler()
    record = _build_record(
        resolution_event="resolution.copied",
        path="Settings | Editor | General",
        separator=" | ",
    )

    rendered = handler.render_message(record, "")

    assert isinstance(rendered, Text)
    assert rendered.plain == "📋 Copied Settings | Editor | General"


def test_long_paths_elide_middle_segments() -> None:
    """Paths beyond the segment limit keep the first and the trailing segments."""

    handler = _make_handler()
    path = " > ".join(f"S{index}" for index in range(12))
    record = _build_record(resolution_event="resolution.copied", path=path, separator=" > ")

    rendered = handler.render_message(record, "")

    assert isinstance(rendered, Text)
    assert rendered.plain.endswith("S0 > … > S6 > S7 > S8 > S9 > S10 > S11")


def test_error_event_includes_message() -> None:
    handler = _make_handler()
    record = _build_record(resolution_event="resolution.error", error_message="host went away")

    rendered = handler.render_message(record, "")

    assert isinstance(rendered, Text)
    assert "Resolution failed (host went away)" in rendered.plain


def test_context_and_empty_events_mention_target() -> None:
    handler = _make_handler()

    context = handler.render_message(
        _build_record(resolution_event="resolution.context", context="dialog", target="combo"),
        "",
    )
    empty = handler.render_message(_build_record(resolution_event="resolution.empty", target="panel"), "")

    assert isinstance(context, Text)
    assert isinstance(empty, Text)
    assert "Context dialog @ combo" in context.plain
    assert "Nothing to copy @ panel" in empty.plain


def test_plain_records_fall_back_to_rich_handler() -> None:
    handler = _make_handler()
    record = _build_record()

    rendered = handler.render_message(record, "plain message")

    assert isinstance(rendered, Text)
    assert rendered.plain == "plain message"
