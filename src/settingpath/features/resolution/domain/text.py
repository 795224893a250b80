"""Text cleaning rules applied to every segment candidate."""

from __future__ import annotations

import re
from typing import Final

# Markup tags such as <html>, <b>, </b>
HTML_TAGS: Final[re.Pattern[str]] = re.compile(r"<[^>]*>")

# Hosts append the internal setting id after a line break in rich labels
HTML_SETTING_ID_SUFFIX: Final[re.Pattern[str]] = re.compile(r"<br>.*", re.DOTALL | re.IGNORECASE)

# Advanced settings carry a trailing ":dotted.setting.id"
ADVANCED_SETTING_ID: Final[re.Pattern[str]] = re.compile(r":[a-z][a-z0-9]*(?:\.[a-z0-9]+)+$")

# Default stringification of host objects, e.g. "Registry$Entry@1a2b3c"
OBJECT_REFERENCE: Final[re.Pattern[str]] = re.compile(r".*@[0-9a-fA-F]+$")

# Python's default repr, e.g. "<pkg.Entry object at 0x7f3a>"
PYTHON_OBJECT_REFERENCE: Final[re.Pattern[str]] = re.compile(r"^<.+ object at 0x[0-9a-fA-F]+>$")

# Tags left dangling at the very end of an assembled path
TRAILING_TAGS: Final[re.Pattern[str]] = re.compile(r"(?:\s*<[^<>]*>)+\s*$")

WHITESPACE: Final[re.Pattern[str]] = re.compile(r"\s+")

GROUPING_MARKER: Final[str] = ":"


def clean_text(text: str | None) -> str:
    """Strip markup and trailing ids, collapse whitespace and trim.

    Args:
        text: Raw text as reported by the host, possibly None.

    Returns:
        str: Cleaned text, empty when nothing presentable remains.
    """
    if not text:
        return ""
    cleaned = HTML_SETTING_ID_SUFFIX.sub("", text)
    cleaned = HTML_TAGS.sub("", cleaned)
    cleaned = WHITESPACE.sub(" ", cleaned).strip()
    cleaned = ADVANCED_SETTING_ID.sub("", cleaned)
    return cleaned.strip()


def looks_like_reference(text: str) -> bool:
    """Return True for opaque object references that carry no meaning for users."""

    stripped = text.strip()
    return bool(OBJECT_REFERENCE.match(stripped) or PYTHON_OBJECT_REFERENCE.match(stripped))


def presentable(text: str | None) -> str | None:
    """Clean ``text`` and return it only when it is non-blank and not a reference."""

    cleaned = clean_text(text)
    if not cleaned or looks_like_reference(cleaned):
        return None
    return cleaned


def is_grouping_label(text: str) -> bool:
    return text.rstrip().endswith(GROUPING_MARKER)


def trim_trailing_markup(text: str) -> str:
    """Remove markup tags that close an assembled path, leaving inner text untouched."""

    return TRAILING_TAGS.sub("", text).rstrip()


__all__ = [
    "ADVANCED_SETTING_ID",
    "GROUPING_MARKER",
    "HTML_SETTING_ID_SUFFIX",
    "HTML_TAGS",
    "OBJECT_REFERENCE",
    "PYTHON_OBJECT_REFERENCE",
    "TRAILING_TAGS",
    "clean_text",
    "is_grouping_label",
    "looks_like_reference",
    "presentable",
    "trim_trailing_markup",
]
