"""Where: src/settingpath/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Expose validated constants to feature layers without file I/O.
Assumptions: - Config defaults remain compatible with current runtime expectations.
Trade-offs: - Validation is limited to simple boundary checks for speed.
"""

from __future__ import annotations

from settingpath.config.config import (
    NOTIFICATION_DELAY_SECONDS_DEFAULT,
    config as app_config,
)
from settingpath.platform.logging import logger
from settingpath.shared.separators import PathSeparator

# Separator --------------------------------------------------------------------

_separator_style = getattr(app_config, "separator", PathSeparator.PIPE.value)
try:
    PATH_SEPARATOR_STYLE: PathSeparator = PathSeparator.from_user_input(str(_separator_style))
except ValueError as exc:
    logger.warning("%s; falling back to '%s'", exc, PathSeparator.PIPE.value)
    PATH_SEPARATOR_STYLE = PathSeparator.PIPE

PATH_SEPARATOR: str = PATH_SEPARATOR_STYLE.literal


# Label pairing ----------------------------------------------------------------

# Whether labels ending with ":" are followed by the adjacent widget's value.
INCLUDE_ADJACENT_VALUE: bool = bool(getattr(app_config, "include_adjacent_value", True))


# Notifications ----------------------------------------------------------------

SHOW_NOTIFICATION: bool = bool(getattr(app_config, "show_notification", True))

_delay = getattr(app_config, "notification_delay_seconds", NOTIFICATION_DELAY_SECONDS_DEFAULT)
NOTIFICATION_DELAY_SECONDS: float = (
    float(_delay)
    if isinstance(_delay, (int, float)) and not isinstance(_delay, bool) and _delay > 0
    else NOTIFICATION_DELAY_SECONDS_DEFAULT
)


__all__ = [
    "PATH_SEPARATOR_STYLE",
    "PATH_SEPARATOR",
    "INCLUDE_ADJACENT_VALUE",
    "SHOW_NOTIFICATION",
    "NOTIFICATION_DELAY_SECONDS",
]
