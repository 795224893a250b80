"""Logger configuration bootstrap.

Where: platform/logging/config.py
What: Wire the Rich console and the rotating file log for the ``settingpath`` logger.
Why: Resolution events carry a ``resolution_event`` tag; the file log keeps it
greppable while the console handler styles it.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path
from typing import Final, final, override

from rich.console import Console

from settingpath.config.paths import default_log_file

from .handlers import SegmentRichHandler

DEFAULT_LOG_FILE: Final[Path] = default_log_file()
LOGGER_NAME: Final[str] = "settingpath"
FILE_FORMAT: Final[str] = "%(asctime)s %(levelname)-8s [%(resolution_event)s] %(message)s"
UNTAGGED_EVENT: Final[str] = "-"
LOG_ROTATE_BYTES: Final[int] = 2 * 1024 * 1024
LOG_BACKUPS: Final[int] = 3


@final
class ResolutionEventFilter(logging.Filter):
    """Give records logged without a ``resolution_event`` extra a placeholder tag."""

    @override
    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "resolution_event"):
            record.resolution_event = UNTAGGED_EVENT
        return True


def console_level_for(*, quiet: bool, verbose: bool) -> int:
    """Map the CLI verbosity flags to a console level; ``quiet`` wins."""

    if quiet:
        return logging.ERROR
    if verbose:
        return logging.DEBUG
    return logging.INFO


def setup_logger(
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> logging.Logger:
    """(Re)configure the application logger.

    Handlers from an earlier call are closed first, so the CLI can rebuild
    the logger once the config file and verbosity flags are known.

    Args:
        log_file: Rotating log destination, or None for console only.
        console_level: Threshold for the Rich stderr handler.
        file_level: Threshold for the file handler.

    Returns:
        logging.Logger: The ``settingpath`` logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    console_handler = SegmentRichHandler(console=Console(stderr=True, soft_wrap=True))
    console_handler.setLevel(console_level)
    logger.addHandler(console_handler)

    if log_file is None:
        return logger

    target = Path(log_file).expanduser().resolve()
    target.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.handlers.RotatingFileHandler(
        target,
        maxBytes=LOG_ROTATE_BYTES,
        backupCount=LOG_BACKUPS,
        encoding="utf-8",
    )
    file_handler.setLevel(file_level)
    file_handler.addFilter(ResolutionEventFilter())
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
    logger.addHandler(file_handler)
    return logger


logger: Final[logging.Logger] = setup_logger(log_file=DEFAULT_LOG_FILE)


__all__ = [
    "DEFAULT_LOG_FILE",
    "ResolutionEventFilter",
    "console_level_for",
    "logger",
    "setup_logger",
]
