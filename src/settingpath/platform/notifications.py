"""
Summary: Own the single "path copied" notification and its auto-dismiss timer.
Why: A stale timer from an older notification must never tear down a newer one.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Protocol, final

from rich.console import Console
from rich.panel import Panel

from settingpath.platform.logging import logger


@dataclass(slots=True, eq=False)
class NotificationHandle:
    """Identity of one displayed notification."""

    message: str
    dismissed: bool = False


class Cancellable(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    """Port for running a callback after a delay."""

    def schedule(self, delay_seconds: float, callback: Callable[[], None]) -> Cancellable:
        """Arrange for ``callback`` to run once after ``delay_seconds``."""
        ...


class NotificationPresenter(Protocol):
    """Port for displaying and withdrawing notifications."""

    def present(self, handle: NotificationHandle) -> None:
        """Display ``handle``."""
        ...

    def withdraw(self, handle: NotificationHandle) -> None:
        """Remove ``handle`` from display."""
        ...


@final
class TimerScheduler:
    """Scheduler backed by daemon ``threading.Timer`` instances."""

    def schedule(self, delay_seconds: float, callback: Callable[[], None]) -> Cancellable:
        timer = threading.Timer(delay_seconds, callback)
        timer.daemon = True
        timer.start()
        return timer


@final
class RichNotificationPresenter:
    """Render notifications as Rich panels on the console."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console(stderr=True)

    def present(self, handle: NotificationHandle) -> None:
        self._console.print(
            Panel(handle.message, title="Copied setting path", border_style="green", expand=False)
        )

    def withdraw(self, handle: NotificationHandle) -> None:
        logger.debug("Notification withdrawn: %s", handle.message)


@final
@dataclass(slots=True)
class NotificationManager:
    """Show at most one notification at a time.

    ``dismiss`` only acts on the current handle, so timers scheduled for a
    replaced notification are harmless.
    """

    presenter: NotificationPresenter = field(default_factory=RichNotificationPresenter)
    scheduler: Scheduler = field(default_factory=TimerScheduler)
    delay_seconds: float = 1.0
    _current: NotificationHandle | None = None
    _timer: Cancellable | None = None
    _lock: threading.Lock = field(default_factory=threading.Lock)

    @property
    def current(self) -> NotificationHandle | None:
        with self._lock:
            return self._current

    def show(self, message: str) -> NotificationHandle:
        """Display ``message``, tearing down any notification still showing."""

        with self._lock:
            if self._current is not None:
                self._teardown()
            return self._display(message)

    def replace(self, handle: NotificationHandle, message: str) -> NotificationHandle | None:
        """Swap ``handle`` for a new notification when it is still current.

        Returns:
            NotificationHandle | None: The new handle, or None when ``handle`` is stale.
        """
        with self._lock:
            if handle is not self._current:
                return None
            self._teardown()
            return self._display(message)

    def dismiss(self, handle: NotificationHandle) -> bool:
        """Dismiss ``handle`` if it is still the current notification.

        Returns:
            bool: True when the handle was current and has been torn down.
        """
        with self._lock:
            if handle is not self._current:
                logger.debug("Ignoring dismissal of a stale notification")
                return False
            self._teardown()
            return True

    def _display(self, message: str) -> NotificationHandle:
        handle = NotificationHandle(message)
        self._current = handle
        self.presenter.present(handle)
        self._timer = self.scheduler.schedule(self.delay_seconds, lambda: self._expire(handle))
        return handle

    def _expire(self, handle: NotificationHandle) -> None:
        _ = self.dismiss(handle)

    def _teardown(self) -> None:
        handle = self._current
        if handle is None:
            return
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        handle.dismissed = True
        self._current = None
        self.presenter.withdraw(handle)


__all__ = [
    "Cancellable",
    "NotificationHandle",
    "NotificationManager",
    "NotificationPresenter",
    "RichNotificationPresenter",
    "Scheduler",
    "TimerScheduler",
]
