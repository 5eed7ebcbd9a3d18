"""Desktop notifications through the system tray icon.

Permission is asked for once at startup.  Qt has no permission prompt of
its own, so "granted" means the platform can actually show tray messages.
Until then, and after a denial, notifications are dropped silently.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable

from PyQt6.QtCore import QObject
from PyQt6.QtWidgets import QSystemTrayIcon


logger = logging.getLogger(__name__)


class NotificationPermission(Enum):
    UNDETERMINED = "undetermined"
    GRANTED = "granted"
    DENIED = "denied"


def _platform_supports_messages() -> bool:
    return (
        QSystemTrayIcon.isSystemTrayAvailable()
        and QSystemTrayIcon.supportsMessages()
    )


class Notifier(QObject):
    """Shows ``ShowNotification`` effects as tray balloon messages."""

    def __init__(
        self,
        tray_icon: QSystemTrayIcon | None = None,
        parent: QObject | None = None,
        *,
        permission: NotificationPermission = NotificationPermission.UNDETERMINED,
        probe: Callable[[], bool] = _platform_supports_messages,
    ) -> None:
        super().__init__(parent)
        self._tray_icon = tray_icon
        # nowhere to show messages without a tray icon
        if tray_icon is None:
            permission = NotificationPermission.DENIED
        self._permission = permission
        self._probe = probe

    @property
    def permission(self) -> NotificationPermission:
        return self._permission

    def request_permission(self) -> NotificationPermission:
        """Resolve an undetermined permission; a decided one is kept."""
        if self._permission == NotificationPermission.UNDETERMINED:
            granted = self._tray_icon is not None and self._probe()
            self._permission = (
                NotificationPermission.GRANTED if granted
                else NotificationPermission.DENIED
            )
            logger.info("Notification permission: %s", self._permission.value)
        return self._permission

    def notify(self, title: str, body: str) -> bool:
        """Show a message.  Returns False when it was suppressed."""
        if self._permission != NotificationPermission.GRANTED:
            return False
        self._tray_icon.showMessage(title, body)
        return True
