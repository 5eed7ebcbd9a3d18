"""Main application window for PomoRing.

The window is the composition root: it owns the ``TimerEngine`` and the
collaborators that carry out its effects (sound, notifications, settings
persistence).  Nothing is shared through module globals.
"""

from __future__ import annotations

import logging

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QColor, QIcon, QPainter, QPixmap
from PyQt6.QtWidgets import QDialog, QMainWindow, QStatusBar, QSystemTrayIcon

from .audio.sounds import SoundManager
from .notifications import Notifier
from .settings import load_settings, save_settings
from .timer.actions import PlaySound, ShowNotification
from .timer.engine import TimerEngine
from .timer.readout import format_clock, mode_label
from .timer.state import TimerMode, TimerSettings, TimerState
from .ui.settings_dialog import SettingsDialog
from .ui.timer_widget import TimerWidget


logger = logging.getLogger(__name__)

MODE_COLOURS: dict[TimerMode, str] = {
    TimerMode.WORK:        "#E5534B",
    TimerMode.SHORT_BREAK: "#57AB5A",
    TimerMode.LONG_BREAK:  "#539BF5",
}


def make_icon(mode: TimerMode) -> QIcon:
    """Filled circle in the colour of *mode*."""
    size = 64
    pixmap = QPixmap(size, size)
    pixmap.fill(Qt.GlobalColor.transparent)
    p = QPainter(pixmap)
    p.setRenderHint(QPainter.RenderHint.Antialiasing)
    colour = QColor(MODE_COLOURS[mode])
    p.setBrush(colour)
    p.setPen(colour.darker(120))
    p.drawEllipse(4, 4, size - 8, size - 8)
    p.end()
    return QIcon(pixmap)


class PomoRingApp(QMainWindow):
    """Main application window."""

    def __init__(
        self,
        *,
        settings: TimerSettings | None = None,
        sound_manager: SoundManager | None = None,
        notifier: Notifier | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("Pomodoro Timer")
        self.setMinimumSize(420, 420)

        # ── engine ────────────────────────────────────────────────────
        if settings is None:
            settings = load_settings()
        self._engine = TimerEngine(self, settings=settings)

        # ── collaborators ─────────────────────────────────────────────
        self._tray_icon = QSystemTrayIcon(make_icon(TimerMode.WORK), self)
        self._tray_icon.setToolTip("Pomodoro Timer")
        self._sound_manager = sound_manager or SoundManager(parent=self)
        self._notifier = notifier or Notifier(self._tray_icon, self)
        self._notifier.request_permission()
        if QSystemTrayIcon.isSystemTrayAvailable():
            self._tray_icon.show()

        # ── UI ────────────────────────────────────────────────────────
        self._timer_widget = TimerWidget(self._engine, self)
        self._timer_widget.settings_requested.connect(self.open_settings)
        self.setCentralWidget(self._timer_widget)

        self._status_bar = QStatusBar(self)
        self.setStatusBar(self._status_bar)

        # ── wiring ────────────────────────────────────────────────────
        self._engine.effect_requested.connect(self._perform_effect)
        self._engine.settings_changed.connect(save_settings)
        self._engine.state_changed.connect(self._on_state_changed)
        self._engine.interval_completed.connect(self._on_interval_completed)
        self._on_state_changed(self._engine.state)

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC
    # ══════════════════════════════════════════════════════════════════

    @property
    def engine(self) -> TimerEngine:
        return self._engine

    def open_settings(self) -> None:
        dialog = SettingsDialog(self._engine.settings, self)
        if dialog.exec() == QDialog.DialogCode.Accepted:
            self.apply_settings(dialog.changes())

    def apply_settings(self, changes: dict) -> None:
        self._engine.update_settings(**changes)

    # ══════════════════════════════════════════════════════════════════
    #  EFFECTS
    # ══════════════════════════════════════════════════════════════════

    def _perform_effect(self, effect) -> None:
        if isinstance(effect, PlaySound):
            self._sound_manager.play(effect.name)
        elif isinstance(effect, ShowNotification):
            self._notifier.notify(effect.title, effect.body)
        else:
            logger.warning("Ignoring unknown effect %r", effect)

    # ══════════════════════════════════════════════════════════════════
    #  ENGINE SIGNALS
    # ══════════════════════════════════════════════════════════════════

    def _on_state_changed(self, state: TimerState) -> None:
        label = mode_label(state.mode).title()
        suffix = "" if state.is_running else " (paused)"
        self._tray_icon.setIcon(make_icon(state.mode))
        self._tray_icon.setToolTip(f"{label} {format_clock(state.time_left)}{suffix}")
        self.setWindowIcon(make_icon(state.mode))

    def _on_interval_completed(self, mode: TimerMode) -> None:
        total = self._engine.state.total_cycles
        if mode == TimerMode.WORK:
            self._status_bar.showMessage(f"Pomodoro #{total} done. Take a break.")
        else:
            self._status_bar.showMessage("Break over. Back to work.")

    def closeEvent(self, event) -> None:
        self._engine.pause()
        save_settings(self._engine.settings)
        self._tray_icon.hide()
        super().closeEvent(event)
