"""Settings dialog for PomoRing.

A modal dialog for the timer durations and the auto-start and sound
toggles.  Nothing is applied until Save; the caller reads ``changes()``
and dispatches them to the engine.
"""

from __future__ import annotations

from typing import Any

from PyQt6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QFormLayout,
    QLabel, QSpinBox, QCheckBox, QPushButton, QWidget,
)

from ..timer.state import DURATION_LIMITS, TimerSettings


class SettingsDialog(QDialog):
    """Modal dialog for all timer preferences."""

    def __init__(
        self,
        settings: TimerSettings,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.setMinimumWidth(360)
        self.setModal(True)

        self._settings = settings

        self._build_ui()
        self._populate()

    # ══════════════════════════════════════════════════════════════════
    #  BUILD UI
    # ══════════════════════════════════════════════════════════════════

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(24, 20, 24, 20)
        root.setSpacing(16)

        root.addWidget(self._section_label("Timer"))
        form = QFormLayout()
        form.setContentsMargins(0, 0, 0, 0)
        form.setHorizontalSpacing(20)
        form.setVerticalSpacing(10)

        self._work_spin = self._minutes_spin("work_duration")
        form.addRow("Work duration:", self._work_spin)

        self._short_spin = self._minutes_spin("short_break_duration")
        form.addRow("Short break:", self._short_spin)

        self._long_spin = self._minutes_spin("long_break_duration")
        form.addRow("Long break:", self._long_spin)

        self._auto_breaks_cb = QCheckBox("Auto-start breaks")
        form.addRow("", self._auto_breaks_cb)

        self._auto_work_cb = QCheckBox("Auto-start pomodoros")
        form.addRow("", self._auto_work_cb)

        self._sound_cb = QCheckBox("Sound")
        form.addRow("", self._sound_cb)

        root.addLayout(form)

        root.addStretch()
        btn_row = QHBoxLayout()
        btn_row.addStretch()
        cancel_btn = QPushButton("Cancel")
        cancel_btn.setObjectName("secondaryButton")
        cancel_btn.clicked.connect(self.reject)
        save_btn = QPushButton("Save")
        save_btn.setObjectName("primaryButton")
        save_btn.setDefault(True)
        save_btn.clicked.connect(self.accept)
        btn_row.addWidget(cancel_btn)
        btn_row.addWidget(save_btn)
        root.addLayout(btn_row)

    # ── helpers ──────────────────────────────────────────────────────

    @staticmethod
    def _section_label(text: str) -> QLabel:
        lbl = QLabel(text)
        lbl.setStyleSheet("font-size: 15px; font-weight: 700; margin-top: 4px;")
        return lbl

    @staticmethod
    def _minutes_spin(field_name: str) -> QSpinBox:
        spin = QSpinBox()
        spin.setRange(*DURATION_LIMITS[field_name])
        spin.setSuffix(" min")
        return spin

    def _populate(self) -> None:
        s = self._settings
        self._work_spin.setValue(s.work_duration)
        self._short_spin.setValue(s.short_break_duration)
        self._long_spin.setValue(s.long_break_duration)
        self._auto_breaks_cb.setChecked(s.auto_start_breaks)
        self._auto_work_cb.setChecked(s.auto_start_pomodoros)
        self._sound_cb.setChecked(s.sound_enabled)

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC
    # ══════════════════════════════════════════════════════════════════

    def changes(self) -> dict[str, Any]:
        """All six settings as currently entered in the form."""
        return {
            "work_duration": self._work_spin.value(),
            "short_break_duration": self._short_spin.value(),
            "long_break_duration": self._long_spin.value(),
            "auto_start_breaks": self._auto_breaks_cb.isChecked(),
            "auto_start_pomodoros": self._auto_work_cb.isChecked(),
            "sound_enabled": self._sound_cb.isChecked(),
        }
