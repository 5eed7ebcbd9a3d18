"""Main timer display.

Layout (top → bottom):
    - Mode buttons (Focus / Short Break / Long Break)
    - Cycle dots
    - Mode label, mm:ss clock and progress bar
    - Reset / Start-Pause / Settings
"""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QProgressBar,
)

from ..timer.engine import TimerEngine
from ..timer.readout import cycle_dots, format_clock, mode_label, progress_fraction
from ..timer.state import CYCLES_PER_ROUND, TimerMode, TimerState


MODE_BUTTONS: tuple[tuple[TimerMode, str], ...] = (
    (TimerMode.WORK,        "Focus"),
    (TimerMode.SHORT_BREAK, "Short Break"),
    (TimerMode.LONG_BREAK,  "Long Break"),
)

DOT_ON = "●"
DOT_OFF = "○"

PROGRESS_STEPS = 1000


class TimerWidget(QWidget):
    """Clock, progress and controls bound to a ``TimerEngine``."""

    settings_requested = pyqtSignal()

    def __init__(self, engine: TimerEngine, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._engine = engine
        self._build_ui()
        self._connect_signals()
        self._refresh(engine.state)

    # ── build ─────────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(32, 24, 32, 28)
        layout.setSpacing(12)
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)

        mode_row = QHBoxLayout()
        mode_row.setSpacing(8)
        self._mode_buttons: dict[TimerMode, QPushButton] = {}
        for mode, text in MODE_BUTTONS:
            btn = QPushButton(text, self)
            btn.setCheckable(True)
            btn.clicked.connect(lambda _checked, m=mode: self._on_mode_clicked(m))
            self._mode_buttons[mode] = btn
            mode_row.addWidget(btn)
        layout.addLayout(mode_row)

        self._dots_label = QLabel(self)
        self._dots_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._dots_label.setStyleSheet("font-size: 18px; letter-spacing: 6px;")
        layout.addWidget(self._dots_label)

        self._mode_label = QLabel(self)
        self._mode_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._mode_label.setStyleSheet("font-size: 14px; font-weight: 700;")
        layout.addWidget(self._mode_label)

        self._clock_label = QLabel(self)
        self._clock_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._clock_label.setStyleSheet("font-size: 64px; font-weight: 300;")
        layout.addWidget(self._clock_label)

        self._progress = QProgressBar(self)
        self._progress.setRange(0, PROGRESS_STEPS)
        self._progress.setTextVisible(False)
        layout.addWidget(self._progress)

        btn_row = QHBoxLayout()
        btn_row.setSpacing(12)
        btn_row.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._reset_btn = QPushButton("Reset", self)
        self._start_pause_btn = QPushButton("Start", self)
        self._start_pause_btn.setObjectName("primaryButton")
        self._settings_btn = QPushButton("Settings", self)

        btn_row.addWidget(self._reset_btn)
        btn_row.addWidget(self._start_pause_btn)
        btn_row.addWidget(self._settings_btn)
        layout.addLayout(btn_row)

    def _connect_signals(self) -> None:
        self._reset_btn.clicked.connect(self._engine.reset)
        self._start_pause_btn.clicked.connect(self._engine.toggle)
        self._settings_btn.clicked.connect(lambda: self.settings_requested.emit())
        self._engine.state_changed.connect(self._refresh)

    def _on_mode_clicked(self, mode: TimerMode) -> None:
        self._engine.set_mode(mode)
        # re-check the button even when the state did not change
        self._refresh(self._engine.state)

    # ── display ───────────────────────────────────────────────────────────

    def _refresh(self, state: TimerState) -> None:
        for mode, btn in self._mode_buttons.items():
            btn.setChecked(mode == state.mode)
        self._dots_label.setText(
            "".join(DOT_ON if lit else DOT_OFF for lit in cycle_dots(state))
        )
        self._dots_label.setToolTip(f"Cycle {state.cycle} of {CYCLES_PER_ROUND}")
        self._mode_label.setText(mode_label(state.mode))
        self._clock_label.setText(format_clock(state.time_left))
        self._progress.setValue(round(progress_fraction(state) * PROGRESS_STEPS))
        self._start_pause_btn.setText("Pause" if state.is_running else "Start")

    @property
    def clock_text(self) -> str:
        return self._clock_label.text()

    @property
    def dots_text(self) -> str:
        return self._dots_label.text()
