"""Tests for the read model, widgets and the application window.

Covers:
- readout helpers (clock text, progress fraction, cycle dots)
- TimerWidget bound to a live engine
- SettingsDialog population and bounds
- PomoRingApp effect routing and settings persistence
"""

from __future__ import annotations

import pytest

from pomoring.settings import load_settings
from pomoring.timer.actions import PlaySound, ShowNotification, UpdateSettings
from pomoring.timer.readout import (
    cycle_dots, format_clock, mode_label, progress_fraction,
)
from pomoring.timer.state import TimerMode, TimerSettings

from helpers import complete_interval, make_state


# ═══════════════════════════════════════════════════════════════════════
#  READOUT
# ═══════════════════════════════════════════════════════════════════════


class TestReadout:
    @pytest.mark.parametrize("seconds,text", [
        (0, "00:00"),
        (59, "00:59"),
        (65, "01:05"),
        (25 * 60, "25:00"),
        (60 * 60, "60:00"),
        (-3, "00:00"),
    ])
    def test_format_clock(self, seconds, text):
        assert format_clock(seconds) == text

    def test_progress_start(self):
        assert progress_fraction(make_state()) == 0.0

    def test_progress_half(self):
        assert progress_fraction(make_state(time_left=750)) == pytest.approx(0.5)

    def test_progress_done(self):
        assert progress_fraction(make_state(time_left=0)) == 1.0

    def test_progress_uses_current_mode_length(self):
        s = make_state(mode=TimerMode.SHORT_BREAK, time_left=150)
        assert progress_fraction(s) == pytest.approx(0.5)

    def test_progress_clamped(self):
        assert progress_fraction(make_state(time_left=10_000)) == 0.0

    def test_dots_lit_up_to_cycle_while_working(self):
        assert cycle_dots(make_state(cycle=2)) == [True, True, False, False]
        assert cycle_dots(make_state(cycle=4)) == [True] * 4

    @pytest.mark.parametrize("mode", [TimerMode.SHORT_BREAK, TimerMode.LONG_BREAK])
    def test_dots_dark_during_breaks(self, mode):
        assert cycle_dots(make_state(mode=mode, cycle=3)) == [False] * 4

    def test_mode_labels(self):
        assert mode_label(TimerMode.WORK) == "FOCUS"
        assert mode_label(TimerMode.LONG_BREAK) == "LONG BREAK"


# ═══════════════════════════════════════════════════════════════════════
#  TIMER WIDGET
# ═══════════════════════════════════════════════════════════════════════


@pytest.mark.usefixtures("qapp")
class TestTimerWidget:
    def _make(self, engine):
        from pomoring.ui.timer_widget import TimerWidget
        return TimerWidget(engine)

    def test_initial_display(self, engine):
        w = self._make(engine)
        assert w.clock_text == "25:00"
        assert w.dots_text == "●○○○"
        assert w._start_pause_btn.text() == "Start"

    def test_start_pause_button(self, engine):
        w = self._make(engine)
        w._start_pause_btn.click()
        assert engine.is_running is True
        assert w._start_pause_btn.text() == "Pause"
        w._start_pause_btn.click()
        assert engine.is_running is False

    def test_tick_updates_clock(self, engine):
        w = self._make(engine)
        engine.start()
        engine._on_timeout()
        assert w.clock_text == "24:59"

    def test_mode_button(self, engine):
        w = self._make(engine)
        w._mode_buttons[TimerMode.SHORT_BREAK].click()
        assert engine.state.mode == TimerMode.SHORT_BREAK
        assert w.clock_text == "05:00"
        assert w._mode_buttons[TimerMode.SHORT_BREAK].isChecked()
        assert not w._mode_buttons[TimerMode.WORK].isChecked()

    def test_clicking_active_mode_keeps_it_checked(self, engine):
        w = self._make(engine)
        w._mode_buttons[TimerMode.WORK].click()
        assert w._mode_buttons[TimerMode.WORK].isChecked()

    def test_reset_button(self, engine):
        w = self._make(engine)
        complete_interval(engine)
        w._reset_btn.click()
        assert engine.state.mode == TimerMode.WORK
        assert w.clock_text == "25:00"

    def test_settings_button_emits(self, engine):
        w = self._make(engine)
        hits: list[bool] = []
        w.settings_requested.connect(lambda: hits.append(True))
        w._settings_btn.click()
        assert hits == [True]


# ═══════════════════════════════════════════════════════════════════════
#  SETTINGS DIALOG
# ═══════════════════════════════════════════════════════════════════════


@pytest.mark.usefixtures("qapp")
class TestSettingsDialog:
    def test_create(self):
        from pomoring.ui.settings_dialog import SettingsDialog
        dlg = SettingsDialog(TimerSettings())
        assert dlg.windowTitle() == "Settings"

    def test_reflects_settings(self):
        from pomoring.ui.settings_dialog import SettingsDialog
        s = TimerSettings(work_duration=30, auto_start_breaks=False)
        dlg = SettingsDialog(s)
        assert dlg._work_spin.value() == 30
        assert dlg._auto_breaks_cb.isChecked() is False
        assert dlg._sound_cb.isChecked() is True

    def test_changes_round_trip(self):
        from pomoring.ui.settings_dialog import SettingsDialog
        s = TimerSettings(40, 8, 25, False, True, False)
        dlg = SettingsDialog(s)
        assert TimerSettings(**dlg.changes()) == s

    def test_spin_ranges(self):
        from pomoring.ui.settings_dialog import SettingsDialog
        dlg = SettingsDialog(TimerSettings())
        dlg._work_spin.setValue(99)
        dlg._short_spin.setValue(99)
        dlg._long_spin.setValue(0)
        changes = dlg.changes()
        assert changes["work_duration"] == 60
        assert changes["short_break_duration"] == 30
        assert changes["long_break_duration"] == 1

    def test_settings_not_mutated(self):
        from pomoring.ui.settings_dialog import SettingsDialog
        s = TimerSettings()
        dlg = SettingsDialog(s)
        dlg._work_spin.setValue(45)
        assert s.work_duration == 25


# ═══════════════════════════════════════════════════════════════════════
#  APPLICATION WINDOW
# ═══════════════════════════════════════════════════════════════════════


class _FakeSounds:
    def __init__(self):
        self.played: list[str] = []

    def play(self, name="beep"):
        self.played.append(name)
        return True


class _FakeNotifier:
    def __init__(self):
        self.asked = 0
        self.shown: list[tuple[str, str]] = []

    def request_permission(self):
        self.asked += 1

    def notify(self, title, body):
        self.shown.append((title, body))
        return True


@pytest.fixture
def window(qapp):
    from pomoring.app import PomoRingApp
    win = PomoRingApp(
        settings=TimerSettings(),
        sound_manager=_FakeSounds(),
        notifier=_FakeNotifier(),
    )
    yield win
    win.close()


class TestAppWindow:
    def test_permission_requested_once(self, window):
        assert window._notifier.asked == 1

    def test_rollover_routes_effects(self, window):
        complete_interval(window.engine)
        assert window._sound_manager.played == ["beep"]
        assert window._notifier.shown == [("Pomodoro Timer", "Time for a break!")]

    def test_direct_effects(self, window):
        window._perform_effect(PlaySound())
        window._perform_effect(ShowNotification("t", "b"))
        window._perform_effect("something else")
        assert window._sound_manager.played == ["beep"]
        assert window._notifier.shown == [("t", "b")]

    def test_apply_settings_persists(self, window):
        window.apply_settings({"work_duration": 10})
        assert window.engine.state.time_left == 600
        assert load_settings().work_duration == 10

    def test_status_message_after_work(self, window):
        complete_interval(window.engine)
        assert "Pomodoro #1" in window._status_bar.currentMessage()

    def test_close_saves_settings(self, window):
        from PyQt6.QtGui import QCloseEvent
        window.engine.dispatch(UpdateSettings({"sound_enabled": False}))
        window.engine.start()
        window.closeEvent(QCloseEvent())
        assert load_settings() == window.engine.settings
        assert load_settings().sound_enabled is False
        assert window.engine.is_running is False
