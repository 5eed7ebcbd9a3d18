"""Timer data model for PomoRing.

Everything here is an immutable value.  A ``TimerState`` is never edited
in place: the reducer builds a new one for every transition.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


# ── enums ─────────────────────────────────────────────────────────────────


class TimerMode(Enum):
    WORK = "work"
    SHORT_BREAK = "shortBreak"
    LONG_BREAK = "longBreak"


# ── constants ─────────────────────────────────────────────────────────────

CYCLES_PER_ROUND = 4

# Inclusive (min, max) minutes for each duration field.
DURATION_LIMITS: dict[str, tuple[int, int]] = {
    "work_duration": (1, 60),
    "short_break_duration": (1, 30),
    "long_break_duration": (1, 60),
}

FLAG_FIELDS = ("auto_start_breaks", "auto_start_pomodoros", "sound_enabled")


# ── settings ──────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class TimerSettings:
    """User preferences.  Durations are whole minutes."""

    work_duration: int = 25
    short_break_duration: int = 5
    long_break_duration: int = 15
    auto_start_breaks: bool = True
    auto_start_pomodoros: bool = True
    sound_enabled: bool = True

    def duration_for(self, mode: TimerMode) -> int:
        """Minutes configured for *mode*."""
        if mode == TimerMode.WORK:
            return self.work_duration
        if mode == TimerMode.SHORT_BREAK:
            return self.short_break_duration
        return self.long_break_duration

    def seconds_for(self, mode: TimerMode) -> int:
        return self.duration_for(mode) * 60


DEFAULT_SETTINGS = TimerSettings()


def is_valid_value(name: str, value: Any) -> bool:
    """True when *value* is acceptable for the settings field *name*."""
    if name in DURATION_LIMITS:
        # bool is an int subclass; a checkbox value is not a duration
        if isinstance(value, bool) or not isinstance(value, int):
            return False
        low, high = DURATION_LIMITS[name]
        return low <= value <= high
    if name in FLAG_FIELDS:
        return isinstance(value, bool)
    return False


def is_valid_changes(changes: Any) -> bool:
    """True when *changes* is a mapping of known fields to valid values."""
    if not isinstance(changes, dict):
        return False
    return all(is_valid_value(k, v) for k, v in changes.items())


# ── state ─────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class TimerState:
    mode: TimerMode = TimerMode.WORK
    time_left: int = DEFAULT_SETTINGS.work_duration * 60  # seconds
    is_running: bool = False
    cycle: int = 1  # 1..CYCLES_PER_ROUND
    total_cycles: int = 0  # completed work intervals
    settings: TimerSettings = field(default_factory=TimerSettings)

    @property
    def total_seconds(self) -> int:
        """Full length of the current interval."""
        return self.settings.seconds_for(self.mode)


def initial_state(settings: TimerSettings = DEFAULT_SETTINGS) -> TimerState:
    """The state the timer starts in, and returns to on reset."""
    return TimerState(
        mode=TimerMode.WORK,
        time_left=settings.seconds_for(TimerMode.WORK),
        is_running=False,
        cycle=1,
        total_cycles=0,
        settings=settings,
    )
