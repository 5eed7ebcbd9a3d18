"""Read-only view helpers: what the window shows for a given state."""

from __future__ import annotations

from .state import CYCLES_PER_ROUND, TimerMode, TimerState


MODE_LABELS: dict[TimerMode, str] = {
    TimerMode.WORK:        "FOCUS",
    TimerMode.SHORT_BREAK: "SHORT BREAK",
    TimerMode.LONG_BREAK:  "LONG BREAK",
}


def mode_label(mode: TimerMode) -> str:
    return MODE_LABELS[mode]


def format_clock(seconds: int) -> str:
    """Seconds as ``mm:ss``."""
    m, s = divmod(max(0, seconds), 60)
    return f"{m:02d}:{s:02d}"


def progress_fraction(state: TimerState) -> float:
    """0.0 → 1.0 progress through the current interval."""
    total = state.total_seconds
    if total <= 0:
        return 0.0
    return max(0.0, min(1.0, 1 - state.time_left / total))


def cycle_dots(state: TimerState) -> list[bool]:
    """One flag per cycle position; lit up to ``cycle`` while working."""
    working = state.mode == TimerMode.WORK
    return [working and dot <= state.cycle for dot in range(1, CYCLES_PER_ROUND + 1)]
