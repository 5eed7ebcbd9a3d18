"""Pure transition function for the Pomodoro timer.

``reduce(state, action)`` returns the next state plus a tuple of effects
for collaborators to perform.  It never raises and performs no I/O.

Cycle
-----
WORK (cycle 1) → SHORT_BREAK → WORK (cycle 2) → SHORT_BREAK → ...
WORK (cycle 4) → LONG_BREAK → WORK (cycle 1) → ...

The cycle number moves on when a work interval *ends*, so the break that
follows already carries the next cycle (a long break carries cycle 1).
"""

from __future__ import annotations

from dataclasses import replace

from .actions import (
    Action, Effect, Pause, PlaySound, Reset, SetMode, ShowNotification,
    Start, Tick, UpdateSettings,
)
from .state import CYCLES_PER_ROUND, TimerMode, TimerState, is_valid_changes


NOTIFICATION_TITLE = "Pomodoro Timer"

COMPLETION_MESSAGES: dict[TimerMode, str] = {
    TimerMode.WORK:        "Time for a break!",
    TimerMode.SHORT_BREAK: "Time to focus!",
    TimerMode.LONG_BREAK:  "Time to focus!",
}

NO_EFFECTS: tuple[Effect, ...] = ()


def next_mode(mode: TimerMode, cycle: int) -> TimerMode:
    """Mode that follows *mode* when it completes."""
    if mode == TimerMode.WORK:
        if cycle == CYCLES_PER_ROUND:
            return TimerMode.LONG_BREAK
        return TimerMode.SHORT_BREAK
    return TimerMode.WORK


def next_cycle(mode: TimerMode, cycle: int) -> int:
    if mode == TimerMode.WORK:
        return (cycle % CYCLES_PER_ROUND) + 1
    return cycle


def should_auto_start(state: TimerState, mode: TimerMode) -> bool:
    """Whether entering *mode* starts the countdown without a click."""
    if mode == TimerMode.WORK:
        return state.settings.auto_start_pomodoros
    return state.settings.auto_start_breaks


def reduce(
    state: TimerState, action: Action,
) -> tuple[TimerState, tuple[Effect, ...]]:
    if isinstance(action, Start):
        return replace(state, is_running=True), NO_EFFECTS

    if isinstance(action, Pause):
        return replace(state, is_running=False), NO_EFFECTS

    if isinstance(action, Reset):
        return replace(
            state,
            is_running=False,
            mode=TimerMode.WORK,
            time_left=state.settings.seconds_for(TimerMode.WORK),
            cycle=1,
        ), NO_EFFECTS

    if isinstance(action, Tick):
        return _tick(state)

    if isinstance(action, SetMode):
        if not isinstance(action.mode, TimerMode):
            return state, NO_EFFECTS
        return replace(
            state,
            mode=action.mode,
            time_left=state.settings.seconds_for(action.mode),
            is_running=False,
        ), NO_EFFECTS

    if isinstance(action, UpdateSettings):
        if not is_valid_changes(action.changes):
            return state, NO_EFFECTS
        settings = replace(state.settings, **action.changes)
        # Restarts the current interval at its (possibly unchanged) length.
        return replace(
            state,
            settings=settings,
            time_left=settings.seconds_for(state.mode),
        ), NO_EFFECTS

    return state, NO_EFFECTS


def _tick(state: TimerState) -> tuple[TimerState, tuple[Effect, ...]]:
    if state.time_left > 0:
        return replace(state, time_left=state.time_left - 1), NO_EFFECTS

    completed = state.mode
    mode = next_mode(completed, state.cycle)
    leaving_work = completed == TimerMode.WORK

    new_state = replace(
        state,
        mode=mode,
        time_left=state.settings.seconds_for(mode),
        cycle=next_cycle(completed, state.cycle),
        total_cycles=state.total_cycles + 1 if leaving_work else state.total_cycles,
        is_running=should_auto_start(state, mode),
    )

    effects: list[Effect] = []
    if state.settings.sound_enabled:
        effects.append(PlaySound())
    effects.append(
        ShowNotification(NOTIFICATION_TITLE, COMPLETION_MESSAGES[completed])
    )
    return new_state, tuple(effects)
