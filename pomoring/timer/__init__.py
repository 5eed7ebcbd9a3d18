"""Timer package."""

from .actions import (
    Action, Effect, Pause, PlaySound, Reset, SetMode, ShowNotification,
    Start, Tick, UpdateSettings,
)
from .engine import TimerEngine
from .reducer import reduce
from .state import (
    CYCLES_PER_ROUND,
    DEFAULT_SETTINGS,
    TimerMode,
    TimerSettings,
    TimerState,
    initial_state,
)

__all__ = [
    "Action",
    "Effect",
    "Pause",
    "PlaySound",
    "Reset",
    "SetMode",
    "ShowNotification",
    "Start",
    "Tick",
    "UpdateSettings",
    "TimerEngine",
    "reduce",
    "CYCLES_PER_ROUND",
    "DEFAULT_SETTINGS",
    "TimerMode",
    "TimerSettings",
    "TimerState",
    "initial_state",
]
