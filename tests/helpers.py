"""Shared test helpers for PomoRing."""

from dataclasses import replace

from pomoring.timer.actions import Tick
from pomoring.timer.engine import TimerEngine
from pomoring.timer.state import TimerState, initial_state


class SignalCollector:
    """Utility to capture pyqtSignal emissions into a list."""

    def __init__(self):
        self.items: list = []

    def slot(self, *args):
        self.items.append(args if len(args) > 1 else args[0] if args else None)

    def __call__(self, *args):
        self.slot(*args)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, idx):
        return self.items[idx]

    @property
    def last(self):
        return self.items[-1] if self.items else None

    def clear(self):
        self.items.clear()


def make_state(**overrides) -> TimerState:
    """Default initial state with selected fields replaced."""
    return replace(initial_state(), **overrides)


def complete_interval(engine: TimerEngine) -> None:
    """Jump to the end of the current interval and roll it over."""
    engine._state = replace(engine._state, time_left=0)
    engine.dispatch(Tick())
