"""Inputs to and outputs from the timer reducer.

Actions flow in (user controls and the tick driver).  Effects flow out
(requests for sound and notifications) and are carried out by whoever
owns the engine.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

from .state import TimerMode


# ── actions ───────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Start:
    pass


@dataclass(frozen=True)
class Pause:
    pass


@dataclass(frozen=True)
class Reset:
    pass


@dataclass(frozen=True)
class Tick:
    pass


@dataclass(frozen=True)
class SetMode:
    mode: TimerMode


@dataclass(frozen=True)
class UpdateSettings:
    """Partial settings; keys are ``TimerSettings`` field names."""

    changes: dict[str, Any] = field(default_factory=dict)


Action = Union[Start, Pause, Reset, Tick, SetMode, UpdateSettings]


# ── effects ───────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class PlaySound:
    name: str = "beep"


@dataclass(frozen=True)
class ShowNotification:
    title: str
    body: str


Effect = Union[PlaySound, ShowNotification]
