"""Qt driver around the pure timer reducer.

``TimerEngine`` owns the one ``TimerState`` of the application.  Every
change goes through ``dispatch(action)``, which runs ``reduce`` and then
tells the rest of the app what happened through signals.  Nothing else
mutates the state.

Tick driver
-----------
A one-second ``QTimer`` dispatches ``Tick`` while the state is running.
The engine starts it when a reduction leaves the timer running and stops
it when a reduction leaves it paused.  A timeout that still slips through
after a pause is dropped here; the reducer itself does not look at
``is_running`` on ``Tick``.

Signals
-------
state_changed(state: TimerState)
    Emitted after every reduction that produced a different state.
tick(remaining_seconds: int)
    Emitted after every ``Tick`` reduction.
interval_completed(mode: TimerMode)
    Emitted when an interval runs out; carries the mode just finished.
settings_changed(settings: TimerSettings)
    Emitted whenever the settings value changes.
effect_requested(effect: PlaySound | ShowNotification)
    Emitted once per effect, after the state signals.
"""

from __future__ import annotations

import logging
from collections import deque

from PyQt6.QtCore import QObject, QTimer, pyqtSignal

from .actions import Action, Pause, Reset, SetMode, Start, Tick, UpdateSettings
from .reducer import reduce
from .state import DEFAULT_SETTINGS, TimerMode, TimerSettings, TimerState, initial_state


logger = logging.getLogger(__name__)

TICK_INTERVAL_MS = 1000


class TimerEngine(QObject):
    """Owns the timer state and the periodic tick source."""

    state_changed = pyqtSignal(object)
    tick = pyqtSignal(int)
    interval_completed = pyqtSignal(object)
    settings_changed = pyqtSignal(object)
    effect_requested = pyqtSignal(object)

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        settings: TimerSettings = DEFAULT_SETTINGS,
    ) -> None:
        super().__init__(parent)

        self._state: TimerState = initial_state(settings)

        # Actions dispatched from inside a slot wait here until the
        # current reduction has finished notifying.
        self._pending: deque[Action] = deque()
        self._dispatching: bool = False

        self._qt_timer = QTimer(self)
        self._qt_timer.setInterval(TICK_INTERVAL_MS)
        self._qt_timer.timeout.connect(self._on_timeout)

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def state(self) -> TimerState:
        return self._state

    @property
    def settings(self) -> TimerSettings:
        return self._state.settings

    @property
    def is_running(self) -> bool:
        return self._state.is_running

    @property
    def driver_active(self) -> bool:
        """True while the one-second tick source is armed."""
        return self._qt_timer.isActive()

    # ══════════════════════════════════════════════════════════════════
    #  DISPATCH
    # ══════════════════════════════════════════════════════════════════

    def dispatch(self, action: Action) -> TimerState:
        """Apply *action* and return the resulting state.

        Calls made while another action is being applied are queued and
        run in order once it is done.
        """
        self._pending.append(action)
        if self._dispatching:
            return self._state

        self._dispatching = True
        try:
            while self._pending:
                self._apply(self._pending.popleft())
        finally:
            self._dispatching = False
        return self._state

    # ── controls ─────────────────────────────────────────────────────

    def start(self) -> None:
        self.dispatch(Start())

    def pause(self) -> None:
        self.dispatch(Pause())

    def toggle(self) -> None:
        """Start when paused, pause when running."""
        self.dispatch(Pause() if self._state.is_running else Start())

    def reset(self) -> None:
        self.dispatch(Reset())

    def set_mode(self, mode: TimerMode) -> None:
        self.dispatch(SetMode(mode))

    def update_settings(self, **changes) -> None:
        self.dispatch(UpdateSettings(changes))

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL
    # ══════════════════════════════════════════════════════════════════

    def _apply(self, action: Action) -> None:
        old = self._state
        new, effects = reduce(old, action)
        self._state = new
        logger.debug("%s -> %s", type(action).__name__, new)

        self._sync_driver()

        if isinstance(action, Tick):
            self.tick.emit(new.time_left)
        if new != old:
            self.state_changed.emit(new)
        if new.settings != old.settings:
            self.settings_changed.emit(new.settings)
        if isinstance(action, Tick) and old.time_left == 0:
            self.interval_completed.emit(old.mode)
        for effect in effects:
            self.effect_requested.emit(effect)

    def _sync_driver(self) -> None:
        if self._state.is_running:
            if not self._qt_timer.isActive():
                self._qt_timer.start()
        elif self._qt_timer.isActive():
            self._qt_timer.stop()

    def _on_timeout(self) -> None:
        if not self._state.is_running:
            self._qt_timer.stop()
            return
        self.dispatch(Tick())
