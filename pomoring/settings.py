"""Timer settings persistence.

The settings record is JSON text stored in the preferences table under
``SETTINGS_KEY``.  Keys use the camelCase names of the original record::

    {"workDuration": 25, "shortBreakDuration": 5, "longBreakDuration": 15,
     "autoStartBreaks": true, "autoStartPomodoros": true,
     "soundEnabled": true}

Usage::

    settings = load_settings()
    save_settings(settings)

Decoding is all-or-nothing: if any of the six fields is missing, has the
wrong type or is out of range, the whole record is replaced by
``DEFAULT_SETTINGS``.
"""

from __future__ import annotations

import json
import logging

from sqlalchemy.exc import SQLAlchemyError

from .database.db import get_value, set_value
from .timer.state import DEFAULT_SETTINGS, TimerSettings, is_valid_value


logger = logging.getLogger(__name__)

SETTINGS_KEY = "timerSettings"

# field name → key in the stored record
RECORD_KEYS: dict[str, str] = {
    "work_duration": "workDuration",
    "short_break_duration": "shortBreakDuration",
    "long_break_duration": "longBreakDuration",
    "auto_start_breaks": "autoStartBreaks",
    "auto_start_pomodoros": "autoStartPomodoros",
    "sound_enabled": "soundEnabled",
}


# ── codec ─────────────────────────────────────────────────────────────────


def encode(settings: TimerSettings) -> str:
    """Serialise all six fields to JSON text."""
    return json.dumps(
        {key: getattr(settings, name) for name, key in RECORD_KEYS.items()}
    )


def decode(raw: str | bytes | None) -> TimerSettings:
    """Parse a stored record, falling back to defaults on any problem."""
    if not raw:
        return DEFAULT_SETTINGS
    try:
        data = json.loads(raw)
    except (TypeError, ValueError, RecursionError):
        return DEFAULT_SETTINGS
    if not isinstance(data, dict):
        return DEFAULT_SETTINGS

    values = {}
    for name, key in RECORD_KEYS.items():
        if key not in data or not is_valid_value(name, data[key]):
            return DEFAULT_SETTINGS
        values[name] = data[key]
    return TimerSettings(**values)


# ── store ─────────────────────────────────────────────────────────────────


def load_settings() -> TimerSettings:
    """Read settings from the database, falling back to defaults."""
    try:
        raw = get_value(SETTINGS_KEY)
    except SQLAlchemyError:
        logger.exception("Could not read settings; using defaults")
        return DEFAULT_SETTINGS
    return decode(raw)


def save_settings(settings: TimerSettings) -> None:
    """Persist settings.  Failures are logged and otherwise ignored."""
    try:
        set_value(SETTINGS_KEY, encode(settings))
    except SQLAlchemyError:
        logger.exception("Could not save settings")
