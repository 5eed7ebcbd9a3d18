"""Database package."""

from .db import configure_engine, get_session, get_value, init_db, set_value
from .models import Preference

__all__ = [
    "configure_engine",
    "get_session",
    "get_value",
    "init_db",
    "set_value",
    "Preference",
]
