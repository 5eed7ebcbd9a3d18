"""Shared pytest fixtures for PomoRing tests."""

import os
import sys

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication

from pomoring.database.db import configure_engine, init_db
from pomoring.timer.engine import TimerEngine
from pomoring.timer.state import TimerSettings


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication instance shared across the entire test run."""
    app = QApplication.instance() or QApplication(sys.argv)
    yield app


@pytest.fixture(autouse=True)
def test_db():
    """Point every test at a fresh in-memory SQLite database."""
    configure_engine("sqlite:///:memory:")
    init_db()
    yield


@pytest.fixture
def engine(qapp):
    """Fresh TimerEngine with default settings."""
    return TimerEngine(parent=None)


@pytest.fixture
def engine_manual(qapp):
    """TimerEngine that never auto-starts and stays silent."""
    settings = TimerSettings(
        auto_start_breaks=False,
        auto_start_pomodoros=False,
        sound_enabled=False,
    )
    return TimerEngine(parent=None, settings=settings)
