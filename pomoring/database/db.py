"""Database connection, session management and the key-value store."""

import os
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path

from sqlalchemy import create_engine, select
from sqlalchemy.orm import sessionmaker, Session as OrmSession

from .models import Base, Preference

# ── paths ────────────────────────────────────────────────────────────────────

APP_SUPPORT_DIR = Path.home() / ".local" / "share" / "PomoRing"
DB_PATH = APP_SUPPORT_DIR / "pomoring.db"

DB_URL_ENV = "POMORING_DB_URL"

# ── engine & session factory (created lazily) ─────────────────────────────

_engine = None
_SessionFactory = None


def _get_engine():
    global _engine
    if _engine is None:
        url = os.environ.get(DB_URL_ENV)
        if url is None:
            APP_SUPPORT_DIR.mkdir(parents=True, exist_ok=True)
            url = f"sqlite:///{DB_PATH}"
        _engine = create_engine(
            url,
            connect_args={"check_same_thread": False},
            echo=False,
        )
    return _engine


def _get_session_factory():
    global _SessionFactory
    if _SessionFactory is None:
        _SessionFactory = sessionmaker(bind=_get_engine(), expire_on_commit=False)
    return _SessionFactory


# ── public API ────────────────────────────────────────────────────────────


def configure_engine(url: str) -> None:
    """Override the database connection URL.  Used by tests to point at
    an in-memory SQLite database instead of the real one on disk."""
    global _engine, _SessionFactory
    _SessionFactory = None
    _engine = create_engine(
        url,
        connect_args={"check_same_thread": False},
        echo=False,
    )


def init_db() -> None:
    """Create all tables."""
    Base.metadata.create_all(_get_engine())


@contextmanager
def get_session():
    """Yield a SQLAlchemy session; commit on success, rollback on error."""
    factory = _get_session_factory()
    session: OrmSession = factory()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def get_value(key: str) -> str | None:
    """Stored text for *key*, or None when nothing was saved yet."""
    with get_session() as db:
        return db.scalar(select(Preference.value).where(Preference.key == key))


def set_value(key: str, value: str) -> None:
    """Insert or overwrite the text stored under *key*."""
    with get_session() as db:
        record = db.scalar(select(Preference).where(Preference.key == key))
        if record is None:
            db.add(Preference(key=key, value=value))
        else:
            record.value = value
            record.updated_at = datetime.utcnow()
