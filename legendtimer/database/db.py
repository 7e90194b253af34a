"""Database connection and session management."""

import os
from pathlib import Path
from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session as OrmSession

from .models import Base

# ── paths ────────────────────────────────────────────────────────────────────

APP_SUPPORT_DIR = Path.home() / ".legendtimer"
DB_PATH = APP_SUPPORT_DIR / "legendtimer.db"

# Full SQLAlchemy URL; overrides DB_PATH when set.
DB_URL_ENV = "LEGENDTIMER_DB"

# ── engine & session factory (created lazily) ─────────────────────────────

_engine = None
_SessionFactory = None


def _connect_args(url: str) -> dict:
    # Only the sqlite driver accepts check_same_thread.
    if url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


def _get_engine():
    global _engine
    if _engine is None:
        url = os.environ.get(DB_URL_ENV)
        if not url:
            APP_SUPPORT_DIR.mkdir(parents=True, exist_ok=True)
            url = f"sqlite:///{DB_PATH}"
        _engine = create_engine(
            url,
            connect_args=_connect_args(url),
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
        connect_args=_connect_args(url),
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
