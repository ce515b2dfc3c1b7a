"""
Engine and session management for the finance database.

One engine per process, created lazily from settings. ``init_db_with_path``
and ``reset_database`` swap it out when the data directory changes or a
test needs a fresh database.
"""

import logging
from pathlib import Path
from typing import Generator, Optional

from sqlalchemy import create_engine, make_url, Engine
from sqlalchemy.orm import sessionmaker, Session, declarative_base

from finance_app.config.settings import get_settings

logger = logging.getLogger(__name__)

Base = declarative_base()

_engine: Optional[Engine] = None
_session_factory: Optional[sessionmaker] = None


def _build_engine(database_url: str) -> Engine:
    connect_args = {}
    if make_url(database_url).get_backend_name() == "sqlite":
        # Request threads differ from the thread that opened the connection
        connect_args["check_same_thread"] = False
    return create_engine(database_url, connect_args=connect_args, echo=False)


def _bind(database_url: str) -> Engine:
    global _engine, _session_factory
    _engine = _build_engine(database_url)
    _session_factory = sessionmaker(autocommit=False, autoflush=False, bind=_engine)
    return _engine


def _create_tables(engine: Engine) -> None:
    from finance_app.repositories.sqlalchemy import orm_models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    logger.info("Database ready (%d tables) at %s", len(Base.metadata.tables), engine.url)


def get_engine() -> Engine:
    """Return the process engine, binding it from settings on first use."""
    if _engine is None:
        return _bind(get_settings().get_database_url())
    return _engine


def get_session_factory() -> sessionmaker:
    if _session_factory is None:
        get_engine()
    return _session_factory


def get_db() -> Generator[Session, None, None]:
    """FastAPI dependency: one session per request, always closed."""
    db = get_session_factory()()
    try:
        yield db
    finally:
        db.close()


def get_session() -> Session:
    """Open a session outside a request. The caller closes it."""
    return get_session_factory()()


def init_db() -> None:
    """Create any missing tables in the configured database."""
    _create_tables(get_engine())


def init_db_with_path(db_path: Path) -> None:
    """Point the app at a SQLite file and create its tables."""
    reset_database()
    _create_tables(_bind(f"sqlite:///{db_path}"))


def reset_database() -> None:
    """Dispose the engine so the next use rebinds from settings."""
    global _engine, _session_factory
    if _engine is not None:
        _engine.dispose()
    _engine = None
    _session_factory = None
