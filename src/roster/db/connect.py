# roster/db/connect.py
"""Where the person database lives and how sessions are opened.

``ROSTER_DB_PATH`` names the database (a file path or a ``sqlite:`` URI).
Without it the database is ``roster.db`` inside ``ROSTER_DB_DIR``
(default ``~/roster``). Tables are created the first time an engine is
built for a URI.
"""

import os
from contextlib import contextmanager
from functools import lru_cache
from pathlib import Path
from typing import Callable, ContextManager, Iterator

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from roster.db.models import initialize_db, sqlite_engine
from roster.logging import get_logger

logger = get_logger(__file__)


def as_sqlite_uri(db_path: str | Path) -> str:
    db_uri = str(db_path)
    return db_uri if db_uri.startswith("sqlite") else f"sqlite:///{db_uri}"


def database_uri(file_path: str | Path | None = None) -> str:
    """Resolve the URI for ``file_path``, ``ROSTER_DB_PATH`` or the default file."""
    if file_path is None:
        file_path = os.getenv("ROSTER_DB_PATH")
    if file_path is None:
        db_dir = Path(os.getenv("ROSTER_DB_DIR") or Path.home() / "roster")
        db_dir.mkdir(parents=True, exist_ok=True)
        file_path = db_dir / "roster.db"
    return as_sqlite_uri(file_path)


@lru_cache(maxsize=None)
def engine_for(db_uri: str) -> Engine:
    logger.info("opening database %s", db_uri)
    return initialize_db(sqlite_engine(db_uri))


def make_session_factory(engine: Engine) -> Callable[[], ContextManager[Session]]:
    """Transactional session scopes bound to ``engine``.

    Each scope commits when its block finishes and rolls back if it raises.
    """
    initialize_db(engine)
    SessionLocal = sessionmaker(bind=engine)

    @contextmanager
    def session_scope() -> Iterator[Session]:
        with SessionLocal() as session:
            try:
                yield session
                session.commit()
            except Exception:
                session.rollback()
                raise

    return session_scope


@contextmanager
def get_session(file_path: str | Path | None = None) -> Iterator[Session]:
    with make_session_factory(engine_for(database_uri(file_path)))() as session:
        yield session


def get_session_dep() -> Iterator[Session]:
    """FastAPI dependency: one session per request, committed after the handler."""
    with get_session() as session:
        yield session
