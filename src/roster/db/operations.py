"""Database housekeeping behind ``roster db``."""

from pathlib import Path

from sqlalchemy import func, select, text
from sqlalchemy.engine import Engine

from roster.db.connect import database_uri, engine_for, get_session
from roster.db.models import Person
from roster.logging import get_logger

logger = get_logger(__file__)


def summary(file_path: str | Path | None = None) -> dict[str, object]:
    """Return the database URI, its SQLite version and the number of stored people."""
    db_uri = database_uri(file_path)
    with get_session(db_uri) as session:
        version = session.execute(text("SELECT sqlite_version()")).scalar_one()
        people = session.execute(select(func.count(Person.id))).scalar_one()
    logger.info("%s: sqlite %s, %s people", db_uri, version, people)
    return {"database": db_uri, "sqlite_version": version, "people": people}


def initialize(file_path: str | Path | None = None) -> Engine:
    """Create the person table if it is missing and return the engine."""
    engine = engine_for(database_uri(file_path))
    logger.info("initialized database at %s", engine.url)
    return engine
