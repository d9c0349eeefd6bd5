import os

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine

from roster.logging import get_logger

from .base import Base

logger = get_logger(__file__)


def sqlite_engine(db_uri: str) -> Engine:
    """Engine for a SQLite URI, shareable across the API's worker threads.

    With ``ROSTER_SQL_TRACE`` set every statement is logged before it runs.
    """
    engine = create_engine(db_uri, connect_args={"check_same_thread": False})

    if os.getenv("ROSTER_SQL_TRACE"):

        @event.listens_for(engine, "before_cursor_execute")
        def trace(conn, cursor, statement, parameters, context, executemany):
            logger.info("%s %r", statement, parameters)

    return engine


def initialize_db(engine: Engine) -> Engine:
    Base.metadata.create_all(bind=engine)
    return engine
