"""Migration environment for the roster database.

The target comes from, in order: a connection or engine placed in
``config.attributes["connection"]``, ``ROSTER_DB_PATH``, the ini's
``sqlalchemy.url``, and finally the default database file.
"""

import os
from contextlib import nullcontext
from logging.config import fileConfig
from pathlib import Path

from alembic import context
from sqlalchemy import create_engine, pool
from sqlalchemy.engine import Engine

from roster.db.connect import database_uri
from roster.db.models import Base

config = context.config
if config.config_file_name and Path(config.config_file_name).exists():
    fileConfig(config.config_file_name, disable_existing_loggers=False)

OPTIONS = {"target_metadata": Base.metadata, "compare_type": True, "render_as_batch": True}


def database_url() -> str:
    if os.getenv("ROSTER_DB_PATH"):
        return database_uri()
    return config.get_main_option("sqlalchemy.url") or database_uri()


def connection_scope():
    supplied = config.attributes.get("connection")
    if isinstance(supplied, Engine):
        return supplied.begin()
    if supplied is not None:
        return nullcontext(supplied)
    return create_engine(database_url(), poolclass=pool.NullPool).connect()


if context.is_offline_mode():
    context.configure(url=database_url(), literal_binds=True, **OPTIONS)
    with context.begin_transaction():
        context.run_migrations()
else:
    with connection_scope() as connection:
        context.configure(connection=connection, **OPTIONS)
        with context.begin_transaction():
            context.run_migrations()
