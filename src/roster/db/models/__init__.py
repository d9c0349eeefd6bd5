# Models package: re-exports the declarative base, the Person model and engine helpers
from .base import Base, TimestampMixin
from .person import Person
from .engine import sqlite_engine, initialize_db

__all__ = [
    "Base",
    "TimestampMixin",
    "Person",
    "sqlite_engine",
    "initialize_db",
]
