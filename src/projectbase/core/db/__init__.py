"""Database utilities - datastore handle, upserts, schema creation."""

from src.projectbase.core.db.engine import Datastore
from src.projectbase.core.db.schema import create_all_tables
from src.projectbase.core.db.upsert import dialect_insert

__all__ = [
    "Datastore",
    "create_all_tables",
    "dialect_insert",
]
