"""Core application modules."""

from bloglist.db.database import Database, get_database, get_session

__all__ = [
    "Database",
    "get_database",
    "get_session",
]
