"""SQLite adapter for sqlbind."""

from sqlbind.adapters.sqlite.config import SqliteConfig, SqliteConnectionParams
from sqlbind.adapters.sqlite.driver import SqliteConnection, SqliteCursor, SqliteDriver

__all__ = ("SqliteConfig", "SqliteConnection", "SqliteConnectionParams", "SqliteCursor", "SqliteDriver")
