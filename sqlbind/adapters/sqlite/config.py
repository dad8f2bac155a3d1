"""SQLite connection configuration."""

import sqlite3
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, Optional, TypedDict, cast

from typing_extensions import NotRequired

from sqlbind.adapters.sqlite.driver import SqliteConnection, SqliteDriver
from sqlbind.utils.logging import get_correlation_id, get_logger, set_correlation_id

if TYPE_CHECKING:
    from collections.abc import Generator

    from sqlbind.builder import BuilderConfig

__all__ = ("SqliteConfig", "SqliteConnectionParams")

logger = get_logger("adapters.sqlite.config")

MEMORY_DATABASE = ":memory:"


class SqliteConnectionParams(TypedDict, total=False):
    """SQLite connection parameters."""

    database: NotRequired[str]
    timeout: NotRequired[float]
    detect_types: NotRequired[int]
    isolation_level: "NotRequired[Optional[str]]"
    check_same_thread: NotRequired[bool]
    cached_statements: NotRequired[int]
    uri: NotRequired[bool]


class SqliteConfig:
    """Connection settings and session factory for :class:`SqliteDriver`.

    Every session opens its own connection and closes it on exit, so a
    configuration can be shared by callers in different threads.
    """

    __slots__ = ("builder_config", "connection_config")

    driver_type: "type[SqliteDriver]" = SqliteDriver

    def __init__(
        self,
        *,
        connection_config: "Optional[SqliteConnectionParams | dict[str, Any]]" = None,
        builder_config: "Optional[BuilderConfig]" = None,
    ) -> None:
        """Initialize SQLite configuration.

        Args:
            connection_config: Keyword arguments for :func:`sqlite3.connect`. A missing
                ``database`` opens an in-memory database.
            builder_config: Configuration for the statement builder of each session.
        """
        connection_config = dict(connection_config or {})
        connection_config.setdefault("database", MEMORY_DATABASE)
        connection_config.setdefault("isolation_level", None)
        database_path = str(connection_config["database"])
        if database_path.startswith("file:") and not connection_config.get("uri"):
            logger.debug("Database URI detected (%s) but uri=True not set, enabling URI mode", database_path)
            connection_config["uri"] = True
        self.connection_config = cast("SqliteConnectionParams", connection_config)
        self.builder_config = builder_config

    def __repr__(self) -> str:
        return f"{type(self).__name__}(connection_config={self.connection_config!r})"

    def create_connection(self) -> SqliteConnection:
        """Open a new SQLite connection."""
        return sqlite3.connect(**self.connection_config)  # type: ignore[arg-type]

    @contextmanager
    def provide_connection(self) -> "Generator[SqliteConnection, None, None]":
        connection = self.create_connection()
        try:
            yield connection
        finally:
            connection.close()

    @contextmanager
    def provide_session(self, correlation_id: Optional[str] = None) -> "Generator[SqliteDriver, None, None]":
        """Provide a SQLite driver session.

        Args:
            correlation_id: Attached to every record logged while the session is open.

        Yields:
            SqliteDriver: A driver bound to a fresh connection, closed on exit.
        """
        previous = get_correlation_id()
        if correlation_id is not None:
            set_correlation_id(correlation_id)
        try:
            with self.provide_connection() as connection:
                yield self.driver_type(connection=connection, builder_config=self.builder_config)
        finally:
            set_correlation_id(previous)
