import logging
import sqlite3
from collections.abc import Mapping, Sequence
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, Optional, Union

from sqlbind.builder import BuilderConfig, StatementBuilder
from sqlbind.exceptions import DatabaseError, MalformedQuerySpecError, NotFoundError
from sqlbind.utils.logging import get_logger, log_with_context

if TYPE_CHECKING:
    from collections.abc import Generator

    from sqlbind.typing import ColumnSpec, QueryOptions, Row, Rows, SchemaSpec, StatementParameters

__all__ = ("SqliteConnection", "SqliteCursor", "SqliteDriver")

logger = get_logger("adapters.sqlite")

SqliteConnection = sqlite3.Connection


def _coerce(value: Any) -> Any:
    if isinstance(value, bool):
        return int(value)
    return value


def _coerce_row(row: "Mapping[str, Any]") -> "dict[str, Any]":
    return {key: _coerce(value) for key, value in row.items()}


def _parameter_sets(params: "StatementParameters") -> "list[Any]":
    """Split ``eval`` parameters into one binding per execution.

    A list whose first item is a mapping runs once per mapping; any other list
    is bound positionally in a single execution.
    """
    if params is None:
        return [()]
    if isinstance(params, Mapping):
        return [_coerce_row(params)]
    if isinstance(params, Sequence) and not isinstance(params, (str, bytes)):
        if params and isinstance(params[0], Mapping):
            return [_coerce_row(item) for item in params]
        return [tuple(_coerce(value) for value in params)]
    return [(_coerce(params),)]



class SqliteCursor:
    """Context manager for SQLite cursor management."""

    def __init__(self, connection: "SqliteConnection") -> None:
        self.connection = connection
        self.cursor: Optional[sqlite3.Cursor] = None

    def __enter__(self) -> "sqlite3.Cursor":
        self.cursor = self.connection.cursor()
        return self.cursor

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        if self.cursor is not None:
            self.cursor.close()


class SqliteDriver:
    """CRUD operations on a SQLite connection, using built statements.

    Statements come from a :class:`~sqlbind.builder.StatementBuilder`; row
    values for inserts travel as named parameters while ``where`` and ``set``
    values are rendered as literals by the builder.
    """

    dialect = "sqlite"

    def __init__(self, connection: "SqliteConnection", builder_config: "Optional[BuilderConfig]" = None) -> None:
        self.connection = connection
        self.builder = StatementBuilder(builder_config)
        self._in_transaction = False

    def with_cursor(self, connection: "SqliteConnection") -> "SqliteCursor":
        return SqliteCursor(connection)

    @contextmanager
    def handle_database_exceptions(self) -> "Generator[None, None, None]":
        """Wrap ``sqlite3`` errors in :class:`~sqlbind.exceptions.DatabaseError`."""
        try:
            yield
        except sqlite3.Error as e:
            logger.warning("SQLite database error: %s", e, exc_info=True)
            msg = f"SQLite database error: {e}"
            raise DatabaseError(msg) from e

    @staticmethod
    def _fetch(cursor: "sqlite3.Cursor") -> "Optional[list[dict[str, Any]]]":
        if cursor.description is None:
            return None
        column_names = [col[0] for col in cursor.description]
        return [dict(zip(column_names, row)) for row in cursor.fetchall()]

    def eval(self, statement: str, params: "StatementParameters" = None) -> "Union[list[dict[str, Any]], bool]":
        """Evaluate a statement.

        Args:
            statement: SQL statement.
            params: A scalar bound to a single ``?``, a list of values bound to
                ``?`` placeholders in order, a mapping bound by name, or a list
                of mappings executed once each.

        Raises:
            DatabaseError: When SQLite rejects the statement.

        Returns:
            The rows of a row-returning statement, otherwise ``True``.
        """
        parameter_sets = _parameter_sets(params)
        log_with_context(logger, logging.DEBUG, "Executing: %s", statement, executions=len(parameter_sets))
        rows: Optional[list[dict[str, Any]]] = None
        with self.handle_database_exceptions(), self.with_cursor(self.connection) as cursor:
            for parameters in parameter_sets:
                cursor.execute(statement, parameters)
                fetched = self._fetch(cursor)
                if fetched is not None:
                    rows = [*(rows or []), *fetched]
            if not self._in_transaction and self.connection.in_transaction:
                self.connection.commit()
        return True if rows is None else rows

    def execute(self, statement: str) -> bool:
        """Execute one or more statements without returning rows."""
        logger.debug("Executing script: %s", statement)
        with self.handle_database_exceptions():
            self.connection.executescript(statement)
        return True

    def exists(self, table: str) -> bool:
        result = self.eval("select name from sqlite_master where name = ?", table)
        return isinstance(result, list) and bool(result)

    def schema(self, table: str) -> "dict[str, dict[str, Any]]":
        """Describe the columns of ``table``; empty when the table does not exist."""
        info = self.eval(f"pragma table_info({table})")
        return {
            column["name"]: {
                "cid": column["cid"],
                "required": column["notnull"] == 1,
                "primary": column["pk"] == 1,
                "type": column["type"].lower(),
                "default": column["dflt_value"],
            }
            for column in (info if isinstance(info, list) else [])
        }

    def count(self, table: str) -> int:
        if not self.exists(table):
            return 0
        rows = self.eval(f"select count(*) as total from {table}")
        return int(rows[0]["total"]) if isinstance(rows, list) and rows else 0

    def create(self, table: str, schema: "SchemaSpec") -> bool:
        statement = self.builder.create(table, schema)
        if " references " in statement:
            self.execute("pragma foreign_keys = ON")
        return bool(self.eval(statement))

    def drop(self, table: str) -> bool:
        return bool(self.eval(self.builder.drop(table)))

    def insert(self, table: str, rows: "Rows") -> Optional[int]:
        """Insert one row or several rows in a single transaction.

        Raises:
            MalformedQuerySpecError: When no rows are given.

        Returns:
            The rowid of the last inserted row.
        """
        items: Sequence[Row] = [rows] if isinstance(rows, Mapping) else rows
        if not items:
            msg = f"No rows to insert into {table!r}"
            raise MalformedQuerySpecError(msg, clause="values")
        last_rowid: Optional[int] = None
        with self.transaction(), self.handle_database_exceptions(), self.with_cursor(self.connection) as cursor:
            for row in items:
                cursor.execute(self.builder.insert(table, values=row), _coerce_row(row))
                last_rowid = cursor.lastrowid
        logger.debug("Inserted %d row(s) into %s", len(items), table)
        return last_rowid

    def update(
        self,
        table: str,
        specs: "Optional[Union[QueryOptions, Sequence[QueryOptions]]]" = None,
        *,
        where: "Optional[ColumnSpec]" = None,
        set: "Optional[ColumnSpec]" = None,  # noqa: A002
    ) -> bool:
        """Update rows matching ``where``, or insert ``where`` and ``set`` as a new row when none match.

        Args:
            table: Table name.
            specs: One ``{"where": ..., "set": ...}`` description or a list of them,
                applied in a single transaction. ``values`` is accepted in place of ``set``.
            where: Filter used when ``specs`` is not given.
            set: Assignments used when ``specs`` is not given.

        Returns:
            ``True`` when at least one description carried assignments.
        """
        if specs is None:
            items: Sequence[QueryOptions] = [{"where": where or {}, "set": set or {}}]
        else:
            items = [specs] if isinstance(specs, Mapping) else specs
        changes = [(item.get("where"), item.get("set") or item.get("values")) for item in items]
        changes = [(spec_where, assignments) for spec_where, assignments in changes if assignments]
        if not changes:
            return False
        with self.transaction():
            for spec_where, assignments in changes:
                if self.select(table, where=spec_where):
                    self.eval(self.builder.update(table, where=spec_where, set=assignments))
                    continue
                logger.debug("No row in %s matches %r, inserting instead", table, spec_where)
                self.insert(table, {**(spec_where or {}), **assignments})  # type: ignore[dict-item]
        return True

    def delete(self, table: str, where: "Optional[Union[ColumnSpec, Sequence[ColumnSpec]]]" = None) -> bool:
        """Delete rows matching ``where``, or every row when ``where`` is omitted.

        A list of filters is applied in a single transaction; each item may
        also be wrapped as ``{"where": {...}}``.
        """
        if where is None or isinstance(where, Mapping):
            return bool(self.eval(self.builder.delete(table, where=where)))
        with self.transaction():
            for item in where:
                spec_where = item["where"] if isinstance(item.get("where"), Mapping) else item
                self.eval(self.builder.delete(table, where=spec_where))
        return True

    def select(self, table: str, options: "Optional[QueryOptions]" = None, **kwargs: Any) -> "list[dict[str, Any]]":
        result = self.eval(self.builder.select(table, options, **kwargs))
        return result if isinstance(result, list) else []

    def get_one(self, table: str, where: "ColumnSpec") -> "dict[str, Any]":
        """Return the first row matching ``where``.

        Raises:
            NotFoundError: When no row matches.
        """
        rows = self.select(table, where=where)
        if not rows:
            msg = f"No row in {table!r} matches {dict(where)!r}"
            raise NotFoundError(msg)
        return rows[0]

    def begin(self) -> None:
        """Begin a database transaction."""
        with self.handle_database_exceptions():
            self.connection.execute("BEGIN")
        self._in_transaction = True

    def rollback(self) -> None:
        """Rollback the current transaction."""
        with self.handle_database_exceptions():
            self.connection.rollback()
        self._in_transaction = False

    def commit(self) -> None:
        """Commit the current transaction."""
        with self.handle_database_exceptions():
            self.connection.commit()
        self._in_transaction = False

    @contextmanager
    def transaction(self) -> "Generator[None, None, None]":
        """Run the block in a transaction, joining an already open one."""
        if self._in_transaction:
            yield
            return
        self.begin()
        try:
            yield
        except BaseException:
            self.rollback()
            raise
        self.commit()
