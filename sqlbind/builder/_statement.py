"""Statement assembly.

Composes clause fragments into one statement string::

    >>> select("todo", where={"id": 1})
    'select * from todo where id = 1'
    >>> update("todo", where={"id": 1}, set={"date": 2021})
    'update todo set date = 2021 where id = 1'
"""

from dataclasses import dataclass
import logging
from typing import TYPE_CHECKING, Any, Callable, Optional

from mypy_extensions import mypyc_attr

from sqlbind.builder import _schema
from sqlbind.builder._clauses import join, keys, select_clause, set_clause, values, where
from sqlbind.builder._validation import validate_statement
from sqlbind.exceptions import MalformedQuerySpecError, UnsupportedActionError
from sqlbind.utils.logging import get_logger, log_with_context

if TYPE_CHECKING:
    from collections.abc import Mapping

    from sqlbind.typing import QueryOptions, SchemaSpec

__all__ = (
    "QUERY_ACTIONS",
    "SCHEMA_ACTIONS",
    "BuilderConfig",
    "StatementBuilder",
    "alter",
    "build",
    "create",
    "default_builder",
    "delete",
    "drop",
    "insert",
    "select",
    "update",
)

logger = get_logger("builder")

QUERY_ACTIONS = ("select", "insert", "update", "delete")
SCHEMA_ACTIONS = ("create", "alter", "drop")


@dataclass(frozen=True)
class BuilderConfig:
    """Options shared by every statement a builder produces.

    Attributes:
        named: Default for the ``named`` option of insert statements.
        escape_quotes: Double embedded single quotes in string literals.
        validate: Parse every built statement with sqlglot before returning it.
        dialect: sqlglot dialect used by ``validate``.
    """

    named: bool = True
    escape_quotes: bool = True
    validate: bool = False
    dialect: str = "sqlite"


@mypyc_attr(allow_interpreted_subclasses=True)
class StatementBuilder:
    """Builds SQL statements from table names and query options."""

    __slots__ = ("config",)

    def __init__(self, config: Optional[BuilderConfig] = None) -> None:
        self.config = config or BuilderConfig()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(config={self.config!r})"

    def _lead(self, action: str, table: str, options: "Mapping[str, Any]") -> str:
        if action == "insert":
            return f"insert into {table}"
        if action == "delete":
            return f"delete from {table}"
        if action == "update":
            return f"update {table}"
        return select_clause(options.get("select"), table)

    def _finish(self, action: str, table: str, sql: str) -> str:
        if self.config.validate:
            validate_statement(sql, self.config.dialect)
        log_with_context(
            logger, logging.DEBUG, "Built %s statement for %s: %s", action, table, sql, action=action, table=table
        )
        return sql

    def build(self, action: str, table: str, options: "Optional[QueryOptions | SchemaSpec]" = None, **kwargs: Any) -> str:
        """Build one statement.

        Args:
            action: ``select``, ``insert``, ``update``, ``delete``, ``create``, ``alter`` or ``drop``.
            table: Table name.
            options: Query options, or the table schema for ``create``.
            **kwargs: Options merged over ``options``.

        Raises:
            MalformedQuerySpecError: When the table name or an option has the wrong shape.
            UnsupportedActionError: For ``alter`` and unknown actions.

        Returns:
            The statement text.
        """
        if not isinstance(table, str) or not table:
            msg = f"Table name must be a non-empty string, got {table!r}"
            raise MalformedQuerySpecError(msg)
        merged: dict[str, Any] = {**(options or {}), **kwargs}

        if action in SCHEMA_ACTIONS:
            return self._finish(action, table, self._schema_statement(action, table, merged))
        if action not in QUERY_ACTIONS:
            raise UnsupportedActionError(action)

        named = merged.get("named")
        if named is None:
            named = self.config.named
        escape = self.config.escape_quotes
        join_fragment = join(merged.get("join"), table)
        fragments = (
            self._lead(action, table, merged),
            join_fragment,
            keys(merged.get("values"), named),
            values(merged.get("values"), named),
            set_clause(merged.get("set"), escape),
            where(merged.get("where"), table, qualify=join_fragment is not None, escape_quotes=escape),
        )
        return self._finish(action, table, " ".join(fragment for fragment in fragments if fragment))

    def _schema_statement(self, action: str, table: str, schema: "SchemaSpec") -> str:
        if action == "create":
            return _schema.create(table, schema, escape_quotes=self.config.escape_quotes)
        if action == "drop":
            return _schema.drop(table)
        return _schema.alter(table, schema)

    def select(self, table: str, options: "Optional[QueryOptions]" = None, **kwargs: Any) -> str:
        return self.build("select", table, options, **kwargs)

    def insert(self, table: str, options: "Optional[QueryOptions]" = None, **kwargs: Any) -> str:
        return self.build("insert", table, options, **kwargs)

    def update(self, table: str, options: "Optional[QueryOptions]" = None, **kwargs: Any) -> str:
        return self.build("update", table, options, **kwargs)

    def delete(self, table: str, options: "Optional[QueryOptions]" = None, **kwargs: Any) -> str:
        return self.build("delete", table, options, **kwargs)

    def create(self, table: str, schema: "Optional[SchemaSpec]" = None, **kwargs: Any) -> str:
        return self.build("create", table, schema, **kwargs)

    def alter(self, table: str, schema: "Optional[SchemaSpec]" = None, **kwargs: Any) -> str:
        return self.build("alter", table, schema, **kwargs)

    def drop(self, table: str) -> str:
        return self.build("drop", table)


default_builder = StatementBuilder()

build: "Callable[..., str]" = default_builder.build
select: "Callable[..., str]" = default_builder.select
insert: "Callable[..., str]" = default_builder.insert
update: "Callable[..., str]" = default_builder.update
delete: "Callable[..., str]" = default_builder.delete
create: "Callable[..., str]" = default_builder.create
alter: "Callable[..., str]" = default_builder.alter
drop: "Callable[..., str]" = default_builder.drop
