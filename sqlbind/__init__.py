"""sqlbind: SQL statements from plain Python data."""

from sqlbind import adapters, builder, exceptions, typing, utils
from sqlbind.__metadata__ import __version__
from sqlbind.adapters.sqlite import SqliteConfig, SqliteConnectionParams, SqliteDriver
from sqlbind.builder import (
    BuilderConfig,
    StatementBuilder,
    alter,
    bind,
    build,
    create,
    delete,
    drop,
    insert,
    select,
    update,
    validate_statement,
)
from sqlbind.exceptions import (
    DatabaseError,
    MalformedQuerySpecError,
    NotFoundError,
    SQLBindError,
    SQLBuilderError,
    SQLParsingError,
    UnsupportedActionError,
)
from sqlbind.typing import ColumnSpec, QueryOptions, Rows, SqlScalar, SqlValue

__all__ = (
    "BuilderConfig",
    "ColumnSpec",
    "DatabaseError",
    "MalformedQuerySpecError",
    "NotFoundError",
    "QueryOptions",
    "Rows",
    "SQLBindError",
    "SQLBuilderError",
    "SQLParsingError",
    "SqlScalar",
    "SqlValue",
    "SqliteConfig",
    "SqliteConnectionParams",
    "SqliteDriver",
    "StatementBuilder",
    "UnsupportedActionError",
    "__version__",
    "adapters",
    "alter",
    "bind",
    "build",
    "builder",
    "create",
    "delete",
    "drop",
    "exceptions",
    "insert",
    "select",
    "typing",
    "update",
    "utils",
    "validate_statement",
)
