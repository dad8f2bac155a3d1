"""SQL statement builder.

Clause formatters, the binder and value coercion are exposed for callers
that need a single fragment; most code only needs the statement functions.
"""

from sqlbind.builder._binder import MISSING, PLACEHOLDER, bind
from sqlbind.builder._clauses import columns_of, join, keys, select_clause, set_clause, values, where
from sqlbind.builder._schema import column_definition
from sqlbind.builder._statement import (
    QUERY_ACTIONS,
    SCHEMA_ACTIONS,
    BuilderConfig,
    StatementBuilder,
    alter,
    build,
    create,
    default_builder,
    delete,
    drop,
    insert,
    select,
    update,
)
from sqlbind.builder._validation import validate_statement
from sqlbind.builder._values import NULL, format_value, specifier, sqlvalue

__all__ = (
    "MISSING",
    "NULL",
    "PLACEHOLDER",
    "QUERY_ACTIONS",
    "SCHEMA_ACTIONS",
    "BuilderConfig",
    "StatementBuilder",
    "alter",
    "bind",
    "build",
    "column_definition",
    "columns_of",
    "create",
    "default_builder",
    "delete",
    "drop",
    "format_value",
    "insert",
    "join",
    "keys",
    "select",
    "select_clause",
    "set_clause",
    "specifier",
    "sqlvalue",
    "update",
    "validate_statement",
    "values",
    "where",
)
