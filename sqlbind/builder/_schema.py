"""Schema statements: ``create table`` and ``drop table``.

Column definitions accept a few shorthands::

    create("todos", {
        "id": True,                                   # integer primary key not null
        "title": "text",
        "created": ["int", "not", "null"],
        "project": {"type": "text", "reference": "projects.name", "on_delete": "cascade"},
    })

Altering an existing table is not supported.
"""

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from sqlbind.builder._values import format_value
from sqlbind.exceptions import MalformedQuerySpecError, UnsupportedActionError

if TYPE_CHECKING:
    from sqlbind.typing import SchemaSpec

__all__ = ("alter", "column_definition", "create", "drop")

RESERVED_SCHEMA_KEYS = frozenset({"ensure"})
PRIMARY_KEY_SHORTHAND = {"type": "integer", "primary": True, "required": True}

_ACTIONS = {
    "cascade": "cascade",
    "null": "set null",
    "set null": "set null",
    "default": "set default",
    "set default": "set default",
    "restrict": "restrict",
    "no action": "no action",
}


def _reference(column: str, value: str) -> str:
    table, sep, target = value.partition(".")
    if not sep or not table or not target:
        msg = f"Reference for {column!r} must look like 'table.column', got {value!r}"
        raise MalformedQuerySpecError(msg, clause="create")
    return f"references {table}({target})"


def _on_action(column: str, event: str, action: str) -> str:
    try:
        return f"on {event} {_ACTIONS[action.lower()]}"
    except KeyError:
        msg = f"Unknown on {event} action {action!r} for {column!r}"
        raise MalformedQuerySpecError(msg, clause="create") from None


def column_definition(column: str, definition: Any, escape_quotes: bool = True) -> str:
    """Render one column definition of a ``create table`` statement.

    Args:
        column: Column name.
        definition: Type string, ``True``, list of words, or a mapping with
            ``type``, ``primary``, ``required``, ``unique``, ``default``,
            ``reference``, ``on_update`` and ``on_delete``.
        escape_quotes: Double embedded single quotes in a string ``default``.

    Raises:
        MalformedQuerySpecError: When the definition has an unknown shape.

    Returns:
        The definition text, starting with the column name.
    """
    if definition is True:
        definition = PRIMARY_KEY_SHORTHAND
    if isinstance(definition, str) and definition:
        return f"{column} {definition}"
    if isinstance(definition, (list, tuple)) and definition:
        return " ".join([column, *(str(word) for word in definition)])
    if not isinstance(definition, Mapping):
        msg = f"Unsupported definition of type {type(definition).__name__!r} for {column!r}"
        raise MalformedQuerySpecError(msg, clause="create")

    parts = [column, str(definition.get("type", "text"))]
    if definition.get("primary"):
        parts.append("primary key")
    if definition.get("required"):
        parts.append("not null")
    if definition.get("unique"):
        parts.append("unique")
    if "default" in definition:
        parts.append(f"default {format_value(definition['default'], escape_quotes)}")
    if definition.get("reference"):
        parts.append(_reference(column, definition["reference"]))
        if definition.get("on_update"):
            parts.append(_on_action(column, "update", definition["on_update"]))
        if definition.get("on_delete"):
            parts.append(_on_action(column, "delete", definition["on_delete"]))
    return " ".join(parts)


def create(name: str, schema: "SchemaSpec", escape_quotes: bool = True) -> str:
    """Format a ``create table`` statement.

    ``schema["ensure"]`` (default ``True``) adds ``if not exists``.
    """
    if not isinstance(schema, Mapping):
        msg = "A table schema must be a mapping of column to definition"
        raise MalformedQuerySpecError(msg, clause="create")
    columns = sorted(column for column in schema if column not in RESERVED_SCHEMA_KEYS)
    if not columns:
        msg = f"Table {name!r} needs at least one column"
        raise MalformedQuerySpecError(msg, clause="create")
    ensure = schema.get("ensure", True)
    definitions = ", ".join(column_definition(column, schema[column], escape_quotes) for column in columns)
    return "create table {}{}({})".format("if not exists " if ensure else "", name, definitions)


def drop(name: str) -> str:
    return f"drop table {name}"


def alter(name: str, *_: Any, **__: Any) -> str:
    msg = f"Altering table {name!r} is not supported"
    raise UnsupportedActionError("alter", msg)
