"""Clause formatters.

Each formatter renders one clause of a statement from plain Python data and
returns ``None`` when the clause is absent, so the assembler can skip it
without leaving a stray keyword behind.
"""

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Optional

from sqlbind.builder._binder import bind
from sqlbind.exceptions import MalformedQuerySpecError
from sqlbind.utils.type_guards import is_disjunction, is_row, is_row_sequence, is_scalar

if TYPE_CHECKING:
    from collections.abc import Sequence

    from sqlbind.typing import ColumnSpec, JoinSpec, Row, Rows

__all__ = ("columns_of", "join", "keys", "select_clause", "set_clause", "values", "where")


def columns_of(defs: "Rows") -> "list[str]":
    """Return the sorted column names of a row, or of the first of several rows.

    Raises:
        MalformedQuerySpecError: When ``defs`` is neither a row nor a sequence of rows.
    """
    row: Row
    if is_row(defs):
        row = defs
    elif is_row_sequence(defs):
        row = defs[0]
    else:
        msg = f"Expected a row mapping or a list of row mappings, got {type(defs).__name__!r}"
        raise MalformedQuerySpecError(msg, clause="values")
    return sorted(row)


def keys(defs: "Optional[Rows]", named: bool = True) -> Optional[str]:
    """Format the ``(col1, col2)`` column list of an insert."""
    if not defs or not named:
        return None
    columns = columns_of(defs)
    if not columns:
        return None
    return "({})".format(", ".join(columns))


def values(defs: "Optional[Rows]", named: bool = True) -> Optional[str]:
    """Format the ``values(:col1, :col2)`` named placeholder list of an insert."""
    if not defs or not named:
        return None
    columns = columns_of(defs)
    if not columns:
        return None
    return "values({})".format(", ".join(f":{column}" for column in columns))


def set_clause(defs: "Optional[ColumnSpec]", escape_quotes: bool = True) -> Optional[str]:
    if defs is None:
        return None
    if not isinstance(defs, Mapping) or not defs:
        msg = "Expected a non-empty mapping of column to value"
        raise MalformedQuerySpecError(msg, clause="set")
    return "set " + bind(kv=defs, escape_quotes=escape_quotes)  # type: ignore[arg-type]


def where(
    defs: "Optional[ColumnSpec]",
    name: Optional[str] = None,
    qualify: bool = False,
    escape_quotes: bool = True,
) -> Optional[str]:
    """Format the ``where`` clause of a statement.

    Scalar values become ``key = value`` predicates and list values become a
    parenthesized ``or`` group over the same key. Scalar predicates come first,
    then the ``or`` groups; each group is ordered by key.

    Args:
        defs: Column to value mapping.
        name: Table name used to qualify keys.
        qualify: Prefix every key with ``<name>.``, used when the statement joins.
        escape_quotes: Double embedded single quotes in string values.

    Raises:
        MalformedQuerySpecError: When a value is neither a scalar nor a list.

    Returns:
        The clause text, or ``None`` when there is nothing to filter on.
    """
    if defs is None:
        return None
    if not isinstance(defs, Mapping):
        msg = f"Expected a mapping of column to value, got {type(defs).__name__!r}"
        raise MalformedQuerySpecError(msg, clause="where")
    if not defs:
        return None
    if qualify and not name:
        msg = "A table name is required to qualify keys"
        raise MalformedQuerySpecError(msg, clause="where")

    predicates: list[str] = []
    groups: list[str] = []
    for key in sorted(defs):
        value: Any = defs[key]
        column = f"{name}.{key}" if qualify else key
        if is_scalar(value):
            predicates.append(bind(column, value, escape_quotes=escape_quotes))
        elif is_disjunction(value):
            if not value:
                msg = f"Empty list of alternatives for {key!r}"
                raise MalformedQuerySpecError(msg, clause="where")
            groups.append("(" + bind(column, kv=value, s=" or ", escape_quotes=escape_quotes) + ")")
        else:
            msg = f"Unsupported value of type {type(value).__name__!r} for {key!r}"
            raise MalformedQuerySpecError(msg, clause="where")
    return "where " + " and ".join(predicates + groups)


def join(defs: "Optional[JoinSpec]", name: Optional[str]) -> Optional[str]:
    """Format an ``inner join`` between ``name`` and the other table in ``defs``.

    ``defs`` maps both table names to the column each side joins on, e.g.
    ``{"posts": "id", "users": "post_id"}`` for table ``posts`` renders
    ``inner join users on users.post_id = posts.id``.
    """
    if not defs or not name:
        return None
    if not isinstance(defs, Mapping) or len(defs) != 2:
        msg = "A join needs exactly two tables"
        raise MalformedQuerySpecError(msg, clause="join")
    if name not in defs:
        msg = f"Table {name!r} is not part of the join"
        raise MalformedQuerySpecError(msg, clause="join")
    target = next(table for table in defs if table != name)
    return f"inner join {target} on {target}.{defs[target]} = {name}.{defs[name]}"


def select_clause(defs: "Optional[Sequence[str]]", name: str) -> str:
    """Format ``select c1, c2 from <name>``; anything but a non-empty list selects ``*``."""
    columns = ", ".join(defs) if isinstance(defs, (list, tuple)) and defs else "*"
    return f"select {columns} from {name}"
