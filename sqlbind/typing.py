from collections.abc import Mapping, Sequence
from typing import Union

from typing_extensions import NotRequired, TypeAlias, TypedDict

__all__ = (
    "ColumnSpec",
    "JoinSpec",
    "QueryOptions",
    "Row",
    "Rows",
    "SchemaSpec",
    "SqlScalar",
    "SqlValue",
    "StatementParameters",
)

SqlScalar: TypeAlias = Union[bool, int, float, str, None]
"""A single value that can be rendered as a SQL literal."""
SqlValue: TypeAlias = Union[SqlScalar, Sequence[SqlScalar]]
"""A scalar, or an ordered list of scalars rendered as an ``or`` disjunction."""
ColumnSpec: TypeAlias = Mapping[str, SqlValue]
"""Column name to value mapping used by ``where`` and ``set``."""
Row: TypeAlias = Mapping[str, SqlScalar]
Rows: TypeAlias = Union[Row, Sequence[Row]]
"""A single row, or several rows sharing the first row's columns."""
JoinSpec: TypeAlias = Mapping[str, str]
"""Exactly two ``table -> column`` entries describing an inner join."""
SchemaSpec: TypeAlias = Mapping[str, object]
StatementParameters: TypeAlias = Union[
    SqlScalar, Mapping[str, SqlScalar], Sequence[Mapping[str, SqlScalar]], Sequence[SqlScalar], None
]


class QueryOptions(TypedDict, total=False):
    """Declarative description of one statement.

    Unknown keys are ignored by the builder.
    """

    where: NotRequired["ColumnSpec | None"]
    set: NotRequired["ColumnSpec | None"]
    select: NotRequired["Sequence[str] | None"]
    values: NotRequired["Rows | None"]
    join: NotRequired["JoinSpec | None"]
    named: NotRequired[bool]
