"""Type guard functions for the value shapes accepted by the builder."""

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from typing_extensions import TypeGuard

    from sqlbind.typing import Row, SqlScalar

__all__ = ("is_disjunction", "is_integral", "is_row", "is_row_sequence", "is_scalar")


def is_scalar(value: Any) -> "TypeGuard[SqlScalar]":
    """Check if a value renders as a single SQL literal.

    Args:
        value: The value to check

    Returns:
        True for ``None``, booleans, numbers and strings
    """
    return value is None or isinstance(value, (bool, int, float, str))


def is_disjunction(value: Any) -> bool:
    """Check if a value is an ordered list of alternatives.

    Strings and bytes are sequences too, but never disjunctions.
    """
    return isinstance(value, (list, tuple))


def is_integral(value: "int | float") -> bool:
    if isinstance(value, int):
        return True
    return value.is_integer()


def is_row(value: Any) -> "TypeGuard[Row]":
    return isinstance(value, Mapping)


def is_row_sequence(value: Any) -> "TypeGuard[Sequence[Row]]":
    """Check if a value is a non-empty sequence of row mappings."""
    return (
        isinstance(value, Sequence)
        and not isinstance(value, (str, bytes))
        and len(value) > 0
        and all(isinstance(row, Mapping) for row in value)
    )
