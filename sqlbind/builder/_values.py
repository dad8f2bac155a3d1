"""Value coercion.

Turns Python scalars into SQL literal text. Booleans become ``1``/``0``,
``None`` becomes the bare ``null`` keyword, numbers keep their numeric form
and strings are single-quoted.
"""

import math
from typing import Any

from sqlbind.exceptions import MalformedQuerySpecError
from sqlbind.utils.type_guards import is_integral

__all__ = ("NULL", "format_value", "quote_text", "specifier", "sqlvalue")

NULL = "null"

INTEGER_FORMAT = "%d"
FLOAT_FORMAT = "%f"
TEXT_FORMAT = "'%s'"
RAW_FORMAT = "%s"


def sqlvalue(value: Any) -> Any:
    """Map a Python value onto the value SQLite stores for it.

    Args:
        value: The value to coerce.

    Returns:
        ``1``/``0`` for booleans, ``"null"`` for ``None``, otherwise the value unchanged.
    """
    if isinstance(value, bool):
        return 1 if value else 0
    if value is None:
        return NULL
    return value


def specifier(value: Any) -> str:
    """Pick the ``%`` format template for an already coerced value."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return INTEGER_FORMAT if is_integral(value) else FLOAT_FORMAT
    if isinstance(value, str):
        return TEXT_FORMAT
    return RAW_FORMAT


def quote_text(value: str) -> str:
    return value.replace("'", "''")


def format_value(value: Any, escape_quotes: bool = True) -> str:
    """Render a value as a SQL literal.

    Args:
        value: A boolean, ``None``, number or string.
        escape_quotes: Double embedded single quotes in strings.

    Raises:
        MalformedQuerySpecError: For ``nan`` and infinite floats, which have no SQL literal.

    Returns:
        The literal text, e.g. ``1``, ``null``, ``2.500000`` or ``'done'``.
    """
    if value is None:
        return NULL
    if isinstance(value, float) and not math.isfinite(value):
        msg = f"Cannot render non-finite number {value!r} as a SQL literal"
        raise MalformedQuerySpecError(msg)
    coerced = sqlvalue(value)
    if escape_quotes and isinstance(coerced, str):
        coerced = quote_text(coerced)
    return specifier(coerced) % coerced
