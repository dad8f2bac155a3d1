"""``key = value`` fragment binding."""

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Optional

from sqlbind.builder._values import format_value
from sqlbind.exceptions import MalformedQuerySpecError
from sqlbind.utils.type_guards import is_scalar

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from sqlbind.typing import SqlScalar

__all__ = ("MISSING", "PLACEHOLDER", "bind")

PLACEHOLDER = "?"
DEFAULT_SEPARATOR = ", "


class _Missing:
    """Marker for an omitted value, distinct from ``None``."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


def _fragment(key: str, value: Any, escape_quotes: bool) -> str:
    if not is_scalar(value):
        msg = f"Cannot bind {type(value).__name__!r} value to column {key!r}"
        raise MalformedQuerySpecError(msg)
    return f"{key} = {format_value(value, escape_quotes)}"


def _pairs(
    kv: "Mapping[str, SqlScalar] | Sequence[SqlScalar]", key: Optional[str]
) -> "Iterable[tuple[str, SqlScalar]]":
    if isinstance(kv, Mapping):
        for name in sorted(kv):
            yield (key if key is not None else name), kv[name]
        return
    if key is None:
        msg = "A key is required when binding a list of values"
        raise MalformedQuerySpecError(msg)
    for value in kv:
        yield key, value


def bind(
    k: Optional[str] = None,
    v: Any = MISSING,
    kv: "Mapping[str, SqlScalar] | Sequence[SqlScalar] | None" = None,
    s: str = DEFAULT_SEPARATOR,
    escape_quotes: bool = True,
) -> str:
    """Render ``key = value`` fragments.

    With ``kv`` omitted a single fragment is produced for ``k`` and ``v``; an
    omitted ``v`` binds the positional ``?`` placeholder. With ``kv`` every pair
    is rendered and the fragments are joined with ``s``. Mapping pairs are
    emitted in ascending key order, sequence values in their given order
    under the override key ``k``.

    Args:
        k: Column name, or override key for every pair in multi mode.
        v: Value for single mode.
        kv: Mapping of column to value, or values sharing the key ``k``.
        s: Separator between fragments in multi mode.
        escape_quotes: Double embedded single quotes in string values.

    Raises:
        MalformedQuerySpecError: When a value is not a scalar or a key is missing.

    Returns:
        The joined fragment text.
    """
    if kv is None:
        if k is None:
            msg = "A key is required when binding a single value"
            raise MalformedQuerySpecError(msg)
        if v is MISSING:
            return f"{k} = {PLACEHOLDER}"
        return _fragment(k, v, escape_quotes)
    return s.join(_fragment(key, value, escape_quotes) for key, value in _pairs(kv, k))
