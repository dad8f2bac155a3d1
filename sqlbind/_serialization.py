"""JSON encoding helpers used by structured logging."""

import datetime
import enum
import json
from decimal import Decimal
from typing import Any

__all__ = ("encode_json",)


def _type_to_string(value: Any) -> Any:
    if isinstance(value, (datetime.datetime, datetime.date)):
        return value.isoformat()
    if isinstance(value, enum.Enum):
        return value.value
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    msg = f"Object of type {type(value).__name__} is not JSON serializable"
    raise TypeError(msg)


def encode_json(data: Any) -> str:
    return json.dumps(data, default=_type_to_string, separators=(",", ":"))
