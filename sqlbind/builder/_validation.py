"""Syntactic self-check of built statements.

Parses the emitted text with sqlglot. Nothing is checked against a live
schema; this only catches statements that are not exactly one well-formed
SQL statement.
"""

from typing import TYPE_CHECKING

import sqlglot
from sqlglot.errors import ParseError

from sqlbind.exceptions import SQLParsingError
from sqlbind.utils.logging import get_logger

if TYPE_CHECKING:
    from sqlglot import exp
    from sqlglot.dialects.dialect import DialectType

__all__ = ("validate_statement",)

logger = get_logger("builder.validation")


def validate_statement(sql: str, dialect: "DialectType" = "sqlite") -> "exp.Expression":
    """Parse ``sql`` and require exactly one statement.

    Args:
        sql: Statement text.
        dialect: sqlglot dialect used for parsing.

    Raises:
        SQLParsingError: When parsing fails or the text holds no or several statements.

    Returns:
        The parsed expression.
    """
    try:
        expressions = [expression for expression in sqlglot.parse(sql, read=dialect) if expression is not None]
    except ParseError as e:
        msg = f"Built statement is not valid SQL: {e}"
        raise SQLParsingError(msg, sql=sql) from e
    if len(expressions) != 1:
        msg = f"Expected exactly one statement, found {len(expressions)}"
        raise SQLParsingError(msg, sql=sql)
    logger.debug("Validated %s statement", expressions[0].key)
    return expressions[0]
