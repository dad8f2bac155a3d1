"""Unit tests for the sqlglot self-check of built statements."""

import pytest

from sqlbind import delete, insert, select, validate_statement
from sqlbind.exceptions import SQLParsingError


def test_validate_select() -> None:
    expression = validate_statement(select("todo", where={"id": 1, "act": ["a", "b"]}))
    assert expression.key == "select"


def test_validate_insert_with_named_placeholders() -> None:
    expression = validate_statement(insert("todo", values={"id": 1, "title": "a"}))
    assert expression.key == "insert"


def test_validate_delete() -> None:
    assert validate_statement(delete("todo")).key == "delete"


def test_validate_rejects_multiple_statements() -> None:
    with pytest.raises(SQLParsingError, match="exactly one statement") as exc_info:
        validate_statement("select 1; select 2")
    assert exc_info.value.sql == "select 1; select 2"


def test_validate_rejects_empty_text() -> None:
    with pytest.raises(SQLParsingError):
        validate_statement("")
