"""Unit tests for the clause formatters."""

import pytest

from sqlbind.builder import join, keys, select_clause, set_clause, values, where
from sqlbind.exceptions import MalformedQuerySpecError


def test_keys_sorted() -> None:
    assert keys({"title": "a", "id": 1}) == "(id, title)"


def test_keys_uses_first_row_of_many() -> None:
    assert keys([{"b": 1, "a": 2}, {"b": 3, "a": 4}]) == "(a, b)"


@pytest.mark.parametrize("defs", [None, {}, []])
def test_keys_absent(defs: object) -> None:
    assert keys(defs) is None  # type: ignore[arg-type]
    assert values(defs) is None  # type: ignore[arg-type]


def test_keys_and_values_absent_when_not_named() -> None:
    assert keys({"a": 1}, named=False) is None
    assert values({"a": 1}, named=False) is None


def test_keys_rejects_non_rows() -> None:
    with pytest.raises(MalformedQuerySpecError):
        keys("title")  # type: ignore[arg-type]
    with pytest.raises(MalformedQuerySpecError):
        values([1, 2])  # type: ignore[list-item]


def test_values_named_placeholders() -> None:
    assert values({"title": "a", "id": 1}) == "values(:id, :title)"


def test_set_clause() -> None:
    assert set_clause({"date": 2021}) == "set date = 2021"
    assert set_clause({"seen": True, "status": "later"}) == "set seen = 1, status = 'later'"


def test_set_clause_absent_and_empty() -> None:
    assert set_clause(None) is None
    with pytest.raises(MalformedQuerySpecError):
        set_clause({})


def test_where_absent() -> None:
    assert where(None) is None
    assert where({}) is None


def test_where_single_key() -> None:
    assert where({"id": 1}) == "where id = 1"


def test_where_scalar_keys_sorted() -> None:
    assert where({"id": 1, "act": "done"}) == "where act = 'done' and id = 1"


def test_where_boolean_interop() -> None:
    assert where({"act": False, "n": True, "date": 2021}) == "where act = 0 and date = 2021 and n = 1"


def test_where_disjunction_keeps_list_order() -> None:
    assert where({"act": ["overdue", "done"]}) == "where (act = 'overdue' or act = 'done')"


def test_where_disjunctions_follow_scalar_predicates() -> None:
    defs = {"n": [1, 2, 3], "act": ("a", "b"), "date": 2021}
    assert where(defs) == "where date = 2021 and (act = 'a' or act = 'b') and (n = 1 or n = 2 or n = 3)"


def test_where_qualified_keys() -> None:
    assert where({"id": 1, "tag": ["a", "b"]}, "todo", qualify=True) == (
        "where todo.id = 1 and (todo.tag = 'a' or todo.tag = 'b')"
    )


def test_where_qualify_requires_name() -> None:
    with pytest.raises(MalformedQuerySpecError):
        where({"id": 1}, qualify=True)


@pytest.mark.parametrize("value", [{"a": 1}, [], {1, 2}, object()], ids=["dict", "empty-list", "set", "object"])
def test_where_rejects_malformed_values(value: object) -> None:
    with pytest.raises(MalformedQuerySpecError, match="where"):
        where({"id": value})  # type: ignore[dict-item]


def test_where_rejects_non_mapping() -> None:
    with pytest.raises(MalformedQuerySpecError):
        where(["id"])  # type: ignore[arg-type]


def test_join() -> None:
    assert join({"posts": "id", "users": "post_id"}, "posts") == "inner join users on users.post_id = posts.id"
    assert join({"users": "post_id", "posts": "id"}, "users") == "inner join posts on posts.id = users.post_id"


def test_join_absent() -> None:
    assert join(None, "posts") is None
    assert join({"posts": "id", "users": "post_id"}, None) is None


def test_join_requires_two_tables_including_owner() -> None:
    with pytest.raises(MalformedQuerySpecError, match="exactly two"):
        join({"a": "id", "b": "id", "c": "id"}, "a")
    with pytest.raises(MalformedQuerySpecError, match="not part of the join"):
        join({"a": "id", "b": "id"}, "c")


@pytest.mark.parametrize(
    ("defs", "expected"),
    [
        (None, "select * from todo"),
        ([], "select * from todo"),
        (["id", "title"], "select id, title from todo"),
        ("title", "select * from todo"),
        (("id", "title"), "select id, title from todo"),
    ],
)
def test_select_clause(defs: object, expected: str) -> None:
    assert select_clause(defs, "todo") == expected  # type: ignore[arg-type]
