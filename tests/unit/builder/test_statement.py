"""Unit tests for statement assembly."""

import dataclasses

import pytest

from sqlbind import BuilderConfig, StatementBuilder, build, delete, insert, select, update
from sqlbind.builder import alter
from sqlbind.exceptions import MalformedQuerySpecError, UnsupportedActionError


def test_select_all(table_name: str) -> None:
    assert select(table_name) == "select * from todo"
    assert select(table_name, {}) == "select * from todo"


def test_delete_all(table_name: str) -> None:
    assert delete(table_name) == "delete from todo"
    assert delete(table_name, {}) == "delete from todo"


def test_select_where_single_key(table_name: str) -> None:
    assert select(table_name, {"where": {"id": 1}}) == "select * from todo where id = 1"


def test_select_where_multi_key(table_name: str) -> None:
    assert select(table_name, {"where": {"id": 1, "act": "done"}}) == "select * from todo where act = 'done' and id = 1"


def test_select_where_or_for_single_key(table_name: str) -> None:
    statement = select(table_name, {"where": {"act": ["done", "overdue"]}})
    assert statement == "select * from todo where (act = 'done' or act = 'overdue')"


def test_select_where_or_with_multi_keys(table_name: str) -> None:
    statement = select(table_name, {"where": {"act": ["done", "overdue"], "name": "conni", "date": 2021}})
    assert statement == "select * from todo where date = 2021 and name = 'conni' and (act = 'done' or act = 'overdue')"


def test_select_boolean_interop(table_name: str) -> None:
    assert select(table_name, where={"act": False}) == "select * from todo where act = 0"
    assert select(table_name, where={"n": True}) == "select * from todo where n = 1"


def test_update_set_with_where(table_name: str) -> None:
    assert update(table_name, {"where": {"id": 1}, "set": {"date": 2021}}) == "update todo set date = 2021 where id = 1"


def test_update_with_disjunction(table_name: str) -> None:
    statement = update(table_name, where={"project": ["a", "b"]}, set={"status": "later", "seen": True})
    assert statement == "update todo set seen = 1, status = 'later' where (project = 'a' or project = 'b')"


def test_delete_with_where(table_name: str) -> None:
    assert delete(table_name, where={"id": [1, 2, 3]}) == "delete from todo where (id = 1 or id = 2 or id = 3)"


def test_insert_named(table_name: str) -> None:
    statement = insert(table_name, values={"title": "write tests", "id": 1})
    assert statement == "insert into todo (id, title) values(:id, :title)"


def test_insert_many_rows_uses_first_row(table_name: str) -> None:
    statement = insert(table_name, values=[{"title": "a"}, {"title": "b"}])
    assert statement == "insert into todo (title) values(:title)"


def test_insert_not_named(table_name: str) -> None:
    assert insert(table_name, values={"id": 1}, named=False) == "insert into todo"


def test_select_columns_with_join_qualifies_where() -> None:
    statement = select(
        "posts", select=["posts.title", "users.name"], join={"posts": "id", "users": "post_id"}, where={"id": 1}
    )
    assert statement == (
        "select posts.title, users.name from posts inner join users on users.post_id = posts.id where posts.id = 1"
    )


def test_keyword_options_override_mapping(table_name: str) -> None:
    assert select(table_name, {"where": {"id": 1}}, where={"id": 2}) == "select * from todo where id = 2"


def test_unrecognized_options_are_ignored(table_name: str) -> None:
    assert select(table_name, {"limit": 5, "order": "id"}) == "select * from todo"  # type: ignore[typeddict-unknown-key]


def test_output_is_deterministic(table_name: str) -> None:
    first = select(table_name, where={"b": 1, "a": ["x", "y"], "c": "z"})
    second = select(table_name, where={"c": "z", "a": ["x", "y"], "b": 1})
    assert first == second == select(table_name, where={"b": 1, "a": ["x", "y"], "c": "z"})


def test_build_dispatches_actions(table_name: str) -> None:
    assert build("select", table_name, where={"id": 1}) == "select * from todo where id = 1"
    assert build("delete", table_name) == "delete from todo"
    assert build("drop", table_name) == "drop table todo"


def test_build_rejects_unknown_action(table_name: str) -> None:
    with pytest.raises(UnsupportedActionError) as exc_info:
        build("merge", table_name)
    assert exc_info.value.action == "merge"


def test_alter_is_unsupported(table_name: str) -> None:
    with pytest.raises(UnsupportedActionError):
        alter(table_name, {"title": "text"})


@pytest.mark.parametrize("table", ["", None, 3])
def test_build_rejects_bad_table_names(table: object) -> None:
    with pytest.raises(MalformedQuerySpecError):
        select(table)  # type: ignore[arg-type]


def test_builder_config_named_default(table_name: str) -> None:
    builder = StatementBuilder(BuilderConfig(named=False))
    assert builder.insert(table_name, values={"id": 1}) == "insert into todo"
    assert builder.insert(table_name, values={"id": 1}, named=True) == "insert into todo (id) values(:id)"


def test_builder_config_escape_quotes(table_name: str) -> None:
    assert select(table_name, where={"name": "it's"}) == "select * from todo where name = 'it''s'"
    raw = StatementBuilder(BuilderConfig(escape_quotes=False))
    assert raw.select(table_name, where={"name": "it's"}) == "select * from todo where name = 'it's'"


def test_builder_config_validate(table_name: str) -> None:
    builder = StatementBuilder(BuilderConfig(validate=True))
    assert builder.select(table_name, where={"id": 1}) == "select * from todo where id = 1"
    statement = builder.update(table_name, where={"id": 1}, set={"status": "done"})
    assert statement == "update todo set status = 'done' where id = 1"


def test_builder_config_is_frozen() -> None:
    config = BuilderConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.named = False  # type: ignore[misc]


def test_builder_logs_statements(table_name: str, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level("DEBUG", logger="sqlbind")
    select(table_name, where={"id": 1})
    assert "select * from todo where id = 1" in caplog.text


def test_builder_logs_structured_fields(table_name: str, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level("DEBUG", logger="sqlbind")
    update(table_name, where={"id": 1}, set={"date": 2021})
    record = next(r for r in caplog.records if r.name == "sqlbind.builder")
    assert record.extra_fields == {"action": "update", "table": "todo"}  # type: ignore[attr-defined]


def test_select_with_string_selects_everything(table_name: str) -> None:
    assert select(table_name, select="title") == "select * from todo"


def test_where_rejects_non_finite_numbers(table_name: str) -> None:
    with pytest.raises(MalformedQuerySpecError):
        select(table_name, where={"score": float("nan")})
