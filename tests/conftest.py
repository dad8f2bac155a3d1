from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from sqlbind.adapters.sqlite import SqliteConfig

if TYPE_CHECKING:
    from collections.abc import Generator

    from sqlbind.adapters.sqlite import SqliteDriver

here = Path(__file__).parent
root_path = here.parent


@pytest.fixture
def table_name() -> str:
    return "todo"


@pytest.fixture
def sqlite_config() -> SqliteConfig:
    return SqliteConfig()


@pytest.fixture
def sqlite_session(sqlite_config: SqliteConfig) -> Generator[SqliteDriver, None, None]:
    with sqlite_config.provide_session() as session:
        yield session
