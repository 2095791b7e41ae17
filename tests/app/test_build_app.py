from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from fastapi.testclient import TestClient

from albumrest.adapters.sqlalchemy.unit_of_work import is_started, shutdown
from albumrest.app import build_app

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from albumrest.adapters.sqlalchemy.unit_of_work import SqlAlchemyUnitOfWork


@pytest.fixture(autouse=True)
def reset_adapter() -> Iterator[None]:
    shutdown()
    yield
    shutdown()


def test_build_app_starts_adapter() -> None:
    app = build_app(database_uri="sqlite+pysqlite:///:memory:")

    assert is_started()
    with TestClient(app) as client:
        created = client.post("/album", json={"title": "Hail to the Thief", "artist": "Radiohead"})
        assert created.status_code == 201
        assert client.get("/album").json() == [
            {"id": 1, "title": "Hail to the Thief", "artist": "Radiohead"}
        ]


def test_build_app_uses_supplied_unit_of_work(
    sqlite_unit_of_work: Callable[[], SqlAlchemyUnitOfWork],
) -> None:
    app = build_app(unit_of_work_factory=sqlite_unit_of_work)

    assert app.state.unit_of_work_factory is sqlite_unit_of_work
