"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from albumrest.adapters.sqlalchemy.unit_of_work import SqlAlchemyUnitOfWork, is_started, startup
from albumrest.ui.web import create_app

if TYPE_CHECKING:
    from fastapi import FastAPI

    from albumrest.ui.web import UnitOfWorkFactory


log = getLogger(__name__)


def build_app(
    *,
    database_uri: str | None = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> FastAPI:
    """Start the persistence adapter (once) and return the web application."""

    if unit_of_work_factory is None:
        if not is_started():
            startup(database_uri=database_uri)
        unit_of_work_factory = SqlAlchemyUnitOfWork
    log.info("Building album API application")
    return create_app(unit_of_work_factory=unit_of_work_factory)
