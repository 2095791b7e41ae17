"""SQLAlchemy adapter package for albumrest."""

from __future__ import annotations

from .mappings import album_table, create_all_tables, start_mappers
from .repositories import SqlAlchemyAlbumRepository
from .unit_of_work import (
    SqlAlchemyUnitOfWork,
    StartupError,
    build_engine,
    is_started,
    shutdown,
    startup,
)

__all__ = [
    "SqlAlchemyAlbumRepository",
    "SqlAlchemyUnitOfWork",
    "StartupError",
    "album_table",
    "build_engine",
    "create_all_tables",
    "is_started",
    "shutdown",
    "start_mappers",
    "startup",
]
