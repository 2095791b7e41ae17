"""Repository implementations backed by SQLAlchemy sessions."""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from sqlalchemy import select

from albumrest.adapters.sqlalchemy.mappings import album_table
from albumrest.domain.model import Album

if TYPE_CHECKING:
    from sqlalchemy.orm import Session


class SqlAlchemyAlbumRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, entity: Album) -> None:
        self.session.add(entity)

    def remove(self, entity: Album) -> None:
        self.session.delete(entity)

    def find_by_id(self, album_id: int) -> Album | None:
        return self.session.get(Album, album_id)

    def find_all(self) -> list[Album]:
        stmt = select(Album).order_by(album_table.c.id)
        return list(self.session.execute(stmt).scalars().all())


if TYPE_CHECKING:
    from albumrest.domain.ports.persistence import AlbumStore

    _session_stub = cast("Session", object())
    _repo_check: AlbumStore = SqlAlchemyAlbumRepository(_session_stub)
