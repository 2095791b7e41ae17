"""Ports for persisting albums."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from albumrest.domain.model import Album

if TYPE_CHECKING:
    from collections.abc import Sequence


@runtime_checkable
class Repository[TEntity](Protocol):
    """Minimal repository contract for a persistent aggregate store."""

    def add(self, entity: TEntity) -> None: ...

    def remove(self, entity: TEntity) -> None: ...


@runtime_checkable
class AlbumStore(Repository[Album], Protocol):
    """Lookup contract for albums."""

    def find_by_id(self, album_id: int) -> Album | None:
        """Return the album with ``album_id`` or ``None`` when it does not exist."""
        ...

    def find_all(self) -> Sequence[Album]:
        """Return every stored album ordered by id."""
        ...


@runtime_checkable
class PersistenceSession(Protocol):
    """Pending change set that is applied on ``commit``."""

    def stage(self, album: Album) -> None: ...

    def remove(self, album: Album) -> None: ...

    def commit(self) -> None: ...
