"""Reusable fakes and helpers for album related tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from albumrest.domain.model import Album

if TYPE_CHECKING:
    from collections.abc import Iterable


def make_album(
    title: str = "OK Computer",
    artist: str = "Radiohead",
    *,
    album_id: int | None = None,
) -> Album:
    return Album(title=title, artist=artist, id=album_id)


class FakeAlbumStore:
    """In-memory implementation of the album store port."""

    def __init__(self, albums: Iterable[Album] = ()) -> None:
        self.albums: dict[int, Album] = {}
        for album in albums:
            if album.id is None:
                raise ValueError("seeded albums need an id")
            self.albums[album.id] = album

    def add(self, entity: Album) -> None:
        if entity.id is None:
            entity.id = max(self.albums, default=0) + 1
        self.albums[entity.id] = entity

    def remove(self, entity: Album) -> None:
        if entity.id is not None:
            self.albums.pop(entity.id, None)

    def find_by_id(self, album_id: int) -> Album | None:
        return self.albums.get(album_id)

    def find_all(self) -> list[Album]:
        return [self.albums[key] for key in sorted(self.albums)]


@dataclass
class FakePersistenceSession:
    """Records staged changes and applies them to the store on commit."""

    store: FakeAlbumStore
    staged: list[Album] = field(default_factory=list["Album"])
    removed: list[Album] = field(default_factory=list["Album"])
    commits: int = 0

    def stage(self, album: Album) -> None:
        self.staged.append(album)

    def remove(self, album: Album) -> None:
        self.removed.append(album)

    def commit(self) -> None:
        for album in self.staged:
            self.store.add(album)
        for album in self.removed:
            self.store.remove(album)
        self.commits += 1

    @property
    def untouched(self) -> bool:
        return not self.staged and not self.removed and self.commits == 0
