from __future__ import annotations

from albumrest.domain.model import Album
from tests.helpers.albums import make_album


def test_new_album_is_blank_without_id() -> None:
    album = Album()

    assert album.title == ""
    assert album.artist == ""
    assert album.id is None


def test_to_dict_follows_field_declaration_order() -> None:
    album = make_album(album_id=1)

    data = album.to_dict()

    assert data == {"id": 1, "title": "OK Computer", "artist": "Radiohead"}
    assert list(data) == ["id", "title", "artist"]
