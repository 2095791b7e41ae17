"""Resolve albums by id without raising for missing records."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from albumrest.domain.model import Album
    from albumrest.domain.ports import AlbumStore

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Found:
    album: Album


@dataclass(frozen=True, slots=True)
class NotFound:
    album_id: int


type LookupResult = Found | NotFound


def find_album(store: AlbumStore, album_id: int) -> LookupResult:
    """Look ``album_id`` up in ``store``."""

    album = store.find_by_id(album_id)
    if album is None:
        log.debug("Album %s not found", album_id)
        return NotFound(album_id=album_id)
    return Found(album=album)
