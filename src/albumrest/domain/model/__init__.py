"""Domain model for the album resource."""

from __future__ import annotations

from .album import ARTIST_MAX_LENGTH, TITLE_MAX_LENGTH, Album

__all__ = [
    "ARTIST_MAX_LENGTH",
    "TITLE_MAX_LENGTH",
    "Album",
]
