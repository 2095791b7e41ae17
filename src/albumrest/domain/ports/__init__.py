"""Domain port definitions for adapters."""

from __future__ import annotations

from .persistence import AlbumStore, PersistenceSession, Repository
from .unit_of_work import (
    AlbumRepositories,
    AlbumUnitOfWork,
    RepositoryCollection,
    UnitOfWork,
)

__all__ = [
    "AlbumRepositories",
    "AlbumStore",
    "AlbumUnitOfWork",
    "PersistenceSession",
    "Repository",
    "RepositoryCollection",
    "UnitOfWork",
]
