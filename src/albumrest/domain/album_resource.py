"""Album resource operations.

:class:`AlbumResourceHandler` turns the six REST verbs of the album resource
into store lookups, validator calls and unit-of-work commits. It knows nothing
about HTTP beyond the status codes it reports in :class:`AlbumResponse`; the
web layer renders those.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from http import HTTPStatus
from typing import TYPE_CHECKING

from albumrest.domain.lookup import Found, find_album
from albumrest.domain.model import Album
from albumrest.domain.validation import Invalid

if TYPE_CHECKING:
    from albumrest.domain.ports import AlbumStore, PersistenceSession
    from albumrest.domain.validation import AlbumValidator, BindResult, FieldErrors

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AlbumResponse:
    """Outcome of a handler operation.

    ``body`` is ``None`` for responses without content. ``created_id`` is only
    set by a successful create.
    """

    status: HTTPStatus
    body: object | None = None
    created_id: int | None = None

    @classmethod
    def ok(cls, body: object) -> AlbumResponse:
        return cls(status=HTTPStatus.OK, body=body)

    @classmethod
    def created(cls, album_id: int | None) -> AlbumResponse:
        return cls(status=HTTPStatus.CREATED, body={"status": "ok"}, created_id=album_id)

    @classmethod
    def no_content(cls) -> AlbumResponse:
        return cls(status=HTTPStatus.NO_CONTENT)

    @classmethod
    def not_found(cls) -> AlbumResponse:
        return cls(status=HTTPStatus.NOT_FOUND)

    @classmethod
    def invalid(cls, errors: FieldErrors) -> AlbumResponse:
        return cls(status=HTTPStatus.BAD_REQUEST, body={"status": "error", "errors": errors})


class AlbumResourceHandler:
    """Serve the album resource from a store, a persistence session and a validator."""

    def __init__(
        self,
        store: AlbumStore,
        session: PersistenceSession,
        validator: AlbumValidator,
    ) -> None:
        self.store = store
        self.session = session
        self.validator = validator

    def get(self, album_id: int) -> AlbumResponse:
        lookup = find_album(self.store, album_id)
        if not isinstance(lookup, Found):
            return AlbumResponse.not_found()
        return AlbumResponse.ok(lookup.album.to_dict())

    def list_all(self) -> AlbumResponse:
        return AlbumResponse.ok([album.to_dict() for album in self.store.find_all()])

    def create(self, payload: object) -> AlbumResponse:
        result = self.validator.bind_full(payload, Album())
        if isinstance(result, Invalid):
            return AlbumResponse.invalid(result.errors)

        self.session.stage(result.album)
        self.session.commit()
        log.info("Created album %s", result.album.id)
        return AlbumResponse.created(result.album.id)

    def replace(self, album_id: int, payload: object) -> AlbumResponse:
        """Full update: every field must be supplied."""
        lookup = find_album(self.store, album_id)
        if not isinstance(lookup, Found):
            return AlbumResponse.not_found()
        return self._save(self.validator.bind_full(payload, lookup.album))

    def update(self, album_id: int, payload: object) -> AlbumResponse:
        """Partial update: absent fields keep their current values."""
        lookup = find_album(self.store, album_id)
        if not isinstance(lookup, Found):
            return AlbumResponse.not_found()
        return self._save(self.validator.bind_partial(payload, lookup.album))

    def delete(self, album_id: int) -> AlbumResponse:
        lookup = find_album(self.store, album_id)
        if not isinstance(lookup, Found):
            return AlbumResponse.not_found()

        self.session.remove(lookup.album)
        self.session.commit()
        log.info("Deleted album %s", album_id)
        return AlbumResponse.no_content()

    def _save(self, result: BindResult) -> AlbumResponse:
        if isinstance(result, Invalid):
            return AlbumResponse.invalid(result.errors)

        self.session.stage(result.album)
        self.session.commit()
        log.info("Updated album %s", result.album.id)
        return AlbumResponse.no_content()
