"""Bind untyped JSON payloads onto albums.

Two explicit binding modes replace a framework form's implicit switch:

* :meth:`AlbumValidator.bind_full` requires every mapped field.
* :meth:`AlbumValidator.bind_partial` treats every field as optional and only
  applies the ones present in the payload.

Both return a tagged :data:`BindResult` instead of raising. The payload is
validated on a Pydantic model first; the target album is only written to once
the whole payload has passed, so a rejected payload never leaves a half-bound
album behind.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final, cast

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from albumrest.domain.model import ARTIST_MAX_LENGTH, TITLE_MAX_LENGTH, Album

if TYPE_CHECKING:
    from pydantic_core import ErrorDetails

log = logging.getLogger(__name__)

ROOT_ERROR_KEY: Final[str] = "__root__"
NOT_AN_OBJECT_MESSAGE: Final[str] = "Expected a JSON object."

type FieldErrors = dict[str, list[str]]


class AlbumBaseModel(BaseModel):
    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)


class AlbumPayload(AlbumBaseModel):
    """Complete album representation accepted by create and full update."""

    title: str = Field(min_length=1, max_length=TITLE_MAX_LENGTH)
    artist: str = Field(min_length=1, max_length=ARTIST_MAX_LENGTH)


class AlbumPatch(AlbumBaseModel):
    """Album fields accepted by a partial update.

    Defaults are never validated and never applied; only ``model_fields_set``
    is copied onto the album, so an explicit ``null`` is still rejected.
    """

    title: str = Field(default="", min_length=1, max_length=TITLE_MAX_LENGTH)
    artist: str = Field(default="", min_length=1, max_length=ARTIST_MAX_LENGTH)


@dataclass(frozen=True, slots=True)
class Bound:
    """Payload accepted; ``album`` holds the merged state."""

    album: Album


@dataclass(frozen=True, slots=True)
class Invalid:
    """Payload rejected; ``errors`` maps field names to messages."""

    errors: FieldErrors


type BindResult = Bound | Invalid


class AlbumValidator:
    """Validate payloads and copy accepted values onto albums."""

    def bind_full(self, payload: object, album: Album) -> BindResult:
        """Bind ``payload`` requiring every mapped field."""
        return self._bind(AlbumPayload, payload, album)

    def bind_partial(self, payload: object, album: Album) -> BindResult:
        """Bind only the fields present in ``payload``."""
        return self._bind(AlbumPatch, payload, album)

    def _bind(
        self,
        model_cls: type[AlbumBaseModel],
        payload: object,
        album: Album,
    ) -> BindResult:
        if not isinstance(payload, Mapping):
            log.debug("Rejected non-object album payload of type %s", type(payload).__name__)
            return Invalid(errors={ROOT_ERROR_KEY: [NOT_AN_OBJECT_MESSAGE]})

        try:
            model = model_cls.model_validate(dict(cast("Mapping[str, object]", payload)))
        except ValidationError as exc:
            errors = collect_field_errors(exc.errors())
            log.debug("Rejected album payload: %s", errors)
            return Invalid(errors=errors)

        for name in Album.FIELDS:
            if name in model.model_fields_set:
                setattr(album, name, getattr(model, name))
        return Bound(album=album)


def collect_field_errors(details: list[ErrorDetails]) -> FieldErrors:
    """Group Pydantic error details by top-level field.

    Mapped fields come first in declaration order, anything else (unknown keys,
    root errors) follows in the order reported.
    """

    grouped: FieldErrors = {}
    for detail in details:
        location = detail["loc"]
        key = str(location[0]) if location else ROOT_ERROR_KEY
        grouped.setdefault(key, []).append(detail["msg"])

    order = {name: index for index, name in enumerate(Album.FIELDS)}
    ranked = sorted(
        enumerate(grouped),
        key=lambda item: (order.get(item[1], len(order)), item[0]),
    )
    return {key: grouped[key] for _, key in ranked}
