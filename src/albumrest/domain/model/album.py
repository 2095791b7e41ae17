"""The album entity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Final

TITLE_MAX_LENGTH: Final[int] = 255
ARTIST_MAX_LENGTH: Final[int] = 255


@dataclass(eq=False, kw_only=True)
class Album:
    """A catalogue album.

    ``id`` stays ``None`` until the store assigns it on the first commit and is
    never reassigned afterwards. A freshly constructed album carries empty
    strings until a payload is bound onto it.
    """

    title: str = ""
    artist: str = ""
    id: int | None = None

    # declaration order of the bindable fields; error mappings and JSON follow it
    FIELDS: ClassVar[tuple[str, ...]] = ("title", "artist")

    def to_dict(self) -> dict[str, object]:
        data: dict[str, object] = {"id": self.id}
        for name in self.FIELDS:
            data[name] = getattr(self, name)
        return data
