from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

NO_DESCRIPTION = "No description available."
ID_WIDTH = 3


def format_id(pokemon_id: int) -> str:
    """Return the zero-padded display id (``1`` -> ``"001"``)."""
    return str(pokemon_id).zfill(ID_WIDTH)


@dataclass(frozen=True, slots=True)
class Stat:
    """One base stat entry (e.g. ``hp``/45)."""

    name: str
    base_stat: int


@dataclass(frozen=True, slots=True)
class Pokemon:
    """Internal canonical catalog record.

    Every payload coming from the API is mapped to this shape before it reaches
    the search engine. Only ``id``, ``name``, ``types`` and ``abilities`` take
    part in matching; the rest is display data.

    Attributes:
        id: National dex number (positive).
        name: Lowercase API name, e.g. "charmander".
        types: Type names in slot order.
        abilities: Ability names in slot order.
        image: Artwork URL if available.
        description: English flavor text.
        height: Height in decimetres.
        weight: Weight in hectograms.
        stats: Base stats in API order.
    """

    id: int
    name: str
    types: Sequence[str] = ()
    abilities: Sequence[str] = ()
    image: str | None = None
    description: str = NO_DESCRIPTION
    height: int = 0
    weight: int = 0
    stats: Sequence[Stat] = ()

    def __post_init__(self) -> None:
        # Freeze sequences so records can be shared between searches.
        object.__setattr__(self, "types", tuple(self.types))
        object.__setattr__(self, "abilities", tuple(self.abilities))
        object.__setattr__(self, "stats", tuple(self.stats))

    @property
    def display_id(self) -> str:
        return format_id(self.id)


@dataclass(frozen=True, slots=True)
class AbilityDetail:
    """Ability description shown next to an ability badge.

    A placeholder (``is_placeholder=True``) is returned when the detail could
    not be fetched; it only carries the name that was asked for.
    """

    name: str
    effect: str | None = None
    short_effect: str | None = None
    generation: str | None = None
    is_placeholder: bool = False

    @classmethod
    def placeholder(cls, name: str) -> AbilityDetail:
        return cls(name=name, is_placeholder=True)
