"""View models for output rendering.

Display-oriented shapes built from ``Pokemon`` so writers never format
domain data themselves.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True, slots=True)
class BadgeView:
    """A colored label (type or ability)."""

    label: str
    color: str


@dataclass(frozen=True, slots=True)
class PokemonView:
    """One table row.

    Attributes:
        id: Numeric id.
        display_id: ``#001`` style id.
        name: Record name.
        image: Artwork URL, if any.
        types: Type badges in slot order.
        abilities: Ability badges in slot order.
        description: English flavor text.
        height_m: Height formatted in metres, e.g. ``"0.7m"``.
        weight_kg: Weight formatted in kilograms, e.g. ``"6.9kg"``.
        stats: ``(label, value)`` pairs, e.g. ``("special attack", 65)``.
    """

    id: int
    display_id: str
    name: str
    image: str | None
    types: Sequence[BadgeView]
    abilities: Sequence[BadgeView]
    description: str
    height_m: str
    weight_kg: str
    stats: Sequence[tuple[str, int]]
