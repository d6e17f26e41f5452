"""Mapper for converting Pokemon records to PokemonView display models."""

from __future__ import annotations

from typing import Sequence

from PokeCatalog.core.models import Pokemon
from PokeCatalog.renderers.colors import ability_color, type_color
from PokeCatalog.renderers.view_models import BadgeView, PokemonView


def format_tenths(value: int, unit: str) -> str:
    """Format an API tenth-unit value, e.g. ``(69, "kg")`` -> ``"6.9kg"``."""
    return f"{value / 10:.1f}{unit}"


def stat_label(name: str) -> str:
    return name.replace("-", " ")


def map_pokemon_to_view(pokemon: Pokemon) -> PokemonView:
    return PokemonView(
        id=pokemon.id,
        display_id=f"#{pokemon.display_id}",
        name=pokemon.name,
        image=pokemon.image,
        types=tuple(BadgeView(label=t, color=type_color(t)) for t in pokemon.types),
        abilities=tuple(BadgeView(label=a, color=ability_color(a)) for a in pokemon.abilities),
        description=pokemon.description,
        height_m=format_tenths(pokemon.height, "m"),
        weight_kg=format_tenths(pokemon.weight, "kg"),
        stats=tuple((stat_label(stat.name), stat.base_stat) for stat in pokemon.stats),
    )


def map_pokemon_to_views(records: Sequence[Pokemon]) -> list[PokemonView]:
    return [map_pokemon_to_view(p) for p in records]
