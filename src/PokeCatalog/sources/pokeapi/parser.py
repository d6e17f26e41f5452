"""PokeAPI payload parser.

Maps raw PokeAPI JSON (pokemon, species, ability) into the internal models.
"""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from PokeCatalog.core.models import NO_DESCRIPTION, AbilityDetail, Pokemon, Stat

LANGUAGE = "en"


def parse_pokemon_index(payload: Mapping[str, Any]) -> list[tuple[str, str]]:
    """Extract ``(name, url)`` pairs from a ``/pokemon`` list payload.

    Raises:
        ValueError: If ``results`` is missing or not a list.
    """
    results = payload.get("results")
    if not isinstance(results, list):
        raise ValueError("PokeAPI list payload has no results")
    return [(str(item["name"]), str(item["url"])) for item in results]


def english_text(entries: Sequence[Mapping[str, Any]] | None, field: str) -> str | None:
    """Return ``field`` of the first English entry, or None."""
    for entry in entries or ():
        language = entry.get("language") or {}
        if language.get("name") == LANGUAGE:
            value = entry.get(field)
            if value:
                return str(value)
    return None


def _clean_flavor_text(text: str) -> str:
    # Flavor texts embed form feeds and hard line breaks from the game boxes.
    return text.replace("\f", " ").replace("\n", " ").replace("\r", " ")


def _image_url(sprites: Mapping[str, Any]) -> str | None:
    other = sprites.get("other") or {}
    artwork = other.get("official-artwork") or {}
    return artwork.get("front_default") or sprites.get("front_default")


def parse_pokemon(
    payload: Mapping[str, Any],
    species: Mapping[str, Any] | None = None,
) -> Pokemon:
    """Build a ``Pokemon`` from a ``/pokemon/{id}`` payload and its species.

    Args:
        payload: Pokemon payload.
        species: Species payload providing the flavor text, if fetched.

    Returns:
        Parsed record.

    Raises:
        KeyError: If ``id`` or ``name`` is missing.
    """
    flavor = english_text((species or {}).get("flavor_text_entries"), "flavor_text")
    description = _clean_flavor_text(flavor) if flavor else NO_DESCRIPTION

    stats = tuple(
        Stat(name=str(item["stat"]["name"]), base_stat=int(item["base_stat"]))
        for item in payload.get("stats") or ()
    )
    return Pokemon(
        id=int(payload["id"]),
        name=str(payload["name"]),
        types=[str(item["type"]["name"]) for item in payload.get("types") or ()],
        abilities=[str(item["ability"]["name"]) for item in payload.get("abilities") or ()],
        image=_image_url(payload.get("sprites") or {}),
        description=description,
        height=int(payload.get("height") or 0),
        weight=int(payload.get("weight") or 0),
        stats=stats,
    )


def parse_ability(payload: Mapping[str, Any], *, requested_name: str | None = None) -> AbilityDetail:
    """Build an ``AbilityDetail`` from an ``/ability/{name}`` payload."""
    generation = (payload.get("generation") or {}).get("name")
    return AbilityDetail(
        name=str(payload.get("name") or requested_name or ""),
        effect=english_text(payload.get("effect_entries"), "effect"),
        short_effect=english_text(payload.get("effect_entries"), "short_effect"),
        generation=str(generation) if generation else None,
    )
