"""Badge colors for types and abilities."""

from __future__ import annotations

TYPE_COLORS = {
    "normal": "#A8A878",
    "fire": "#F08030",
    "water": "#6890F0",
    "electric": "#F8D030",
    "grass": "#78C850",
    "ice": "#98D8D8",
    "fighting": "#C03028",
    "poison": "#A040A0",
    "ground": "#E0C068",
    "flying": "#A890F0",
    "psychic": "#F85888",
    "bug": "#A8B820",
    "rock": "#B8A038",
    "ghost": "#705898",
    "dragon": "#7038F8",
    "dark": "#705848",
    "steel": "#B8B8D0",
    "fairy": "#EE99AC",
}
DEFAULT_TYPE_COLOR = "#777"

# Red through hot pink.
ABILITY_BASE_HUES = (0, 15, 30, 45, 60, 90, 120, 150, 180, 200, 220, 240, 260, 280, 300, 320, 340)


def type_color(type_name: str) -> str:
    return TYPE_COLORS.get(type_name, DEFAULT_TYPE_COLOR)


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def string_hash(text: str) -> int:
    """``code + (h << 5) - h`` over UTF-16 code units.

    Only the shifted term wraps to 32 bits; the running sum does not, so the
    result can leave the int32 range.
    """
    h = 0
    encoded = text.encode("utf-16-le")
    for i in range(0, len(encoded), 2):
        code = encoded[i] | (encoded[i + 1] << 8)
        h = code + _to_int32(h << 5) - h
    return h


def ability_color(ability: str) -> str:
    """Stable HSL color for an ability name.

    The hue comes from ``ABILITY_BASE_HUES``; lightness varies between 45%
    and 74% so neighbouring abilities stay distinguishable.
    """
    h = string_hash(ability)
    hue = ABILITY_BASE_HUES[abs(h) % len(ABILITY_BASE_HUES)]
    lightness = 45 + abs(_to_int32(h) >> 8) % 30
    return f"hsl({hue}, 70%, {lightness}%)"
