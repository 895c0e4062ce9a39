# typegallery/types.py
# The 18 selectable elemental types and their base colors

from typing import Optional

from typegallery.errors import UnknownType

TYPES = [
    "normal", "fire", "water", "grass", "electric", "ice", "fighting", "poison",
    "ground", "flying", "psychic", "bug", "rock", "ghost", "dragon", "dark", "steel", "fairy"
]

TYPE_COLORS = {
    "normal": "#A8A878",
    "fire": "#F08030",
    "water": "#6890F0",
    "grass": "#78C850",
    "electric": "#F8D030",
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


def normalize_type(name: Optional[str]) -> str:
    return str(name or "").strip().lower()


def is_known_type(name: Optional[str]) -> bool:
    return normalize_type(name) in TYPE_COLORS


def require_known_type(name: Optional[str]) -> str:
    """Return the normalized name or raise UnknownType."""
    n = normalize_type(name)
    if n not in TYPE_COLORS:
        raise UnknownType(n)
    return n


def type_color(name: Optional[str]) -> Optional[str]:
    return TYPE_COLORS.get(normalize_type(name))


def type_label(name: Optional[str]) -> str:
    """'fire' -> 'Fire'"""
    n = normalize_type(name)
    return n[:1].upper() + n[1:]
