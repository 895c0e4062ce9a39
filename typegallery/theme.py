# typegallery/theme.py
# Container theme and per-card colors derived from a type's base color

from dataclasses import asdict, dataclass
from typing import Optional

from typegallery import config
from typegallery.colors import darken, hex_to_rgba, lighten
from typegallery.types import normalize_type, type_color


@dataclass(frozen=True)
class Theme:
    border_color: str
    background_color: str

    def to_dict(self) -> dict:
        return {"borderColor": self.border_color, "backgroundColor": self.background_color}


@dataclass(frozen=True)
class CardGradient:
    start: str   # top-left of the diagonal
    end: str
    border: str

    def to_dict(self) -> dict:
        return asdict(self)

    def css(self) -> str:
        return f"linear-gradient(135deg, {self.start} 0%, {self.end} 100%)"


DEFAULT_THEME = Theme(config.DEFAULT_BORDER, config.DEFAULT_BACKGROUND)


def theme_for(type_name: Optional[str]) -> Theme:
    """Theme for the selected type; no selection gives DEFAULT_THEME."""
    if not normalize_type(type_name):
        return DEFAULT_THEME
    color = type_color(type_name) or config.DEFAULT_BORDER
    return Theme(color, hex_to_rgba(color, config.BACKGROUND_ALPHA))


def card_gradient(primary_type: Optional[str]) -> CardGradient:
    base = type_color(primary_type) or config.CARD_FALLBACK
    return CardGradient(start=base, end=darken(base, 20), border=lighten(base, 30))


def badge_color(type_name: Optional[str]) -> str:
    return type_color(type_name) or config.BADGE_FALLBACK


def image_or_placeholder(url: Optional[str]) -> str:
    return url or config.PLACEHOLDER_IMAGE
