import pytest

from typegallery.colors import darken, hex_to_rgb_components, lighten
from typegallery.theme import (
    DEFAULT_THEME, CardGradient, Theme, badge_color, card_gradient, image_or_placeholder, theme_for,
)
from typegallery.types import TYPE_COLORS, TYPES, is_known_type, normalize_type, require_known_type, type_label
from typegallery.errors import UnknownType


@pytest.mark.parametrize("selection", [None, "", "   "])
def test_no_selection_gives_default_theme(selection):
    assert theme_for(selection) == Theme("#ffde00", "rgba(255, 255, 255, 0.15)")
    assert theme_for(selection) is DEFAULT_THEME


def test_fire_theme():
    t = theme_for("fire")
    assert t.border_color == "#F08030"
    assert t.background_color == "rgba(240, 128, 48, 0.15)"
    assert t.to_dict() == {"borderColor": "#F08030", "backgroundColor": "rgba(240, 128, 48, 0.15)"}


@pytest.mark.parametrize("type_name", TYPES)
def test_background_matches_palette(type_name):
    t = theme_for(type_name)
    assert t.border_color == TYPE_COLORS[type_name]
    assert t.background_color == f"rgba({hex_to_rgb_components(TYPE_COLORS[type_name])}, 0.15)"


def test_unrecognized_type_falls_back_to_default_border():
    t = theme_for("shadow")
    assert t.border_color == "#ffde00"
    assert t.background_color == "rgba(255, 222, 0, 0.15)"


def test_selection_is_normalized():
    assert theme_for("  Water ") == theme_for("water")


def test_card_gradient_for_charizard():
    g = card_gradient("fire")
    assert g == CardGradient(start="#F08030", end=darken("#F08030", 20), border=lighten("#F08030", 30))
    assert g.css() == "linear-gradient(135deg, #F08030 0%, #bd4d00 100%)"


def test_card_gradient_fallback():
    assert card_gradient(None).start == "#e63947"
    assert card_gradient("shadow").start == "#e63947"


def test_badge_color():
    assert badge_color("flying") == "#A890F0"
    assert badge_color("stellar") == "#A8A878"


def test_image_placeholder():
    assert image_or_placeholder("https://x/y.png") == "https://x/y.png"
    assert image_or_placeholder(None) == "https://via.placeholder.com/140?text=Pokemon"


def test_types_table():
    assert len(TYPES) == 18
    assert set(TYPES) == set(TYPE_COLORS)
    assert TYPES[0] == "normal" and TYPES[-1] == "fairy"


def test_type_helpers():
    assert normalize_type(" Fire ") == "fire"
    assert is_known_type("GHOST")
    assert not is_known_type("unknown")
    assert type_label("psychic") == "Psychic"
    assert require_known_type("Dragon") == "dragon"
    with pytest.raises(UnknownType):
        require_known_type("stellar")
