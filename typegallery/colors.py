# typegallery/colors.py
# Hex color arithmetic used to theme the gallery (per-channel shift, no HSL)

import math


def _percent_to_amount(percent) -> int:
    """2.55 per percent, rounded half up (so 30% -> 77, not 76)."""
    return int(math.floor(2.55 * percent + 0.5))


def _clamp(channel: int) -> int:
    return max(0, min(255, channel))


def _split(hex_color: str) -> tuple[int, int, int]:
    num = int(hex_color.lstrip("#"), 16)
    return (num >> 16) & 0xFF, (num >> 8) & 0xFF, num & 0xFF


def _join(r: int, g: int, b: int) -> str:
    return f"#{_clamp(r):02x}{_clamp(g):02x}{_clamp(b):02x}"


def shift(hex_color: str, amount: int) -> str:
    """Add `amount` to every channel, clamping each one to 0..255."""
    r, g, b = _split(hex_color)
    return _join(r + amount, g + amount, b + amount)


def lighten(hex_color: str, percent) -> str:
    return shift(hex_color, _percent_to_amount(percent))


def darken(hex_color: str, percent) -> str:
    return shift(hex_color, -_percent_to_amount(percent))


def hex_to_rgb_components(hex_color: str) -> str:
    """'#F08030' -> '240, 128, 48' (ready to drop into rgba())."""
    return ", ".join(str(c) for c in _split(hex_color))


def hex_to_rgba(hex_color: str, alpha: float) -> str:
    return f"rgba({hex_to_rgb_components(hex_color)}, {alpha})"
