"""
Color Parsing
=============
Accepted color formats:

    Color          Color(0xFFEEEEEE)
    hex string     '#eeeeee' or 'eeeeee' (also '#eee' and '#eeeeeeff')
    int            0xFFEEEEEE (ARGB)
    rgb / rgba     rgb(43, 120, 32), rgba(43, 120, 32, 0.6)
"""
from __future__ import annotations

import string
from typing import Any

from division.model.primitives import Color


def hex_color(value: str) -> Color:
    """
    Parse a hex color string with an optional leading '#'.

    6 digits are RRGGBB (opaque), 3 digits the RGB shorthand and 8 digits
    RRGGBBAA.
    """
    digits = value.strip().removeprefix("#")
    if not digits or any(ch not in string.hexdigits for ch in digits):
        raise ValueError(f"Invalid hex color: '{value}'")

    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)

    if len(digits) == 6:
        return Color(0xFF000000 | int(digits, 16))
    if len(digits) == 8:
        rrggbb, aa = digits[:6], digits[6:]
        return Color((int(aa, 16) << 24) | int(rrggbb, 16))

    raise ValueError(f"Invalid hex color: '{value}'. Expected 3, 6 or 8 hex digits.")


def rgb(r: int, g: int, b: int) -> Color:
    """Opaque color from red, green and blue channels (0-255)."""
    return Color.from_argb(255, r, g, b)


def rgba(r: int, g: int, b: int, opacity: float = 1.0) -> Color:
    """Color from red, green, blue (0-255) and an opacity (0.0-1.0)."""
    return Color.from_rgbo(r, g, b, opacity)


def format_color(color: Any) -> Color:
    """
    Convert the supported color formats to a `Color`.

    Raises:
        ValueError: Malformed string or out-of-range value.
        TypeError: Unsupported input type.
    """
    if isinstance(color, Color):
        return color
    if isinstance(color, str):
        return hex_color(color)
    if isinstance(color, int) and not isinstance(color, bool):
        return Color(color)
    raise TypeError(f"Unsupported color type: {type(color).__name__}")
