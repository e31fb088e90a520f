"""Normalizers turning loosely typed user input into model values."""
from division.format.alignment import format_alignment
from division.format.color import format_color, rgb, rgba, hex_color
from division.format.overflow import format_overflow

__all__ = ["format_alignment", "format_color", "rgb", "rgba", "hex_color", "format_overflow"]
