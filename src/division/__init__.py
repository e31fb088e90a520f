"""Fluent styling for widgets."""
from importlib.metadata import version, PackageNotFoundError

from division.format.color import rgb, rgba, hex_color
from division.model.enums import Axis, BorderStyle, BoxFit, Curve, ImageRepeat, OverflowType, TileMode
from division.model.primitives import Alignment, Color
from division.style import StyleClass, StyleProperties, S

try:
    __version__ = version("division")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

__all__ = [
    "StyleClass", "StyleProperties", "S",
    "rgb", "rgba", "hex_color",
    "Alignment", "Color",
    "Axis", "BorderStyle", "BoxFit", "Curve", "ImageRepeat", "OverflowType", "TileMode",
]
