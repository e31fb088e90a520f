"""Enumerations shared by the style builder and the rendering layer."""
from enum import StrEnum


class BorderStyle(StrEnum):
    SOLID = "solid"
    NONE = "none"


class TileMode(StrEnum):
    """How a gradient paints outside of its defined area."""
    CLAMP = "clamp"
    REPEATED = "repeated"
    MIRROR = "mirror"


class BoxFit(StrEnum):
    """How a background image is inscribed into the box."""
    FILL = "fill"
    CONTAIN = "contain"
    COVER = "cover"
    FIT_WIDTH = "fit_width"
    FIT_HEIGHT = "fit_height"
    NONE = "none"
    SCALE_DOWN = "scale_down"


class ImageRepeat(StrEnum):
    REPEAT = "repeat"
    REPEAT_X = "repeat_x"
    REPEAT_Y = "repeat_y"
    NO_REPEAT = "no_repeat"


class Axis(StrEnum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class OverflowType(StrEnum):
    """Child overflow behaviour."""
    VISIBLE = "visible"  # child grows outside the parent
    HIDDEN = "hidden"  # child is clipped
    SCROLL = "scroll"  # child becomes scrollable


class Curve(StrEnum):
    """Animation easing curves."""
    LINEAR = "linear"
    EASE = "ease"
    EASE_IN = "ease_in"
    EASE_OUT = "ease_out"
    EASE_IN_OUT = "ease_in_out"
    FAST_OUT_SLOW_IN = "fast_out_slow_in"
    DECELERATE = "decelerate"
    BOUNCE_IN = "bounce_in"
    BOUNCE_OUT = "bounce_out"
    ELASTIC_IN = "elastic_in"
    ELASTIC_OUT = "elastic_out"
