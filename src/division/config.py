"""
Configuration & Defaults
========================
This module serves as the central registry for the default values used by the
style builder.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (shadow colors, animation lengths)
   scattered throughout the setters.
2. Consistency: The builder, the formatters and the Qt layer all read the same
   defaults.

Exports:
    DEFAULT_SHADOW_COLOR (int): ARGB color of box shadows and elevation.
    DEFAULT_BORDER_COLOR (int): ARGB color of borders.
    DEFAULT_ANIMATION_MS (int): Animation duration used by `animate()`.
    NAMED_ALIGNMENTS (dict): Alignment names -> (x, y).
"""
import math

# Colors (32-bit ARGB)
DEFAULT_SHADOW_COLOR: int = 0x33000000
DEFAULT_BORDER_COLOR: int = 0xFF000000

# Animation
DEFAULT_ANIMATION_MS: int = 500

# Angles given as turns (use_radians=False) are multiplied by this
FULL_TURN: float = 2.0 * math.pi

# Elevation opacity curve: (BASE - sqrt(elevation) / DIVISOR) * opacity
ELEVATION_OPACITY_BASE: float = 0.5
ELEVATION_OPACITY_DIVISOR: float = 19.0

# Gradients
DEFAULT_RADIAL_RADIUS: float = 0.5

NAMED_ALIGNMENTS: dict[str, tuple[float, float]] = {
    "topLeft": (-1.0, -1.0),
    "top": (0.0, -1.0),
    "topRight": (1.0, -1.0),
    "left": (-1.0, 0.0),
    "center": (0.0, 0.0),
    "right": (1.0, 0.0),
    "bottomLeft": (-1.0, 1.0),
    "bottom": (0.0, 1.0),
    "bottomRight": (1.0, 1.0),
}
