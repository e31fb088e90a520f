"""
Paint and Layout Primitives.

Immutable value types produced by `StyleClass` and read by the rendering layer.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Tuple, Union, TYPE_CHECKING
import math

import numpy as np

from division.model.enums import BorderStyle, TileMode, BoxFit, ImageRepeat

if TYPE_CHECKING:
    import numpy.typing as npt


# ------------------------------------------------------------------------------
# Color
# ------------------------------------------------------------------------------
@dataclass(frozen=True)
class Color:
    """
    A 32-bit color value in ARGB format (0xAARRGGBB).
    """
    value: int

    def __post_init__(self) -> None:
        if not 0 <= self.value <= 0xFFFFFFFF:
            raise ValueError(f"Color value out of range: {self.value:#x}")

    @classmethod
    def from_argb(cls, a: int, r: int, g: int, b: int) -> Color:
        for name, channel in (("alpha", a), ("red", r), ("green", g), ("blue", b)):
            if not 0 <= channel <= 255:
                raise ValueError(f"Invalid {name} channel: {channel}")
        return cls((a << 24) | (r << 16) | (g << 8) | b)

    @classmethod
    def from_rgbo(cls, r: int, g: int, b: int, opacity: float) -> Color:
        """Create a color from red, green, blue and an opacity in [0.0, 1.0]."""
        if not 0.0 <= opacity <= 1.0:
            raise ValueError(f"Invalid opacity value: {opacity}")
        return cls.from_argb(round(opacity * 255), r, g, b)

    @property
    def alpha(self) -> int:
        return (self.value >> 24) & 0xFF

    @property
    def red(self) -> int:
        return (self.value >> 16) & 0xFF

    @property
    def green(self) -> int:
        return (self.value >> 8) & 0xFF

    @property
    def blue(self) -> int:
        return self.value & 0xFF

    @property
    def opacity(self) -> float:
        return self.alpha / 255.0

    def with_alpha(self, alpha: int) -> Color:
        return Color.from_argb(alpha, self.red, self.green, self.blue)

    def with_opacity(self, opacity: float) -> Color:
        """Returns the same color with the alpha channel replaced."""
        if not 0.0 <= opacity <= 1.0:
            raise ValueError(f"Invalid opacity value: {opacity}")
        return self.with_alpha(round(255.0 * opacity))

    def to_hex(self) -> str:
        """'#RRGGBB' for opaque colors, '#AARRGGBB' otherwise."""
        if self.alpha == 0xFF:
            return f"#{self.value & 0xFFFFFF:06x}"
        return f"#{self.value:08x}"


# ------------------------------------------------------------------------------
# Geometry
# ------------------------------------------------------------------------------
@dataclass(frozen=True)
class Alignment:
    """
    A point within a rectangle. (0, 0) is the center, (-1, -1) the top left
    corner and (1, 1) the bottom right corner.
    """
    x: float
    y: float

    @classmethod
    def center(cls) -> Alignment:
        return cls(0.0, 0.0)

    def within(self, width: float, height: float) -> Tuple[float, float]:
        """Position of this alignment inside a box of the given size."""
        return (self.x + 1.0) * width / 2.0, (self.y + 1.0) * height / 2.0


@dataclass(frozen=True)
class Offset:
    dx: float
    dy: float

    @classmethod
    def zero(cls) -> Offset:
        return cls(0.0, 0.0)


@dataclass(frozen=True)
class EdgeInsets:
    """Offsets in each of the four cardinal directions."""
    top: float = 0.0
    bottom: float = 0.0
    left: float = 0.0
    right: float = 0.0

    @classmethod
    def only(
        cls,
        top: float = 0.0,
        bottom: float = 0.0,
        left: float = 0.0,
        right: float = 0.0
    ) -> EdgeInsets:
        return cls(top=top, bottom=bottom, left=left, right=right)

    @classmethod
    def all(cls, value: float) -> EdgeInsets:
        return cls(value, value, value, value)

    @property
    def horizontal(self) -> float:
        return self.left + self.right

    @property
    def vertical(self) -> float:
        return self.top + self.bottom


@dataclass(frozen=True)
class Radius:
    x: float
    y: float

    @classmethod
    def circular(cls, radius: float) -> Radius:
        return cls(radius, radius)


@dataclass(frozen=True)
class BorderRadius:
    top_left: Radius = field(default_factory=lambda: Radius.circular(0.0))
    top_right: Radius = field(default_factory=lambda: Radius.circular(0.0))
    bottom_left: Radius = field(default_factory=lambda: Radius.circular(0.0))
    bottom_right: Radius = field(default_factory=lambda: Radius.circular(0.0))

    @classmethod
    def circular(cls, radius: float) -> BorderRadius:
        r = Radius.circular(radius)
        return cls(r, r, r, r)

    @property
    def is_uniform(self) -> bool:
        return self.top_left == self.top_right == self.bottom_left == self.bottom_right


# ------------------------------------------------------------------------------
# Border & Shadow
# ------------------------------------------------------------------------------
@dataclass(frozen=True)
class BorderSide:
    color: Color = field(default_factory=lambda: Color(0xFF000000))
    width: float = 1.0
    style: BorderStyle = BorderStyle.SOLID

    @classmethod
    def none(cls) -> BorderSide:
        return cls(width=0.0, style=BorderStyle.NONE)

    @property
    def visible(self) -> bool:
        return self.style != BorderStyle.NONE and self.width > 0.0


@dataclass(frozen=True)
class Border:
    top: BorderSide = field(default_factory=BorderSide.none)
    right: BorderSide = field(default_factory=BorderSide.none)
    bottom: BorderSide = field(default_factory=BorderSide.none)
    left: BorderSide = field(default_factory=BorderSide.none)

    @property
    def is_uniform(self) -> bool:
        return self.top == self.right == self.bottom == self.left

    @property
    def dimensions(self) -> EdgeInsets:
        """Space taken up by the visible sides."""
        def w(side: BorderSide) -> float:
            return side.width if side.visible else 0.0
        return EdgeInsets(top=w(self.top), bottom=w(self.bottom), left=w(self.left), right=w(self.right))


@dataclass(frozen=True)
class BoxShadow:
    color: Color = field(default_factory=lambda: Color(0xFF000000))
    blur_radius: float = 0.0
    spread_radius: float = 0.0
    offset: Offset = field(default_factory=Offset.zero)


# ------------------------------------------------------------------------------
# Gradients
# ------------------------------------------------------------------------------
def _check_stops(colors: Tuple[Color, ...], stops: Optional[Tuple[float, ...]]) -> None:
    if len(colors) < 2:
        raise ValueError(f"A gradient needs at least two colors, got {len(colors)}.")
    if stops is not None and len(stops) != len(colors):
        raise ValueError(
            f"Gradient stops ({len(stops)}) must match the number of colors ({len(colors)})."
        )


@dataclass(frozen=True)
class LinearGradient:
    begin: Alignment
    end: Alignment
    colors: Tuple[Color, ...]
    stops: Optional[Tuple[float, ...]] = None
    tile_mode: TileMode = TileMode.CLAMP

    def __post_init__(self) -> None:
        _check_stops(self.colors, self.stops)


@dataclass(frozen=True)
class RadialGradient:
    center: Alignment
    radius: float
    colors: Tuple[Color, ...]
    stops: Optional[Tuple[float, ...]] = None
    tile_mode: TileMode = TileMode.CLAMP

    def __post_init__(self) -> None:
        _check_stops(self.colors, self.stops)


@dataclass(frozen=True)
class SweepGradient:
    """Angles are in radians."""
    center: Alignment
    start_angle: float
    end_angle: float
    colors: Tuple[Color, ...]
    stops: Optional[Tuple[float, ...]] = None
    tile_mode: TileMode = TileMode.CLAMP

    def __post_init__(self) -> None:
        _check_stops(self.colors, self.stops)


Gradient = Union[LinearGradient, RadialGradient, SweepGradient]


# ------------------------------------------------------------------------------
# Images
# ------------------------------------------------------------------------------
@dataclass(frozen=True)
class AssetImage:
    """A local image file."""
    path: str


@dataclass(frozen=True)
class NetworkImage:
    url: str


ImageProvider = Union[AssetImage, NetworkImage]


@dataclass(frozen=True)
class ColorFilter:
    color: Color
    mode: str = "src_over"


@dataclass(frozen=True)
class DecorationImage:
    image: ImageProvider
    color_filter: Optional[ColorFilter] = None
    fit: Optional[BoxFit] = None
    alignment: Alignment = field(default_factory=Alignment.center)
    repeat: ImageRepeat = ImageRepeat.NO_REPEAT


# ------------------------------------------------------------------------------
# Composed results
# ------------------------------------------------------------------------------
@dataclass(frozen=True)
class BoxDecoration:
    color: Optional[Color] = None
    image: Optional[DecorationImage] = None
    gradient: Optional[Gradient] = None
    border: Optional[Border] = None
    border_radius: Optional[BorderRadius] = None
    box_shadow: Optional[Tuple[BoxShadow, ...]] = None


@dataclass(frozen=True)
class BoxConstraints:
    """Size limits for a box. Unbounded sides use infinity."""
    min_width: float = 0.0
    max_width: float = float('inf')
    min_height: float = 0.0
    max_height: float = float('inf')

    def clamp_width(self, width: float) -> float:
        return max(self.min_width, min(width, self.max_width))

    def clamp_height(self, height: float) -> float:
        return max(self.min_height, min(height, self.max_height))

    @property
    def is_tight(self) -> bool:
        return self.min_width == self.max_width and self.min_height == self.max_height


class Matrix4:
    """
    A 4x4 transformation matrix (row-major, column vectors).

    `scale` and `translate` post-multiply and return a new matrix, so
    `Matrix4.rotation_z(a).scale(s).translate(x, y)` rotates the scaled and
    translated point.
    """

    def __init__(self, values: Optional[npt.ArrayLike] = None) -> None:
        if values is None:
            self._m: npt.NDArray[np.float64] = np.identity(4, dtype=np.float64)
        else:
            arr = np.asarray(values, dtype=np.float64)
            if arr.shape != (4, 4):
                raise ValueError(f"Expected shape (4, 4), got {arr.shape}.")
            self._m = arr.copy()

    @classmethod
    def identity(cls) -> Matrix4:
        return cls()

    @classmethod
    def rotation_z(cls, angle_rad: float) -> Matrix4:
        """Rotation around the Z axis."""
        cos_a = math.cos(angle_rad)
        sin_a = math.sin(angle_rad)
        m = np.identity(4, dtype=np.float64)
        m[0, 0], m[0, 1] = cos_a, -sin_a
        m[1, 0], m[1, 1] = sin_a, cos_a
        return cls(m)

    def scale(self, sx: float, sy: Optional[float] = None, sz: Optional[float] = None) -> Matrix4:
        sy = sx if sy is None else sy
        sz = sx if sz is None else sz
        return Matrix4(self._m @ np.diag([sx, sy, sz, 1.0]))

    def translate(self, dx: float, dy: float = 0.0, dz: float = 0.0) -> Matrix4:
        t = np.identity(4, dtype=np.float64)
        t[:3, 3] = (dx, dy, dz)
        return Matrix4(self._m @ t)

    def transform_point(self, x: float, y: float) -> Tuple[float, float]:
        out = self._m @ np.array([x, y, 0.0, 1.0])
        return float(out[0]), float(out[1])

    @property
    def values(self) -> npt.NDArray[np.float64]:
        """A copy of the underlying array."""
        return self._m.copy()

    @property
    def is_identity(self) -> bool:
        return bool(np.allclose(self._m, np.identity(4)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix4):
            return NotImplemented
        return bool(np.allclose(self._m, other._m))

    def __repr__(self) -> str:
        return f"Matrix4({self._m.tolist()!r})"
