"""
Style Builder
=============
`StyleClass` accumulates the visual properties of a `Division` widget through
chained setter calls. The rendering layer reads them back through
`style.properties` and the three composed getters:

    get_box_decoration()   color, image, gradient, border, radius and shadow
    get_box_constraints()  min/max width and height
    get_transform()        rotation, scale and offset as one Matrix4

Angles are given as turns (0.0 - 1.0) unless the style is created with
`use_radians=True` (0.0 - 2 * pi). This applies to `rotate()`,
`sweep_gradient()` and `elevation()`.

Example:
    style = (
        StyleClass()
        .width(100)
        .height(150)
        .border_radius(all=30.0)
        .background_color('#eeeeee')
    )
"""
from __future__ import annotations

from dataclasses import dataclass, fields, replace
from datetime import timedelta
import logging
import math
import re
from typing import Any, Optional, Sequence, Tuple

from division import config
from division.format.alignment import format_alignment
from division.format.color import format_color
from division.format.overflow import format_overflow
from division.model.effects import RippleModel, OverflowModel
from division.model.enums import Axis, BorderStyle, BoxFit, Curve, ImageRepeat, TileMode
from division.model.primitives import (
    Alignment, AssetImage, Border, BorderRadius, BorderSide, BoxConstraints, BoxDecoration,
    BoxShadow, Color, ColorFilter, DecorationImage, EdgeInsets, Gradient, ImageProvider,
    LinearGradient, Matrix4, NetworkImage, Offset, Radius, RadialGradient, SweepGradient,
)

logger = logging.getLogger(__name__)


@dataclass
class StyleProperties:
    """All values a style can hold. `None` means unset."""
    alignment: Optional[Alignment] = None
    alignment_child: Optional[Alignment] = None
    padding: Optional[EdgeInsets] = None
    margin: Optional[EdgeInsets] = None

    background_color: Optional[Color] = None
    background_image: Optional[DecorationImage] = None
    background_blur: Optional[float] = None

    gradient: Optional[Gradient] = None
    border: Optional[Border] = None
    border_radius: Optional[BorderRadius] = None
    box_shadow: Optional[Tuple[BoxShadow, ...]] = None

    width: Optional[float] = None
    min_width: Optional[float] = None
    max_width: Optional[float] = None
    height: Optional[float] = None
    min_height: Optional[float] = None
    max_height: Optional[float] = None

    scale: Optional[float] = None
    rotate: Optional[float] = None  # radians
    offset: Optional[Offset] = None

    opacity: Optional[float] = None
    ripple: Optional[RippleModel] = None
    overflow: Optional[OverflowModel] = None

    duration: Optional[timedelta] = None
    curve: Optional[Curve] = None


def _camel_to_snake(name: str) -> str:
    return re.sub(r"([A-Z])", lambda m: "_" + m.group(1).lower(), name.strip())


def _edge_insets(
    all: Optional[float],
    horizontal: Optional[float],
    vertical: Optional[float],
    top: Optional[float],
    bottom: Optional[float],
    left: Optional[float],
    right: Optional[float],
) -> EdgeInsets:
    """Single sides trump the axis values, which trump `all`."""
    def pick(*values: Optional[float]) -> float:
        return next((v for v in values if v is not None), 0.0)

    return EdgeInsets.only(
        top=pick(top, vertical, all),
        bottom=pick(bottom, vertical, all),
        left=pick(left, horizontal, all),
        right=pick(right, horizontal, all),
    )


class StyleClass:
    """
    Responsible for all the styling of the `Division` widget.

    Every setter returns the style itself so that calls can be chained.
    """

    def __init__(self, use_radians: bool = False) -> None:
        self.use_radians = use_radians
        self.properties = StyleProperties()

    # ------------------------------------------------------------------------------
    # Composed getters
    # ------------------------------------------------------------------------------

    def get_box_decoration(self) -> Optional[BoxDecoration]:
        p = self.properties
        parts = (p.background_color, p.background_image, p.gradient, p.border, p.border_radius, p.box_shadow)
        if all(part is None for part in parts):
            return None
        return BoxDecoration(
            color=p.background_color,
            image=p.background_image,
            gradient=p.gradient,
            border=p.border,
            border_radius=p.border_radius,
            box_shadow=p.box_shadow,
        )

    def get_box_constraints(self) -> Optional[BoxConstraints]:
        p = self.properties
        if all(v is None for v in (p.min_height, p.max_height, p.min_width, p.max_width)):
            return None
        return BoxConstraints(
            min_width=p.min_width if p.min_width is not None else 0.0,
            max_width=p.max_width if p.max_width is not None else float('inf'),
            min_height=p.min_height if p.min_height is not None else 0.0,
            max_height=p.max_height if p.max_height is not None else float('inf'),
        )

    def get_transform(self) -> Optional[Matrix4]:
        p = self.properties
        if p.scale is None and p.rotate is None and p.offset is None:
            return None
        offset = p.offset or Offset.zero()
        return (
            Matrix4.rotation_z(p.rotate if p.rotate is not None else 0.0)
            .scale(p.scale if p.scale is not None else 1.0)
            .translate(offset.dx, offset.dy)
        )

    # ------------------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------------------

    def align(self, alignment: Any) -> StyleClass:
        """
        Alignment of the widget.

        Accepts an `Alignment`, a name ('center', 'topLeft', ...), a list
        [dx, dy] or a single number used for both axes.
        """
        self.properties.alignment = format_alignment(alignment)
        return self

    def align_child(self, alignment: Any) -> StyleClass:
        """Alignment of the child. Same formats as `align()`."""
        self.properties.alignment_child = format_alignment(alignment)
        return self

    def padding(
        self,
        all: Optional[float] = None,
        horizontal: Optional[float] = None,
        vertical: Optional[float] = None,
        top: Optional[float] = None,
        bottom: Optional[float] = None,
        left: Optional[float] = None,
        right: Optional[float] = None,
    ) -> StyleClass:
        """
        Empty space inside the decoration. The child is placed inside it.

        All arguments work together:
            style.padding(all=10, bottom=20)  # different padding at the bottom
        """
        self.properties.padding = _edge_insets(all, horizontal, vertical, top, bottom, left, right)
        return self

    def margin(
        self,
        all: Optional[float] = None,
        horizontal: Optional[float] = None,
        vertical: Optional[float] = None,
        top: Optional[float] = None,
        bottom: Optional[float] = None,
        left: Optional[float] = None,
        right: Optional[float] = None,
    ) -> StyleClass:
        """Empty space surrounding the decoration and child. Same rules as `padding()`."""
        self.properties.margin = _edge_insets(all, horizontal, vertical, top, bottom, left, right)
        return self

    def width(self, width: float) -> StyleClass:
        self.properties.width = width
        return self

    def min_width(self, min_width: float) -> StyleClass:
        self.properties.min_width = min_width
        return self

    def max_width(self, max_width: float) -> StyleClass:
        self.properties.max_width = max_width
        return self

    def height(self, height: float) -> StyleClass:
        self.properties.height = height
        return self

    def min_height(self, min_height: float) -> StyleClass:
        self.properties.min_height = min_height
        return self

    def max_height(self, max_height: float) -> StyleClass:
        self.properties.max_height = max_height
        return self

    # ------------------------------------------------------------------------------
    # Background
    # ------------------------------------------------------------------------------

    def background_blur(self, blur: float) -> StyleClass:
        """
        Blurs whatever is behind the widget.

        Frosted glass:
            style.background_blur(10).background_color(rgba(255, 255, 255, 0.15))

        Does not combine with `rotate()`.
        """
        if blur < 0:
            raise ValueError(f"Background blur cannot be negative: {blur}")
        self.properties.background_blur = blur
        return self

    def background_color(self, color: Any) -> StyleClass:
        """Accepts a `Color`, a hex string ('#eeeeee' or 'eeeeee'), an ARGB int, rgb() or rgba()."""
        self.properties.background_color = format_color(color)
        return self

    def background_image(
        self,
        url: Optional[str] = None,
        path: Optional[str] = None,
        color_filter: Optional[ColorFilter] = None,
        fit: Optional[BoxFit] = None,
        alignment: Any = "center",
        repeat: ImageRepeat = ImageRepeat.NO_REPEAT,
    ) -> StyleClass:
        """
        Either `url` (network image) or `path` (local image) has to be given.
        `path` trumps `url`.
        """
        if url is None and path is None:
            raise ValueError("A [url] or a [path] has to be provided")
        if url is not None and path is not None:
            logger.warning(f"Both url and path given for background image, using path '{path}'.")

        image: ImageProvider = AssetImage(path) if path is not None else NetworkImage(url)

        self.properties.background_image = DecorationImage(
            image=image,
            color_filter=color_filter,
            fit=BoxFit(fit) if fit is not None else None,
            alignment=format_alignment(alignment),
            repeat=ImageRepeat(repeat),
        )
        return self

    # ------------------------------------------------------------------------------
    # Gradients
    # ------------------------------------------------------------------------------

    def linear_gradient(
        self,
        colors: Sequence[Any],
        begin_align: Any = "left",
        end_align: Any = "right",
        tile_mode: TileMode = TileMode.CLAMP,
        stops: Optional[Sequence[float]] = None,
    ) -> StyleClass:
        self.properties.gradient = LinearGradient(
            begin=format_alignment(begin_align),
            end=format_alignment(end_align),
            colors=tuple(format_color(c) for c in colors),
            stops=tuple(stops) if stops is not None else None,
            tile_mode=TileMode(tile_mode),
        )
        return self

    def radial_gradient(
        self,
        colors: Sequence[Any],
        center_align: Any = "center",
        radius: float = config.DEFAULT_RADIAL_RADIUS,
        tile_mode: TileMode = TileMode.CLAMP,
        stops: Optional[Sequence[float]] = None,
    ) -> StyleClass:
        self.properties.gradient = RadialGradient(
            center=format_alignment(center_align),
            radius=radius,
            colors=tuple(format_color(c) for c in colors),
            stops=tuple(stops) if stops is not None else None,
            tile_mode=TileMode(tile_mode),
        )
        return self

    def sweep_gradient(
        self,
        colors: Sequence[Any],
        center_align: Any = "center",
        start_angle: float = 0.0,
        end_angle: Optional[float] = None,
        tile_mode: TileMode = TileMode.CLAMP,
        stops: Optional[Sequence[float]] = None,
    ) -> StyleClass:
        """
        Angles follow `use_radians`. `end_angle` defaults to a full turn.
        """
        start = self._to_radians(start_angle)
        end = config.FULL_TURN if end_angle is None else self._to_radians(end_angle)

        self.properties.gradient = SweepGradient(
            center=format_alignment(center_align),
            start_angle=start,
            end_angle=end,
            colors=tuple(format_color(c) for c in colors),
            stops=tuple(stops) if stops is not None else None,
            tile_mode=TileMode(tile_mode),
        )
        return self

    # ------------------------------------------------------------------------------
    # Border & Shadow
    # ------------------------------------------------------------------------------

    def border(
        self,
        all: Optional[float] = None,
        left: Optional[float] = None,
        right: Optional[float] = None,
        top: Optional[float] = None,
        bottom: Optional[float] = None,
        color: Any = config.DEFAULT_BORDER_COLOR,
        style: BorderStyle = BorderStyle.SOLID,
    ) -> StyleClass:
        """
        Border widths per side. Single sides trump `all`; sides left unset
        get no border.

            style.border(all=3.0, color='#55ffff')
        """
        final_color = format_color(color)
        border_style = BorderStyle(style)

        def side(width: Optional[float]) -> BorderSide:
            if width is None:
                return BorderSide.none()
            if width < 0:
                raise ValueError(f"Border width cannot be negative: {width}")
            return BorderSide(color=final_color, width=width, style=border_style)

        self.properties.border = Border(
            top=side(top if top is not None else all),
            right=side(right if right is not None else all),
            bottom=side(bottom if bottom is not None else all),
            left=side(left if left is not None else all),
        )
        return self

    def border_radius(
        self,
        all: Optional[float] = None,
        top_left: Optional[float] = None,
        top_right: Optional[float] = None,
        bottom_left: Optional[float] = None,
        bottom_right: Optional[float] = None,
    ) -> StyleClass:
        """`all` can be combined with single corners; single corners trump `all`."""
        def corner(value: Optional[float]) -> Radius:
            value = value if value is not None else all
            return Radius.circular(value if value is not None else 0.0)

        self.properties.border_radius = BorderRadius(
            top_left=corner(top_left),
            top_right=corner(top_right),
            bottom_left=corner(bottom_left),
            bottom_right=corner(bottom_right),
        )
        return self

    def box_shadow(
        self,
        color: Any = config.DEFAULT_SHADOW_COLOR,
        blur: Optional[float] = None,
        offset: Optional[Sequence[float]] = None,
        spread: Optional[float] = None,
    ) -> StyleClass:
        """
        A single box shadow. `offset` is [d] for (d, d) or [dx, dy].

        Shares its value with `elevation()`: the last one called applies.
        """
        if offset is None:
            final_offset = Offset.zero()
        elif len(offset) == 1:
            final_offset = Offset(offset[0], offset[0])
        elif len(offset) == 2:
            final_offset = Offset(offset[0], offset[1])
        else:
            raise ValueError(f"Shadow offset must be [d] or [dx, dy], got {list(offset)}")

        self.properties.box_shadow = (
            BoxShadow(
                color=format_color(color),
                blur_radius=blur if blur is not None else 0.0,
                spread_radius=spread if spread is not None else 0.0,
                offset=final_offset,
            ),
        )
        return self

    def elevation(
        self,
        elevation: float,
        angle: Optional[float] = 0.0,
        color: Any = config.DEFAULT_SHADOW_COLOR,
        opacity: float = 1.0,
    ) -> StyleClass:
        """
        Elevates the widget with a box shadow.

        Args:
            elevation: Shadow distance and blur. 0 removes the shadow.
            angle: Direction of the shadow, 0.0 is down. Follows `use_radians`.
                With `None` the shadow sits directly under the widget.
            color: Shadow color; its alpha is replaced by the elevation curve.
            opacity: Relative opacity. 0.5 halves the opacity for the given elevation.

        Shares its value with `box_shadow()`: the last one called applies.
        """
        if elevation < 0:
            raise ValueError(f"Elevation cannot be negative. Received a value of {elevation}")
        if elevation == 0:
            self.properties.box_shadow = None
            return self

        offset_x = 0.0
        offset_y = 0.0
        if angle is not None:
            rad = self._to_radians(angle)
            offset_x = math.sin(rad) * elevation
            offset_y = math.cos(rad) * elevation

        # custom curve defining the opacity
        final_opacity = (
            config.ELEVATION_OPACITY_BASE - math.sqrt(elevation) / config.ELEVATION_OPACITY_DIVISOR
        ) * opacity
        final_opacity = min(max(final_opacity, 0.0), 1.0)

        logger.debug(
            f"Elevation {elevation}: offset=({offset_x:.3f}, {offset_y:.3f}), opacity={final_opacity:.3f}"
        )

        self.properties.box_shadow = (
            BoxShadow(
                color=format_color(color).with_opacity(final_opacity),
                blur_radius=elevation,
                spread_radius=0.0,
                offset=Offset(offset_x, offset_y),
            ),
        )
        return self

    # ------------------------------------------------------------------------------
    # Transform
    # ------------------------------------------------------------------------------

    def scale(self, ratio: float) -> StyleClass:
        """1 is the normal size, 2 double the size. Must not be negative."""
        if ratio < 0:
            raise ValueError(f"The widget scale cannot be negative: {ratio}")
        self.properties.scale = ratio
        return self

    def offset(self, dx: float, dy: float) -> StyleClass:
        self.properties.offset = Offset(dx, dy)
        return self

    def rotate(self, angle: float) -> StyleClass:
        """
        Widget rotation.

            StyleClass().rotate(0.75)
            StyleClass(use_radians=True).rotate(0.75 * 2 * math.pi)
        """
        self.properties.rotate = self._to_radians(angle)
        return self

    # ------------------------------------------------------------------------------
    # Effects
    # ------------------------------------------------------------------------------

    def opacity(self, opacity: float) -> StyleClass:
        """Opacity of the whole widget, between 0.0 and 1.0."""
        if opacity < 0.0 or opacity > 1.0:
            raise ValueError(f"Invalid opacity value: {opacity}")
        self.properties.opacity = opacity
        return self

    def ripple(self, enable: bool, splash_color: Any = None, highlight_color: Any = None) -> StyleClass:
        """Material ripple effect."""
        self.properties.ripple = RippleModel(
            enable=enable,
            splash_color=format_color(splash_color) if splash_color is not None else None,
            highlight_color=format_color(highlight_color) if highlight_color is not None else None,
        )
        return self

    def overflow(self, overflow: str, direction: Axis = Axis.VERTICAL) -> StyleClass:
        """
        Child overflow behaviour.

            'visible'  the child grows outside of the parent in `direction`
            'hidden'   the child is clipped to the parent
            'scroll'   the child scrolls in `direction` when bigger than the parent

        Overflow changes are not animated.
        """
        self.properties.overflow = OverflowModel(
            overflow=format_overflow(overflow),
            direction=Axis(direction),
        )
        return self

    def animate(self, duration: int = config.DEFAULT_ANIMATION_MS, curve: Curve | str = Curve.LINEAR) -> StyleClass:
        """Animate style changes. `duration` is given in milliseconds."""
        if duration < 0:
            raise ValueError(f"Duration cannot be negative: {duration}")
        try:
            final_curve = Curve(_camel_to_snake(curve) if isinstance(curve, str) else curve)
        except ValueError:
            raise ValueError(f"Unknown animation curve: '{curve}'") from None

        self.properties.duration = timedelta(milliseconds=duration)
        self.properties.curve = final_curve
        return self

    # ------------------------------------------------------------------------------
    # Merge
    # ------------------------------------------------------------------------------

    def add(self, style: Optional[StyleClass], override: bool = False) -> StyleClass:
        """
        Adds the properties of another style to this one.

        By default only properties unset on this style are taken over. With
        `override=True` every property set on `style` replaces the current value.

            style.add(StyleClass().width(100))
        """
        if style is None:
            return self

        taken: list[str] = []
        for f in fields(StyleProperties):
            incoming = getattr(style.properties, f.name)
            if incoming is None:
                continue
            if override or getattr(self.properties, f.name) is None:
                setattr(self.properties, f.name, incoming)
                taken.append(f.name)

        logger.debug(f"Merged style (override={override}): took {taken}")
        return self

    def copy(self) -> StyleClass:
        new = type(self)(use_radians=self.use_radians)
        new.properties = replace(self.properties)
        return new

    # ------------------------------------------------------------------------------
    # Internal methods
    # ------------------------------------------------------------------------------

    def _to_radians(self, angle: float) -> float:
        return angle if self.use_radians else angle * config.FULL_TURN

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StyleClass):
            return NotImplemented
        return self.use_radians == other.use_radians and self.properties == other.properties

    def __repr__(self) -> str:
        set_values = ", ".join(
            f"{f.name}={getattr(self.properties, f.name)!r}"
            for f in fields(StyleProperties)
            if getattr(self.properties, f.name) is not None
        )
        separator = ", " if set_values else ""
        return f"{type(self).__name__}(use_radians={self.use_radians}{separator}{set_values})"


class S(StyleClass):
    """Short alias of `StyleClass`."""
