"""
Qt Conversion Helpers
=====================
Translate the plain model values into PySide6 paint objects.
"""
from __future__ import annotations

import math
from typing import Optional

from PySide6.QtCore import Qt, QPointF, QRectF, QMarginsF, QEasingCurve
from PySide6.QtGui import (
    QColor, QGradient, QLinearGradient, QRadialGradient, QConicalGradient,
    QTransform, QPen, QPainterPath
)

from division.model.enums import BorderStyle, Curve, TileMode
from division.model.primitives import (
    Alignment, BorderRadius, BorderSide, Color, EdgeInsets, Gradient,
    LinearGradient, Matrix4, RadialGradient, SweepGradient
)

_SPREAD: dict[TileMode, QGradient.Spread] = {
    TileMode.CLAMP: QGradient.Spread.PadSpread,
    TileMode.REPEATED: QGradient.Spread.RepeatSpread,
    TileMode.MIRROR: QGradient.Spread.ReflectSpread,
}

_EASING: dict[Curve, QEasingCurve.Type] = {
    Curve.LINEAR: QEasingCurve.Type.Linear,
    Curve.EASE: QEasingCurve.Type.InOutQuad,
    Curve.EASE_IN: QEasingCurve.Type.InCubic,
    Curve.EASE_OUT: QEasingCurve.Type.OutCubic,
    Curve.EASE_IN_OUT: QEasingCurve.Type.InOutCubic,
    Curve.FAST_OUT_SLOW_IN: QEasingCurve.Type.InOutQuart,
    Curve.DECELERATE: QEasingCurve.Type.OutQuad,
    Curve.BOUNCE_IN: QEasingCurve.Type.InBounce,
    Curve.BOUNCE_OUT: QEasingCurve.Type.OutBounce,
    Curve.ELASTIC_IN: QEasingCurve.Type.InElastic,
    Curve.ELASTIC_OUT: QEasingCurve.Type.OutElastic,
}


def to_qcolor(color: Color) -> QColor:
    return QColor(color.red, color.green, color.blue, color.alpha)


def to_qpointf(alignment: Alignment, rect: QRectF) -> QPointF:
    """Position of `alignment` inside `rect`."""
    x, y = alignment.within(rect.width(), rect.height())
    return QPointF(rect.left() + x, rect.top() + y)


def to_qmarginsf(insets: EdgeInsets) -> QMarginsF:
    return QMarginsF(insets.left, insets.top, insets.right, insets.bottom)


def to_qt_alignment(alignment: Alignment) -> Qt.AlignmentFlag:
    """Snap an alignment to the nearest Qt alignment flags."""
    if alignment.x < 0:
        horizontal = Qt.AlignmentFlag.AlignLeft
    elif alignment.x > 0:
        horizontal = Qt.AlignmentFlag.AlignRight
    else:
        horizontal = Qt.AlignmentFlag.AlignHCenter

    if alignment.y < 0:
        vertical = Qt.AlignmentFlag.AlignTop
    elif alignment.y > 0:
        vertical = Qt.AlignmentFlag.AlignBottom
    else:
        vertical = Qt.AlignmentFlag.AlignVCenter

    return horizontal | vertical


def to_qeasing_curve(curve: Curve) -> QEasingCurve:
    return QEasingCurve(_EASING[Curve(curve)])


def to_qtransform(matrix: Matrix4) -> QTransform:
    """
    Project a 4x4 matrix onto the 2D affine QTransform.

    Qt multiplies row vectors, so the matrix is transposed on the way in.
    """
    m = matrix.values
    return QTransform(
        m[0, 0], m[1, 0], 0.0,
        m[0, 1], m[1, 1], 0.0,
        m[0, 3], m[1, 3], 1.0,
    )


def to_qpen(side: BorderSide) -> QPen:
    pen = QPen(to_qcolor(side.color))
    pen.setWidthF(side.width)
    if side.style == BorderStyle.NONE:
        pen.setStyle(Qt.PenStyle.NoPen)
    return pen


def _gradient_stops(count: int, stops: Optional[tuple[float, ...]]) -> list[float]:
    if stops is not None:
        return list(stops)
    return [i / (count - 1) for i in range(count)]


def to_qgradient(gradient: Gradient, rect: QRectF) -> QGradient:
    """
    Build the Qt gradient for `gradient` painted over `rect`.

    Radial radii are a fraction of the shortest side of `rect`. Sweep
    gradients run clockwise, Qt's conical gradient runs counter-clockwise, so
    their stops are mirrored.
    """
    positions = _gradient_stops(len(gradient.colors), gradient.stops)

    if isinstance(gradient, LinearGradient):
        q_gradient: QGradient = QLinearGradient(
            to_qpointf(gradient.begin, rect), to_qpointf(gradient.end, rect)
        )
    elif isinstance(gradient, RadialGradient):
        radius = gradient.radius * min(rect.width(), rect.height())
        q_gradient = QRadialGradient(to_qpointf(gradient.center, rect), radius)
    elif isinstance(gradient, SweepGradient):
        q_gradient = QConicalGradient(
            to_qpointf(gradient.center, rect), -math.degrees(gradient.start_angle)
        )
        span = (gradient.end_angle - gradient.start_angle) / (2.0 * math.pi)
        positions = [min(max(1.0 - p * span, 0.0), 1.0) for p in positions]
    else:
        raise TypeError(f"Unsupported gradient type: {type(gradient).__name__}")

    for position, color in zip(positions, gradient.colors):
        q_gradient.setColorAt(position, to_qcolor(color))
    q_gradient.setSpread(_SPREAD[gradient.tile_mode])
    return q_gradient


def rounded_rect_path(rect: QRectF, radius: Optional[BorderRadius]) -> QPainterPath:
    """Path of `rect` with elliptical corners, each clamped to half the rect."""
    path = QPainterPath()
    if radius is None:
        path.addRect(rect)
        return path

    half_w = rect.width() / 2.0
    half_h = rect.height() / 2.0

    def corner(r) -> tuple[float, float]:
        return min(r.x, half_w), min(r.y, half_h)

    if radius.is_uniform:
        x, y = corner(radius.top_left)
        path.addRoundedRect(rect, x, y)
        return path

    tl_x, tl_y = corner(radius.top_left)
    tr_x, tr_y = corner(radius.top_right)
    br_x, br_y = corner(radius.bottom_right)
    bl_x, bl_y = corner(radius.bottom_left)

    left, top, right, bottom = rect.left(), rect.top(), rect.right(), rect.bottom()

    path.moveTo(left + tl_x, top)
    path.lineTo(right - tr_x, top)
    path.arcTo(QRectF(right - 2 * tr_x, top, 2 * tr_x, 2 * tr_y), 90.0, -90.0)
    path.lineTo(right, bottom - br_y)
    path.arcTo(QRectF(right - 2 * br_x, bottom - 2 * br_y, 2 * br_x, 2 * br_y), 0.0, -90.0)
    path.lineTo(left + bl_x, bottom)
    path.arcTo(QRectF(left, bottom - 2 * bl_y, 2 * bl_x, 2 * bl_y), 270.0, -90.0)
    path.lineTo(left, top + tl_y)
    path.arcTo(QRectF(left, top, 2 * tl_x, 2 * tl_y), 180.0, -90.0)
    path.closeSubpath()
    return path
