"""
Division Widget
===============
A QWidget that lays out and paints itself from a `StyleClass`.

Mapping of the style onto Qt:
    width / height            fixed size (margin included), clamped to min/max
    min/max width/height      minimum / maximum size
    padding, margin, border   layout contents margins
    align_child               alignment of the child inside the layout
    opacity                   QGraphicsOpacityEffect
    overflow                  child masked to the decorated box unless visible
    decoration                painted in `paintEvent`
    transform                 applied around the center of the decorated box
"""
from __future__ import annotations

import logging
import math

from PySide6.QtCore import QEvent, QLineF, QObject, QPointF, QRectF, Qt
from PySide6.QtGui import QBrush, QPainter, QPaintEvent, QPixmap, QRegion, QResizeEvent
from PySide6.QtWidgets import QGraphicsOpacityEffect, QVBoxLayout, QWidget

from division.model.enums import BoxFit
from division.model.primitives import (
    Border, BoxDecoration, BoxShadow, DecorationImage, EdgeInsets, AssetImage
)
from division.qt.convert import (
    rounded_rect_path, to_qcolor, to_qgradient, to_qmarginsf, to_qpen,
    to_qpointf, to_qt_alignment, to_qtransform
)
from division.style import StyleClass

logger = logging.getLogger(__name__)

# QWIDGETSIZE_MAX
_MAX_SIZE = (1 << 24) - 1

_ASPECT_MODE: dict[BoxFit, Qt.AspectRatioMode] = {
    BoxFit.FILL: Qt.AspectRatioMode.IgnoreAspectRatio,
    BoxFit.CONTAIN: Qt.AspectRatioMode.KeepAspectRatio,
    BoxFit.COVER: Qt.AspectRatioMode.KeepAspectRatioByExpanding,
}


def _to_px(value: float) -> int:
    if math.isinf(value):
        return _MAX_SIZE
    return max(0, min(_MAX_SIZE, round(value)))


class Division(QWidget):
    """A styled container holding at most one child widget."""

    def __init__(
        self,
        style: StyleClass | None = None,
        child: QWidget | None = None,
        parent: QWidget | None = None
    ) -> None:
        super().__init__(parent)
        self._style = style or StyleClass()
        self._child = child

        self._layout = QVBoxLayout(self)
        if child is not None:
            self._layout.addWidget(child)
            child.installEventFilter(self)

        self._apply_style()

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    @property
    def style_class(self) -> StyleClass:
        return self._style

    @property
    def child(self) -> QWidget | None:
        return self._child

    def set_style(self, style: StyleClass) -> None:
        """Replace the style, re-apply the layout properties and repaint."""
        self._style = style
        self._apply_style()
        self.update()

    def decorated_rect(self) -> QRectF:
        """The widget rectangle minus the margin: the area the decoration covers."""
        rect = QRectF(self.rect())
        margin = self._style.properties.margin
        if margin is not None:
            rect = rect.marginsRemoved(to_qmarginsf(margin))
        return rect

    # ------------------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------------------

    def _apply_style(self) -> None:
        p = self._style.properties
        margin = p.margin or EdgeInsets()
        padding = p.padding or EdgeInsets()
        border = p.border.dimensions if p.border is not None else EdgeInsets()

        self._layout.setContentsMargins(
            _to_px(margin.left + border.left + padding.left),
            _to_px(margin.top + border.top + padding.top),
            _to_px(margin.right + border.right + padding.right),
            _to_px(margin.bottom + border.bottom + padding.bottom),
        )

        # size limits apply to the decorated box, the margin comes on top
        constraints = self._style.get_box_constraints()
        if constraints is not None:
            self.setMinimumSize(
                _to_px(constraints.min_width + margin.horizontal),
                _to_px(constraints.min_height + margin.vertical),
            )
            self.setMaximumSize(
                _to_px(constraints.max_width + margin.horizontal),
                _to_px(constraints.max_height + margin.vertical),
            )
        else:
            self.setMinimumSize(0, 0)
            self.setMaximumSize(_MAX_SIZE, _MAX_SIZE)

        width, height = p.width, p.height
        if constraints is not None:
            if width is not None:
                width = constraints.clamp_width(width)
            if height is not None:
                height = constraints.clamp_height(height)
        if width is not None:
            self.setFixedWidth(_to_px(width + margin.horizontal))
        if height is not None:
            self.setFixedHeight(_to_px(height + margin.vertical))

        if self._child is not None:
            if p.alignment_child is not None:
                self._layout.setAlignment(self._child, to_qt_alignment(p.alignment_child))
            else:
                self._layout.setAlignment(self._child, Qt.AlignmentFlag(0))
            self._update_child_clip()

        if p.opacity is not None:
            effect = QGraphicsOpacityEffect(self)
            effect.setOpacity(p.opacity)
            self.setGraphicsEffect(effect)
        else:
            self.setGraphicsEffect(None)

        logger.debug(f"Applied style to {self.objectName() or type(self).__name__}: {self._style!r}")

    def _update_child_clip(self) -> None:
        """Mask the child to the decorated box when the overflow is not visible."""
        if self._child is None:
            return
        overflow = self._style.properties.overflow
        if overflow is None or not overflow.clips:
            self._child.clearMask()
            return

        path = rounded_rect_path(self.decorated_rect(), self._style.properties.border_radius)
        path = path.translated(QPointF(-self._child.x(), -self._child.y()))
        self._child.setMask(QRegion(path.toFillPolygon().toPolygon()))

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:
        if watched is self._child and event.type() in (QEvent.Type.Resize, QEvent.Type.Move):
            self._update_child_clip()
        return super().eventFilter(watched, event)

    def resizeEvent(self, event: QResizeEvent) -> None:
        super().resizeEvent(event)
        self._update_child_clip()

    # ------------------------------------------------------------------------------
    # Painting
    # ------------------------------------------------------------------------------

    def paintEvent(self, event: QPaintEvent) -> None:
        decoration = self._style.get_box_decoration()
        if decoration is None:
            return

        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        try:
            rect = self.decorated_rect()
            transform = self._style.get_transform()
            if transform is not None and not transform.is_identity:
                center = rect.center()
                painter.translate(center)
                painter.setTransform(to_qtransform(transform), True)
                painter.translate(-center)

            self._paint_decoration(painter, rect, decoration)
        finally:
            painter.end()

    def _paint_decoration(self, painter: QPainter, rect: QRectF, decoration: BoxDecoration) -> None:
        for shadow in decoration.box_shadow or ():
            self._paint_shadow(painter, rect, decoration, shadow)

        path = rounded_rect_path(rect, decoration.border_radius)

        if decoration.color is not None:
            painter.fillPath(path, QBrush(to_qcolor(decoration.color)))
        if decoration.gradient is not None:
            painter.fillPath(path, QBrush(to_qgradient(decoration.gradient, rect)))
        if decoration.image is not None:
            painter.save()
            painter.setClipPath(path)
            self._paint_image(painter, rect, decoration.image)
            painter.restore()
        if decoration.border is not None:
            self._paint_border(painter, rect, decoration)

    @staticmethod
    def _paint_shadow(painter: QPainter, rect: QRectF, decoration: BoxDecoration, shadow: BoxShadow) -> None:
        """
        Approximate a blurred shadow with stacked translucent layers, each one
        pixel wider than the previous.
        """
        base = rect.translated(shadow.offset.dx, shadow.offset.dy)
        base = base.adjusted(-shadow.spread_radius, -shadow.spread_radius,
                             shadow.spread_radius, shadow.spread_radius)
        steps = max(1, math.ceil(shadow.blur_radius))
        color = to_qcolor(shadow.color)
        color.setAlphaF(color.alphaF() / steps)

        painter.save()
        painter.setPen(Qt.PenStyle.NoPen)
        for i in range(steps):
            grow = shadow.blur_radius * i / steps
            layer = base.adjusted(-grow, -grow, grow, grow)
            painter.fillPath(rounded_rect_path(layer, decoration.border_radius), QBrush(color))
        painter.restore()

    @staticmethod
    def _paint_image(painter: QPainter, rect: QRectF, image: DecorationImage) -> None:
        if not isinstance(image.image, AssetImage):
            logger.debug(f"Network images are not loaded by the widget: {image.image}")
            return

        pixmap = QPixmap(image.image.path)
        if pixmap.isNull():
            logger.warning(f"Could not load background image '{image.image.path}'")
            return

        mode = _ASPECT_MODE.get(image.fit) if image.fit is not None else None
        if mode is not None:
            pixmap = pixmap.scaled(rect.size().toSize(), mode, Qt.TransformationMode.SmoothTransformation)

        # place the pixmap so that its alignment point matches the box's
        box_point = to_qpointf(image.alignment, rect)
        img_x, img_y = image.alignment.within(pixmap.width(), pixmap.height())
        painter.drawPixmap(round(box_point.x() - img_x), round(box_point.y() - img_y), pixmap)

    @staticmethod
    def _paint_border(painter: QPainter, rect: QRectF, decoration: BoxDecoration) -> None:
        border: Border = decoration.border
        painter.save()
        painter.setBrush(Qt.BrushStyle.NoBrush)

        if border.is_uniform:
            if border.top.visible:
                half = border.top.width / 2.0
                inner = rect.adjusted(half, half, -half, -half)
                painter.setPen(to_qpen(border.top))
                painter.drawPath(rounded_rect_path(inner, decoration.border_radius))
        else:
            # rounded corners are only drawn for uniform borders
            sides = (
                (border.top, rect.topLeft(), rect.topRight(), (0.0, 1.0)),
                (border.bottom, rect.bottomLeft(), rect.bottomRight(), (0.0, -1.0)),
                (border.left, rect.topLeft(), rect.bottomLeft(), (1.0, 0.0)),
                (border.right, rect.topRight(), rect.bottomRight(), (-1.0, 0.0)),
            )
            for side, start, end, (nx, ny) in sides:
                if not side.visible:
                    continue
                half = side.width / 2.0
                painter.setPen(to_qpen(side))
                painter.drawLine(QLineF(
                    start.x() + nx * half, start.y() + ny * half,
                    end.x() + nx * half, end.y() + ny * half,
                ))

        painter.restore()
