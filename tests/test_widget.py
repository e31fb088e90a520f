import pytest
from PySide6.QtCore import Qt
from PySide6.QtGui import QColor
from PySide6.QtWidgets import QGraphicsOpacityEffect, QLabel

from division import StyleClass
from division.qt import Division


@pytest.fixture
def make_division(qapp):
    created = []

    def factory(style=None, child=None):
        widget = Division(style, child)
        created.append(widget)
        return widget

    yield factory
    for widget in created:
        widget.deleteLater()


def test_fixed_size_includes_margin(make_division):
    w = make_division(StyleClass().width(100).height(40).margin(all=5))
    assert w.minimumWidth() == w.maximumWidth() == 110
    assert w.minimumHeight() == w.maximumHeight() == 50


def test_constraints(make_division):
    w = make_division(StyleClass().min_width(20).max_width(200).min_height(10))
    assert w.minimumWidth() == 20
    assert w.maximumWidth() == 200
    assert w.minimumHeight() == 10


def test_fixed_size_is_clamped_to_constraints(make_division):
    w = make_division(StyleClass().width(300).max_width(100).height(10).min_height(40))
    assert w.minimumWidth() == w.maximumWidth() == 100
    assert w.minimumHeight() == w.maximumHeight() == 40


def test_contents_margins_stack_padding_border_and_margin(make_division):
    w = make_division(StyleClass().padding(all=4).border(all=2).margin(left=1))
    margins = w.layout().contentsMargins()
    assert margins.left() == 7
    assert margins.top() == 6


def test_opacity_effect(make_division):
    w = make_division(StyleClass().opacity(0.5))
    effect = w.graphicsEffect()
    assert isinstance(effect, QGraphicsOpacityEffect)
    assert effect.opacity() == pytest.approx(0.5)


def test_set_style_replaces_previous(make_division):
    w = make_division(StyleClass().opacity(0.5).min_width(30).align_child('topLeft'), child=QLabel("x"))
    assert w.layout().itemAt(0).alignment() == Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignTop

    w.set_style(StyleClass())
    assert w.graphicsEffect() is None
    assert w.minimumWidth() == 0
    assert w.layout().itemAt(0).alignment() == Qt.AlignmentFlag(0)


def test_child_is_laid_out(make_division):
    label = QLabel("Some text")
    w = make_division(StyleClass().align_child('center'), child=label)
    assert w.child is label
    assert w.layout().indexOf(label) == 0


def test_paints_background(make_division):
    w = make_division(StyleClass().width(20).height(20).background_color('#ff0000'))
    w.resize(20, 20)
    image = w.grab().toImage()
    assert image.pixelColor(10, 10) == QColor(255, 0, 0)


def test_paints_inside_margin_only(make_division):
    w = make_division(StyleClass().width(10).height(10).margin(all=5).background_color('#00ff00'))
    w.resize(20, 20)
    image = w.grab().toImage()
    assert image.pixelColor(10, 10) == QColor(0, 255, 0)
    assert image.pixelColor(1, 1) != QColor(0, 255, 0)


def test_decorated_rect(make_division):
    w = make_division(StyleClass().width(10).height(10).margin(all=5))
    w.resize(20, 20)
    rect = w.decorated_rect()
    assert (rect.left(), rect.top(), rect.width(), rect.height()) == (5, 5, 10, 10)


def test_demo_window_builds(qapp):
    from division.__main__ import build_demo

    window = build_demo()
    try:
        divisions = window.findChildren(Division)
        assert len(divisions) == 3
        assert divisions[1].style_class.properties.rotate is not None
    finally:
        window.deleteLater()


class TestOverflow:
    def test_hidden_masks_child(self, make_division):
        label = QLabel("Some text")
        w = make_division(StyleClass().width(60).height(30).border_radius(all=10).overflow('hidden'), child=label)
        w.show()
        w.layout().activate()
        assert not label.mask().isEmpty()
        # rounded corner is cut off
        assert not label.mask().contains(label.mapFrom(w, w.rect().topLeft()))

    def test_visible_leaves_child_unmasked(self, make_division):
        label = QLabel("Some text")
        w = make_division(StyleClass().width(60).height(30).overflow('hidden'), child=label)
        w.show()
        w.set_style(StyleClass().width(60).height(30).overflow('visible'))
        assert label.mask().isEmpty()
