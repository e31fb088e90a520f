import math

import numpy as np
import pytest

from division.model.enums import BorderStyle
from division.model.primitives import (
    Alignment, Border, BorderRadius, BorderSide, BoxConstraints, Color, EdgeInsets,
    LinearGradient, Matrix4, Radius, SweepGradient
)


class TestColor:
    def test_channels(self):
        c = Color(0x80112233)
        assert (c.alpha, c.red, c.green, c.blue) == (0x80, 0x11, 0x22, 0x33)
        assert c.opacity == pytest.approx(0x80 / 255)

    def test_with_opacity_keeps_rgb(self):
        c = Color(0xFF336699).with_opacity(0.5)
        assert c.alpha == 128
        assert (c.red, c.green, c.blue) == (0x33, 0x66, 0x99)

    def test_with_opacity_out_of_range(self):
        with pytest.raises(ValueError):
            Color(0xFF000000).with_opacity(-0.1)

    def test_value_out_of_range(self):
        with pytest.raises(ValueError):
            Color(0x1FFFFFFFF)

    def test_to_hex(self):
        assert Color(0xFFEEEEEE).to_hex() == "#eeeeee"
        assert Color(0x33000000).to_hex() == "#33000000"


def test_alignment_within():
    assert Alignment(-1.0, -1.0).within(100, 50) == (0.0, 0.0)
    assert Alignment(0.0, 0.0).within(100, 50) == (50.0, 25.0)
    assert Alignment(1.0, 1.0).within(100, 50) == (100.0, 50.0)


def test_edge_insets_totals():
    insets = EdgeInsets.only(top=1, bottom=2, left=3, right=4)
    assert insets.vertical == 3
    assert insets.horizontal == 7
    assert EdgeInsets.all(5) == EdgeInsets(5, 5, 5, 5)


def test_border_radius_uniform():
    assert BorderRadius.circular(4).is_uniform
    assert not BorderRadius(top_left=Radius.circular(1)).is_uniform


def test_border_dimensions_ignore_hidden_sides():
    side = BorderSide(color=Color(0xFF000000), width=3.0)
    border = Border(top=side, left=BorderSide(width=2.0, style=BorderStyle.NONE))
    assert border.dimensions == EdgeInsets(top=3.0, bottom=0.0, left=0.0, right=0.0)
    assert not border.is_uniform


def test_gradient_stops_must_match_colors():
    colors = (Color(0xFF000000), Color(0xFFFFFFFF))
    with pytest.raises(ValueError, match="stops"):
        LinearGradient(Alignment(-1, 0), Alignment(1, 0), colors, stops=(0.0, 0.5, 1.0))


def test_gradient_needs_two_colors():
    with pytest.raises(ValueError):
        SweepGradient(Alignment.center(), 0.0, math.pi, (Color(0xFF000000),))


class TestBoxConstraints:
    def test_defaults_are_unbounded(self):
        c = BoxConstraints()
        assert c.min_width == 0.0 and math.isinf(c.max_width)
        assert c.clamp_width(1e9) == 1e9

    def test_clamp(self):
        c = BoxConstraints(min_width=10, max_width=20, min_height=5, max_height=6)
        assert c.clamp_width(30) == 20
        assert c.clamp_width(1) == 10
        assert c.clamp_height(5.5) == 5.5

    def test_tight(self):
        assert BoxConstraints(10, 10, 5, 5).is_tight
        assert not BoxConstraints(min_width=10, max_width=20).is_tight


class TestMatrix4:
    def test_identity(self):
        assert Matrix4.identity().is_identity
        assert Matrix4.identity().transform_point(3.0, 4.0) == (3.0, 4.0)

    def test_rotation_z_quarter_turn(self):
        x, y = Matrix4.rotation_z(math.pi / 2).transform_point(1.0, 0.0)
        assert x == pytest.approx(0.0, abs=1e-12)
        assert y == pytest.approx(1.0)

    def test_scale_then_translate_post_multiplies(self):
        m = Matrix4.identity().scale(2.0).translate(3.0, 1.0)
        # translation happens in the scaled space
        assert m.transform_point(0.0, 0.0) == pytest.approx((6.0, 2.0))

    def test_operations_return_new_matrices(self):
        m = Matrix4.identity()
        m.scale(3.0)
        assert m.is_identity

    def test_values_are_a_copy(self):
        m = Matrix4.identity()
        v = m.values
        v[0, 0] = 5.0
        assert m.is_identity

    def test_equality(self):
        assert Matrix4.rotation_z(2 * math.pi) == Matrix4.identity()
        assert Matrix4.identity() != Matrix4.identity().scale(2.0)

    def test_bad_shape(self):
        with pytest.raises(ValueError):
            Matrix4(np.zeros((3, 3)))
