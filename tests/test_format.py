import pytest

from division.format import format_alignment, format_color, format_overflow, hex_color, rgb, rgba
from division.model.enums import OverflowType
from division.model.primitives import Alignment, Color


class TestAlignment:
    @pytest.mark.parametrize(
        "name, expected",
        [
            ("center", (0.0, 0.0)),
            ("top", (0.0, -1.0)),
            ("bottom", (0.0, 1.0)),
            ("left", (-1.0, 0.0)),
            ("right", (1.0, 0.0)),
            ("topLeft", (-1.0, -1.0)),
            ("bottomRight", (1.0, 1.0)),
            ("top_right", (1.0, -1.0)),
            ("bottom_left", (-1.0, 1.0)),
        ],
    )
    def test_names(self, name, expected):
        assert format_alignment(name) == Alignment(*expected)

    def test_alignment_passes_through(self):
        a = Alignment(0.2, -0.8)
        assert format_alignment(a) is a

    def test_list_and_tuple(self):
        assert format_alignment([0.2, -0.8]) == Alignment(0.2, -0.8)
        assert format_alignment((1, 0)) == Alignment(1.0, 0.0)

    def test_single_number_is_used_for_both_axes(self):
        assert format_alignment(0.5) == Alignment(0.5, 0.5)
        assert format_alignment(-1) == Alignment(-1.0, -1.0)

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="Unknown alignment"):
            format_alignment("middle")

    def test_wrong_list_length(self):
        with pytest.raises(ValueError):
            format_alignment([0.1, 0.2, 0.3])

    @pytest.mark.parametrize("value", [None, True, {"x": 1}])
    def test_unsupported_types(self, value):
        with pytest.raises(TypeError):
            format_alignment(value)


class TestColor:
    def test_hex_with_and_without_hash(self):
        assert hex_color("#eeeeee") == Color(0xFFEEEEEE)
        assert hex_color("eeeeee") == Color(0xFFEEEEEE)
        assert format_color("#55ffff") == Color(0xFF55FFFF)

    def test_hex_shorthand_and_alpha(self):
        assert hex_color("#abc") == Color(0xFFAABBCC)
        assert hex_color("#11223380") == Color(0x80112233)

    @pytest.mark.parametrize("value", ["", "#", "#ggg000", "#12345", "1234567"])
    def test_invalid_hex(self, value):
        with pytest.raises(ValueError):
            hex_color(value)

    def test_rgb_is_opaque(self):
        assert rgb(43, 120, 32) == Color.from_argb(255, 43, 120, 32)

    def test_rgba(self):
        c = rgba(43, 120, 32, 0.6)
        assert (c.red, c.green, c.blue, c.alpha) == (43, 120, 32, 153)

    def test_rgb_channel_out_of_range(self):
        with pytest.raises(ValueError, match="red"):
            rgb(256, 0, 0)

    def test_rgba_opacity_out_of_range(self):
        with pytest.raises(ValueError, match="opacity"):
            rgba(0, 0, 0, 1.5)

    def test_format_color_passthrough_and_int(self):
        c = Color(0x33000000)
        assert format_color(c) is c
        assert format_color(0xFF0000FF) == Color(0xFF0000FF)

    @pytest.mark.parametrize("value", [None, 1.5, [255, 0, 0]])
    def test_unsupported_types(self, value):
        with pytest.raises(TypeError):
            format_color(value)


class TestOverflow:
    @pytest.mark.parametrize("name", ["visible", "hidden", "scroll", "Scroll", " HIDDEN "])
    def test_valid(self, name):
        assert format_overflow(name) == OverflowType(name.strip().lower())

    def test_invalid(self):
        with pytest.raises(ValueError, match="Invalid overflow value"):
            format_overflow("auto")
