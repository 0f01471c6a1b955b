"""Tests for color parsing and platform conversion."""

from __future__ import annotations

import pytest

from tokensmith.core.colors import (
    RGBA,
    parse_color,
    round_half_up,
    to_android_color,
    to_uicolor,
    to_uicolor_components,
)


class TestParseColor:
    """Test accepted and rejected color syntaxes."""

    def test_hex6(self):
        assert parse_color("#2196F3") == RGBA(33, 150, 243, 1.0)

    def test_hex8_alpha(self):
        color = parse_color("#2196F380")
        assert color.alpha == pytest.approx(128 / 255)

    def test_rgba(self):
        assert parse_color("rgba(33, 150, 243, 0.5)") == RGBA(33, 150, 243, 0.5)

    def test_rgb(self):
        assert parse_color("rgb(0,0,0)") == RGBA(0, 0, 0, 1.0)

    def test_transparent(self):
        assert parse_color("transparent") == RGBA(0, 0, 0, 0.0)

    @pytest.mark.parametrize(
        "value",
        ["#FFF", "#GGGGGG", "rgb(300, 0, 0)", "rgba(0, 0, 0, 2)", "rgb(1, 2)", "16px", 12, None],
    )
    def test_not_colors(self, value):
        assert parse_color(value) is None


class TestAndroidColor:
    """Test #AARRGGBB conversion."""

    def test_opaque_hex(self):
        assert to_android_color("#2196F3") == "#FF2196F3"

    def test_rgba_half_alpha(self):
        assert to_android_color("rgba(33, 150, 243, 0.5)") == "#802196F3"

    def test_lowercase_hex_is_uppercased(self):
        assert to_android_color("#2196f3") == "#FF2196F3"

    def test_hex8_moves_alpha_first(self):
        assert to_android_color("#2196F380") == "#802196F3"

    def test_transparent(self):
        assert to_android_color("transparent") == "#00000000"

    def test_non_color_is_none(self):
        assert to_android_color("{color.rawColors.blue.500}") is None

    def test_deterministic(self):
        assert to_android_color("rgba(10, 20, 30, 0.25)") == to_android_color(
            "rgba(10, 20, 30, 0.25)"
        )

    def test_round_half_up(self):
        assert round_half_up(127.5) == 128
        assert round_half_up(0.49) == 0


class TestUIColor:
    """Test Swift UIColor conversion."""

    def test_components(self):
        assert to_uicolor_components("#2196F3") == (0.129, 0.588, 0.953, 1.0)

    def test_initializer(self):
        assert to_uicolor("rgba(255, 0, 0, 0.5)") == (
            "UIColor(red: 1.000, green: 0.000, blue: 0.000, alpha: 0.500)"
        )

    def test_transparent(self):
        assert to_uicolor_components("transparent") == (0.0, 0.0, 0.0, 0.0)
        assert to_uicolor("transparent") == (
            "UIColor(red: 0.000, green: 0.000, blue: 0.000, alpha: 0.000)"
        )

    def test_non_color_is_none(self):
        assert to_uicolor("16px") is None
