"""Tests for RGB <-> HSL conversion."""

import itertools

import pytest

from color_engine.core.space import hsl_to_rgb, rgb_to_hsl, round_half_up


class TestRoundHalfUp:
    """Ties go up, unlike the built-in round()."""

    def test_ties(self) -> None:
        assert round_half_up(0.5) == 1
        assert round_half_up(2.5) == 3
        assert round_half_up(-0.5) == 0

    def test_non_ties(self) -> None:
        assert round_half_up(1.49) == 1
        assert round_half_up(1.51) == 2


class TestRgbToHsl:
    """Tests for rgb_to_hsl."""

    @pytest.mark.parametrize(
        "rgb, hsl",
        [
            ((255, 0, 0), (0, 100, 50)),
            ((0, 255, 0), (120, 100, 50)),
            ((0, 0, 255), (240, 100, 50)),
            ((255, 255, 0), (60, 100, 50)),
            ((255, 165, 0), (39, 100, 50)),
            ((0, 128, 255), (210, 100, 50)),
            ((170, 187, 204), (210, 25, 73)),
        ],
    )
    def test_known_values(self, rgb, hsl) -> None:
        assert rgb_to_hsl(*rgb) == hsl

    def test_rounded_values_are_ints(self) -> None:
        assert all(type(v) is int for v in rgb_to_hsl(12, 200, 99))

    def test_achromatic(self) -> None:
        assert rgb_to_hsl(0, 0, 0) == (0, 0, 0)
        assert rgb_to_hsl(255, 255, 255) == (0, 0, 100)
        assert rgb_to_hsl(128, 128, 128) == (0, 0, 50)

    def test_red_max_with_green_below_blue_wraps(self) -> None:
        # (255, 0, 128) sits on the magenta side of red
        assert rgb_to_hsl(255, 0, 128) == (330, 100, 50)

    def test_hue_never_reaches_360(self) -> None:
        # Exact hue is 359.76, which rounds to 360
        h, s, l = rgb_to_hsl(255, 0, 1)
        assert h == 0
        assert (s, l) == (100, 50)

    def test_unrounded(self) -> None:
        h, s, l = rgb_to_hsl(255, 0, 1, rounded=False)
        assert 359.7 < h < 359.8
        assert s == pytest.approx(100.0)
        assert l == pytest.approx(50.0)

    def test_ranges(self) -> None:
        for r, g, b in itertools.product(range(0, 256, 17), repeat=3):
            h, s, l = rgb_to_hsl(r, g, b)
            assert 0 <= h < 360
            assert 0 <= s <= 100
            assert 0 <= l <= 100


class TestHslToRgb:
    """Tests for hsl_to_rgb."""

    @pytest.mark.parametrize(
        "hsl, rgb",
        [
            ((0, 100, 50), (255, 0, 0)),
            ((120, 100, 50), (0, 255, 0)),
            ((240, 100, 50), (0, 0, 255)),
            ((0, 0, 0), (0, 0, 0)),
            ((0, 0, 100), (255, 255, 255)),
            ((360, 100, 50), (255, 0, 0)),
        ],
    )
    def test_known_values(self, hsl, rgb) -> None:
        assert hsl_to_rgb(*hsl) == rgb

    def test_negative_hue_wraps(self) -> None:
        assert hsl_to_rgb(-120, 100, 50) == hsl_to_rgb(240, 100, 50) == (0, 0, 255)

    def test_huge_saturation_stays_in_range(self) -> None:
        assert hsl_to_rgb(0, 1e308, 50) == (255, 0, 0)

    def test_out_of_range_lightness(self) -> None:
        assert hsl_to_rgb(0, 100, 150) == (255, 255, 255)
        assert hsl_to_rgb(0, 100, -50) == (0, 0, 0)


class TestRoundTrip:
    """RGB -> HSL -> RGB stays within one step per channel."""

    @staticmethod
    def _assert_close(original, restored) -> None:
        for before, after in zip(original, restored):
            assert abs(before - after) <= 1, (original, restored)

    def test_unrounded_round_trip(self) -> None:
        for rgb in itertools.product(range(0, 256, 15), repeat=3):
            self._assert_close(rgb, hsl_to_rgb(*rgb_to_hsl(*rgb, rounded=False)))

    def test_grayscale_round_trip(self) -> None:
        for v in range(256):
            self._assert_close((v, v, v), hsl_to_rgb(*rgb_to_hsl(v, v, v)))

    @pytest.mark.parametrize(
        "rgb",
        [
            (255, 0, 0), (0, 255, 0), (0, 0, 255),
            (255, 255, 0), (0, 255, 255), (255, 0, 255),
        ],
    )
    def test_saturated_round_trip(self, rgb) -> None:
        assert hsl_to_rgb(*rgb_to_hsl(*rgb)) == rgb
