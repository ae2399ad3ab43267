"""Tests for ANSI escape sequence rendering."""

import pytest

from color_engine import ansi_truecolor, parse, wrap
from color_engine.core.color import Color
from color_engine.core.constants import BOLD, RESET, UNDERLINE
from color_engine.render.terminal import (
    WrapOptions,
    palette_256_bg,
    palette_256_fg,
    palette_256_index,
    truecolor_bg,
    truecolor_fg,
)


class TestTruecolor:
    """Tests for 24-bit sequences."""

    def test_foreground(self) -> None:
        assert truecolor_fg(Color(255, 128, 0)) == "\x1b[38;2;255;128;0m"

    def test_background(self) -> None:
        assert truecolor_bg(Color(1, 2, 3)) == "\x1b[48;2;1;2;3m"

    def test_helper_clamps(self) -> None:
        assert ansi_truecolor(300, 0, -1) == "\x1b[38;2;255;0;0m"


class TestPalette256Index:
    """Tests for 256-color quantization."""

    def test_grayscale_boundaries(self) -> None:
        assert parse({"r": 0, "g": 0, "b": 0}).ansi256_index() == 16
        assert parse({"r": 255, "g": 255, "b": 255}).ansi256_index() == 231

    @pytest.mark.parametrize(
        "value, index",
        [(7, 16), (8, 232), (9, 232), (128, 244), (248, 255), (249, 231)],
    )
    def test_grayscale_ramp(self, value: int, index: int) -> None:
        assert palette_256_index(value, value, value) == index

    @pytest.mark.parametrize(
        "rgb, index",
        [
            ((255, 0, 0), 196),
            ((0, 255, 0), 46),
            ((0, 0, 255), 21),
            ((255, 255, 0), 226),
            ((170, 187, 204), 152),
        ],
    )
    def test_cube(self, rgb, index: int) -> None:
        assert palette_256_index(*rgb) == index

    def test_pure_red_via_parse(self) -> None:
        assert parse({"r": 255, "g": 0, "b": 0}).ansi256_index() == 196

    def test_range(self) -> None:
        for v in range(0, 256, 5):
            assert 16 <= palette_256_index(v, 255 - v, v // 2) <= 255
            assert 16 <= palette_256_index(v, v, v) <= 255

    def test_sequences(self) -> None:
        red = Color(255, 0, 0)
        assert palette_256_fg(red) == "\x1b[38;5;196m"
        assert palette_256_bg(red) == "\x1b[48;5;196m"
        assert red.ansi256() == palette_256_fg(red)
        assert red.ansi256_bg() == palette_256_bg(red)


class TestWrap:
    """Tests for wrap()."""

    def test_default_is_truecolor_foreground(self) -> None:
        color = Color(1, 2, 3)
        assert wrap(color, "x") == f"{truecolor_fg(color)}x{RESET}"

    def test_bold(self) -> None:
        color = parse("red")
        assert wrap(color, "x", {"bold": True}) == f"\x1b[1m{color.ansi_truecolor()}x\x1b[0m"

    def test_style_order(self) -> None:
        color = Color(1, 2, 3)
        result = wrap(color, "hi", WrapOptions(bold=True, underline=True))
        assert result == f"{BOLD}{UNDERLINE}{truecolor_fg(color)}hi{RESET}"

    @pytest.mark.parametrize(
        "options, sequence",
        [
            (WrapOptions(background=True), "\x1b[48;2;255;0;0m"),
            (WrapOptions(use256=True), "\x1b[38;5;196m"),
            (WrapOptions(background=True, use256=True), "\x1b[48;5;196m"),
        ],
    )
    def test_color_selection(self, options: WrapOptions, sequence: str) -> None:
        assert wrap(Color(255, 0, 0), "t", options) == f"{sequence}t{RESET}"

    def test_keyword_flags(self) -> None:
        color = Color(255, 0, 0)
        assert color.wrap_ansi("t", use256=True, underline=True) == f"{UNDERLINE}\x1b[38;5;196mt{RESET}"

    def test_keyword_flags_override_options(self) -> None:
        result = wrap(Color(255, 0, 0), "t", WrapOptions(bold=True), bold=False)
        assert not result.startswith(BOLD)

    def test_mapping_ignores_unknown_keys(self) -> None:
        color = Color(0, 0, 0)
        assert wrap(color, "t", {"italic": True}) == wrap(color, "t")

    def test_unknown_keyword_rejected(self) -> None:
        with pytest.raises(TypeError, match="italic"):
            wrap(Color(), "t", italic=True)

    def test_empty_text(self) -> None:
        assert wrap(Color(), "") == f"\x1b[38;2;0;0;0m{RESET}"
