"""Renderers for outputting colors as CSS text or terminal escapes."""

from color_engine.render.terminal import (
    WrapOptions,
    ansi_truecolor,
    palette_256_bg,
    palette_256_fg,
    palette_256_index,
    truecolor_bg,
    truecolor_fg,
    wrap,
)
from color_engine.render.text import (
    hex_from_rgb,
    to_css,
    to_hex,
    to_hsl,
    to_hsla,
    to_rgb,
    to_rgba,
)

__all__ = [
    "WrapOptions",
    "wrap",
    "truecolor_fg",
    "truecolor_bg",
    "palette_256_index",
    "palette_256_fg",
    "palette_256_bg",
    "ansi_truecolor",
    "to_hex",
    "to_rgb",
    "to_rgba",
    "to_hsl",
    "to_hsla",
    "to_css",
    "hex_from_rgb",
]
