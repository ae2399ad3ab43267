"""
color-engine: parse, convert and render colors

Parse color specs, convert between RGB and HSL, and render CSS strings or
terminal escape sequences.

Quick Start:
    >>> import color_engine as ce
    >>> c = ce.parse("orange")
    >>> c.hex()
    '#ffa500'
    >>> c.hsl()
    'hsl(39, 100%, 50%)'
    >>> print(c.wrap_ansi("warning", bold=True))

Features:
    - Named colors, #rgb / #rrggbb, rgb()/rgba()/hsl()/hsla() strings
    - Structured specs: {"r", "g", "b", "a"} or {"h", "s", "l", "a"}
    - Out-of-range values clamped, invalid specs fall back to black
    - Configurable protection level: silent, warn, or raise
    - CSS output: hex, rgb, rgba, hsl, hsla, shortest css form
    - Terminal output: 24-bit truecolor and 256-color palette escapes
"""

import logging

__version__ = "0.1.0"

# Core types
from color_engine.core.color import Color
from color_engine.core.config import ProtectionLevel
from color_engine.core.errors import ColorSpecWarning, InvalidColorSpec
from color_engine.core.space import hsl_to_rgb, rgb_to_hsl

# Parsing
from color_engine.codec.spec_parser import (
    HslSpec,
    RgbSpec,
    Unrecognized,
    classify,
    parse,
    parse_strict,
)

# Rendering
from color_engine.render.terminal import WrapOptions, ansi_truecolor, palette_256_index, wrap
from color_engine.render.text import hex_from_rgb

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Version
    "__version__",
    # Core types
    "Color",
    "ProtectionLevel",
    "ColorSpecWarning",
    "InvalidColorSpec",
    # Conversion
    "rgb_to_hsl",
    "hsl_to_rgb",
    # Parsing
    "parse",
    "parse_strict",
    "classify",
    "RgbSpec",
    "HslSpec",
    "Unrecognized",
    # Rendering
    "WrapOptions",
    "wrap",
    "palette_256_index",
    "ansi_truecolor",
    "hex_from_rgb",
]
