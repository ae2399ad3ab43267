"""
Render colors as ANSI SGR escape sequences.

Supports 24-bit truecolor (SGR 38;2 / 48;2) and the 256-color palette
(SGR 38;5 / 48;5). Which one the terminal understands is the caller's call.
"""

from dataclasses import dataclass, fields
from typing import Mapping

from color_engine.core.color import Color
from color_engine.core.constants import (
    BOLD,
    CSI,
    CUBE_OFFSET,
    CUBE_WHITE,
    GRAY_RAMP_OFFSET,
    GRAY_RAMP_STEPS,
    RESET,
    UNDERLINE,
)
from color_engine.core.space import round_half_up


@dataclass(frozen=True)
class WrapOptions:
    """Flags for ``wrap``. All off by default: truecolor foreground, no styling."""
    background: bool = False
    use256: bool = False
    bold: bool = False
    underline: bool = False

    @classmethod
    def from_mapping(cls, values: Mapping[str, object]) -> "WrapOptions":
        """Build from a dict, ignoring unknown keys and coercing to bool."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: bool(v) for k, v in values.items() if k in known})


def truecolor_fg(color: Color) -> str:
    return f"{CSI}38;2;{color.red};{color.green};{color.blue}m"


def truecolor_bg(color: Color) -> str:
    return f"{CSI}48;2;{color.red};{color.green};{color.blue}m"


def palette_256_index(r: int, g: int, b: int) -> int:
    """
    Map RGB to the nearest xterm 256-color index.

    Equal channels use the grayscale ramp (232-255), clamped to the cube's
    black (16) and white (231) corners at the extremes. Everything else is
    quantized onto the 6x6x6 cube (16-231).
    """
    if r == g == b:
        if r < 8:
            return CUBE_OFFSET
        if r > 248:
            return CUBE_WHITE
        return round_half_up((r - 8) / 247 * GRAY_RAMP_STEPS) + GRAY_RAMP_OFFSET

    def to6(v: int) -> int:
        return round_half_up(v / 255 * 5)

    return CUBE_OFFSET + 36 * to6(r) + 6 * to6(g) + to6(b)


def palette_256_fg(color: Color) -> str:
    return f"{CSI}38;5;{palette_256_index(color.red, color.green, color.blue)}m"


def palette_256_bg(color: Color) -> str:
    return f"{CSI}48;5;{palette_256_index(color.red, color.green, color.blue)}m"


def color_sequence(color: Color, options: WrapOptions) -> str:
    """Pick the escape for the foreground/background x truecolor/256 combination."""
    if options.background:
        return palette_256_bg(color) if options.use256 else truecolor_bg(color)
    return palette_256_fg(color) if options.use256 else truecolor_fg(color)


def wrap(
    color: Color,
    text: str,
    options: WrapOptions | Mapping[str, object] | None = None,
    **flags: bool,
) -> str:
    """
    Wrap text in style prefixes, a color escape and a trailing reset.

    Output order is fixed: bold, underline, color, text, reset. Options may
    come as a ``WrapOptions``, a plain mapping, keyword flags, or a mix;
    keyword flags override the rest.

    Args:
        color: Color to apply
        text: Text to wrap
        options: Base options
        **flags: background, use256, bold, underline

    Returns:
        The escaped string, ready to write to a terminal
    """
    if options is None:
        opts = WrapOptions()
    elif isinstance(options, WrapOptions):
        opts = options
    else:
        opts = WrapOptions.from_mapping(options)

    if flags:
        unknown = set(flags) - {f.name for f in fields(WrapOptions)}
        if unknown:
            raise TypeError(f"Unknown wrap flag(s): {', '.join(sorted(unknown))}")
        merged = {f.name: getattr(opts, f.name) for f in fields(WrapOptions)}
        merged.update(flags)
        opts = WrapOptions.from_mapping(merged)

    mods = (BOLD if opts.bold else "") + (UNDERLINE if opts.underline else "")
    return f"{mods}{color_sequence(color, opts)}{text}{RESET}"


def ansi_truecolor(r: int, g: int, b: int) -> str:
    """Clamp three channels and return the truecolor foreground escape."""
    return truecolor_fg(Color(r, g, b))
