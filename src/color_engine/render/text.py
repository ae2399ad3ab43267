"""Render colors as CSS-style strings."""

from color_engine.core.color import Color


def format_alpha(alpha: float) -> str:
    """
    Shortest real formatting: ``1`` and ``0`` without a fraction,
    otherwise the shortest repr that round-trips (``0.5``, ``0.25``).
    """
    if float(alpha).is_integer():
        return str(int(alpha))
    return repr(float(alpha))


def to_hex(color: Color) -> str:
    """``#rrggbb`` in lowercase, alpha ignored."""
    return f"#{color.red:02x}{color.green:02x}{color.blue:02x}"


def to_rgb(color: Color) -> str:
    return f"rgb({color.red}, {color.green}, {color.blue})"


def to_rgba(color: Color) -> str:
    return f"rgba({color.red}, {color.green}, {color.blue}, {format_alpha(color.alpha)})"


def to_hsl(color: Color) -> str:
    h, s, l = color.hsl_tuple()
    return f"hsl({h}, {s}%, {l}%)"


def to_hsla(color: Color) -> str:
    h, s, l = color.hsl_tuple()
    return f"hsla({h}, {s}%, {l}%, {format_alpha(color.alpha)})"


def to_css(color: Color) -> str:
    """Shortest CSS form: hex when fully opaque, rgba otherwise."""
    return to_hex(color) if color.alpha == 1.0 else to_rgba(color)


def hex_from_rgb(r: int, g: int, b: int) -> str:
    """Clamp three channels and format them as ``#rrggbb``."""
    return to_hex(Color(r, g, b))
