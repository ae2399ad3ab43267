"""
RGB <-> HSL conversion.

Hue is in degrees, saturation and lightness in percent. Both directions
round half-up so the results do not depend on Python's banker's rounding.
"""

import math
from typing import Literal, overload


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties toward positive infinity."""
    return math.floor(value + 0.5)


@overload
def rgb_to_hsl(
    r: int, g: int, b: int, rounded: Literal[True] = ...
) -> tuple[int, int, int]: ...


@overload
def rgb_to_hsl(
    r: int, g: int, b: int, rounded: Literal[False]
) -> tuple[float, float, float]: ...


def rgb_to_hsl(
    r: int, g: int, b: int, rounded: bool = True
) -> tuple[int, int, int] | tuple[float, float, float]:
    """
    Convert 0-255 channels to ``(h, s, l)``.

    With ``rounded`` (the default) the result is integral: ``h`` in
    ``[0, 360)``, ``s`` and ``l`` in ``[0, 100]``. Pass ``rounded=False``
    for the exact values.
    """
    rn, gn, bn = r / 255, g / 255, b / 255
    max_c = max(rn, gn, bn)
    min_c = min(rn, gn, bn)
    h = s = 0.0
    l = (max_c + min_c) / 2

    if max_c != min_c:
        d = max_c - min_c
        s = d / (2 - max_c - min_c) if l > 0.5 else d / (max_c + min_c)
        if max_c == rn:
            h = (gn - bn) / d + (6 if gn < bn else 0)
        elif max_c == gn:
            h = (bn - rn) / d + 2
        else:
            h = (rn - gn) / d + 4
        h *= 60

    if not rounded:
        return h, s * 100, l * 100

    # A hue just below 360 rounds up to it; keep the range half-open
    return round_half_up(h) % 360, round_half_up(s * 100), round_half_up(l * 100)


def hsl_to_rgb(h: float, s: float, l: float) -> tuple[int, int, int]:
    """Convert hue (degrees) and saturation/lightness (percent) to 0-255 channels."""
    s /= 100
    l /= 100
    a = s * min(l, 1 - l)

    def channel(n: int) -> int:
        # Floored modulo, so negative hues wrap onto the color wheel
        k = (n + h / 30) % 12
        value = l - a * max(-1.0, min(k - 3, 9 - k, 1.0))
        # Saturation/lightness outside 0-100 can overshoot; keep scaling finite
        value = max(0.0, min(1.0, value))
        return round_half_up(value * 255)

    return channel(0), channel(8), channel(4)
