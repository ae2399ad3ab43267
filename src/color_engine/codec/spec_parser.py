"""
Color spec parser.

Turns a string (named color, hex literal, or rgb()/hsl() notation) or a
structured mapping into a ``Color``. Structured input is classified into a
small tagged union first: the ``r, g, b`` key triple takes priority over
``h, s, l``.

Invalid input never raises by default. It falls back to ``Color.DEFAULT``
(opaque black); the protection level decides whether that fallback is
silent, warned about, or turned into ``InvalidColorSpec``.
"""

import logging
import math
import re
import warnings
from dataclasses import dataclass
from typing import Any, Mapping, Union

from color_engine.core.color import Color, clamp_alpha
from color_engine.core.config import ProtectionLevel, resolve_protection
from color_engine.core.constants import NAMED_COLORS
from color_engine.core.errors import (
    ColorSpecWarning,
    InvalidColorSpec,
    format_color_message,
)
from color_engine.core.space import hsl_to_rgb

logger = logging.getLogger(__name__)

_HEX_PATTERN = re.compile(r'#([0-9a-f]{3}|[0-9a-f]{6})')
_NUMBER_PATTERN = re.compile(r'[\d.]+')

FALLBACK_NOTE = "Using black as fallback."


@dataclass(frozen=True)
class RgbSpec:
    """Structured RGB input; channels are clamped when converted."""
    r: float
    g: float
    b: float
    a: float | None = None


@dataclass(frozen=True)
class HslSpec:
    """Structured HSL input: hue in degrees, saturation/lightness in percent."""
    h: float
    s: float
    l: float
    a: float | None = None


@dataclass(frozen=True)
class Unrecognized:
    """Input that matched neither key triple."""
    reason: str = "Invalid color input."


StructuredSpec = Union[RgbSpec, HslSpec, Unrecognized]


def _number(value: Any) -> float:
    # bool is an int subclass but never a meaningful channel
    if isinstance(value, bool) or value is None:
        raise TypeError(f"not a number: {value!r}")
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"not a finite number: {value!r}")
    return number


def classify(spec: Mapping[str, Any]) -> StructuredSpec:
    """
    Decide which structured form a mapping holds.

    RGB wins when both key triples are present. Values must be numeric;
    a triple with a non-numeric member is ``Unrecognized``.
    """
    try:
        alpha = _number(spec["a"]) if "a" in spec else None
        if all(key in spec for key in ("r", "g", "b")):
            return RgbSpec(_number(spec["r"]), _number(spec["g"]), _number(spec["b"]), alpha)
        if all(key in spec for key in ("h", "s", "l")):
            return HslSpec(_number(spec["h"]), _number(spec["s"]), _number(spec["l"]), alpha)
    except (TypeError, ValueError) as e:
        return Unrecognized(f"Non-numeric color component ({e}).")
    return Unrecognized()


def from_structured(spec: StructuredSpec) -> Color | None:
    """Build a Color from a classified spec, or None if unrecognized."""
    alpha = 1.0 if getattr(spec, "a", None) is None else clamp_alpha(spec.a)
    if isinstance(spec, RgbSpec):
        return Color(int(spec.r), int(spec.g), int(spec.b), alpha)
    if isinstance(spec, HslSpec):
        r, g, b = hsl_to_rgb(int(spec.h), int(spec.s), int(spec.l))
        return Color(r, g, b, alpha)
    return None


def _parse_hex(hex_str: str) -> Color | None:
    match = _HEX_PATTERN.fullmatch(hex_str)
    if not match:
        return None
    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(d * 2 for d in digits)
    return Color(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def _parse_functional(text: str) -> Color | None:
    """Parse ``rgb()``/``rgba()``/``hsl()``/``hsla()`` notation."""
    try:
        values = [float(v) for v in _NUMBER_PATTERN.findall(text)]
    except ValueError:
        # e.g. "1.2.3" matches the pattern but is not a number
        return None
    if len(values) < 3 or not all(math.isfinite(v) for v in values):
        return None
    alpha = clamp_alpha(values[3]) if len(values) > 3 else 1.0
    if text.startswith("rgb"):
        return Color(int(values[0]), int(values[1]), int(values[2]), alpha)
    r, g, b = hsl_to_rgb(values[0], values[1], values[2])
    return Color(r, g, b, alpha)


def parse_string(text: str, protection: ProtectionLevel | str | None = None) -> Color:
    """Parse a named color, ``#rgb``/``#rrggbb``, or rgb()/hsl() notation."""
    return _parse_string(text, protection, stacklevel=3)


def _parse_string(text: str, protection: ProtectionLevel | str | None, stacklevel: int) -> Color:
    value = text.strip().lower()
    value = NAMED_COLORS.get(value, value)

    if value.startswith("#"):
        color = _parse_hex(value)
        if color is None:
            return _fallback(
                text,
                protection,
                stacklevel + 1,
                scope="Color.parse_string",
                message="Invalid hex color string.",
                hint="Pass a valid 3-digit or 6-digit hex string.",
            )
        return color

    if value.startswith(("rgb", "hsl")):
        color = _parse_functional(value)
        if color is None:
            return _fallback(
                text,
                protection,
                stacklevel + 1,
                scope="Color.parse_string",
                message=f'Malformed color function "{value}".',
                hint="Expected at least three numbers, e.g. rgb(10, 20, 30).",
            )
        return color

    return _fallback(
        text,
        protection,
        stacklevel + 1,
        scope="Color.parse_string",
        message=f'Unknown color string "{value}".',
        hint="The value must be a valid color string.",
    )


def parse(
    spec: str | Mapping[str, Any] | StructuredSpec | Any,
    protection: ProtectionLevel | str | None = None,
) -> Color:
    """
    Parse any supported color spec into a ``Color``.

    Args:
        spec: A color string, a mapping with ``r, g, b[, a]`` or
            ``h, s, l[, a]`` keys, or an already classified spec
        protection: What to do with invalid input; defaults to the
            ``COLOR_ENGINE_PROTECTION`` environment setting

    Returns:
        The parsed color, or ``Color.DEFAULT`` for invalid input

    Raises:
        InvalidColorSpec: Only under ``hardened`` protection
    """
    return _parse(spec, protection, stacklevel=3)


def _parse(spec: Any, protection: ProtectionLevel | str | None, stacklevel: int) -> Color:
    # stacklevel is the warnings.warn level that would reach the user from this frame
    if isinstance(spec, str):
        return _parse_string(spec, protection, stacklevel + 1)

    if isinstance(spec, Mapping):
        structured = classify(spec)
    elif isinstance(spec, (RgbSpec, HslSpec, Unrecognized)):
        structured = spec
    else:
        structured = Unrecognized()

    color = from_structured(structured)
    if color is None:
        assert isinstance(structured, Unrecognized)
        return _fallback(
            spec,
            protection,
            stacklevel + 1,
            scope="Color.parse",
            message=structured.reason,
            hint="Expected a string, an RGB object, or an HSL object.",
        )
    return color


def parse_strict(spec: str | Mapping[str, Any] | StructuredSpec | Any) -> Color:
    """Like ``parse`` but raise ``InvalidColorSpec`` instead of falling back."""
    return parse(spec, ProtectionLevel.HARDENED)


def _fallback(
    spec: Any,
    protection: ProtectionLevel | str | None,
    stacklevel: int,
    *,
    scope: str,
    message: str,
    hint: str,
) -> Color:
    """Apply the protection level to an invalid spec."""
    level = resolve_protection(protection)
    logger.debug("Invalid color spec %r (%s), protection=%s", spec, message, level.value)

    if level is ProtectionLevel.HARDENED:
        raise InvalidColorSpec(format_color_message(scope, message, hint), spec=spec)
    if level is ProtectionLevel.BOUNDARY:
        warnings.warn(
            format_color_message(scope, message, hint, FALLBACK_NOTE),
            ColorSpecWarning,
            stacklevel=stacklevel,
        )
    elif level is ProtectionLevel.SANDBOX:
        warnings.warn(format_color_message(scope, message, hint), ColorSpecWarning, stacklevel=stacklevel)
    return Color.DEFAULT
