"""Color value: four clamped channels and nothing else."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, Mapping

from color_engine.core.constants import (
    ALPHA_MAX,
    ALPHA_MIN,
    CHANNEL_MAX,
    CHANNEL_MIN,
)

if TYPE_CHECKING:
    from color_engine.core.config import ProtectionLevel
    from color_engine.render.terminal import WrapOptions


def clamp_channel(value: Any) -> int:
    """Truncate to an integer and clamp into 0-255."""
    return max(CHANNEL_MIN, min(CHANNEL_MAX, int(value)))


def clamp_alpha(value: Any) -> float:
    """Clamp into 0.0-1.0."""
    return max(ALPHA_MIN, min(ALPHA_MAX, float(value)))


@dataclass(frozen=True)
class Color:
    """
    An RGBA color.

    Out-of-range inputs are clamped on construction rather than rejected,
    so every instance satisfies ``0 <= channel <= 255`` and
    ``0.0 <= alpha <= 1.0``. Instances are immutable and compare by value.

    The formatting and terminal methods are thin wrappers over the free
    functions in ``color_engine.render``.
    """
    red: int = 0
    green: int = 0
    blue: int = 0
    alpha: float = 1.0

    # Fallback for specs that cannot be parsed
    DEFAULT: ClassVar["Color"]

    def __post_init__(self) -> None:
        object.__setattr__(self, "red", clamp_channel(self.red))
        object.__setattr__(self, "green", clamp_channel(self.green))
        object.__setattr__(self, "blue", clamp_channel(self.blue))
        object.__setattr__(self, "alpha", clamp_alpha(self.alpha))

    @classmethod
    def from_spec(
        cls,
        spec: "str | Mapping[str, Any] | Any",
        protection: "ProtectionLevel | str | None" = None,
    ) -> "Color":
        """Parse a string or structured spec. See ``color_engine.codec.parse``."""
        from color_engine.codec.spec_parser import _parse
        return _parse(spec, protection, stacklevel=3)

    @property
    def channels(self) -> tuple[int, int, int]:
        """The ``(red, green, blue)`` triple."""
        return self.red, self.green, self.blue

    def hsl_tuple(self) -> tuple[int, int, int]:
        """Return integral ``(h, s, l)``."""
        from color_engine.core.space import rgb_to_hsl
        return rgb_to_hsl(*self.channels)

    # CSS-style text

    def hex(self) -> str:
        from color_engine.render.text import to_hex
        return to_hex(self)

    def rgb(self) -> str:
        from color_engine.render.text import to_rgb
        return to_rgb(self)

    def rgba(self) -> str:
        from color_engine.render.text import to_rgba
        return to_rgba(self)

    def hsl(self) -> str:
        from color_engine.render.text import to_hsl
        return to_hsl(self)

    def hsla(self) -> str:
        from color_engine.render.text import to_hsla
        return to_hsla(self)

    def css(self) -> str:
        """Hex when fully opaque, rgba otherwise."""
        from color_engine.render.text import to_css
        return to_css(self)

    # Terminal escapes

    def ansi_truecolor(self) -> str:
        from color_engine.render.terminal import truecolor_fg
        return truecolor_fg(self)

    def ansi_truecolor_bg(self) -> str:
        from color_engine.render.terminal import truecolor_bg
        return truecolor_bg(self)

    def ansi256_index(self) -> int:
        from color_engine.render.terminal import palette_256_index
        return palette_256_index(*self.channels)

    def ansi256(self) -> str:
        from color_engine.render.terminal import palette_256_fg
        return palette_256_fg(self)

    def ansi256_bg(self) -> str:
        from color_engine.render.terminal import palette_256_bg
        return palette_256_bg(self)

    def wrap_ansi(
        self,
        text: str,
        options: "WrapOptions | Mapping[str, bool] | None" = None,
        **flags: bool,
    ) -> str:
        """Wrap ``text`` in this color's escape sequence and a trailing reset."""
        from color_engine.render.terminal import wrap
        return wrap(self, text, options, **flags)


Color.DEFAULT = Color(0, 0, 0, 1.0)
