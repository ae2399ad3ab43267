"""Core value type, color-space math, configuration and errors."""

from color_engine.core.color import Color
from color_engine.core.config import ProtectionLevel
from color_engine.core.errors import ColorSpecWarning, InvalidColorSpec

__all__ = ["Color", "ProtectionLevel", "ColorSpecWarning", "InvalidColorSpec"]
