"""Exceptions and warnings raised while interpreting color specs."""

from typing import Any


def format_color_message(
    scope: str,
    message: str,
    hint: str | None = None,
    other: str | None = None,
) -> str:
    """Build a multi-line diagnostic: ``[scope] color-engine: message``."""
    lines = [f"[{scope}] color-engine: {message}"]
    if hint:
        lines.append(f"Hint: {hint}")
    if other:
        lines.append(other)
    return "\n".join(lines)


class ColorSpecWarning(UserWarning):
    """Issued when a spec is invalid and the parser falls back to black."""


class InvalidColorSpec(ValueError):
    """
    Raised for an invalid spec under ``hardened`` protection.

    The rejected input is kept on ``spec`` so callers can report it.
    """

    def __init__(self, message: str, spec: Any = None):
        super().__init__(message)
        self.spec = spec
