"""
Runtime configuration.

The protection level controls what the parser does with a spec it cannot
understand. The process-wide default is read from ``COLOR_ENGINE_PROTECTION``
every time it is needed, so tests and applications can change it freely.
"""

import os
from enum import Enum

PROTECTION_ENV_VAR = "COLOR_ENGINE_PROTECTION"


class ProtectionLevel(Enum):
    """How loudly an invalid color spec is reported."""
    NONE = "none"            # Silent fallback to black
    BOUNDARY = "boundary"    # Warn, mentioning the fallback
    SANDBOX = "sandbox"      # Warn
    HARDENED = "hardened"    # Raise InvalidColorSpec

    @classmethod
    def coerce(cls, value: "ProtectionLevel | str") -> "ProtectionLevel":
        """Accept either a member or its (case-insensitive) name."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(
                f"Unknown protection level {value!r}, expected one of: "
                + ", ".join(level.value for level in cls)
            ) from None


DEFAULT_PROTECTION = ProtectionLevel.NONE


def default_protection_level() -> ProtectionLevel:
    """Return the level from the environment, or ``none`` if unset/unknown."""
    if raw := os.environ.get(PROTECTION_ENV_VAR):
        try:
            return ProtectionLevel.coerce(raw)
        except ValueError:
            return DEFAULT_PROTECTION
    return DEFAULT_PROTECTION


def resolve_protection(value: "ProtectionLevel | str | None") -> ProtectionLevel:
    """Explicit argument wins; otherwise fall back to the environment."""
    if value is None:
        return default_protection_level()
    return ProtectionLevel.coerce(value)
