"""
pispigot: an unbounded, streaming source for the decimal digits of π.

The core is :class:`PiDigits`, an infinite iterator that certifies one
character at a time.  Everything else in the package (profiles, formatting,
the HTTP API and the CLI) consumes it.
"""

from __future__ import annotations

from .spigot import DECIMAL_POINT, PiDigits, SpigotSnapshot

__all__ = [
    "DECIMAL_POINT",
    "EngineConfig",
    "PiDigits",
    "SpigotSnapshot",
]


class EngineConfig:
    """Top level configuration shared by the CLI and the HTTP API."""

    def __init__(self, profile: str = "default", profiles_path: str | None = None) -> None:
        self.profile = profile
        self.profiles_path = profiles_path
