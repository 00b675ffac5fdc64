"""Warrior game mechanics package."""

from warriorapi.engine.critical import CriticalRoller, RandomSource

__all__ = [
    "CriticalRoller",
    "RandomSource",
]
