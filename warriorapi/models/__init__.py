"""Data models module for the warrior API."""

from warriorapi.models.warrior import (
    LOW_HEALTH_THRESHOLD,
    SPECIAL_ABILITY_MIN_AGILITY,
    SPECIAL_ABILITY_MIN_INTELLECT,
    SPECIAL_ABILITY_MIN_STRENGTH,
    Warrior,
    WarriorInfo,
)

__all__ = [
    "Warrior",
    "WarriorInfo",
    # Thresholds
    "LOW_HEALTH_THRESHOLD",
    "SPECIAL_ABILITY_MIN_STRENGTH",
    "SPECIAL_ABILITY_MIN_AGILITY",
    "SPECIAL_ABILITY_MIN_INTELLECT",
]
