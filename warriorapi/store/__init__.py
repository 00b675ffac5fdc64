"""Warrior storage package."""

from warriorapi.store.warrior_store import IdPolicy, WarriorStore

__all__ = [
    "IdPolicy",
    "WarriorStore",
]
