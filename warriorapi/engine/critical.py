"""Critical hit rolling for warrior damage."""

import random
from typing import Optional, Protocol


class RandomSource(Protocol):
    """Anything that draws uniform floats in [0, 1)."""

    def random(self) -> float: ...


class CriticalRoller:
    """Draws critical hit decisions from one shared random source."""

    def __init__(self, source: Optional[RandomSource] = None) -> None:
        """
        Initialize the roller.

        Args:
            source: Random source to draw from. Defaults to the process-wide
                ``random`` module generator.
        """
        self._source = source if source is not None else random

    def roll(self) -> float:
        """Draw the raw critical value, uniform in [0, 1)."""
        return self._source.random()

    def is_critical(self, chance: float) -> bool:
        """
        Roll a critical check.

        Args:
            chance: Probability of a critical hit, conceptually in [0, 1]

        Returns:
            True if the draw lands strictly below ``chance``
        """
        return self.roll() < chance
