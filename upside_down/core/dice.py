"""
Dice module for the game.

Provides the random source used by every game component: uniform die rolls
and percentage checks. A single instance is shared by the campaign and passed
explicitly to the battle resolver and the encounter dispatcher, so that a
seeded or scripted source makes a whole run reproducible.
"""

import random
from collections import deque
from typing import Iterable

from catchery import log_debug


class RandomSource:
    """
    Produces die rolls and percentage checks.

    Attributes:
        seed (int | None):
            The seed used to initialize the generator, or None when the
            generator was seeded from the operating system.

    """

    def __init__(self, seed: int | None = None) -> None:
        """
        Initialize the random source.

        Args:
            seed (int | None):
                Optional seed. When omitted the generator is seeded from a
                non-deterministic source.

        """
        self.seed = seed
        self._rng = random.Random(seed)

    def _draw(self, sides: int) -> int:
        return self._rng.randint(1, sides)

    def roll(self, sides: int) -> int:
        """
        Rolls a die with the given number of sides.

        Args:
            sides (int):
                The number of sides of the die.

        Returns:
            int:
                A value uniformly distributed in [1, sides], or 1 when the die
                has one side or fewer.

        """
        if sides <= 1:
            return 1
        return self._draw(sides)

    def chance(self, percent: int) -> bool:
        """
        Checks whether an event with the given probability happens.

        Args:
            percent (int):
                The probability of the event, in percent.

        Returns:
            bool:
                True with probability percent/100.

        """
        return self.roll(100) <= percent


class ScriptedRandomSource(RandomSource):
    """
    A random source that replays a fixed sequence of rolls.

    Every call to `roll` with more than one side consumes the next scripted
    value, which must be a legal result for that die. Used to replay a known
    battle turn by turn.
    """

    def __init__(self, rolls: Iterable[int]) -> None:
        super().__init__(seed=0)
        self._rolls: deque[int] = deque(rolls)

    @property
    def remaining(self) -> int:
        """Returns the number of scripted rolls not consumed yet."""
        return len(self._rolls)

    def push(self, *rolls: int) -> None:
        """Appends rolls to the end of the script."""
        self._rolls.extend(rolls)

    def _draw(self, sides: int) -> int:
        if not self._rolls:
            raise IndexError(f"Scripted rolls exhausted while rolling a d{sides}.")
        value = self._rolls.popleft()
        if not 1 <= value <= sides:
            raise ValueError(f"Scripted roll {value} is not a valid d{sides} result.")
        log_debug(f"Scripted d{sides} -> {value}", {"remaining": len(self._rolls)})
        return value
