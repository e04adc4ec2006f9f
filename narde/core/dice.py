# =========================================================
# --- core_dice.py ---
# =========================================================

import random
from typing import List, Optional, Tuple

from .errors import DieValueUnavailableError

# =========================================================

DIE_MIN = 1
DIE_MAX = 6


def expand_dice(die1: int, die2: int) -> List[int]:
    """
    Turn a roll into move units. A double grants four units of its value.

    Args:
        die1: First die value.
        die2: Second die value.

    Returns:
        List of usable move units.
    """
    if die1 == die2:
        return [die1] * 4
    return [die1, die2]


class TurnDice:
    """
    Dice of the current turn and the move units still unused.

    Attributes:
        die1 (int): First face value, 0 before the roll.
        die2 (int): Second face value, 0 before the roll.
        remaining (List[int]): Unconsumed move units (multiset).
    """

    def __init__(self) -> None:
        self.die1: int = 0
        self.die2: int = 0
        self.remaining: List[int] = []

    # ---------- Properties ----------
    @property
    def has_rolled(self) -> bool:
        """True once the dice of this turn have been rolled."""
        return self.die1 > 0

    @property
    def is_double(self) -> bool:
        """True if both dice show the same value."""
        return self.has_rolled and self.die1 == self.die2

    @property
    def all_used(self) -> bool:
        """True if the dice were rolled and every move unit has been consumed."""
        return self.has_rolled and not self.remaining

    @property
    def values(self) -> Tuple[int, int]:
        """The two face values."""
        return self.die1, self.die2

    # ---------- Rolling ----------
    def roll(self, rng: Optional[random.Random] = None) -> Tuple[int, int]:
        """Roll two independent dice and expand doubles."""
        rng = rng or random
        return self.set(rng.randint(DIE_MIN, DIE_MAX), rng.randint(DIE_MIN, DIE_MAX))

    def set(self, die1: int, die2: int) -> Tuple[int, int]:
        """
        Set the dice to known values (scripted rolls, replays, tests).

        Raises:
            ValueError: If a value is outside 1-6.
        """
        for die in (die1, die2):
            if not DIE_MIN <= die <= DIE_MAX:
                raise ValueError(f"Invalid die value {die}")
        self.die1, self.die2 = die1, die2
        self.remaining = expand_dice(die1, die2)
        return self.values

    def reset(self) -> None:
        """Return to the not-yet-rolled state."""
        self.die1 = 0
        self.die2 = 0
        self.remaining = []

    # ---------- Consumption ----------
    def can_use(self, value: int) -> bool:
        """Check whether a move unit of this value is still available."""
        return value in self.remaining

    def use(self, value: int) -> None:
        """
        Consume exactly one move unit of the given value.

        Raises:
            DieValueUnavailableError: If no such unit remains.
        """
        if value not in self.remaining:
            raise DieValueUnavailableError(f"Die value {value} not available, remaining {self.remaining}")
        self.remaining.remove(value)

    def available_values(self) -> List[int]:
        """Return the distinct unused values, ascending."""
        return sorted(set(self.remaining))

    def copy(self) -> "TurnDice":
        """Return an independent copy."""
        new_dice = TurnDice()
        new_dice.die1, new_dice.die2 = self.die1, self.die2
        new_dice.remaining = self.remaining.copy()
        return new_dice

    def __str__(self) -> str:
        if not self.has_rolled:
            return "[not rolled]"
        return f"{self.die1}-{self.die2} remaining {self.remaining}"
