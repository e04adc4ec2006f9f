# =========================================================
# --- core_board.py ---
# =========================================================

from enum import IntEnum
from typing import Dict, List, Optional, Tuple

import numpy as np

from .errors import InvariantViolation

# =========================================================

"""
Board-related constants and the checker container for Long Narde.

This module defines:
- Board points, bar and off locations
- Colors and their starting (entry) points
- Home quadrant threshold in progress units
- The Board: per-color, per-location checker counts
"""

#: Board point range (1-24 are normal playable points)
BOARD_START = 1
BOARD_END = 24

#: Special locations shared by both colors
#: BAR holds hit checkers, OFF holds borne off checkers
BAR = 0
OFF = 25

#: Number of location slots per color (bar + 24 points + off)
NUM_OF_LOCATIONS = 26

#: Total number of checkers per color
NUM_OF_CHECKERS = 15

#: Progress a checker needs before its color may bear off
HOME_PROGRESS = 19


class Color(IntEnum):
    """Checker colors. WHITE travels 1 -> 24, BLACK travels 13 -> 24 -> 1 -> 12."""
    WHITE = 0
    BLACK = 1

    @property
    def opponent(self) -> "Color":
        """Return the opposing color."""
        return Color(1 - self)

    def __str__(self) -> str:
        return self.name.capitalize()


#: Starting point of each color: all 15 checkers stacked on one point
#: Index 0 = White, Index 1 = Black
ENTRY_POINT = (1, 13)

#: Point reached from the bar with a die of value d is ENTRY_OFFSET[color] + d
ENTRY_OFFSET = (0, 12)

#: Default starting positions, each entry: list of (location, count)
DEFAULT_POSITIONS = [
    [(ENTRY_POINT[Color.WHITE], NUM_OF_CHECKERS)],
    [(ENTRY_POINT[Color.BLACK], NUM_OF_CHECKERS)],
]


def location_name(loc: int) -> str:
    """Return a printable name for a location."""
    if loc == BAR:
        return "BAR"
    if loc == OFF:
        return "OFF"
    return str(loc)


def is_point(loc: int) -> bool:
    """Check if a location is one of the 24 board points."""
    return BOARD_START <= loc <= BOARD_END


# =========================================================

class Board:
    """
    Passive container of checker counts.

    Checkers of one color are interchangeable, so the board only stores
    how many of each color sit on every location. It knows nothing about
    legality; the rules validate a move before the board is mutated.

    Attributes:
        counts (np.ndarray): Array of shape (2, 26). Row = color, column = location
            (0 = bar, 1-24 = points, 25 = off).
    """

    def __init__(self, positions: Optional[List[List[Tuple[int, int]]]] = None):
        self.counts: np.ndarray = np.zeros((2, NUM_OF_LOCATIONS), dtype=np.int8)
        self.place_checkers_from_list(positions if positions is not None else DEFAULT_POSITIONS)

    # ---------- Setup / Copy ----------
    @classmethod
    def from_positions(cls, white: Dict[int, int], black: Dict[int, int]) -> "Board":
        """
        Build a board from {location: count} mappings.

        Raises:
            ValueError: If a color does not have exactly NUM_OF_CHECKERS checkers.
        """
        return cls([sorted(white.items()), sorted(black.items())])

    def clone(self) -> "Board":
        """Return a deep copy of the board."""
        new_board = Board.__new__(Board)
        new_board.counts = self.counts.copy()
        return new_board

    def place_checkers_from_list(self, positions: List[List[Tuple[int, int]]]) -> None:
        """Replace the board content with a serialized position list."""
        self.counts[:] = 0
        for color in Color:
            for loc, count in positions[color]:
                if not 0 <= loc < NUM_OF_LOCATIONS:
                    raise ValueError(f"Invalid location {loc}")
                if count < 0:
                    raise ValueError(f"Negative checker count at {loc}")
                self.counts[color, loc] += count
            if self.total(color) != NUM_OF_CHECKERS:
                raise ValueError(f"Invalid number of checkers for {color}: {self.total(color)}")

    def to_positions(self) -> List[List[Tuple[int, int]]]:
        """Serialize the board into a list of (location, count) per color."""
        return [
            [(int(loc), int(self.counts[color, loc])) for loc in np.flatnonzero(self.counts[color])]
            for color in Color
        ]

    # ---------- Queries ----------
    def count_at(self, color: int, loc: int) -> int:
        """Return the number of checkers of a color at a location."""
        return int(self.counts[color, loc])

    def total(self, color: int) -> int:
        """Return the number of checkers of a color across all locations."""
        return int(self.counts[color].sum())

    def occupied(self, color: int) -> List[int]:
        """Return locations holding checkers of a color, bar included, off excluded."""
        return [int(loc) for loc in np.flatnonzero(self.counts[color, :OFF])]

    def points_with(self, color: int, count: int) -> List[int]:
        """Return board points holding exactly `count` checkers of a color."""
        row = self.counts[color, BOARD_START:BOARD_END + 1]
        return [int(i) + BOARD_START for i in np.flatnonzero(row == count)]

    def safe_points(self, color: int) -> List[int]:
        """Return board points holding two or more checkers of a color."""
        row = self.counts[color, BOARD_START:BOARD_END + 1]
        return [int(i) + BOARD_START for i in np.flatnonzero(row >= 2)]

    def on_board(self, color: int) -> int:
        """Return the number of checkers of a color on points 1-24."""
        return int(self.counts[color, BOARD_START:BOARD_END + 1].sum())

    # ---------- Mutation ----------
    def adjust(self, color: int, loc: int, delta: int) -> None:
        """
        Add `delta` checkers of a color to a location.

        Raises:
            InvariantViolation: If the count would become negative.
        """
        new_count = int(self.counts[color, loc]) + delta
        if new_count < 0:
            raise InvariantViolation(
                f"[CHECKER LOST] {Color(color)} count at {location_name(loc)} would become {new_count}"
            )
        self.counts[color, loc] = new_count

    def set_count(self, color: int, loc: int, count: int) -> None:
        """Set the number of checkers of a color at a location."""
        if count < 0:
            raise InvariantViolation(f"[CHECKER LOST] negative count {count} at {location_name(loc)}")
        self.counts[color, loc] = count

    def move_checker(self, color: int, start: int, target: int) -> None:
        """Move one checker of a color from start to target."""
        self.adjust(color, start, -1)
        self.adjust(color, target, 1)

    # ---------- Dunder ----------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return np.array_equal(self.counts, other.counts)

    def __hash__(self) -> int:
        return hash(self.counts.tobytes())

    def __repr__(self) -> str:
        return f"Board(white={dict(self.to_positions()[0])}, black={dict(self.to_positions()[1])})"
