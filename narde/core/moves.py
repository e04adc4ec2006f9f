# =========================================================
# --- core_moves.py ---
# =========================================================

from dataclasses import dataclass
from typing import Optional

from .board import Board, location_name
from .errors import IllegalMoveError

# =========================================================

@dataclass(frozen=True)
class Move:
    """
    Represents a single checker move using one die.

    Attributes:
        from_point (int): Starting location (BAR or 1-24).
        to_point (int): Target location (1-24 or OFF).
        die (int): Die value used for the move.
    """
    from_point: int
    to_point: int
    die: int

    def __str__(self) -> str:
        """Return a human-readable string representation of the move."""
        return location_name(self.from_point).rjust(3) + " > " + location_name(self.to_point).rjust(3) + f" ({self.die})"

    def __repr__(self) -> str:
        """Return a formal string representation (same as __str__)."""
        return str(self)


@dataclass
class MoveResult:
    """
    Outcome of applying a move to the live session.

    Attributes:
        success (bool): Whether the move was applied.
        move (Optional[Move]): The requested move, if one could be built.
        hit (bool): Whether an opposing blot was sent to the bar.
        board (Optional[Board]): Snapshot of the board after the move.
        game_over (bool): Whether the move ended the game.
        winner (Optional[int]): Winning color if the game ended.
        error (Optional[IllegalMoveError]): Reason for rejection when success is False.
    """
    success: bool
    move: Optional[Move] = None
    hit: bool = False
    board: Optional[Board] = None
    game_over: bool = False
    winner: Optional[int] = None
    error: Optional[IllegalMoveError] = None

    @classmethod
    def failure(cls, error: IllegalMoveError, move: Optional[Move] = None) -> "MoveResult":
        """Create a failed result carrying the rejection reason."""
        return cls(success=False, move=move, error=error)
