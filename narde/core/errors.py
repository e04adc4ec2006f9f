# =========================================================
# --- core_errors.py ---
# =========================================================

from enum import Enum
from typing import Any, Optional

# =========================================================

class MoveErrorKind(Enum):
    """
    Reasons a requested move can be rejected.

    All of them are recoverable: the caller should simply try another move.
    """
    OUT_OF_BOUNDS = "out_of_bounds"
    DIE_VALUE_UNAVAILABLE = "die_value_unavailable"
    DESTINATION_MISMATCH = "destination_mismatch"
    BEAR_OFF_NOT_ELIGIBLE = "bear_off_not_eligible"
    POINT_BLOCKED = "point_blocked"
    NO_CHECKER_AT_SOURCE = "no_checker_at_source"
    BAR_PRIORITY_VIOLATION = "bar_priority_violation"


class IllegalMoveError(ValueError):
    """
    Base class for rejected moves. Raised before anything is mutated.

    Attributes:
        kind (MoveErrorKind): Machine readable reason.
        move (Any): The move or (from, to, die) request that was rejected.
    """
    kind: MoveErrorKind

    def __init__(self, message: str, move: Optional[Any] = None) -> None:
        super().__init__(message)
        self.move = move


class OutOfBoundsError(IllegalMoveError):
    """Destination is not one of the points 1-24 or OFF."""
    kind = MoveErrorKind.OUT_OF_BOUNDS


class DieValueUnavailableError(IllegalMoveError):
    """Die value is not among the remaining move units."""
    kind = MoveErrorKind.DIE_VALUE_UNAVAILABLE


class DestinationMismatchError(IllegalMoveError):
    """Destination differs from the one computed from source and die."""
    kind = MoveErrorKind.DESTINATION_MISMATCH


class BearOffNotEligibleError(IllegalMoveError):
    """Destination is OFF but not all checkers are in the home quadrant."""
    kind = MoveErrorKind.BEAR_OFF_NOT_ELIGIBLE


class PointBlockedError(IllegalMoveError):
    """Destination holds two or more opposing checkers."""
    kind = MoveErrorKind.POINT_BLOCKED


class NoCheckerAtSourceError(IllegalMoveError):
    """Acting color has no checker at the source location."""
    kind = MoveErrorKind.NO_CHECKER_AT_SOURCE


class BarPriorityViolationError(IllegalMoveError):
    """Acting color has a checker on the bar and tried to move another one."""
    kind = MoveErrorKind.BAR_PRIORITY_VIOLATION


class TurnStateError(RuntimeError):
    """An operation was requested out of turn order (e.g. rolling twice, moving after the game ended)."""
    pass


class InvariantViolation(AssertionError):
    """Internal consistency error. Indicates a bug in the rule engine, never a user mistake."""
    pass
