# =========================================================
# --- core_state_invariants.py ---
# =========================================================

import numpy as np

from .board import BOARD_START, BOARD_END, NUM_OF_CHECKERS, Board, Color
from .errors import InvariantViolation

# =========================================================

def assert_checker_invariant(board: Board, where: str = "") -> None:
    """
    Check that every color still owns exactly NUM_OF_CHECKERS checkers
    and that no count is negative.

    Args:
        board: The Board to check.
        where: Optional description of where the check is performed (for debugging).

    Raises:
        InvariantViolation: If a checker was lost or created.
    """
    if (board.counts < 0).any():
        raise InvariantViolation(f"[NEGATIVE COUNT] at {where}\n{board.to_positions()}")

    for color in Color:
        total = board.total(color)
        if total != NUM_OF_CHECKERS:
            raise InvariantViolation(
                f"[CHECKER LOST] {color}: {total}/{NUM_OF_CHECKERS} at {where}\n"
                f"Positions={board.to_positions()[color]}"
            )


def assert_point_invariant(board: Board, where: str = "") -> None:
    """
    Check that no point is shared by two or more checkers of each color.

    A point may hold both colors only while one of them has a single checker
    there, which can only happen transiently inside a hit.

    Args:
        board: The Board to check.
        where: Optional description of where the check is performed (for debugging).

    Raises:
        InvariantViolation: If a point holds two or more checkers of both colors.
    """
    points = board.counts[:, BOARD_START:BOARD_END + 1]
    contested = np.flatnonzero((points[Color.WHITE] >= 2) & (points[Color.BLACK] >= 2))
    if contested.size:
        raise InvariantViolation(
            f"[POINT SHARED] points {[int(p) + BOARD_START for p in contested]} at {where}"
        )


def assert_board_invariant(board: Board, where: str = "") -> None:
    """
    Perform full invariant check for a board.

    This includes:
    - Checker count conservation
    - Non-negative counts
    - No point held by two or more checkers of both colors

    Raises:
        InvariantViolation: If any invariant fails.
    """
    assert_checker_invariant(board, where)
    assert_point_invariant(board, where)
