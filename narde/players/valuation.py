# =========================================================
# --- players_valuation.py ---
# =========================================================

from typing import List

import numpy as np

from ..core.board import BAR, OFF, BOARD_START, BOARD_END, HOME_PROGRESS, Board, Color, is_point
from ..core.moves import Move
from ..core.rules import progress_of

# =========================================================

#: Progress of every board point (1-24) per color, column i = point i+1
POINT_PROGRESS = np.array(
    [[progress_of(p, color) for p in range(BOARD_START, BOARD_END + 1)] for color in Color],
    dtype=np.int16,
)


class Valuation:
    """
    Weighted heuristics for move and position scoring.

    Two scorers share the weights' home here:
    - score_move: rates a single move on the current board without simulating it
    - evaluate_position: rates a full board for one color after a simulated move

    Attributes:
        w_hit (float): Move lands on a single opposing checker.
        w_stack (float): Move lands on a point already holding own checkers.
        w_step (float): Per unit of progress gained by a move.
        w_bear_off_move (float): Move bears a checker off.
        w_break_point (float): Penalty for leaving a blot behind on a 2-checker point.
        w_off (float): Per own checker borne off.
        w_bar (float): Penalty per own checker on the bar.
        w_progress (float): Times mean progress of own checkers on the board.
        w_safe (float): Per own point with 2+ checkers.
        w_blot (float): Penalty per own point with exactly one checker.
        w_home (float): Per own checker with progress 19 or more.
        w_prime (float): Per pair of own safe points with consecutive progress.
        w_opp_bar (float): Per opposing checker on the bar.
        w_opp_blot (float): Per opposing point with exactly one checker.
        w_opp_off (float): Penalty per opposing checker borne off.
    """

    def __init__(self,
                 weight_hit: float = 10.0,
                 weight_stack: float = 5.0,
                 weight_step: float = 3.0,
                 weight_bear_off_move: float = 8.0,
                 weight_break_point: float = 3.0,
                 weight_off: float = 20.0,
                 weight_bar: float = 20.0,
                 weight_progress: float = 2.0,
                 weight_safe: float = 8.0,
                 weight_blot: float = 5.0,
                 weight_home: float = 10.0,
                 weight_prime: float = 12.0,
                 weight_opp_bar: float = 15.0,
                 weight_opp_blot: float = 3.0,
                 weight_opp_off: float = 10.0):
        self.w_hit: float = weight_hit
        self.w_stack: float = weight_stack
        self.w_step: float = weight_step
        self.w_bear_off_move: float = weight_bear_off_move
        self.w_break_point: float = weight_break_point

        self.w_off: float = weight_off
        self.w_bar: float = weight_bar
        self.w_progress: float = weight_progress
        self.w_safe: float = weight_safe
        self.w_blot: float = weight_blot
        self.w_home: float = weight_home
        self.w_prime: float = weight_prime
        self.w_opp_bar: float = weight_opp_bar
        self.w_opp_blot: float = weight_opp_blot
        self.w_opp_off: float = weight_opp_off

    # ---------------- Helper functions ----------------
    @staticmethod
    def point_counts(board: Board, color: int) -> np.ndarray:
        """Checker counts of a color on points 1-24."""
        return board.counts[color, BOARD_START:BOARD_END + 1].astype(np.int16)

    @staticmethod
    def mean_progress(board: Board, color: int) -> float:
        """Mean progress of a color's checkers on points 1-24, 0 if none."""
        counts = Valuation.point_counts(board, color)
        active = int(counts.sum())
        if active == 0:
            return 0.0
        return float((counts * POINT_PROGRESS[color]).sum()) / active

    @staticmethod
    def count_home_checkers(board: Board, color: int) -> int:
        """Count checkers on points with progress 19 or more."""
        counts = Valuation.point_counts(board, color)
        return int(counts[POINT_PROGRESS[color] >= HOME_PROGRESS].sum())

    @staticmethod
    def count_blots(board: Board, color: int) -> int:
        """Count points holding exactly one checker of a color."""
        return int((Valuation.point_counts(board, color) == 1).sum())

    @staticmethod
    def count_safe_points(board: Board, color: int) -> int:
        """Count points holding two or more checkers of a color."""
        return int((Valuation.point_counts(board, color) >= 2).sum())

    @staticmethod
    def count_prime_pairs(board: Board, color: int) -> int:
        """
        Count adjacent pairs of safe points, adjacency measured in progress.

        A run of n consecutive safe points contributes n-1 pairs.
        """
        safe = Valuation.point_counts(board, color) >= 2
        progresses: List[int] = sorted(int(p) for p in POINT_PROGRESS[color][safe])
        return sum(1 for a, b in zip(progresses, progresses[1:]) if b == a + 1)

    # ---------------- Move scoring ----------------
    def score_move(self, board: Board, color: int, move: Move) -> float:
        """
        Score a single move on the current board, without simulating it.

        Args:
            board (Board): Board before the move.
            color (int): Color making the move.
            move (Move): Candidate move.

        Returns:
            float: Deterministic heuristic score (noise is added by the player).
        """
        opp = Color(color).opponent
        score: float = 0

        if is_point(move.to_point):
            if board.count_at(opp, move.to_point) == 1:
                score += self.w_hit
            if board.count_at(color, move.to_point) >= 1:
                score += self.w_stack

        score += self.w_step * (progress_of(move.to_point, color) - progress_of(move.from_point, color))

        if move.to_point == OFF:
            score += self.w_bear_off_move

        if is_point(move.from_point) and board.count_at(color, move.from_point) == 2:
            score -= self.w_break_point

        return score

    # ---------------- Full evaluation ----------------
    def evaluate_position(self, board: Board, color: int) -> float:
        """
        Evaluate a full position for the given color.

        Higher is better for `color`.

        Args:
            board (Board): Position to evaluate.
            color (int): Color to evaluate for.

        Returns:
            float: Weighted score.
        """
        opp = Color(color).opponent
        score: float = 0

        # own checkers
        score += self.w_off * board.count_at(color, OFF)
        score -= self.w_bar * board.count_at(color, BAR)
        score += self.w_progress * self.mean_progress(board, color)
        score += self.w_safe * self.count_safe_points(board, color)
        score -= self.w_blot * self.count_blots(board, color)
        score += self.w_home * self.count_home_checkers(board, color)
        score += self.w_prime * self.count_prime_pairs(board, color)

        # opponent checkers
        score += self.w_opp_bar * board.count_at(opp, BAR)
        score += self.w_opp_blot * self.count_blots(board, opp)
        score -= self.w_opp_off * board.count_at(opp, OFF)

        return score
