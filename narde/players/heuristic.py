# =========================================================
# --- players_heuristic.py ---
# =========================================================

import random
from typing import List, Optional

from ..core.board import Board, Color
from ..core.dice import TurnDice
from ..core.moves import Move

from .player import Player
from .valuation import Valuation

# =========================================================

class HeuristicPlayer(Player):
    """
    Medium opponent: rates each move on the current board (hit, stacking,
    progress, bear-off, broken point) without simulating it, plus a little
    noise so equal moves are not always played the same way.

    Attributes:
        color (Color): Color the player moves.
        rng (random.Random): Random number generator for the tie-break noise.
        eval (Valuation): Move scoring weights.
        noise (float): Upper bound of the uniform tie-break noise.
    """

    def __init__(
        self,
        color: Color,
        rng: Optional[random.Random] = None,
        valuation: Optional[Valuation] = None,
        noise: float = 0.5,
    ):
        super().__init__(color)
        self.rng: random.Random = rng or random.Random()
        self.eval: Valuation = valuation or Valuation()
        self.noise: float = noise

    def __str__(self) -> str:
        return f"Heuristic player {self.color}"

    def score(self, board: Board, move: Move) -> float:
        """Heuristic score of a move with tie-break noise."""
        return self.eval.score_move(board, self.color, move) + self.rng.uniform(0, self.noise)

    def select_move(
        self,
        moves: List[Move],
        board: Board,
        dice: TurnDice
    ) -> Optional[Move]:
        """
        Select the highest scoring move.

        Returns:
            Optional[Move]: Best move, or None if no moves available.
        """
        best_move: Optional[Move] = None
        best_score = float("-inf")
        for move in moves:
            score = self.score(board, move)
            if score > best_score:
                best_score = score
                best_move = move
        return best_move
