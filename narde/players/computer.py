# =========================================================
# --- players_computer.py ---
# =========================================================

import logging
from typing import List, Optional, Tuple

from ..core.board import Board, Color
from ..core.dice import TurnDice
from ..core.moves import Move
from ..core.rules import NardeRules

from .player import Player
from .valuation import Valuation

logger = logging.getLogger(__name__)

# =========================================================

class LookaheadPlayer(Player):
    """
    Hard opponent: one-ply search.

    Every candidate move is played on a private clone of the board (hit
    included) and the resulting position is scored with the Valuation. The
    live board is never touched.

    Attributes:
        color (Color): Color the player moves.
        rules (NardeRules): Rules engine used to simulate moves.
        eval (Valuation): Position evaluation weights.
    """

    def __init__(
        self,
        color: Color,
        rules: Optional[NardeRules] = None,
        valuation: Optional[Valuation] = None,
    ):
        super().__init__(color)
        self.rules: NardeRules = rules or NardeRules()
        self.eval: Valuation = valuation or Valuation()

    def __str__(self) -> str:
        return f"Lookahead player {self.color}"

    # ---------------- Evaluation ----------------
    def evaluate(self, board: Board) -> float:
        """Evaluate a position for the player's color."""
        return self.eval.evaluate_position(board, self.color)

    def simulate(self, board: Board, move: Move) -> Board:
        """Return a clone of the board with the move applied."""
        sim = board.clone()
        self.rules.apply_move_to_board(sim, self.color, move)
        return sim

    def rank_moves(self, moves: List[Move], board: Board) -> List[Tuple[Move, float]]:
        """Score every move by the position it leads to, in input order."""
        return [(move, self.evaluate(self.simulate(board, move))) for move in moves]

    # ---------------- Move selection ----------------
    def select_move(
        self,
        moves: List[Move],
        board: Board,
        dice: TurnDice
    ) -> Optional[Move]:
        """
        Select the move leading to the best position. The first best move wins ties.

        Returns:
            Optional[Move]: Best move, or None if no moves available.
        """
        best_move: Optional[Move] = None
        best_score = float("-inf")
        for move, score in self.rank_moves(moves, board):
            if score > best_score:
                best_score = score
                best_move = move
        if best_move is not None:
            logger.debug("[AI] %s picks %s (score %.2f of %d moves)", self.color, best_move, best_score, len(moves))
        return best_move
