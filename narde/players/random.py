# =========================================================
# --- players_random.py ---
# =========================================================

import random
from typing import List, Optional

from ..core.board import Board, Color
from ..core.dice import TurnDice
from ..core.moves import Move

from .player import Player

# =========================================================

class RandomPlayer(Player):
    """
    Easy opponent: picks uniformly among the legal moves.

    Attributes:
        color (Color): Color the player moves.
        rng (random.Random): Random number generator.
    """

    def __init__(self, color: Color, rng: Optional[random.Random] = None):
        """
        Initialize a RandomPlayer.

        Args:
            color (Color): Color the player moves.
            rng (Optional[random.Random]): Optional RNG instance. If None, a new RNG is created.
        """
        super().__init__(color)
        self.rng: random.Random = rng or random.Random()

    def __str__(self) -> str:
        """Return a human-readable name for the player."""
        return f"Random player 🎲 {self.color}"

    def select_move(
        self,
        moves: List[Move],
        board: Board,
        dice: TurnDice
    ) -> Optional[Move]:
        """
        Select a move randomly from available moves.

        Returns:
            Optional[Move]: Selected move, or None if no moves available.
        """
        if not moves:
            return None
        return self.rng.choice(moves)
