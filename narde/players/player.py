# =========================================================
# --- players_player.py ---
# =========================================================

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List, Optional

from ..core.board import Board, Color
from ..core.dice import TurnDice
from ..core.moves import Move

if TYPE_CHECKING:
    from ..core.rules import NardeRules

# =========================================================

class Player(ABC):
    """
    Abstract base class for a Long Narde player.

    Attributes:
        color (Color): Color the player moves.
    """

    def __init__(self, color: Color):
        """
        Initialize a player.

        Args:
            color (Color): Color the player moves.
        """
        self.color: Color = Color(color)

    @abstractmethod
    def select_move(
        self,
        moves: List[Move],
        board: Board,
        dice: TurnDice
    ) -> Optional[Move]:
        """
        Select a move from a list of legal moves.

        Args:
            moves (List[Move]): Legal single moves for the current dice.
            board (Board): Copy of the current board; never the live one.
            dice (TurnDice): Copy of the current dice.

        Returns:
            Optional[Move]: Selected move, or None to end the turn.
        """
        pass

    def choose_move(self, board: Board, dice: TurnDice, rules: "NardeRules") -> Optional[Move]:
        """
        Enumerate the legal moves of the player's color and pick one.

        Args:
            board (Board): Current board. Only a clone is handed to select_move.
            dice (TurnDice): Current dice.
            rules (NardeRules): Rules engine.

        Returns:
            Optional[Move]: Selected move, or None if no legal move exists.
        """
        moves = rules.all_legal_moves(board, dice, self.color)
        if not moves:
            return None
        return self.select_move(moves, board.clone(), dice.copy())
