# =========================================================
# --- players_human.py ---
# =========================================================

from typing import Callable, List, Optional

from ..core.board import Board, Color
from ..core.dice import TurnDice
from ..core.moves import Move

from .player import Player

# =========================================================

#: Signature of the move input callback: (legal moves, board, dice) -> chosen move or None
MoveInput = Callable[[List[Move], Board, TurnDice], Optional[Move]]


class HumanPlayer(Player):
    """
    Human-controlled player class.

    Move selection is delegated to an input function supplied by the
    interface layer (terminal prompt, GUI click handler, test script).

    Attributes:
        color (Color): Color the player moves.
        name (str): Player display name.
        input_func (MoveInput): Function used to select a move from the legal moves.
    """

    def __init__(
        self,
        color: Color,
        input_func: MoveInput,
        name: str = "Human Player",
    ):
        """
        Initialize a human player.

        Args:
            color (Color): Color the player moves.
            input_func (MoveInput): Function to select a move; returning None ends the turn.
            name (str, optional): Player display name. Defaults to "Human Player".
        """
        super().__init__(color)
        self.name: str = name
        self.input_func: MoveInput = input_func

    def __str__(self) -> str:
        """
        Return string representation of the player.

        Returns:
            str: Player name with color.
        """
        return f"{self.name}_({self.color})"

    def select_move(
        self,
        moves: List[Move],
        board: Board,
        dice: TurnDice,
    ) -> Optional[Move]:
        """
        Ask the human for a move.

        Returns:
            Optional[Move]: Selected move or None to end the turn early.
        """
        return self.input_func(moves, board, dice)
