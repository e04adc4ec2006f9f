# =========================================================
# --- core_state.py ---
# =========================================================

from typing import Any, Dict, Optional

from .board import Board, Color
from .dice import TurnDice
from .state_invariants import assert_board_invariant

# =========================================================

class GameSession:
    """
    Complete mutable state of one Long Narde game.

    Only the GameEngine mutates a session; AI players receive clones of
    the board for simulation.

    Attributes:
        board (Board): Checker counts.
        dice (TurnDice): Dice of the current turn.
        turn (Color): Color to move.
        winner (Optional[Color]): Winning color once the game is over.
        move_count (int): Number of single moves applied so far.
        turn_count (int): Number of completed turns.
        debug (bool): Enable board invariant assertions after each mutation.
    """

    def __init__(self, board: Optional[Board] = None, start_player: Color = Color.WHITE, debug: bool = False):
        self.debug: bool = debug
        self.start_game(board, start_player)

    # ---------- Setup / Copy ----------
    def start_game(self, board: Optional[Board] = None, start_player: Color = Color.WHITE) -> None:
        """
        Reset the session to a fresh game, optionally from a custom board.

        A given board is copied; the caller keeps no handle on the live one.
        """
        self.board: Board = board.clone() if board is not None else Board()
        self.dice: TurnDice = TurnDice()
        self.turn: Color = Color(start_player)
        self.winner: Optional[Color] = None
        self.move_count: int = 0
        self.turn_count: int = 0
        self._assert("start_game")

    def copy(self) -> "GameSession":
        """Return a deep copy of the session."""
        new_session = GameSession.__new__(GameSession)
        new_session.debug = self.debug
        new_session.board = self.board.clone()
        new_session.dice = self.dice.copy()
        new_session.turn = self.turn
        new_session.winner = self.winner
        new_session.move_count = self.move_count
        new_session.turn_count = self.turn_count
        return new_session

    # ---------- Properties ----------
    @property
    def opp(self) -> Color:
        """Return the color not on move."""
        return self.turn.opponent

    @property
    def game_over(self) -> bool:
        """True once a color has won."""
        return self.winner is not None

    # ---------- Turn ----------
    def switch_turn(self) -> None:
        """Switch the color to move."""
        self.turn = self.turn.opponent

    # ---------- Serialization ----------
    def snapshot(self) -> Dict[str, Any]:
        """Plain-data view of the session for display layers."""
        return {
            "turn": self.turn,
            "dice": self.dice.values,
            "remaining": list(self.dice.remaining),
            "positions": self.board.to_positions(),
            "winner": self.winner,
            "move_count": self.move_count,
        }

    # ---------- Debug / Assertions ----------
    def _assert(self, where: str = "") -> None:
        """Assert board invariants if debug mode is active."""
        if self.debug:
            assert_board_invariant(self.board, where)
