# =========================================================
# --- cli_cliHumanInterface.py ---
# =========================================================
from typing import Callable, List, Optional, Tuple

from ..core.board import BAR, OFF, Board, Color
from ..core.dice import TurnDice
from ..core.errors import IllegalMoveError
from ..core.moves import Move
from ..core.rules import NardeRules

from .boardDisplay import BoardDisplay
from .terminal import pause, read_command

# =========================================================

#: Input words accepted for the special locations
LOCATION_WORDS = {"bar": BAR, "off": OFF}


def parse_location(token: str) -> Optional[int]:
    """Parse 'bar', 'off' or a point number; None if unreadable."""
    token = token.strip().lower()
    if token in LOCATION_WORDS:
        return LOCATION_WORDS[token]
    if token.isdigit():
        return int(token)
    return None


class HumanMoveNavigator:
    """
    Interactive terminal selection of a single move.

    The player either types the number of a listed move, a
    'from to' pair (e.g. '1 4', 'bar 15', '22 off'), or 'e' to end the turn.
    """

    def __init__(
        self,
        color: Color,
        rules: Optional[NardeRules] = None,
        input_func: Callable[[str], str] = read_command,
        clear_screen: bool = True,
    ):
        self.color: Color = color
        self.rules: NardeRules = rules or NardeRules()
        self.input_func = input_func
        self.clear_screen: bool = clear_screen

    # ---------------- Main method ----------------
    def navigate(self, moves: List[Move], board: Board, dice: TurnDice) -> Optional[Move]:
        """
        Ask until the player picks a legal move or ends the turn.

        Returns:
            Optional[Move]: The chosen move, or None to end the turn.
        """
        while True:
            self._display_board(moves, board)
            self._display_options(moves, dice)

            choice: str = self.input_func("\nYour choice: ")
            if choice.lower() == "e":
                return None

            move, reason = self._handle_choice(choice, moves, board, dice)
            if move is not None:
                return move
            print(reason)
            pause(0.5)

    # ---------------- Display ----------------
    def _display_board(self, moves: List[Move], board: Board) -> None:
        from_points = {m.from_point for m in moves}
        to_points = {m.to_point for m in moves}
        BoardDisplay(board, clear_screen=self.clear_screen).draw_all(from_points, to_points)
        print()

    def _display_options(self, moves: List[Move], dice: TurnDice) -> None:
        print("Dice " + "🎲" * len(dice.remaining) + f": {dice.remaining}\n")
        for idx, move in enumerate(moves, 1):
            print(f"{idx}: {move}")
        print("\ne: end turn")

    # ---------------- Choice handling ----------------
    def _handle_choice(
        self, choice: str, moves: List[Move], board: Board, dice: TurnDice
    ) -> Tuple[Optional[Move], str]:
        """
        Turn the player's input into a legal move.

        Returns:
            Tuple of the move (or None) and a message explaining a rejection.
        """
        parts = choice.split()
        if len(parts) == 1 and parts[0].isdigit():
            idx = int(parts[0])
            if 1 <= idx <= len(moves):
                return moves[idx - 1], ""
            return None, "Invalid choice, please try again."

        if len(parts) != 2:
            return None, "Enter a move number, 'from to' or 'e'."

        start, target = parse_location(parts[0]), parse_location(parts[1])
        if start is None or target is None:
            return None, "Unknown location, use a point number, 'bar' or 'off'."

        # Bearing off may overshoot, so several dice can match; use the smallest
        matching = sorted((m for m in moves if m.from_point == start and m.to_point == target), key=lambda m: m.die)
        if matching:
            return matching[0], ""

        return None, self._explain(start, target, board, dice)

    def _explain(self, start: int, target: int, board: Board, dice: TurnDice) -> str:
        """Describe why a requested move is illegal."""
        die = self.rules.die_value_needed(start, target, self.color)
        if die is None:
            return "No single die covers that distance."
        try:
            self.rules.validate_move(board, dice, self.color, Move(start, target, die))
        except IllegalMoveError as e:
            return f"Illegal move: {e}"
        return "Illegal move."
