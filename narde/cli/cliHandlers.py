# =========================================================
# --- cli_cliHandlers.py ---
# =========================================================

from typing import Any, Callable, Dict

from ..core.board import Board

from .terminal import pause, player_label
from .boardDisplay import BoardDisplay

# =========================================================

class CLIHandlers:
    """
    Handles engine events for terminal play.

    Attributes:
        delay (float): Delay in seconds between event prints to allow user to follow the game.
        clear_screen (bool): Whether board redraws clear the terminal.
    """

    def __init__(self, delay: float = 1.5, clear_screen: bool = True):
        self.delay: float = delay
        self.clear_screen: bool = clear_screen

    def _draw(self, board: Board) -> None:
        BoardDisplay(board, clear_screen=self.clear_screen).draw_all()

    # ---------------- Event Handlers ----------------
    def handle_turn_start(self, event: Dict[str, Any]) -> None:
        """Display the board and the color to move."""
        self._draw(event["board"])
        print(f"\nTurn: {player_label(event['turn'])}")
        if event['bear_off_allowed']:
            print("\nBearing off allowed!\n")
        pause(self.delay)

    def handle_roll_dice(self, event: Dict[str, Any]) -> None:
        """Display the dice and who rolled them."""
        dice = event['dice']
        double = " (double!)" if event['is_double'] else ""
        print(f"\n{player_label(event['turn'])} rolled 🎲🎲: {dice[0]}-{dice[1]}{double}")
        print(f"({event['player_type']})\n")
        pause(self.delay)

    def handle_no_moves(self, event: Dict[str, Any]) -> None:
        """Tell the player the dice cannot be used."""
        print("\nNo legal moves available!\n")
        pause(self.delay)

    def handle_chosen_move(self, event: Dict[str, Any]) -> None:
        """Show the chosen move."""
        print(f"\n{player_label(event['turn'])} chose {event['move']}")
        pause(self.delay)

    def handle_apply_move(self, event: Dict[str, Any]) -> None:
        """Redraw the board after a move, flagging hits."""
        self._draw(event["board"])
        print(f"\nApply move: {event['move']}")
        if event["hit"]:
            print("💥 HIT! Opponent checker sent to the bar.")
        pause(self.delay)

    def handle_turn_end(self, event: Dict[str, Any]) -> None:
        """Announce the next color."""
        print(f"\nTurn ended. Next player: {player_label(event['next_turn'])}")
        pause(self.delay)

    def handle_game_over(self, event: Dict[str, Any]) -> None:
        """Display the final board and the winner."""
        self._draw(event["board"])
        print(f"\nGame Over! Winner: {player_label(event['winner'])} ({event['player_type']}), "
              f"Moves: {event['move_count']}\n")

    # ---------------- Handler Mapping ----------------
    @property
    def handlers(self) -> Dict[str, Callable[[Dict[str, Any]], None]]:
        """
        Returns a dictionary mapping event types to their handler functions.
        """
        return {
            "turn_start": self.handle_turn_start,
            "roll_dice": self.handle_roll_dice,
            "no_moves": self.handle_no_moves,
            "chosen_move": self.handle_chosen_move,
            "apply_move": self.handle_apply_move,
            "turn_end": self.handle_turn_end,
            "game_over": self.handle_game_over,
        }
