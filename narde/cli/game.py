# =========================================================
# --- cli_game.py ---
# =========================================================

import sys
from typing import Callable, List, Optional

from ..config import configure_logging
from ..core.board import Board, Color
from ..core.dice import TurnDice
from ..core.engine import GameEngine
from ..core.moves import Move
from ..core.rules import NardeRules
from ..core.state import GameSession

from ..players.player import Player
from ..players.human import HumanPlayer
from ..players.registry import Difficulty, create_player

from .terminal import ExitGame, clear_screen, player_label, read_command
from .cliHumanInterface import HumanMoveNavigator
from .cliHandlers import CLIHandlers

# =========================================================

#: Menu choice -> difficulty of the computer opponent
AI_CHOICES = {
    "2": Difficulty.EASY,
    "3": Difficulty.MEDIUM,
    "4": Difficulty.HARD,
}


class CLISetup:
    """
    Factory and setup utilities for configuring players
    and initializing the game engine for the CLI.
    """

    def __init__(self, rules: Optional[NardeRules] = None, input_func: Callable[[str], str] = read_command):
        self.rules: NardeRules = rules or NardeRules()
        self.input_func = input_func

    def create_human_player(self, color: Color) -> HumanPlayer:
        """
        Create a human player whose moves are read from the terminal.
        """
        navigator = HumanMoveNavigator(color, self.rules, self.input_func)

        def human_cli_input(moves: List[Move], board: Board, dice: TurnDice) -> Optional[Move]:
            return navigator.navigate(moves, board, dice)

        return HumanPlayer(color, input_func=human_cli_input)

    def choose_player(self, color: Color) -> Player:
        """
        Prompt the user to choose a player type for a color.
        """
        print(f"\nChoose player for {player_label(color)}: 1-Human, 2-Easy, 3-Medium, 4-Hard")
        while True:
            choice: str = self.input_func("Choice (1/2/3/4): ").strip()
            if choice == "1":
                return self.create_human_player(color)
            if choice in AI_CHOICES:
                return create_player(AI_CHOICES[choice], color, rules=self.rules)
            print("Invalid input, enter 1,2,3,4")

    def setup_engine(self) -> GameEngine:
        """
        Initialize the game engine with rules, session and players.
        """
        players = [self.choose_player(Color.WHITE), self.choose_player(Color.BLACK)]
        return GameEngine(GameSession(), self.rules, players)


class NardeCLI:
    """
    Main command-line interface controller for running a Long Narde game.
    """

    def __init__(self, delay: float = 1.0, setup: Optional[CLISetup] = None, clear_screen: bool = True):
        """
        Initialize the CLI.

        Args:
            delay (float): Delay in seconds between UI updates.
            setup (Optional[CLISetup]): Player/engine factory.
            clear_screen (bool): Whether board redraws clear the terminal.
        """
        self.setup = setup or CLISetup()
        self.handlers = CLIHandlers(delay, clear_screen).handlers
        self.clear_screen = clear_screen

    def play_game(self, engine: GameEngine) -> None:
        """
        Run the game loop and dispatch events to CLI handlers.

        Raises:
            ExitGame: If the user exits the game intentionally.
        """
        for event in engine.play_game():
            handler = self.handlers.get(event["type"])
            if handler:
                handler(event)

    def run(self) -> None:
        """
        Start the CLI application and run a complete game session.
        """
        if self.clear_screen:
            clear_screen()
        try:
            engine = self.setup.setup_engine()
            self.play_game(engine)
        except ExitGame:
            print("\nGame exited by player.")
        except KeyboardInterrupt:
            print("\nGame interrupted by user. Exiting...")


def main() -> None:
    """Console entry point. Pass --debug for engine logs."""
    configure_logging("--debug" in sys.argv[1:])
    NardeCLI().run()


# ---------------- Main ----------------
if __name__ == "__main__":
    main()
