# =========================================================
# --- cli_terminal.py ---
# =========================================================

import os
import time
from typing import Tuple

from ..core.board import Color

# =========================================================

class Palette:
    """
    ANSI escape codes used by the narde terminal.

    Attributes:
        CHECKER (Tuple[str, str]): Checker color per Color (Black is drawn blue,
            black text is unreadable on dark terminals).
        SOURCE (str): Point a legal move starts from.
        TARGET (str): Point a legal move lands on.
        SOURCE_AND_TARGET (str): Point that is both.
        RESET (str): Back to the terminal default.
        BOLD (str): Headings.
    """
    CHECKER: Tuple[str, str] = ("\033[97m", "\033[94m")
    SOURCE: str = "\033[92m"
    TARGET: str = "\033[93m"
    SOURCE_AND_TARGET: str = "\033[95m"
    RESET: str = "\033[0m"
    BOLD: str = "\033[1m"


def paint(text: str, code: str, use_color: bool = True) -> str:
    """Wrap text in an escape code, or return it unchanged."""
    return f"{code}{text}{Palette.RESET}" if use_color else text


def player_label(color: Color, use_color: bool = True) -> str:
    """Display name of a side, e.g. '(W)hite' in the White checker color."""
    name = str(Color(color))
    return paint(f"({name[0]}){name[1:]}", Palette.CHECKER[color], use_color)


# =========================================================
# Input / output
# =========================================================

#: Words that leave the game from any prompt
QUIT_WORDS = ("q", "quit", "exit")


class ExitGame(Exception):
    """The player asked to leave the game (quit word, Ctrl+C or end of input)."""
    pass


def read_command(prompt: str) -> str:
    """
    Read one stripped line from the player.

    Raises:
        ExitGame: On a quit word, Ctrl+C or end of input.
    """
    try:
        line = input(prompt).strip()
    except (KeyboardInterrupt, EOFError):
        raise ExitGame()
    if line.lower() in QUIT_WORDS:
        raise ExitGame()
    return line


def pause(seconds: float) -> None:
    """Hold the output so a move can be followed; no-op for zero delay."""
    if seconds > 0:
        time.sleep(seconds)


def clear_screen() -> None:
    """Clear the terminal."""
    os.system('cls' if os.name == 'nt' else 'clear')
