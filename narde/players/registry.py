# =========================================================
# --- players_registry.py ---
# =========================================================

import random
from enum import Enum
from typing import Optional, Union

from ..core.board import Color
from ..core.rules import NardeRules

from .computer import LookaheadPlayer
from .heuristic import HeuristicPlayer
from .player import Player
from .random import RandomPlayer

# =========================================================

class Difficulty(Enum):
    """
    Opponent strength, a closed set of move selection strategies.

    Attributes:
        EASY: Random choice among legal moves.
        MEDIUM: Single-move heuristic with tie-break noise.
        HARD: One-ply lookahead with full position evaluation.
    """
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


def create_player(
    difficulty: Union[Difficulty, str],
    color: Color,
    rng: Optional[random.Random] = None,
    rules: Optional[NardeRules] = None,
) -> Player:
    """
    Create an AI player for a difficulty.

    Args:
        difficulty: Difficulty or its name ("easy", "medium", "hard").
        color: Color the player moves.
        rng: Random number generator for the tiers that use one.
        rules: Rules engine for the tier that simulates moves.

    Raises:
        ValueError: If the difficulty is unknown.
    """
    if isinstance(difficulty, str):
        difficulty = difficulty.lower()
    difficulty = Difficulty(difficulty)
    if difficulty is Difficulty.EASY:
        return RandomPlayer(color, rng=rng)
    if difficulty is Difficulty.MEDIUM:
        return HeuristicPlayer(color, rng=rng)
    return LookaheadPlayer(color, rules=rules)
