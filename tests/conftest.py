"""Shared fixtures for rule engine and player tests."""

import random
from typing import Dict, Optional

import pytest

from narde.core.board import BAR, OFF, Board, Color
from narde.core.dice import TurnDice
from narde.core.engine import GameEngine
from narde.core.rules import NardeRules
from narde.core.state import GameSession


def make_board(white: Dict[int, int], black: Dict[int, int]) -> Board:
    """Build a board; any checkers not listed are placed OFF."""
    white = dict(white)
    black = dict(black)
    white[OFF] = white.get(OFF, 0) + 15 - sum(white.values())
    black[OFF] = black.get(OFF, 0) + 15 - sum(black.values())
    return Board.from_positions(white, black)


def make_dice(die1: int, die2: int) -> TurnDice:
    """Dice already rolled to the given values."""
    dice = TurnDice()
    dice.set(die1, die2)
    return dice


def make_engine(board: Optional[Board] = None, turn: Color = Color.WHITE, seed: int = 7, **kwargs) -> GameEngine:
    """Engine over a debug session (invariants asserted after every move)."""
    session = GameSession(board, start_player=turn, debug=True)
    return GameEngine(session, NardeRules(), rng=random.Random(seed), **kwargs)


@pytest.fixture
def rules() -> NardeRules:
    return NardeRules()


@pytest.fixture
def start_board() -> Board:
    """White 15 on point 1, Black 15 on point 13."""
    return Board()


@pytest.fixture
def engine() -> GameEngine:
    """Engine at the start position, White to move."""
    return make_engine()


@pytest.fixture
def hit_board() -> Board:
    """White blot on 16 can hit the Black blot on 20 with a 4."""
    return make_board({1: 14, 16: 1}, {13: 14, 20: 1})


@pytest.fixture
def white_on_bar_board() -> Board:
    """White has one checker on the bar and the rest on point 5."""
    return make_board({BAR: 1, 5: 14}, {13: 15})


@pytest.fixture
def white_home_board() -> Board:
    """All 15 White checkers in the home quadrant (progress >= 19)."""
    return make_board({19: 5, 22: 5, 24: 5}, {13: 15})
