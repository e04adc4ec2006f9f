import random

import pytest

from narde.core.board import BAR, OFF, Color
from narde.core.moves import Move
from narde.core.rules import NardeRules
from narde.players.computer import LookaheadPlayer
from narde.players.heuristic import HeuristicPlayer
from narde.players.human import HumanPlayer
from narde.players.random import RandomPlayer
from narde.players.registry import Difficulty, create_player
from narde.players.valuation import Valuation

from .conftest import make_board, make_dice


class TestRandomPlayer:
    def test_picks_a_legal_move(self, rules, start_board):
        dice = make_dice(3, 5)
        moves = rules.all_legal_moves(start_board, dice, Color.WHITE)
        player = RandomPlayer(Color.WHITE, random.Random(0))
        for _ in range(20):
            assert player.select_move(moves, start_board, dice) in moves

    def test_seeded_choices_repeat(self, rules, start_board):
        dice = make_dice(3, 5)
        moves = rules.all_legal_moves(start_board, dice, Color.WHITE)
        first = RandomPlayer(Color.WHITE, random.Random(42))
        second = RandomPlayer(Color.WHITE, random.Random(42))
        picks = [first.select_move(moves, start_board, dice) for _ in range(10)]
        assert picks == [second.select_move(moves, start_board, dice) for _ in range(10)]

    def test_no_moves(self, start_board):
        assert RandomPlayer(Color.BLACK).select_move([], start_board, make_dice(1, 2)) is None


class TestHeuristicPlayer:
    def test_prefers_hit(self, rules, hit_board):
        dice = make_dice(4, 1)
        moves = rules.all_legal_moves(hit_board, dice, Color.WHITE)
        player = HeuristicPlayer(Color.WHITE, random.Random(3))
        assert player.select_move(moves, hit_board, dice) == Move(16, 20, 4)

    def test_noise_is_bounded(self, hit_board):
        player = HeuristicPlayer(Color.WHITE, random.Random(3), noise=0.5)
        base = player.eval.score_move(hit_board, Color.WHITE, Move(1, 5, 4))
        for _ in range(50):
            assert base <= player.score(hit_board, Move(1, 5, 4)) <= base + 0.5

    def test_without_noise_first_best_wins(self, start_board):
        player = HeuristicPlayer(Color.WHITE, noise=0.0, valuation=Valuation(weight_step=0))
        moves = [Move(1, 4, 3), Move(1, 6, 5)]
        assert player.select_move(moves, start_board, make_dice(3, 5)) == Move(1, 4, 3)

    def test_no_moves(self, start_board):
        assert HeuristicPlayer(Color.WHITE).select_move([], start_board, make_dice(1, 2)) is None


class TestLookaheadPlayer:
    def test_prefers_hit(self, rules, hit_board):
        dice = make_dice(4, 1)
        moves = rules.all_legal_moves(hit_board, dice, Color.WHITE)
        assert LookaheadPlayer(Color.WHITE).select_move(moves, hit_board, dice) == Move(16, 20, 4)

    def test_simulation_leaves_board_untouched(self, rules, hit_board):
        before = hit_board.clone()
        dice = make_dice(4, 1)
        moves = rules.all_legal_moves(hit_board, dice, Color.WHITE)
        player = LookaheadPlayer(Color.WHITE)
        player.rank_moves(moves, hit_board)
        player.select_move(moves, hit_board, dice)
        assert hit_board == before

    def test_simulate_applies_hit(self, hit_board):
        sim = LookaheadPlayer(Color.WHITE).simulate(hit_board, Move(16, 20, 4))
        assert sim.count_at(Color.BLACK, BAR) == 1
        assert hit_board.count_at(Color.BLACK, BAR) == 0

    def test_first_move_wins_ties(self, rules, start_board):
        flat = Valuation(*([0.0] * 15))
        dice = make_dice(3, 5)
        moves = rules.all_legal_moves(start_board, dice, Color.WHITE)
        player = LookaheadPlayer(Color.WHITE, valuation=flat)
        assert player.select_move(moves, start_board, dice) == moves[0]
        assert player.select_move(list(reversed(moves)), start_board, dice) == moves[-1]

    def test_prefers_bearing_off(self, rules):
        board = make_board({20: 2, 23: 1}, {13: 15})
        dice = make_dice(2, 5)
        moves = rules.all_legal_moves(board, dice, Color.WHITE)
        best = LookaheadPlayer(Color.WHITE).select_move(moves, board, dice)
        assert best.to_point == OFF

    def test_name(self):
        assert str(LookaheadPlayer(Color.BLACK)) == "Lookahead player Black"

    def test_no_moves(self, start_board):
        assert LookaheadPlayer(Color.BLACK).select_move([], start_board, make_dice(1, 2)) is None


class TestHumanPlayer:
    def test_delegates_to_input(self, start_board):
        calls = []

        def pick_last(moves, board, dice):
            calls.append(len(moves))
            return moves[-1]

        player = HumanPlayer(Color.WHITE, input_func=pick_last, name="Ann")
        moves = [Move(1, 4, 3), Move(1, 6, 5)]
        assert player.select_move(moves, start_board, make_dice(3, 5)) == Move(1, 6, 5)
        assert calls == [2]
        assert str(player) == "Ann_(White)"

    def test_choose_move_passes_copies(self, rules, start_board):
        seen = []

        def record(moves, board, dice):
            seen.append((board, dice))
            return None

        player = HumanPlayer(Color.WHITE, input_func=record)
        dice = make_dice(3, 5)
        assert player.choose_move(start_board, dice, rules) is None
        board_copy, dice_copy = seen[0]
        assert board_copy is not start_board and board_copy == start_board
        assert dice_copy is not dice

    def test_choose_move_without_legal_moves(self, rules):
        board = make_board({1: 15}, {4: 2, 6: 2, 13: 11})
        player = HumanPlayer(Color.WHITE, input_func=lambda m, b, d: pytest.fail("should not be asked"))
        assert player.choose_move(board, make_dice(3, 5), rules) is None


class TestRegistry:
    @pytest.mark.parametrize("difficulty, cls", [
        (Difficulty.EASY, RandomPlayer),
        (Difficulty.MEDIUM, HeuristicPlayer),
        (Difficulty.HARD, LookaheadPlayer),
        ("hard", LookaheadPlayer),
        ("Easy", RandomPlayer),
    ])
    def test_create_player(self, difficulty, cls):
        player = create_player(difficulty, Color.BLACK)
        assert isinstance(player, cls)
        assert player.color is Color.BLACK

    def test_shared_rules_and_rng(self):
        rules = NardeRules()
        rng = random.Random(1)
        assert create_player(Difficulty.HARD, Color.WHITE, rules=rules).rules is rules
        assert create_player(Difficulty.EASY, Color.WHITE, rng=rng).rng is rng

    def test_unknown_difficulty(self):
        with pytest.raises(ValueError):
            create_player("impossible", Color.WHITE)
