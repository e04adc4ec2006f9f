import pytest

from narde.core.board import BAR, OFF, Color
from narde.core.moves import Move
from narde.players.valuation import Valuation

from .conftest import make_board


@pytest.fixture
def valuation() -> Valuation:
    return Valuation()


class TestScoreMove:
    """Single-move heuristic on the current board."""

    def test_plain_step(self, valuation, start_board):
        assert valuation.score_move(start_board, Color.WHITE, Move(1, 4, 3)) == 9

    def test_hit(self, valuation, hit_board):
        # hit + 4 steps
        assert valuation.score_move(hit_board, Color.WHITE, Move(16, 20, 4)) == 10 + 12

    def test_stack(self, valuation):
        board = make_board({1: 14, 5: 1}, {13: 15})
        assert valuation.score_move(board, Color.WHITE, Move(1, 5, 4)) == 5 + 12

    def test_breaking_a_point(self, valuation):
        board = make_board({1: 13, 5: 2}, {13: 15})
        assert valuation.score_move(board, Color.WHITE, Move(5, 8, 3)) == 9 - 3

    def test_bear_off(self, valuation):
        board = make_board({22: 3}, {13: 15})
        # progress 22 -> 25, plus the bear-off bonus
        assert valuation.score_move(board, Color.WHITE, Move(22, OFF, 6)) == 9 + 8

    def test_black_step_across_the_wrap(self, valuation):
        board = make_board({1: 15}, {24: 2, 13: 13})
        # 24 -> 2 is progress 12 -> 14 for Black, leaving a blot on 24
        assert valuation.score_move(board, Color.BLACK, Move(24, 2, 2)) == 6 - 3

    def test_enter_from_bar(self, valuation):
        board = make_board({BAR: 1, 5: 14}, {13: 15})
        assert valuation.score_move(board, Color.WHITE, Move(BAR, 3, 3)) == 9


class TestEvaluatePosition:
    """Full position evaluation."""

    @pytest.mark.parametrize("color", list(Color))
    def test_start_position(self, valuation, start_board, color):
        # mean progress 1 (x2) plus one safe point
        assert valuation.evaluate_position(start_board, color) == pytest.approx(10.0)

    def test_hit_position(self, valuation):
        board = make_board({1: 14, 20: 1}, {13: 14, BAR: 1})
        expected = 2 * (34 / 15) + 8 - 5 + 10 + 15
        assert valuation.evaluate_position(board, Color.WHITE) == pytest.approx(expected)

    def test_off_and_bar(self, valuation):
        board = make_board({BAR: 1, 19: 2}, {OFF: 3, 13: 12})
        # 12 off, 1 on bar, progress 19, one safe home point, 2 home checkers, 3 opponent off
        expected = 20 * 12 - 20 + 2 * 19 + 8 + 10 * 2 - 10 * 3
        assert valuation.evaluate_position(board, Color.WHITE) == pytest.approx(expected)

    def test_empty_board_progress_is_zero(self, valuation):
        board = make_board({}, {13: 15})
        assert valuation.mean_progress(board, Color.WHITE) == 0.0


class TestHelpers:
    def test_prime_pairs_white(self):
        board = make_board({1: 2, 2: 2, 3: 2, 10: 9}, {13: 15})
        assert Valuation.count_prime_pairs(board, Color.WHITE) == 2

    def test_prime_pairs_black_across_wrap(self):
        # points 24 and 1 are consecutive for Black (progress 12 and 13)
        board = make_board({5: 15}, {24: 2, 1: 2, 13: 11})
        assert Valuation.count_prime_pairs(board, Color.BLACK) == 1

    def test_counts(self):
        board = make_board({1: 1, 4: 1, 20: 3, 24: 2}, {13: 15})
        assert Valuation.count_blots(board, Color.WHITE) == 2
        assert Valuation.count_safe_points(board, Color.WHITE) == 2
        assert Valuation.count_home_checkers(board, Color.WHITE) == 5

    def test_black_home_checkers(self):
        board = make_board({1: 15}, {7: 3, 12: 2, 6: 1})
        assert Valuation.count_home_checkers(board, Color.BLACK) == 5
