import random

import pytest

from narde.core.dice import TurnDice, expand_dice
from narde.core.errors import DieValueUnavailableError, MoveErrorKind


class TestExpandDice:
    def test_double_gives_four_units(self):
        assert expand_dice(4, 4) == [4, 4, 4, 4]

    def test_non_double_gives_two_units(self):
        assert expand_dice(3, 5) == [3, 5]

    def test_rolls_always_expand_consistently(self):
        """Every roll yields 4 equal units on a double and the two faces otherwise."""
        rng = random.Random(1)
        dice = TurnDice()
        for _ in range(500):
            d1, d2 = dice.roll(rng)
            assert 1 <= d1 <= 6 and 1 <= d2 <= 6
            if d1 == d2:
                assert dice.remaining == [d1] * 4
                assert dice.is_double
            else:
                assert sorted(dice.remaining) == sorted([d1, d2])
                assert not dice.is_double


class TestTurnDice:
    """Rolling, consuming and resetting move units."""

    def test_initial_state(self):
        dice = TurnDice()
        assert not dice.has_rolled
        assert not dice.all_used
        assert dice.available_values() == []
        assert str(dice) == "[not rolled]"

    def test_use_consumes_one_unit(self):
        dice = TurnDice()
        dice.set(6, 6)
        dice.use(6)
        assert dice.remaining == [6, 6, 6]
        assert dice.available_values() == [6]

    def test_use_unavailable_value(self):
        dice = TurnDice()
        dice.set(3, 5)
        with pytest.raises(DieValueUnavailableError) as exc:
            dice.use(4)
        assert exc.value.kind is MoveErrorKind.DIE_VALUE_UNAVAILABLE
        assert dice.remaining == [3, 5]

    def test_all_used_and_reset(self):
        dice = TurnDice()
        dice.set(2, 1)
        dice.use(1)
        dice.use(2)
        assert dice.all_used
        dice.reset()
        assert not dice.has_rolled
        assert dice.values == (0, 0)

    @pytest.mark.parametrize("values", [(0, 3), (3, 7), (-1, 2)])
    def test_set_rejects_out_of_range(self, values):
        dice = TurnDice()
        with pytest.raises(ValueError):
            dice.set(*values)

    def test_copy_is_independent(self):
        dice = TurnDice()
        dice.set(2, 5)
        copy = dice.copy()
        copy.use(5)
        assert dice.remaining == [2, 5]
        assert copy.remaining == [2]
