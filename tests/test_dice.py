import pytest

from tablegames.errors import InvalidThreshold
from tablegames.games.dice import DiceGame
from tablegames.rng import OutcomeGenerator


@pytest.mark.parametrize("threshold", [2, 50, 96])
def test_valid_thresholds(threshold):
    assert DiceGame.validate_threshold(threshold) == threshold


@pytest.mark.parametrize("threshold", [-5, 0, 1, 97, 100, "50", 50.0, True])
def test_invalid_thresholds(threshold):
    with pytest.raises(InvalidThreshold):
        DiceGame.validate_threshold(threshold)


def test_win_pays_truncated_edge_adjusted_odds():
    # 100 * 98.5 / 49 = 201.02...
    assert DiceGame.calculate_payout(50, 10, 100) == 201
    # 10 * 98.5 / 1 = 985
    assert DiceGame.calculate_payout(2, 1, 10) == 985
    # 1 * 98.5 / 95 = 1.03...
    assert DiceGame.calculate_payout(96, 0, 1) == 1


def test_roll_at_or_above_threshold_loses():
    assert DiceGame.calculate_payout(50, 50, 100) == 0
    assert DiceGame.calculate_payout(50, 99, 100) == 0
    assert DiceGame.calculate_payout(2, 2, 10) == 0


def test_zero_stake_pays_zero():
    assert DiceGame.calculate_payout(50, 0, 0) == 0


def test_roll_range():
    generator = OutcomeGenerator(bytes(range(32)))
    for _ in range(50):
        assert 0 <= DiceGame.roll(generator) <= 99
