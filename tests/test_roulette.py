import pytest

from tablegames.errors import InvalidCompositeBet
from tablegames.games.roulette import (
    BLACK_NUMBERS,
    COLUMNS,
    CORNERS,
    RED_NUMBERS,
    SIX_LINES,
    STREETS,
    RouletteGame,
    parse_composite,
)

FIRST_COLUMN = "|".join(str(n) for n in range(1, 35, 3))


def test_straight_bet():
    assert RouletteGame.payout_multiplier("17", 17) == 35
    assert RouletteGame.payout_multiplier("17", 16) == 0
    assert RouletteGame.payout_multiplier("0", 0) == 35
    # сравнение строк, а не чисел
    assert RouletteGame.payout_multiplier("07", 7) == 0


@pytest.mark.parametrize("bet, value, expected", [
    ("1|2", 1, 17),
    ("1|2", 2, 17),
    ("1|2", 3, 0),
    ("2|1", 2, 17),
    ("1|4", 4, 17),
    ("0|2", 0, 17),
    ("0|2", 2, 17),
    ("0|1", 1, 17),
])
def test_valid_splits(bet, value, expected):
    assert RouletteGame.payout_multiplier(bet, value) == expected


@pytest.mark.parametrize("bet", ["1|5", "2|4", "10|20", "1|3"])
def test_invalid_split_is_rejected(bet):
    with pytest.raises(InvalidCompositeBet) as exc_info:
        RouletteGame.payout_multiplier(bet, 1)
    assert exc_info.value.code == "ERR_SPLIT_NOT_VALID"


def test_invalid_split_rejected_even_when_outcome_misses():
    with pytest.raises(InvalidCompositeBet):
        RouletteGame.payout_multiplier("1|5", 30)


def test_street():
    assert RouletteGame.payout_multiplier("16|17|18", 17) == 11
    assert RouletteGame.payout_multiplier("18|16|17", 16) == 11
    assert RouletteGame.payout_multiplier("16|17|18", 19) == 0
    with pytest.raises(InvalidCompositeBet) as exc_info:
        RouletteGame.payout_multiplier("17|18|19", 17)
    assert exc_info.value.code == "ERR_STREET_NOT_VALID"


def test_corner():
    assert RouletteGame.payout_multiplier("1|2|4|5", 5) == 8
    assert RouletteGame.payout_multiplier("32|33|35|36", 36) == 8
    assert RouletteGame.payout_multiplier("1|2|4|5", 3) == 0
    with pytest.raises(InvalidCompositeBet) as exc_info:
        RouletteGame.payout_multiplier("3|4|6|7", 3)
    assert exc_info.value.code == "ERR_CORNER_NOT_VALID"


def test_six_line():
    assert RouletteGame.payout_multiplier("1|2|3|4|5|6", 6) == 5
    assert RouletteGame.payout_multiplier("34|35|36|31|32|33", 31) == 5
    with pytest.raises(InvalidCompositeBet) as exc_info:
        RouletteGame.payout_multiplier("1|2|3|7|8|9", 1)
    assert exc_info.value.code == "ERR_SIX_LINE_NOT_VALID"


def test_column():
    assert RouletteGame.payout_multiplier(FIRST_COLUMN, 34) == 2
    assert RouletteGame.payout_multiplier(FIRST_COLUMN, 2) == 0
    dozen = "|".join(str(n) for n in range(1, 13))
    with pytest.raises(InvalidCompositeBet) as exc_info:
        RouletteGame.payout_multiplier(dozen, 1)
    assert exc_info.value.code == "ERR_COLUMN_BET_NOT_VALID"


@pytest.mark.parametrize("bet", ["1|2|3|4|5", "1|2|3|4|5|6|7"])
def test_undefined_member_count_pays_nothing_without_validation(bet):
    assert RouletteGame.payout_multiplier(bet, 1) == 0


@pytest.mark.parametrize("bet", ["a|b", "1|", "|1", "1|1", "1|37", "-1|0", "1| 2"])
def test_malformed_composite_is_rejected(bet):
    with pytest.raises(InvalidCompositeBet):
        RouletteGame.payout_multiplier(bet, 1)


def test_parse_composite():
    assert parse_composite("3|1|2") == frozenset([1, 2, 3])


@pytest.mark.parametrize("bet, value, expected", [
    ("1st_12", 12, 2),
    ("1st_12", 13, 0),
    ("2nd_12", 13, 2),
    ("2nd_12", 24, 2),
    ("3rd_12", 25, 2),
    ("3rd_12", 36, 2),
    ("low", 18, 1),
    ("low", 19, 0),
    ("high", 19, 1),
    ("even", 36, 1),
    ("even", 35, 0),
    ("odd", 35, 1),
    ("red", 1, 1),
    ("red", 2, 0),
    ("black", 2, 1),
    ("black", 1, 0),
])
def test_outside_bets(bet, value, expected):
    assert RouletteGame.payout_multiplier(bet, value) == expected


@pytest.mark.parametrize("bet", ["1st_12", "low", "high", "even", "odd", "red", "black"])
def test_zero_loses_every_outside_bet(bet):
    assert RouletteGame.payout_multiplier(bet, 0) == 0


@pytest.mark.parametrize("bet", ["green", "37", "street", "RED"])
def test_unknown_bet_pays_nothing(bet):
    assert RouletteGame.payout_multiplier(bet, 7) == 0


def test_colors_are_disjoint_and_cover_the_table():
    assert len(RED_NUMBERS) == 18
    assert len(BLACK_NUMBERS) == 18
    assert not RED_NUMBERS & BLACK_NUMBERS
    assert RED_NUMBERS | BLACK_NUMBERS == set(range(1, 37))
    assert RouletteGame.get_color(0) == "green"
    assert RouletteGame.get_color(19) == "red"


def test_group_tables():
    assert len(STREETS) == 12
    assert len(CORNERS) == 22
    assert len(SIX_LINES) == 11
    assert len(COLUMNS) == 3
    assert all(len(corner) == 4 for corner in CORNERS)
    assert set().union(*COLUMNS) == set(range(1, 37))

