import pytest

from tablegames.utils.wager_parser import parse_amount, parse_dice_args, parse_wager


def test_parse_wager():
    assert parse_wager("red=100 1|2=50 sum_4=10") == {"red": 100, "1|2": 50, "sum_4": 10}


def test_parse_wager_allows_underscored_amounts():
    assert parse_wager("big=1_000") == {"big": 1000}


@pytest.mark.parametrize("text", ["", "   ", None, "red", "=10", "red=", "red=-5", "red=1.5"])
def test_parse_wager_rejects_bad_lines(text):
    with pytest.raises(ValueError):
        parse_wager(text)


def test_parse_wager_rejects_duplicate_kinds():
    with pytest.raises(ValueError):
        parse_wager("red=10 red=20")


def test_parse_amount():
    assert parse_amount(" 250 ") == 250
    with pytest.raises(ValueError):
        parse_amount("abc")


def test_parse_dice_args():
    assert parse_dice_args("50 100") == (50, 100)
    with pytest.raises(ValueError):
        parse_dice_args("50")
    with pytest.raises(ValueError):
        parse_dice_args(None)
