import pytest

from tablegames.errors import (
    ArithmeticOverflow,
    HouseUnderflow,
    InsufficientBalance,
    InvalidAmount,
    UnknownAccount,
)
from tablegames.utils.amounts import U128_MAX


def test_first_deposit_creates_account(ledger):
    assert ledger.deposit("bob", 250) == 250
    assert ledger.get("bob").balance == 250


def test_deposit_adds_to_existing_balance(ledger):
    ledger.deposit("bob", 250)
    assert ledger.deposit("bob", 50) == 300


def test_zero_deposit_creates_empty_account(ledger):
    assert ledger.deposit("bob", 0) == 0
    assert ledger.get("bob").balance == 0


@pytest.mark.parametrize("amount", [-1, 1.5, "10", None, True])
def test_deposit_rejects_non_amounts(ledger, amount):
    with pytest.raises(InvalidAmount):
        ledger.deposit("bob", amount)


def test_deposit_overflow(ledger):
    ledger.deposit("bob", U128_MAX)
    with pytest.raises(ArithmeticOverflow):
        ledger.deposit("bob", 1)
    assert ledger.get("bob").balance == U128_MAX


def test_get_unknown_account(ledger):
    with pytest.raises(UnknownAccount) as exc_info:
        ledger.get("nobody")
    assert exc_info.value.account_id == "nobody"


def test_get_returns_a_copy(ledger):
    ledger.deposit("bob", 100)
    account = ledger.get("bob")
    account.balance = 10 ** 9
    assert ledger.get("bob").balance == 100


def test_get_is_idempotent(funded_ledger):
    assert funded_ledger.get("alice") == funded_ledger.get("alice")


def test_withdraw_transfers_then_decrements(ledger):
    transfers = []
    ledger.deposit("bob", 100)
    assert ledger.withdraw("bob", 40, lambda to, amount: transfers.append((to, amount))) == 60
    assert transfers == [("bob", 40)]
    assert ledger.get("bob").balance == 60


def test_withdraw_unknown_account(ledger):
    with pytest.raises(UnknownAccount):
        ledger.withdraw("nobody", 1, lambda to, amount: None)


def test_withdraw_more_than_balance(ledger):
    transfers = []
    ledger.deposit("bob", 100)
    with pytest.raises(InsufficientBalance):
        ledger.withdraw("bob", 101, lambda to, amount: transfers.append(amount))
    assert transfers == []
    assert ledger.get("bob").balance == 100


def test_failed_transfer_keeps_balance(ledger):
    def broken_transfer(to, amount):
        raise ConnectionError("transfer failed")

    ledger.deposit("bob", 100)
    with pytest.raises(ConnectionError):
        ledger.withdraw("bob", 50, broken_transfer)
    assert ledger.get("bob").balance == 100


def test_withdraw_whole_balance(ledger):
    ledger.deposit("bob", 100)
    assert ledger.withdraw("bob", 100, lambda to, amount: None) == 0


def test_fund_house(ledger):
    assert ledger.house_balance() == 0
    assert ledger.fund_house(500) == 500
    assert ledger.fund_house(500) == 1000


def test_commit_settlement_is_zero_sum(funded_ledger, snapshot):
    balance, house = snapshot(funded_ledger)
    account = funded_ledger.get("alice")

    settled = funded_ledger.commit_settlement(account, 300, 1000)

    new_balance, new_house = snapshot(funded_ledger)
    assert settled.balance == new_balance == balance - 300 + 1000
    assert new_house == house + 300 - 1000
    assert (new_balance - balance) + (new_house - house) == 0


def test_commit_settlement_house_underflow(ledger, snapshot):
    ledger.deposit("bob", 100)
    before = snapshot(ledger, "bob")
    with pytest.raises(HouseUnderflow):
        ledger.commit_settlement(ledger.get("bob"), 10, 500)
    assert snapshot(ledger, "bob") == before


def test_commit_settlement_rejects_stake_above_balance(funded_ledger, snapshot):
    before = snapshot(funded_ledger)
    with pytest.raises(InsufficientBalance):
        funded_ledger.commit_settlement(funded_ledger.get("alice"), 1001, 0)
    assert snapshot(funded_ledger) == before
