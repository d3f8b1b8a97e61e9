from typing import Callable
import logging

from tablegames.errors import HouseUnderflow, InsufficientBalance, UnknownAccount
from tablegames.models import Account
from tablegames.storage.base import LedgerStore
from tablegames.utils.amounts import checked_add, checked_sub, ensure_amount

logger = logging.getLogger(__name__)

Transfer = Callable[[str, int], None]


class AccountLedger:
    """Балансы игроков и казино"""

    def __init__(self, store: LedgerStore):
        self.store = store

    def get(self, account_id: str) -> Account:
        """Получить аккаунт (копию)"""
        account = self.store.load(account_id)
        if account is None:
            raise UnknownAccount(account_id)
        return Account(account_id=account.account_id, balance=account.balance)

    def house_balance(self) -> int:
        """Баланс казино"""
        return self.store.load_house()

    def deposit(self, account_id: str, amount: int) -> int:
        """Зачислить средства; первый депозит создаёт аккаунт"""
        ensure_amount(amount)

        account = self.store.load(account_id)
        if account is None:
            account = Account(account_id=account_id, balance=amount)
        else:
            account = Account(account_id=account_id, balance=checked_add(account.balance, amount))

        self.store.store(account)

        logger.info(f"💰 Deposit: account={account_id}, amount={amount}, new_balance={account.balance}")

        return account.balance

    def withdraw(self, account_id: str, amount: int, transfer: Transfer) -> int:
        """
        Вывести средства.

        Сначала выполняется перевод, потом списание. Упавший перевод баланс
        не трогает. Если после успешного перевода упадёт запись, выплата уже
        ушла: вывод работает по схеме at-least-once.
        """
        ensure_amount(amount)

        account = self.get(account_id)
        if amount > account.balance:
            raise InsufficientBalance(amount, account.balance)

        account.balance -= amount

        transfer(account_id, amount)
        self.store.store(account)

        logger.info(f"💸 Withdraw: account={account_id}, amount={amount}, new_balance={account.balance}")

        return account.balance

    def fund_house(self, amount: int) -> int:
        """Пополнить баланс казино (для оператора)"""
        ensure_amount(amount)

        house = checked_add(self.store.load_house(), amount)
        self.store.store_house(house)

        logger.info(f"🏦 House funded: amount={amount}, new_house={house}")

        return house

    def commit_settlement(self, account: Account, total_stake: int, total_winnings: int) -> Account:
        """
        Единственная точка изменения балансов по ставке.

        new_balance = balance - stake + winnings
        new_house = house + stake - winnings
        Обе суммы считаются до записи; запись одна и атомарная.
        """
        if total_stake > account.balance:
            raise InsufficientBalance(total_stake, account.balance)

        new_balance = checked_add(account.balance - total_stake, total_winnings)

        house = self.store.load_house()
        new_house = checked_sub(checked_add(house, total_stake), total_winnings, HouseUnderflow)

        settled = Account(account_id=account.account_id, balance=new_balance)
        self.store.commit(settled, new_house)

        logger.info(
            f"🎰 Settled: account={account.account_id}, stake={total_stake}, "
            f"winnings={total_winnings}, new_balance={new_balance}, new_house={new_house}"
        )

        return settled
