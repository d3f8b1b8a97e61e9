from typing import Dict, Optional

from tablegames.models import Account


class MemoryStore:
    """Хранилище в памяти процесса"""

    def __init__(self, house_seed: int = 0):
        self._accounts: Dict[str, int] = {}
        self._house = house_seed

    def load(self, account_id: str) -> Optional[Account]:
        balance = self._accounts.get(account_id)
        if balance is None:
            return None
        return Account(account_id=account_id, balance=balance)

    def store(self, account: Account) -> None:
        self._accounts[account.account_id] = account.balance

    def load_house(self) -> int:
        return self._house

    def store_house(self, amount: int) -> None:
        self._house = amount

    def commit(self, account: Account, house: int) -> None:
        # Оба значения уже посчитаны и проверены, запись не может упасть
        self._accounts[account.account_id] = account.balance
        self._house = house

    def close(self) -> None:
        pass
