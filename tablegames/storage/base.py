from __future__ import annotations

from typing import Optional, Protocol

from tablegames.models import Account


class LedgerStore(Protocol):
    """
    Хранилище аккаунтов и баланса казино.

    Реализации обязаны:
    - возвращать копии, а не живые объекты;
    - в commit() записывать аккаунт и баланс казино вместе или никак.
    """

    def load(self, account_id: str) -> Optional[Account]:
        """Вернуть аккаунт или None"""
        ...

    def store(self, account: Account) -> None:
        """Сохранить аккаунт"""
        ...

    def load_house(self) -> int:
        """Баланс казино"""
        ...

    def store_house(self, amount: int) -> None:
        ...

    def commit(self, account: Account, house: int) -> None:
        """Атомарно сохранить аккаунт и баланс казино"""
        ...

    def close(self) -> None:
        """Освободить соединения"""
        ...
