from typing import Dict, Any, List, Union
from dataclasses import dataclass, asdict


Outcome = Union[int, List[int]]


@dataclass
class Account:
    """Модель аккаунта игрока"""
    account_id: str
    balance: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Преобразовать в словарь"""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Account':
        """Создать из словаря"""
        # Redis и SQL отдают баланс строкой: u128 не влезает в int64
        return cls(account_id=str(data['account_id']), balance=int(data['balance']))


@dataclass(frozen=True)
class SettlementResult:
    """Результат одной ставки (не сохраняется)"""
    account_id: str
    game: str
    outcome: Outcome
    total_stake: int
    total_winnings: int
    balance: int

    def to_dict(self) -> Dict[str, Any]:
        """Преобразовать в словарь"""
        return asdict(self)
