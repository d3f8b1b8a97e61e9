from tablegames.host import Host
from tablegames.ledger import AccountLedger
from tablegames.models import Account, SettlementResult
from tablegames.services.settlement import SettlementEngine, Wager


class Casino:
    """Публичные операции, привязанные к хосту вызова"""

    def __init__(self, host: Host, ledger: AccountLedger, engine: SettlementEngine = None):
        self.host = host
        self.ledger = ledger
        self.engine = engine or SettlementEngine(ledger)

    def deposit(self) -> int:
        """Зачислить приложенную к вызову сумму"""
        return self.ledger.deposit(self.host.get_caller_identity(), self.host.get_attached_value())

    def withdraw(self, amount: int) -> int:
        """Вывести средства вызывающему"""
        return self.ledger.withdraw(self.host.get_caller_identity(), amount, self.host.transfer_value)

    def get_account(self, account_id: str) -> Account:
        return self.ledger.get(account_id)

    def play_sicbo(self, wager: Wager) -> SettlementResult:
        return self.engine.play_sicbo(self.host.get_caller_identity(), self.host.get_entropy(), wager)

    def play_roulette(self, wager: Wager) -> SettlementResult:
        return self.engine.play_roulette(self.host.get_caller_identity(), self.host.get_entropy(), wager)

    def play_dice(self, threshold: int, stake: int) -> SettlementResult:
        return self.engine.play_dice(self.host.get_caller_identity(), self.host.get_entropy(), threshold, stake)
