import pytest

from tablegames.host import LocalHost
from tablegames.ledger import AccountLedger
from tablegames.services import Casino, SettlementEngine
from tablegames.storage import MemoryStore

ENTROPY = bytes(range(32))
HOUSE_FUNDS = 1_000_000


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def ledger(store):
    return AccountLedger(store)


@pytest.fixture
def funded_ledger(ledger):
    """Казино с деньгами и игрок alice с балансом 1000"""
    ledger.fund_house(HOUSE_FUNDS)
    ledger.deposit("alice", 1000)
    return ledger


@pytest.fixture
def engine(funded_ledger):
    return SettlementEngine(funded_ledger)


@pytest.fixture
def host():
    return LocalHost(caller="alice", entropy=ENTROPY)


@pytest.fixture
def casino(host, funded_ledger):
    return Casino(host, funded_ledger)


@pytest.fixture
def snapshot():
    """(баланс игрока, баланс казино)"""
    def take(ledger, account_id="alice"):
        return ledger.get(account_id).balance, ledger.house_balance()
    return take
