from tablegames.services.settlement import SettlementEngine
from tablegames.services.casino import Casino

__all__ = ['SettlementEngine', 'Casino']
