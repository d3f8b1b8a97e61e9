import logging

from tablegames.storage.base import LedgerStore
from tablegames.storage.memory import MemoryStore

logger = logging.getLogger(__name__)

__all__ = ['LedgerStore', 'MemoryStore', 'create_store']


def create_store(settings) -> LedgerStore:
    """Создать хранилище по STORAGE_BACKEND"""
    backend = settings.STORAGE_BACKEND

    if backend == 'redis':
        from tablegames.storage.redis_store import RedisStore

        store = RedisStore(settings.REDIS_CONNECTION_URL, house_seed=settings.HOUSE_SEED)
        store.connect()
    elif backend == 'sql':
        from tablegames.database import init_db
        from tablegames.storage.sql_store import SqlStore

        store = SqlStore(init_db(settings.DATABASE_URL), house_seed=settings.HOUSE_SEED)
    elif backend == 'memory':
        store = MemoryStore(house_seed=settings.HOUSE_SEED)
    else:
        raise ValueError(f"Unknown storage backend: {backend}")

    logger.info(f"✅ Storage backend: {backend}")
    return store
