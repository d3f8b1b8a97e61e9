import logging
from typing import Optional

import redis

from tablegames.models import Account

logger = logging.getLogger(__name__)

HOUSE_KEY = "house:balance"


class RedisStore:
    """Хранилище аккаунтов в Redis"""

    def __init__(self, url: str = None, client: Optional[redis.Redis] = None, house_seed: int = 0):
        self.url = url
        self.client = client
        self.house_seed = house_seed

    def connect(self):
        """Подключение к Redis"""
        if self.client is None:
            self.client = redis.from_url(
                self.url,
                encoding="utf-8",
                decode_responses=True
            )
        try:
            self.client.ping()
        except redis.RedisError as e:
            logger.error(f"❌ Ошибка подключения к Redis: {e}")
            raise

        # Баланс казино создаётся один раз, повторный connect его не трогает
        self.client.set(HOUSE_KEY, str(self.house_seed), nx=True)
        logger.info("✅ Redis подключение установлено")

    def close(self):
        """Отключение от Redis"""
        if self.client:
            self.client.close()
            logger.info("✅ Redis соединение закрыто")

    @staticmethod
    def _account_key(account_id: str) -> str:
        return f"account:{account_id}"

    def load(self, account_id: str) -> Optional[Account]:
        data = self.client.hgetall(self._account_key(account_id))
        if not data:
            return None
        return Account.from_dict(data)

    def store(self, account: Account) -> None:
        # Баланс строкой: u128 не помещается в HINCRBY
        self.client.hset(
            self._account_key(account.account_id),
            mapping={"account_id": account.account_id, "balance": str(account.balance)}
        )

    def load_house(self) -> int:
        value = self.client.get(HOUSE_KEY)
        return int(value) if value else 0

    def store_house(self, amount: int) -> None:
        self.client.set(HOUSE_KEY, str(amount))

    def commit(self, account: Account, house: int) -> None:
        """MULTI/EXEC: аккаунт и казино меняются вместе"""
        pipe = self.client.pipeline(transaction=True)
        pipe.hset(
            self._account_key(account.account_id),
            mapping={"account_id": account.account_id, "balance": str(account.balance)}
        )
        pipe.set(HOUSE_KEY, str(house))
        pipe.execute()
