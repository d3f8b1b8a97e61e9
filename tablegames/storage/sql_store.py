from datetime import datetime
from typing import Optional
import logging

from sqlalchemy import DateTime, Integer, String, select
from sqlalchemy.orm import Mapped, mapped_column, sessionmaker

from tablegames.database import Base, U128, close_db
from tablegames.models import Account

logger = logging.getLogger(__name__)

HOUSE_ROW_ID = 1


class AccountRow(Base):
    __tablename__ = 'accounts'

    account_id: Mapped[str] = mapped_column(String(255), primary_key=True)

    # Баланс в минимальных единицах
    balance: Mapped[int] = mapped_column(U128, nullable=False, default=0)

    # Метаданные
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


class HouseRow(Base):
    __tablename__ = 'house'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    balance: Mapped[int] = mapped_column(U128, nullable=False, default=0)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


class SqlStore:
    """Хранилище аккаунтов в SQL через SQLAlchemy"""

    def __init__(self, session_maker: sessionmaker, house_seed: int = 0):
        self.session_maker = session_maker

        # Баланс казино создаётся один раз
        with self.session_maker.begin() as session:
            if session.get(HouseRow, HOUSE_ROW_ID) is None:
                session.add(HouseRow(id=HOUSE_ROW_ID, balance=house_seed))
                logger.info(f"🏦 House initialized: balance={house_seed}")

    def load(self, account_id: str) -> Optional[Account]:
        with self.session_maker() as session:
            row = session.execute(
                select(AccountRow).where(AccountRow.account_id == account_id)
            ).scalar_one_or_none()
            if row is None:
                return None
            return Account(account_id=row.account_id, balance=row.balance)

    def store(self, account: Account) -> None:
        with self.session_maker.begin() as session:
            self._upsert_account(session, account)

    def load_house(self) -> int:
        with self.session_maker() as session:
            return session.get(HouseRow, HOUSE_ROW_ID).balance

    def store_house(self, amount: int) -> None:
        with self.session_maker.begin() as session:
            session.get(HouseRow, HOUSE_ROW_ID).balance = amount

    def commit(self, account: Account, house: int) -> None:
        """Одна транзакция на аккаунт и казино"""
        with self.session_maker.begin() as session:
            self._upsert_account(session, account)
            session.get(HouseRow, HOUSE_ROW_ID).balance = house

    @staticmethod
    def _upsert_account(session, account: Account):
        row = session.get(AccountRow, account.account_id)
        if row is None:
            session.add(AccountRow(account_id=account.account_id, balance=account.balance))
        else:
            row.balance = account.balance

    def close(self) -> None:
        """Закрыть пул соединений"""
        close_db(self.session_maker.kw.get('bind'))
