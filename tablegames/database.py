from sqlalchemy import create_engine, String
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker
from sqlalchemy.types import TypeDecorator
import logging

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Базовая модель"""
    pass


class U128(TypeDecorator):
    """
    Беззнаковое 128-битное целое, хранится десятичной строкой.

    BigInteger ограничен int64, а NUMERIC в SQLite теряет точность
    на больших значениях.
    """

    impl = String(39)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return str(int(value))

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return int(value)


def init_db(database_url: str) -> sessionmaker:
    """Инициализация базы данных"""
    # Импорт моделей регистрирует таблицы в Base.metadata
    from tablegames.storage import sql_store  # noqa: F401

    engine = create_engine(database_url, echo=False, pool_pre_ping=True)
    Base.metadata.create_all(engine)

    logger.info("✅ Все таблицы созданы")

    return sessionmaker(engine, expire_on_commit=False)


def close_db(engine: Engine):
    """Закрытие соединений с БД"""
    if engine:
        engine.dispose()
