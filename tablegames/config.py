import os
from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Настройки приложения"""

    # Telegram
    BOT_TOKEN: str = os.getenv('BOT_TOKEN', '')
    ADMIN_ID: int = int(os.getenv('ADMIN_ID', 0))

    # Хранилище: memory, redis или sql
    STORAGE_BACKEND: str = os.getenv('STORAGE_BACKEND', 'memory')

    # Redis Database
    REDIS_URL: str = os.getenv('REDIS_URL', '')
    REDIS_HOST: str = os.getenv('REDIS_HOST', 'localhost')
    REDIS_PORT: int = int(os.getenv('REDIS_PORT', 6379))
    REDIS_PASSWORD: str = os.getenv('REDIS_PASSWORD', '')
    REDIS_DB: int = int(os.getenv('REDIS_DB', 0))

    # SQL Database
    DATABASE_URL: str = os.getenv('DATABASE_URL', 'sqlite:///tablegames.db')

    # Game Settings
    RNG_MODE: str = os.getenv('RNG_MODE', 'hmac')
    HOUSE_SEED: int = int(os.getenv('HOUSE_SEED', 0))

    # Webhook Settings
    PORT: int = int(os.getenv('PORT', 8000))
    WEBHOOK_URL: str = os.getenv('WEBHOOK_URL', '')
    WEBHOOK_PATH: str = os.getenv('WEBHOOK_PATH', '/webhook')

    @property
    def REDIS_CONNECTION_URL(self) -> str:
        """Получить URL подключения к Redis"""
        if self.REDIS_URL:
            return self.REDIS_URL

        if self.REDIS_PASSWORD:
            return f"redis://:{self.REDIS_PASSWORD}@{self.REDIS_HOST}:{self.REDIS_PORT}/{self.REDIS_DB}"
        else:
            return f"redis://{self.REDIS_HOST}:{self.REDIS_PORT}/{self.REDIS_DB}"

    def validate(self):
        """Валидация настроек"""
        if not self.BOT_TOKEN:
            raise ValueError("❌ BOT_TOKEN не установлен в .env")
        if not self.ADMIN_ID:
            raise ValueError("❌ ADMIN_ID не установлен в .env")
        if self.STORAGE_BACKEND not in ('memory', 'redis', 'sql'):
            raise ValueError(f"❌ Неизвестный STORAGE_BACKEND: {self.STORAGE_BACKEND}")
        if self.RNG_MODE not in ('hmac', 'rotate'):
            raise ValueError(f"❌ Неизвестный RNG_MODE: {self.RNG_MODE}")
        if self.HOUSE_SEED < 0:
            raise ValueError("❌ HOUSE_SEED не может быть отрицательным")


settings = Settings()
