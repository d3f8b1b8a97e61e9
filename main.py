import asyncio
import logging
from aiogram import Bot, Dispatcher
from aiogram.enums import ParseMode
from aiogram.client.default import DefaultBotProperties
from aiogram.fsm.storage.memory import MemoryStorage
from aiogram.webhook.aiohttp_server import SimpleRequestHandler, setup_application
from aiohttp import web

from tablegames.config import settings
from tablegames.handlers import games
from tablegames.ledger import AccountLedger
from tablegames.services import SettlementEngine
from tablegames.storage import create_store

# Настройка логирования
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


async def create_bot():
    """Создать экземпляр бота"""
    return Bot(
        token=settings.BOT_TOKEN,
        default=DefaultBotProperties(parse_mode=ParseMode.HTML)
    )


async def create_dispatcher(ledger: AccountLedger):
    """
    Создать диспетчер.

    Леджер синхронный: хендлер держит event loop на время одной операции
    с хранилищем. Так ставки одного процесса выполняются строго по очереди,
    ценой задержки остальных апдейтов на время запроса к Redis или БД.
    """
    storage = MemoryStorage()
    dp = Dispatcher(storage=storage)

    # Леджер и движок попадают в хендлеры как аргументы
    dp["ledger"] = ledger
    dp["engine"] = SettlementEngine(ledger, rng_mode=settings.RNG_MODE)

    dp.include_router(games.router)

    return dp


async def polling_main(ledger: AccountLedger):
    """Запуск бота в режиме polling (для разработки)"""
    bot = await create_bot()
    dp = await create_dispatcher(ledger)

    try:
        logger.info("🎰 Table games запущены в режиме polling")
        logger.info(f"Bot username: @{(await bot.get_me()).username}")
        await dp.start_polling(bot)
    finally:
        await bot.session.close()


async def webhook_main(ledger: AccountLedger):
    """Запуск бота в режиме webhook (для продакшена)"""
    bot = await create_bot()
    dp = await create_dispatcher(ledger)

    webhook_url = f"{settings.WEBHOOK_URL}{settings.WEBHOOK_PATH}"
    await bot.set_webhook(webhook_url)
    logger.info(f"✅ Webhook set to: {webhook_url}")

    app = web.Application()
    webhook_requests_handler = SimpleRequestHandler(
        dispatcher=dp,
        bot=bot,
    )
    webhook_requests_handler.register(app, path=settings.WEBHOOK_PATH)
    setup_application(app, dp, bot=bot)

    logger.info(f"🎰 Table games запущены на порту {settings.PORT}")

    return app


async def main():
    """Главная функция запуска бота"""
    settings.validate()

    try:
        store = create_store(settings)
    except Exception as e:
        logger.error(f"❌ Storage initialization failed: {e}")
        raise

    ledger = AccountLedger(store)

    try:
        if settings.WEBHOOK_URL:
            app = await webhook_main(ledger)
            runner = web.AppRunner(app)
            await runner.setup()
            site = web.TCPSite(runner, '0.0.0.0', settings.PORT)
            await site.start()

            try:
                await asyncio.Future()
            finally:
                await runner.cleanup()
        else:
            await polling_main(ledger)
    finally:
        store.close()
        logger.info("✅ Storage closed")


if __name__ == '__main__':
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("👋 Bot stopped")
