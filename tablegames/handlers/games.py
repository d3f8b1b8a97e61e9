from aiogram import F, Router
from aiogram.filters import Command, CommandObject
from aiogram.types import LabeledPrice, Message, PreCheckoutQuery
import logging
import secrets

from tablegames.config import settings
from tablegames.errors import (
    ArithmeticOverflow,
    HouseUnderflow,
    InsufficientBalance,
    InvalidAmount,
    InvalidCompositeBet,
    InvalidThreshold,
    TableGamesError,
    UnknownAccount,
)
from tablegames.games import RouletteGame
from tablegames.host import ENTROPY_BYTES
from tablegames.ledger import AccountLedger
from tablegames.models import SettlementResult
from tablegames.services import Casino, SettlementEngine
from tablegames.utils.formatters import format_amount, format_outcome
from tablegames.utils.wager_parser import parse_amount, parse_dice_args, parse_wager

logger = logging.getLogger(__name__)

router = Router()

# Пополнение идёт через Telegram Stars: 1 звезда = 1 единица баланса
DEPOSIT_CURRENCY = "XTR"
DEPOSIT_PAYLOAD_PREFIX = "deposit"

COLOR_EMOJI = {'red': '🔴', 'black': '⚫', 'green': '🟢'}


def is_admin(telegram_id: int) -> bool:
    """Проверка прав администратора"""
    return bool(settings.ADMIN_ID) and telegram_id == settings.ADMIN_ID


class TelegramHost:
    """Хост поверх сообщения Telegram"""

    # attached_value ненулевой только для подтверждённого платежа
    def __init__(self, message: Message, attached_value: int = 0):
        self.message = message
        self.attached_value = attached_value

    def get_caller_identity(self) -> str:
        return str(self.message.from_user.id)

    def get_entropy(self) -> bytes:
        return secrets.token_bytes(ENTROPY_BYTES)

    def get_attached_value(self) -> int:
        return self.attached_value

    def transfer_value(self, to: str, amount: int) -> None:
        # Реальная выплата делается оператором по этой записи
        logger.info(f"📤 Payout requested: to={to}, amount={amount}")


def error_text(error: TableGamesError) -> str:
    """Сообщение пользователю по типу ошибки"""
    if isinstance(error, UnknownAccount):
        return "❌ Аккаунт не найден. Сначала сделайте /deposit"
    if isinstance(error, InsufficientBalance):
        return (
            f"📉 Недостаточно средств: нужно {format_amount(error.required)}, "
            f"доступно {format_amount(error.available)}"
        )
    if isinstance(error, InvalidThreshold):
        return "❌ Порог должен быть от 2 до 96"
    if isinstance(error, InvalidCompositeBet):
        return f"❌ Некорректная группа номеров: <code>{error.bet}</code> ({error.code})"
    if isinstance(error, InvalidAmount):
        return "❌ Сумма должна быть целым неотрицательным числом"
    if isinstance(error, HouseUnderflow):
        return "🏦 Казино сейчас не может покрыть такой выигрыш, ставка не принята"
    if isinstance(error, ArithmeticOverflow):
        return "❌ Слишком большая сумма"
    return f"❌ Ошибка: {error.code}"


def result_text(result: SettlementResult) -> str:
    outcome = format_outcome(result.outcome)
    if result.game == RouletteGame.NAME:
        outcome = f"{outcome} {COLOR_EMOJI[RouletteGame.get_color(result.outcome)]}"

    text = f"🎲 Результат: <b>{outcome}</b>\n"
    text += f"💸 Ставка: {format_amount(result.total_stake)}\n"
    text += f"💰 Выигрыш: <b>{format_amount(result.total_winnings)}</b>\n"
    text += f"💵 Баланс: <b>{format_amount(result.balance)}</b>"
    return text


@router.message(Command('deposit'))
async def cmd_deposit(message: Message, command: CommandObject):
    """Счёт на пополнение; баланс меняется только после оплаты"""
    try:
        amount = parse_amount(command.args or '')
    except ValueError:
        await message.answer("❌ Неверный формат! Используйте: <code>/deposit 1000</code>")
        return

    if amount <= 0:
        await message.answer("❌ Сумма пополнения должна быть больше нуля")
        return

    await message.answer_invoice(
        title="💰 Пополнение баланса",
        description=f"{format_amount(amount)} Telegram Stars → {format_amount(amount)} на баланс",
        payload=f"{DEPOSIT_PAYLOAD_PREFIX}_{message.from_user.id}_{amount}",
        provider_token="",  # Для Telegram Stars не нужен provider_token
        currency=DEPOSIT_CURRENCY,
        prices=[LabeledPrice(label="Пополнение", amount=amount)],
    )


def parse_deposit_payload(payload: str):
    """Разбор payload вида deposit_<user>_<amount> в (user, amount) или None"""
    parts = payload.split('_')
    if len(parts) != 3 or parts[0] != DEPOSIT_PAYLOAD_PREFIX:
        return None
    if not (parts[1].isdigit() and parts[2].isdigit()):
        return None
    return parts[1], int(parts[2])


@router.pre_checkout_query()
async def handle_pre_checkout(query: PreCheckoutQuery):
    """Подтверждение платежа перед списанием звёзд"""
    if query.currency != DEPOSIT_CURRENCY or parse_deposit_payload(query.invoice_payload) is None:
        await query.answer(ok=False, error_message="Неверный платёж")
        return
    await query.answer(ok=True)


@router.message(F.successful_payment)
async def handle_successful_payment(message: Message, ledger: AccountLedger):
    """Зачисление оплаченного пополнения"""
    payment = message.successful_payment

    parsed = parse_deposit_payload(payment.invoice_payload)
    if payment.currency != DEPOSIT_CURRENCY or parsed is None:
        await message.answer("❌ Неверный формат платежа")
        return

    user_id, amount = parsed
    if user_id != str(message.from_user.id) or payment.total_amount != amount:
        logger.warning(
            f"⚠️ Payment mismatch: user={message.from_user.id}, payload={payment.invoice_payload}, "
            f"total={payment.total_amount}"
        )
        await message.answer("❌ Неверная сумма платежа")
        return

    try:
        balance = Casino(TelegramHost(message, payment.total_amount), ledger).deposit()
    except TableGamesError as e:
        await message.answer(error_text(e))
        return

    await message.answer(f"✅ Баланс пополнен\n💵 Баланс: <b>{format_amount(balance)}</b>")


@router.message(Command('fund_house'))
async def cmd_fund_house(message: Message, command: CommandObject, ledger: AccountLedger):
    """Пополнить баланс казино (только для админа)"""
    if not is_admin(message.from_user.id):
        await message.answer("🚫 Access denied")
        return

    try:
        amount = parse_amount(command.args or '')
    except ValueError:
        await message.answer("Usage: /fund_house [amount]")
        return

    try:
        house = ledger.fund_house(amount)
    except TableGamesError as e:
        await message.answer(error_text(e))
        return

    await message.answer(f"🏦 Баланс казино: <b>{format_amount(house)}</b>")


@router.message(Command('withdraw'))
async def cmd_withdraw(message: Message, command: CommandObject, ledger: AccountLedger):
    """Вывод средств"""
    try:
        amount = parse_amount(command.args or '')
    except ValueError:
        await message.answer("❌ Неверный формат! Используйте: <code>/withdraw 500</code>")
        return

    try:
        balance = Casino(TelegramHost(message), ledger).withdraw(amount)
    except TableGamesError as e:
        await message.answer(error_text(e))
        return

    await message.answer(f"📤 Выведено {format_amount(amount)}\n💵 Баланс: <b>{format_amount(balance)}</b>")


@router.message(Command('balance'))
async def cmd_balance(message: Message, ledger: AccountLedger):
    """Баланс игрока"""
    try:
        account = Casino(TelegramHost(message), ledger).get_account(str(message.from_user.id))
    except TableGamesError as e:
        await message.answer(error_text(e))
        return

    await message.answer(f"💵 Баланс: <b>{format_amount(account.balance)}</b>")


@router.message(Command('sicbo'))
async def cmd_sicbo(message: Message, command: CommandObject, ledger: AccountLedger, engine: SettlementEngine):
    """Сик-бо: /sicbo big=100 sum_4=10"""
    try:
        wager = parse_wager(command.args)
    except ValueError as e:
        await message.answer(f"❌ {e}\nПример: <code>/sicbo big=100 triple_6=10</code>")
        return

    try:
        result = Casino(TelegramHost(message), ledger, engine).play_sicbo(wager)
    except TableGamesError as e:
        logger.warning(f"⚠️ Sicbo rejected: user={message.from_user.id}, error={e.code}")
        await message.answer(error_text(e))
        return

    await message.answer(result_text(result))


@router.message(Command('roulette'))
async def cmd_roulette(message: Message, command: CommandObject, ledger: AccountLedger, engine: SettlementEngine):
    """Рулетка: /roulette red=100 1|2=50 17=10"""
    try:
        wager = parse_wager(command.args)
    except ValueError as e:
        await message.answer(f"❌ {e}\nПример: <code>/roulette red=100 16|17|18=20</code>")
        return

    try:
        result = Casino(TelegramHost(message), ledger, engine).play_roulette(wager)
    except TableGamesError as e:
        logger.warning(f"⚠️ Roulette rejected: user={message.from_user.id}, error={e.code}")
        await message.answer(error_text(e))
        return

    await message.answer(result_text(result))


@router.message(Command('dice'))
async def cmd_dice(message: Message, command: CommandObject, ledger: AccountLedger, engine: SettlementEngine):
    """Бросок ниже порога: /dice 50 100"""
    try:
        threshold, stake = parse_dice_args(command.args)
    except ValueError as e:
        await message.answer(f"❌ {e}\nПример: <code>/dice 50 100</code>")
        return

    try:
        result = Casino(TelegramHost(message), ledger, engine).play_dice(threshold, stake)
    except TableGamesError as e:
        logger.warning(f"⚠️ Dice rejected: user={message.from_user.id}, error={e.code}")
        await message.answer(error_text(e))
        return

    await message.answer(result_text(result))
