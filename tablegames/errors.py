"""
Ошибки ядра.

Каждое условие - отдельный класс со стабильным кодом, чтобы хост мог
отличить их друг от друга, не разбирая текст сообщения.
"""


class TableGamesError(Exception):
    """Базовая ошибка"""

    code = 'ERR_TABLE_GAMES'

    def __init__(self, message: str = None):
        super().__init__(message or self.code)


class UnknownAccount(TableGamesError):
    """Аккаунт не найден"""

    code = 'ERR_UNKNOWN_ACCOUNT'

    def __init__(self, account_id: str):
        self.account_id = account_id
        super().__init__(f"Account {account_id} does not exist")


class InsufficientBalance(TableGamesError):
    """Недостаточно средств"""

    code = 'ERR_INSUFFICIENT_BALANCE'

    def __init__(self, required: int, available: int):
        self.required = required
        self.available = available
        super().__init__(f"Balance {available} is not sufficient for {required}")


class InvalidThreshold(TableGamesError):
    """Порог вне диапазона (1, 97)"""

    code = 'ERR_INVALID_THRESHOLD'

    def __init__(self, threshold):
        self.threshold = threshold
        super().__init__(f"Threshold {threshold!r} is not in the valid range (1, 97)")


class InvalidCompositeBet(TableGamesError):
    """Некорректная составная ставка рулетки"""

    code = 'ERR_COMPOSITE_BET_NOT_VALID'

    def __init__(self, bet: str, code: str = None):
        self.bet = bet
        if code:
            self.code = code
        super().__init__(f"{self.code}: {bet!r}")


class ArithmeticOverflow(TableGamesError):
    """Выход за пределы u128"""

    code = 'ERR_ARITHMETIC_OVERFLOW'


class HouseUnderflow(ArithmeticOverflow):
    """Баланс казино ушёл бы в минус"""

    code = 'ERR_HOUSE_UNDERFLOW'


class InvalidAmount(TableGamesError):
    """Сумма должна быть целым неотрицательным числом"""

    code = 'ERR_INVALID_AMOUNT'

    def __init__(self, amount):
        self.amount = amount
        super().__init__(f"Amount {amount!r} must be a non-negative integer")


class InsufficientEntropy(TableGamesError):
    """Блока энтропии не хватает для броска"""

    code = 'ERR_INSUFFICIENT_ENTROPY'
