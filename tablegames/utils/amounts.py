"""
Проверенная арифметика в диапазоне u128.

Целые в Python не переполняются, поэтому границы проверяются явно:
любое значение вне [0, 2**128 - 1] - ошибка, а не тихий перенос.
"""
from tablegames.errors import ArithmeticOverflow, InvalidAmount

U128_MAX = 2 ** 128 - 1


def ensure_amount(amount) -> int:
    """Проверить, что сумма - целое в диапазоне u128"""
    # bool - подкласс int, но суммой не является
    if isinstance(amount, bool) or not isinstance(amount, int) or amount < 0:
        raise InvalidAmount(amount)
    if amount > U128_MAX:
        raise ArithmeticOverflow(f"Amount {amount} exceeds u128")
    return amount


def ensure_u128(value: int) -> int:
    if value > U128_MAX:
        raise ArithmeticOverflow(f"{value} overflows u128")
    return value


def checked_add(a: int, b: int) -> int:
    result = a + b
    if result > U128_MAX:
        raise ArithmeticOverflow(f"{a} + {b} overflows u128")
    return result


def checked_mul(a: int, b: int) -> int:
    result = a * b
    if result > U128_MAX:
        raise ArithmeticOverflow(f"{a} * {b} overflows u128")
    return result


def checked_sub(a: int, b: int, error=ArithmeticOverflow) -> int:
    """Вычитание без ухода в минус; тип ошибки задаёт вызывающий"""
    if b > a:
        raise error(f"{a} - {b} underflows u128")
    return a - b
