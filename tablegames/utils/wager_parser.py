from typing import Dict, Tuple


def parse_amount(text: str) -> int:
    """Целая неотрицательная сумма из текста команды"""
    text = text.strip().replace('_', '')
    if not text.isdigit():
        raise ValueError(f"Неверная сумма: {text!r}")
    return int(text)


def parse_wager(text: str) -> Dict[str, int]:
    """
    Разобрать "red=100 1|2=50 sum_4=10" в {вид ставки: сумма}.

    Один вид ставки - одна линия, повтор считается ошибкой.
    """
    if not text or not text.strip():
        raise ValueError("Пустая ставка")

    wager: Dict[str, int] = {}
    for token in text.split():
        bet, separator, amount = token.partition('=')
        if not separator or not bet:
            raise ValueError(f"Неверный формат линии: {token!r}")
        if bet in wager:
            raise ValueError(f"Повтор ставки: {bet!r}")
        wager[bet] = parse_amount(amount)
    return wager


def parse_dice_args(text: str) -> Tuple[int, int]:
    """"/dice 50 100" -> (порог, ставка)"""
    parts = (text or '').split()
    if len(parts) != 2:
        raise ValueError("Нужно два числа: порог и ставка")
    return parse_amount(parts[0]), parse_amount(parts[1])
