"""
Европейская рулетка (0-36).

Простые ставки по имени (red, low, 1st_12 ...) неизвестное имя прощают и
платят 0. Составные ставки ("1|2", "16|17|18" ...) сначала проверяются на
форму поля, и кривая группа отменяет всю ставку целиком.
"""
from dataclasses import dataclass
from typing import Dict, FrozenSet, Tuple

from tablegames.errors import InvalidCompositeBet
from tablegames.rng import OutcomeGenerator


WHEEL_SIZE = 37
MAX_NUMBER = 36
COMPOSITE_DELIMITER = '|'

STRAIGHT_MULTIPLIER = 35

# Цвета заданы явными списками; black не выводится из red
RED_NUMBERS = frozenset([1, 3, 5, 7, 9, 12, 14, 16, 18, 19, 21, 23, 25, 27, 30, 32, 34, 36])
BLACK_NUMBERS = frozenset([2, 4, 6, 8, 10, 11, 13, 15, 17, 20, 22, 24, 26, 28, 29, 31, 33, 35])

# Ряды стола: {1,2,3}, {4,5,6}, ... {34,35,36}
STREETS = tuple(frozenset(range(start, start + 3)) for start in range(1, MAX_NUMBER, 3))

# Угол: n, n+1, n+3, n+4 для n в первой или второй колонке
CORNERS = tuple(
    frozenset([n, n + 1, n + 3, n + 4])
    for n in range(1, MAX_NUMBER - 3)
    if n % 3 != 0
)

SIX_LINES = tuple(STREETS[i] | STREETS[i + 1] for i in range(len(STREETS) - 1))

COLUMNS = tuple(frozenset(range(start, MAX_NUMBER + 1, 3)) for start in (1, 2, 3))


@dataclass(frozen=True)
class OutsideBet:
    """Ставка на фиксированное множество чисел"""
    numbers: FrozenSet[int]
    multiplier: int

    def payout(self, value: int) -> int:
        return self.multiplier if value in self.numbers else 0


OUTSIDE_BETS: Dict[str, OutsideBet] = {
    '1st_12': OutsideBet(frozenset(range(1, 13)), 2),
    '2nd_12': OutsideBet(frozenset(range(13, 25)), 2),
    '3rd_12': OutsideBet(frozenset(range(25, 37)), 2),
    'low': OutsideBet(frozenset(range(1, 19)), 1),
    'high': OutsideBet(frozenset(range(19, 37)), 1),
    'even': OutsideBet(frozenset(range(2, 37, 2)), 1),
    'odd': OutsideBet(frozenset(range(1, 37, 2)), 1),
    'red': OutsideBet(RED_NUMBERS, 1),
    'black': OutsideBet(BLACK_NUMBERS, 1),
}


def _is_split(numbers: FrozenSet[int]) -> bool:
    first, second = sorted(numbers)
    return second - first in (1, 3) or numbers == {0, 2}


@dataclass(frozen=True)
class CompositeCategory:
    name: str
    multiplier: int
    error_code: str

    def is_valid(self, numbers: FrozenSet[int]) -> bool:
        if self.name == 'split':
            return _is_split(numbers)
        return numbers in _GROUPS[self.name]


_GROUPS = {
    'street': STREETS,
    'corner': CORNERS,
    'six_line': SIX_LINES,
    'column': COLUMNS,
}

# Число номеров в группе -> категория
COMPOSITE_CATEGORIES: Dict[int, CompositeCategory] = {
    2: CompositeCategory('split', 17, 'ERR_SPLIT_NOT_VALID'),
    3: CompositeCategory('street', 11, 'ERR_STREET_NOT_VALID'),
    4: CompositeCategory('corner', 8, 'ERR_CORNER_NOT_VALID'),
    6: CompositeCategory('six_line', 5, 'ERR_SIX_LINE_NOT_VALID'),
    12: CompositeCategory('column', 2, 'ERR_COLUMN_BET_NOT_VALID'),
}


def is_composite(bet: str) -> bool:
    return COMPOSITE_DELIMITER in bet


def parse_composite(bet: str) -> FrozenSet[int]:
    """Разобрать "a|b|c" в множество номеров 0-36"""
    members = bet.split(COMPOSITE_DELIMITER)
    numbers = set()
    for member in members:
        if not (member.isascii() and member.isdigit()):
            raise InvalidCompositeBet(bet)
        number = int(member)
        if number > MAX_NUMBER or number in numbers:
            raise InvalidCompositeBet(bet)
        numbers.add(number)
    return frozenset(numbers)


def validate_composite(bet: str) -> Tuple[FrozenSet[int], int]:
    """
    Проверить составную ставку и вернуть (номера, коэффициент).

    Группа с числом номеров вне таблицы категорий не проверяется
    по форме поля и платит 0.
    """
    numbers = parse_composite(bet)
    category = COMPOSITE_CATEGORIES.get(len(numbers))
    if category is None:
        return numbers, 0
    if not category.is_valid(numbers):
        raise InvalidCompositeBet(bet, category.error_code)
    return numbers, category.multiplier


class RouletteGame:
    """Рулетка на 37 ячеек"""

    NAME = 'roulette'

    @staticmethod
    def spin(generator: OutcomeGenerator) -> int:
        """Вращение рулетки"""
        return generator.wheel_index()

    @staticmethod
    def get_color(number: int) -> str:
        """Получить цвет числа"""
        if number in RED_NUMBERS:
            return 'red'
        if number in BLACK_NUMBERS:
            return 'black'
        return 'green'

    @staticmethod
    def payout_multiplier(bet: str, value: int) -> int:
        """Коэффициент ставки при выпавшем номере value"""
        if bet == str(value):
            return STRAIGHT_MULTIPLIER

        if is_composite(bet):
            numbers, multiplier = validate_composite(bet)
            return multiplier if value in numbers else 0

        outside = OUTSIDE_BETS.get(bet)
        if outside is None:
            return 0
        return outside.payout(value)
