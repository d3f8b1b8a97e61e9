from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Union

from tablegames.rng import OutcomeGenerator


# Коэффициенты ставок на точную сумму (выплата на единицу ставки)
SUM_MULTIPLIERS = {
    4: 62, 5: 31, 6: 18, 7: 12, 8: 8, 9: 7, 10: 6,
    11: 6, 12: 7, 13: 8, 14: 12, 15: 18, 16: 31, 17: 62,
}

DOUBLE_MULTIPLIER = 10
ANY_TRIPLE_MULTIPLIER = 30
SPECIFIC_TRIPLE_MULTIPLIER = 180
COMBINATION_MULTIPLIER = 6
SMALL_BIG_MULTIPLIER = 1

FACES = range(1, 7)


@dataclass(frozen=True)
class SumBandRule:
    """Сумма трёх кубиков в диапазоне [low, high] (small / big)"""
    low: int
    high: int

    def multiplier(self, dice: Sequence[int]) -> int:
        return SMALL_BIG_MULTIPLIER if self.low <= sum(dice) <= self.high else 0


@dataclass(frozen=True)
class DoubleRule:
    """Хотя бы два кубика показывают face"""
    face: int

    def multiplier(self, dice: Sequence[int]) -> int:
        return DOUBLE_MULTIPLIER if list(dice).count(self.face) >= 2 else 0


@dataclass(frozen=True)
class TripleRule:
    """Все три одинаковые; face=None - любой триплет"""
    face: Optional[int] = None

    def multiplier(self, dice: Sequence[int]) -> int:
        if len(set(dice)) != 1:
            return 0
        if self.face is None:
            return ANY_TRIPLE_MULTIPLIER
        return SPECIFIC_TRIPLE_MULTIPLIER if dice[0] == self.face else 0


@dataclass(frozen=True)
class ExactSumRule:
    total: int

    def multiplier(self, dice: Sequence[int]) -> int:
        return SUM_MULTIPLIERS[self.total] if sum(dice) == self.total else 0


@dataclass(frozen=True)
class CombinationRule:
    """Выпали ровно две грани first и second, других нет"""
    first: int
    second: int

    def multiplier(self, dice: Sequence[int]) -> int:
        return COMBINATION_MULTIPLIER if set(dice) == {self.first, self.second} else 0


@dataclass(frozen=True)
class SingleRule:
    """Платит по числу кубиков с гранью face (0-3)"""
    face: int

    def multiplier(self, dice: Sequence[int]) -> int:
        return list(dice).count(self.face)


Rule = Union[SumBandRule, DoubleRule, TripleRule, ExactSumRule, CombinationRule, SingleRule]


def _build_catalog() -> Dict[str, Rule]:
    catalog: Dict[str, Rule] = {
        'small': SumBandRule(4, 10),
        'big': SumBandRule(11, 17),
        'triple_any': TripleRule(),
    }
    for face in FACES:
        catalog[f'double_{face}'] = DoubleRule(face)
        catalog[f'triple_{face}'] = TripleRule(face)
        catalog[f'single_{face}'] = SingleRule(face)
        for other in range(face + 1, 7):
            catalog[f'comb_{face}_{other}'] = CombinationRule(face, other)
    for total in SUM_MULTIPLIERS:
        catalog[f'sum_{total}'] = ExactSumRule(total)
    return catalog


CATALOG: Dict[str, Rule] = _build_catalog()


class SicBoGame:
    """Сик-бо: три кубика"""

    NAME = 'sicbo'
    DICE_COUNT = 3

    @staticmethod
    def roll(generator: OutcomeGenerator) -> List[int]:
        """Бросок трёх кубиков"""
        return [generator.die_face() for _ in range(SicBoGame.DICE_COUNT)]

    @staticmethod
    def payout_multiplier(bet: str, dice: Sequence[int]) -> int:
        """Коэффициент ставки; неизвестная ставка - 0"""
        rule = CATALOG.get(bet)
        if rule is None:
            return 0
        return rule.multiplier(dice)
