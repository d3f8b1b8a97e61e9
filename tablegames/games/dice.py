from tablegames.errors import InvalidThreshold
from tablegames.rng import OutcomeGenerator


class DiceGame:
    """Бросок d100 ниже порога"""

    NAME = 'dice'

    MIN_THRESHOLD = 1   # исключительно
    MAX_THRESHOLD = 97  # исключительно

    # 98.5 / (threshold - 1) в целых: 197 / (2 * (threshold - 1))
    EDGE_NUMERATOR = 197
    EDGE_DENOMINATOR = 2

    @staticmethod
    def validate_threshold(threshold) -> int:
        """Порог должен быть целым в (1, 97)"""
        if isinstance(threshold, bool) or not isinstance(threshold, int):
            raise InvalidThreshold(threshold)
        if not DiceGame.MIN_THRESHOLD < threshold < DiceGame.MAX_THRESHOLD:
            raise InvalidThreshold(threshold)
        return threshold

    @staticmethod
    def roll(generator: OutcomeGenerator) -> int:
        """Бросок (0-99)"""
        return generator.percentile()

    @staticmethod
    def is_win(threshold: int, value: int) -> bool:
        return value < threshold

    @staticmethod
    def calculate_payout(threshold: int, value: int, stake: int) -> int:
        """Выигрыш stake * 98.5 / (threshold - 1) с отбрасыванием дробной части"""
        if not DiceGame.is_win(threshold, value):
            return 0
        return (stake * DiceGame.EDGE_NUMERATOR) // (DiceGame.EDGE_DENOMINATOR * (threshold - 1))
