from tablegames.games.sicbo import SicBoGame
from tablegames.games.roulette import RouletteGame
from tablegames.games.dice import DiceGame

__all__ = ['SicBoGame', 'RouletteGame', 'DiceGame']
