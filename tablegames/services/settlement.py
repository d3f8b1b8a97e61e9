from typing import Any, Callable, Mapping
import logging

from tablegames.errors import InsufficientBalance
from tablegames.games import DiceGame, RouletteGame, SicBoGame
from tablegames.ledger import AccountLedger
from tablegames.models import SettlementResult
from tablegames.rng import MODE_HMAC, OutcomeGenerator
from tablegames.utils.amounts import checked_add, checked_mul, ensure_amount, ensure_u128

logger = logging.getLogger(__name__)

Wager = Mapping[str, int]


class SettlementEngine:
    """
    Расчёт одной ставки для всех игр.

    1. аккаунт должен существовать;
    2. бросок делается всегда, даже если ставку потом отклонят;
    3. каждая линия проверяется и считается, суммы - проверенной арифметикой;
    4. ставка больше баланса отклоняется до любых изменений;
    5. балансы игрока и казино пишутся одним commit;
    6. возвращается SettlementResult.
    """

    def __init__(self, ledger: AccountLedger, rng_mode: str = MODE_HMAC):
        self.ledger = ledger
        self.rng_mode = rng_mode

    def play_sicbo(self, account_id: str, entropy: bytes, wager: Wager) -> SettlementResult:
        """Сик-бо"""
        return self._settle(
            account_id,
            entropy,
            SicBoGame.NAME,
            SicBoGame.roll,
            lambda bet, stake, dice: checked_mul(SicBoGame.payout_multiplier(bet, dice), stake),
            wager,
        )

    def play_roulette(self, account_id: str, entropy: bytes, wager: Wager) -> SettlementResult:
        """Рулетка"""
        return self._settle(
            account_id,
            entropy,
            RouletteGame.NAME,
            RouletteGame.spin,
            lambda bet, stake, value: checked_mul(RouletteGame.payout_multiplier(bet, value), stake),
            wager,
        )

    def play_dice(self, account_id: str, entropy: bytes, threshold: int, stake: int) -> SettlementResult:
        """Бросок ниже порога"""
        # Порог проверяется раньше всего остального
        DiceGame.validate_threshold(threshold)
        return self._settle(
            account_id,
            entropy,
            DiceGame.NAME,
            DiceGame.roll,
            lambda bet, line_stake, value: ensure_u128(DiceGame.calculate_payout(threshold, value, line_stake)),
            {f"under_{threshold}": stake},
        )

    def _settle(
        self,
        account_id: str,
        entropy: bytes,
        game: str,
        draw: Callable[[OutcomeGenerator], Any],
        line_winnings: Callable[[str, int, Any], int],
        wager: Wager,
    ) -> SettlementResult:
        account = self.ledger.get(account_id)

        outcome = draw(OutcomeGenerator(entropy, self.rng_mode))

        total_stake = 0
        total_winnings = 0
        for bet, stake in wager.items():
            if not isinstance(bet, str):
                raise TypeError(f"Bet kind must be a string, got {bet!r}")
            ensure_amount(stake)
            # Составные ставки рулетки проверяются здесь и отменяют всю ставку
            winnings = line_winnings(bet, stake, outcome)
            total_stake = checked_add(total_stake, stake)
            total_winnings = checked_add(total_winnings, winnings)

        if total_stake > account.balance:
            logger.info(
                f"⛔ Rejected {game}: account={account_id}, stake={total_stake}, balance={account.balance}"
            )
            raise InsufficientBalance(total_stake, account.balance)

        settled = self.ledger.commit_settlement(account, total_stake, total_winnings)

        logger.info(f"✅ {game}: account={account_id}, outcome={outcome}, winnings={total_winnings}")

        return SettlementResult(
            account_id=account_id,
            game=game,
            outcome=outcome,
            total_stake=total_stake,
            total_winnings=total_winnings,
            balance=settled.balance,
        )
