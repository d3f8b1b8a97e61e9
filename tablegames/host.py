from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Protocol, Tuple
import logging
import secrets

logger = logging.getLogger(__name__)

ENTROPY_BYTES = 32


class Host(Protocol):
    """
    Платформа, на которой работает ядро.

    Ядро не знает, кто вызывает, откуда берётся случайность и как уходят
    деньги; всё это приходит через этот протокол.
    """

    def get_caller_identity(self) -> str:
        ...

    def get_entropy(self) -> bytes:
        """Блок энтропии, не меньше 4 байт"""
        ...

    def get_attached_value(self) -> int:
        """Сумма, приложенная к вызову (для депозита)"""
        ...

    def transfer_value(self, to: str, amount: int) -> None:
        """Отправить сумму наружу (для вывода)"""
        ...


@dataclass
class LocalHost:
    """Хост внутри процесса: переводы копятся в списке transfers"""

    caller: str
    attached_value: int = 0
    entropy: bytes = None
    transfers: List[Tuple[str, int]] = field(default_factory=list)

    def get_caller_identity(self) -> str:
        return self.caller

    def get_entropy(self) -> bytes:
        if self.entropy is not None:
            return self.entropy
        return secrets.token_bytes(ENTROPY_BYTES)

    def get_attached_value(self) -> int:
        return self.attached_value

    def transfer_value(self, to: str, amount: int) -> None:
        self.transfers.append((to, amount))
        logger.info(f"📤 Transfer: to={to}, amount={amount}")
