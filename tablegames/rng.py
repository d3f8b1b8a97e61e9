"""
Генератор исходов из одного блока энтропии.

Каждый бросок - 32-битное число в little-endian. Отображение в исход
делается взятием остатка (die % 6 + 1, wheel % 37, roll % 100). Это даёт
небольшой перекос распределения; он часть коэффициентов игр и
исправлять его нельзя, не меняя шансов.
"""
import hmac
import hashlib

from tablegames.errors import InsufficientEntropy


MIN_ENTROPY_BYTES = 4
DRAW_BYTES = 4

MODE_HMAC = 'hmac'
MODE_ROTATE = 'rotate'


class OutcomeGenerator:
    """Независимые броски из одного блока энтропии"""

    def __init__(self, entropy: bytes, mode: str = MODE_HMAC):
        if entropy is None or len(entropy) < MIN_ENTROPY_BYTES:
            raise InsufficientEntropy(
                f"Entropy block must be at least {MIN_ENTROPY_BYTES} bytes"
            )
        if mode not in (MODE_HMAC, MODE_ROTATE):
            raise ValueError(f"Unknown RNG mode: {mode}")

        self._entropy = bytes(entropy)
        self._mode = mode
        self._index = 0

    @property
    def draws(self) -> int:
        return self._index

    def next_u32(self) -> int:
        """Следующее 32-битное число"""
        index = self._index
        if self._mode == MODE_HMAC:
            chunk = self._hmac_chunk(index)
        else:
            chunk = self._rotated_chunk(index)
        self._index += 1
        return int.from_bytes(chunk, 'little')

    def _hmac_chunk(self, index: int) -> bytes:
        # Индекс броска - разделитель доменов: у каждого броска свой хеш
        digest = hmac.new(
            self._entropy,
            f"draw:{index}".encode(),
            hashlib.sha256
        ).digest()
        return digest[:DRAW_BYTES]

    def _rotated_chunk(self, index: int) -> bytes:
        offset = index * DRAW_BYTES
        # Смещения не должны перекрываться, иначе броски коррелируют
        if offset + DRAW_BYTES > len(self._entropy):
            raise InsufficientEntropy(
                f"Entropy block of {len(self._entropy)} bytes is too short for draw #{index}"
            )
        rotated = self._entropy[offset:] + self._entropy[:offset]
        return rotated[:DRAW_BYTES]

    def die_face(self) -> int:
        """Грань кубика (1-6)"""
        return self.next_u32() % 6 + 1

    def wheel_index(self) -> int:
        """Ячейка колеса (0-36)"""
        return self.next_u32() % 37

    def percentile(self) -> int:
        """Бросок d100 (0-99)"""
        return self.next_u32() % 100
