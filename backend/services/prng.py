"""Deterministic number stream seeded from a string.

The stream is a sine-hash generator: cheap, reproducible per seed, and
good enough to give every wallet its own stable mock history. It is not
suitable for anything security related.
"""

import math
from typing import Sequence, TypeVar

T = TypeVar("T")


def _hash_seed(seed: str) -> int:
    """Fold a string into a signed 32-bit integer (h = h * 31 + c, wrapping)."""
    h = 0
    for ch in seed:
        h = (h * 31 + ord(ch)) & 0xFFFFFFFF
    if h & 0x80000000:
        h -= 1 << 32
    return h


class SeededRandom:
    """Restartable float stream in [0, 1) derived from ``seed``.

    Same seed => same sequence. Every helper consumes exactly one draw,
    except ``shuffle`` which consumes one per position swapped.
    """

    def __init__(self, seed: str):
        self.seed = seed
        self._state = float(_hash_seed(seed))

    def reset(self) -> None:
        """Restart the stream from the beginning."""
        self._state = float(_hash_seed(self.seed))

    def random(self) -> float:
        self._state = math.sin(self._state) * 10000
        value = self._state - math.floor(self._state)
        # tiny negative states can round up to exactly 1.0
        return value if value < 1.0 else 0.0

    def randrange(self, start: int, stop: int) -> int:
        """Integer in [start, stop)."""
        return start + math.floor(self.random() * (stop - start))

    def choice(self, seq: Sequence[T]) -> T:
        return seq[math.floor(self.random() * len(seq))]

    def shuffle(self, items: list) -> None:
        """Fisher-Yates shuffle in place using this stream."""
        for i in range(len(items) - 1, 0, -1):
            j = self.randrange(0, i + 1)
            items[i], items[j] = items[j], items[i]

    def __iter__(self):
        return self

    def __next__(self) -> float:
        return self.random()
