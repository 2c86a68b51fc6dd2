"""Randomness provider for the mock endpoints.

Shuffling and opaque id generation go through a RandomSource so tests can
swap in a seeded instance. Not cryptographically secure; OAuth state tokens
use `secrets` instead.
"""

import random
from typing import List, Optional, Sequence, TypeVar

T = TypeVar("T")


class RandomSource:
    def __init__(self, seed: Optional[int] = None) -> None:
        self._random = random.Random(seed)

    def shuffled(self, items: Sequence[T]) -> List[T]:
        """
        Return a uniformly shuffled copy of `items` (Fisher–Yates).
        """
        result = list(items)
        for i in range(len(result) - 1, 0, -1):
            j = self._random.randint(0, i)
            result[i], result[j] = result[j], result[i]
        return result

    def hex_id(self, n_chars: int = 13) -> str:
        return "".join(self._random.choice("0123456789abcdef") for _ in range(n_chars))


_default_source = RandomSource()


def get_random_source() -> RandomSource:
    """
    Process-wide source used by the API (FastAPI dependency).
    """
    return _default_source
