"""Random source backed by the standard library generator."""
import random
from typing import Optional


class SeededRandomSource:
    """RandomSource implementation wrapping a private ``random.Random`` instance.

    Example:
        ```python
        rng = SeededRandomSource(seed=42)
        value = rng.next()  # 0.0 <= value < 1.0
        ```
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        self._random = random.Random(seed)

    def next(self) -> float:
        return self._random.random()
