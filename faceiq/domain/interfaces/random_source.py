"""Random number source interface."""
from typing import Protocol, runtime_checkable


@runtime_checkable
class RandomSource(Protocol):
    """Source of uniform floats in [0, 1).

    Injected wherever scoring needs randomness so tests can script the sequence.
    """

    def next(self) -> float:
        ...
