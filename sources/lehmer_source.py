"""
Lehmer Integer Source.

Responsibility boundaries:
- Lightweight alternative to the default lagged Fibonacci source.
- Multiplicative congruential recurrence x' = 48271 * x mod (2**31 - 1).
"""

from sources.base_source import IntegerSource, MODULUS, reduce_seed


class LehmerSource(IntegerSource):
    """
    MINSTD generator. Outputs lie in [1, 2**31 - 2].
    """

    MULTIPLIER = 48271

    def __init__(self, seed: int = 1) -> None:
        self._state = 1
        self.seed(seed)

    def seed(self, value: int) -> None:
        self._state = reduce_seed(value)

    def next_int31(self) -> int:
        self._state = (self._state * self.MULTIPLIER) % MODULUS
        return self._state
