"""
Standard Library Integer Source.

Responsibility boundaries:
- Wraps a private `random.Random` instance; never touches the module-level RNG.
- Seeds are reduced modulo 2**31 - 1 before seeding the Mersenne Twister.
"""

import random

from sources.base_source import IntegerSource, reduce_seed


class StdlibSource(IntegerSource):
    """
    Integer source backed by Python's `random.Random`.
    """

    def __init__(self, seed: int = 1) -> None:
        self._rng_instance = random.Random(reduce_seed(seed))

    def seed(self, value: int) -> None:
        self._rng_instance.seed(reduce_seed(value))

    def next_int31(self) -> int:
        return self._rng_instance.getrandbits(31)
