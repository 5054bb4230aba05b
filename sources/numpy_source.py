"""
NumPy Integer Source.

Responsibility boundaries:
- Draws 31-bit integers from a numpy PCG64 bit generator.
- Seeds are reduced modulo 2**31 - 1 before reaching numpy so that
  congruent seeds share one stream.
"""

import numpy as np

from sources.base_source import IntegerSource, reduce_seed


class NumpySource(IntegerSource):
    """
    Integer source backed by `numpy.random.Generator`.
    """

    def __init__(self, seed: int = 1) -> None:
        self.seed(seed)

    def seed(self, value: int) -> None:
        self._rng = np.random.Generator(np.random.PCG64(reduce_seed(value)))

    def next_int31(self) -> int:
        return int(self._rng.integers(0, 2 ** 31))
