"""
Float Generator.

Responsibility boundaries:
- Produces float32 values uniformly distributed over the closed interval [0, 1].
- Chooses the exponent field first, then the mantissa field.

The probability of returning a given float is proportional to the distance
between it and its two neighbours. Exponent `HIGH_EXP - 1` is chosen with
probability 1/2, `HIGH_EXP - 2` with 1/4, and so on, matching the width of
each binade. A zero mantissa lies on the boundary shared with the binade
below, so half of those draws are moved up one exponent; this is also the
only route to exactly 1.0.

Reference: A. B. Downey, "Generating Pseudo-random Floating-Point Values", 2007.

Mutation constraints:
- A single instance is not thread-safe; see `core.synchronized`.
"""

from typing import Optional

import numpy as np

from config.config import GeneratorConfig
from core.bit_source import BitSource
from sources.base_source import IntegerSource
from sources.lagged_fibonacci_source import LaggedFibonacciSource
from sources.registry import build_source
from utils.logger import AuditLogger


MANTISSA_BITS = 23
MANTISSA_MASK = (1 << MANTISSA_BITS) - 1
EXPONENT_MASK = 0xFF


def exponent_field(value: float) -> int:
    """Biased exponent field of `value` encoded as float32."""
    bits = int(np.float32(value).view(np.uint32))
    return (bits >> MANTISSA_BITS) & EXPONENT_MASK


LOW_EXP = exponent_field(0.0)
HIGH_EXP = exponent_field(1.0)

DEFAULT_SEED = 1


class FloatGenerator:
    """
    One independent stream of uniform float32 samples.
    """

    def __init__(
        self,
        source: Optional[IntegerSource] = None,
        audit_logger: Optional[AuditLogger] = None,
    ) -> None:
        """
        Args:
            source: Integer source owned by this generator. Defaults to a
                LaggedFibonacciSource seeded with 1.
            audit_logger: Receives creation and reseed events.
        """
        self._source = source if source is not None else LaggedFibonacciSource(DEFAULT_SEED)
        self._bits = BitSource(self._source)
        self._audit = audit_logger or AuditLogger()
        self._audit.log_event("generator_created", {"source": type(self._source).__name__})

    @classmethod
    def from_config(cls, config: GeneratorConfig) -> "FloatGenerator":
        """
        Build a generator whose source is selected and seeded by `config`.
        """
        source = build_source(config.source, config.seed)
        return cls(source, AuditLogger(enabled=config.log_events))

    @property
    def source(self) -> IntegerSource:
        return self._source

    @property
    def bit_source(self) -> BitSource:
        return self._bits

    def seed(self, value: int) -> None:
        """
        Reset the stream to the deterministic state defined by `value`.
        Seeds congruent modulo 2**31 - 1 produce identical streams.
        """
        self._source.seed(value)
        self._bits.reset()
        self._audit.log_event("generator_reseeded", {"seed": value})

    def next_float(self) -> np.float32:
        """
        Returns a random float32 in [0.0, 1.0], including 0.0, subnormals and 1.0.
        """
        # Walk down one binade per 0 bit until a 1 appears.
        exp = HIGH_EXP - 1
        while exp > LOW_EXP:
            if self._bits.next_bit():
                break
            exp -= 1

        mantissa = self._source.next_int31() & MANTISSA_MASK

        if mantissa == 0 and self._bits.next_bit():
            exp += 1

        return np.uint32((exp << MANTISSA_BITS) | mantissa).view(np.float32)

    def next_floats(self, n: int) -> np.ndarray:
        """
        Draw `n` consecutive samples into a float32 array.

        Args:
            n: Number of samples, zero or more.

        Returns:
            Array of shape (n,) and dtype float32.
        """
        if n < 0:
            raise ValueError(f"Sample count must be non-negative, got {n}.")
        out = np.empty(n, dtype=np.float32)
        for i in range(n):
            out[i] = self.next_float()
        return out


def create() -> FloatGenerator:
    """Returns a new generator seeded as if by `seed(g, 1)`."""
    return FloatGenerator()


def seed(g: FloatGenerator, value: int) -> None:
    g.seed(value)


def next_float(g: FloatGenerator) -> np.float32:
    return g.next_float()
