"""
Integer Source contract.

Responsibility boundaries:
- Supplies uniformly distributed non-negative 31-bit integers.
- Is the ONLY source of entropy the float generator consumes.

Mutation constraints:
- Internal state is mutated only by `seed` and `next_int31`.
- Seed values congruent modulo 2**31 - 1 must yield identical sequences.
"""

from abc import ABC, abstractmethod


# Modulus of the congruence contract, also the MINSTD prime.
MODULUS = 2 ** 31 - 1

# State used when a seed reduces to zero.
ZERO_SEED_STATE = 89482311

INT31_MASK = 0x7FFFFFFF


def reduce_seed(value: int) -> int:
    """
    Map any integer seed onto the range [1, MODULUS - 1].

    Args:
        value: Arbitrary integer seed, negative values included.

    Returns:
        The canonical non-zero residue shared by every congruent seed.
    """
    reduced = value % MODULUS
    if reduced == 0:
        reduced = ZERO_SEED_STATE
    return reduced


class IntegerSource(ABC):
    """
    Abstract seedable generator of 31-bit non-negative integers.
    """

    @abstractmethod
    def seed(self, value: int) -> None:
        """
        Deterministically reinitialize the internal state.

        Args:
            value: Any integer. Congruent seeds produce the same sequence.
        """
        pass

    @abstractmethod
    def next_int31(self) -> int:
        """
        Draw the next integer.

        Returns:
            A uniformly distributed value in [0, 2**31 - 1].
        """
        pass
