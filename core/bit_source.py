"""
Bit Source.

Responsibility boundaries:
- Supplies single uniform, independent bits to the exponent search.
- Amortizes one 31-bit integer draw across 31 bit requests.

Mutation constraints:
- The buffer is refilled only when empty and cleared only on reseed.
"""

from sources.base_source import IntegerSource


BITS_PER_DRAW = 31


class BitSource:
    """
    Buffered single-bit reader over an IntegerSource.
    """

    def __init__(self, source: IntegerSource) -> None:
        self._source = source
        # Low `bit_count` bits of `bit_buffer` are unconsumed.
        self.bit_buffer = 0
        self.bit_count = 0

    def next_bit(self) -> int:
        """
        Returns the next random bit, least-significant bit of the buffer first.
        """
        if self.bit_count == 0:
            self.bit_buffer = self._source.next_int31()
            self.bit_count = BITS_PER_DRAW

        bit = self.bit_buffer & 1
        self.bit_buffer >>= 1
        self.bit_count -= 1
        return bit

    def reset(self) -> None:
        """Discard any buffered bits."""
        self.bit_buffer = 0
        self.bit_count = 0
