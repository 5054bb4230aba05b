"""
Verification of BitSource buffering.
"""

import sys
import os

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from core.bit_source import BitSource, BITS_PER_DRAW
from sources.lehmer_source import LehmerSource
from scripted_source import ScriptedSource, pack_bits


def test_bits_are_read_lsb_first():
    source = ScriptedSource([0b1011])
    bits = BitSource(source)

    assert [bits.next_bit() for _ in range(4)] == [1, 1, 0, 1]
    assert bits.bit_count == BITS_PER_DRAW - 4
    assert source.position == 1


def test_one_draw_per_31_bits():
    pattern = [1, 0, 0, 1, 1] * 6 + [1]
    source = ScriptedSource([pack_bits(pattern), pack_bits([0, 1])])
    bits = BitSource(source)

    assert [bits.next_bit() for _ in range(31)] == pattern
    assert source.position == 1
    assert bits.bit_count == 0

    # The 32nd bit forces a fresh draw.
    assert bits.next_bit() == 0
    assert source.position == 2
    assert bits.bit_count == 30
    assert bits.next_bit() == 1


def test_bit_count_stays_in_range():
    bits = BitSource(LehmerSource(3))
    for _ in range(500):
        assert bits.next_bit() in (0, 1)
        assert 0 <= bits.bit_count <= 31
        # Only the unconsumed low bits may be set.
        assert bits.bit_buffer < (1 << bits.bit_count) or bits.bit_count == 0


def test_reset_discards_buffer():
    source = ScriptedSource([0b1, 0b10])
    bits = BitSource(source)

    assert bits.next_bit() == 1
    bits.reset()
    assert bits.bit_count == 0
    assert bits.bit_buffer == 0
    assert bits.next_bit() == 0
    assert source.position == 2


if __name__ == "__main__":
    test_bits_are_read_lsb_first()
    test_one_draw_per_31_bits()
    test_bit_count_stays_in_range()
    test_reset_discards_buffer()
    print("BitSource verification SUCCESS")
