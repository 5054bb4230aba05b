"""
Verification of the bundled integer sources and the seed congruence contract.
"""

import sys
import os

import numpy as np
import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from core.float_generator import FloatGenerator
from sources.base_source import MODULUS, ZERO_SEED_STATE, reduce_seed
from sources.lagged_fibonacci_source import LaggedFibonacciSource
from sources.lehmer_source import LehmerSource
from sources.registry import UnknownSourceError, available_sources, build_source, get_source_class


def test_minstd_check_value():
    source = LehmerSource(1)
    value = None
    for _ in range(10000):
        value = source.next_int31()
    assert value == 399268537


def test_minstd_first_draws():
    source = LehmerSource()
    assert [source.next_int31() for _ in range(3)] == [48271, 182605794, 1291394886]


def test_lagged_fibonacci_first_draws():
    cases = {
        1: [1298498081, 2019727887, 1427131847],
        42: [801072305, 141734987, 1297281668],
        -7: [173949409, 1649542928, 1628817490],
        0: [2029793274, 526058514, 1408655353],
    }
    for s, expected in cases.items():
        source = LaggedFibonacciSource(s)
        assert [source.next_int31() for _ in range(3)] == expected, f"seed {s}"


def test_lagged_fibonacci_check_value():
    source = LaggedFibonacciSource(1)
    value = None
    for _ in range(10000):
        value = source.next_int31()
    assert value == 1968752735


def test_lagged_fibonacci_wide_outputs():
    source = LaggedFibonacciSource(9)
    for _ in range(1000):
        assert 0 <= source.next_uint64() < 2 ** 64
        assert 0 <= source.next_int63() < 2 ** 63


def test_reduce_seed():
    assert reduce_seed(1) == 1
    assert reduce_seed(MODULUS + 1) == 1
    assert reduce_seed(-1) == MODULUS - 1
    assert reduce_seed(0) == ZERO_SEED_STATE
    assert reduce_seed(MODULUS) == ZERO_SEED_STATE


@pytest.mark.parametrize("name", available_sources())
def test_draws_are_31_bit(name):
    source = build_source(name, 11)
    for _ in range(2000):
        value = source.next_int31()
        assert isinstance(value, int)
        assert 0 <= value <= 2 ** 31 - 1


@pytest.mark.parametrize("name", available_sources())
def test_congruent_seeds_match(name):
    base = 5
    seeds = [base, base + MODULUS, base + 2 * MODULUS, base - MODULUS, base + 7 * MODULUS]

    streams = []
    for s in seeds:
        g = FloatGenerator(build_source(name))
        g.seed(s)
        streams.append(g.next_floats(2000))

    for stream in streams[1:]:
        np.testing.assert_array_equal(stream, streams[0])


@pytest.mark.parametrize("name", available_sources())
def test_zero_seed_is_congruent_with_modulus(name):
    g1 = FloatGenerator(build_source(name, 0))
    g2 = FloatGenerator(build_source(name, MODULUS))
    np.testing.assert_array_equal(g1.next_floats(500), g2.next_floats(500))


@pytest.mark.parametrize("name", available_sources())
def test_distinct_seeds_diverge(name):
    g1 = FloatGenerator(build_source(name, 1))
    g2 = FloatGenerator(build_source(name, 2))
    assert not np.array_equal(g1.next_floats(100), g2.next_floats(100))


@pytest.mark.parametrize("name", available_sources())
def test_constructor_seed_matches_reseed(name):
    direct = build_source(name, 1234)
    reseeded = build_source(name)
    reseeded.seed(1234)
    assert [direct.next_int31() for _ in range(50)] == [reseeded.next_int31() for _ in range(50)]


def test_unknown_source_raises():
    with pytest.raises(UnknownSourceError, match="not registered"):
        get_source_class("mersenne")


if __name__ == "__main__":
    test_minstd_check_value()
    test_minstd_first_draws()
    test_reduce_seed()
    print("Integer source verification SUCCESS")
