"""
Binade Statistics.

Responsibility boundaries:
- Summarizes float32 sample arrays by exponent field.
- Used by the distribution experiment and the statistical tests.
"""

from typing import Dict

import numpy as np

from core.float_generator import HIGH_EXP, LOW_EXP, MANTISSA_BITS, EXPONENT_MASK


def _as_float32(samples) -> np.ndarray:
    arr = np.asarray(samples, dtype=np.float32).ravel()
    if arr.size == 0:
        raise ValueError("At least one sample is required.")
    return arr


def exponent_fields(samples) -> np.ndarray:
    """
    Biased exponent field of each sample.

    Returns:
        uint32 array, same length as `samples`.
    """
    bits = _as_float32(samples).view(np.uint32)
    return (bits >> np.uint32(MANTISSA_BITS)) & np.uint32(EXPONENT_MASK)


def _check_max_k(max_k: int) -> None:
    if not 1 <= max_k <= HIGH_EXP - 1:
        raise ValueError(f"max_k must lie in [1, {HIGH_EXP - 1}], got {max_k}.")


def binade_fractions(samples, max_k: int) -> np.ndarray:
    """
    Fraction of samples falling in [2**-k, 2**-k+1) for k = 1..max_k.

    A value in that range has exponent field HIGH_EXP - k.
    """
    _check_max_k(max_k)
    exps = exponent_fields(samples).astype(np.int64)
    k = HIGH_EXP - exps
    counts = np.bincount(k[(k >= 1) & (k <= max_k)], minlength=max_k + 1)[1:]
    return counts / exps.size


def expected_binade_fractions(max_k: int) -> np.ndarray:
    """Ideal uniform mass of each binade: 2**-k."""
    _check_max_k(max_k)
    return np.ldexp(1.0, -np.arange(1, max_k + 1))


def boundary_counts(samples) -> Dict[str, int]:
    """
    Count boundary and invalid values in a sample set.

    Keys: zero, one, subnormal, nan, out_of_range.
    """
    arr = _as_float32(samples)
    exps = exponent_fields(arr)
    nan_mask = np.isnan(arr)
    return {
        "zero": int(np.count_nonzero(arr == 0.0)),
        "one": int(np.count_nonzero(arr == 1.0)),
        "subnormal": int(np.count_nonzero((exps == LOW_EXP) & (arr != 0.0))),
        "nan": int(np.count_nonzero(nan_mask)),
        "out_of_range": int(np.count_nonzero(~nan_mask & ((arr < 0.0) | (arr > 1.0)))),
    }
