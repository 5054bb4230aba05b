"""
Distribution Experiment Harness.

Responsibility boundaries:
- Draws a batch of samples from one configured stream.
- Prints observed vs expected binade mass and boundary counts.
"""

import argparse
import logging
import sys
import os
from typing import Any, Dict

import numpy as np

# Ensure we can import core modules
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from analysis.binade_stats import binade_fractions, boundary_counts, expected_binade_fractions
from config.config import GeneratorConfig
from core.float_generator import FloatGenerator
from sources.registry import DEFAULT_SOURCE, available_sources

logger = logging.getLogger(__name__)


def run_experiment(config: GeneratorConfig, num_samples: int = 1_000_000, max_k: int = 12) -> Dict[str, Any]:
    logger.info("Sampling %d values (source=%s, seed=%d)", num_samples, config.source, config.seed)
    generator = FloatGenerator.from_config(config)
    samples = generator.next_floats(num_samples)

    observed = binade_fractions(samples, max_k)
    expected = expected_binade_fractions(max_k)
    bounds = boundary_counts(samples)

    print("\n" + "=" * 44)
    print("Binade Distribution")
    print("=" * 44)
    print(f"{'k':>3}  {'observed':>12}  {'expected':>12}  {'ratio':>8}")
    for k, (obs, exp) in enumerate(zip(observed, expected), start=1):
        print(f"{k:>3}  {obs:>12.6f}  {exp:>12.6f}  {obs / exp:>8.4f}")
    print("-" * 44)
    for name, count in bounds.items():
        print(f"{name:>12}: {count}")
    print(f"{'mean':>12}: {float(samples.mean(dtype=np.float64)):.6f}")
    print("=" * 44)

    return {"observed": observed, "expected": expected, "boundaries": bounds}


def main() -> None:
    parser = argparse.ArgumentParser(description="Check the binade distribution of generated floats.")
    parser.add_argument("--seed", type=int, default=1)
    parser.add_argument("--source", choices=available_sources(), default=DEFAULT_SOURCE)
    parser.add_argument("--samples", type=int, default=1_000_000)
    parser.add_argument("--max-k", type=int, default=12)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)
    run_experiment(GeneratorConfig(seed=args.seed, source=args.source), args.samples, args.max_k)


if __name__ == "__main__":
    main()
