"""
Benchmark Harness.

Responsibility boundaries:
- Times repeated next_float calls for each registered integer source.
- Reports nanoseconds per sample.
"""

import argparse
import logging
import sys
import os
import time
from typing import Dict, List

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from config.config import GeneratorConfig
from core.float_generator import FloatGenerator
from sources.registry import available_sources

logger = logging.getLogger(__name__)


def benchmark_source(source: str, iterations: int) -> float:
    """Returns mean nanoseconds per next_float call."""
    generator = FloatGenerator.from_config(GeneratorConfig(source=source, log_events=False))
    result = None
    start = time.perf_counter_ns()
    for _ in range(iterations):
        result = generator.next_float()
    elapsed = time.perf_counter_ns() - start
    logger.debug("%s: last sample %s", source, result)
    return elapsed / iterations


def run_benchmark(sources: List[str], iterations: int = 200_000) -> Dict[str, float]:
    timings = {source: benchmark_source(source, iterations) for source in sources}

    print("\n" + "=" * 30)
    print(f"next_float x {iterations}")
    print("=" * 30)
    for source, ns in timings.items():
        print(f"  {source:8}: {ns:10.1f} ns/op")
    print("=" * 30)
    return timings


def main() -> None:
    parser = argparse.ArgumentParser(description="Benchmark float generation per integer source.")
    parser.add_argument("--iterations", type=int, default=200_000)
    parser.add_argument("--source", action="append", choices=available_sources(),
                        help="Source to time; repeat for several. Defaults to all.")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO)
    run_benchmark(args.source or available_sources(), args.iterations)


if __name__ == "__main__":
    main()
