"""
Synchronized Float Generator.

Responsibility boundaries:
- Lets several threads share one stream by serializing every call.
- Independent streams should use separate FloatGenerator instances instead.
"""

import threading

import numpy as np

from core.float_generator import FloatGenerator


class SynchronizedFloatGenerator:
    """
    Lock-guarded facade over a FloatGenerator.
    """

    def __init__(self, generator: FloatGenerator) -> None:
        self._generator = generator
        self._lock = threading.Lock()

    def seed(self, value: int) -> None:
        with self._lock:
            self._generator.seed(value)

    def next_float(self) -> np.float32:
        with self._lock:
            return self._generator.next_float()

    def next_floats(self, n: int) -> np.ndarray:
        # One lock hold keeps the batch contiguous in the stream.
        with self._lock:
            return self._generator.next_floats(n)
