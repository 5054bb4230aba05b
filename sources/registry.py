"""
Integer Source Registry.

Responsibility boundaries:
- Maps configuration names onto IntegerSource implementations.
"""

from typing import Dict, List, Type

from sources.base_source import IntegerSource
from sources.lagged_fibonacci_source import LaggedFibonacciSource
from sources.lehmer_source import LehmerSource
from sources.numpy_source import NumpySource
from sources.stdlib_source import StdlibSource


class UnknownSourceError(Exception):
    pass


DEFAULT_SOURCE = "lagged_fibonacci"

_SOURCES: Dict[str, Type[IntegerSource]] = {
    "lagged_fibonacci": LaggedFibonacciSource,
    "lehmer": LehmerSource,
    "numpy": NumpySource,
    "stdlib": StdlibSource,
}


def available_sources() -> List[str]:
    return sorted(_SOURCES)


def get_source_class(name: str) -> Type[IntegerSource]:
    if name not in _SOURCES:
        raise UnknownSourceError(f"Integer source '{name}' is not registered.")
    return _SOURCES[name]


def build_source(name: str, seed: int = 1) -> IntegerSource:
    """
    Instantiate a registered source already seeded with `seed`.
    """
    return get_source_class(name)(seed)
