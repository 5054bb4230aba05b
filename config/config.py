"""
Generator Configuration.

Responsibility boundaries:
- Holds the seed and integer source selection for a float generator.
- Must be passed to `FloatGenerator.from_config` to build a stream.

Mutation constraints:
- Frozen after initialization so a stream cannot drift from its recorded setup.
"""

from dataclasses import dataclass

from sources.registry import DEFAULT_SOURCE, available_sources


@dataclass(frozen=True)
class GeneratorConfig:
    """
    Immutable container describing one reproducible random stream.
    """
    seed: int = 1
    source: str = DEFAULT_SOURCE
    log_events: bool = True

    def __post_init__(self) -> None:
        if self.source not in available_sources():
            raise ValueError(
                f"Unknown integer source '{self.source}'; expected one of {available_sources()}."
            )
