"""Search configuration and presets."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Dict, Mapping, Optional


DEFAULT_TARGET = 42.0
DEFAULT_POPULATION_SIZE = 100
DEFAULT_GENOTYPE_LENGTH = 10
DEFAULT_GENERATIONS = 10
ORIGINAL_SELECTION_COUNT = 2


@dataclass(frozen=True)
class SearchConfig:
    """
    Fixed startup constants of a target search.

    `selection_count` defaults to the population size. The source program kept
    only 2 genotypes per generation; `SearchConfig.original()` reproduces that.
    """

    target: float = DEFAULT_TARGET
    population_size: int = DEFAULT_POPULATION_SIZE
    genotype_length: int = DEFAULT_GENOTYPE_LENGTH
    generations: int = DEFAULT_GENERATIONS
    selection_count: Optional[int] = None
    seed: Optional[int] = None

    def __post_init__(self):
        if self.population_size < 1:
            raise ValueError("population_size must be at least 1.")
        if self.genotype_length < 0:
            raise ValueError("genotype_length must be non-negative.")
        if self.generations < 0:
            raise ValueError("generations must be non-negative.")
        if self.selection_count is not None and self.selection_count < 0:
            raise ValueError("selection_count must be non-negative.")
        if self.target != self.target:
            raise ValueError("target must be a number.")
        object.__setattr__(self, "target", float(self.target))

    @property
    def effective_selection_count(self) -> int:
        if self.selection_count is None:
            return self.population_size
        return self.selection_count

    @classmethod
    def original(cls, **overrides: Any) -> "SearchConfig":
        """Preset matching the source program, population collapse included."""
        overrides.setdefault("selection_count", ORIGINAL_SELECTION_COUNT)
        return cls(**overrides)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "SearchConfig":
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown configuration keys: {sorted(unknown)}")
        return cls(**dict(data))

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def with_overrides(self, **overrides: Any) -> "SearchConfig":
        return replace(self, **overrides)


__all__ = [
    "SearchConfig",
    "DEFAULT_TARGET",
    "DEFAULT_POPULATION_SIZE",
    "DEFAULT_GENOTYPE_LENGTH",
    "DEFAULT_GENERATIONS",
    "ORIGINAL_SELECTION_COUNT",
]
