"""Fitness-proportionate (roulette wheel) selection."""

from __future__ import annotations

import logging
import math
from typing import Iterator, List, Sequence, Tuple

import numpy as np

from .evaluator import ScoredPopulation
from .genotype import Genotype

logger = logging.getLogger(__name__)


def _normalize_scores(scores: Sequence[float]) -> List[float]:
    """
    Divide every score by the total.

    A zero total falls back to uniform weights; an infinite total spreads the
    weight uniformly over the infinite entries.
    """
    for score in scores:
        if score != score or score < 0:
            raise ValueError(f"Fitness scores must be non-negative numbers, got {score}.")

    total = math.fsum(scores)
    if total > 0 and math.isfinite(total):
        return [score / total for score in scores]

    if math.isinf(total):
        infinite = [1.0 if math.isinf(score) else 0.0 for score in scores]
        logger.warning(
            "Infinite fitness total; selecting uniformly among %d infinite entries",
            int(sum(infinite)),
        )
        return [weight / sum(infinite) for weight in infinite]

    logger.warning("Zero fitness total; selecting uniformly among %d entries", len(scores))
    if scores:
        return [1.0 / len(scores) for _ in scores]
    return []


class CumulativeDistribution:
    """Running sums of normalised fitness in ascending score order."""

    def __init__(self, cumulative: Sequence[float], genotypes: Sequence[Genotype]):
        if len(cumulative) != len(genotypes):
            raise ValueError("Cumulative weights and genotypes must have equal length.")
        self.cumulative: List[float] = [float(c) for c in cumulative]
        self.genotypes: List[Genotype] = list(genotypes)

    @classmethod
    def from_scored(cls, scored: ScoredPopulation) -> "CumulativeDistribution":
        weights = _normalize_scores(scored.scores())
        cumulative = np.cumsum(np.asarray(weights, dtype=np.float64)) if weights else []
        return cls(list(cumulative), scored.genotypes())

    def __len__(self) -> int:
        return len(self.genotypes)

    def __iter__(self) -> Iterator[Tuple[float, Genotype]]:
        return iter(zip(self.cumulative, self.genotypes))

    def sample(self, u: float) -> Genotype:
        """First genotype whose cumulative weight is >= u."""
        if not self.genotypes:
            raise ValueError("Cannot sample from an empty distribution.")
        for weight, genotype in zip(self.cumulative, self.genotypes):
            if weight >= u:
                return genotype
        # rounding can leave the final running sum just below 1.0
        return self.genotypes[-1]


def select(
    scored: ScoredPopulation,
    count: int,
    rng: np.random.Generator,
) -> List[Genotype]:
    """
    Draw `count` genotypes with replacement, proportionally to fitness.

    Args:
        scored: Population scored by fitness
        count: Number of genotypes to draw; must be >= 0
        rng: Generator supplying the uniform draws in [0, 1)

    Returns:
        The selected genotypes in draw order
    """
    if count < 0:
        raise ValueError(f"Selection count must be non-negative, got {count}.")
    if count == 0:
        return []
    if not scored:
        raise ValueError("Cannot select from an empty scored population.")

    distribution = CumulativeDistribution.from_scored(scored)
    return [distribution.sample(float(rng.random())) for _ in range(count)]


__all__ = ["CumulativeDistribution", "select"]
